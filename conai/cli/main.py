"""CLI Main Entry Point"""

import asyncio
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

import argcomplete

from conai.config import ConfigStore, ConfigError
from conai.llm import get_client, LLMClient, LLMResponse, InvalidCredentialError, ProviderError
from conai.prompts import PromptBuilder
from conai.output import bold, brand, dim, print_error, print_success, Spinner, SPARKLES

from conai.cli.args import build_parser, parse_args

NAME = brand('conai')

BANNER = f"""{SPARKLES} {NAME} - conventionalize your commit messages with AI

Usage:
\tconai -k <key>      Sets your OpenAI API key
\tconai -m <message>  Conventionalizes your commit message
"""

INVALID_API_KEY = (
    f"Uh oh! Looks like your {bold('OpenAI API key')} is invalid. "
    f"Try setting it using {bold('conai -k <key>')}!"
)

PROGRESS_TEXT = "Working on it..."


class Status(Enum):
    """Result of one invocation, mapped to the process exit code."""
    HELP = "help"
    IDLE = "idle"
    OK = "ok"
    MISSING_KEY = "missing_key"
    INVALID_KEY = "invalid_key"
    PROVIDER_ERROR = "provider_error"

    @property
    def exit_code(self) -> int:
        return 0 if self in (Status.HELP, Status.IDLE, Status.OK) else 1


@dataclass
class TransformResult:
    """Outcome of the completion call: corrected text or a failure detail."""
    status: Status
    text: str = ""
    response: Optional[LLMResponse] = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


async def conventionalize(client: LLMClient, message: str) -> TransformResult:
    """Send the message to the provider once and classify the outcome."""
    prompt = PromptBuilder().build(message)
    try:
        response = await client.complete(prompt.system, prompt.user)
    except InvalidCredentialError:
        return TransformResult(Status.INVALID_KEY)
    except ProviderError as e:
        return TransformResult(Status.PROVIDER_ERROR, str(e))
    return TransformResult(Status.OK, response.content, response)


def render(result: TransformResult) -> str:
    """Text shown to the user for a transform outcome."""
    if result.status is Status.OK:
        return result.text
    if result.status is Status.INVALID_KEY:
        return INVALID_API_KEY
    return f"OpenAI error: {result.text}"


def _show_help(parser) -> Status:
    print(BANNER)
    parser.print_help()
    return Status.HELP


def _save_key(store: ConfigStore, key: str) -> None:
    store.set_key(key)
    print_success(f"Your {bold('OpenAI API key')} has been updated!")


def _print_verbose_stats(client: LLMClient, result: TransformResult) -> None:
    """Print provider, model and token usage to stderr so piped output stays clean."""
    print(dim(f"  Provider: {client.name}"), file=sys.stderr)
    if result.response is not None:
        print(dim(f"  Model: {result.response.model}"), file=sys.stderr)
        print(dim(f"  Tokens: {result.response.tokens_used}"), file=sys.stderr)


def _run_transform(
    store: ConfigStore,
    message: str,
    client_factory: Callable[[str], LLMClient],
    verbose: bool = False,
) -> Status:
    """Load the key, call the provider, and print the outcome."""
    try:
        api_key = store.load_key()
    except ConfigError:
        print_error(INVALID_API_KEY)
        return Status.MISSING_KEY

    client = client_factory(api_key)

    with Spinner(PROGRESS_TEXT) as spinner:
        result = asyncio.run(conventionalize(client, message))
        if result.ok:
            spinner.succeed(render(result))
        else:
            spinner.fail(render(result))

    if verbose:
        _print_verbose_stats(client, result)
    return result.status


def main(
    argv: list[str] | None = None,
    store: ConfigStore | None = None,
    client_factory: Callable[[str], LLMClient] | None = None,
) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    # Shell completion invokes us with no argv, so hook in before the help branch
    argcomplete.autocomplete(parser)

    if len(argv) < 2:
        return _show_help(parser).exit_code

    args = parse_args(argv, parser)
    store = store or ConfigStore()
    client_factory = client_factory or get_client

    # Saving a key does not end the run; -m in the same call still proceeds
    if args.key:
        _save_key(store, args.key)

    if args.message:
        return _run_transform(store, args.message, client_factory, args.verbose).exit_code

    return (Status.OK if args.key else Status.IDLE).exit_code


def run() -> None:
    sys.exit(main())
