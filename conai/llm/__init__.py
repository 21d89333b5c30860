"""LLM Client Package"""

from conai.llm.base import LLMClient, LLMResponse, LLMError, InvalidCredentialError, ProviderError
from conai.llm.openai_chat import OpenAIClient


def get_client(api_key: str) -> LLMClient:
    """Get the completion client for a stored API key."""
    return OpenAIClient(api_key=api_key)


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "InvalidCredentialError",
    "ProviderError",
    "OpenAIClient",
    "get_client",
]
