"""OpenAI Chat Completion Client"""

import openai

from conai.llm.base import LLMClient, LLMResponse, InvalidCredentialError, ProviderError


class OpenAIClient(LLMClient):
    """OpenAI chat-completion client. One request per call, no retries."""

    DEFAULT_MODEL = "gpt-3.5-turbo"

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.model = self.DEFAULT_MODEL

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    async def complete(self, system: str, user: str) -> LLMResponse:
        try:
            async with openai.AsyncOpenAI(api_key=self.api_key, max_retries=0) as client:
                response = await client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": user},
                    ],
                )
        except openai.AuthenticationError:
            raise InvalidCredentialError("Invalid API key.")
        except openai.APIError as e:
            raise ProviderError(e.message)

        if not response.choices:
            raise ProviderError("No completion choices returned")

        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=getattr(response, "model", None) or self.model,
            tokens_used=getattr(usage, "total_tokens", 0) or 0,
        )
