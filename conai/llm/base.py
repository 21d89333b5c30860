"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class LLMResponse:
    """Structured response from a completion provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class InvalidCredentialError(LLMError):
    """The provider rejected the API key."""
    pass


class ProviderError(LLMError):
    """Any other provider or transport failure. Carries the provider's message."""
    pass


class LLMClient(ABC):
    """Abstract base for chat-completion clients."""

    @abstractmethod
    async def complete(self, system: str, user: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
