from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class LLMResponse:
    content: str
    tokens_used: int = 0
    model: str = ""


class LLMClient(ABC):
    """Abstract base for all LLM providers."""

    @abstractmethod
    async def complete(self, system: str, user: str, max_tokens: int = 2000) -> LLMResponse:
        """Send a single-turn completion request.

        Provider errors must be raised as ServiceCallError.
        """
        ...
