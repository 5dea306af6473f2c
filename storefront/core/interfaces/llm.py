"""
Interfaces for LLM providers

Contract for text generation collaborators (OpenRouter or any other
OpenAI-compatible API).
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class ILLM(Protocol):
    """
    Text generation provider.

    Example:
        ```python
        class EchoLLM:
            model_name = "echo"

            async def generate(self, prompt: str, **kwargs) -> str:
                return prompt
        ```
    """

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Model identifier sent to the provider"""
        ...

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        temperature: float | None = None,
        max_tokens: int = 500,
    ) -> str:
        """
        Generate text for a single user-role prompt.

        Args:
            prompt: Input text for the model
            temperature: Sampling temperature, provider default when None
            max_tokens: Maximum tokens to generate

        Returns:
            Generated text, never empty

        Raises:
            LLMError: If generation fails
        """
        ...


class LLMError(Exception):
    """Base error for LLM providers"""

    pass


class LLMConnectionError(LLMError):
    """Provider could not be reached"""

    pass


class LLMGenerationError(LLMError):
    """Provider answered but produced no usable completion"""

    pass


class LLMRateLimitError(LLMError):
    """Rate limit exceeded"""

    pass
