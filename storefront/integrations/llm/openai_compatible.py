"""
OpenAI-compatible LLM implementation for external APIs.

Defaults to OpenRouter (https://openrouter.ai/api/v1) but works with any
OpenAI-compatible chat completion API.

Features:
- Uses langchain_openai.ChatOpenAI with configurable base_url
- One ChatOpenAI client per (temperature, max_tokens), owned by the instance
- Rate limit handling with LLMRateLimitError
"""

import logging

import httpx
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from storefront.config.settings import Settings
from storefront.core.interfaces.llm import (
    LLMConnectionError,
    LLMError,
    LLMGenerationError,
    LLMRateLimitError,
)

logger = logging.getLogger(__name__)


class OpenAICompatibleLLM:
    """
    OpenAI-compatible LLM implementation.

    Example:
        ```python
        llm = OpenAICompatibleLLM.from_settings(get_settings())
        text = await llm.generate("Translate 'hello' to Arabic")
        ```
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str,
        model: str,
        temperature: float = 0.7,
        timeout: int = 60,
        max_retries: int = 2,
        default_headers: dict[str, str] | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._temperature = temperature
        self._timeout = timeout
        self._max_retries = max_retries
        self._default_headers = default_headers or {}
        # Key: (temperature, max_tokens); credentials and transport are fixed per instance
        self._llm_cache: dict[tuple[float, int], ChatOpenAI] = {}

        logger.info(f"Initialized OpenAICompatibleLLM: base_url={self._base_url}, model={self._model}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAICompatibleLLM":
        return cls(
            api_key=settings.TEXT_GENERATION_API_KEY,
            base_url=settings.TEXT_GENERATION_BASE_URL,
            model=settings.TEXT_GENERATION_MODEL,
            temperature=settings.TEXT_GENERATION_TEMPERATURE,
            timeout=settings.TEXT_GENERATION_TIMEOUT,
            max_retries=settings.TEXT_GENERATION_MAX_RETRIES,
            default_headers={
                "HTTP-Referer": settings.TEXT_GENERATION_REFERER,
                "X-Title": settings.TEXT_GENERATION_APP_TITLE,
            },
        )

    @property
    def model_name(self) -> str:
        return self._model

    def get_llm(self, temperature: float | None = None, max_tokens: int = 500) -> ChatOpenAI:
        """
        Return a cached ChatOpenAI client for the given parameters.

        Raises:
            LLMError: If no API key is configured.
        """
        if not self._api_key:
            raise LLMError("API key required. Set TEXT_GENERATION_API_KEY in the environment.")

        temp = self._temperature if temperature is None else temperature
        cache_key = (temp, max_tokens)
        cached = self._llm_cache.get(cache_key)
        if cached is not None:
            return cached

        llm = ChatOpenAI(
            model=self._model,
            api_key=self._api_key,
            base_url=self._base_url,
            temperature=temp,
            timeout=self._timeout,
            max_retries=self._max_retries,
            max_tokens=max_tokens,
            default_headers=self._default_headers,
        )
        self._llm_cache[cache_key] = llm
        logger.debug(f"Created and cached ChatOpenAI: model={self._model}, temp={temp}")
        return llm

    async def generate(
        self,
        prompt: str,
        *,
        temperature: float | None = None,
        max_tokens: int = 500,
    ) -> str:
        """
        Generate text from a single user-role prompt.

        Raises:
            LLMConnectionError: If the provider cannot be reached.
            LLMRateLimitError: If rate limit is exceeded.
            LLMGenerationError: If generation fails or returns no content.
        """
        llm = self.get_llm(temperature=temperature, max_tokens=max_tokens)
        try:
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling text generation API: {e}")
            raise LLMConnectionError(f"Timeout calling text generation API at {self._base_url}") from e
        except httpx.ConnectError as e:
            logger.error(f"Connection error to text generation API: {e}")
            raise LLMConnectionError(f"Could not connect to {self._base_url}") from e
        except Exception as e:
            error_str = str(e).lower()
            if "rate_limit" in error_str or "rate limit" in error_str or "429" in error_str:
                logger.warning(f"Rate limit exceeded for {self._model}: {e}")
                raise LLMRateLimitError(f"Rate limit exceeded: {e}") from e
            logger.error(f"Error generating text with {self._model}: {e}")
            raise LLMGenerationError(f"Failed to generate text: {e}") from e

        content = response.content if isinstance(response.content, str) else str(response.content)
        content = content.strip()
        if not content:
            raise LLMGenerationError("No choices in response")
        return content
