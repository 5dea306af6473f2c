"""
Core Interfaces

Contracts for outbound collaborators.
"""

from storefront.core.interfaces.llm import (
    ILLM,
    LLMConnectionError,
    LLMError,
    LLMGenerationError,
    LLMRateLimitError,
)

__all__ = [
    "ILLM",
    "LLMConnectionError",
    "LLMError",
    "LLMGenerationError",
    "LLMRateLimitError",
]
