"""
LLM integrations.
"""

from storefront.integrations.llm.openai_compatible import OpenAICompatibleLLM

__all__ = ["OpenAICompatibleLLM"]
