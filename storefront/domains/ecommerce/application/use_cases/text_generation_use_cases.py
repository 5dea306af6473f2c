"""
Text Generation Use Cases

Thin wrappers over the LLM collaborator. Every provider failure is reported as
an IntegrationException so callers never receive an empty string.
"""

import logging

from storefront.core.domain import IntegrationException
from storefront.core.interfaces.llm import ILLM, LLMError
from storefront.database import Database
from storefront.domains.ecommerce.application.dto import GenerateDescriptionRequest, TranslateTextRequest
from storefront.domains.ecommerce.application.use_cases.catalog_use_cases import GetProductUseCase

logger = logging.getLogger(__name__)

TRANSLATION_PROMPT = (
    "Translate the following text from {source} to {target}. "
    "Reply with the translation only.\n\n{text}"
)
DESCRIPTION_PROMPT = "Write a short 3-sentence marketing description for product: {name} in category {category} in {language}."


async def _generate(llm: ILLM, prompt: str, operation: str) -> str:
    try:
        text = await llm.generate(prompt)
    except LLMError as e:
        logger.error(f"{operation} failed: {e}")
        raise IntegrationException("text_generation", f"{operation} failed: {e}", e) from e
    if not text or not text.strip():
        raise IntegrationException("text_generation", f"{operation} failed: empty response")
    return text.strip()


class TranslateTextUseCase:
    def __init__(self, llm: ILLM):
        self.llm = llm

    async def execute(self, request: TranslateTextRequest) -> str:
        prompt = TRANSLATION_PROMPT.format(
            source=request.source_language,
            target=request.target_language,
            text=request.text,
        )
        return await _generate(self.llm, prompt, "translation")


class GenerateProductDescriptionUseCase:
    """Use Case: marketing copy for an active product, in the requested language."""

    def __init__(self, database: Database, llm: ILLM):
        self.get_product = GetProductUseCase(database)
        self.llm = llm

    async def execute(self, request: GenerateDescriptionRequest) -> str:
        product = await self.get_product.execute(request.product_id)
        category = product.category.name if product.category else "general"
        prompt = DESCRIPTION_PROMPT.format(name=product.name, category=category, language=request.language)
        return await _generate(self.llm, prompt, "description generation")
