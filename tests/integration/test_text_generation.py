"""
Integration tests for translation and product description generation.

The LLM collaborator is mocked; these tests cover prompt construction and
error reporting.
"""

import pytest

from storefront.core.domain import EntityNotFoundException, IntegrationException
from storefront.core.interfaces import LLMConnectionError
from storefront.domains.ecommerce.application.dto import GenerateDescriptionRequest, TranslateTextRequest


@pytest.mark.integration
class TestTranslateText:
    @pytest.mark.asyncio
    async def test_prompt_names_both_languages(self, container, mock_llm):
        result = await container.create_translate_text_use_case().execute(
            TranslateTextRequest.build(text="Good morning", source_language="English", target_language="Arabic")
        )

        assert result == "Generated text"
        prompt = mock_llm.generate.call_args.args[0]
        assert "from English to Arabic" in prompt
        assert prompt.endswith("Good morning")

    @pytest.mark.asyncio
    async def test_provider_failure_is_upstream_failure(self, container, mock_llm):
        mock_llm.generate.side_effect = LLMConnectionError("Could not connect")

        with pytest.raises(IntegrationException) as exc_info:
            await container.create_translate_text_use_case().execute(
                TranslateTextRequest.build(text="Hi", source_language="English", target_language="French")
            )

        assert exc_info.value.code == "UPSTREAM_FAILURE"
        assert exc_info.value.details == {"service": "text_generation"}

    @pytest.mark.asyncio
    async def test_blank_completion_is_not_returned(self, container, mock_llm):
        mock_llm.generate.return_value = "   "

        with pytest.raises(IntegrationException):
            await container.create_translate_text_use_case().execute(
                TranslateTextRequest.build(text="Hi", source_language="English", target_language="French")
            )


@pytest.mark.integration
class TestGenerateProductDescription:
    @pytest.mark.asyncio
    async def test_prompt_uses_product_category_and_language(self, container, mock_llm, make_category, make_product):
        category = await make_category("Kitchen")
        product = await make_product(name="Espresso Machine", category_id=category.id)

        text = await container.create_generate_product_description_use_case().execute(
            GenerateDescriptionRequest.build(product_id=product.id)
        )

        assert text == "Generated text"
        mock_llm.generate.assert_awaited_once_with(
            "Write a short 3-sentence marketing description for product: "
            "Espresso Machine in category Kitchen in Arabic."
        )

    @pytest.mark.asyncio
    async def test_uncategorized_product_and_explicit_language(self, container, mock_llm, make_product):
        product = await make_product(name="Gift Card")

        await container.create_generate_product_description_use_case().execute(
            GenerateDescriptionRequest.build(product_id=product.id, language="French")
        )

        prompt = mock_llm.generate.call_args.args[0]
        assert "Gift Card in category general in French" in prompt

    @pytest.mark.asyncio
    async def test_inactive_product(self, container, mock_llm, make_product):
        product = await make_product(is_active=False)

        with pytest.raises(EntityNotFoundException):
            await container.create_generate_product_description_use_case().execute(
                GenerateDescriptionRequest.build(product_id=product.id)
            )

        mock_llm.generate.assert_not_awaited()
