"""Nutrient table generation using LLMs."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

from nutrient_resolver.domain.nutrients import NUTRIENT_FIELDS, ServingBasis

_logger = logging.getLogger(__name__)


class TextGenerationClient(Protocol):
    """Interface for a single prompt-to-text LLM call."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
        store: bool,
    ) -> str:
        """Return the model's text reply."""


@dataclass
class GenerativeNutrientClient:
    """Asks an LLM for the standard nutrient table of a food."""

    client: TextGenerationClient
    model: str
    temperature: float = 0.3
    max_output_tokens: int = 4096
    store: bool = False

    async def generate(self, food_name: str) -> str | None:
        """Return raw model text for a food, or None when the call fails."""
        try:
            text = await self.client.generate(
                model=self.model,
                prompt=build_nutrient_prompt(food_name),
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
                store=self.store,
            )
        except Exception as exc:
            if _is_quota_error(exc):
                _logger.error(
                    "Nutrient generation quota exceeded: food=%s status=%s",
                    food_name,
                    _status_code_from_exception(exc),
                )
            else:
                _logger.exception("Nutrient generation failed: food=%s", food_name)
            return None
        if not text or not text.strip():
            _logger.warning("Nutrient generation returned no text: food=%s", food_name)
            return None
        return text


def build_nutrient_prompt(food_name: str) -> str:
    """Build the prompt requesting a JSON-only nutrient table."""
    zero_profile = dict.fromkeys(NUTRIENT_FIELDS, 0)
    skeleton: dict[str, object] = {"foodItem": food_name}
    skeleton.update({basis.value: zero_profile for basis in ServingBasis})
    return (
        f'Extract nutrient information for "{food_name}" '
        "(Indian/South Indian food focus).\n\n"
        "Return ONLY a JSON object with this exact structure:\n\n"
        f"{json.dumps(skeleton, indent=2)}\n\n"
        "IMPORTANT:\n"
        "- Return ONLY the JSON object\n"
        "- No explanations, descriptions, or additional text\n"
        "- All values must be numbers (no units)\n"
        "- If data is unavailable for a unit, use 0 "
        '(for example "ml" for a solid food)\n'
        "- Focus on common Indian/South Indian foods\n"
        "- Use standard nutritional values per 100g/ml/piece/pack"
    )


def _is_quota_error(exc: Exception) -> bool:
    """Return True for rate-limit or quota failures."""
    return _status_code_from_exception(exc) == "429" or "quota" in str(exc).lower()


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    status_code = getattr(exc, "status_code", None)
    if status_code is None:
        response = getattr(exc, "response", None)
        status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
