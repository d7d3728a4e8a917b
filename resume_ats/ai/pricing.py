from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelPricing:
    """USD per one million tokens."""

    input: float
    output: float


DEFAULT_PRICING_MODEL = "gpt-4o-mini"

PRICING: dict[str, ModelPricing] = {
    "gpt-4o-mini": ModelPricing(input=0.15, output=0.60),
    "gpt-4o": ModelPricing(input=2.50, output=10.00),
    "gpt-4-turbo": ModelPricing(input=10.00, output=30.00),
    "gpt-4": ModelPricing(input=30.00, output=60.00),
    "gpt-3.5-turbo": ModelPricing(input=0.50, output=1.50),
}


def get_model_pricing(model: str) -> ModelPricing | None:
    normalized = (model or "").strip().lower()
    if not normalized:
        return None
    pricing = PRICING.get(normalized)
    if pricing is not None:
        return pricing
    # Dated snapshots such as gpt-4o-mini-2024-07-18 resolve by containment, in table order.
    for key, value in PRICING.items():
        if key in normalized or normalized in key:
            return value
    return None


def calculate_cost(model: str, prompt_tokens: int, completion_tokens: int) -> float:
    pricing = get_model_pricing(model)
    if pricing is None:
        logger.warning("ai_pricing_unknown_model model=%s fallback=%s", model, DEFAULT_PRICING_MODEL)
        pricing = PRICING[DEFAULT_PRICING_MODEL]
    input_cost = (max(0, prompt_tokens) / 1_000_000) * pricing.input
    output_cost = (max(0, completion_tokens) / 1_000_000) * pricing.output
    return input_cost + output_cost
