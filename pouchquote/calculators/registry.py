"""
Calculator registry: maps a bag category to its calculator class.

A request's bag type id is tagged with its category once, at entry. The two
categories return the same result shape, so callers never branch on it.
"""

import logging
from typing import Optional

from ..defaults import DEFAULT_DIGITAL_CONFIG
from ..schemas import EIGHT_SIDE_IDS, DigitalCalcRequest, DigitalCalcResult, DigitalGeneratorConfig
from .base import BaseCalculator
from .eight_side import EightSidePouchCalculator
from .standard_pouch import StandardPouchCalculator

logger = logging.getLogger(__name__)

STANDARD = "standard"
EIGHT_SIDE = "eightSide"

CALCULATOR_REGISTRY: dict[str, type] = {
    STANDARD: StandardPouchCalculator,
    EIGHT_SIDE: EightSidePouchCalculator,
}


def bag_category(bag_type_id: str) -> str:
    """Eight-side ids get the two-panel calculator; everything else is standard."""
    return EIGHT_SIDE if bag_type_id in EIGHT_SIDE_IDS else STANDARD


def get_calculator(bag_type_id: str) -> BaseCalculator:
    """Returns an instance of the calculator for a bag type. Unknown ids are standard."""
    return CALCULATOR_REGISTRY[bag_category(bag_type_id)]()


def list_categories() -> list[str]:
    """List all registered bag categories."""
    return list(CALCULATOR_REGISTRY.keys())


def calculate_digital(request: DigitalCalcRequest,
                      config: Optional[DigitalGeneratorConfig] = None) -> DigitalCalcResult:
    """Full quote for one request. Uses the shipped default config when none is given."""
    if config is None:
        config = DEFAULT_DIGITAL_CONFIG
    logger.debug("Calculating %s (%s) x %s", request.bag_type_id, bag_category(request.bag_type_id), request.quantity)
    return get_calculator(request.bag_type_id).calculate(request, config)
