import logging

from fastapi import APIRouter

from .. import schemas
from ..calculators.registry import calculate_digital
from ..defaults import DEFAULT_DIGITAL_CONFIG

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/digital", tags=["digital"])


@router.get("/config", response_model=schemas.DigitalGeneratorConfig)
def get_default_config():
    """Shipped operator config; the UI starts from this and edits locally."""
    return DEFAULT_DIGITAL_CONFIG


@router.post("/calculate", response_model=schemas.DigitalCalcResult)
def calculate(payload: schemas.CalculateRequest):
    """
    Price one digital pouch request.

    Never fails on business input: unknown ids, zero quantity or bad formulas
    come back as zero lines plus warnings. Malformed JSON is a 422 from pydantic.
    """
    result = calculate_digital(payload.request, payload.config)
    if result.warnings:
        logger.info("Quote for %s returned warnings: %s", payload.request.bag_type_id, result.warnings)
    return result
