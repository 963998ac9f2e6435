from fastapi import APIRouter

from .. import schemas
from ..formula import evaluator

router = APIRouter(prefix="/formulas", tags=["formulas"])


@router.post("/check", response_model=schemas.FormulaCheckResponse)
def check_formula(payload: schemas.FormulaCheckRequest):
    """Validate an operator formula and evaluate it against sample dimension values."""
    valid = evaluator.is_valid(payload.formula)
    result = evaluator.evaluate(payload.formula, evaluator.bind(payload.values)) if valid else 0.0
    return schemas.FormulaCheckResponse(
        valid=valid,
        dimensions=evaluator.dimensions(payload.formula),
        result=result,
    )
