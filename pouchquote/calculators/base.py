"""
Abstract base class for the digital pouch calculators.

Input: DigitalCalcRequest + DigitalGeneratorConfig
Output: DigitalCalcResult

The base owns everything both bag families share: the zero-quantity guard,
material layer filtering, print mode lookup, warnings, the final total and
the tax/FX quote. Subclasses only say how geometry, revolutions and the
per-run costs are computed.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..formula import evaluator
from ..pricing_engine import PricingEngine
from ..schemas import (
    BagTypeDefinition,
    CostBreakdown,
    DigitalCalcRequest,
    DigitalCalcResult,
    DigitalGeneratorConfig,
    Dimensions,
    EightSideDiagnostics,
    MaterialDetail,
    MaterialLayer,
    ProcessData,
)
from .cost_accumulator import CostAccumulator
from .geometry import GeometryModel
from .rotation import ProductionRotationModel

logger = logging.getLogger(__name__)

# Dimension fields an area formula may reference (area_coefficient is a scale, not a size)
FORMULA_DIMENSIONS = [name for name in Dimensions.model_fields if name != "area_coefficient"]


@dataclass
class PouchJob:
    """Everything one calculation needs, resolved once up front."""
    request: DigitalCalcRequest
    config: DigitalGeneratorConfig
    bag_type: BagTypeDefinition
    valid_layers: List[MaterialLayer]
    square_price_total: float
    lamination_steps: int
    mode_coefficient: float
    double_print: bool
    geometry: GeometryModel
    rotation: ProductionRotationModel
    costs: CostAccumulator
    unit_area: float = 0.0
    warnings: List[str] = field(default_factory=list)


CostResult = Tuple[ProcessData, Dict[str, float], Optional[EightSideDiagnostics]]


class BaseCalculator(ABC):
    """All digital pouch calculators inherit from this."""

    @abstractmethod
    def calculate_costs(self, job: PouchJob) -> CostResult:
        """
        Returns (process_data, cost lines, eight-side diagnostics or None).
        Cost lines hold the seven categories plus file_fee.
        """

    def calculate(self, request: DigitalCalcRequest, config: DigitalGeneratorConfig) -> DigitalCalcResult:
        if request.quantity <= 0:
            logger.debug("Quantity %s for %s: returning zero result", request.quantity, request.bag_type_id)
            return DigitalCalcResult()

        job = self.prepare(request, config)
        process_data, lines, eight_side = self.calculate_costs(job)

        total = job.costs.total(lines, job.bag_type.is_double_bag)
        engine = PricingEngine(
            vat_rate=config.vat_rate if request.tax_rate is None else request.tax_rate,
            exchange_rate=config.exchange_rate if request.exchange_rate is None else request.exchange_rate,
        )
        quote = engine.price(total, request.quantity)

        return DigitalCalcResult(
            process_data=process_data,
            cost_breakdown=CostBreakdown(**lines, total=total, total_with_tax=quote.with_tax.total),
            quote=quote,
            material_details=[MaterialDetail(name=layer.name, sq_price=layer.square_price)
                              for layer in job.valid_layers],
            material_square_price_total=job.square_price_total,
            is_double_bag=job.bag_type.is_double_bag,
            is_eight_side=job.bag_type.is_eight_side,
            eight_side=eight_side,
            warnings=job.warnings,
        )

    # --- Helper methods for all calculators ---

    def prepare(self, request: DigitalCalcRequest, config: DigitalGeneratorConfig) -> PouchJob:
        warnings = []
        bag_type = self.get_bag_type(request.bag_type_id, config, warnings)

        valid_layers = [layer for layer in request.material_layers if layer.is_valid]
        mode = next((m for m in config.print_modes if m.id == request.print_mode_id), None)

        job = PouchJob(
            request=request,
            config=config,
            bag_type=bag_type,
            valid_layers=valid_layers,
            square_price_total=sum(layer.square_price or 0.0 for layer in valid_layers),
            lamination_steps=max(0, len(valid_layers) - 1),
            mode_coefficient=mode.coefficient if mode else 0.0,
            double_print=CostAccumulator.DOUBLE_SIDE_ID in request.selected_special_process_ids,
            geometry=GeometryModel(config.system_constants),
            rotation=ProductionRotationModel(config.system_constants),
            costs=CostAccumulator(config),
            warnings=warnings,
        )
        self.check_dimensions(job)
        job.unit_area = self.unit_area(job)
        return job

    def get_bag_type(self, bag_type_id: str, config: DigitalGeneratorConfig,
                     warnings: List[str]) -> BagTypeDefinition:
        """Configured bag type, or making defaults (0.25 / min 300) for an unknown id."""
        for bag_type in config.bag_types:
            if bag_type.id == bag_type_id:
                return bag_type
        logger.warning("Unknown bag type %r, using default making rates", bag_type_id)
        warnings.append(f"Unknown bag type '{bag_type_id}': default bag-making rates applied.")
        return BagTypeDefinition(id=bag_type_id)

    def check_dimensions(self, job: PouchJob) -> None:
        dims = job.request.dimensions
        for name in job.bag_type.required_dimensions:
            if not getattr(dims, name, 0):
                job.warnings.append(f"Required dimension '{name}' is missing or zero.")

    def unit_area(self, job: PouchJob) -> float:
        """Bag area in m² from the operator's area formula, scaled by area_coefficient."""
        formula = job.bag_type.area_formula
        if not formula:
            return 0.0
        if not evaluator.is_valid(formula):
            logger.warning("Area formula %r for %s is not valid", formula, job.bag_type.id)
            job.warnings.append(f"Area formula for '{job.bag_type.id}' is not valid.")
            return 0.0
        dims = job.request.dimensions
        meters = {name: getattr(dims, name) / 1000 for name in FORMULA_DIMENSIONS}
        return evaluator.evaluate(formula, evaluator.bind(meters)) * dims.area_coefficient
