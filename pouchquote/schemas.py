"""
Request, configuration and result records for the digital pouch quote.

Every record is a frozen pydantic model: built fresh for each calculation,
never mutated afterwards. Monetary values are CNY unless the field name
says USD.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

# Material name the operator picks for an empty layer slot
NONE_MATERIAL_NAME = "无"

DOUBLE_BAG_IDS = ("threeSideDouble", "standupDouble", "eightSideDouble")
EIGHT_SIDE_IDS = ("eightSideNoZip", "eightSideWithZip", "eightSideDouble", "eightSideSplitBottom")


class FrozenModel(BaseModel):
    class Config:
        frozen = True


# --- Request ---

class Dimensions(FrozenModel):
    """Bag dimensions in millimeters."""
    width: float = 0.0
    height: float = 0.0
    bottom_insert: float = 0.0
    side_expansion: float = 0.0
    back_seal: float = 0.0
    side_gusset: float = 0.0
    seal_edge: float = 0.0
    area_coefficient: float = 1.0


class MaterialLayer(FrozenModel):
    id: str = ""
    layer_type: Literal["print", "composite", "seal"] = "print"
    material_id: str = ""
    square_price: float = 0.0      # CNY per m²
    name: str = ""

    @property
    def is_valid(self) -> bool:
        """A layer counts only when a material is chosen and it isn't the empty slot."""
        return self.material_id != "" and self.name != NONE_MATERIAL_NAME


class DigitalCalcRequest(FrozenModel):
    bag_type_id: str
    dimensions: Dimensions = Field(default_factory=Dimensions)
    quantity: float = 0
    sku_count: int = 1
    tax_rate: Optional[float] = None        # percent; config.vat_rate when unset
    exchange_rate: Optional[float] = None   # CNY per foreign unit; config.exchange_rate when unset
    print_mode_id: str = ""
    selected_special_process_ids: List[str] = Field(default_factory=list)
    zipper_id: str = "none"
    valve_id: str = "none"
    spout_id: Optional[str] = None
    selected_accessory_ids: List[str] = Field(default_factory=list)
    mold_cost: float = 0.0
    plate_cost: float = 0.0
    material_layers: List[MaterialLayer] = Field(default_factory=list)
    is_side_print: bool = False


# --- Configuration ---

class BagTypeDefinition(FrozenModel):
    id: str
    name: str = ""
    making_coefficient: float = 0.25
    making_min_price: float = 300.0
    required_dimensions: List[str] = Field(default_factory=list)
    area_formula: str = ""   # operator formula, e.g. "宽 × 高 × 2"

    @property
    def is_double_bag(self) -> bool:
        return self.id in DOUBLE_BAG_IDS

    @property
    def is_eight_side(self) -> bool:
        return self.id in EIGHT_SIDE_IDS


class PrintMode(FrozenModel):
    id: str
    name: str = ""
    coefficient: float = 0.0   # 0 means "no printing"


class SpecialProcess(FrozenModel):
    id: str
    name: str = ""
    calc_basis: Literal["perQuantity", "perMeter", "printMultiplier"] = "perQuantity"
    unit_price: float = 0.0
    min_price: float = 0.0


class ZipperType(FrozenModel):
    id: str
    name: str = ""
    price_per_meter: float = 0.0


class ValveType(FrozenModel):
    id: str
    name: str = ""
    price_per_unit: float = 0.0


class Accessory(FrozenModel):
    id: str
    name: str = ""
    price: float = 0.0
    # None → inferred from the name (束口条 drawstring, 激光易撕线 laser tear)
    calc_basis: Optional[Literal["perUnit", "drawstring", "laserTear"]] = None


class PrintingTier(FrozenModel):
    max_revolutions: Optional[float] = None   # None = open-ended top tier
    price_per_revolution: float = 0.0


class SystemConstants(FrozenModel):
    max_print_width: float = 740.0           # mm across the web
    max_print_circumference: float = 1100.0  # mm around the cylinder
    sku_waste: float = 30.0                  # loss revolutions per SKU
    adjustment_waste: float = 80.0           # fixed make-ready revolutions
    idle_material_min: float = 20.0          # meters


class DigitalGeneratorConfig(FrozenModel):
    bag_types: List[BagTypeDefinition] = Field(default_factory=list)
    print_modes: List[PrintMode] = Field(default_factory=list)
    special_processes: List[SpecialProcess] = Field(default_factory=list)
    zipper_types: List[ZipperType] = Field(default_factory=list)
    valve_types: List[ValveType] = Field(default_factory=list)
    accessories: List[Accessory] = Field(default_factory=list)
    printing_tiers: List[PrintingTier] = Field(default_factory=list)
    system_constants: SystemConstants = Field(default_factory=SystemConstants)
    lamination_unit_price: float = 200.0    # minimum charge per lamination pass
    lamination_per_meter: float = 0.25
    vat_rate: float = 13.0
    exchange_rate: float = 7.2


# --- Result ---

class ExpandSize(FrozenModel):
    l_exp: float = 0.0
    w_exp: float = 0.0


class Layout(FrozenModel):
    n_row: int = 0
    n_circ: int = 0
    n_rev: int = 0


class Rotation(FrozenModel):
    r_order: float = 0.0
    r_loss: float = 0.0


class Meterage(FrozenModel):
    l_rev: float = 0.0
    m_order: float = 0.0
    m_loss: float = 0.0
    m_idle: float = 0.0
    m_total: float = 0.0


class ProcessData(FrozenModel):
    expand_size: ExpandSize = Field(default_factory=ExpandSize)
    layout: Layout = Field(default_factory=Layout)
    rotation: Rotation = Field(default_factory=Rotation)
    meterage: Meterage = Field(default_factory=Meterage)
    feed_area: float = 0.0
    material_width: float = 760.0
    unit_area: float = 0.0


class CostBreakdown(FrozenModel):
    material: float = 0.0
    lamination: float = 0.0
    print: float = 0.0
    bag_making: float = 0.0
    accessories: float = 0.0
    special_process: float = 0.0
    custom: float = 0.0
    file_fee: float = 0.0
    total: float = 0.0
    total_with_tax: float = 0.0


class PriceTier(FrozenModel):
    unit: float = 0.0
    total: float = 0.0
    unit_usd: float = 0.0
    total_usd: float = 0.0


class Quote(FrozenModel):
    ex_factory: PriceTier = Field(default_factory=PriceTier)
    with_tax: PriceTier = Field(default_factory=PriceTier)


class MaterialDetail(FrozenModel):
    name: str
    sq_price: float


class PanelDiagnostics(FrozenModel):
    l_exp: float
    w_exp: float
    n_circ: int
    n_row: int
    l_rev: float
    r_order: float
    r_loss: float
    m_total: float


class EightSideDiagnostics(FrozenModel):
    bag_body: PanelDiagnostics
    bag_side: PanelDiagnostics
    total_meter: float
    total_order_rev: float
    total_loss_rev: float
    material_width: float
    print_area: float
    bag_body_material_cost: float
    bag_side_material_cost: float
    bag_body_print_cost: float
    bag_side_print_cost: float


class DigitalCalcResult(FrozenModel):
    process_data: ProcessData = Field(default_factory=ProcessData)
    cost_breakdown: CostBreakdown = Field(default_factory=CostBreakdown)
    quote: Quote = Field(default_factory=Quote)
    material_details: List[MaterialDetail] = Field(default_factory=list)
    material_square_price_total: float = 0.0
    is_double_bag: bool = False
    is_eight_side: bool = False
    eight_side: Optional[EightSideDiagnostics] = None
    warnings: List[str] = Field(default_factory=list)


# --- API payloads ---

class CalculateRequest(BaseModel):
    request: DigitalCalcRequest
    config: Optional[DigitalGeneratorConfig] = None


class FormulaCheckRequest(BaseModel):
    formula: str
    values: Dict[str, float] = Field(default_factory=dict)   # {field_name: value}


class FormulaCheckResponse(BaseModel):
    valid: bool
    dimensions: List[str]
    result: float


class SharedQuoteCreate(BaseModel):
    quote_type: Optional[str] = None
    customer_name: Optional[str] = None
    config_data: Optional[Any] = None


class SharedQuote(BaseModel):
    id: str
    quote_type: str
    customer_name: str
    config_data: Any
    created_at: datetime

    class Config:
        from_attributes = True
