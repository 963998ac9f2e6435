"""
Default operator configuration for digital pouch quotes.

These are starting values; operators send their own config with each
calculation when their rates differ.
"""

from .config import settings
from .schemas import (
    Accessory,
    BagTypeDefinition,
    DigitalGeneratorConfig,
    PrintingTier,
    PrintMode,
    SpecialProcess,
    SystemConstants,
    ValveType,
    ZipperType,
)

BAG_TYPES = [
    BagTypeDefinition(id="threeSide", name="三边封", required_dimensions=["width", "height"],
                      area_formula="宽 × 高 × 2"),
    BagTypeDefinition(id="threeSideDouble", name="三边封(双拼)", required_dimensions=["width", "height"],
                      area_formula="宽 × 高 × 2"),
    BagTypeDefinition(id="standupNoZip", name="自立袋", required_dimensions=["width", "height", "bottom_insert"],
                      area_formula="宽 × (高 + 底插入) × 2"),
    BagTypeDefinition(id="standupWithZip", name="自立拉链袋", making_coefficient=0.3,
                      required_dimensions=["width", "height", "bottom_insert"],
                      area_formula="宽 × (高 + 底插入) × 2"),
    BagTypeDefinition(id="standupSplitBottom", name="自立袋(分底)", making_coefficient=0.3,
                      required_dimensions=["width", "height", "bottom_insert"],
                      area_formula="宽 × (高 + 底插入) × 2"),
    BagTypeDefinition(id="standupDouble", name="自立袋(双拼)", required_dimensions=["width", "height", "bottom_insert"],
                      area_formula="宽 × (高 + 底插入) × 2"),
    BagTypeDefinition(id="centerSeal", name="中封袋", required_dimensions=["width", "height", "back_seal"],
                      area_formula="(宽 + 背封边) × 2 × 高"),
    BagTypeDefinition(id="sideSeal", name="边封袋", required_dimensions=["width", "height", "back_seal"],
                      area_formula="(宽 + 背封边) × 2 × 高"),
    BagTypeDefinition(id="gusset", name="风琴袋", making_coefficient=0.3,
                      required_dimensions=["width", "height", "side_expansion", "back_seal"],
                      area_formula="(宽 + 侧面展开 + 背封边) × 2 × 高"),
    BagTypeDefinition(id="eightSideNoZip", name="八边封", making_coefficient=0.4, making_min_price=500,
                      required_dimensions=["width", "height", "bottom_insert"],
                      area_formula="{ (高 + 底插入)×2 + 0.03 } × (宽 + 0.005)"),
    BagTypeDefinition(id="eightSideWithZip", name="八边封拉链袋", making_coefficient=0.45, making_min_price=500,
                      required_dimensions=["width", "height", "bottom_insert"],
                      area_formula="{ (高 + 底插入)×2 + 0.03 } × (宽 + 0.005)"),
    BagTypeDefinition(id="eightSideDouble", name="八边封(双拼)", making_coefficient=0.4, making_min_price=500,
                      required_dimensions=["width", "height", "bottom_insert"],
                      area_formula="{ (高 + 底插入)×2 + 0.03 } × (宽 + 0.005)"),
    BagTypeDefinition(id="eightSideSplitBottom", name="八边封(分底)", making_coefficient=0.45, making_min_price=500,
                      required_dimensions=["width", "height", "bottom_insert", "side_gusset"],
                      area_formula="{ (高 + 底插入)×2 + 0.03 } × (宽 + 0.005)"),
]

PRINT_MODES = [
    PrintMode(id="none", name="无印刷", coefficient=0),
    PrintMode(id="cmyk", name="四色", coefficient=1.0),
    PrintMode(id="cmykWhite", name="四色+白墨", coefficient=1.2),
    PrintMode(id="cmykWhiteSpot", name="四色+白墨+专色", coefficient=1.4),
]

SPECIAL_PROCESSES = [
    SpecialProcess(id="doubleSide", name="双面印刷", calc_basis="perQuantity", unit_price=0),
    SpecialProcess(id="shapedBag", name="异形袋", calc_basis="perQuantity", unit_price=0),
    SpecialProcess(id="matteVarnish", name="哑油", calc_basis="perMeter", unit_price=0.3, min_price=150),
    SpecialProcess(id="spotUv", name="局部UV", calc_basis="printMultiplier", unit_price=0.2, min_price=200),
    SpecialProcess(id="hangHole", name="挂孔", calc_basis="perQuantity", unit_price=0.01, min_price=50),
    SpecialProcess(id="tearNotch", name="易撕口", calc_basis="perQuantity", unit_price=0.005),
]

ZIPPER_TYPES = [
    ZipperType(id="standard", name="普通拉链", price_per_meter=0.15),
    ZipperType(id="easyTear", name="易撕拉链", price_per_meter=0.35),
    ZipperType(id="childProof", name="防儿童拉链", price_per_meter=0.8),
]

VALVE_TYPES = [
    ValveType(id="oneWay", name="单向排气阀", price_per_unit=0.12),
    ValveType(id="coffee", name="咖啡阀", price_per_unit=0.2),
]

ACCESSORIES = [
    Accessory(id="spoutSmall", name="吸嘴 8.6mm", price=0.18),
    Accessory(id="spoutLarge", name="吸嘴 16mm", price=0.3),
    Accessory(id="tinTie", name="束口条"),
    Accessory(id="laserTear", name="激光易撕线"),
    Accessory(id="handle", name="提手", price=0.08),
]

# Price per revolution, by order revolutions
PRINTING_TIERS = [
    PrintingTier(max_revolutions=500, price_per_revolution=6.0),
    PrintingTier(max_revolutions=2000, price_per_revolution=5.0),
    PrintingTier(max_revolutions=5000, price_per_revolution=4.5),
    PrintingTier(max_revolutions=None, price_per_revolution=4.0),
]

DEFAULT_DIGITAL_CONFIG = DigitalGeneratorConfig(
    bag_types=BAG_TYPES,
    print_modes=PRINT_MODES,
    special_processes=SPECIAL_PROCESSES,
    zipper_types=ZIPPER_TYPES,
    valve_types=VALVE_TYPES,
    accessories=ACCESSORIES,
    printing_tiers=PRINTING_TIERS,
    system_constants=SystemConstants(),
    lamination_unit_price=200.0,
    lamination_per_meter=0.25,
    vat_rate=settings.DEFAULT_VAT_RATE,
    exchange_rate=settings.DEFAULT_EXCHANGE_RATE,
)
