"""
Cost categories for a digital pouch run.

Seven independent categories: material, lamination, print, bag making,
accessories, special process, custom fees. Each method is a pure function of
its arguments plus the (read-only) operator config.
"""

import logging
from typing import Dict

from ..schemas import Accessory, BagTypeDefinition, DigitalCalcRequest, DigitalGeneratorConfig
from .lookup import drawstring_price

logger = logging.getLogger(__name__)

CATEGORIES = ("material", "lamination", "print", "bag_making", "accessories", "special_process", "custom")


class CostAccumulator:

    WASTE_INK_PER_LOSS_REV = 4.0    # CNY per set-up revolution
    FREE_FILE_SKUS = 5
    FILE_FEE_PER_SKU = 50.0
    DOUBLE_SIDE_ID = "doubleSide"
    SHAPED_BAG_ID = "shapedBag"
    SHAPED_BAG_SURCHARGE = 300.0
    LASER_TEAR_PER_METER = 0.35
    DRAWSTRING_KEYWORD = "束口条"
    LASER_TEAR_KEYWORD = "激光易撕线"

    def __init__(self, config: DigitalGeneratorConfig):
        self.config = config

    # --- Material + lamination ---

    def material(self, feed_meters: float, material_width_mm: float, square_price_total: float) -> float:
        feed_area = feed_meters * material_width_mm / 1000
        return feed_area * square_price_total

    def lamination(self, feed_meters: float, steps: int) -> float:
        """One pass per extra layer; each pass charged at least the flat minimum."""
        if steps <= 0:
            return 0.0
        per_step = max(self.config.lamination_unit_price, self.config.lamination_per_meter * feed_meters)
        return per_step * steps

    # --- Print ---

    def file_fee(self, sku_count: int) -> float:
        return max(0, sku_count - self.FREE_FILE_SKUS) * self.FILE_FEE_PER_SKU

    def waste_ink(self, r_loss: float) -> float:
        return r_loss * self.WASTE_INK_PER_LOSS_REV

    def print_run(self, unit_price: float, r_order: float, r_loss: float,
                  mode_coefficient: float, double_sided: bool) -> float:
        """Printed run before the file fee. Mode 0 ("no printing") is handled by the caller."""
        cost = (unit_price * r_order + self.waste_ink(r_loss)) * mode_coefficient
        if double_sided:
            cost *= 2
        return cost

    # --- Bag making ---

    def bag_making(self, bag_type: BagTypeDefinition, l_rev: float, r_order: float,
                   r_loss: float, n_row: int) -> float:
        base = bag_type.making_coefficient * l_rev * (r_order + r_loss) * n_row
        return max(base, bag_type.making_min_price)

    # --- Accessories ---

    def _accessory_basis(self, accessory: Accessory) -> str:
        if accessory.calc_basis:
            return accessory.calc_basis
        if accessory.price > 0:
            return "perUnit"
        if self.DRAWSTRING_KEYWORD in accessory.name:
            return "drawstring"
        if self.LASER_TEAR_KEYWORD in accessory.name:
            return "laserTear"
        # No price and no priced keyword: nothing to charge
        return "none"

    def accessories(self, request: DigitalCalcRequest, n_row: int,
                    zipper_meters: float, feed_meters: float) -> float:
        """
        Zipper per meter of running web × rows, valve and spout per bag,
        then any stacked add-ons. Ids missing from the catalogs cost nothing.
        """
        qty = request.quantity
        total = 0.0

        if request.zipper_id != "none":
            zipper = _find(self.config.zipper_types, request.zipper_id)
            if zipper:
                total += n_row * zipper_meters * zipper.price_per_meter

        if request.valve_id != "none":
            valve = _find(self.config.valve_types, request.valve_id)
            if valve:
                total += qty * valve.price_per_unit

        if request.spout_id:
            spout = _find(self.config.accessories, request.spout_id)
            if spout:
                total += spout.price * qty

        for accessory_id in request.selected_accessory_ids:
            accessory = _find(self.config.accessories, accessory_id)
            if not accessory:
                continue
            basis = self._accessory_basis(accessory)
            if basis == "drawstring":
                total += drawstring_price(request.dimensions.width) * qty
            elif basis == "laserTear":
                total += self.LASER_TEAR_PER_METER * feed_meters
            elif basis == "perUnit":
                total += accessory.price * qty
        return total

    # --- Special processes ---

    def special_process(self, request: DigitalCalcRequest, feed_meters: float,
                        print_cost: float, file_fee: float) -> float:
        total = 0.0
        for process_id in request.selected_special_process_ids:
            process = _find(self.config.special_processes, process_id)
            if not process:
                continue
            if process.calc_basis == "perQuantity":
                cost = process.unit_price * request.quantity
            elif process.calc_basis == "perMeter":
                cost = process.unit_price * feed_meters
            else:  # printMultiplier
                cost = (print_cost - file_fee) * process.unit_price
            if process.min_price > 0 and cost < process.min_price:
                cost = process.min_price
            total += cost

        if self.SHAPED_BAG_ID in request.selected_special_process_ids:
            total += self.SHAPED_BAG_SURCHARGE
        return total

    def custom(self, request: DigitalCalcRequest) -> float:
        """Mold + plate fees, passed through as entered."""
        return request.mold_cost + request.plate_cost

    # --- Total ---

    def total(self, lines: Dict[str, float], double_bag: bool) -> float:
        """
        Sum of the seven categories. Double-up bag types print two bags per
        cycle, so the whole sum (custom fees included) is doubled.
        """
        total = sum(lines[category] for category in CATEGORIES)
        logger.debug("Cost lines %s, double bag: %s", lines, double_bag)
        return total * 2 if double_bag else total


def _find(items, item_id):
    for item in items:
        if item.id == item_id:
            return item
    return None
