"""
Press revolutions and material meterage for one print run.

Order revolutions scale with quantity; loss revolutions are fixed set-up
waste (per SKU + one make-ready) and don't shrink for big orders.
"""

import logging
import math

from ..schemas import ExpandSize, FrozenModel, Layout, SystemConstants

logger = logging.getLogger(__name__)


class ProductionRun(FrozenModel):
    l_rev: float     # meters of web per revolution
    r_order: float   # fractional revolutions for the ordered quantity
    r_loss: float    # set-up waste revolutions
    m_order: float
    m_loss: float
    m_idle: float
    m_total: float


class ProductionRotationModel:

    # Fallbacks when the operator leaves the waste constants at 0
    STANDARD_SKU_WASTE = 30
    STANDARD_ADJUSTMENT_WASTE = 80
    EIGHT_SIDE_SKU_WASTE = 60
    EIGHT_SIDE_ADJUSTMENT_WASTE = 250

    # Idle allowance: 50 m per 1500 m of running material
    IDLE_METERS_PER_BLOCK = 50
    IDLE_BLOCK_METERS = 1500

    def __init__(self, constants: SystemConstants):
        self.constants = constants

    def loss_revolutions(self, sku_count: int, eight_side: bool = False) -> float:
        if eight_side:
            per_sku = self.constants.sku_waste or self.EIGHT_SIDE_SKU_WASTE
            adjustment = self.constants.adjustment_waste or self.EIGHT_SIDE_ADJUSTMENT_WASTE
        else:
            per_sku = self.constants.sku_waste or self.STANDARD_SKU_WASTE
            adjustment = self.constants.adjustment_waste or self.STANDARD_ADJUSTMENT_WASTE
        return sku_count * per_sku + adjustment

    def side_panel_loss(self, body: Layout, side: Layout, body_loss: float, side_print: bool) -> float:
        """
        Side panel inherits body waste only when it is printed, scaled by how
        many side panels one body revolution's worth of bags needs. The ratio
        is floored, so it moves in whole steps.
        """
        side_per_rev = side.n_rev or 1
        ratio = math.floor(int(side_print) * body.n_rev / side_per_rev)
        return ratio * body_loss

    def idle_meters(self, running_meters: float) -> float:
        proportional = running_meters / self.IDLE_BLOCK_METERS * self.IDLE_METERS_PER_BLOCK
        return max(self.constants.idle_material_min, proportional)

    def run(self, quantity: float, size: ExpandSize, layout: Layout, r_loss: float) -> ProductionRun:
        r_order = quantity / layout.n_rev
        l_rev = (layout.n_circ * size.w_exp) / 1000
        m_order = r_order * l_rev
        m_loss = r_loss * l_rev
        m_idle = self.idle_meters(m_order + m_loss)
        run = ProductionRun(
            l_rev=l_rev,
            r_order=r_order,
            r_loss=r_loss,
            m_order=m_order,
            m_loss=m_loss,
            m_idle=m_idle,
            m_total=m_order + m_loss + m_idle,
        )
        logger.debug("Run for qty %s: %.2f order revs, %.0f loss revs, %.1f m", quantity, r_order, r_loss, run.m_total)
        return run
