"""
Bag geometry: flat expanded sheet size and press layout.

The expansion table encodes physical folding geometry, so it lives in code
and is not operator-editable (unlike the area formulas in the config).
All sizes in mm. L_exp runs across the web, W_exp around the cylinder.
"""

import logging
import math

from ..schemas import Dimensions, ExpandSize, Layout, SystemConstants

logger = logging.getLogger(__name__)


def _three_side(d: Dimensions) -> ExpandSize:
    return ExpandSize(l_exp=d.height * 2 + 30, w_exp=d.width + 3)


def _three_side_double(d: Dimensions) -> ExpandSize:
    return ExpandSize(l_exp=d.height + 30, w_exp=d.width + 3)


def _standup(d: Dimensions) -> ExpandSize:
    return ExpandSize(l_exp=(d.height + d.bottom_insert) * 2 + 40, w_exp=d.width + 3)


def _standup_double(d: Dimensions) -> ExpandSize:
    return ExpandSize(l_exp=(d.height + d.bottom_insert) + 40, w_exp=d.width + 3)


def _center_seal(d: Dimensions) -> ExpandSize:
    return ExpandSize(l_exp=(d.width + d.back_seal + d.side_gusset) * 2 + 20, w_exp=d.height + 3)


def _gusset(d: Dimensions) -> ExpandSize:
    return ExpandSize(l_exp=(d.width + d.back_seal + d.side_expansion) * 2 + 40, w_exp=d.height + 3)


EXPANSION_RULES = {
    "threeSide": _three_side,
    "threeSideDouble": _three_side_double,
    "standupNoZip": _standup,
    "standupWithZip": _standup,
    "standupSplitBottom": _standup,
    "standupDouble": _standup_double,
    "centerSeal": _center_seal,
    "sideSeal": _center_seal,
    "gusset": _gusset,
}


class GeometryModel:
    """Expanded sheet size per bag type, and how many fit on one revolution."""

    # Eight-side panel allowances (mm)
    BODY_SEAM_ALLOWANCE = 60
    BODY_EDGE_ALLOWANCE = 5
    SIDE_SEAM_ALLOWANCE = 15
    SIDE_EDGE_ALLOWANCE = 5

    def __init__(self, constants: SystemConstants):
        self.constants = constants

    def expand(self, bag_type_id: str, d: Dimensions) -> ExpandSize:
        """Standard bag types. Unknown ids fall back to the three-side rule."""
        rule = EXPANSION_RULES.get(bag_type_id, _three_side)
        return rule(d)

    def expand_body_panel(self, d: Dimensions) -> ExpandSize:
        """Eight-side front + back + bottom as one strip."""
        return ExpandSize(
            l_exp=(d.height + d.bottom_insert) * 2 + self.BODY_SEAM_ALLOWANCE,
            w_exp=d.width + self.BODY_EDGE_ALLOWANCE,
        )

    def expand_side_panel(self, d: Dimensions) -> ExpandSize:
        """Eight-side gusset pair. Gusset depth defaults to the bottom insert."""
        gusset = d.side_gusset or d.bottom_insert
        return ExpandSize(
            l_exp=gusset * 2 + self.SIDE_SEAM_ALLOWANCE,
            w_exp=d.height + self.SIDE_EDGE_ALLOWANCE,
        )

    def layout(self, size: ExpandSize) -> Layout:
        """Rows across the web × copies around the cylinder, each at least 1."""
        n_row = self._fit(self.constants.max_print_width, size.l_exp)
        n_circ = self._fit(self.constants.max_print_circumference, size.w_exp)
        layout = Layout(n_row=n_row, n_circ=n_circ, n_rev=n_row * n_circ)
        logger.debug("Layout for %.1f x %.1f mm: %s", size.l_exp, size.w_exp, layout)
        return layout

    @staticmethod
    def _fit(available: float, needed: float) -> int:
        if needed <= 0:
            return 1
        return max(1, math.floor(available / needed))
