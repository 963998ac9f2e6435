"""
Ordered lookup ladders: material feed width, printing tiers, drawstring price.

A ladder is a list of (predicate, value) pairs scanned front to back. The
first predicate that matches wins; when none match, the last entry's value
applies. Order matters, so these stay lists rather than dicts.
"""

from typing import Callable, List, Sequence, Tuple

from ..schemas import PrintingTier

Ladder = List[Tuple[Callable, float]]

WIDEST_ROLL_MM = 760.0
DEFAULT_PRINT_UNIT_PRICE = 4.0   # CNY per revolution when no tier applies


def first_match(ladder: Sequence[Tuple[Callable, float]], key) -> float:
    """Linear scan; first matching predicate wins, else the last value."""
    for matches, value in ladder:
        if matches(key):
            return value
    return ladder[-1][1]


def _feed_width_ladder(min_revolutions: float, breakpoints: List[Tuple[float, float]]) -> Ladder:
    """
    Short runs always go on the widest roll (no narrow-roll changeover);
    longer runs take the narrowest roll that still fits the pattern.
    Key is (order_revolutions, pattern_width_mm).
    """
    ladder = [(lambda run: run[0] < min_revolutions, WIDEST_ROLL_MM)]
    for max_pattern, roll_width in breakpoints:
        ladder.append((lambda run, limit=max_pattern: run[1] <= limit, roll_width))
    ladder.append((lambda run: True, WIDEST_ROLL_MM))
    return ladder


STANDARD_FEED_WIDTHS = _feed_width_ladder(1500, [(540, 555.0), (620, 630.0), (670, 680.0)])
EIGHT_SIDE_FEED_WIDTHS = _feed_width_ladder(2000, [(545, 555.0), (625, 630.0), (670, 680.0)])

# Drawstring (束口条) price per bag by bag width in mm
DRAWSTRING_PRICES = [
    (lambda width: width <= 140, 0.5),
    (lambda width: width <= 200, 0.6),
    (lambda width: width <= 250, 0.7),
    (lambda width: True, 0.8),
]


def material_width(order_revolutions: float, pattern_width: float, eight_side: bool = False) -> float:
    ladder = EIGHT_SIDE_FEED_WIDTHS if eight_side else STANDARD_FEED_WIDTHS
    return first_match(ladder, (order_revolutions, pattern_width))


def print_unit_price(order_revolutions: float, tiers: List[PrintingTier]) -> float:
    """Price per revolution from the operator's tier ladder."""
    if not tiers:
        return DEFAULT_PRINT_UNIT_PRICE
    ladder = [
        (
            lambda revs, cap=tier.max_revolutions: cap is None or revs <= cap,
            tier.price_per_revolution or DEFAULT_PRINT_UNIT_PRICE,
        )
        for tier in tiers
    ]
    # Past every threshold: the top tier's own price, even when zero
    ladder.append((lambda revs: True, tiers[-1].price_per_revolution))
    return first_match(ladder, order_revolutions)


def drawstring_price(bag_width: float) -> float:
    return first_match(DRAWSTRING_PRICES, bag_width)
