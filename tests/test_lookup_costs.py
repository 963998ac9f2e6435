"""
Lookup ladder and cost line tests.

Tests:
1-3.   Material feed width ladders (standard / eight-side)
4-6.   Printing tiers: first match, fallback, zero price
7.     Drawstring width ladder
8-10.  Material, lamination, file fee
11-12. Print run and bag making
13-17. Accessories: zipper, valve, spout, stacked add-ons, unpriced add-ons, unknown ids
18-20. Special processes: each basis, minimum clamp, shaped bag surcharge
21.    Double-bag total
"""

import pytest

from pouchquote.calculators.cost_accumulator import CostAccumulator
from pouchquote.calculators.lookup import (
    drawstring_price,
    first_match,
    material_width,
    print_unit_price,
)
from pouchquote.schemas import (
    Accessory,
    BagTypeDefinition,
    DigitalGeneratorConfig,
    PrintingTier,
    SpecialProcess,
    ValveType,
    ZipperType,
)

from conftest import build_request


def _sample_config():
    return DigitalGeneratorConfig(
        zipper_types=[ZipperType(id="std", price_per_meter=0.2)],
        valve_types=[ValveType(id="oneWay", price_per_unit=0.1)],
        accessories=[
            Accessory(id="spout", name="吸嘴", price=0.3),
            Accessory(id="tie", name="束口条"),
            Accessory(id="tear", name="激光易撕线"),
            Accessory(id="handle", name="提手", price=0.05),
            Accessory(id="tagged", name="anything", calc_basis="drawstring"),
            Accessory(id="credit", name="促销贴", price=-0.2),
            Accessory(id="free", name="赠品卡", price=0),
        ],
        special_processes=[
            SpecialProcess(id="perQty", calc_basis="perQuantity", unit_price=0.01),
            SpecialProcess(id="perMeter", calc_basis="perMeter", unit_price=0.5, min_price=1000),
            SpecialProcess(id="mult", calc_basis="printMultiplier", unit_price=0.5),
        ],
    )


# --- Ladders ---

def test_short_runs_use_widest_roll():
    assert material_width(1499, 300) == 760
    assert material_width(1999, 300, eight_side=True) == 760


def test_standard_feed_width_breakpoints():
    assert material_width(1500, 540) == 555
    assert material_width(1500, 541) == 630
    assert material_width(1500, 620) == 630
    assert material_width(1500, 670) == 680
    assert material_width(1500, 700) == 760


def test_eight_side_feed_width_breakpoints():
    assert material_width(2000, 545, eight_side=True) == 555
    assert material_width(2000, 625, eight_side=True) == 630
    assert material_width(2000, 671, eight_side=True) == 760


def test_print_tiers_first_match_wins():
    tiers = [PrintingTier(max_revolutions=100, price_per_revolution=6),
             PrintingTier(max_revolutions=1000, price_per_revolution=5)]
    assert print_unit_price(50, tiers) == 6
    assert print_unit_price(100, tiers) == 6
    assert print_unit_price(500, tiers) == 5
    # Past every threshold: last tier's price
    assert print_unit_price(5000, tiers) == 5


def test_print_tiers_empty_or_zero_price_default_to_four():
    assert print_unit_price(100, []) == 4
    tiers = [PrintingTier(max_revolutions=100, price_per_revolution=0),
             PrintingTier(max_revolutions=None, price_per_revolution=3)]
    assert print_unit_price(50, tiers) == 4
    assert print_unit_price(500, tiers) == 3


def test_first_match_falls_back_to_last_value():
    ladder = [(lambda x: x < 0, 1.0), (lambda x: x > 100, 2.0)]
    assert first_match(ladder, 50) == 2.0


def test_drawstring_width_ladder():
    assert drawstring_price(140) == 0.5
    assert drawstring_price(141) == 0.6
    assert drawstring_price(250) == 0.7
    assert drawstring_price(251) == 0.8


# --- Material / lamination / file fee ---

def test_material_cost():
    costs = CostAccumulator(DigitalGeneratorConfig())
    assert costs.material(1000, 760, 10) == pytest.approx(7600)


def test_lamination_steps_and_minimum():
    costs = CostAccumulator(DigitalGeneratorConfig(lamination_unit_price=200, lamination_per_meter=0.25))
    assert costs.lamination(5000, 0) == 0
    assert costs.lamination(100, 1) == 200            # flat minimum
    assert costs.lamination(2000, 2) == pytest.approx(2 * 500)


def test_file_fee_after_five_skus():
    costs = CostAccumulator(DigitalGeneratorConfig())
    assert costs.file_fee(1) == 0
    assert costs.file_fee(5) == 0
    assert costs.file_fee(8) == 150


# --- Print / bag making ---

def test_print_run_mode_and_double_side():
    costs = CostAccumulator(DigitalGeneratorConfig())
    assert costs.print_run(5, 1000, 110, 1.0, False) == pytest.approx(5000 + 440)
    assert costs.print_run(5, 1000, 110, 1.2, True) == pytest.approx((5000 + 440) * 1.2 * 2)


def test_bag_making_minimum():
    costs = CostAccumulator(DigitalGeneratorConfig())
    bag = BagTypeDefinition(id="threeSide", making_coefficient=0.25, making_min_price=300)
    assert costs.bag_making(bag, 1.03, 1500, 110, 2) == pytest.approx(0.25 * 1.03 * 1610 * 2)
    assert costs.bag_making(bag, 1.0, 10, 10, 1) == 300


# --- Accessories ---

def test_zipper_valve_spout():
    costs = CostAccumulator(_sample_config())
    request = build_request(quantity=1000, zipper_id="std", valve_id="oneWay", spout_id="spout")
    total = costs.accessories(request, n_row=2, zipper_meters=500, feed_meters=600)
    assert total == pytest.approx(2 * 500 * 0.2 + 1000 * 0.1 + 1000 * 0.3)


def test_stacked_accessories():
    costs = CostAccumulator(_sample_config())
    request = build_request(quantity=1000, selected_accessory_ids=["tie", "tear", "handle"])
    total = costs.accessories(request, n_row=1, zipper_meters=0, feed_meters=600)
    # width 100 → 0.5 per bag drawstring
    assert total == pytest.approx(0.5 * 1000 + 0.35 * 600 + 0.05 * 1000)


def test_explicit_calc_basis_overrides_name():
    costs = CostAccumulator(_sample_config())
    request = build_request(quantity=100, selected_accessory_ids=["tagged"])
    assert costs.accessories(request, 1, 0, 0) == pytest.approx(0.5 * 100)


def test_unpriced_accessory_without_keyword_costs_nothing():
    costs = CostAccumulator(_sample_config())
    request = build_request(quantity=1000, selected_accessory_ids=["credit", "free", "handle"])
    assert costs.accessories(request, 1, 0, 0) == pytest.approx(0.05 * 1000)


def test_unknown_accessory_ids_cost_nothing():
    costs = CostAccumulator(_sample_config())
    request = build_request(zipper_id="gold", valve_id="nope", spout_id="missing",
                            selected_accessory_ids=["ghost"])
    assert costs.accessories(request, 2, 500, 600) == 0


# --- Special processes ---

def test_special_process_bases():
    costs = CostAccumulator(_sample_config())
    request = build_request(quantity=1000, selected_special_process_ids=["perQty", "mult"])
    total = costs.special_process(request, feed_meters=600, print_cost=1100, file_fee=100)
    assert total == pytest.approx(0.01 * 1000 + (1100 - 100) * 0.5)


def test_special_process_minimum_clamp():
    costs = CostAccumulator(_sample_config())
    request = build_request(selected_special_process_ids=["perMeter"])
    assert costs.special_process(request, 600, 0, 0) == 1000
    assert costs.special_process(request, 4000, 0, 0) == pytest.approx(2000)


def test_shaped_bag_surcharge():
    costs = CostAccumulator(_sample_config())
    request = build_request(selected_special_process_ids=["shapedBag"])
    assert costs.special_process(request, 600, 0, 0) == 300


# --- Total ---

def test_double_bag_doubles_whole_total():
    costs = CostAccumulator(DigitalGeneratorConfig())
    lines = {"material": 100, "lamination": 0, "print": 50, "bag_making": 300,
             "accessories": 0, "special_process": 0, "custom": 500, "file_fee": 0}
    assert costs.total(lines, double_bag=False) == 950
    assert costs.total(lines, double_bag=True) == 1900
