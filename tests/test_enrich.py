import math

import pytest

from trisolve import AngleUnit, InputConflict, SlotRing, Unsolvable
from trisolve.enrich import build_solution, check_consistency, check_valid, derive
from trisolve.slots import SLOT_INDEX


def right_triangle():
    return SlotRing.from_named(
        a=3.0,
        b=4.0,
        c=5.0,
        alpha=math.asin(0.6),
        beta=math.asin(0.8),
        gamma=math.pi / 2,
    )


def test_build_solution_derives_area_altitudes_and_circles():
    solution = build_solution(right_triangle(), AngleUnit.DEG)

    assert solution.gamma == pytest.approx(90.0)
    assert solution.area == pytest.approx(6.0)
    assert solution.incircle.radius == pytest.approx(1.0)
    assert solution.circumcircle.radius == pytest.approx(2.5)
    assert solution.incircle.center is None
    assert (solution.ha, solution.hb, solution.hc) == pytest.approx((4.0, 3.0, 2.4))


def test_build_solution_keeps_radians():
    solution = build_solution(right_triangle(), AngleUnit.RAD)

    assert solution.gamma == pytest.approx(math.pi / 2)


def test_derive_equilateral():
    derived = derive(2.0, 2.0, 2.0, math.pi / 3, math.pi / 3)

    assert derived.area == pytest.approx(math.sqrt(3))
    assert derived.inradius == pytest.approx(1 / math.sqrt(3))
    assert derived.circumradius == pytest.approx(2 / math.sqrt(3))
    assert derived.ha == pytest.approx(math.sqrt(3))


@pytest.mark.parametrize(
    'name, value',
    [
        ('alpha', math.nan),
        ('alpha', 0.0),
        ('gamma', math.pi),
        ('beta', -0.1),
        ('a', 0.0),
        ('c', -1.0),
        ('b', math.inf),
    ],
)
def test_check_valid_rejects_out_of_range_slots(name, value):
    ring = right_triangle()
    ring[SLOT_INDEX[name]] = value

    with pytest.raises(Unsolvable) as exc:
        check_valid(ring)

    assert exc.value.message == 'Unsolvable: No solution is possible for given parameters.'


def test_check_consistency_accepts_values_within_tolerance():
    check_consistency(
        right_triangle(),
        {'a': 3.0, 'b': 4.0, 'c': 5.0, 'gamma': 90.0005},
        AngleUnit.DEG,
        1e-3,
    )


def test_check_consistency_reports_first_conflict_in_ring_order():
    supplied = {'a': 3.0, 'b': 4.5, 'gamma': 80.0, 'c': 5.0}
    raw = {'a': '3', 'b': '4.5', 'gamma': '80', 'c': 5}

    with pytest.raises(InputConflict) as exc:
        check_consistency(right_triangle(), supplied, AngleUnit.DEG, 1e-3, raw=raw)

    assert exc.value.property == 'gamma'
    assert exc.value.input == '80'
    assert exc.value.calculated == pytest.approx(90.0)
    assert exc.value.message == (
        'Calculated value for "gamma" different from input: input: 80 calculated: 90'
    )


def test_check_consistency_compares_angles_in_input_unit():
    with pytest.raises(InputConflict) as exc:
        check_consistency(right_triangle(), {'gamma': 90.0}, AngleUnit.RAD, 1e-3)

    assert exc.value.calculated == pytest.approx(math.pi / 2)
