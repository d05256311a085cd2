from itertools import combinations

import pytest

from trisolve import (
    Classification,
    InsufficientParameters,
    MissingSideLength,
    SlotRing,
    TriangleCase,
    classify,
)
from trisolve.slots import SLOT_INDEX, SLOT_NAMES, opposite


def ring(**values):
    return SlotRing.from_named(**values)


def test_slot_ring_wraps_around():
    r = ring(a=1.0, beta=0.5)

    assert r[6] == 1.0
    assert r[-1] == 0.5
    assert r[11] == 0.5
    assert not r.known(1)
    assert r.side_indices() == [0]
    assert r.angle_indices() == [5]


def test_slot_ring_reading_unknown_slot_fails():
    with pytest.raises(LookupError):
        ring(a=1.0).value(SLOT_INDEX['b'])


def test_opposite_slots_pair_each_side_with_its_angle():
    pairs = {SLOT_NAMES[i]: SLOT_NAMES[opposite(i)] for i in range(6)}

    assert pairs['a'] == 'alpha'
    assert pairs['b'] == 'beta'
    assert pairs['c'] == 'gamma'
    assert pairs['alpha'] == 'a'


@pytest.mark.parametrize(
    'known, expected',
    [
        (('a', 'b', 'c'), Classification(TriangleCase.SSS)),
        (('a', 'beta', 'gamma'), Classification(TriangleCase.ASA, SLOT_INDEX['a'])),
        (('c', 'alpha', 'beta'), Classification(TriangleCase.ASA, SLOT_INDEX['c'])),
        (('a', 'b', 'gamma'), Classification(TriangleCase.SAS, SLOT_INDEX['gamma'])),
        (('b', 'c', 'alpha'), Classification(TriangleCase.SAS, SLOT_INDEX['alpha'])),
        (('a', 'gamma', 'alpha'), Classification(TriangleCase.SAA, SLOT_INDEX['a'])),
        (('a', 'beta', 'alpha'), Classification(TriangleCase.AAS, SLOT_INDEX['a'])),
        (('a', 'b', 'alpha'), Classification(TriangleCase.SSA, SLOT_INDEX['alpha'])),
        (('a', 'b', 'beta'), Classification(TriangleCase.ASS, SLOT_INDEX['beta'])),
    ],
)
def test_classify_three_known_values(known, expected):
    r = ring(**{name: 1.0 for name in known})

    assert classify(r) == expected


def test_classify_with_redundant_values_uses_first_matching_pattern():
    r = ring(a=1.0, b=1.0, alpha=0.5, beta=0.5)

    assert classify(r) == Classification(TriangleCase.AAS, SLOT_INDEX['a'])


def test_classify_three_sides_ignores_extra_angles():
    r = ring(a=1.0, b=1.0, c=1.0, alpha=1.0)

    assert classify(r).case is TriangleCase.SSS


@pytest.mark.parametrize('known', [(), ('a',), ('a', 'b'), ('alpha', 'c')])
def test_classify_requires_three_values(known):
    with pytest.raises(InsufficientParameters) as exc:
        classify(ring(**{name: 1.0 for name in known}))

    assert 'At least 3 parameters' in exc.value.message


def test_classify_requires_a_side():
    with pytest.raises(MissingSideLength) as exc:
        classify(ring(alpha=1.0, beta=1.0, gamma=1.0))

    assert 'side length' in exc.value.message


def test_every_combination_with_a_side_is_classified():
    for size in (3, 4, 5, 6):
        for names in combinations(SLOT_NAMES, size):
            if not any(name in ('a', 'b', 'c') for name in names):
                continue
            classification = classify(ring(**{name: 1.0 for name in names}))
            assert isinstance(classification.case, TriangleCase)
