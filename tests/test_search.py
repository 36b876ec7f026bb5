# ==============================================================================
# FILE: tests/test_search.py
# DESCRIPTION: Unit tests for the orientation search: grid division, the
#              packable unit count, tie-breaking and error handling.
# ==============================================================================
import itertools
from types import SimpleNamespace
import pytest

from environment.errors import DomainError
from environment.orientation import IDENTITY, Orientation
from environment.prism import Prism
from environment.rotation import rotate
from packing.search import (
    evaluate_orientations, find_optimal_orientation, grid_counts, packable_units,
    utilization,
)


def test_grid_counts_truncate():
    container = Prism(10, 10, 10)
    assert grid_counts(container, Prism(3, 3, 3)) == (3, 3, 3)
    assert packable_units(container, Prism(3, 3, 3)) == 27
    assert grid_counts(Prism(2, 10, 10), Prism(1, 1, 3)) == (10, 3, 2)

def test_grid_counts_axes():
    """
    Columns follow the width, rows the depth and layers the height.
    """
    assert grid_counts(Prism(8, 6, 4), Prism(4, 3, 2)) == (2, 2, 2)
    assert grid_counts(Prism(8, 6, 4), Prism(1, 2, 4)) == (3, 1, 8)

def test_packable_units_zero_when_too_large():
    assert packable_units(Prism(1, 1, 1), Prism(2, 2, 2)) == 0
    assert packable_units(Prism(10, 10, 2), Prism(1, 1, 3)) == 0

def test_packable_units_zero_dimension_raises():
    """
    A zero dimension that slips past Prism validation raises DomainError.
    """
    container = Prism(10, 10, 10)
    bad = SimpleNamespace(height=0.0, width=1.0, depth=1.0)
    with pytest.raises(DomainError):
        packable_units(container, bad)
    with pytest.raises(ZeroDivisionError):
        packable_units(container, SimpleNamespace(height=1.0, width=0.0, depth=1.0))

def test_cube_tie_returns_identity():
    """
    All six orientations of a cube give the same count; the identity wins.
    """
    orientation = find_optimal_orientation(Prism(10, 10, 10), Prism(5, 5, 5))
    assert orientation == IDENTITY
    assert packable_units(Prism(10, 10, 10), Prism(5, 5, 5)) == 8

def test_zero_fit_returns_identity():
    container, product = Prism(1, 1, 1), Prism(2, 2, 2)
    orientation = find_optimal_orientation(container, product)
    assert orientation == IDENTITY
    assert packable_units(container, rotate(product, orientation)) == 0

def test_rotation_changes_packability():
    """
    Container {10,10,2} and product {1,1,3}: the identity packs 0 and the
    height/depth swap (effective {3,1,1}) packs 10 * 2 * 3 = 60.
    """
    container, product = Prism(10, 10, 2), Prism(1, 1, 3)
    orientation = find_optimal_orientation(container, product)
    assert orientation == Orientation(True, False, False)
    assert rotate(product, orientation) == Prism(3, 1, 1)
    assert packable_units(container, rotate(product, orientation)) == 60

def test_first_maximum_wins():
    """
    (1,0,0), (1,1,0), (1,0,1) and (0,1,0) all pack 60 above; the first one is kept.
    """
    counts = dict(
        (o.as_tuple(), c) for o, c in evaluate_orientations(Prism(10, 10, 2), Prism(1, 1, 3))
    )
    assert counts == {
        (0, 0, 0): 0,
        (1, 0, 0): 60,
        (1, 1, 0): 60,
        (1, 0, 1): 60,
        (0, 0, 1): 0,
        (0, 1, 0): 60,
    }

def test_last_candidate_can_win():
    """
    Only the width/depth swap fits: product (1,2,3) -> (1,3,2) in a (1,3,2) container.
    """
    orientation = find_optimal_orientation(Prism(1, 3, 2), Prism(1, 2, 3))
    assert orientation == Orientation(False, True, False)

def test_height_width_swap_wins():
    orientation = find_optimal_orientation(Prism(2, 1, 3), Prism(1, 2, 3))
    assert orientation == Orientation(False, False, True)
    assert packable_units(Prism(2, 1, 3), rotate(Prism(1, 2, 3), orientation)) == 1

def test_evaluate_orientations_order():
    results = evaluate_orientations(Prism(10, 10, 10), Prism(5, 5, 5))
    assert [o.as_tuple() for o, _ in results] == [
        (0, 0, 0), (1, 0, 0), (1, 1, 0), (1, 0, 1), (0, 0, 1), (0, 1, 0),
    ]
    assert all(count == 8 for _, count in results)

def test_search_is_deterministic():
    container, product = Prism(12.5, 30, 7.25), Prism(2.5, 6, 1.75)
    first = find_optimal_orientation(container, product)
    for _ in range(5):
        assert find_optimal_orientation(container, product) == first

def test_search_does_not_mutate_product():
    product = Prism(1, 1, 3)
    find_optimal_orientation(Prism(10, 10, 2), product)
    assert product == Prism(1, 1, 3)

def test_search_matches_exhaustive_permutations():
    """
    The winning count equals the best count over every permutation of the product.
    """
    containers = [Prism(10, 10, 2), Prism(17, 9, 4.5), Prism(30, 12, 8), Prism(3, 3, 3)]
    products = [Prism(1, 1, 3), Prism(2, 4, 5), Prism(1.5, 2.5, 3.5), Prism(7, 1, 2)]
    for container, product in itertools.product(containers, products):
        orientation = find_optimal_orientation(container, product)
        best = max(
            packable_units(container, Prism(*dims))
            for dims in itertools.permutations(product.as_tuple())
        )
        assert packable_units(container, rotate(product, orientation)) == best

def test_search_logs_winner(caplog):
    with caplog.at_level("DEBUG", logger="packing.search"):
        find_optimal_orientation(Prism(10, 10, 2), Prism(1, 1, 3))
    assert "Optimal orientation (1,0,0) packs 60 units" in caplog.text
    assert "(0,1,0) -> 60 units" in caplog.text

def test_overflowing_quotient_raises_domain_error():
    """
    Valid but extreme dimensions whose quotient overflows to infinity raise DomainError.
    """
    container, product = Prism(1e308, 1, 1), Prism(1e-10, 1, 1)
    with pytest.raises(DomainError):
        grid_counts(container, product)
    with pytest.raises(DomainError):
        find_optimal_orientation(container, product)

def test_huge_finite_counts():
    """
    Counts beyond float range stay exact integers and utilization stays finite.
    """
    container, product = Prism(1e300, 1e300, 1e300), Prism(1, 1, 1)
    assert packable_units(container, product) == int(1e300) ** 3
    assert utilization(container, product) == pytest.approx(100.0)

def test_utilization():
    assert utilization(Prism(10, 10, 2), Prism(3, 1, 1)) == pytest.approx(90.0)
    assert utilization(Prism(1, 1, 1), Prism(2, 2, 2)) == 0.0
