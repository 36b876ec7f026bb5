from itertools import permutations

import numpy as np

from environment.prism import Prism
from environment.rotation import rotate
from packing.search import find_optimal_orientation, packable_units, utilization


def best_permutation_count(container, product):
    """
    Exhaustive reference: try every permutation of the product's three
    dimensions directly and return the highest packable count.
    """
    return max(
        packable_units(container, Prism(*dims))
        for dims in permutations(product.as_tuple())
    )


def evaluate_search_on_scenario(scenario):
    """
    Evaluate the orientation search on ONE scenario.

    Parameters:
    - scenario (dict): {"container": [h, w, d], "product": [h, w, d]}

    Returns:
    - dict with the search count, the exhaustive count and the utilization (%)
    """
    container = Prism.from_sequence(scenario["container"])
    product = Prism.from_sequence(scenario["product"])

    orientation = find_optimal_orientation(container, product)
    rotated = rotate(product, orientation)
    search_count = packable_units(container, rotated)
    exhaustive_count = best_permutation_count(container, product)

    return {
        "orientation": orientation.as_tuple(),
        "search_count": search_count,
        "exhaustive_count": exhaustive_count,
        "utilization": utilization(container, rotated),
    }


def evaluate_search(scenarios):
    """
    Run the search over many scenarios and compare it with the exhaustive reference.

    Returns:
    - dict: per-scenario results plus agreement rate and mean utilization
    """
    results = [evaluate_search_on_scenario(s) for s in scenarios]
    matches = np.array([r["search_count"] == r["exhaustive_count"] for r in results], dtype=bool)
    filled = np.array([r["utilization"] for r in results], dtype=float)

    return {
        "results": results,
        "agreement": float(matches.mean()) if len(results) else 1.0,
        "mean_utilization": float(filled.mean()) if len(results) else 0.0,
        "mismatches": [i for i, ok in enumerate(matches) if not ok],
    }
