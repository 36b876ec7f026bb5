import json
from pathlib import Path
import numpy as np

DEFAULT_RANGES = {
    "container_min": 10.0, "container_max": 60.0,
    "product_min": 1.0, "product_max": 15.0,
}


def make_test_sets(seed: int, n_scenarios: int, ranges: dict = None, decimals: int = 1):
    """
    Create deterministic container/product scenarios for reproducible evaluation.

    Parameters:
    - seed (int): RNG seed for reproducibility
    - n_scenarios (int): number of scenarios to generate
    - ranges (dict): min/max for container and product dimensions
    - decimals (int): dimensions are rounded to this many decimals

    Returns:
    - list of scenarios, each a dict:
      {"container": [h, w, d], "product": [h, w, d]}
    """
    ranges = ranges or DEFAULT_RANGES
    rng = np.random.default_rng(seed)
    sets = []
    for _ in range(n_scenarios):
        container = rng.uniform(ranges["container_min"], ranges["container_max"], size=3)
        product = rng.uniform(ranges["product_min"], ranges["product_max"], size=3)
        sets.append({
            "container": [float(v) for v in np.round(container, decimals)],
            "product": [float(v) for v in np.round(product, decimals)],
        })
    return sets


def save_test_sets(path: str, sets):
    """
    Save generated scenarios to disk in JSON format.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Path(path).write_text(json.dumps(sets))


def load_test_sets(path: str):
    """
    Load scenarios from a JSON file.
    """
    return json.loads(Path(path).read_text())
