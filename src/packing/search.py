import logging
import math

from environment.errors import DomainError
from environment.orientation import IDENTITY, SEARCH_ORDER
from environment.rotation import rotate

logger = logging.getLogger(__name__)


def grid_counts(container, product):
    """
    Split the container into a uniform grid of identically oriented products.

    Each axis is divided independently and truncated toward zero, so
    leftover space on one axis is never reused by another.

    Args:
    - container (Prism): container dimensions
    - product (Prism): product dimensions, already rotated

    Returns:
    - tuple: (columns, rows, layers) along width, depth and height
    """
    for field in ("height", "width", "depth"):
        if getattr(product, field) <= 0:
            raise DomainError(f"Cannot divide the container by a product {field} of {getattr(product, field)!r}")

    quotients = (
        container.width / product.width,
        container.depth / product.depth,
        container.height / product.height,
    )
    if not all(math.isfinite(q) for q in quotients):
        raise DomainError(
            f"Grid division overflows for container {container} and product {product}"
        )

    columns, rows, layers = (int(q) for q in quotients)
    return columns, rows, layers


def packable_units(container, product):
    """
    Number of whole products that fit in the container (columns x rows x layers).
    A result of 0 means the product does not fit in this orientation.
    """
    columns, rows, layers = grid_counts(container, product)
    return columns * rows * layers


def utilization(container, product):
    """
    Percentage of the container volume filled by the packed grid.
    Computed per axis so huge counts never overflow a float.
    """
    columns, rows, layers = grid_counts(container, product)
    return (
        (columns * product.width / container.width)
        * (rows * product.depth / container.depth)
        * (layers * product.height / container.height)
        * 100.0
    )


def evaluate_orientations(container, product):
    """
    Count the packable units for every canonical orientation.

    Args:
    - container (Prism)
    - product (Prism): product dimensions as measured

    Returns:
    - list[tuple[Orientation, int]]: identity first, then the search order
    """
    return [
        (orientation, packable_units(container, rotate(product, orientation)))
        for orientation in (IDENTITY,) + SEARCH_ORDER
    ]


def find_optimal_orientation(container, product):
    """
    Find the orientation that fits the most products in the container.

    Strategy:
    - Start from the identity orientation and its count.
    - Try each remaining orientation in SEARCH_ORDER.
    - Keep a candidate only if it packs strictly more units, so the
      identity wins every tie and otherwise the first maximum wins.

    Args:
    - container (Prism): container dimensions
    - product (Prism): product dimensions as measured (never modified)

    Returns:
    - Orientation: the winning orientation
    """
    best = IDENTITY
    best_count = packable_units(container, product)
    logger.debug("Orientation %s -> %d units (baseline)", best, best_count)

    for candidate in SEARCH_ORDER:
        rotated = rotate(product, candidate)
        candidate_count = packable_units(container, rotated)
        logger.debug("Orientation %s -> %d units", candidate, candidate_count)

        if candidate_count > best_count:
            best, best_count = candidate, candidate_count

    logger.info("Optimal orientation %s packs %d units", best, best_count)
    return best
