from dataclasses import dataclass, field

from environment.orientation import IDENTITY, Orientation
from environment.prism import Prism
from environment.rotation import rotate
from packing.search import grid_counts


@dataclass
class Product:
    """
    The item to be packed.
    `dimensions` are the measured (unrotated) sizes; the effective sizes
    for packing are always the dimensions rotated by `orientation`.
    """
    dimensions: Prism
    orientation: Orientation = field(default=IDENTITY)

    def get_rotated_dimensions(self):
        """Returns the product dimensions under its current orientation."""
        return rotate(self.dimensions, self.orientation)


@dataclass(frozen=True)
class Container:
    """
    The fixed packing space. It is never rotated.
    """
    dimensions: Prism

    def get_volume(self):
        """Returns the total volume of the container."""
        return self.dimensions.get_volume()

    def get_product_quantity_per_layer(self, product):
        """
        Number of products on one layer (columns x rows) with the
        product in its current orientation.
        """
        columns, rows, _ = grid_counts(self.dimensions, product.get_rotated_dimensions())
        return columns * rows

    def get_layer_count(self, product):
        """Number of layers that stack along the container height."""
        _, _, layers = grid_counts(self.dimensions, product.get_rotated_dimensions())
        return layers
