import logging
from dataclasses import dataclass

from environment.orientation import Orientation
from environment.prism import Prism
from environment.product import Container, Product
from packing.search import find_optimal_orientation, utilization

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackingResult:
    """
    Outcome of one packing run.

    Attributes:
        orientation: Winning orientation.
        rotated: Product dimensions under the winning orientation.
        packable_units: Total products that fit (columns x rows x layers).
        units_per_layer: Products on one layer (columns x rows).
        layers: Layers stacked along the container height.
        utilization: Percentage of the container volume filled by products.
    """
    orientation: Orientation
    rotated: Prism
    packable_units: int
    units_per_layer: int
    layers: int
    utilization: float

    def to_dict(self):
        return {
            "orientation": list(self.orientation.as_tuple()),
            "rotated_dimensions": {
                "height": self.rotated.height,
                "width": self.rotated.width,
                "depth": self.rotated.depth,
            },
            "packable_units": self.packable_units,
            "units_per_layer": self.units_per_layer,
            "layers": self.layers,
            "utilization": self.utilization,
        }


class BoxPacker:
    """
    Holds one container and one product and finds the best way to orient
    the product inside the container.
    """
    def __init__(self, container: Container, product: Product):
        self.container = container
        self.product = product

    @classmethod
    def from_dimensions(cls, container_dims, product_dims):
        """
        Build a packer from two (height, width, depth) sequences.
        Raises InvalidDimension before any search if a value is not positive.
        """
        container = Container(Prism.from_sequence(container_dims))
        product = Product(Prism.from_sequence(product_dims))
        return cls(container, product)

    def evaluate(self) -> Orientation:
        """
        Run the orientation search and record the winner on the product.

        Returns:
            Orientation: the winning orientation
        """
        optimal = find_optimal_orientation(self.container.dimensions, self.product.dimensions)
        self.product.orientation = optimal
        return optimal

    def pack(self) -> PackingResult:
        """
        Evaluate and summarise the packing for the winning orientation.
        """
        orientation = self.evaluate()
        rotated = self.product.get_rotated_dimensions()
        units_per_layer = self.container.get_product_quantity_per_layer(self.product)
        layers = self.container.get_layer_count(self.product)
        units = units_per_layer * layers
        filled = utilization(self.container.dimensions, rotated)

        logger.debug(
            "Packed %d per layer x %d layers (%.2f%% of container volume)",
            units_per_layer, layers, filled,
        )
        return PackingResult(
            orientation=orientation,
            rotated=rotated,
            packable_units=units,
            units_per_layer=units_per_layer,
            layers=layers,
            utilization=filled,
        )
