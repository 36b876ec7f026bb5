import math
from dataclasses import dataclass

from environment.errors import InvalidDimension


def _validate(field, value):
    if isinstance(value, bool):
        raise InvalidDimension(field, value)
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidDimension(field, value) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimension(field, value)
    return value


@dataclass(frozen=True)
class Prism:
    """
    Represents a rectangular solid.
    It has a height, a width and a depth, stored as floats.
    A prism is never modified; rotating one produces a new Prism.
    """
    height: float
    width: float
    depth: float

    def __post_init__(self):
        # frozen dataclass: assign normalised values through object.__setattr__
        for field in ("height", "width", "depth"):
            object.__setattr__(self, field, _validate(field, getattr(self, field)))

    @classmethod
    def from_sequence(cls, values):
        """
        Build a prism from a (height, width, depth) sequence.

        Args:
        - values (sequence): exactly three dimension values

        Returns:
        - Prism
        """
        values = list(values)
        if len(values) != 3:
            raise ValueError(f"Expected 3 dimensions (height, width, depth), got {len(values)}")
        return cls(*values)

    def get_volume(self):
        """Returns the volume of the prism."""
        return self.height * self.width * self.depth

    def as_tuple(self):
        return (self.height, self.width, self.depth)


def volume(prism):
    return prism.get_volume()
