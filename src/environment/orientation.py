from dataclasses import dataclass


@dataclass(frozen=True)
class Orientation:
    """
    One of the six axis-aligned rotations of a rectangular prism.

    Each flag says whether one swap of the rotation is applied:
    - x_axis: swap height and depth
    - y_axis: swap width and depth
    - z_axis: swap height and width

    The swaps are applied in that order (see environment.rotation.rotate).
    """
    x_axis: bool = False
    y_axis: bool = False
    z_axis: bool = False

    def __post_init__(self):
        for field in ("x_axis", "y_axis", "z_axis"):
            object.__setattr__(self, field, bool(getattr(self, field)))

    @classmethod
    def from_tuple(cls, code):
        """
        Build an orientation from an (x, y, z) 0/1 code.

        Only the six canonical codes are accepted; (0,1,1) and (1,1,1)
        repeat rotations already covered by (1,1,0) and (0,1,0).

        Args:
        - code (sequence): three 0/1 flags

        Returns:
        - Orientation
        """
        code = tuple(code)
        if len(code) != 3 or any(flag not in (0, 1) for flag in code):
            raise ValueError(f"Orientation code must be three 0/1 flags, got {code!r}")
        orientation = cls(*code)
        if orientation not in CANONICAL_ORIENTATIONS:
            raise ValueError(f"Orientation {code!r} is not one of the six canonical orientations")
        return orientation

    def as_tuple(self):
        return (int(self.x_axis), int(self.y_axis), int(self.z_axis))

    def is_identity(self):
        return not (self.x_axis or self.y_axis or self.z_axis)

    def describe(self):
        """Returns a short text listing the swaps this orientation applies."""
        steps = []
        if self.x_axis:
            steps.append("height<->depth")
        if self.y_axis:
            steps.append("width<->depth")
        if self.z_axis:
            steps.append("height<->width")
        return ", then ".join(steps) if steps else "as measured"

    def __str__(self):
        x, y, z = self.as_tuple()
        return f"({x},{y},{z})"


IDENTITY = Orientation(False, False, False)

# Candidates tried after the identity, in this exact order
SEARCH_ORDER = (
    Orientation(True, False, False),
    Orientation(True, True, False),
    Orientation(True, False, True),
    Orientation(False, False, True),
    Orientation(False, True, False),
)

CANONICAL_ORIENTATIONS = (IDENTITY,) + SEARCH_ORDER
