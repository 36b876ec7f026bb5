from environment.prism import Prism


def rotate(prism, orientation):
    """
    Rotate a prism into the given orientation.
    The three swaps are applied in order, each one on the result of the previous.

    Args:
    - prism (Prism): dimensions as measured
    - orientation (Orientation): swaps to apply

    Returns:
    - Prism: a new prism with the rotated (height, width, depth)
    """
    h, w, d = prism.height, prism.width, prism.depth

    if orientation.x_axis:  # swap height and depth
        h, d = d, h
    if orientation.y_axis:  # swap width and depth
        w, d = d, w
    if orientation.z_axis:  # swap height and width
        h, w = w, h

    return Prism(height=h, width=w, depth=d)
