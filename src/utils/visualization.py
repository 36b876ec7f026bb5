import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection
import os
import imageio.v2 as imageio
import shutil
import tempfile
from itertools import islice

from packing.search import grid_counts


def _cuboid_faces(x, y, z, w, d, h):
    """Return the 6 faces (4 vertices each) of an axis-aligned cuboid."""
    r = [
        [x, x + w], # X range (width)
        [y, y + d], # Y range (depth)
        [z, z + h]  # Z range (height)
    ]
    vertices = [
        [r[0][0], r[1][0], r[2][0]],
        [r[0][1], r[1][0], r[2][0]],
        [r[0][1], r[1][1], r[2][0]],
        [r[0][0], r[1][1], r[2][0]],
        [r[0][0], r[1][0], r[2][1]],
        [r[0][1], r[1][0], r[2][1]],
        [r[0][1], r[1][1], r[2][1]],
        [r[0][0], r[1][1], r[2][1]],
    ]
    return [
        [vertices[0], vertices[1], vertices[2], vertices[3]], # bottom
        [vertices[4], vertices[5], vertices[6], vertices[7]], # top
        [vertices[0], vertices[1], vertices[5], vertices[4]], # front
        [vertices[2], vertices[3], vertices[7], vertices[6]], # back
        [vertices[1], vertices[2], vertices[6], vertices[5]], # right
        [vertices[4], vertices[7], vertices[3], vertices[0]]  # left
    ]


def grid_positions(container, unit, max_layers=None):
    """
    List the (x, y, z) corner of every product in the packed grid,
    layer by layer from the container floor.

    Parameters:
    - container (Prism): container dimensions
    - unit (Prism): product dimensions in the packing orientation
    - max_layers (int, optional): stop after this many layers

    Yields:
    - tuple[float, float, float]
    """
    columns, rows, layers = grid_counts(container, unit)
    if max_layers is not None:
        layers = min(layers, max_layers)
    for k in range(layers):
        for r in range(rows):
            for c in range(columns):
                yield (c * unit.width, r * unit.depth, k * unit.height)


def plot_packing(container, unit, save_path=None, title="", max_units=500, max_layers=None):
    """
    Visualize the container and the grid of packed products in 3D.

    X is the container width, Y its depth and Z its height.

    Parameters:
    - container (Prism): container dimensions
    - unit (Prism): product dimensions in the packing orientation
    - save_path (str, optional): if provided, save the plot as an image to this path
    - title (str, optional): title to display on the figure
    - max_units (int): at most this many products are drawn
    - max_layers (int, optional): only draw the first N layers

    Returns:
    - int: number of products drawn
    """
    fig = plt.figure()
    ax = fig.add_subplot(111, projection='3d')
    ax.set_title(title)

    ax.set_xlim([0, container.width])
    ax.set_ylim([0, container.depth])
    ax.set_zlim([0, container.height])
    ax.set_xlabel('Width')
    ax.set_ylabel('Depth')
    ax.set_zlabel('Height')

    # Container outline
    outline = Poly3DCollection(
        _cuboid_faces(0, 0, 0, container.width, container.depth, container.height),
        linewidths=1, edgecolors='gray', alpha=0.05,
    )
    ax.add_collection3d(outline)

    colors = ['red', 'green', 'blue', 'yellow', 'cyan', 'magenta', 'orange', 'purple']

    drawn = 0
    for x, y, z in islice(grid_positions(container, unit, max_layers=max_layers), max_units):
        box3d = Poly3DCollection(
            _cuboid_faces(x, y, z, unit.width, unit.depth, unit.height),
            linewidths=1, edgecolors='black', alpha=0.6,
        )
        # one color per layer
        box3d.set_facecolor(colors[int(round(z / unit.height)) % len(colors)])
        ax.add_collection3d(box3d)
        drawn += 1

    if save_path:
        plt.savefig(save_path)
    else:
        plt.show()
    plt.close(fig)
    return drawn


def create_layer_gif(container, unit, gif_name="packing_layers.gif", fps=2, max_units=500, max_frames=20):
    """
    Render the packing one layer at a time and compile the frames into a GIF.

    Parameters:
    - container (Prism): container dimensions
    - unit (Prism): product dimensions in the packing orientation
    - gif_name (str): output GIF filename
    - fps (int): frames per second
    - max_units (int): cap on products drawn per frame
    - max_frames (int): only the first N layers get a frame

    Returns:
    - int: number of frames written
    """
    _, _, layers = grid_counts(container, unit)
    n_frames = min(layers, max_frames)

    with tempfile.TemporaryDirectory(prefix="layer_gif_frames_") as gif_dir:
        # an empty container frame when nothing fits
        for k in range(max(n_frames, 1)):
            frame_path = os.path.join(gif_dir, f"frame_{k:04d}.png")
            plot_packing(container, unit, save_path=frame_path,
                         title=f"Layer {min(k + 1, layers)}/{layers}",
                         max_units=max_units, max_layers=k + 1 if layers else 0)

        return finalize_gif(gif_dir, gif_name, fps=fps, cleanup=False)


def finalize_gif(gif_dir, gif_name, fps=2, cleanup=True):
    """
    Compile all saved .png frames from a folder into a single GIF file
    and clean up the temporary frame directory.

    Parameters:
    - gif_dir (str): path to the folder containing saved frames
    - gif_name (str): filename for the output GIF
    - fps (int): frames per second of the output GIF
    - cleanup (bool): delete gif_dir afterwards

    Returns:
    - int: number of frames in the GIF
    """
    if not os.path.exists(gif_dir):
        return 0

    frames = []
    files = sorted([f for f in os.listdir(gif_dir) if f.endswith(".png")])

    for file_name in files:
        image_path = os.path.join(gif_dir, file_name)
        frames.append(imageio.imread(image_path))

    imageio.mimsave(gif_name, frames, duration=1000.0 / fps)
    if cleanup:
        shutil.rmtree(gif_dir)
    return len(frames)
