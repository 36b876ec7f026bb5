import os
from dataclasses import dataclass


@dataclass
class BoxPackerConfig:
    """
    Runtime configuration for the box packer.

    Attributes:
        units: Label printed after every dimension (the packer does not convert units).
        log_level: Level passed to logging.basicConfig by the CLI.
        output_dir: Directory where plots and GIFs are written.
        gif_fps: Frames per second for layer GIFs.
        max_plot_units: Cap on the number of product cuboids drawn in one plot.
        max_gif_frames: Cap on the number of layers rendered into a GIF.
    """
    units: str = "in"
    log_level: str = "INFO"
    output_dir: str = "runs/plots"
    gif_fps: int = 2
    max_plot_units: int = 500
    max_gif_frames: int = 20

    @classmethod
    def from_env(cls):
        """Build a config, overriding defaults with BOXPACKER_* environment variables."""
        cfg = cls()
        cfg.units = os.environ.get("BOXPACKER_UNITS", cfg.units)
        cfg.log_level = os.environ.get("BOXPACKER_LOG_LEVEL", cfg.log_level).upper()
        cfg.output_dir = os.environ.get("BOXPACKER_OUTPUT_DIR", cfg.output_dir)
        cfg.gif_fps = int(os.environ.get("BOXPACKER_GIF_FPS", cfg.gif_fps))
        cfg.max_plot_units = int(os.environ.get("BOXPACKER_MAX_PLOT_UNITS", cfg.max_plot_units))
        cfg.max_gif_frames = int(os.environ.get("BOXPACKER_MAX_GIF_FRAMES", cfg.max_gif_frames))
        return cfg
