# src/main.py
import os
import logging
import argparse
from pathlib import Path

from config import BoxPackerConfig
from environment.errors import DomainError, InvalidDimension
from evals.evaluate_search import evaluate_search
from packing.search import evaluate_orientations
from packing.session import BoxPacker
from utils.testsets import make_test_sets, save_test_sets, load_test_sets


# ---------------------------- helpers ---------------------------------
def _fmt_dims(prism, units: str) -> str:
    return f"H={prism.height:g} W={prism.width:g} D={prism.depth:g} ({units})"


def _configure_logging(cfg: BoxPackerConfig):
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# --------------------------- commands ---------------------------------
def cmd_pack(container_dims, product_dims, plot_path: str | None, gif_path: str | None, cfg: BoxPackerConfig):
    """
    Find and report the best orientation for one container/product pair.
    """
    try:
        packer = BoxPacker.from_dimensions(container_dims, product_dims)
    except InvalidDimension as e:
        print(f"❌ {e}")
        return 2

    container = packer.container.dimensions
    product = packer.product.dimensions
    print(f"📦 Container: {_fmt_dims(container, cfg.units)}")
    print(f"📦 Product:   {_fmt_dims(product, cfg.units)}")

    try:
        candidates = evaluate_orientations(container, product)
        result = packer.pack()
    except DomainError as e:
        print(f"❌ {e}")
        return 2

    print("\n🔄 Orientations:")
    for orientation, count in candidates:
        print(f"  {orientation}  {orientation.describe():<40} -> {count} units")

    print(f"\n✅ Optimal orientation: {result.orientation} ({result.orientation.describe()})")
    print(f"   Rotated product: {_fmt_dims(result.rotated, cfg.units)}")
    print(f"   Packable units: {result.packable_units} "
          f"({result.units_per_layer} per layer x {result.layers} layers)")
    print(f"   Volume used: {result.utilization:.2f}%")

    if plot_path or gif_path:
        # matplotlib is only imported when a plot or GIF is requested
        from utils.visualization import plot_packing, create_layer_gif

        if plot_path:
            Path(plot_path).parent.mkdir(parents=True, exist_ok=True)
            plot_packing(container, result.rotated, save_path=plot_path,
                         title=f"{result.packable_units} units, orientation {result.orientation}",
                         max_units=cfg.max_plot_units)
            print(f"🖼️ Plot saved to {plot_path}")
        if gif_path:
            Path(gif_path).parent.mkdir(parents=True, exist_ok=True)
            create_layer_gif(container, result.rotated, gif_name=gif_path,
                             fps=cfg.gif_fps, max_units=cfg.max_plot_units,
                             max_frames=cfg.max_gif_frames)
            print(f"🎞️ GIF saved to {gif_path}")

    return 0


def cmd_evaluate(tests: int, seed: int, scenarios_path: str | None, save_path: str | None):
    """
    Compare the six-orientation search with an exhaustive permutation search
    on a set of random (or loaded) scenarios.
    """
    if scenarios_path:
        scenarios = load_test_sets(scenarios_path)
    else:
        scenarios = make_test_sets(seed=seed, n_scenarios=tests)
    if save_path:
        save_test_sets(save_path, scenarios)

    print(f"\n🤖 Evaluating orientation search on {len(scenarios)} scenarios:")
    report = evaluate_search(scenarios)
    for i, r in enumerate(report["results"]):
        print(f"Test {i+1}: search = {r['search_count']}, exhaustive = {r['exhaustive_count']}, "
              f"orientation = {r['orientation']}, volume = {r['utilization']:.2f}%")

    print(f"\n📊 Agreement: {report['agreement'] * 100:.1f}%")
    print(f"📊 Mean volume used: {report['mean_utilization']:.2f}%")
    if report["mismatches"]:
        print(f"⚠️ Mismatched scenarios: {report['mismatches']}")
        return 1

    print("✅ Evaluation finished.")
    return 0


# ----------------------------- CLI ------------------------------------
def main(argv=None):
    """
    CLI with two independent commands:
      - pack     : find the best orientation for one container/product
      - evaluate : check the search against an exhaustive permutation search
    """
    cfg = BoxPackerConfig.from_env()

    parser = argparse.ArgumentParser(description="Box Packer: optimal product orientation")
    parser.add_argument("--log-level", default=cfg.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="cmd", required=True)

    # pack
    p_pack = sub.add_parser("pack", help="Find the optimal orientation")
    p_pack.add_argument("--container", type=float, nargs=3, required=True, metavar=("H", "W", "D"))
    p_pack.add_argument("--product", type=float, nargs=3, required=True, metavar=("H", "W", "D"))
    p_pack.add_argument("--plot", type=str, default=None, help="Save a 3D plot of the packing")
    p_pack.add_argument("--gif", type=str, default=None, help="Save a layer-by-layer GIF")

    # evaluate
    p_eval = sub.add_parser("evaluate", help="Compare the search with an exhaustive search")
    p_eval.add_argument("--tests", type=int, default=20)
    p_eval.add_argument("--seed", type=int, default=41)
    p_eval.add_argument("--scenarios", type=str, default=None, help="Load scenarios from a JSON file")
    p_eval.add_argument("--save", type=str, default=None, help="Save the scenarios to a JSON file")

    args = parser.parse_args(argv)
    cfg.log_level = args.log_level
    _configure_logging(cfg)

    if args.cmd == "pack":
        plot = args.plot
        if plot and not os.path.dirname(plot):
            plot = os.path.join(cfg.output_dir, plot)
        gif = args.gif
        if gif and not os.path.dirname(gif):
            gif = os.path.join(cfg.output_dir, gif)
        return cmd_pack(args.container, args.product, plot, gif, cfg)
    else:
        return cmd_evaluate(args.tests, args.seed, args.scenarios, args.save)


if __name__ == "__main__":
    raise SystemExit(main())
