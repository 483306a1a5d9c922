import argparse
import os

import numpy as np
from config import get_cfg_defaults

from whisker.interpret.backend import MatplotlibBackend, ShapeStyle
from whisker.interpret.box_plot import create_boxplot
from whisker.interpret.chart import Cartesian2d, CategoryAxis, LinearAxis
from whisker.utils.logger import construct_logger
from whisker.utils.seed import set_seed


def arg_parse():
    """Parsing arguments"""
    parser = argparse.ArgumentParser(description="Boxplots with Tukey outliers of synthetic samples")
    parser.add_argument("--cfg", default="", help="path to config file", type=str)
    parser.add_argument("--show", action="store_true", help="show the figure after saving it")
    args = parser.parse_args()
    return args


def make_samples(cfg, rng):
    samples = {}
    for i, group in enumerate(cfg.DATASET.GROUPS):
        loc = cfg.DATASET.LOC + i * cfg.DATASET.LOC_STEP
        sample = rng.normal(loc, cfg.DATASET.SCALE, cfg.DATASET.SAMPLE_SIZE)
        signs = rng.choice([-1.0, 1.0], cfg.DATASET.NUM_OUTLIERS)
        outliers = loc + signs * cfg.DATASET.OUTLIER_DISTANCE * cfg.DATASET.SCALE
        samples[group] = np.concatenate([sample, outliers])
    return samples


def main():
    args = arg_parse()

    # ---- set configs and logger ----
    cfg = get_cfg_defaults()
    if args.cfg:
        cfg.merge_from_file(args.cfg)
    cfg.freeze()
    logger = construct_logger("boxplot_outliers", cfg.OUTPUT.OUT_DIR, cfg.OUTPUT.LOG_TO_TERMINAL)
    logger.info(f"Using config:\n{cfg}")

    # ---- set samples ----
    rng = set_seed(cfg.DATASET.SEED)
    samples = make_samples(cfg, rng)

    # ---- set boxplots ----
    style = ShapeStyle(color=cfg.PLOT.COLOR, stroke_width=cfg.PLOT.STROKE_WIDTH)
    plots = []
    for group, sample in samples.items():
        plot = create_boxplot(
            group,
            sample,
            orientation=cfg.PLOT.ORIENTATION,
            style=style,
            width=cfg.PLOT.WIDTH,
            whisker_width=cfg.PLOT.WHISKER_WIDTH,
            offset=cfg.PLOT.OFFSET,
        )
        summary = plot.summary
        logger.debug(
            f"{group}: min={summary.minimum:.3f} Q1={summary.lower_quartile:.3f} median={summary.median:.3f} "
            f"Q3={summary.upper_quartile:.3f} max={summary.maximum:.3f} outliers={list(summary.outliers)}"
        )
        plots.append(plot)

    # ---- set coordinates and draw ----
    all_values = np.concatenate(list(samples.values()))
    padding = (all_values.max() - all_values.min()) * cfg.PLOT.VALUE_PADDING
    value_axis = LinearAxis(all_values.min() - padding, all_values.max() + padding)
    key_axis = CategoryAxis(cfg.DATASET.GROUPS)
    if cfg.PLOT.ORIENTATION.lower() == "vertical":
        x_axis, y_axis = key_axis, value_axis
    else:
        x_axis, y_axis = value_axis, key_axis

    backend = MatplotlibBackend(cfg.PLOT.CANVAS_WIDTH, cfg.PLOT.CANVAS_HEIGHT, dpi=cfg.OUTPUT.DPI)
    coord = Cartesian2d.on(backend, x_axis, y_axis, margin=cfg.PLOT.MARGIN)
    for plot in plots:
        coord.draw(plot, backend)

    save_path = os.path.join(cfg.OUTPUT.OUT_DIR, cfg.OUTPUT.FILE_NAME)
    backend.present(save_path=save_path, show=args.show)
    backend.close()
    logger.info(f"Boxplots of {len(plots)} group(s) saved to {save_path}")


if __name__ == "__main__":
    main()
