"""
Default configurations for drawing boxplots with Tukey outliers of synthetic samples
"""

from yacs.config import CfgNode as CN

# -----------------------------------------------------------------------------
# Config definition
# -----------------------------------------------------------------------------

_C = CN()

# -----------------------------------------------------------------------------
# Dataset
# -----------------------------------------------------------------------------
_C.DATASET = CN()
_C.DATASET.SEED = 2020
_C.DATASET.GROUPS = ["A", "B", "C"]
_C.DATASET.SAMPLE_SIZE = 50
_C.DATASET.LOC = 50.0  # mean of the first group, shifted by LOC_STEP for every following group
_C.DATASET.LOC_STEP = 10.0
_C.DATASET.SCALE = 8.0
_C.DATASET.NUM_OUTLIERS = 2  # per group, drawn far outside the Tukey fences
_C.DATASET.OUTLIER_DISTANCE = 6.0  # in multiples of SCALE

# ---------------------------------------------------------------------------- #
# Plot
# ---------------------------------------------------------------------------- #
_C.PLOT = CN()
_C.PLOT.ORIENTATION = "vertical"  # options=["vertical", "horizontal"]
_C.PLOT.WIDTH = 20  # box width in pixels
_C.PLOT.WHISKER_WIDTH = 0.5  # fraction of WIDTH
_C.PLOT.OFFSET = 0.0  # pixels along the key axis
_C.PLOT.COLOR = "black"
_C.PLOT.STROKE_WIDTH = 1
_C.PLOT.CANVAS_WIDTH = 1024
_C.PLOT.CANVAS_HEIGHT = 768
_C.PLOT.MARGIN = 40
_C.PLOT.VALUE_PADDING = 0.05  # fraction of the value range added on both ends

# ---------------------------------------------------------------------------- #
# Output
# ---------------------------------------------------------------------------- #
_C.OUTPUT = CN()
_C.OUTPUT.OUT_DIR = "./outputs"
_C.OUTPUT.FILE_NAME = "boxplot.png"
_C.OUTPUT.DPI = 100
_C.OUTPUT.LOG_TO_TERMINAL = True


def get_cfg_defaults():
    return _C.clone()
