"""Setting seed for reproducible synthetic samples"""

import os
import random

import numpy as np


def set_seed(seed=1000):
    """Sets the seed of the random number generators used to draw synthetic samples.

    Args:
        seed (int, optional): The desired seed. Defaults to 1000.

    Returns:
        np.random.Generator: A numpy generator seeded with ``seed``.
    """
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)
    return np.random.default_rng(seed)
