"""
Five-number summary and Tukey-fence outlier extraction for box-and-whisker plots.

Functions:
    percentile_of_sorted: Linearly interpolated percentile of an ascending sample
    summarize: Reduce a raw sample to a BoxplotSummary

Classes:
    BoxplotSummary: Immutable five-number summary with the outliers it excluded
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np

# Tukey's multiplier for the inter-quartile range
FENCE_FACTOR = 1.5


@dataclass(frozen=True)
class BoxplotSummary:
    """
    Five-number summary of a sample plus the values rejected by Tukey's fences.

    Attributes:
        minimum (float): Smallest value lying inside the fences.
        lower_quartile (float): Interpolated 25th percentile (Q1).
        median (float): Interpolated 50th percentile (Q2).
        upper_quartile (float): Interpolated 75th percentile (Q3).
        maximum (float): Largest value lying inside the fences.
        outliers (Tuple[float, ...]): Values outside the fences, in ascending order.

    Note:
        Build instances with :func:`summarize`; the constructor performs no statistics.
    """

    minimum: float
    lower_quartile: float
    median: float
    upper_quartile: float
    maximum: float
    outliers: Tuple[float, ...] = ()

    @property
    def iqr(self) -> float:
        return self.upper_quartile - self.lower_quartile

    @property
    def lower_fence(self) -> float:
        return self.lower_quartile - FENCE_FACTOR * self.iqr

    @property
    def upper_fence(self) -> float:
        return self.upper_quartile + FENCE_FACTOR * self.iqr

    def values(self) -> np.ndarray:
        """
        The five summary numbers narrowed to render precision.

        Returns:
            np.ndarray: float32 array ``[minimum, Q1, median, Q3, maximum]``.
        """
        return np.array(
            [self.minimum, self.lower_quartile, self.median, self.upper_quartile, self.maximum], dtype=np.float32
        )


def percentile_of_sorted(sorted_values: Union[np.ndarray, Iterable[float]], pct: float) -> float:
    """
    Extract the ``pct`` percentile of an ascending sample using linear interpolation.

    The rank is ``pct / 100 * (n - 1)``; the result interpolates between the two
    neighbouring order statistics. A single-element sample returns that element for any
    ``pct``, and ``pct == 100`` returns the last element.

    Args:
        sorted_values (array-like): Non-empty sample sorted in ascending order.
        pct (float): Percentile in the closed interval [0, 100].

    Returns:
        float: The interpolated percentile.

    Raises:
        ValueError: If the sample is empty or ``pct`` lies outside [0, 100].
    """
    s = np.asarray(sorted_values, dtype=np.float64)
    if s.size == 0:
        raise ValueError("percentile_of_sorted requires a non-empty sample")
    if s.size == 1:
        return float(s[0])
    if not 0.0 <= pct <= 100.0:
        raise ValueError(f"pct must lie within [0, 100], but got {pct}")
    if abs(pct - 100.0) < np.finfo(np.float64).eps:
        return float(s[-1])

    rank = (pct / 100.0) * (s.size - 1)
    lower_rank = np.floor(rank)
    d = rank - lower_rank
    n = int(lower_rank)
    lo = s[n]
    hi = s[n + 1]
    return float(lo + (hi - lo) * d)


def summarize(sample: Iterable[float]) -> BoxplotSummary:
    """
    Reduce a raw numeric sample to a five-number summary and an outlier set.

    Quartiles come from :func:`percentile_of_sorted`. Values below ``Q1 - 1.5 * IQR`` or above
    ``Q3 + 1.5 * IQR`` are outliers; the minimum and maximum are taken over the remaining values.

    Args:
        sample (array-like): Non-empty one-dimensional collection of finite real numbers.
            The order of the sample does not matter.

    Returns:
        BoxplotSummary: The summary of ``sample``.

    Raises:
        ValueError: If ``sample`` is empty, not one-dimensional, or holds NaN/infinite values.

    Examples:
        >>> summary = summarize([7, 15, 36, 39, 40, 41])
        >>> summary.lower_quartile, summary.median, summary.upper_quartile
        (20.25, 37.5, 39.75)
    """
    if not isinstance(sample, np.ndarray):
        sample = list(sample)
    values = np.asarray(sample, dtype=np.float64)
    if values.ndim != 1:
        raise ValueError(f"sample is expected to be one-dimensional, but got an array in shape {values.shape}")
    if values.size == 0:
        raise ValueError("Cannot summarize an empty sample")
    if not np.all(np.isfinite(values)):
        raise ValueError("sample must not contain NaN or infinite values")

    values = np.sort(values)

    lower = percentile_of_sorted(values, 25.0)
    median = percentile_of_sorted(values, 50.0)
    upper = percentile_of_sorted(values, 75.0)
    iqr = upper - lower
    lower_fence = lower - FENCE_FACTOR * iqr
    upper_fence = upper + FENCE_FACTOR * iqr

    mask = (values < lower_fence) | (values > upper_fence)
    outliers = values[mask]
    inliers = values[~mask]

    # the median always lies inside its own fences
    if inliers.size == 0:
        raise RuntimeError("No value of the sample lies within the Tukey fences")

    logging.debug(
        f"Summarized {values.size} values: Q1={lower}, median={median}, Q3={upper}, {len(outliers)} outlier(s)"
    )

    return BoxplotSummary(
        minimum=float(inliers[0]),
        lower_quartile=lower,
        median=median,
        upper_quartile=upper,
        maximum=float(inliers[-1]),
        outliers=tuple(float(o) for o in outliers),
    )
