import numpy as np
import pytest

from whisker.prepdata.boxplot_stats import BoxplotSummary, percentile_of_sorted, summarize


class TestPercentileOfSorted:
    """Test linear-interpolation percentiles of sorted samples."""

    def test_single_value_ignores_pct(self):
        assert percentile_of_sorted([6], 0) == 6
        assert percentile_of_sorted([6], 37.5) == 6
        assert percentile_of_sorted([6], 100) == 6

    def test_hundred_returns_last(self):
        assert percentile_of_sorted([1, 2, 3, 10], 100) == 10

    def test_zero_returns_first(self):
        assert percentile_of_sorted([1, 2, 3, 10], 0) == 1

    @pytest.mark.parametrize("pct, expected", [(25, 20.25), (50, 37.5), (75, 39.75)])
    def test_interpolation(self, worked_sample, pct, expected):
        assert percentile_of_sorted(worked_sample, pct) == pytest.approx(expected)

    @pytest.mark.parametrize("pct", [0, 10, 33.3, 50, 90, 99.9])
    def test_matches_numpy_linear_method(self, pct):
        values = np.sort(np.random.default_rng(0).normal(size=17))
        assert percentile_of_sorted(values, pct) == pytest.approx(np.percentile(values, pct))

    def test_empty_sample_raises(self):
        with pytest.raises(ValueError, match="non-empty"):
            percentile_of_sorted([], 50)

    @pytest.mark.parametrize("pct", [-0.1, 100.5, float("nan")])
    def test_pct_out_of_range_raises(self, pct):
        with pytest.raises(ValueError, match="pct must lie within"):
            percentile_of_sorted([1, 2, 3], pct)


class TestSummarize:
    """Test the five-number summary and Tukey outliers."""

    def test_singleton(self):
        summary = summarize([6])
        assert summary == BoxplotSummary(6.0, 6.0, 6.0, 6.0, 6.0, ())

    def test_worked_example(self, worked_sample):
        summary = summarize(worked_sample)
        assert summary.lower_quartile == pytest.approx(20.25)
        assert summary.median == pytest.approx(37.5)
        assert summary.upper_quartile == pytest.approx(39.75)
        assert summary.iqr == pytest.approx(19.5)
        assert summary.lower_fence == pytest.approx(-9.0)
        assert summary.upper_fence == pytest.approx(69.0)
        assert summary.minimum == 7
        assert summary.maximum == 41
        assert summary.outliers == ()

    def test_outlier_extraction(self, sample_with_outlier):
        summary = summarize(sample_with_outlier)
        assert summary.outliers == (1000.0,)
        assert summary.minimum == 7
        assert summary.maximum == 41
        assert summary.median == pytest.approx(39.0)

    def test_outliers_on_both_sides_are_ascending(self):
        sample = [50, -300, 10, 11, 12, 13, 14, 15, 16, 200]
        summary = summarize(sample)
        assert summary.outliers == (-300.0, 50.0, 200.0)
        assert summary.minimum == 10
        assert summary.maximum == 16

    def test_summary_holds_plain_floats(self):
        summary = summarize(np.array([-300, 10, 11, 12, 13, 14, 15, 16, 50, 200]))
        assert all(type(o) is float for o in summary.outliers)
        assert type(summary.minimum) is float
        assert type(summary.maximum) is float

    def test_outliers_lie_outside_fences(self):
        sample = np.random.default_rng(1).standard_cauchy(200)
        summary = summarize(sample)
        assert len(summary.outliers) > 0
        for o in summary.outliers:
            assert o < summary.lower_fence or o > summary.upper_fence
        inliers = [v for v in sample if summary.lower_fence <= v <= summary.upper_fence]
        assert summary.minimum == min(inliers)
        assert summary.maximum == max(inliers)
        assert len(inliers) + len(summary.outliers) == len(sample)

    @pytest.mark.parametrize("seed", range(5))
    def test_monotonic(self, seed):
        rng = np.random.default_rng(seed)
        sample = rng.exponential(size=rng.integers(1, 60))
        summary = summarize(sample)
        assert summary.minimum <= summary.lower_quartile <= summary.median <= summary.upper_quartile
        assert summary.upper_quartile <= summary.maximum

    def test_order_invariance(self, sample_with_outlier):
        shuffled = list(sample_with_outlier)
        np.random.default_rng(2).shuffle(shuffled)
        assert summarize(shuffled) == summarize(sample_with_outlier)
        assert summarize(reversed(sample_with_outlier)) == summarize(sample_with_outlier)

    def test_accepts_numpy_and_ints(self):
        assert summarize(np.array([1, 2, 3, 4], dtype=np.int32)) == summarize([1.0, 2.0, 3.0, 4.0])

    def test_values_narrowed_to_float32(self, worked_sample):
        values = summarize(worked_sample).values()
        assert values.dtype == np.float32
        np.testing.assert_allclose(values, [7, 20.25, 37.5, 39.75, 41])

    def test_summary_is_immutable(self):
        summary = summarize([1, 2, 3])
        with pytest.raises(AttributeError):
            summary.median = 10

    @pytest.mark.parametrize(
        "sample, match",
        [
            ([], "empty"),
            ([1.0, float("nan"), 2.0], "NaN"),
            ([1.0, float("inf")], "NaN or infinite"),
            ([[1, 2], [3, 4]], "one-dimensional"),
        ],
    )
    def test_invalid_sample_raises(self, sample, match):
        with pytest.raises(ValueError, match=match):
            summarize(sample)
