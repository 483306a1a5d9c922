# Global settings for tests. Run before any test
import matplotlib
import pytest

matplotlib.use("Agg")  # Use non-interactive backend for tests


@pytest.fixture(scope="session")
def worked_sample():
    return [7, 15, 36, 39, 40, 41]


@pytest.fixture(scope="session")
def sample_with_outlier(worked_sample):
    return worked_sample + [1000]


# Backend-space projection of a vertical boxplot: min, Q1, median, Q3, max, then two outliers
@pytest.fixture
def projected_points():
    return [(100.0, 500.0), (100.0, 400.0), (100.0, 350.0), (100.0, 300.0), (100.0, 200.0), (100.0, 50.0), (100.0, 20.0)]
