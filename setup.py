#!/usr/bin/env python3
import re
from io import open
from os import path

from setuptools import find_packages, setup

# Dependencies with options for different user needs.
# Not all have a min-version specified. Specify when known or necessary (e.g. errors).

# Core dependencies used in the whisker API
install_requires = [
    "matplotlib>=3.5",  # in MatplotlibBackend only
    "numpy>=1.18.0",  # sure
]

# Dependencies for all examples
example_requires = [
    "yacs>=0.1.7",
]

# Full dependencies except for development
full_requires = example_requires

# Additional dependencies for development
dev_requires = full_requires + [
    "black",
    "coverage",
    "flake8",
    "flake8-print",
    "isort",
    "mypy",
    "pre-commit",
    "pytest",
    "pytest-cov",
]


# Get version
def read(*names, **kwargs):
    with open(path.join(path.dirname(__file__), *names), encoding=kwargs.get("encoding", "utf8")) as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


readme = read("README.md")
version = find_version("whisker", "__init__.py")


# Run the setup
setup(
    name="pywhisker",
    version=version,
    description="Box-and-whisker summaries with Tukey outliers and orientation-agnostic boxplot rendering",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("docs", "examples", "tests", "tests.*")),
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "example": example_requires,
        "full": full_requires,
        "dev": dev_requires,
    },
    license="MIT",
    keywords="statistics, boxplot, box and whisker, outliers, visualization",
    classifiers=[
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Visualization",
        "Topic :: Software Development :: Libraries",
        "Natural Language :: English",
    ],
)
