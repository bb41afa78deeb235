"""Build configuration for the sexp package."""

from setuptools import setup

setup(
    name="sexp",
    version="0.1.0",
    description="S-expression parser and serializer with base64/hex blobs",
    python_requires=">=3.9",
    packages=["sexp"],
    package_dir={"sexp": "python/sexp"},
    package_data={"sexp": ["py.typed"]},
    extras_require={
        "test": ["pytest", "pytest-benchmark"],
    },
)
