from __future__ import annotations

import pytest
from pytest_benchmark.fixture import BenchmarkFixture

import sexp
from benchmarks.inputs import INPUTS, LARGE, MEDIUM

_NO_CAST = sexp.Options(cast_numbers=False)


@pytest.mark.parametrize("data", INPUTS)
def test_parse(benchmark: BenchmarkFixture, data: str) -> None:
    benchmark(sexp.parse, data)


@pytest.mark.parametrize("data", [
    pytest.param(MEDIUM, id="medium"),
    pytest.param(LARGE, id="large"),
])
def test_parse_without_number_casting(benchmark: BenchmarkFixture, data: str) -> None:
    benchmark(sexp.parse, data, _NO_CAST)


def test_parse_bytes(benchmark: BenchmarkFixture) -> None:
    benchmark(sexp.parse, LARGE.encode("utf-8"))
