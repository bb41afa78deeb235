from __future__ import annotations

import tracemalloc
from collections.abc import Callable
from typing import Any

import pytest
from pytest_benchmark.fixture import BenchmarkFixture

import sexp
from benchmarks.inputs import INPUTS


def _traced(func: Callable[[], Any], peaks: list[int]) -> Callable[[], Any]:
    def _run() -> Any:
        tracemalloc.start()
        try:
            result = func()
            _, peak = tracemalloc.get_traced_memory()
            peaks.append(peak)
            return result
        finally:
            tracemalloc.stop()

    return _run


@pytest.mark.parametrize("data", INPUTS)
def test_parse_peak_allocation(benchmark: BenchmarkFixture, data: str) -> None:
    peaks: list[int] = []
    benchmark(_traced(lambda: sexp.parse(data), peaks))
    if peaks:
        benchmark.extra_info["peak_alloc_bytes"] = peaks[-1]


@pytest.mark.parametrize("data", INPUTS)
def test_serialize_peak_allocation(benchmark: BenchmarkFixture, data: str) -> None:
    value = sexp.parse(data)
    peaks: list[int] = []
    benchmark(_traced(lambda: sexp.serialize(value), peaks))
    if peaks:
        benchmark.extra_info["peak_alloc_bytes"] = peaks[-1]
