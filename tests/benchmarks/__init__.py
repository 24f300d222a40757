"""Resolver benchmarks: uses pytest-benchmark.

Run with::

    pytest tests/benchmarks/ -v --benchmark-sort=median

Without timing, as plain functional tests::

    pytest tests/benchmarks/ --benchmark-disable
"""
