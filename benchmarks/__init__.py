"""Performance benchmarks for normopt.

This package contains microbenchmarks for the solver hot paths: the
tableau simplex and the minimum-norm reductions built on it.
"""
