"""Performance benchmarks for graphkit.

This package contains microbenchmarks comparing the three graph
representations on traversal and connectivity analysis.
"""
