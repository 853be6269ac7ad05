"""Performance benchmarks for densepath.

Compares the two all-pairs strategies on random graphs up to the vertex bound.
"""
