"""Adaptive dense/sparse grid container."""
