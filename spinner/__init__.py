"""Spin-coupling algebra, symbolic and numerical model parameters, and nonlinear solvers for spin systems."""

__version__ = "0.1.0"