"""Fourier epicycles — DFT decomposition of closed curves into rotating vectors."""

__version__ = "0.1.0"
