"""Grids, bicubic sampling, simplex noise, FFT split tables, shader source assembly and small frame utilities."""

__version__ = "0.1.0"