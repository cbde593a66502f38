"""Classic numerical methods: linear systems, quadrature, approximation, interpolation and ODEs."""

__version__ = "0.1.0"