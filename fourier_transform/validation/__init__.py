"""Validation utilities.

This package contains *non-interactive* tooling to cross-check the engine
against ``numpy.fft`` and to run it from the command line.
"""
