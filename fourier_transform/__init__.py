"""Fourier Transform -- fixed-size radix-2 FFT engine reporting power spectra.

This package provides tools for:
- Configuring an engine once with a sample-size exponent (``N = 2 ** n``)
- Transforming real sample sequences of length ``<= N`` (zero-padded to ``N``)
- Reporting the per-bin power ``|X[k]|**2`` without normalisation
- Row-wise batch transforms and per-bin power summaries
- Cross-checking results against ``numpy.fft``

Key principles:
- Configuration is immutable and validated at construction
- Precomputed tables are read-only; every call owns its working buffer
- Failures are returned as structured error reports, never as partial output

Main subpackages:
- analysis: Transform engine, precomputed tables, batch helpers
- models: Configuration and result containers
- validation: Reference comparison and command-line entry point
"""

from .analysis.engine import FourierTransform, create
from .models.config import TransformConfiguration
from .models.results import (
    NO_OUTPUT_DESTINATION,
    SAMPLE_TOO_BIG,
    ErrorReport,
    PowerSpectrum,
    TransformFailed,
    TransformResult,
)

__all__ = [
    "FourierTransform",
    "create",
    "TransformConfiguration",
    "ErrorReport",
    "PowerSpectrum",
    "TransformFailed",
    "TransformResult",
    "SAMPLE_TOO_BIG",
    "NO_OUTPUT_DESTINATION",
]
