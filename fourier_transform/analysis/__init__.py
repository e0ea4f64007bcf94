"""Transform analysis package.

Design principle:
  - The engine owns only read-only tables built from its configuration.
  - Every call works on its own buffer and returns a result value.

Accordingly, the batch helpers here are thin loops over the 1D engine and add
no state of their own.
"""

from .engine import FourierTransform, create
from .batch import PowerPerRow, averaged_spectrum, power_per_row

__all__ = [
    "FourierTransform",
    "create",
    "PowerPerRow",
    "power_per_row",
    "averaged_spectrum",
]
