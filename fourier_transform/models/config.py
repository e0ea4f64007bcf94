"""Transform configuration -- the one parameter that sizes the engine.

A TransformConfiguration is frozen at construction.  It can be:

- Built directly (``TransformConfiguration(sample_size_exponent=3)``)
- Overridden via ``dataclasses.replace()`` (validation runs again)
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

DEFAULT_SAMPLE_SIZE_EXPONENT = 2

# 2**26 complex128 samples is already 1 GiB of working buffer.
MAX_SAMPLE_SIZE_EXPONENT = 26


@dataclass(frozen=True)
class TransformConfiguration:
    """Frozen configuration of a transform engine.

    Attributes
    ----------
    sample_size_exponent : int
        Exponent ``n`` of the transform length. Inputs may hold at most
        ``2 ** n`` samples. Must satisfy ``0 <= n <= MAX_SAMPLE_SIZE_EXPONENT``.
    """

    sample_size_exponent: int = DEFAULT_SAMPLE_SIZE_EXPONENT

    def __post_init__(self) -> None:
        n = self.sample_size_exponent
        # bool is an int subclass; True would silently mean n=1
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"sample_size_exponent must be an int, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"sample_size_exponent must be >= 0, got {n}")
        if n > MAX_SAMPLE_SIZE_EXPONENT:
            raise ValueError(
                f"sample_size_exponent {n} exceeds the memory bound {MAX_SAMPLE_SIZE_EXPONENT} "
                f"(2**{n} samples would need {16 << n} bytes of working buffer)"
            )

    @property
    def max_input_length(self) -> int:
        """Transform length ``N = 2 ** sample_size_exponent`` (always >= 1)."""
        return 1 << self.sample_size_exponent

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> TransformConfiguration:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        return cls(**dict(d))
