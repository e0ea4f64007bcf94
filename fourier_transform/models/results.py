"""Result containers for the transform engine.

A transform call either succeeds with a :class:`PowerSpectrum` or fails with an
:class:`ErrorReport`; :class:`TransformResult` carries exactly one of the two.

Error kinds keep their historical numeric identifiers so that callers that
switch on codes keep working:

======================= ====
kind                    code
======================= ====
``SampleTooBig``        401
``NoOutputDestination`` 402
======================= ====
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

import numpy as np
import pandas as pd


ErrorKind = Literal["SampleTooBig", "NoOutputDestination"]

# Stable external error codes
SAMPLE_TOO_BIG = 401
NO_OUTPUT_DESTINATION = 402

ERROR_CODES: Dict[str, int] = {
    "SampleTooBig": SAMPLE_TOO_BIG,
    "NoOutputDestination": NO_OUTPUT_DESTINATION,
}


@dataclass(frozen=True)
class ErrorReport:
    """Why a transform call failed.

    Attributes
    ----------
    kind:
        One of ``"SampleTooBig"`` or ``"NoOutputDestination"``.
    message:
        Human-readable detail (lengths involved, sink type, ...).
    """

    kind: ErrorKind
    message: str = ""

    def __post_init__(self) -> None:
        if self.kind not in ERROR_CODES:
            raise ValueError(f"Unknown error kind {self.kind!r}; expected one of {sorted(ERROR_CODES)}")

    @property
    def code(self) -> int:
        return ERROR_CODES[self.kind]

    def __str__(self) -> str:
        txt = f"{self.kind} ({self.code})"
        return f"{txt}: {self.message}" if self.message else txt


class TransformFailed(ValueError):
    """Raised when a failed :class:`TransformResult` is unwrapped."""

    def __init__(self, report: ErrorReport) -> None:
        super().__init__(str(report))
        self.report = report

    @property
    def kind(self) -> str:
        return self.report.kind

    @property
    def code(self) -> int:
        return self.report.code


@dataclass(frozen=True)
class PowerSpectrum:
    """Unnormalised power per frequency bin.

    Attributes
    ----------
    power:
        Real array of shape ``(N,)`` with ``power[k] = |X[k]|**2``. All entries are >= 0.
        The array belongs to the caller; the engine keeps no reference to it.
    n_samples:
        Length of the input before zero-padding (``0 <= n_samples <= N``).
    warnings:
        Notes collected during the call (e.g. zero-padding).
    """

    power: np.ndarray
    n_samples: int
    warnings: Tuple[str, ...] = ()

    @property
    def n_bins(self) -> int:
        return int(self.power.shape[0])

    @property
    def total_power(self) -> float:
        return float(np.sum(self.power))

    def one_sided(self) -> np.ndarray:
        """Bins ``0..N/2`` inclusive.

        For real input, bins above Nyquist mirror the lower ones, so this half holds
        all distinct content. For ``N == 1`` the single DC bin is returned.
        """
        return self.power[: self.n_bins // 2 + 1].copy()

    def bin_frequencies(self, sample_rate_hz: float) -> np.ndarray:
        """Frequency of each bin, ``k * fs / N`` for ``k = 0..N-1``."""
        fs = float(sample_rate_hz)
        if not np.isfinite(fs) or fs <= 0.0:
            raise ValueError(f"sample_rate_hz must be finite and > 0, got {sample_rate_hz}")
        return np.arange(self.n_bins, dtype=float) * (fs / float(self.n_bins))

    def to_frame(self, *, sample_rate_hz: Optional[float] = None) -> pd.DataFrame:
        """Tabular view with columns ``bin``, ``power`` and optionally ``frequency_hz``."""
        df = pd.DataFrame(
            {
                "bin": np.arange(self.n_bins, dtype=int),
                "power": np.asarray(self.power, dtype=float),
            }
        )
        if sample_rate_hz is not None:
            df.insert(1, "frequency_hz", self.bin_frequencies(sample_rate_hz))
        return df


@dataclass(frozen=True)
class TransformResult:
    """Discriminated result of one transform call.

    Exactly one of ``spectrum`` and ``error`` is set. The object is truthy on
    success, so ``if engine.transform_1d(x, out): ...`` reads like a boolean return.
    """

    spectrum: Optional[PowerSpectrum] = None
    error: Optional[ErrorReport] = None

    def __post_init__(self) -> None:
        if (self.spectrum is None) == (self.error is None):
            raise ValueError("TransformResult requires exactly one of spectrum or error")

    @classmethod
    def success(cls, spectrum: PowerSpectrum) -> TransformResult:
        return cls(spectrum=spectrum)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str = "") -> TransformResult:
        return cls(error=ErrorReport(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> PowerSpectrum:
        """Return the spectrum, or raise :class:`TransformFailed` with the error report."""
        if self.error is not None:
            raise TransformFailed(self.error)
        assert self.spectrum is not None
        return self.spectrum
