"""Row-wise power spectra and their row-averaged one-sided spectrum.

Functions
---------
power_per_row
    Apply the engine's 1D transform to every row of a 2D array.
averaged_spectrum
    Average the per-row spectra bin by bin and tabulate bins ``0..N/2``.

This is repeated 1D transforms over independent rows, not a 2D DFT.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from fourier_transform.analysis.engine import FourierTransform
from fourier_transform.models.results import ErrorReport, PowerSpectrum, TransformFailed


@dataclass(frozen=True)
class PowerPerRow:
    """Power spectra per row.

    Attributes
    ----------
    power:
        Real array of shape ``(n_rows, N)``.
    n_samples:
        Row length before zero-padding.
    """

    power: np.ndarray
    n_samples: int

    @property
    def n_rows(self) -> int:
        return int(self.power.shape[0])

    @property
    def n_bins(self) -> int:
        return int(self.power.shape[1])


def power_per_row(engine: FourierTransform, rows: np.ndarray) -> PowerPerRow:
    """Compute the power spectrum of every row.

    Parameters
    ----------
    engine:
        Configured engine; ``N = engine.max_input_length``.
    rows:
        Real array of shape ``(n_rows, L)`` with ``L <= N``.

    Returns
    -------
    PowerPerRow

    Raises
    ------
    TransformFailed
        With kind ``"SampleTooBig"`` if ``L > N``.
    ValueError
        If ``rows`` is not a real 2D array.
    """
    x = np.asarray(rows)
    if x.ndim != 2:
        raise ValueError(f"rows must be 2D (n_rows, L), got shape {x.shape}")

    n_rows, L = x.shape
    n = engine.max_input_length
    if L > n:
        raise TransformFailed(
            ErrorReport(kind="SampleTooBig", message=f"rows have {L} samples, at most {n} allowed")
        )

    power = np.zeros((n_rows, n), dtype=float)
    for i in range(n_rows):
        power[i, :] = engine.transform(x[i, :]).unwrap().power

    return PowerPerRow(power=power, n_samples=int(L))


def averaged_spectrum(batch: PowerPerRow, *, sample_rate_hz: Optional[float] = None) -> pd.DataFrame:
    """Average the row spectra and tabulate the non-mirrored half.

    Rows are treated as successive windows of one real signal; the mean power per bin
    smooths the single-window estimate. No scaling is applied, so a one-row batch gives
    exactly ``PowerSpectrum.one_sided()`` of that row.

    Parameters
    ----------
    batch:
        Per-row power spectra from :func:`power_per_row`.
    sample_rate_hz:
        If given, a ``frequency_hz`` column is added.

    Returns
    -------
    pandas.DataFrame
        One row per bin ``0..N/2`` with columns ``bin``, optionally ``frequency_hz``,
        ``power`` (row mean) and ``peak_power`` (row maximum).
    """
    power = np.asarray(batch.power, dtype=float)
    if power.ndim != 2:
        raise ValueError("batch.power must be 2D")
    if power.shape[0] == 0:
        raise ValueError("batch has no rows to average")

    mean = PowerSpectrum(power=power.mean(axis=0), n_samples=batch.n_samples)
    half = mean.one_sided().size

    df = mean.to_frame(sample_rate_hz=sample_rate_hz).iloc[:half].copy()
    df["peak_power"] = power[:, :half].max(axis=0)
    return df
