"""Fixed-size FFT engine reporting per-bin power.

Functions / classes
-------------------
FourierTransform
    Engine configured once with a sample-size exponent ``n``; transforms real
    sequences of at most ``N = 2 ** n`` samples.
create
    Convenience constructor, ``create()`` uses ``n = 2`` (``N = 4``).

Notes
-----
The transform is the iterative radix-2 Cooley-Tukey decimation-in-time FFT:
zero-pad to ``N``, permute by bit reversal, then ``log2(N)`` butterfly stages
``a' = a + W b``, ``b' = a - W b``. The output is ``|X[k]|**2`` with no ``1/N``
normalisation.

The engine holds only read-only tables. Each call allocates its own working
buffer, so one instance may be shared between threads without locking.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import numpy as np

from fourier_transform.analysis.tables import bit_reversal_table, twiddle_table
from fourier_transform.models.config import DEFAULT_SAMPLE_SIZE_EXPONENT, TransformConfiguration
from fourier_transform.models.results import PowerSpectrum, TransformResult


OutputSink = Union[list, np.ndarray]


def as_samples(samples: Any) -> np.ndarray:
    """Coerce ``samples`` to a 1D float64 array.

    Raises
    ------
    ValueError
        If the input is not one-dimensional or not real-valued numeric.
    """
    x = np.asarray(samples)
    if x.dtype == object:
        # e.g. Python ints beyond the int64 range
        try:
            x = np.array([float(v) for v in x.ravel()], dtype=np.float64).reshape(x.shape)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"samples must be real-valued numeric: {e}") from e
    if x.ndim != 1:
        raise ValueError(f"samples must be 1D, got shape {x.shape}")
    if np.iscomplexobj(x):
        raise ValueError("samples must be real-valued, got complex input")
    if x.size and x.dtype.kind not in "biuf":
        raise ValueError(f"samples must be numeric, got dtype {x.dtype}")
    return x.astype(np.float64, copy=False)


class FourierTransform:
    """Radix-2 FFT engine of fixed length ``N = 2 ** sample_size_exponent``.

    Parameters
    ----------
    config:
        Engine configuration. Default uses ``sample_size_exponent = 2``.

    Examples
    --------
    >>> engine = FourierTransform(TransformConfiguration(sample_size_exponent=2))
    >>> engine.transform([1.0, 1.0, 1.0, 1.0]).unwrap().power.tolist()
    [16.0, 0.0, 0.0, 0.0]
    """

    __slots__ = ("_config", "_bitrev", "_twiddles")

    def __init__(self, config: Optional[TransformConfiguration] = None) -> None:
        if config is None:
            config = TransformConfiguration()
        if not isinstance(config, TransformConfiguration):
            raise TypeError(f"config must be a TransformConfiguration, got {type(config).__name__}")
        n = config.max_input_length
        self._config = config
        self._bitrev = bit_reversal_table(n)
        self._twiddles = twiddle_table(n)

    def __repr__(self) -> str:
        return f"FourierTransform(sample_size_exponent={self._config.sample_size_exponent})"

    @property
    def config(self) -> TransformConfiguration:
        return self._config

    @property
    def sample_size_exponent(self) -> int:
        return self._config.sample_size_exponent

    @property
    def max_input_length(self) -> int:
        return self._config.max_input_length

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def transform(self, samples: Sequence[float]) -> TransformResult:
        """Transform ``samples`` and return the power spectrum as a result value.

        Parameters
        ----------
        samples:
            Real 1D sequence of length ``L <= N``. Positions ``L..N-1`` are treated as zero.

        Returns
        -------
        TransformResult
            Success with a :class:`PowerSpectrum` of length ``N``, or failure with
            kind ``"SampleTooBig"`` when ``L > N``.
        """
        x = as_samples(samples)
        err = self._check_length(x)
        if err is not None:
            return err
        return TransformResult.success(self._spectrum(x))

    def transform_1d(self, samples: Sequence[float], out: Optional[OutputSink]) -> TransformResult:
        """Transform ``samples`` and write the ``N`` power values into ``out``.

        ``out`` may be a list (its contents are replaced by ``N`` floats) or a writeable
        1D ndarray of shape ``(N,)`` whose dtype holds float64 without loss. A missing or
        unusable sink fails with ``"NoOutputDestination"``. Input length is checked first;
        on any failure ``out`` is left untouched.

        The returned result is truthy on success and also carries the spectrum.
        """
        x = as_samples(samples)
        err = self._check_length(x)
        if err is not None:
            return err
        err = self._check_sink(out)
        if err is not None:
            return err

        spectrum = self._spectrum(x)
        if isinstance(out, np.ndarray):
            out[...] = spectrum.power
        else:
            out[:] = spectrum.power.tolist()
        return TransformResult.success(spectrum)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _check_length(self, x: np.ndarray) -> Optional[TransformResult]:
        n = self.max_input_length
        if x.size > n:
            return TransformResult.failure(
                "SampleTooBig", f"input has {x.size} samples, at most {n} allowed"
            )
        return None

    def _check_sink(self, out: Any) -> Optional[TransformResult]:
        n = self.max_input_length
        if out is None:
            return TransformResult.failure("NoOutputDestination", "no output sink given")
        if isinstance(out, list):
            return None
        if isinstance(out, np.ndarray):
            if out.shape != (n,):
                return TransformResult.failure(
                    "NoOutputDestination", f"output array has shape {out.shape}, need ({n},)"
                )
            if out.dtype.kind != "f" or not np.can_cast(np.float64, out.dtype, casting="safe"):
                return TransformResult.failure(
                    "NoOutputDestination", f"output array dtype {out.dtype} cannot hold float64 power"
                )
            if not out.flags.writeable:
                return TransformResult.failure("NoOutputDestination", "output array is read-only")
            return None
        return TransformResult.failure(
            "NoOutputDestination", f"unsupported output sink type {type(out).__name__}"
        )

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------

    def _spectrum(self, x: np.ndarray) -> PowerSpectrum:
        n = self.max_input_length
        warnings: list[str] = []
        if x.size == 0:
            warnings.append("empty input; spectrum is all zeros")
        elif x.size < n:
            warnings.append(f"zero-padded input from {x.size} to {n} samples")

        X = self._fft(x)
        power = X.real * X.real + X.imag * X.imag
        return PowerSpectrum(power=power, n_samples=int(x.size), warnings=tuple(warnings))

    def _fft(self, x: np.ndarray) -> np.ndarray:
        n = self.max_input_length
        buf = np.zeros(n, dtype=np.complex128)
        buf[: x.size] = x
        buf = buf[self._bitrev]

        m = 2
        while m <= n:
            half = m // 2
            w = self._twiddles[:: n // m]  # W_m^j, j = 0..half-1
            blocks = buf.reshape(n // m, m)
            a = blocks[:, :half]
            wb = blocks[:, half:] * w
            buf = np.concatenate((a + wb, a - wb), axis=1).reshape(n)
            m *= 2
        return buf


def create(sample_size_exponent: int = DEFAULT_SAMPLE_SIZE_EXPONENT) -> FourierTransform:
    """Build an engine accepting at most ``2 ** sample_size_exponent`` samples."""
    return FourierTransform(TransformConfiguration(sample_size_exponent=sample_size_exponent))
