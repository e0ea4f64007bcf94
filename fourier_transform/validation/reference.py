"""Cross-check the engine against ``numpy.fft`` and run it from the command line.

Examples
--------
>>> from fourier_transform import create
>>> from fourier_transform.validation.reference import compare_to_numpy
>>> compare_to_numpy(create(2), [1.0, 0.0, 0.0, 0.0]).ok
True

Command line::

    python -m fourier_transform.validation.reference --exponent 3 1 2 3 4
    python -m fourier_transform.validation.reference --exponent 10 --csv trace.csv --column x --compare
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from fourier_transform.analysis.engine import FourierTransform, as_samples, create


@dataclass(frozen=True)
class ReferenceComparison:
    """Engine power vs ``numpy.fft`` power for one input.

    Attributes
    ----------
    power:
        Engine output, shape ``(N,)``.
    reference:
        ``|numpy.fft.fft(x, n=N)|**2``, shape ``(N,)``.
    max_abs_error:
        ``max |power - reference|``.
    parseval_ratio:
        ``sum(power) / (N * sum(x**2))``; 1 up to rounding. NaN for an all-zero input.
    ok:
        True if ``power`` matches ``reference`` within the requested tolerances.
    """

    power: np.ndarray
    reference: np.ndarray
    max_abs_error: float
    parseval_ratio: float
    ok: bool


def reference_power(samples: Sequence[float], n: int) -> np.ndarray:
    """Unnormalised power of the ``n``-point DFT of ``samples`` (zero-padded) via numpy."""
    X = np.fft.fft(as_samples(samples), n=int(n))
    return np.abs(X) ** 2


def compare_to_numpy(
    engine: FourierTransform,
    samples: Sequence[float],
    *,
    atol: float = 1e-9,
    rtol: float = 1e-9,
) -> ReferenceComparison:
    """Transform ``samples`` with ``engine`` and compare to ``numpy.fft``.

    Raises
    ------
    TransformFailed
        If the engine rejects the input (``"SampleTooBig"``).
    """
    x = as_samples(samples)
    n = engine.max_input_length
    power = engine.transform(x).unwrap().power
    ref = reference_power(x, n)

    err = float(np.max(np.abs(power - ref)))
    energy = float(np.sum(x * x))
    ratio = float(np.sum(power)) / (n * energy) if energy > 0.0 else float("nan")
    ok = bool(np.allclose(power, ref, atol=atol, rtol=rtol))

    return ReferenceComparison(
        power=power,
        reference=ref,
        max_abs_error=err,
        parseval_ratio=ratio,
        ok=ok,
    )


def _load_samples(values: List[float], csv: Optional[str], column: Optional[str]) -> np.ndarray:
    if csv is None:
        return np.asarray(values, dtype=float)
    if values:
        raise ValueError("Give either sample values or --csv, not both")
    df = pd.read_csv(Path(csv).expanduser())
    if column is None:
        column = str(df.columns[0])
    if column not in df.columns:
        raise ValueError(f"Column {column!r} not found. Present={list(df.columns)}")
    return df[column].to_numpy(dtype=float)


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m fourier_transform.validation.reference",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Compute the power spectrum of a real sample sequence with the radix-2 engine.

            Samples come either from the positional values or from one column of a CSV file.
            The input may hold at most 2**exponent samples and is zero-padded to that length.
            """
        ),
    )
    p.add_argument("values", nargs="*", type=float, help="Sample values")
    p.add_argument("--exponent", type=int, default=2, help="Sample-size exponent n (N = 2**n), default 2")
    p.add_argument("--csv", default=None, help="Read samples from this CSV file instead of the command line")
    p.add_argument("--column", default=None, help="CSV column to read (default: first column)")
    p.add_argument("--sample-rate", type=float, default=None, help="Sample rate in Hz, adds a frequency column")
    p.add_argument("--compare", action="store_true", help="Also compare against numpy.fft")

    ns = p.parse_args(list(argv) if argv is not None else None)

    try:
        engine = create(ns.exponent)
        x = _load_samples(ns.values, ns.csv, ns.column)
    except (OSError, TypeError, ValueError) as e:
        p.error(str(e))
    if ns.sample_rate is not None and not ns.sample_rate > 0.0:
        p.error(f"--sample-rate must be > 0, got {ns.sample_rate}")

    print(f"[info] {engine!r}: N={engine.max_input_length}, input length={x.size}")

    result = engine.transform(x)
    if not result:
        print(f"[warn] transform failed: {result.error}")
        return 1

    spectrum = result.unwrap()
    for msg in spectrum.warnings:
        print(f"[info] {msg}")
    print(spectrum.to_frame(sample_rate_hz=ns.sample_rate).to_string(index=False))

    if ns.compare:
        cmp_obj = compare_to_numpy(engine, x)
        status = "ok" if cmp_obj.ok else "MISMATCH"
        print(
            f"[info] numpy.fft comparison: {status}; max |diff|={cmp_obj.max_abs_error:.3g}; "
            f"parseval ratio={cmp_obj.parseval_ratio:.12g}"
        )
        if not cmp_obj.ok:
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
