"""Tests for row-wise transforms and power summaries."""

from __future__ import annotations

import numpy as np
import pytest

from fourier_transform import TransformFailed, create
from fourier_transform.analysis.batch import averaged_spectrum, power_per_row


def test_power_per_row_matches_single_transforms() -> None:
    rng = np.random.default_rng(2)
    engine = create(4)
    rows = rng.normal(size=(5, 12))

    batch = power_per_row(engine, rows)
    assert batch.power.shape == (5, 16)
    assert batch.n_rows == 5
    assert batch.n_bins == 16
    assert batch.n_samples == 12
    for i in range(5):
        single = engine.transform(rows[i]).unwrap().power
        assert np.array_equal(batch.power[i], single)


def test_power_per_row_rejects_long_rows() -> None:
    with pytest.raises(TransformFailed) as ei:
        power_per_row(create(2), np.ones((3, 5)))
    assert ei.value.kind == "SampleTooBig"
    assert ei.value.code == 401


def test_power_per_row_requires_2d() -> None:
    with pytest.raises(ValueError):
        power_per_row(create(2), np.ones(4))


def test_averaged_spectrum_mean_and_peak() -> None:
    engine = create(2)
    rows = np.array([[1.0, 0.0, 0.0, 0.0], [1.0, 1.0, 1.0, 1.0]])
    df = averaged_spectrum(power_per_row(engine, rows))

    # bins 0..N/2 only
    assert list(df.columns) == ["bin", "power", "peak_power"]
    assert df["bin"].tolist() == [0, 1, 2]
    assert np.allclose(df["power"].to_numpy(), [8.5, 0.5, 0.5])
    assert np.allclose(df["peak_power"].to_numpy(), [16.0, 1.0, 1.0])


def test_averaged_spectrum_single_row_is_one_sided() -> None:
    engine = create(3)
    x = np.array([1.0, -2.0, 0.5, 3.0, 0.0, 1.0])
    df = averaged_spectrum(power_per_row(engine, x[None, :]))
    half = engine.transform(x).unwrap().one_sided()
    assert np.array_equal(df["power"].to_numpy(), half)
    assert np.array_equal(df["peak_power"].to_numpy(), half)


def test_averaged_spectrum_frequencies() -> None:
    batch = power_per_row(create(3), np.ones((2, 8)))
    df = averaged_spectrum(batch, sample_rate_hz=800.0)
    assert list(df.columns) == ["bin", "frequency_hz", "power", "peak_power"]
    assert np.allclose(df["frequency_hz"].to_numpy(), [0.0, 100.0, 200.0, 300.0, 400.0])
    assert df["power"].iloc[0] == pytest.approx(64.0)


def test_averaged_spectrum_single_bin_engine() -> None:
    df = averaged_spectrum(power_per_row(create(0), np.array([[2.0], [4.0]])))
    assert df["power"].tolist() == [10.0]
    assert df["peak_power"].tolist() == [16.0]


def test_averaged_spectrum_needs_rows() -> None:
    batch = power_per_row(create(1), np.zeros((0, 2)))
    with pytest.raises(ValueError):
        averaged_spectrum(batch)
