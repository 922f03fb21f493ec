"""Reading and writing photo-disintegration rate tables.

File format (plain text, one channel per line)::

    # comment
    Z N channel r_1 ... r_200

``r_i`` is the rate in 1/Mpc at log10(Lorentz factor) equidistant over
[6, 14].  Rates are stored internally in 1/m.
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import numpy as np

from .channel import DisintegrationChannel
from .constants import ISOTOPE_GRID, Mpc, N_RATE_SAMPLES
from .errors import ConfigurationError
from .photon_field import PhotonField, photon_field_data_file
from .rate_table import DisintegrationMode, RateTable

DATA_PATH_ENV = "PHOTODIS_DATA_PATH"

_N_FIELDS = 3 + N_RATE_SAMPLES


def get_data_path(filename: str, data_dir: str | os.PathLike | None = None) -> str:
    if data_dir is not None and str(data_dir).strip():
        base = Path(data_dir)
    else:
        env = os.environ.get(DATA_PATH_ENV, "").strip()
        base = Path(env) if env else Path(__file__).resolve().parent / "data"
    return str(base / filename)


def _parse_line(path: str, lineno: int, txt: str) -> DisintegrationMode:
    toks = txt.split()
    if len(toks) != _N_FIELDS:
        raise ValueError(
            f"{path}:{lineno}: expected {_N_FIELDS} fields (Z N channel + "
            f"{N_RATE_SAMPLES} rates), got {len(toks)}"
        )
    try:
        z = int(toks[0])
        n = int(toks[1])
        code = int(toks[2])
    except (ValueError, TypeError) as exc:
        raise ValueError(f"{path}:{lineno}: invalid Z/N/channel: {' '.join(toks[:3])}") from exc
    if not (0 <= z < ISOTOPE_GRID and 0 <= n < ISOTOPE_GRID):
        raise ValueError(
            f"{path}:{lineno}: isotope (Z={z}, N={n}) outside table grid [0, {ISOTOPE_GRID - 1}]"
        )
    try:
        channel = DisintegrationChannel.from_code(code)
    except ValueError as exc:
        raise ValueError(f"{path}:{lineno}: {exc}") from exc

    a = z + n
    neutron_loss = channel.mass_loss - channel.charge_loss
    if channel.mass_loss > a or channel.charge_loss > z or neutron_loss > n:
        raise ValueError(
            f"{path}:{lineno}: channel {code} removes A={channel.mass_loss}, "
            f"Z={channel.charge_loss}, N={neutron_loss} from parent with A={a}, Z={z}, N={n}"
        )

    try:
        rate = np.asarray([float(t) for t in toks[3:]], dtype=float)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"{path}:{lineno}: invalid numeric rate value") from exc
    if not np.all(np.isfinite(rate)):
        raise ValueError(f"{path}:{lineno}: non-finite rate value")
    if np.any(rate < 0.0):
        raise ValueError(f"{path}:{lineno}: negative rate value")

    return DisintegrationMode(z=z, n=n, channel=channel, rate=rate / Mpc)


def read_rate_table(path: str | os.PathLike) -> RateTable:
    path = str(path)
    if not os.path.isfile(path):
        raise ConfigurationError(f"photo-disintegration table not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"could not read photo-disintegration table {path}: {exc}") from exc

    modes: list[DisintegrationMode] = []
    seen: set[tuple[int, int, int]] = set()
    duplicates: list[str] = []
    for lineno, raw in enumerate(lines, start=1):
        txt = raw.strip()
        if not txt or txt.startswith("#"):
            continue
        mode = _parse_line(path, lineno, txt)
        key = (mode.z, mode.n, mode.code)
        if key in seen:
            duplicates.append(f"Z={mode.z} N={mode.n} channel={mode.code} (line {lineno})")
        seen.add(key)
        modes.append(mode)

    if duplicates:
        warnings.warn(
            f"{path}: repeated disintegration channels, all entries kept: "
            + ", ".join(duplicates),
            RuntimeWarning,
        )
    return RateTable(modes)


def load_rate_table(
    photon_field: PhotonField, data_dir: str | os.PathLike | None = None
) -> RateTable:
    return read_rate_table(get_data_path(photon_field_data_file(photon_field), data_dir))


def write_rate_table(path: str | os.PathLike, table: RateTable, *, header: str = "") -> str:
    path = str(path)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for line in header.splitlines():
            f.write(f"# {line}\n")
        f.write(f"# Z N channel rate[1/Mpc] x {N_RATE_SAMPLES}, log10(gamma) in [6, 14]\n")
        for mode in table:
            rates = " ".join(repr(float(r)) for r in (mode.rate * Mpc))
            f.write(f"{mode.z} {mode.n} {mode.code} {rates}\n")
    return path
