from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import numpy as np

from .channel import DisintegrationChannel
from .constants import ISOTOPE_GRID, N_RATE_SAMPLES

IsotopeKey = tuple[int, int]  # (Z, N)


def in_grid(z: int, n: int) -> bool:
    return 0 <= int(z) < ISOTOPE_GRID and 0 <= int(n) < ISOTOPE_GRID


@dataclass(frozen=True, eq=False)
class DisintegrationMode:
    """One channel of one isotope: emitted products and rate curve [1/m]."""

    z: int
    n: int
    channel: DisintegrationChannel
    rate: np.ndarray  # (N_RATE_SAMPLES,)

    def __post_init__(self):
        if not in_grid(self.z, self.n):
            raise ValueError(
                f"isotope (Z={self.z}, N={self.n}) outside table grid [0, {ISOTOPE_GRID - 1}]"
            )
        rate = np.array(self.rate, dtype=float)
        if rate.shape != (N_RATE_SAMPLES,):
            raise ValueError(
                f"rate curve must have {N_RATE_SAMPLES} samples, got shape {rate.shape}"
            )
        if not np.all(np.isfinite(rate)):
            raise ValueError("rate curve contains non-finite values")
        if np.any(rate < 0.0):
            raise ValueError("rate curve contains negative values")
        rate.setflags(write=False)
        object.__setattr__(self, "rate", rate)

    @property
    def code(self) -> int:
        return self.channel.code

    @property
    def mass_number(self) -> int:
        return int(self.z) + int(self.n)


@dataclass(frozen=True, eq=False)
class IsotopeRates:
    """All modes of one isotope with their rate curves stacked row-wise."""

    z: int
    n: int
    modes: tuple[DisintegrationMode, ...]
    rates: np.ndarray  # (n_modes, N_RATE_SAMPLES)
    codes: np.ndarray  # (n_modes,)
    mass_loss: np.ndarray  # (n_modes,)

    @classmethod
    def stack(cls, z: int, n: int, modes: Iterable[DisintegrationMode]) -> "IsotopeRates":
        mm = tuple(modes)
        rates = np.vstack([m.rate for m in mm])
        codes = np.asarray([m.code for m in mm], dtype=np.int64)
        loss = np.asarray([m.channel.mass_loss for m in mm], dtype=np.int64)
        for arr in (rates, codes, loss):
            arr.setflags(write=False)
        return cls(z=int(z), n=int(n), modes=mm, rates=rates, codes=codes, mass_loss=loss)

    @property
    def mass_number(self) -> int:
        return self.z + self.n


class RateTable:
    """Read-only lookup of disintegration modes by isotope (Z, N).

    Isotopes that never appeared in the input have no modes.  Keys outside
    the 31x31 grid are answered the same way instead of raising.
    """

    def __init__(self, modes: Iterable[DisintegrationMode] = ()):
        grouped: dict[IsotopeKey, list[DisintegrationMode]] = {}
        for m in modes:
            grouped.setdefault((int(m.z), int(m.n)), []).append(m)
        self._isotopes: Mapping[IsotopeKey, IsotopeRates] = MappingProxyType(
            {key: IsotopeRates.stack(key[0], key[1], mm) for key, mm in sorted(grouped.items())}
        )

    def isotope(self, z: int, n: int) -> IsotopeRates | None:
        if not in_grid(z, n):
            return None
        return self._isotopes.get((int(z), int(n)))

    def modes(self, z: int, n: int) -> tuple[DisintegrationMode, ...]:
        iso = self.isotope(z, n)
        return () if iso is None else iso.modes

    def keys(self) -> list[IsotopeKey]:
        return list(self._isotopes.keys())

    @property
    def n_modes(self) -> int:
        return sum(len(iso.modes) for iso in self._isotopes.values())

    def __len__(self) -> int:
        return len(self._isotopes)

    def __contains__(self, key) -> bool:
        try:
            z, n = key
            return self.isotope(z, n) is not None
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[DisintegrationMode]:
        for iso in self._isotopes.values():
            yield from iso.modes
