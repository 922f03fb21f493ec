"""Disintegration channels.

Tables identify a channel by a six digit code: from the most significant
digit down it counts the emitted neutrons, protons, deuterons, tritons,
He-3 and He-4 nuclei.  ``100000`` is single neutron emission, ``000001``
(written ``1``) alpha emission, ``200010`` two neutrons plus one He-3.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .nucleus import DEUTERON, HELIUM3, HELIUM4, NEUTRON, PROTON, TRITON

# (digit place, product id, mass number, charge number), most significant first
_PRODUCTS: tuple[tuple[int, int, int, int], ...] = (
    (100000, NEUTRON, 1, 0),
    (10000, PROTON, 1, 1),
    (1000, DEUTERON, 2, 1),
    (100, TRITON, 3, 1),
    (10, HELIUM3, 3, 2),
    (1, HELIUM4, 4, 2),
)

MAX_CHANNEL_CODE = 999999


def _digit(value: int, place: int) -> int:
    return (value // place) % 10


@dataclass(frozen=True)
class DisintegrationChannel:
    code: int
    n_neutron: int
    n_proton: int
    n_deuteron: int
    n_triton: int
    n_helium3: int
    n_helium4: int

    @classmethod
    def from_code(cls, code: int) -> "DisintegrationChannel":
        code = int(code)
        if code <= 0 or code > MAX_CHANNEL_CODE:
            raise ValueError(f"invalid disintegration channel code: {code}")
        counts = [_digit(code, place) for place, _pid, _a, _z in _PRODUCTS]
        return cls(code, *counts)

    def counts(self) -> tuple[int, ...]:
        return (
            self.n_neutron,
            self.n_proton,
            self.n_deuteron,
            self.n_triton,
            self.n_helium3,
            self.n_helium4,
        )

    def products(self) -> Iterator[tuple[int, int, int]]:
        """Yield (product id, mass number, count) for every emitted species."""
        for (_place, pid, a, _z), n in zip(_PRODUCTS, self.counts()):
            if n:
                yield pid, a, n

    @property
    def mass_loss(self) -> int:
        """Nucleons removed from the parent."""
        return sum(a * n for (_p, _pid, a, _z), n in zip(_PRODUCTS, self.counts()))

    @property
    def charge_loss(self) -> int:
        return sum(z * n for (_p, _pid, _a, z), n in zip(_PRODUCTS, self.counts()))
