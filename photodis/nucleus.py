"""Nucleus identity helpers.

Particles are identified by the PDG nuclear code ``10LZZZAAAI`` with
``L = I = 0``, i.e. ``1000000000 + 10000*Z + 10*A``.  Free nucleons use the
same scheme (neutron = A1 Z0, proton = A1 Z1) so every product of a
disintegration is a nucleus id.
"""

from __future__ import annotations

from .constants import c_squared, mass_neutron, mass_proton

_NUCLEUS_BASE = 1000000000


def nucleus_id(a: int, z: int) -> int:
    a = int(a)
    z = int(z)
    if a < 1:
        raise ValueError(f"mass number must be >= 1, got A={a}")
    if z < 0:
        raise ValueError(f"charge number must be >= 0, got Z={z}")
    if z > a:
        raise ValueError(f"charge number exceeds mass number: A={a}, Z={z}")
    if a > 999 or z > 999:
        raise ValueError(f"nucleus out of encodable range: A={a}, Z={z}")
    return _NUCLEUS_BASE + 10000 * z + 10 * a


def is_nucleus(pid: int) -> bool:
    pid = int(pid)
    return _NUCLEUS_BASE <= pid < 2 * _NUCLEUS_BASE


def _check(pid: int) -> int:
    if not is_nucleus(pid):
        raise ValueError(f"not a nucleus id: {pid}")
    return int(pid)


def mass_number(pid: int) -> int:
    return (_check(pid) // 10) % 1000


def charge_number(pid: int) -> int:
    return (_check(pid) // 10000) % 1000


def nucleus_mass(pid: int) -> float:
    """Rest mass [kg] as the sum of free nucleon masses (binding energy neglected)."""
    a = mass_number(pid)
    z = charge_number(pid)
    return z * mass_proton + (a - z) * mass_neutron


def lorentz_factor(pid: int, energy: float) -> float:
    return float(energy) / (nucleus_mass(pid) * c_squared)


NEUTRON = nucleus_id(1, 0)
PROTON = nucleus_id(1, 1)
DEUTERON = nucleus_id(2, 1)
TRITON = nucleus_id(3, 1)
HELIUM3 = nucleus_id(3, 2)
HELIUM4 = nucleus_id(4, 2)
