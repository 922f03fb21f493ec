"""Named numeric constants for photodis.

All quantities are stored in SI units internally: lengths in metres,
energies in joules, masses in kilograms.  Rate tables on disk are given
per Mpc and converted on load.

Categories
----------
Units
    ``Mpc``, ``eV``/``EeV``, ``c_light``/``c_squared`` and the nucleon
    masses used to turn an energy into a Lorentz factor.

Table domain
    Every rate curve has ``N_RATE_SAMPLES`` points equidistant in
    log10(Lorentz factor) over ``[LG_LORENTZ_MIN, LG_LORENTZ_MAX]``.
    Isotopes are indexed by (Z, N) with both in ``[0, ISOTOPE_GRID)``.

INFINITE_LENGTH
    Returned as energy-loss length when no disintegration is possible.
"""

from __future__ import annotations

import sys

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------
meter: float = 1.0
Mpc: float = 3.08567758e22 * meter

eV: float = 1.602176487e-19
EeV: float = 1e18 * eV

c_light: float = 2.99792458e8
c_squared: float = c_light * c_light

mass_proton: float = 1.67262158e-27
mass_neutron: float = 1.67492735e-27

# ---------------------------------------------------------------------------
# Rate-table domain
# ---------------------------------------------------------------------------
LG_LORENTZ_MIN: float = 6.0
LG_LORENTZ_MAX: float = 14.0
N_RATE_SAMPLES: int = 200
ISOTOPE_GRID: int = 31

# ---------------------------------------------------------------------------
# "No loss" marker for energy-loss lengths
# ---------------------------------------------------------------------------
INFINITE_LENGTH: float = sys.float_info.max
