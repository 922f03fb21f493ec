"""Photon backgrounds and their redshift evolution."""

from __future__ import annotations

from enum import Enum

import numpy as np

from .errors import ConfigurationError


class PhotonField(Enum):
    CMB = "CMB"
    IRB = "IRB"
    CMB_IRB = "CMB_IRB"


_DESCRIPTIONS = {
    PhotonField.CMB: "CMB",
    PhotonField.IRB: "IRB",
    PhotonField.CMB_IRB: "CMB and IRB",
}

_DATA_FILES = {
    PhotonField.CMB: "photodis_CMB.txt",
    PhotonField.IRB: "photodis_IRB.txt",
    PhotonField.CMB_IRB: "photodis_CMB_IRB.txt",
}

_ALIASES = {
    "cmb": PhotonField.CMB,
    "irb": PhotonField.IRB,
    "cmb_irb": PhotonField.CMB_IRB,
    "cmb+irb": PhotonField.CMB_IRB,
    "cmb-irb": PhotonField.CMB_IRB,
}

# Overall redshift scaling of the Kneiske et al. 2004 IRB (astro-ph/0309141)
_KNEISKE_Z = np.array([0.0, 0.2, 0.4, 0.6, 1.0, 2.0, 3.0, 4.0, 5.0], dtype=float)
_KNEISKE_S = np.array(
    [1.0, 1.6937, 2.5885, 3.6178, 5.1980, 7.3871, 8.5471, 7.8605, 0.0], dtype=float
)


def photon_field_from_name(name) -> PhotonField:
    if isinstance(name, PhotonField):
        return name
    key = str(name).strip().lower()
    try:
        return _ALIASES[key]
    except KeyError:
        raise ConfigurationError(
            f"unknown photon background {name!r}; expected one of: CMB, IRB, CMB_IRB"
        ) from None


def _require_field(field) -> PhotonField:
    if not isinstance(field, PhotonField):
        raise ConfigurationError(f"unknown photon background {field!r}")
    return field


def photon_field_description(field: PhotonField) -> str:
    return _DESCRIPTIONS[_require_field(field)]


def photon_field_data_file(field: PhotonField) -> str:
    return _DATA_FILES[_require_field(field)]


def photon_field_scaling(field: PhotonField, z: float) -> float:
    """Photon number density at redshift ``z`` relative to today.

    Interaction lengths scale with the inverse of this factor.  Beyond the
    last Kneiske node (z > 5) the IRB is taken to vanish.
    """
    field = _require_field(field)
    z = float(z)
    if z < 0.0:
        raise ValueError(f"redshift must be non-negative, got z={z}")
    if field is PhotonField.IRB:
        if z > _KNEISKE_Z[-1]:
            return 0.0
        return float(np.interp(z, _KNEISKE_Z, _KNEISKE_S))
    # CMB, and CMB+IRB where the CMB dominates: constant comoving number density
    return (1.0 + z) ** 3
