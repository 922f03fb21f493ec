"""photodis package.

Photo-disintegration of nuclei on ambient photon backgrounds for particle
propagation Monte Carlo codes.

Version is single-sourced from the repository root VERSION file.
"""

from __future__ import annotations
from pathlib import Path

from .candidate import Candidate, InteractionState, ParticleState
from .errors import ConfigurationError, InteractionStateError
from .photodisintegration import PhotoDisintegration
from .photon_field import PhotonField

def _read_version() -> str:
    repo_root = Path(__file__).resolve().parents[1]
    try:
        return (repo_root / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.3.0"

__version__ = _read_version()

__all__ = [
    "Candidate",
    "ConfigurationError",
    "InteractionState",
    "InteractionStateError",
    "ParticleState",
    "PhotoDisintegration",
    "PhotonField",
    "__version__",
]
