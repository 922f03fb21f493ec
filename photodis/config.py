from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional
import yaml

from .errors import ConfigurationError
from .photodisintegration import PhotoDisintegration
from .photon_field import PhotonField, photon_field_from_name
from .rng import RandomSource

_CONFIG_KEYS = {"photon_field", "table_file", "data_path", "seed"}

@dataclass
class PhotoDisintegrationConfig:
    photon_field: PhotonField = PhotonField.CMB
    table_file: str = ""   # explicit table; overrides the photon field's data file
    data_path: str = ""    # directory holding photodis_<field>.txt
    seed: Optional[int] = None


def parse_config(d: Any) -> PhotoDisintegrationConfig:
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise ConfigurationError("config must be a mapping")
    extra = sorted(set(d.keys()) - _CONFIG_KEYS)
    if extra:
        raise ConfigurationError(f"config contains unsupported keys: {extra}")

    field = photon_field_from_name(d.get("photon_field", "CMB"))

    seed = d.get("seed", None)
    if seed is not None:
        try:
            seed = int(seed)
        except (ValueError, TypeError) as exc:
            raise ConfigurationError(f"seed must be an integer, got {seed!r}") from exc
        if seed < 0:
            raise ConfigurationError("seed must be >= 0")

    return PhotoDisintegrationConfig(
        photon_field=field,
        table_file=str(d.get("table_file", "") or "").strip(),
        data_path=str(d.get("data_path", "") or "").strip(),
        seed=seed,
    )


def load_config(path: str) -> PhotoDisintegrationConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            d = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(f"could not read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML in config {path}: {exc}") from exc
    return parse_config(d)


def make_photodisintegration(cfg: PhotoDisintegrationConfig) -> PhotoDisintegration:
    return PhotoDisintegration(
        cfg.photon_field,
        table_file=cfg.table_file or None,
        data_dir=cfg.data_path or None,
        random=RandomSource(cfg.seed),
    )
