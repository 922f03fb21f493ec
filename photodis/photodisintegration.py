from __future__ import annotations

import math
import os

import numpy as np

from .candidate import Candidate, InteractionState
from .channel import DisintegrationChannel
from .constants import INFINITE_LENGTH, LG_LORENTZ_MAX, LG_LORENTZ_MIN
from .errors import InteractionStateError
from .interpolation import interpolate_equidistant
from .nucleus import charge_number, lorentz_factor, mass_number, nucleus_id
from .photon_field import (
    PhotonField,
    photon_field_description,
    photon_field_from_name,
    photon_field_scaling,
)
from .rate_table import RateTable
from .rng import UniformSource, shared_random
from .table_io import load_rate_table, read_rate_table


def _in_domain(lg: float) -> bool:
    # Open interval: the tables have no support at or beyond the edges.
    return LG_LORENTZ_MIN < lg < LG_LORENTZ_MAX


class PhotoDisintegration:
    """Photo-disintegration of nuclei on a photon background.

    The table is loaded once at construction and only read afterwards, so
    one instance can serve many propagation threads.  Each call works on a
    single candidate:

    - ``set_next_interaction`` races one exponential clock per channel of
      the candidate's isotope and records the winner on the candidate,
    - ``perform_interaction`` applies the recorded channel,
    - ``energy_loss_length`` gives the mean length over which the nucleus
      loses its mass, for step-size control.
    """

    def __init__(
        self,
        photon_field: PhotonField | str = PhotonField.CMB,
        *,
        table_file: str | os.PathLike | None = None,
        data_dir: str | os.PathLike | None = None,
        random: UniformSource | None = None,
    ):
        self.random = random
        self.data_dir = data_dir
        self.table = RateTable()
        self.init(photon_field, table_file=table_file)

    def init(
        self,
        photon_field: PhotonField | str,
        *,
        table_file: str | os.PathLike | None = None,
    ) -> None:
        """Select the photon background and load its table.

        With ``table_file`` the given file is read instead of the
        background's default data file; scaling and description still
        follow ``photon_field``.
        """
        field = photon_field_from_name(photon_field)
        self.photon_field = field
        self.description = f"PhotoDisintegration: {photon_field_description(field)}"
        if table_file is not None and str(table_file).strip():
            self.init_file(table_file)
        else:
            self.table = load_rate_table(field, self.data_dir)
            self.table_file = None

    def init_file(self, path: str | os.PathLike) -> None:
        self.table = read_rate_table(path)
        self.table_file = str(path)

    def _draws(self, size: int) -> np.ndarray:
        src = self.random if self.random is not None else shared_random()
        uniform = getattr(src, "uniform", None)
        if uniform is not None:
            return np.asarray(uniform(size), dtype=float)
        return np.asarray([src.rand() for _ in range(size)], dtype=float)

    def set_next_interaction(self, candidate: Candidate) -> bool:
        """Sample distance and channel of the next disintegration.

        Returns False when the isotope has no channels, the Lorentz factor
        is outside the table domain, or no channel can fire.  Otherwise the
        comoving distance and channel are stored on the candidate under
        ``self.description`` (replacing an earlier proposal) and True is
        returned.
        """
        current = candidate.current
        a = current.mass_number
        z_charge = current.charge_number
        iso = self.table.isotope(z_charge, a - z_charge)
        if iso is None:
            return False

        # The background photon energies grow with (1+z); boost the nucleus instead.
        z = float(candidate.redshift)
        gamma = current.lorentz_factor * (1.0 + z)
        if gamma <= 0.0:
            return False
        lg = math.log10(gamma)
        if not _in_domain(lg):
            return False

        rates = interpolate_equidistant(lg, LG_LORENTZ_MIN, LG_LORENTZ_MAX, iso.rates)
        u = self._draws(int(rates.shape[0]))
        live = rates > 0.0
        d = np.where(live, -np.log(u) / np.where(live, rates, 1.0), np.inf)
        i = int(np.argmin(d))
        distance = float(d[i])
        if not math.isfinite(distance):
            return False

        # interaction length is proportional to 1 / (photon density)
        scaling = photon_field_scaling(self.photon_field, z)
        if scaling <= 0.0:
            return False
        distance /= scaling
        # physical to comoving frame
        distance *= 1.0 + z

        candidate.set_interaction_state(
            self.description, InteractionState(distance=distance, channel=int(iso.codes[i]))
        )
        return True

    def propose(self, candidate: Candidate) -> InteractionState | None:
        if not self.set_next_interaction(candidate):
            return None
        return candidate.get_interaction_state(self.description)

    def perform_interaction(self, candidate: Candidate) -> None:
        """Apply the recorded channel to the candidate.

        Energy per nucleon is conserved: the remaining nucleus keeps
        ``E/A`` per nucleon and every emitted product carries ``E/A`` times
        its own mass number.  A parent that loses all nucleons is
        deactivated.
        """
        state = candidate.get_interaction_state(self.description)
        if state is None:
            raise InteractionStateError(
                f"{self.description}: no interaction state recorded on candidate "
                f"(id={candidate.current.id})"
            )

        channel = DisintegrationChannel.from_code(state.channel)
        a = candidate.current.mass_number
        z = candidate.current.charge_number
        epa = candidate.current.energy / float(a)

        a_new = a - channel.mass_loss
        z_new = z - channel.charge_loss
        # raises before anything on the candidate changes
        new_id = nucleus_id(a_new, z_new) if a_new > 0 else None

        # the particle changes, every pending proposal is stale
        candidate.clear_interaction_states()
        if new_id is not None:
            candidate.current.id = new_id
            candidate.current.energy = epa * a_new
        else:
            candidate.set_active(False)

        for pid, a_product, count in channel.products():
            for _ in range(count):
                candidate.add_secondary(pid, epa * a_product)

    def energy_loss_length(self, pid: int, energy: float) -> float:
        a = mass_number(pid)
        z = charge_number(pid)
        iso = self.table.isotope(z, a - z)
        if iso is None:
            return INFINITE_LENGTH

        gamma = lorentz_factor(pid, energy)
        if gamma <= 0.0:
            return INFINITE_LENGTH
        lg = math.log10(gamma)
        if not _in_domain(lg):
            return INFINITE_LENGTH

        rates = interpolate_equidistant(lg, LG_LORENTZ_MIN, LG_LORENTZ_MAX, iso.rates)
        loss_rate = float(np.sum(rates * iso.mass_loss / float(a)))
        if loss_rate <= 0.0:
            return INFINITE_LENGTH
        return 1.0 / loss_rate
