from __future__ import annotations

from dataclasses import dataclass, field

from .nucleus import charge_number, lorentz_factor, mass_number


@dataclass(frozen=True)
class InteractionState:
    """Proposal recorded by an interaction module: where and which channel."""

    distance: float
    channel: int


@dataclass
class ParticleState:
    id: int
    energy: float

    @property
    def mass_number(self) -> int:
        return mass_number(self.id)

    @property
    def charge_number(self) -> int:
        return charge_number(self.id)

    @property
    def lorentz_factor(self) -> float:
        return lorentz_factor(self.id, self.energy)


@dataclass
class Candidate:
    """One propagating particle together with what happened to it.

    Interaction states are keyed by the description of the module that
    recorded them, so several interaction modules can keep a pending
    proposal on the same candidate.
    """

    current: ParticleState
    redshift: float = 0.0
    active: bool = True
    secondaries: list["Candidate"] = field(default_factory=list)
    interaction_states: dict[str, InteractionState] = field(default_factory=dict)

    def set_interaction_state(self, key: str, state: InteractionState) -> None:
        self.interaction_states[str(key)] = state

    def get_interaction_state(self, key: str) -> InteractionState | None:
        return self.interaction_states.get(str(key))

    def clear_interaction_states(self) -> None:
        self.interaction_states.clear()

    def set_active(self, active: bool) -> None:
        self.active = bool(active)

    def add_secondary(self, pid: int, energy: float) -> "Candidate":
        sec = Candidate(
            current=ParticleState(id=int(pid), energy=float(energy)),
            redshift=self.redshift,
        )
        self.secondaries.append(sec)
        return sec
