from __future__ import annotations

import numpy as np
import pytest

from photodis.constants import N_RATE_SAMPLES


class SequenceRandom:
    """Replays a fixed list of uniform draws, cycling when exhausted."""

    def __init__(self, draws):
        self.draws = [float(u) for u in draws]
        self.calls = 0

    def rand(self) -> float:
        u = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return u


def table_row(z: int, n: int, code: int, rates) -> str:
    rr = np.broadcast_to(np.asarray(rates, dtype=float), (N_RATE_SAMPLES,))
    return f"{z} {n} {code} " + " ".join(f"{r:.6e}" for r in rr) + "\n"


@pytest.fixture
def sequence_random():
    return SequenceRandom


@pytest.fixture
def write_table(tmp_path):
    """Write rows (Z, N, channel, rate-or-rates [1/Mpc]) to a table file."""

    def _write(rows, name: str = "photodis_test.txt", header: str = "# test table\n") -> str:
        path = tmp_path / name
        text = [header]
        for z, n, code, rates in rows:
            text.append(table_row(z, n, code, rates))
        path.write_text("".join(text), encoding="utf-8")
        return str(path)

    return _write
