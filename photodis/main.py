from __future__ import annotations

from collections import Counter

from .candidate import Candidate, ParticleState
from .cli_parser import build_parser
from .config import load_config, make_photodisintegration
from .constants import EeV, INFINITE_LENGTH, Mpc, c_squared
from .errors import ConfigurationError
from .nucleus import nucleus_id, nucleus_mass


def _nucleus_or_exit(a: int, z: int) -> int:
    try:
        return nucleus_id(a, z)
    except ValueError as exc:
        raise SystemExit(f"invalid nucleus: {exc}")


def _cmd_info(args) -> None:
    cfg = load_config(args.config)
    pd = make_photodisintegration(cfg)
    source = pd.table_file or f"default data file for {cfg.photon_field.value}"
    print(f"[info] {pd.description}")
    print(f"[info] table: {source}")
    print(f"[info] isotopes={len(pd.table)} modes={pd.table.n_modes}")
    raise SystemExit(0)


def _cmd_loss_length(args) -> None:
    cfg = load_config(args.config)
    pd = make_photodisintegration(cfg)
    pid = _nucleus_or_exit(args.mass, args.charge)
    length = pd.energy_loss_length(pid, float(args.energy_eev) * EeV)
    if length >= INFINITE_LENGTH:
        print(f"[loss-length A={args.mass} Z={args.charge}] no photo-disintegration")
    else:
        print(f"[loss-length A={args.mass} Z={args.charge}] {length / Mpc:.6e} Mpc")
    raise SystemExit(0)


def _cmd_sample(args) -> None:
    if int(args.n) < 1:
        raise SystemExit("--n must be >= 1")
    if float(args.redshift) < 0.0:
        raise SystemExit("--redshift must be >= 0")
    cfg = load_config(args.config)
    pd = make_photodisintegration(cfg)
    pid = _nucleus_or_exit(args.mass, args.charge)
    energy = float(args.lorentz) * nucleus_mass(pid) * c_squared

    distances: list[float] = []
    channels: Counter = Counter()
    for _ in range(int(args.n)):
        cand = Candidate(current=ParticleState(id=pid, energy=energy), redshift=float(args.redshift))
        state = pd.propose(cand)
        if state is None:
            continue
        distances.append(state.distance)
        channels[state.channel] += 1

    tag = f"[sample A={args.mass} Z={args.charge}]"
    if not distances:
        print(f"{tag} no photo-disintegration")
        raise SystemExit(0)
    mean = sum(distances) / len(distances)
    print(f"{tag} n={len(distances)} mean distance={mean / Mpc:.6e} Mpc")
    for code, count in channels.most_common():
        print(f"{tag} channel {code:06d}: {count / len(distances):.4f}")
    raise SystemExit(0)


def main(argv=None) -> None:
    p = build_parser(
        cmd_info=_cmd_info,
        cmd_loss_length=_cmd_loss_length,
        cmd_sample=_cmd_sample,
    )
    args = p.parse_args(argv)
    try:
        args.func(args)
    except ConfigurationError as exc:
        raise SystemExit(f"configuration error: {exc}")


if __name__ == "__main__":
    main()
