from __future__ import annotations

import argparse
from typing import Callable


def build_parser(
    *,
    cmd_info: Callable,
    cmd_loss_length: Callable,
    cmd_sample: Callable,
) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="photodis")
    sub = p.add_subparsers(dest="cmd", required=True)

    pi = sub.add_parser("info", help="Summarize the loaded rate table")
    pi.add_argument("config", help="YAML config (photon field, table file)")
    pi.set_defaults(func=cmd_info)

    pl = sub.add_parser("loss-length", help="Mean energy-loss length of a nucleus")
    pl.add_argument("config")
    pl.add_argument("--Z", dest="charge", type=int, required=True, help="Charge number")
    pl.add_argument("--A", dest="mass", type=int, required=True, help="Mass number")
    pl.add_argument("--energy-eev", type=float, required=True, help="Total energy [EeV]")
    pl.set_defaults(func=cmd_loss_length)

    ps = sub.add_parser("sample", help="Sample interaction distances and channels")
    ps.add_argument("config")
    ps.add_argument("--Z", dest="charge", type=int, required=True, help="Charge number")
    ps.add_argument("--A", dest="mass", type=int, required=True, help="Mass number")
    ps.add_argument("--lorentz", type=float, required=True, help="Lorentz factor")
    ps.add_argument("--redshift", type=float, default=0.0)
    ps.add_argument("--n", type=int, default=1000, help="Number of proposals")
    ps.set_defaults(func=cmd_sample)

    return p
