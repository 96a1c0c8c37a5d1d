# src/bouncer/utils/random.py

from __future__ import annotations

from typing import Dict
import numpy as np

# Each stream gets its own child of the master seed, so pointer jitter never
# shifts the launch angles of a seeded session.
STREAMS = ("launch", "pointer")

_master_seed: int | None = None
_rngs: Dict[str, np.random.Generator] = {}


def seed_all(seed: int | None) -> None:
    """Seed every stream from `seed`; None draws fresh OS entropy."""
    global _master_seed
    _master_seed = seed
    _rngs.clear()


def rng(name: str = "launch") -> np.random.Generator:
    if name not in STREAMS:
        raise ValueError(f"Unknown random stream {name!r}, expected one of {STREAMS}")
    if name not in _rngs:
        children = np.random.SeedSequence(_master_seed).spawn(len(STREAMS))
        _rngs[name] = np.random.default_rng(children[STREAMS.index(name)])
    return _rngs[name]
