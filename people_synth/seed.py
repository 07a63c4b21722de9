from __future__ import annotations
import logging
import os
import random
import secrets
import time
from dataclasses import dataclass

logger = logging.getLogger("people_synth.seed")

SEED_MASK = 0x7FFFFFFF

@dataclass(frozen=True)
class SeedContext:
    seed: int
    mode: str = "random"

def fresh_seed() -> int:
    """31-bit seed from the OS CSPRNG, salted with the clock and PID."""
    salt = time.monotonic_ns() ^ (os.getpid() << 20)
    return (secrets.randbits(31) ^ salt) & SEED_MASK

def derive_seed(seed_mode: str = "random", seed: int | None = None) -> SeedContext:
    if seed_mode == "fixed":
        if seed is None:
            raise ValueError("seed_mode=fixed requires seed")
        return SeedContext(seed=int(seed), mode="fixed")
    if seed_mode == "random":
        return SeedContext(seed=fresh_seed(), mode="random")
    raise ValueError(f"Unknown seed_mode: {seed_mode!r} (expected random | fixed)")

def rng(seed: int) -> random.Random:
    logger.info("Random source seeded with %d", seed)
    return random.Random(seed)
