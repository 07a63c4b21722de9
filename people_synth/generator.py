from __future__ import annotations

import logging
from pathlib import Path

from people_synth.config import GeneratorConfig
from people_synth.people import generate_people
from people_synth.seed import derive_seed, rng
from people_synth.writer import write_people

logger = logging.getLogger("people_synth.generator")


def run_generator(cfg: GeneratorConfig) -> Path:
    """
    Generate cfg.count people and write them to cfg.output_path.

    Returns the absolute path written. Raises IOFailure if the destination
    cannot be written; generation has already completed by then.
    """
    seed_ctx = derive_seed(cfg.seed_mode, cfg.seed)
    r = rng(seed_ctx.seed)

    people = generate_people(cfg.count, r)
    out_path = write_people(people, cfg.output_path)

    logger.debug("Run finished (seed_mode=%s, seed=%d)", seed_ctx.mode, seed_ctx.seed)
    return out_path
