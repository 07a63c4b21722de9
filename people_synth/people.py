from __future__ import annotations
from dataclasses import dataclass
from typing import List
from faker import Faker
import logging
import random

logger = logging.getLogger("people_synth.people")

@dataclass(frozen=True)
class YearRange:
    min: int
    max: int

    def __contains__(self, year: int) -> bool:
        return self.min <= year <= self.max

YEARS = YearRange(1900, 2000)

@dataclass(frozen=True)
class Person:
    name: str
    birthYear: int
    deathYear: int

def random_person(fake: Faker, rng: random.Random, years: YearRange = YEARS) -> Person:
    birth = rng.randint(years.min, years.max)
    death = rng.randint(birth, years.max)
    return Person(
        name=f"{fake.first_name()} {fake.last_name()}",
        birthYear=birth,
        deathYear=death,
    )

def generate_people(n: int, rng: random.Random, years: YearRange = YEARS) -> List[Person]:
    if n <= 0:
        raise ValueError("n must be > 0")

    fake = Faker("en_US")
    # names follow the caller's seed so a fixed seed reproduces the dataset
    fake.seed_instance(rng.randint(1, 2_000_000_000))

    people = [random_person(fake, rng, years) for _ in range(n)]
    logger.info("Generated %d people (years %d-%d)", n, years.min, years.max)
    return people
