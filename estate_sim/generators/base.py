"""Base generator class for all world generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all generators.

    Provides common initialization: a private ``random.Random`` stream and a
    Faker instance, both seeded so that a run can be replayed exactly.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    rng : random.Random | None
        Shared random stream. When provided, ``seed`` only seeds Faker.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
        elif rng is not None:
            self.fake.seed_instance(self.rng.getrandbits(32))

    def weighted_choice(self, options: list, weights: list[float]):
        """Draw one option by cumulative probability, falling back to the middle one."""
        roll = self.rng.random()
        cumulative = 0.0
        for option, weight in zip(options, weights):
            cumulative += weight
            if roll < cumulative:
                return option
        return options[len(options) // 2]
