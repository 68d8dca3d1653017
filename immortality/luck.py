"""
immortality/luck.py - Random Trial Generator

One trial is a biased coin flip drawn from a numpy Generator. Pseudo-random,
not cryptographically secure.
"""

from typing import Callable

import numpy as np

from .constants import SURVIVAL_PROBABILITY
from .types_config import ExperimentConfig

TrialSource = Callable[[], bool]


def try_luck(rng: np.random.Generator, probability: float = SURVIVAL_PROBABILITY) -> bool:
    """
    Draw one trial.

    Args:
        rng: Uniform source; rng.random() is in [0, 1)
        probability: Chance of success

    Returns:
        True if the trial succeeded
    """
    return bool(rng.random() <= probability)


def make_trial_source(config: ExperimentConfig) -> TrialSource:
    """Bind a freshly seeded generator and the config's probability into a no-argument draw."""
    rng = np.random.default_rng(config.random_seed)
    probability = config.survival_probability

    def draw() -> bool:
        return try_luck(rng, probability)

    return draw
