"""
immortality/types_config.py - ExperimentConfig Dataclass and Preset

Immutable configuration for an experiment run. The values are fixed for the
command line entry point; other configs exist so tests can drive the loops.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import TRIALS, SURVIVAL_PROBABILITY, LOG_FILE_PATH


@dataclass(frozen=True)
class ExperimentConfig:
    """Experiment configuration (immutable)."""
    trials: int = TRIALS
    survival_probability: float = SURVIVAL_PROBABILITY
    log_path: str = LOG_FILE_PATH
    random_seed: Optional[int] = None  # None draws fresh OS entropy


def validate_config(config: ExperimentConfig) -> None:
    """
    Reject configs the loops cannot run.

    Args:
        config: ExperimentConfig to check

    Raises:
        ValueError: If trials < 1 or survival_probability is outside (0, 1)
    """
    errors = []
    if config.trials < 1:
        errors.append(f"trials must be >= 1, got {config.trials}")
    if not 0.0 < config.survival_probability < 1.0:
        errors.append(
            f"survival_probability must be between 0 and 1, got {config.survival_probability}"
        )
    if errors:
        raise ValueError("Experiment config invalid:\n" + "\n".join(f"  - {e}" for e in errors))


# =============================================================================
# PRESET
# =============================================================================

DEFAULT_EXPERIMENT = ExperimentConfig()
