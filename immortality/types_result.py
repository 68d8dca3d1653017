"""
immortality/types_result.py - Attempt and Experiment Result Dataclasses

Immutable containers returned by the simulation loops.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of one simulation attempt."""
    simulation: int     # 1-based simulation counter value
    survived: int       # successes before the failing trial (== trials on success)
    trials: int
    succeeded: bool
    elapsed_ns: int


@dataclass(frozen=True)
class ExperimentResult:
    """Outcome of a full experiment (always ends in a successful attempt)."""
    simulations: int
    trials: int
    survival_probability: float
    elapsed_ms: int
    final_attempt: AttemptResult

    @property
    def statistics(self) -> dict:
        return {
            "simulations": self.simulations,
            "trials": self.trials,
            "survival_probability": self.survival_probability,
            "elapsed_ms": self.elapsed_ms,
            "final_attempt_ns": self.final_attempt.elapsed_ns,
        }
