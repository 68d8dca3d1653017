"""
immortality - Quantum Immortality Simulation

Repeats batches of biased coin flips until one batch survives every flip,
logging each failed attempt and a closing summary to an append-only file.
"""

# =============================================================================
# TYPES
# =============================================================================
from .types_config import ExperimentConfig, DEFAULT_EXPERIMENT, validate_config
from .types_result import AttemptResult, ExperimentResult

# =============================================================================
# CONSTANTS
# =============================================================================
from .constants import TRIALS, SURVIVAL_PROBABILITY, LOG_FILE_PATH

# =============================================================================
# TRIALS
# =============================================================================
from .luck import try_luck, make_trial_source

# =============================================================================
# LOGGING
# =============================================================================
from .logbook import LogContext, SingleLineFormatter, format_message, format_record

# =============================================================================
# CORE SIMULATION
# =============================================================================
from .cycle import run_attempt, run_experiment, build_summary

__all__ = [
    # Types
    "ExperimentConfig",
    "DEFAULT_EXPERIMENT",
    "validate_config",
    "AttemptResult",
    "ExperimentResult",
    # Constants
    "TRIALS",
    "SURVIVAL_PROBABILITY",
    "LOG_FILE_PATH",
    # Trials
    "try_luck",
    "make_trial_source",
    # Logging
    "LogContext",
    "SingleLineFormatter",
    "format_message",
    "format_record",
    # Core simulation
    "run_attempt",
    "run_experiment",
    "build_summary",
]
