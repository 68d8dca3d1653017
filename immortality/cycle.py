"""
immortality/cycle.py - Attempt and Experiment Loops

run_attempt: up to `trials` draws, short-circuits at the first failure.
run_experiment: repeats attempts until one survives every trial, then writes
the final summary.
"""

import time
from typing import Optional

from .constants import (
    SURVIVAL_PROBABILITY,
    BANNER,
    SUMMARY_SEPARATOR,
    MSG_RUN_START,
    MSG_ATTEMPT_FAILED,
    MSG_ALL_SURVIVED,
    MSG_ATTEMPT_ELAPSED,
    MSG_EXPERIMENT_ENDED,
    SUMMARY_CONGRATULATIONS,
    SUMMARY_CHANCES,
    SUMMARY_SIMULATIONS,
    SUMMARY_ELAPSED,
    SUMMARY_DISCLAIMER,
)
from .logbook import LogContext, format_message
from .luck import TrialSource, make_trial_source
from .types_config import ExperimentConfig, DEFAULT_EXPERIMENT, validate_config
from .types_result import AttemptResult, ExperimentResult


def run_attempt(
    simulation: int,
    trials: int,
    draw: TrialSource,
    log: LogContext,
    probability: float = SURVIVAL_PROBABILITY,
) -> AttemptResult:
    """
    Run one simulation attempt.

    Args:
        simulation: 1-based simulation counter value for this attempt
        trials: Maximum number of trials
        draw: Trial source, called once per trial
        log: LogContext receiving the outcome lines
        probability: Per-trial success chance, only used in the success line

    Returns:
        AttemptResult; survived is the count of successes before the failing trial
    """
    start_ns = time.perf_counter_ns()
    for i in range(trials):
        if not draw():
            elapsed_ns = time.perf_counter_ns() - start_ns
            log.info(MSG_ATTEMPT_FAILED, simulation, i, elapsed_ns)
            return AttemptResult(
                simulation=simulation,
                survived=i,
                trials=trials,
                succeeded=False,
                elapsed_ns=elapsed_ns,
            )

    log.info(MSG_ALL_SURVIVED, trials, probability, str(trials))
    elapsed_ns = time.perf_counter_ns() - start_ns
    log.info(MSG_ATTEMPT_ELAPSED, elapsed_ns)
    return AttemptResult(
        simulation=simulation,
        survived=trials,
        trials=trials,
        succeeded=True,
        elapsed_ns=elapsed_ns,
    )


def build_summary(
    simulations: int,
    trials: int,
    elapsed_ms: int,
    probability: float = SURVIVAL_PROBABILITY,
) -> str:
    """
    Multi-line closing block written once the experiment succeeds.

    Args:
        simulations: Total attempts made
        trials: Trials per attempt (the probability exponent)
        elapsed_ms: Wall time for the whole experiment
        probability: Per-trial success chance

    Returns:
        str: Block starting and ending with a newline
    """
    lines = [
        "",
        SUMMARY_SEPARATOR,
        SUMMARY_CONGRATULATIONS,
        format_message(SUMMARY_CHANCES, probability, str(trials)),
        format_message(SUMMARY_SIMULATIONS, simulations),
        format_message(SUMMARY_ELAPSED, elapsed_ms),
        *SUMMARY_DISCLAIMER,
        "",
    ]
    return "\n".join(lines)


def run_experiment(
    config: ExperimentConfig = DEFAULT_EXPERIMENT,
    draw: Optional[TrialSource] = None,
    log: Optional[LogContext] = None,
) -> ExperimentResult:
    """
    Repeat attempts until one survives all trials.

    Args:
        config: ExperimentConfig, validated before anything is written
        draw: Trial source; defaults to a numpy-backed source built from config
        log: LogContext to write through; one is created (and closed) if omitted

    Returns:
        ExperimentResult for the run

    Raises:
        ValueError: If config is invalid
    """
    validate_config(config)
    experiment_start_ms = time.monotonic_ns() // 1_000_000

    owns_log = log is None
    if log is None:
        log = LogContext(config.log_path)
    log.setup()

    if draw is None:
        draw = make_trial_source(config)

    try:
        log.log_to_file(BANNER)
        log.info(MSG_RUN_START, config.trials)

        simulations = 0
        while True:
            simulations += 1
            attempt = run_attempt(
                simulations, config.trials, draw, log, config.survival_probability
            )
            if attempt.succeeded:
                break

        elapsed_ms = time.monotonic_ns() // 1_000_000 - experiment_start_ms
        log.log_to_file(
            build_summary(simulations, config.trials, elapsed_ms, config.survival_probability)
        )
        log.info(MSG_EXPERIMENT_ENDED)
        log.log_to_file(BANNER)
    finally:
        if owns_log:
            log.close()

    return ExperimentResult(
        simulations=simulations,
        trials=config.trials,
        survival_probability=config.survival_probability,
        elapsed_ms=elapsed_ms,
        final_attempt=attempt,
    )
