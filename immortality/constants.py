"""
immortality/constants.py - Experiment Constants and Message Text

All fixed values that control the experiment's observable behavior.
Pure data, no behavior.
"""

# =============================================================================
# BEHAVIOR CONSTANTS
# =============================================================================

TRIALS = 100                 # Trials per simulation attempt
SURVIVAL_PROBABILITY = 0.2   # Chance a single trial succeeds
LOG_FILE_PATH = "simulation_log.txt"

# =============================================================================
# LOG LEVEL NAMES
# =============================================================================

LEVEL_INFO = "INFO"
LEVEL_SEVERE = "SEVERE"

# Timestamp layout for the single-line formatter: "Aug 22, 2025 3:04:05 PM"
TIMESTAMP_DATE_FORMAT = "%b %d, %Y"
TIMESTAMP_TIME_FORMAT = "%I:%M:%S %p"

# =============================================================================
# MESSAGE TEMPLATES (positional placeholders)
# =============================================================================

BANNER = "\n\n" + "#" * 81 + "\n\n"
SUMMARY_SEPARATOR = "=" * 82

MSG_RUN_START = "Starting new simulation run. Each simulation consists of {0} trials."
MSG_ATTEMPT_FAILED = "Simulation {0}. Survived {1} trials. Time elapsed: {2} ns"
MSG_ALL_SURVIVED = (
    "Survived all {0} trials, which was a {1}^{2} probability, "
    "this kind of proves the possibility for quantum immortality!"
)
MSG_ATTEMPT_ELAPSED = "Total time elapsed for this simulation: {0} ns"
MSG_EXPERIMENT_ENDED = "Experiment ended. Exiting program. Thank you for participating!"

MSG_SETUP_FAILED = "Failed to initialize logs: {0}"
MSG_WRITE_FAILED = "Failed to log message: {0}"

# =============================================================================
# FINAL SUMMARY
# =============================================================================

SUMMARY_CONGRATULATIONS = (
    "Congratulations! You have successfully simulated the most rarest scenario "
    "that suggests quantum immortality."
)
SUMMARY_CHANCES = "Your chances were {0}^{1}. And you did it. Was this worth your time?"
SUMMARY_SIMULATIONS = "Total simulations run: {0}."
SUMMARY_ELAPSED = "Total time elapsed: {0} ms"
SUMMARY_DISCLAIMER = (
    "This simulation is purely theoretical and should not be taken as a "
    "real-life proof of quantum immortality.",
    "Always prioritize safety and well-being in real life over theoretical concepts.",
    "Thank you for running this simulation!",
    "Have a great day!",
)
