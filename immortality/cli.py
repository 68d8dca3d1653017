"""
immortality/cli.py - Command Line Entry Point

Usage:
  quantum-immortality
  python -m immortality
"""

import sys

import click

from .cycle import run_experiment
from .logbook import LogContext
from .types_config import DEFAULT_EXPERIMENT


@click.command()
def main() -> None:
    """Flip 0.2-probability coins in batches of 100 until one batch survives every flip.

    Progress and the final summary are appended to simulation_log.txt in the
    working directory. Expect this to run for a very long time.
    """
    with LogContext(DEFAULT_EXPERIMENT.log_path) as log:
        run_experiment(DEFAULT_EXPERIMENT, log=log)
    sys.exit(0)
