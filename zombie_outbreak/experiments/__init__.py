"""Experiments layer: command-line driver for batch outbreak runs."""

from zombie_outbreak.experiments.cli import build_run_config, main

__all__ = [
    "build_run_config",
    "main",
]
