"""
CLI commands package.
Contains individual command implementations.
"""
from mca_analyzer.cli.commands.analyze import analyze_cmd
from mca_analyzer.cli.commands.config import config_cmd
from mca_analyzer.cli.commands.sample import sample_cmd

__all__ = ["analyze_cmd", "config_cmd", "sample_cmd"]
