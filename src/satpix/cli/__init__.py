"""Command-line interface modules for satpix pipeline execution.

This package contains core execution logic, making scripts/ optional and deletable.
"""

from satpix.cli.run_pipelines import run_pipelines, main

__all__ = ['run_pipelines', 'main']
