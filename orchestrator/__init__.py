"""
Orchestration package for coordinating conversion pipeline phases.

This package provides the orchestration layer that sequences the conversion
phases: Parse → Iterate → Done. It drives a WordPress export through
filtering, path resolution, section tracking, rendering and writing.
"""

from .migration_orchestrator import MigrationOrchestrator

__all__ = [
    'MigrationOrchestrator'
]
