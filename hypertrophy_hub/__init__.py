"""Hypertrophy Hub - workout plan generation engine.

Procedurally assembles equipment-feasible workout plans from templates and
progresses them level by level.
"""

__version__ = "0.1.0"
