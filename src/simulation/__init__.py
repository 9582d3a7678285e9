"""Dry-run transfer simulation."""

from simulation.models import SimulationResult
from simulation.runner import SimulationRunner

__all__ = ["SimulationResult", "SimulationRunner"]
