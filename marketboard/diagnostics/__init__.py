"""Diagnostics for tuning market boards."""

from .harvest_simulator import HarvestSimulator, SimulationResult

__all__ = ["HarvestSimulator", "SimulationResult"]
