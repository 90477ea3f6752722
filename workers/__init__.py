"""
Worker modules for parallel simulation execution.
"""
from .scenario_worker import ScenarioWorker

__all__ = ['ScenarioWorker']
