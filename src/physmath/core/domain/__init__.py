"""
Domain models and value objects.

Contains validated input records for the physics formulas.
"""

from physmath.core.domain.circuit import VoltageLoop
from physmath.core.domain.fluid import FluidState
from physmath.core.domain.optics import OpticalInterface, PolarizerPair

__all__ = [
    # Fluid dynamics
    "FluidState",
    # Optics
    "OpticalInterface",
    "PolarizerPair",
    # Circuits
    "VoltageLoop",
]
