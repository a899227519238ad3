# -- Simulation Subpackage -- #

'''
Per-body configuration, the force orchestrator, rigid-body sinks,
multi-body stepping, and static equilibrium solving.
'''

from meshBuoyancy.simulation.config import BuoyancyConfig
from meshBuoyancy.simulation.rigidBody import RigidBodySink, RigidBodyState
from meshBuoyancy.simulation.orchestrator import (
    BuoyancyIssue,
    MeshForceOrchestrator,
    StepSummary,
    isValidForce,
)
from meshBuoyancy.simulation.world import BuoyancyWorld
from meshBuoyancy.simulation.equilibrium import EquilibriumResult, findEquilibriumDraft
