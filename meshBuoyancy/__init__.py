# -- meshBuoyancy Package -- #

'''
Per-triangle buoyancy for rigid bodies with triangulated surface meshes.

Clips each mesh triangle against a water surface, integrates hydrostatic
pressure and quadratic drag over the submerged pieces, and pushes the
resulting forces into a rigid-body solver every step.
'''

__version__ = '0.1.0'

from meshBuoyancy.geometry import (
    BodyTransform,
    StaticMeshSource,
    TriangleClipper,
    TriangleMesh,
    TrimeshSource,
    boxMesh,
    icosphereMesh,
    meshVolume,
)
from meshBuoyancy.hydrodynamics import Force, ForceIntegrator
from meshBuoyancy.water import (
    FlatWaterSurface,
    HeightmapSurface,
    WaveConditions,
    WaveFieldSurface,
    createWaterSurface,
)
from meshBuoyancy.simulation import (
    BuoyancyConfig,
    BuoyancyIssue,
    BuoyancyWorld,
    MeshForceOrchestrator,
    RigidBodyState,
    StepSummary,
    findEquilibriumDraft,
)
from meshBuoyancy.logConfig import setupLogging
