# -- Static Equilibrium Draft -- #

'''
Finds where a mesh body floats at rest on calm water.

Solves for the draft (depth of the lowest point below the water level)
where the summed hydrostatic vertical force from the clipped mesh
equals the body weight, using scipy.optimize.brentq on:

    f(draft) = F_z(draft) - m * g

F_z comes from the same clipping and force integration the simulation
uses, so the result is the pose a settled simulation converges to.
'''

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.optimize import brentq

from meshBuoyancy.geometry.meshLoader import StaticMeshSource
from meshBuoyancy.geometry.protocols import TriangleMesh
from meshBuoyancy.geometry.transform import BodyTransform
from meshBuoyancy.simulation.config import BuoyancyConfig
from meshBuoyancy.simulation.orchestrator import MeshForceOrchestrator
from meshBuoyancy.water.protocols import FlatWaterSurface

logger = logging.getLogger(__name__)


@dataclass
class EquilibriumResult:
    '''
    Static floating pose of a body.

    Parameters:
    -----------
    draft : float
        Depth of the lowest point below the water level [m]
    offset : float
        Vertical translation to add to the starting pose [m]
    buoyancyForce : float
        Vertical hydrostatic force at the draft [N]
    submergedVolume : float
        Displaced volume, buoyancyForce / (rho * g) [m^3]
    floats : bool
        False if the fully submerged body is still heavier than
        the water it displaces
    '''

    draft: float
    offset: float
    buoyancyForce: float
    submergedVolume: float
    floats: bool


def findEquilibriumDraft(
    mesh: TriangleMesh,
    massKg: float,
    config: Optional[BuoyancyConfig] = None,
    waterLevel: float = 0.0,
    transform: Optional[BodyTransform] = None,
    xtol: float = 1e-7,
) -> EquilibriumResult:
    '''
    Find the draft where buoyancy equals weight.

    Parameters:
    -----------
    mesh : TriangleMesh
        Closed body mesh in local space
    massKg : float
        Body mass [kg]
    config : BuoyancyConfig
        Water density and gravity (default: BuoyancyConfig())
    waterLevel : float
        Calm water height [m]
    transform : BodyTransform
        Starting pose; only its vertical position is changed
    xtol : float
        Absolute draft tolerance for brentq [m]

    Returns:
    --------
    EquilibriumResult : Draft, offset and displaced volume
    '''
    if massKg < 0.0:
        raise ValueError(f'massKg cannot be negative, got {massKg}')

    config = config if config is not None else BuoyancyConfig()
    # Pressure only
    staticConfig = dataclasses.replace(
        config,
        useStaticForces=True,
        useDynamicForces=False,
        drawTriangles=False,
        drawSubtriangles=False,
        drawWaterline=False,
        drawForceArrows=False,
    )
    transform = transform if transform is not None else BodyTransform.identity()
    rhoG = staticConfig.waterDensity * staticConfig.gravity

    if mesh.isEmpty:
        return EquilibriumResult(0.0, 0.0, 0.0, 0.0, floats=False)

    orchestrator = MeshForceOrchestrator(
        StaticMeshSource(mesh),
        water=FlatWaterSurface(waterLevel),
        config=staticConfig,
        name='equilibrium',
    )

    worldHeights = transform.transformPoints(mesh.vertices)[:, 2]
    lowest = float(np.min(worldHeights))
    maxDraft = float(np.max(worldHeights)) - lowest
    weight = massKg * staticConfig.gravity

    def offsetForDraft(draft: float) -> float:
        return waterLevel - draft - lowest

    def verticalForce(draft: float) -> float:
        pose = transform.translated([0.0, 0.0, offsetForDraft(draft)])
        _, summary = orchestrator.computeForces(pose)
        return float(summary.totalForce[2])

    def residual(draft: float) -> float:
        '''Residual: buoyancy - weight.'''
        return verticalForce(draft) - weight

    fullBuoyancy = verticalForce(maxDraft)
    if fullBuoyancy < weight:
        # Sinks: report the fully submerged pose
        logger.info(
            'Body does not float: full buoyancy %.2f N < weight %.2f N', fullBuoyancy, weight,
        )
        return EquilibriumResult(
            draft=maxDraft,
            offset=offsetForDraft(maxDraft),
            buoyancyForce=fullBuoyancy,
            submergedVolume=fullBuoyancy / rhoG,
            floats=False,
        )

    if weight <= 0.0:
        draft = 0.0
    else:
        draft = brentq(residual, 0.0, maxDraft, xtol=xtol)

    force = verticalForce(draft)
    logger.debug('Equilibrium draft %.6f m, buoyancy %.3f N', draft, force)

    return EquilibriumResult(
        draft=draft,
        offset=offsetForDraft(draft),
        buoyancyForce=force,
        submergedVolume=force / rhoG,
        floats=True,
    )
