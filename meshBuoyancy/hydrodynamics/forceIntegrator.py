# -- Sub-Triangle Force Integrator -- #

'''
Hydrostatic and hydrodynamic force on one submerged sub-triangle.

Hydrostatic (pressure) force:
    F_s = -rho * g * d * A * n

where d is the submersion depth at the centroid, A the area and n the
outward normal. Pressure pushes against the outward normal, so summed
over a closed, fully submerged mesh this gives the Archimedes force
rho * g * V straight up. Depth is linear over a flat triangle, so
sampling it at the centroid integrates the pressure exactly on calm water.

Hydrodynamic (quadratic drag) force:
    v   = v_body - v_fluid
    v_n = v . n
    F_d = -C * rho * A * v_n * |v_n| * n    if v_z < 0
    F_d = 0                                 otherwise

Only a patch moving deeper relative to the water is resisted, against
its own normal motion. A patch moving up and out of the water gets no
force, so there is no suction term.

Reference:
-----------
Kerner, J. -- Water interaction model for boats in video games (2015)
'''

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from meshBuoyancy import constants as const
from meshBuoyancy.geometry.protocols import ClippedSubtriangle
from meshBuoyancy.hydrodynamics.protocols import Force
from meshBuoyancy.water.protocols import WaterSurfaceQuery


VelocitySampler = Callable[[np.ndarray], np.ndarray]


def hydrostaticForce(
    waterDensity: float,
    gravity: float,
    depth: float,
    area: float,
    normal: np.ndarray,
) -> np.ndarray:
    '''
    Pressure force on a flat patch.

    Parameters:
    -----------
    waterDensity : float
        Fluid density [kg/m^3]
    gravity : float
        Gravitational acceleration magnitude [m/s^2]
    depth : float
        Submersion depth of the patch centroid [m], >= 0
    area : float
        Patch area [m^2]
    normal : np.ndarray
        Outward unit normal

    Returns:
    --------
    np.ndarray : Force vector [N]
    '''
    return -waterDensity * gravity * depth * area * normal


def hydrodynamicForce(
    waterDensity: float,
    relativeVelocity: np.ndarray,
    normal: np.ndarray,
    area: float,
    dragCoefficient: float = const.defaultDragCoefficient,
) -> np.ndarray:
    '''
    Quadratic drag on a patch moving deeper into the water.

    Parameters:
    -----------
    waterDensity : float
        Fluid density [kg/m^3]
    relativeVelocity : np.ndarray
        Patch velocity minus fluid velocity [m/s]
    normal : np.ndarray
        Outward unit normal
    area : float
        Patch area [m^2]
    dragCoefficient : float
        Dimensionless scale on the drag term

    Returns:
    --------
    np.ndarray : Force vector [N], zero unless the patch is moving down
    '''
    relativeVelocity = np.asarray(relativeVelocity, dtype=np.float64)
    if not relativeVelocity[2] < 0.0:
        return np.zeros(3)
    normalSpeed = float(np.dot(relativeVelocity, normal))
    return -dragCoefficient * waterDensity * area * normalSpeed * abs(normalSpeed) * normal


class ForceIntegrator:
    '''
    Computes the force on submerged sub-triangles for one body.

    Holds the fluid constants and term switches so the orchestrator
    only passes geometry.
    '''

    def __init__(
        self,
        water: WaterSurfaceQuery,
        waterDensity: float = const.waterDensity,
        gravity: float = const.gravity,
        useStaticForces: bool = True,
        useDynamicForces: bool = False,
        dragCoefficient: float = const.defaultDragCoefficient,
        areaTolerance: float = const.areaTolerance,
    ) -> None:
        '''
        Parameters:
        -----------
        water : WaterSurfaceQuery
            Surface used for centroid depth and fluid velocity
        waterDensity : float
            Fluid density [kg/m^3]
        gravity : float
            Gravity magnitude [m/s^2] (sign ignored)
        useStaticForces : bool
            Include the hydrostatic term
        useDynamicForces : bool
            Include the hydrodynamic term
        dragCoefficient : float
            Scale on the hydrodynamic term
        areaTolerance : float
            Sub-triangles at or below this area get zero force [m^2]
        '''
        self._water = water
        self.waterDensity = waterDensity
        self.gravity = abs(gravity)
        self.useStaticForces = useStaticForces
        self.useDynamicForces = useDynamicForces
        self.dragCoefficient = dragCoefficient
        self._areaTolerance = areaTolerance

    def integrate(
        self,
        sub: ClippedSubtriangle,
        normal: np.ndarray,
        bodyVelocityAt: Optional[VelocitySampler] = None,
    ) -> Force:
        '''
        Force on one sub-triangle, applied at its centroid.

        Parameters:
        -----------
        sub : ClippedSubtriangle
            Submerged sub-triangle
        normal : np.ndarray
            Outward unit normal of the parent triangle
        bodyVelocityAt : Callable
            Body velocity at a world point; None means a body at rest

        Returns:
        --------
        Force : Summed enabled terms; may hold NaN for malformed input,
                filtering happens where forces are aggregated
        '''
        centroid = sub.centroid
        area = sub.area
        if not area > self._areaTolerance:
            return Force.zeroAt(centroid)

        staticPart = np.zeros(3)
        dynamicPart = np.zeros(3)

        if self.useStaticForces:
            # Centroid is submerged by construction; waves may nudge it above
            depth = max(0.0, -self._water.heightAboveWater(centroid))
            staticPart = hydrostaticForce(self.waterDensity, self.gravity, depth, area, normal)

        if self.useDynamicForces:
            bodyVelocity = np.zeros(3) if bodyVelocityAt is None else np.asarray(bodyVelocityAt(centroid))
            relativeVelocity = bodyVelocity - np.asarray(self._water.velocityAt(centroid))
            dynamicPart = hydrodynamicForce(
                self.waterDensity, relativeVelocity, normal, area, self.dragCoefficient,
            )

        return Force(
            vector=staticPart + dynamicPart,
            point=centroid,
            hydrostatic=staticPart,
            hydrodynamic=dynamicPart,
            area=area,
        )
