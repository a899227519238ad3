# -- Mesh Force Orchestrator -- #

'''
Applies buoyancy forces from a triangle mesh to a rigid body each step.

Per step, for one body:
1. Transform the cached local mesh to world space
2. Query height above water once per vertex
3. For every triangle: sort by height, clip to the submerged part,
   integrate the force on each sub-triangle
4. Optionally keep only the vertical component
5. Drop zero or non-finite forces, push the rest to the rigid body

Nothing here is fatal. A body without water, without a rigid body, or
without usable geometry simply gets no forces; each of those conditions
is logged once and reported back through StepSummary.issue.
'''

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from meshBuoyancy import constants as const
from meshBuoyancy.geometry.clipper import TriangleClipper
from meshBuoyancy.geometry.protocols import MeshSource, TriangleMesh, Vertex
from meshBuoyancy.geometry.transform import BodyTransform
from meshBuoyancy.geometry.triangle import Triangle
from meshBuoyancy.geometry.volume import meshVolume
from meshBuoyancy.hydrodynamics.forceIntegrator import ForceIntegrator, VelocitySampler
from meshBuoyancy.hydrodynamics.protocols import Force
from meshBuoyancy.simulation.config import BuoyancyConfig
from meshBuoyancy.simulation.rigidBody import RigidBodySink
from meshBuoyancy.visualization.debugDraw import DebugDrawer
from meshBuoyancy.water.protocols import WaterSurfaceQuery

logger = logging.getLogger(__name__)

# Force arrows are drawn this long per Newton, times config.forceArrowSize
_ARROW_LENGTH_PER_NEWTON = 1e-4


class BuoyancyIssue(Enum):
    '''Non-fatal conditions that leave a body without buoyancy.'''

    MISSING_WATER = 'no water surface configured'
    MISSING_BODY = 'no rigid body to apply forces to'
    INVALID_MESH = 'mesh source provided no usable geometry'


@dataclass
class StepSummary:
    '''
    Outcome of one orchestrator step.

    Parameters:
    -----------
    appliedForces : int
        Forces pushed to the rigid body
    discardedForces : int
        Forces dropped for being zero length or non-finite
    subtriangles : int
        Submerged sub-triangles integrated
    submergedArea : float
        Total area of those sub-triangles [m^2]
    totalForce : np.ndarray
        Sum of the applied forces [N]
    issue : BuoyancyIssue | None
        Why the step applied nothing, if it was skipped
    '''

    appliedForces: int = 0
    discardedForces: int = 0
    subtriangles: int = 0
    submergedArea: float = 0.0
    totalForce: np.ndarray = field(default_factory=lambda: np.zeros(3))
    issue: Optional[BuoyancyIssue] = None


class MeshForceOrchestrator:
    '''
    Drives the clipper and force integrator over a body's mesh.

    Each body owns its orchestrator and mesh; orchestrators share no
    mutable state, so separate bodies can be stepped concurrently.
    '''

    def __init__(
        self,
        meshSource: MeshSource,
        water: Optional[WaterSurfaceQuery] = None,
        body: Optional[RigidBodySink] = None,
        config: Optional[BuoyancyConfig] = None,
        debugDrawer: Optional[DebugDrawer] = None,
        clipper: Optional[TriangleClipper] = None,
        name: str = 'body',
    ) -> None:
        '''
        Parameters:
        -----------
        meshSource : MeshSource
            Provides the body's mesh once, on initialization
        water : WaterSurfaceQuery
            Water surface the body floats in
        body : RigidBodySink
            Rigid body receiving the forces
        config : BuoyancyConfig
            Per-body settings (default: BuoyancyConfig())
        debugDrawer : DebugDrawer
            Receives debug primitives when debug toggles are on
        clipper : TriangleClipper
            Triangle clipper (default: standard tolerances)
        name : str
            Label used in log messages
        '''
        self._meshSource = meshSource
        self.water = water
        self.body = body
        self.config = config if config is not None else BuoyancyConfig()
        self.debugDrawer = debugDrawer
        self._clipper = clipper if clipper is not None else TriangleClipper()
        self.name = name

        self._mesh: TriangleMesh | None = None
        self._hasGeometry = False
        self._massApplied = False
        self._reportedIssues: set[BuoyancyIssue] = set()

    ######################################################################
    # -- Properties -- #
    ######################################################################

    @property
    def mesh(self) -> TriangleMesh:
        '''Cached body mesh, extracted on first access.'''
        if self._mesh is None:
            self.initialize()
        return self._mesh

    @property
    def isInitialized(self) -> bool:
        return self._mesh is not None

    @property
    def reportedIssues(self) -> frozenset[BuoyancyIssue]:
        '''Issues logged so far; each is logged only once.'''
        return frozenset(self._reportedIssues)

    ######################################################################
    # -- Initialization -- #
    ######################################################################

    def initialize(self) -> None:
        '''
        Extract and cache the mesh, then apply any mass override.

        Safe to call repeatedly; the mesh is extracted only once.
        '''
        if self._mesh is None:
            mesh = self._meshSource.extract()
            if mesh is None:
                mesh = TriangleMesh.empty()
            self._mesh = mesh
            self._hasGeometry = not mesh.isEmpty and bool(np.any(mesh.validFaceMask()))

            if not self._hasGeometry:
                self._reportIssue(BuoyancyIssue.INVALID_MESH)
            else:
                logger.debug(
                    '%s: cached mesh with %d vertices, %d triangles',
                    self.name, mesh.vertexCount, mesh.triangleCount,
                )

        if not self._massApplied and self.body is not None:
            self._applyMassProperties()

    def _applyMassProperties(self) -> None:
        '''Set the body mass from mesh density and/or the explicit override.'''
        self._massApplied = True
        config = self.config

        if config.overrideMeshDensity and self._hasGeometry:
            volume = meshVolume(self._mesh, self.body.transform)
            massKg = config.meshDensity * volume
            if massKg > 0.0:
                self.body.setMassOverride(massKg)
                logger.info(
                    '%s: mass %.3f kg from density %.1f kg/m^3 and volume %.6f m^3',
                    self.name, massKg, config.meshDensity, volume,
                )

        if config.overrideMass:
            self.body.setMassOverride(config.massKg)
            logger.info('%s: mass overridden to %.3f kg', self.name, config.massKg)

    def _reportIssue(self, issue: BuoyancyIssue) -> BuoyancyIssue:
        if issue not in self._reportedIssues:
            self._reportedIssues.add(issue)
            logger.warning('%s has no buoyancy: %s', self.name, issue.value)
        return issue

    ######################################################################
    # -- Force Computation -- #
    ######################################################################

    def computeForces(
        self,
        transform: Optional[BodyTransform] = None,
        bodyVelocityAt: Optional[VelocitySampler] = None,
    ) -> tuple[list[Force], StepSummary]:
        '''
        Forces the body would receive at a pose, without applying them.

        Parameters:
        -----------
        transform : BodyTransform
            Body pose (default: the rigid body's current pose)
        bodyVelocityAt : Callable
            Body velocity sampler (default: the rigid body's, if any)

        Returns:
        --------
        tuple[list[Force], StepSummary] : Valid forces and step statistics
        '''
        summary = StepSummary()
        mesh = self.mesh

        if self.water is None:
            summary.issue = self._reportIssue(BuoyancyIssue.MISSING_WATER)
            return [], summary
        if not self._hasGeometry:
            summary.issue = BuoyancyIssue.INVALID_MESH
            return [], summary

        if transform is None:
            if self.body is None:
                summary.issue = self._reportIssue(BuoyancyIssue.MISSING_BODY)
                return [], summary
            transform = self.body.transform
        if bodyVelocityAt is None and self.body is not None:
            bodyVelocityAt = self.body.velocityAtPoint

        config = self.config
        integrator = ForceIntegrator(
            self.water,
            waterDensity=config.waterDensity,
            gravity=config.gravity,
            useStaticForces=config.useStaticForces,
            useDynamicForces=config.useDynamicForces,
            dragCoefficient=config.dragCoefficient,
        )
        drawer = self.debugDrawer if config.isDebugDrawing else None

        vertices = self._buildVertices(mesh, transform)
        faces = mesh.faces[mesh.validFaceMask()]
        flipWinding = transform.isMirroring

        forces: list[Force] = []
        for i0, i1, i2 in faces:
            a, b, c = vertices[i0], vertices[i1], vertices[i2]
            if flipWinding:
                b, c = c, b

            if drawer is not None and config.drawTriangles:
                drawer.drawTriangle(a.position, b.position, c.position, 'triangle')

            triangle = Triangle.fromVertices(a, b, c)
            subtriangles, waterline = self._clipper.clipWithWaterline(triangle)

            if drawer is not None and config.drawWaterline and waterline is not None:
                drawer.drawLine(waterline[0], waterline[1], 'waterline')

            for sub in subtriangles:
                if drawer is not None and config.drawSubtriangles:
                    drawer.drawTriangle(sub.a, sub.b, sub.c, 'subtriangle')

                force = integrator.integrate(sub, triangle.normal, bodyVelocityAt)
                summary.subtriangles += 1
                summary.submergedArea += sub.area

                if config.verticalForcesOnly:
                    force = force.verticalOnly()

                if not isValidForce(force):
                    summary.discardedForces += 1
                    continue

                forces.append(force)
                summary.totalForce = summary.totalForce + force.vector

        return forces, summary

    def _buildVertices(self, mesh: TriangleMesh, transform: BodyTransform) -> list[Vertex]:
        '''World-space vertices with one water query each.'''
        worldPositions = transform.transformPoints(mesh.vertices)
        return [
            Vertex(position, float(self.water.heightAboveWater(position)))
            for position in worldPositions
        ]

    ######################################################################
    # -- Simulation Step -- #
    ######################################################################

    def step(self, transform: Optional[BodyTransform] = None) -> StepSummary:
        '''
        Compute and apply this step's buoyancy forces.

        Parameters:
        -----------
        transform : BodyTransform
            Body pose override (default: the rigid body's current pose)

        Returns:
        --------
        StepSummary : What was applied, or why nothing was
        '''
        self.initialize()

        if self.body is None:
            summary = StepSummary(issue=self._reportIssue(BuoyancyIssue.MISSING_BODY))
            return summary

        forces, summary = self.computeForces(transform)
        drawArrows = self.debugDrawer is not None and self.config.drawForceArrows

        for force in forces:
            self.body.applyForce(force.vector, force.point)
            summary.appliedForces += 1

            if drawArrows:
                length = self.config.forceArrowSize * _ARROW_LENGTH_PER_NEWTON
                self.debugDrawer.drawLine(force.point - force.vector * length, force.point, 'force')

        logger.debug(
            '%s: applied %d forces (%d discarded), submerged area %.4f m^2, total %s N',
            self.name, summary.appliedForces, summary.discardedForces,
            summary.submergedArea, np.round(summary.totalForce, 3),
        )
        return summary


def isValidForce(force: Force) -> bool:
    '''A force may reach the rigid body only if finite and not near zero.'''
    return force.isFinite and force.magnitude > const.forceTolerance
