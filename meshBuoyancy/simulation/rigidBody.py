# -- Rigid Body Sink -- #

'''
Interface to the rigid-body solver that receives buoyancy forces, and
a minimal accumulator implementation of it.

The buoyancy code only pushes forces at points and reads the body's
pose and point velocities; mass properties and integration belong to
the rigid-body solver.
'''

from __future__ import annotations

import threading
from typing import Protocol

import numpy as np
from scipy.spatial.transform import Rotation

from meshBuoyancy import constants as const
from meshBuoyancy.geometry.transform import BodyTransform


class RigidBodySink(Protocol):
    '''Protocol for the rigid body a buoyant mesh is attached to.'''

    @property
    def transform(self) -> BodyTransform:
        '''Current local-to-world transform.'''
        ...

    def applyForce(self, force: np.ndarray, point: np.ndarray) -> None:
        '''Accumulate a world-space force acting at a world-space point.'''
        ...

    def velocityAtPoint(self, point: np.ndarray) -> np.ndarray:
        '''World-space velocity of the body material at a point [m/s].'''
        ...

    def setMassOverride(self, massKg: float) -> None:
        '''Replace the body mass [kg].'''
        ...


class RigidBodyState:
    '''
    Force accumulator and pose holder satisfying RigidBodySink.

    Forces and torques (about the center of mass) are summed under a lock,
    so several threads may apply forces to the same body. integrate() is a
    plain semi-implicit Euler step for demos and tests, not a solver.
    '''

    def __init__(
        self,
        massKg: float = const.defaultMassKg,
        transform: BodyTransform | None = None,
        linearVelocity: np.ndarray | list | None = None,
        angularVelocity: np.ndarray | list | None = None,
        inertia: float | np.ndarray | None = None,
        centerOfMassLocal: np.ndarray | list | None = None,
    ) -> None:
        '''
        Parameters:
        -----------
        massKg : float
            Body mass [kg]
        transform : BodyTransform
            Initial pose (default: identity)
        linearVelocity : array-like
            Center-of-mass velocity [m/s]
        angularVelocity : array-like
            World-space angular velocity [rad/s]
        inertia : float | np.ndarray
            Principal moments of inertia in body axes [kg*m^2]
            (default: a solid unit cube of the given mass)
        centerOfMassLocal : array-like
            Center of mass in body-local space [m]
        '''
        self.massKg = float(massKg)
        self._transform = transform if transform is not None else BodyTransform.identity()
        self.linearVelocity = np.zeros(3) if linearVelocity is None else np.asarray(linearVelocity, dtype=np.float64)
        self.angularVelocity = np.zeros(3) if angularVelocity is None else np.asarray(angularVelocity, dtype=np.float64)
        if inertia is None:
            inertia = self.massKg / 6.0
        self.inertia = np.broadcast_to(np.asarray(inertia, dtype=np.float64), (3,)).copy()
        self.centerOfMassLocal = np.zeros(3) if centerOfMassLocal is None else np.asarray(centerOfMassLocal, dtype=np.float64)

        self._lock = threading.Lock()
        self._force = np.zeros(3)
        self._torque = np.zeros(3)
        self._forceCount = 0

    ######################################################################
    # -- RigidBodySink -- #
    ######################################################################

    @property
    def transform(self) -> BodyTransform:
        return self._transform

    @transform.setter
    def transform(self, value: BodyTransform) -> None:
        self._transform = value

    @property
    def centerOfMass(self) -> np.ndarray:
        '''World-space center of mass [m].'''
        return self._transform.transformPoint(self.centerOfMassLocal)

    def applyForce(self, force: np.ndarray, point: np.ndarray) -> None:
        force = np.asarray(force, dtype=np.float64)
        torque = np.cross(np.asarray(point, dtype=np.float64) - self.centerOfMass, force)
        with self._lock:
            self._force += force
            self._torque += torque
            self._forceCount += 1

    def velocityAtPoint(self, point: np.ndarray) -> np.ndarray:
        return self.linearVelocity + np.cross(self.angularVelocity, np.asarray(point) - self.centerOfMass)

    def setMassOverride(self, massKg: float) -> None:
        # Keep the inertia tensor proportional to the new mass
        if self.massKg > 0.0:
            self.inertia = self.inertia * (massKg / self.massKg)
        self.massKg = float(massKg)

    ######################################################################
    # -- Accumulators -- #
    ######################################################################

    @property
    def accumulatedForce(self) -> np.ndarray:
        with self._lock:
            return self._force.copy()

    @property
    def accumulatedTorque(self) -> np.ndarray:
        with self._lock:
            return self._torque.copy()

    @property
    def forceCount(self) -> int:
        '''Number of applyForce calls since the last clear.'''
        with self._lock:
            return self._forceCount

    def clearForces(self) -> None:
        with self._lock:
            self._force = np.zeros(3)
            self._torque = np.zeros(3)
            self._forceCount = 0

    ######################################################################
    # -- Integration -- #
    ######################################################################

    def integrate(self, dt: float, gravity: float = const.gravity) -> None:
        '''
        Advance the pose by one semi-implicit Euler step and clear forces.

        Parameters:
        -----------
        dt : float
            Time step [s]
        gravity : float
            Gravity magnitude acting along -Z [m/s^2]
        '''
        if self.massKg <= 0.0:
            self.clearForces()
            return

        force = self.accumulatedForce + np.array([0.0, 0.0, -abs(gravity) * self.massKg])
        torque = self.accumulatedTorque

        # Torque to body axes, divide by the principal moments, back to world
        rotation = self._transform.rotation
        angularAccelBody = rotation.inv().apply(torque) / self.inertia
        angularAccel = rotation.apply(angularAccelBody)

        self.linearVelocity = self.linearVelocity + force / self.massKg * dt
        self.angularVelocity = self.angularVelocity + angularAccel * dt

        centerOfMass = self.centerOfMass
        newRotation = Rotation.from_rotvec(self.angularVelocity * dt) * rotation
        newCenterOfMass = centerOfMass + self.linearVelocity * dt

        # Rotate about the center of mass, not the body origin
        offset = newRotation.apply(self.centerOfMassLocal * self._transform.scale)
        self._transform = BodyTransform(
            position=newCenterOfMass - offset,
            rotation=newRotation,
            scale=self._transform.scale,
        )
        self.clearForces()
