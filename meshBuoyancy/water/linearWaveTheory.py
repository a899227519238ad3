# -- Linear Wave Field -- #

'''
Airy (linear) wave kinematics and the wave-field water surface built on them.

Valid for small waves, H/L << 1 and H/d << 1. With s the horizontal
distance along the propagation direction and theta = k*s - omega*t + phi:

    omega^2 = g * k * tanh(k * d)                     dispersion
    eta     = a * cos(theta)                          surface elevation
    u       = a * omega * C(z) * cos(theta)           horizontal velocity
    w       = a * omega * S(z) * sin(theta)           vertical velocity

C(z) and S(z) are the cosh/sinh depth profiles, evaluated in exponential
form so that deep water does not overflow:

    C(z) = (e^{kz} + e^{-k(z+2d)}) / (1 - e^{-2kd})
    S(z) = (e^{kz} - e^{-k(z+2d)}) / (1 - e^{-2kd})

References:
-----------
Dean, R.G. & Dalrymple, R.A. -- Water Wave Mechanics for Engineers and Scientists
'''

from __future__ import annotations

import math

import numpy as np
from scipy.optimize import brentq

from meshBuoyancy import constants as c
from meshBuoyancy.water.waveConditions import WaveConditions


class LinearWaveTheory:
    '''Dispersion, elevation and orbital velocity of a regular wave.'''

    def __init__(self, gravity: float = c.gravity) -> None:
        self._gravity = abs(gravity)

    def solveDispersionRelation(self, omega: float, depth: float) -> float:
        '''
        Wavenumber k [rad/m] for angular frequency omega at depth d.

        g*k*tanh(k*d) grows monotonically in k, so the root is bracketed
        between the deep-water value k0 = omega^2/g and k0 / tanh(k0*d).
        '''
        g = self._gravity
        kDeep = omega * omega / g

        def residual(k: float) -> float:
            return g * k * math.tanh(k * depth) - omega * omega

        # tanh saturates to exactly 1 in deep water
        if residual(kDeep) >= 0.0:
            return kDeep

        kShallow = kDeep / math.tanh(kDeep * depth)
        return brentq(residual, kDeep, kShallow, xtol=1e-14)

    def waveNumber(self, waveConditions: WaveConditions) -> float:
        return self.solveDispersionRelation(waveConditions.angularFrequency, waveConditions.depth)

    def waveLength(self, waveConditions: WaveConditions) -> float:
        '''L = 2*pi/k [m]'''
        return 2.0 * math.pi / self.waveNumber(waveConditions)

    def phaseAngle(self, s: float, t: float, waveConditions: WaveConditions) -> float:
        k = self.waveNumber(waveConditions)
        return k * s - waveConditions.angularFrequency * t + waveConditions.phase

    def surfaceElevation(self, s: float, t: float, waveConditions: WaveConditions) -> float:
        '''Elevation eta above still water [m] at distance s along the wave and time t.'''
        return waveConditions.amplitude * math.cos(self.phaseAngle(s, t, waveConditions))

    def velocityField(
        self, s: float, z: float, t: float, waveConditions: WaveConditions
    ) -> tuple[float, float]:
        '''
        Orbital velocity (u, w) [m/s] under the wave.

        Parameters:
        -----------
        s : float
            Horizontal distance along the propagation direction [m]
        z : float
            Height relative to still water, clamped to [-d, 0] [m]
        t : float
            Time [s]
        waveConditions : WaveConditions
            Wave state
        '''
        k = self.waveNumber(waveConditions)
        d = waveConditions.depth
        z = min(0.0, max(-d, z))

        denominator = -math.expm1(-2.0 * k * d)
        if denominator <= 0.0:
            return (0.0, 0.0)

        rising = math.exp(k * z)
        reflected = math.exp(-k * (z + 2.0 * d))
        horizontalProfile = (rising + reflected) / denominator
        verticalProfile = (rising - reflected) / denominator

        theta = self.phaseAngle(s, t, waveConditions)
        speed = waveConditions.amplitude * waveConditions.angularFrequency
        return (speed * horizontalProfile * math.cos(theta), speed * verticalProfile * math.sin(theta))

    def isBroken(self, waveConditions: WaveConditions) -> bool:
        '''True past McCowan's depth limit (H/d) or Miche's steepness limit (H/L).'''
        if waveConditions.height > c.breakingDepthRatio * waveConditions.depth:
            return True
        return waveConditions.height > c.breakingSteepnessRatio * self.waveLength(waveConditions)


class WaveFieldSurface:
    '''
    Water surface driven by a single linear wave.

    Satisfies the WaterSurfaceQuery protocol. Time is advanced explicitly
    by the owner of the simulation loop.
    '''

    def __init__(
        self,
        waveConditions: WaveConditions,
        waterLevel: float = 0.0,
        time: float = 0.0,
        waveModel: LinearWaveTheory | None = None,
    ) -> None:
        '''
        Parameters:
        -----------
        waveConditions : WaveConditions
            Wave state
        waterLevel : float
            Still water level [m]
        time : float
            Initial time [s]
        waveModel : LinearWaveTheory
            Wave kinematics (default: standard gravity)
        '''
        self.waveConditions = waveConditions
        self.waterLevel = float(waterLevel)
        self.time = float(time)
        self._model = waveModel if waveModel is not None else LinearWaveTheory()
        self._direction = np.array([*waveConditions.directionVector, 0.0])

    def advance(self, dt: float) -> None:
        '''Move the wave field forward in time [s].'''
        self.time += dt

    def _distanceAlongWave(self, point: np.ndarray) -> float:
        return float(point[0] * self._direction[0] + point[1] * self._direction[1])

    def surfaceHeight(self, point: np.ndarray) -> float:
        '''Absolute Z of the surface above the point's horizontal position [m].'''
        s = self._distanceAlongWave(point)
        return self.waterLevel + self._model.surfaceElevation(s, self.time, self.waveConditions)

    def heightAboveWater(self, point: np.ndarray) -> float:
        return float(point[2]) - self.surfaceHeight(point)

    def velocityAt(self, point: np.ndarray) -> np.ndarray:
        if self.heightAboveWater(point) > 0.0:
            return np.zeros(3)

        s = self._distanceAlongWave(point)
        u, w = self._model.velocityField(
            s, float(point[2]) - self.waterLevel, self.time, self.waveConditions
        )
        return np.array([u * self._direction[0], u * self._direction[1], w])

    def __repr__(self) -> str:
        wc = self.waveConditions
        return f'WaveFieldSurface(H={wc.height}m, T={wc.period}s, d={wc.depth}m, t={self.time:.2f}s)'
