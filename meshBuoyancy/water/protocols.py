# -- Water Surface Protocol -- #

'''
Abstract protocol for water surfaces queried by the buoyancy code.

Any concrete surface (flat, heightmap patch, wave field) only needs to
answer two questions about a world-space point: how far above the water
it is, and how fast the water there is moving. Bodies pick an
implementation through configuration; the force code never changes.
'''

from __future__ import annotations

from typing import Protocol

import numpy as np


class WaterSurfaceQuery(Protocol):
    '''Protocol for water surfaces.'''

    def heightAboveWater(self, point: np.ndarray) -> float:
        '''Signed height of a point above the surface [m] (negative = submerged).'''
        ...

    def velocityAt(self, point: np.ndarray) -> np.ndarray:
        '''Fluid velocity at a point [m/s], zero vector if unsupported.'''
        ...


class FlatWaterSurface:
    '''
    Horizontal calm water at a fixed level, optionally with a uniform current.

    Parameters:
    -----------
    level : float
        Z coordinate of the surface [m]
    current : array-like
        Uniform fluid velocity [m/s]
    '''

    def __init__(self, level: float = 0.0, current: np.ndarray | list | None = None) -> None:
        self.level = float(level)
        self.current = np.zeros(3) if current is None else np.asarray(current, dtype=np.float64).reshape(3)

    def heightAboveWater(self, point: np.ndarray) -> float:
        return float(point[2]) - self.level

    def velocityAt(self, point: np.ndarray) -> np.ndarray:
        return self.current.copy()

    def __repr__(self) -> str:
        return f'FlatWaterSurface(level={self.level}, current={self.current.tolist()})'
