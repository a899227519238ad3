# -- Hydrodynamic Force Protocols -- #

'''
Result dataclass for per-triangle force computations.
'''

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class Force:
    '''
    Force vector with the world-space point it acts at.

    Parameters:
    -----------
    vector : np.ndarray
        Force in Newtons, shape (3,)
    point : np.ndarray
        Application point [m], the centroid of the sub-triangle it came from
    hydrostatic : np.ndarray
        Hydrostatic (pressure) part of the vector [N]
    hydrodynamic : np.ndarray
        Hydrodynamic (drag) part of the vector [N]
    area : float
        Area of the sub-triangle [m^2]
    '''

    vector: np.ndarray
    point: np.ndarray
    hydrostatic: np.ndarray = field(default_factory=lambda: np.zeros(3))
    hydrodynamic: np.ndarray = field(default_factory=lambda: np.zeros(3))
    area: float = 0.0

    @classmethod
    def zeroAt(cls, point: np.ndarray) -> Force:
        return cls(vector=np.zeros(3), point=np.array(point, dtype=np.float64))

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.vector))

    @property
    def isFinite(self) -> bool:
        '''False if the vector or point holds a NaN or infinity.'''
        return bool(np.all(np.isfinite(self.vector)) and np.all(np.isfinite(self.point)))

    def verticalOnly(self) -> Force:
        '''Copy keeping only the Z component of every vector.'''
        return Force(
            vector=np.array([0.0, 0.0, self.vector[2]]),
            point=self.point,
            hydrostatic=np.array([0.0, 0.0, self.hydrostatic[2]]),
            hydrodynamic=np.array([0.0, 0.0, self.hydrodynamic[2]]),
            area=self.area,
        )
