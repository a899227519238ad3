# -- Heightmap Water Surface -- #

'''
Water surface sampled from a regular grid of surface heights.

Stands in for a local water patch (e.g. a simulated heightfield around
a boat) instead of an analytic wave field. Heights are interpolated
bilinearly; points outside the grid are clamped to its edge.
'''

from __future__ import annotations

from typing import Callable

import numpy as np
from scipy.interpolate import RegularGridInterpolator


class HeightmapSurface:
    '''
    Grid-backed water surface. Satisfies the WaterSurfaceQuery protocol.
    '''

    def __init__(
        self,
        xCoords: np.ndarray | list,
        yCoords: np.ndarray | list,
        heights: np.ndarray | list,
        current: np.ndarray | list | None = None,
    ) -> None:
        '''
        Parameters:
        -----------
        xCoords : array-like
            Strictly increasing grid X coordinates, shape (nx,) [m]
        yCoords : array-like
            Strictly increasing grid Y coordinates, shape (ny,) [m]
        heights : array-like
            Surface Z at each grid node, shape (nx, ny) [m]
        current : array-like
            Uniform fluid velocity [m/s] (default: still water)
        '''
        self._x = np.asarray(xCoords, dtype=np.float64)
        self._y = np.asarray(yCoords, dtype=np.float64)
        heights = np.asarray(heights, dtype=np.float64)

        if heights.shape != (len(self._x), len(self._y)):
            raise ValueError(
                f'Heights shape {heights.shape} does not match grid '
                f'({len(self._x)}, {len(self._y)})'
            )

        self._heights = heights
        self._interpolator = RegularGridInterpolator(
            (self._x, self._y), heights, method='linear', bounds_error=False, fill_value=None,
        )
        self.current = np.zeros(3) if current is None else np.asarray(current, dtype=np.float64).reshape(3)

    @classmethod
    def fromFunction(
        cls,
        surfaceFunction: Callable[[np.ndarray, np.ndarray], np.ndarray],
        xRange: tuple[float, float],
        yRange: tuple[float, float],
        resolution: int = 64,
        current: np.ndarray | list | None = None,
    ) -> HeightmapSurface:
        '''
        Sample a vectorized surface function z = f(x, y) onto a grid.

        Parameters:
        -----------
        surfaceFunction : Callable
            Function of meshgrid arrays returning surface heights
        xRange, yRange : tuple[float, float]
            Grid extents [m]
        resolution : int
            Number of nodes along each axis
        '''
        xs = np.linspace(xRange[0], xRange[1], resolution)
        ys = np.linspace(yRange[0], yRange[1], resolution)
        gridX, gridY = np.meshgrid(xs, ys, indexing='ij')
        return cls(xs, ys, surfaceFunction(gridX, gridY), current=current)

    def surfaceHeight(self, point: np.ndarray) -> float:
        '''Interpolated surface Z under the point's horizontal position [m].'''
        x = min(max(float(point[0]), self._x[0]), self._x[-1])
        y = min(max(float(point[1]), self._y[0]), self._y[-1])
        return float(self._interpolator([[x, y]])[0])

    def heightAboveWater(self, point: np.ndarray) -> float:
        return float(point[2]) - self.surfaceHeight(point)

    def velocityAt(self, point: np.ndarray) -> np.ndarray:
        return self.current.copy()
