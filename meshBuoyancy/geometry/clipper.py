# -- Submerged Triangle Clipper -- #

'''
Cuts a mesh triangle against the water surface and returns the
submerged part as zero, one, or two sub-triangles.

Height above water is treated as varying linearly along each edge,
so the waterline crosses an edge where the interpolated height is zero:

    t = hStart / (hStart - hEnd)
    cut = start + t * (end - start)

Cases, with vertices sorted H >= M >= L by height:
    - H, M, L above water      -> nothing
    - H, M, L submerged        -> the original triangle
    - only H above water       -> quad (cutHM, M, L, cutHL) as two triangles
    - H and M above water      -> triangle (cutML, L, cutHL)

Heights within heightTolerance of zero count as submerged.
'''

from __future__ import annotations

from typing import Optional

import numpy as np

from meshBuoyancy import constants as const
from meshBuoyancy.geometry.protocols import ClippedSubtriangle, Vertex
from meshBuoyancy.geometry.triangle import Triangle


Waterline = tuple[np.ndarray, np.ndarray]


class TriangleClipper:
    '''
    Clips triangles to the submerged half-space.

    Stateless once built, so one clipper can be shared between
    bodies and threads.
    '''

    def __init__(
        self,
        heightTolerance: float = const.heightTolerance,
        areaTolerance: float = const.areaTolerance,
    ) -> None:
        '''
        Parameters:
        -----------
        heightTolerance : float
            Band around zero height treated as on the surface [m]
        areaTolerance : float
            Sub-triangles with a smaller area are dropped [m^2]
        '''
        self._heightTolerance = heightTolerance
        self._areaTolerance = areaTolerance

    def clip(self, triangle: Triangle) -> list[ClippedSubtriangle]:
        '''
        Submerged portion of a triangle.

        Parameters:
        -----------
        triangle : Triangle
            Height-sorted triangle

        Returns:
        --------
        list[ClippedSubtriangle] : 0, 1 or 2 non-degenerate sub-triangles
        '''
        subtriangles, _ = self.clipWithWaterline(triangle)
        return subtriangles

    def clipWithWaterline(
        self, triangle: Triangle
    ) -> tuple[list[ClippedSubtriangle], Optional[Waterline]]:
        '''
        Submerged portion of a triangle plus the waterline segment.

        The waterline is the cut segment across the triangle, or None
        when the triangle is entirely above or below the surface.
        '''
        if triangle.isDegenerate:
            return [], None

        h, m, l = triangle.h, triangle.m, triangle.l

        if self._isAbove(l):
            # Fully above water
            return [], None

        if not self._isAbove(h):
            # Fully submerged: keep the original winding
            a, b, c = (v.position for v in triangle.corners)
            return self._keepValid([(a, b, c)], triangle.isReversed, reorder=False), None

        if not self._isAbove(m):
            # One vertex above water
            cutHM = findCutOnEdge(h, m)
            cutHL = findCutOnEdge(h, l)
            pieces = [
                (cutHM, m.position, l.position),
                (cutHM, l.position, cutHL),
            ]
            return self._keepValid(pieces, triangle.isReversed), (cutHM, cutHL)

        # Two vertices above water
        cutML = findCutOnEdge(m, l)
        cutHL = findCutOnEdge(h, l)
        pieces = [(cutML, l.position, cutHL)]
        return self._keepValid(pieces, triangle.isReversed), (cutHL, cutML)

    def _isAbove(self, vertex: Vertex) -> bool:
        return vertex.height > self._heightTolerance

    def _keepValid(
        self,
        pieces: list[tuple[np.ndarray, np.ndarray, np.ndarray]],
        isReversed: bool,
        reorder: bool = True,
    ) -> list[ClippedSubtriangle]:
        '''Wrap corner triples as sub-triangles, fixing winding and dropping slivers.'''
        result: list[ClippedSubtriangle] = []
        for a, b, c in pieces:
            if reorder and isReversed:
                b, c = c, b
            sub = ClippedSubtriangle(a, b, c)
            area = sub.area
            if not np.isfinite(area) or area <= self._areaTolerance:
                continue
            result.append(sub)
        return result


def findCutOnEdge(start: Vertex, end: Vertex) -> np.ndarray:
    '''
    Point on the edge start -> end where the height crosses zero.

    Parameters:
    -----------
    start : Vertex
        Edge start (above water)
    end : Vertex
        Edge end (at or below water)

    Returns:
    --------
    np.ndarray : Interpolated waterline position, shape (3,)
    '''
    denominator = start.height - end.height
    if denominator == 0.0 or not np.isfinite(denominator):
        # Edge parallel to the surface, no crossing to find
        return np.array(end.position, dtype=np.float64)

    t = min(max(start.height / denominator, 0.0), 1.0)
    return start.position + t * (end.position - start.position)
