# -- Buoyant Mesh Triangle -- #

'''
A world-space mesh triangle with per-vertex heights above water.

On construction the three vertices are ordered by height into
H (highest), M (middle) and L (lowest), which is the form the
clipper works with. The outward normal is taken from the original
winding before reordering.

Reference:
-----------
Kerner, J. -- Water interaction model for boats in video games (2015)
'''

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from meshBuoyancy import constants as const
from meshBuoyancy.geometry.protocols import Vertex


# Even permutations of (0, 1, 2) keep the winding of the original triangle
_EVEN_PERMUTATIONS = {(0, 1, 2), (1, 2, 0), (2, 0, 1)}


@dataclass(frozen=True)
class Triangle:
    '''
    Mesh triangle sorted by height above water.

    Parameters:
    -----------
    h : Vertex
        Highest vertex (least submerged)
    m : Vertex
        Middle vertex
    l : Vertex
        Lowest vertex (most submerged)
    normal : np.ndarray
        Outward unit normal, zero vector if the triangle is degenerate
    corners : tuple[Vertex, Vertex, Vertex]
        Vertices in their original winding order
    isReversed : bool
        True when H -> M -> L winds opposite to the original triangle
    '''

    h: Vertex
    m: Vertex
    l: Vertex
    normal: np.ndarray
    corners: tuple[Vertex, Vertex, Vertex]
    isReversed: bool

    @classmethod
    def fromVertices(cls, a: Vertex, b: Vertex, c: Vertex) -> Triangle:
        '''
        Build a triangle from vertices in outward (counter-clockwise) order.

        Parameters:
        -----------
        a, b, c : Vertex
            Corners wound counter-clockwise seen from outside the body

        Returns:
        --------
        Triangle : Sorted triangle with its outward normal
        '''
        corners = (a, b, c)

        cross = np.cross(b.position - a.position, c.position - a.position)
        length = float(np.linalg.norm(cross))
        if np.isfinite(length) and 0.5 * length > const.areaTolerance:
            normal = cross / length
        else:
            normal = np.zeros(3)

        order = sortIndicesByHeight(a.height, b.height, c.height)

        return cls(
            h=corners[order[0]],
            m=corners[order[1]],
            l=corners[order[2]],
            normal=normal,
            corners=corners,
            isReversed=tuple(order) not in _EVEN_PERMUTATIONS,
        )

    @property
    def isDegenerate(self) -> bool:
        '''Zero-area (or non-finite) triangles carry no normal.'''
        return not bool(np.any(self.normal))

    @property
    def area(self) -> float:
        '''Area of the full triangle [m^2].'''
        a, b, c = (v.position for v in self.corners)
        return 0.5 * float(np.linalg.norm(np.cross(b - a, c - a)))


def sortIndicesByHeight(heightA: float, heightB: float, heightC: float) -> list[int]:
    '''
    Indices of three heights ordered highest first.

    The sort is stable, so equal heights keep their winding order.
    That keeps the H/M/L assignment fixed on calm water.
    '''
    heights = (heightA, heightB, heightC)
    return sorted(range(3), key=lambda i: -heights[i])
