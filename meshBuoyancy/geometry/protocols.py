# -- Mesh Geometry Protocols -- #

'''
Core geometry data structures shared by the clipper, force integrator,
and orchestrator, plus the MeshSource protocol for mesh extraction.

Conventions:
    Right-handed world frame, Z up.
    Triangles wind counter-clockwise when seen from outside the body,
    so cross(B - A, C - A) points outward.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import numpy as np


######################################################################
# -- Vertex -- #
######################################################################

@dataclass(frozen=True)
class Vertex:
    '''
    A world-space point with its signed height above the water surface.

    Parameters:
    -----------
    position : np.ndarray
        World-space position, shape (3,) [m]
    height : float
        Signed height above water [m] (negative = submerged)
    '''

    position: np.ndarray
    height: float


######################################################################
# -- Clipped Sub-Triangle -- #
######################################################################

@dataclass(frozen=True)
class ClippedSubtriangle:
    '''
    Submerged piece of a mesh triangle.

    Corners are world-space positions, wound the same way as the parent
    triangle. Only exists within a single simulation step.
    '''

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray

    @property
    def centroid(self) -> np.ndarray:
        '''Centroid (A + B + C) / 3 [m].'''
        return (self.a + self.b + self.c) / 3.0

    @property
    def crossProduct(self) -> np.ndarray:
        '''cross(B - A, C - A); length is twice the area.'''
        return np.cross(self.b - self.a, self.c - self.a)

    @property
    def area(self) -> float:
        '''Triangle area [m^2], never negative.'''
        return 0.5 * float(np.linalg.norm(self.crossProduct))

    @property
    def normal(self) -> np.ndarray:
        '''Unit normal from the winding, zero vector when degenerate.'''
        cross = self.crossProduct
        length = float(np.linalg.norm(cross))
        if length <= 0.0 or not np.isfinite(length):
            return np.zeros(3)
        return cross / length


######################################################################
# -- Triangle Mesh -- #
######################################################################

@dataclass(frozen=True)
class TriangleMesh:
    '''
    Static triangle mesh in the body's local space.

    Parameters:
    -----------
    vertices : np.ndarray
        Vertex positions, shape (N, 3) [m]
    faces : np.ndarray
        Vertex index triples, shape (M, 3)
    '''

    vertices: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))
    faces: np.ndarray = field(default_factory=lambda: np.zeros((0, 3), dtype=np.int64))

    def __post_init__(self) -> None:
        vertices = np.array(self.vertices, dtype=np.float64).reshape(-1, 3)
        faces = np.array(self.faces, dtype=np.int64).reshape(-1, 3)
        vertices.flags.writeable = False
        faces.flags.writeable = False
        object.__setattr__(self, 'vertices', vertices)
        object.__setattr__(self, 'faces', faces)

    @classmethod
    def empty(cls) -> TriangleMesh:
        '''Mesh with no geometry.'''
        return cls()

    @property
    def vertexCount(self) -> int:
        return len(self.vertices)

    @property
    def triangleCount(self) -> int:
        return len(self.faces)

    @property
    def isEmpty(self) -> bool:
        '''True when there is nothing to compute forces on.'''
        return self.vertexCount == 0 or self.triangleCount == 0

    def validFaceMask(self) -> np.ndarray:
        '''Boolean mask of faces whose three indices all reference a vertex.'''
        return np.all((self.faces >= 0) & (self.faces < self.vertexCount), axis=1)

    def getBounds(self) -> tuple[np.ndarray, np.ndarray]:
        '''
        Axis-aligned bounding box in local space.

        Returns:
        --------
        tuple[np.ndarray, np.ndarray] : (min_corner, max_corner), each shape (3,)
        '''
        if self.vertexCount == 0:
            return np.zeros(3), np.zeros(3)
        return self.vertices.min(axis=0), self.vertices.max(axis=0)


######################################################################
# -- Mesh Source Protocol -- #
######################################################################

class MeshSource(Protocol):
    '''
    Protocol for anything that can hand over a body's triangle mesh.

    Extraction happens once per body. A source that cannot read its
    geometry returns an empty mesh rather than raising.
    '''

    def extract(self) -> TriangleMesh:
        '''Return the mesh in body-local space.'''
        ...
