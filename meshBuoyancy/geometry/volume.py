# -- Mesh Volume Integration -- #

'''
Enclosed volume of a closed triangle mesh by the divergence theorem.

Each triangle forms a tetrahedron with the origin; the signed volumes
sum to the enclosed volume for a watertight mesh:

    V_tet = (1/6) * p1 . (p2 x p3)

Open meshes give a deterministic but meaningless number. Closedness is
a precondition and is not checked here.

References:
-----------
Zhang, C. & Chen, T. -- Efficient feature extraction for 2D/3D objects
    in mesh representation (ICIP 2001)
'''

from __future__ import annotations

from typing import Optional

import numpy as np

from meshBuoyancy.geometry.protocols import TriangleMesh
from meshBuoyancy.geometry.transform import BodyTransform


def signedTriangleVolume(p1: np.ndarray, p2: np.ndarray, p3: np.ndarray) -> float:
    '''
    Signed volume of the tetrahedron (origin, p1, p2, p3).

    Positive when the triangle winds counter-clockwise seen from
    outside, i.e. its normal points away from the origin.
    '''
    return float(np.dot(p1, np.cross(p2, p3))) / 6.0


def meshVolume(mesh: TriangleMesh, worldTransform: Optional[BodyTransform] = None) -> float:
    '''
    Enclosed volume of a mesh after placing it in the world.

    Parameters:
    -----------
    mesh : TriangleMesh
        Closed mesh in local space
    worldTransform : BodyTransform
        Local-to-world transform (default: identity)

    Returns:
    --------
    float : Absolute enclosed volume [m^3], 0 for an empty mesh
    '''
    if mesh.isEmpty:
        return 0.0

    transform = worldTransform if worldTransform is not None else BodyTransform.identity()
    worldVertices = transform.transformPoints(mesh.vertices)

    # Reference the volume to the mesh's first vertex to keep precision
    # when the body sits far from the origin
    origin = worldVertices[0]
    faces = mesh.faces[mesh.validFaceMask()]
    p1 = worldVertices[faces[:, 0]] - origin
    p2 = worldVertices[faces[:, 1]] - origin
    p3 = worldVertices[faces[:, 2]] - origin

    signedVolumes = np.einsum('ij,ij->i', p1, np.cross(p2, p3)) / 6.0
    return abs(float(np.sum(signedVolumes)))
