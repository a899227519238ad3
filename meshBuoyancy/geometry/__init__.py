# -- Geometry Subpackage -- #

'''
Triangle meshes, height-sorted triangles, waterline clipping,
body transforms, and closed-mesh volume integration.
'''

from meshBuoyancy.geometry.protocols import ClippedSubtriangle, MeshSource, TriangleMesh, Vertex
from meshBuoyancy.geometry.triangle import Triangle
from meshBuoyancy.geometry.clipper import TriangleClipper
from meshBuoyancy.geometry.transform import BodyTransform
from meshBuoyancy.geometry.volume import meshVolume, signedTriangleVolume
from meshBuoyancy.geometry.meshLoader import StaticMeshSource, TrimeshSource, boxMesh, icosphereMesh
