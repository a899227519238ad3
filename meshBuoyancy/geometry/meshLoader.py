# -- Triangle Mesh Sources -- #

'''
Mesh sources that hand a body its triangle mesh.

TrimeshSource uses trimesh for file loading and repair, so any format
trimesh reads (STL, OBJ, PLY, GLB, ...) can drive a buoyant body.
A file that cannot be read yields an empty mesh: the body then simply
receives no forces.

Primitive factories (box, icosphere) are provided for tests and demos.
'''

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import trimesh

from meshBuoyancy.geometry.protocols import TriangleMesh

logger = logging.getLogger(__name__)


class StaticMeshSource:
    '''Mesh source wrapping an already-built TriangleMesh.'''

    def __init__(self, mesh: TriangleMesh) -> None:
        self._mesh = mesh

    def extract(self) -> TriangleMesh:
        return self._mesh


class TrimeshSource:
    '''
    Mesh source backed by a mesh file.

    The file is read on the first call to extract() and cached for the
    lifetime of the source.
    '''

    def __init__(
        self,
        meshFilePath: str | Path,
        scale: float = 1.0,
        repair: bool = True,
        strict: bool = False,
    ) -> None:
        '''
        Parameters:
        -----------
        meshFilePath : str | Path
            Path to a mesh file readable by trimesh
        scale : float
            Uniform scale applied on load (e.g. 0.001 for mm -> m)
        repair : bool
            Fill holes and fix normals when the mesh is not watertight
        strict : bool
            Raise FileNotFoundError for a missing file instead of
            returning an empty mesh
        '''
        self._path = Path(meshFilePath)
        self._scale = scale
        self._repair = repair
        self._strict = strict
        self._mesh: TriangleMesh | None = None

    @property
    def path(self) -> Path:
        return self._path

    def extract(self) -> TriangleMesh:
        if self._mesh is None:
            self._mesh = self._load()
        return self._mesh

    def _load(self) -> TriangleMesh:
        if not self._path.exists():
            if self._strict:
                raise FileNotFoundError(f'Mesh file not found: {self._path}')
            logger.warning('Mesh file not found: %s', self._path)
            return TriangleMesh.empty()

        try:
            loaded = trimesh.load(str(self._path), force='mesh')
        except Exception as e:
            logger.warning('Could not read mesh %s: %s', self._path, e)
            return TriangleMesh.empty()

        if not isinstance(loaded, trimesh.Trimesh) or len(loaded.faces) == 0:
            logger.warning('Mesh %s contains no triangles', self._path.name)
            return TriangleMesh.empty()

        # Auto-repair: fill holes and fix normals for volume computation
        if self._repair and not loaded.is_watertight:
            trimesh.repair.fill_holes(loaded)
            trimesh.repair.fix_normals(loaded)

        if self._scale != 1.0:
            loaded.apply_scale(self._scale)

        mesh = fromTrimesh(loaded)
        logger.info(
            'Loaded %s: %d vertices, %d triangles (watertight: %s)',
            self._path.name, mesh.vertexCount, mesh.triangleCount, loaded.is_watertight,
        )
        return mesh


######################################################################
# -- Conversions -- #
######################################################################

def fromTrimesh(mesh: trimesh.Trimesh) -> TriangleMesh:
    '''Copy a trimesh.Trimesh into a TriangleMesh.'''
    return TriangleMesh(
        vertices=np.asarray(mesh.vertices, dtype=np.float64),
        faces=np.asarray(mesh.faces, dtype=np.int64),
    )


def toTrimesh(mesh: TriangleMesh) -> trimesh.Trimesh:
    '''Copy a TriangleMesh into a trimesh.Trimesh without merging vertices.'''
    return trimesh.Trimesh(
        vertices=np.array(mesh.vertices),
        faces=np.array(mesh.faces),
        process=False,
    )


######################################################################
# -- Primitive Factories -- #
######################################################################

def boxMesh(size: float | tuple[float, float, float] = 1.0) -> TriangleMesh:
    '''
    Closed box centered on the origin, 8 vertices and 12 triangles.

    Parameters:
    -----------
    size : float | tuple
        Edge length, or (x, y, z) extents [m]
    '''
    extents = np.broadcast_to(np.asarray(size, dtype=np.float64), (3,))
    return fromTrimesh(trimesh.creation.box(extents=extents))


def icosphereMesh(radius: float = 0.5, subdivisions: int = 3) -> TriangleMesh:
    '''
    Closed icosphere centered on the origin.

    Parameters:
    -----------
    radius : float
        Sphere radius [m]
    subdivisions : int
        Refinement level (3 gives 1280 triangles)
    '''
    return fromTrimesh(trimesh.creation.icosphere(subdivisions=subdivisions, radius=radius))
