# -- Shared Test Fixtures -- #

'''
Meshes, water surfaces and configurations shared across the test suite.
'''

import numpy as np
import pytest

from meshBuoyancy.geometry.meshLoader import StaticMeshSource
from meshBuoyancy.geometry.protocols import TriangleMesh
from meshBuoyancy.simulation.config import BuoyancyConfig
from meshBuoyancy.water.protocols import FlatWaterSurface


# Unit cube corners on [0, 1]^3
CUBE_VERTICES = [
    (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
    (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
]

# Counter-clockwise seen from outside
CUBE_FACES = [
    (0, 2, 1), (0, 3, 2),   # bottom, -z
    (4, 5, 6), (4, 6, 7),   # top, +z
    (0, 1, 5), (0, 5, 4),   # front, -y
    (3, 7, 6), (3, 6, 2),   # back, +y
    (0, 4, 7), (0, 7, 3),   # left, -x
    (1, 2, 6), (1, 6, 5),   # right, +x
]


@pytest.fixture
def unitCube() -> TriangleMesh:
    '''Hand-built unit cube centered on the origin, 8 vertices, 12 triangles.'''
    return TriangleMesh(np.array(CUBE_VERTICES, dtype=float) - 0.5, CUBE_FACES)


@pytest.fixture
def unitCubeSource(unitCube) -> StaticMeshSource:
    return StaticMeshSource(unitCube)


@pytest.fixture
def calmWater() -> FlatWaterSurface:
    return FlatWaterSurface(level=0.0)


@pytest.fixture
def staticConfig() -> BuoyancyConfig:
    '''Hydrostatic forces only, fresh water, standard gravity.'''
    return BuoyancyConfig(waterDensity=1000.0, gravity=9.81, useStaticForces=True, useDynamicForces=False)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240611)
