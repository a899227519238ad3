# -- Configuration Tests -- #

'''
BuoyancyConfig defaults, validation and JSON loading.
'''

import json

import pytest

from meshBuoyancy.simulation.config import BuoyancyConfig
from meshBuoyancy.water.linearWaveTheory import WaveFieldSurface
from meshBuoyancy.water.surfaceFactory import createWaterSurface


def testDefaults():
    config = BuoyancyConfig()
    assert config.waterDensity == 1000.0
    assert config.gravity == pytest.approx(9.81)
    assert config.useStaticForces and not config.useDynamicForces
    assert not config.verticalForcesOnly
    assert not config.overrideMass and not config.overrideMeshDensity
    assert not config.isDebugDrawing


def testGravityStoredAsMagnitude():
    assert BuoyancyConfig(gravity=-9.81).gravity == pytest.approx(9.81)


@pytest.mark.parametrize('kwargs', [
    dict(waterDensity=0.0),
    dict(waterDensity=-1000.0),
    dict(gravity=float('nan')),
    dict(dragCoefficient=-0.5),
    dict(overrideMass=True, massKg=0.0),
    dict(overrideMeshDensity=True, meshDensity=-5.0),
])
def testInvalidValuesRaise(kwargs):
    with pytest.raises(ValueError):
        BuoyancyConfig(**kwargs)


def testDebugDrawingFlag():
    assert BuoyancyConfig(drawWaterline=True).isDebugDrawing


def testFromJsonFillsMissingKeys(tmp_path):
    path = tmp_path / 'body.json'
    path.write_text(json.dumps({
        'water': {'density': 1025.0},
        'forces': {'useDynamicForces': True, 'dragCoefficient': 0.6},
        'mass': {'overrideMass': True, 'massKg': 250.0},
    }))

    config = BuoyancyConfig.fromJson(str(path))
    assert config.waterDensity == 1025.0
    assert config.gravity == pytest.approx(9.81)
    assert config.useDynamicForces
    assert config.useStaticForces
    assert config.dragCoefficient == 0.6
    assert config.overrideMass and config.massKg == 250.0
    assert not config.drawTriangles


def testToDictRoundTrip():
    config = BuoyancyConfig(
        waterDensity=1025.0,
        verticalForcesOnly=True,
        overrideMeshDensity=True,
        meshDensity=450.0,
        drawForceArrows=True,
        forceArrowSize=2.5,
        surface={'type': 'flat', 'level': 0.25},
    )
    assert BuoyancyConfig.fromDict(config.toDict()) == config


def testSurfaceSectionBuildsWaterQuery(tmp_path):
    path = tmp_path / 'waves.json'
    path.write_text(json.dumps({
        'water': {'surface': {'type': 'waves', 'wave': {'height': 1.0, 'period': 6.0, 'depth': 20.0}}},
    }))
    config = BuoyancyConfig.fromJson(str(path))
    assert isinstance(createWaterSurface(config.surface), WaveFieldSurface)
