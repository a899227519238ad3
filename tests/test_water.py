# -- Water Surface Tests -- #

'''
Calm water, linear wave fields, heightmaps and the surface factory.
'''

import math

import numpy as np
import pytest

from meshBuoyancy.water.heightmap import HeightmapSurface
from meshBuoyancy.water.linearWaveTheory import LinearWaveTheory, WaveFieldSurface
from meshBuoyancy.water.protocols import FlatWaterSurface
from meshBuoyancy.water.surfaceFactory import createWaterSurface
from meshBuoyancy.water.waveConditions import WaveConditions


######################################################################
# -- Flat Water -- #
######################################################################

def testFlatWaterHeight():
    water = FlatWaterSurface(level=1.5)
    assert water.heightAboveWater(np.array([3.0, -2.0, 0.5])) == pytest.approx(-1.0)
    assert water.heightAboveWater(np.array([0.0, 0.0, 2.0])) == pytest.approx(0.5)


def testFlatWaterCurrentIsCopied():
    water = FlatWaterSurface(current=[1.0, 0.0, 0.0])
    velocity = water.velocityAt(np.zeros(3))
    velocity[0] = 99.0
    assert np.allclose(water.velocityAt(np.zeros(3)), [1.0, 0.0, 0.0])


######################################################################
# -- Wave Conditions -- #
######################################################################

@pytest.mark.parametrize('kwargs', [
    dict(height=1.0, period=0.0, depth=10.0),
    dict(height=1.0, period=5.0, depth=-1.0),
    dict(height=-0.1, period=5.0, depth=10.0),
])
def testInvalidWaveConditionsRaise(kwargs):
    with pytest.raises(ValueError):
        WaveConditions(**kwargs)


def testWaveConditionsFromDictUsesDefaults():
    conditions = WaveConditions.fromDict({'height': 2.0})
    assert conditions.height == 2.0
    assert conditions.period == WaveConditions.moderateSwell().period


######################################################################
# -- Linear Wave Theory -- #
######################################################################

@pytest.mark.parametrize('period, depth', [(8.0, 30.0), (3.0, 5.0), (12.0, 2.0)])
def testDispersionRelationSolved(period, depth):
    model = LinearWaveTheory()
    omega = 2.0 * math.pi / period
    k = model.solveDispersionRelation(omega, depth)
    assert omega ** 2 == pytest.approx(9.81 * k * math.tanh(k * depth), rel=1e-9)


def testDeepWaterWavenumber():
    model = LinearWaveTheory()
    omega = 2.0 * math.pi / 4.0
    assert model.solveDispersionRelation(omega, 1000.0) == pytest.approx(omega ** 2 / 9.81, rel=1e-9)


def testBreakingCriteria():
    model = LinearWaveTheory()
    assert model.isBroken(WaveConditions(height=0.9, period=8.0, depth=1.0))
    assert not model.isBroken(WaveConditions.moderateSwell())


def testDeepWaterVelocityStaysFinite():
    model = LinearWaveTheory()
    conditions = WaveConditions(height=1.0, period=2.0, depth=4000.0)
    u, w = model.velocityField(0.0, -1.0, 0.0, conditions)
    assert math.isfinite(u) and math.isfinite(w)


######################################################################
# -- Wave Field Surface -- #
######################################################################

def testWaveFieldCrestAndTrough():
    conditions = WaveConditions(height=1.0, period=8.0, depth=30.0)
    water = WaveFieldSurface(conditions)
    wavelength = LinearWaveTheory().waveLength(conditions)

    assert water.surfaceHeight(np.array([0.0, 0.0, 0.0])) == pytest.approx(0.5)
    assert water.surfaceHeight(np.array([wavelength / 2.0, 0.0, 0.0])) == pytest.approx(-0.5)
    assert water.heightAboveWater(np.array([0.0, 0.0, 0.0])) == pytest.approx(-0.5)


def testWaveFieldIsPeriodicInTime():
    conditions = WaveConditions(height=1.0, period=8.0, depth=30.0)
    water = WaveFieldSurface(conditions)
    point = np.array([7.0, 3.0, 0.0])
    before = water.surfaceHeight(point)

    water.advance(2.0)
    assert water.surfaceHeight(point) != pytest.approx(before)
    water.advance(6.0)
    assert water.surfaceHeight(point) == pytest.approx(before)


def testWaveFieldFollowsDirection():
    conditions = WaveConditions(height=1.0, period=8.0, depth=30.0, direction=90.0)
    water = WaveFieldSurface(conditions)
    # Crests run along X for a wave travelling along +Y
    assert water.surfaceHeight(np.array([50.0, 0.0, 0.0])) == pytest.approx(
        water.surfaceHeight(np.array([0.0, 0.0, 0.0]))
    )


def testWaveFieldVelocity():
    water = WaveFieldSurface(WaveConditions(height=1.0, period=8.0, depth=30.0))

    underCrest = water.velocityAt(np.array([0.0, 0.0, -1.0]))
    assert underCrest[0] > 0.0
    assert underCrest[2] == pytest.approx(0.0, abs=1e-12)

    assert np.allclose(water.velocityAt(np.array([0.0, 0.0, 5.0])), 0.0)


######################################################################
# -- Heightmap -- #
######################################################################

def planeSurface(x, y):
    return 0.1 * x + 0.2 * y


def testHeightmapInterpolatesPlaneExactly():
    water = HeightmapSurface.fromFunction(planeSurface, (0.0, 10.0), (-5.0, 5.0), resolution=11)
    assert water.surfaceHeight(np.array([3.3, 1.7, 0.0])) == pytest.approx(0.67)
    assert water.heightAboveWater(np.array([3.3, 1.7, 2.0])) == pytest.approx(2.0 - 0.67)


def testHeightmapClampsOutsideGrid():
    water = HeightmapSurface.fromFunction(planeSurface, (0.0, 10.0), (-5.0, 5.0), resolution=11)
    assert water.surfaceHeight(np.array([100.0, 0.0, 0.0])) == pytest.approx(1.0)
    assert water.surfaceHeight(np.array([-3.0, -50.0, 0.0])) == pytest.approx(-1.0)


def testHeightmapShapeMismatchRaises():
    with pytest.raises(ValueError):
        HeightmapSurface([0.0, 1.0], [0.0, 1.0, 2.0], np.zeros((2, 2)))


def testHeightmapCurrent():
    water = HeightmapSurface([0.0, 1.0], [0.0, 1.0], np.zeros((2, 2)), current=[0.0, 1.0, 0.0])
    assert np.allclose(water.velocityAt(np.zeros(3)), [0.0, 1.0, 0.0])


######################################################################
# -- Surface Factory -- #
######################################################################

def testFactoryDefaultsToCalmWater():
    water = createWaterSurface(None)
    assert isinstance(water, FlatWaterSurface)
    assert water.level == 0.0


def testFactoryBuildsEachSurface():
    flat = createWaterSurface({'type': 'flat', 'level': -2.0})
    waves = createWaterSurface({'type': 'waves', 'wave': {'height': 0.5, 'period': 4.0, 'depth': 10.0}})
    grid = createWaterSurface({
        'type': 'heightmap', 'x': [0.0, 1.0], 'y': [0.0, 1.0], 'heights': [[0.0, 0.0], [1.0, 1.0]],
    })

    assert isinstance(flat, FlatWaterSurface) and flat.level == -2.0
    assert isinstance(waves, WaveFieldSurface) and waves.waveConditions.height == 0.5
    assert isinstance(grid, HeightmapSurface)
    assert grid.surfaceHeight(np.array([0.5, 0.5, 0.0])) == pytest.approx(0.5)


def testFactoryRejectsBadSpecs():
    with pytest.raises(ValueError):
        createWaterSurface({'type': 'tsunami'})
    with pytest.raises(ValueError):
        createWaterSurface({'type': 'heightmap', 'x': [0.0, 1.0]})
