# -- Water Surface Factory -- #

'''
Builds a water surface from the 'surface' entry of a JSON configuration.

Supported types:
    {"type": "flat", "level": 0.0, "current": [0, 0, 0]}
    {"type": "waves", "level": 0.0, "wave": {"height": 1.0, "period": 8.0, "depth": 30.0}}
    {"type": "heightmap", "x": [...], "y": [...], "heights": [[...], ...]}
'''

from __future__ import annotations

from meshBuoyancy.water.heightmap import HeightmapSurface
from meshBuoyancy.water.linearWaveTheory import WaveFieldSurface
from meshBuoyancy.water.protocols import FlatWaterSurface, WaterSurfaceQuery
from meshBuoyancy.water.waveConditions import WaveConditions


def createWaterSurface(surfaceSpec: dict | None) -> WaterSurfaceQuery:
    '''
    Create a water surface from a configuration dict.

    Parameters:
    -----------
    surfaceSpec : dict
        Surface description; None gives calm water at z = 0

    Returns:
    --------
    WaterSurfaceQuery : Configured surface
    '''
    if not surfaceSpec:
        return FlatWaterSurface()

    surfaceType = surfaceSpec.get('type', 'flat')
    level = surfaceSpec.get('level', 0.0)
    current = surfaceSpec.get('current')

    if surfaceType == 'flat':
        return FlatWaterSurface(level=level, current=current)

    if surfaceType == 'waves':
        return WaveFieldSurface(
            WaveConditions.fromDict(surfaceSpec.get('wave', {})),
            waterLevel=level,
            time=surfaceSpec.get('time', 0.0),
        )

    if surfaceType == 'heightmap':
        for key in ('x', 'y', 'heights'):
            if key not in surfaceSpec:
                raise ValueError(f'Heightmap surface requires \'{key}\'')
        return HeightmapSurface(
            surfaceSpec['x'], surfaceSpec['y'], surfaceSpec['heights'], current=current,
        )

    raise ValueError(
        f'Unknown water surface type \'{surfaceType}\'. '
        f'Available: [\'flat\', \'waves\', \'heightmap\']'
    )
