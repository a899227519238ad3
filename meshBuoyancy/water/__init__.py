# -- Water Subpackage -- #

'''
Water surfaces answering height-above-water and fluid velocity queries:
calm water, linear wave fields, and interpolated heightmaps.
'''

from meshBuoyancy.water.protocols import FlatWaterSurface, WaterSurfaceQuery
from meshBuoyancy.water.waveConditions import WaveConditions
from meshBuoyancy.water.linearWaveTheory import LinearWaveTheory, WaveFieldSurface
from meshBuoyancy.water.heightmap import HeightmapSurface
from meshBuoyancy.water.surfaceFactory import createWaterSurface
