# -- Wave Conditions Dataclass -- #

'''
Defines a regular wave state driving a wave-field water surface.

Encapsulates wave height, period, depth, and direction with
convenience presets for common sea states.
'''

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class WaveConditions:
    '''
    Regular (monochromatic) wave state.

    Parameters:
    -----------
    height : float
        Wave height H in meters (trough to crest)
    period : float
        Wave period T in seconds
    depth : float
        Water depth d in meters
    direction : float
        Propagation direction in degrees in the XY plane (0 = +X)
    phase : float
        Phase offset in radians
    '''

    height: float       # m
    period: float       # s
    depth: float        # m
    direction: float = 0.0  # degrees
    phase: float = 0.0      # rad

    def __post_init__(self) -> None:
        if self.period <= 0.0:
            raise ValueError(f'Wave period must be positive, got {self.period}')
        if self.depth <= 0.0:
            raise ValueError(f'Water depth must be positive, got {self.depth}')
        if self.height < 0.0:
            raise ValueError(f'Wave height cannot be negative, got {self.height}')

    @property
    def angularFrequency(self) -> float:
        '''Angular frequency omega = 2*pi/T [rad/s].'''
        return 2.0 * math.pi / self.period

    @property
    def amplitude(self) -> float:
        '''Wave amplitude a = H/2 [m].'''
        return self.height / 2.0

    @property
    def directionVector(self) -> tuple[float, float]:
        '''Unit propagation direction (x, y).'''
        rad = math.radians(self.direction)
        return (math.cos(rad), math.sin(rad))

    @classmethod
    def calm(cls) -> WaveConditions:
        '''Flat water: zero height, long period, deep water.'''
        return cls(height=0.0, period=10.0, depth=50.0)

    @classmethod
    def moderateSwell(cls) -> WaveConditions:
        '''
        Moderate open-water swell.
        H=1.0m, T=8s, d=30m.
        '''
        return cls(height=1.0, period=8.0, depth=30.0)

    @classmethod
    def harbourChop(cls) -> WaveConditions:
        '''
        Short, low chop in sheltered water.
        H=0.3m, T=3s, d=5m.
        '''
        return cls(height=0.3, period=3.0, depth=5.0)

    @classmethod
    def fromDict(cls, data: dict) -> WaveConditions:
        '''Build from a JSON-style dict; missing keys use the moderate swell.'''
        default = cls.moderateSwell()
        return cls(
            height=data.get('height', default.height),
            period=data.get('period', default.period),
            depth=data.get('depth', default.depth),
            direction=data.get('direction', default.direction),
            phase=data.get('phase', default.phase),
        )
