# -- Buoyant Body Configuration -- #

'''
Per-body configuration for mesh buoyancy.

One instance per body, passed to the orchestrator at construction.
Nothing here is process-wide; two bodies in the same world may use
different densities, gravity, or force terms.
'''

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field

from meshBuoyancy import constants as const


@dataclass
class BuoyancyConfig:
    '''
    Configuration for a buoyant mesh body.

    Parameters:
    -----------
    waterDensity : float
        Fluid density [kg/m^3]
    gravity : float
        Gravitational acceleration magnitude [m/s^2]
    useStaticForces : bool
        Apply hydrostatic (pressure) forces
    useDynamicForces : bool
        Apply hydrodynamic (drag) forces
    verticalForcesOnly : bool
        Drop horizontal force components before applying them
    dragCoefficient : float
        Scale on the hydrodynamic term
    overrideMeshDensity : bool
        Set the body mass to meshDensity * mesh volume on initialization
    meshDensity : float
        Density used by overrideMeshDensity [kg/m^3]
    overrideMass : bool
        Set the body mass to massKg on initialization (wins over density)
    massKg : float
        Mass used by overrideMass [kg]
    drawTriangles : bool
        Send every mesh triangle to the debug drawer
    drawSubtriangles : bool
        Send submerged sub-triangles to the debug drawer
    drawWaterline : bool
        Send waterline segments to the debug drawer
    drawForceArrows : bool
        Send applied forces to the debug drawer
    forceArrowSize : float
        Length scale for drawn force arrows
    surface : dict
        Water surface description for createWaterSurface
    '''

    waterDensity: float = const.waterDensity
    gravity: float = const.gravity
    useStaticForces: bool = True
    useDynamicForces: bool = False
    verticalForcesOnly: bool = False
    dragCoefficient: float = const.defaultDragCoefficient
    overrideMeshDensity: bool = False
    meshDensity: float = const.defaultMeshDensity
    overrideMass: bool = False
    massKg: float = const.defaultMassKg
    drawTriangles: bool = False
    drawSubtriangles: bool = False
    drawWaterline: bool = False
    drawForceArrows: bool = False
    forceArrowSize: float = 1.0
    surface: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not math.isfinite(self.waterDensity) or self.waterDensity <= 0.0:
            raise ValueError(f'waterDensity must be positive, got {self.waterDensity}')
        if not math.isfinite(self.gravity):
            raise ValueError(f'gravity must be finite, got {self.gravity}')
        if self.dragCoefficient < 0.0:
            raise ValueError(f'dragCoefficient cannot be negative, got {self.dragCoefficient}')
        if self.overrideMeshDensity and self.meshDensity <= 0.0:
            raise ValueError(f'meshDensity must be positive, got {self.meshDensity}')
        if self.overrideMass and self.massKg <= 0.0:
            raise ValueError(f'massKg must be positive, got {self.massKg}')
        self.gravity = abs(self.gravity)

    @property
    def isDebugDrawing(self) -> bool:
        '''True if any debug toggle is on.'''
        return (
            self.drawTriangles or self.drawSubtriangles
            or self.drawWaterline or self.drawForceArrows
        )

    @classmethod
    def fromDict(cls, data: dict) -> BuoyancyConfig:
        '''
        Build from parsed JSON with 'water', 'forces', 'mass' and 'debug' sections.

        Missing sections or keys fall back to the defaults.
        '''
        waterSection = data.get('water', {})
        forcesSection = data.get('forces', {})
        massSection = data.get('mass', {})
        debugSection = data.get('debug', {})
        default = cls()

        return cls(
            waterDensity=waterSection.get('density', default.waterDensity),
            gravity=waterSection.get('gravity', default.gravity),
            surface=waterSection.get('surface', {}),
            useStaticForces=forcesSection.get('useStaticForces', default.useStaticForces),
            useDynamicForces=forcesSection.get('useDynamicForces', default.useDynamicForces),
            verticalForcesOnly=forcesSection.get('verticalForcesOnly', default.verticalForcesOnly),
            dragCoefficient=forcesSection.get('dragCoefficient', default.dragCoefficient),
            overrideMeshDensity=massSection.get('overrideMeshDensity', default.overrideMeshDensity),
            meshDensity=massSection.get('meshDensity', default.meshDensity),
            overrideMass=massSection.get('overrideMass', default.overrideMass),
            massKg=massSection.get('massKg', default.massKg),
            drawTriangles=debugSection.get('drawTriangles', default.drawTriangles),
            drawSubtriangles=debugSection.get('drawSubtriangles', default.drawSubtriangles),
            drawWaterline=debugSection.get('drawWaterline', default.drawWaterline),
            drawForceArrows=debugSection.get('drawForceArrows', default.drawForceArrows),
            forceArrowSize=debugSection.get('forceArrowSize', default.forceArrowSize),
        )

    @classmethod
    def fromJson(cls, configPath: str) -> BuoyancyConfig:
        '''
        Load configuration from a JSON file.

        Parameters:
        -----------
        configPath : str
            Path to the JSON configuration file

        Returns:
        --------
        BuoyancyConfig : Loaded configuration
        '''
        with open(configPath, 'r') as f:
            data = json.load(f)
        return cls.fromDict(data)

    def toDict(self) -> dict:
        '''Inverse of fromDict.'''
        return {
            'water': {
                'density': self.waterDensity,
                'gravity': self.gravity,
                'surface': dict(self.surface),
            },
            'forces': {
                'useStaticForces': self.useStaticForces,
                'useDynamicForces': self.useDynamicForces,
                'verticalForcesOnly': self.verticalForcesOnly,
                'dragCoefficient': self.dragCoefficient,
            },
            'mass': {
                'overrideMeshDensity': self.overrideMeshDensity,
                'meshDensity': self.meshDensity,
                'overrideMass': self.overrideMass,
                'massKg': self.massKg,
            },
            'debug': {
                'drawTriangles': self.drawTriangles,
                'drawSubtriangles': self.drawSubtriangles,
                'drawWaterline': self.drawWaterline,
                'drawForceArrows': self.drawForceArrows,
                'forceArrowSize': self.forceArrowSize,
            },
        }
