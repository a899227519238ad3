# -- Body Transform -- #

'''
Local-to-world transform of a rigid body: uniform or per-axis scale,
then rotation, then translation.

Rotations are held as scipy Rotation objects so callers can build them
from quaternions, Euler angles or rotation vectors.
'''

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from scipy.spatial.transform import Rotation


@dataclass(frozen=True)
class BodyTransform:
    '''
    Pose of a body in the world frame.

    Parameters:
    -----------
    position : np.ndarray
        World-space translation [m]
    rotation : Rotation
        Body orientation
    scale : np.ndarray
        Per-axis scale applied in local space before rotation
    '''

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: Rotation = field(default_factory=Rotation.identity)
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        object.__setattr__(self, 'position', np.asarray(self.position, dtype=np.float64).reshape(3))
        object.__setattr__(self, 'scale', np.broadcast_to(
            np.asarray(self.scale, dtype=np.float64), (3,)).copy())

    @classmethod
    def identity(cls) -> BodyTransform:
        return cls()

    @classmethod
    def fromEuler(
        cls,
        position: np.ndarray | list,
        eulerAnglesDeg: np.ndarray | list,
        rotationOrder: str = 'xyz',
    ) -> BodyTransform:
        '''
        Build a transform from a position and extrinsic Euler angles.

        Parameters:
        -----------
        position : array-like
            World-space translation [m]
        eulerAnglesDeg : array-like
            Rotation angles in degrees, one per axis in rotationOrder
        rotationOrder : str
            Axis sequence understood by scipy (default: 'xyz')
        '''
        rotation = Rotation.from_euler(rotationOrder, eulerAnglesDeg, degrees=True)
        return cls(position=np.asarray(position, dtype=np.float64), rotation=rotation)

    @classmethod
    def fromQuaternion(cls, position: np.ndarray | list, quatXyzw: np.ndarray | list) -> BodyTransform:
        '''Build a transform from a position and an (x, y, z, w) quaternion.'''
        return cls(position=np.asarray(position, dtype=np.float64), rotation=Rotation.from_quat(quatXyzw))

    def translated(self, offset: np.ndarray | list) -> BodyTransform:
        '''Copy of this transform moved by a world-space offset.'''
        return BodyTransform(
            position=self.position + np.asarray(offset, dtype=np.float64),
            rotation=self.rotation,
            scale=self.scale,
        )

    def transformPoints(self, points: np.ndarray) -> np.ndarray:
        '''
        Map local-space points to world space.

        Parameters:
        -----------
        points : np.ndarray
            Local positions, shape (N, 3)

        Returns:
        --------
        np.ndarray : World positions, shape (N, 3)
        '''
        points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if len(points) == 0:
            return points.copy()
        return self.rotation.apply(points * self.scale) + self.position

    def transformPoint(self, point: np.ndarray) -> np.ndarray:
        '''Map a single local-space point to world space.'''
        return self.transformPoints(np.asarray(point).reshape(1, 3))[0]

    @property
    def isMirroring(self) -> bool:
        '''Negative determinant scales flip triangle winding.'''
        return float(np.prod(self.scale)) < 0.0
