"""
Perspective projection between cloth space and screen space.

The vertical anchor sits near the top of the frame (a tenth of the height)
while the horizontal anchor is centred, so the pinned edge of the cloth
hangs from the top of the window.
"""

from dataclasses import dataclass

import numpy as np

from .config import (
    ClothConfig,
    ConfigurationError,
    DEFAULT_CAMERA_OFFSET,
    DEFAULT_FOCAL_LENGTH,
)


@dataclass(frozen=True)
class Camera:
    focal_length: float = DEFAULT_FOCAL_LENGTH
    camera_offset: float = DEFAULT_CAMERA_OFFSET
    anchor_x: float = 0.5
    anchor_y: float = 0.1

    def __post_init__(self):
        if self.focal_length <= 0.0:
            raise ConfigurationError(f"focal_length must be positive, got {self.focal_length}")
        if self.focal_length + self.camera_offset <= 0.0:
            raise ConfigurationError(
                f"focal_length + camera_offset must be positive, got {self.focal_length + self.camera_offset}"
            )
        if self.anchor_x == self.anchor_y:
            raise ConfigurationError(f"anchor_x and anchor_y must differ, both are {self.anchor_x}")

    @classmethod
    def from_config(cls, config: ClothConfig) -> "Camera":
        return cls(config.focal_length, config.camera_offset, config.anchor_x, config.anchor_y)

    def scale(self, z):
        """Perspective factor for a point at depth `z`."""
        return self.focal_length / (self.focal_length + z + self.camera_offset)

    def origin(self, viewport):
        """Screen position of the world origin for a viewport (width, height)."""
        return viewport[0] * self.anchor_x, viewport[1] * self.anchor_y

    def project(self, pos, viewport):
        """Project a world point (x, y, z) to screen coordinates (sx, sy)."""
        x, y, z = pos
        s = self.scale(z)
        ox, oy = self.origin(viewport)
        return ox + x * s, oy + y * s

    def unproject(self, screen, z, viewport):
        """Recover world (x, y) of a screen point assumed to lie at depth `z`."""
        s = self.scale(z)
        ox, oy = self.origin(viewport)
        return (screen[0] - ox) / s, (screen[1] - oy) / s

    def project_many(self, positions, viewport):
        """Vectorised `project` for an (N, 3) array; returns an (N, 2) array."""
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        s = self.focal_length / (self.focal_length + positions[:, 2] + self.camera_offset)
        ox, oy = self.origin(viewport)
        out = np.empty((positions.shape[0], 2), dtype=np.float64)
        out[:, 0] = ox + positions[:, 0] * s
        out[:, 1] = oy + positions[:, 1] * s
        return out
