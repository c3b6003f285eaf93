"""
Configuration dataclass for the cloth simulation parameters.
"""

import dataclasses
from dataclasses import dataclass

DEFAULT_GRAVITY = 0.35
DEFAULT_DAMPING = 0.98
DEFAULT_STRETCH_LIMIT = 5.0
DEFAULT_ITERATIONS = 8
DEFAULT_MIN_DISTANCE = 0.1
DEFAULT_WIND_AMPLITUDE = 0.15
DEFAULT_WIND_FREQUENCY = 0.05
DEFAULT_DEPTH_DAMPING = 0.99
DEFAULT_PICKUP_RADIUS = 50.0
DEFAULT_FOCAL_LENGTH = 900.0
DEFAULT_CAMERA_OFFSET = 500.0


class ConfigurationError(ValueError):
    """Raised when simulation parameters describe an unusable cloth."""


@dataclass
class ClothConfig:
    """Configuration for the cloth simulation.

    Attributes:
        gravity: Downward acceleration added to y every tick.
        damping: Fraction of the implicit velocity kept each tick, in [0, 1).
        stretch_limit: A link tears once stretched past rest_length * stretch_limit.
        iterations: Relaxation passes per tick. More passes give stiffer cloth.
        min_distance: Links shorter than this are left uncorrected.
        time_scale: Multiplier applied to elapsed seconds before they drive the wind.
        wind_amplitude: Depth displacement of the wind wave per tick.
        wind_frequency: Spatial frequency of the wind wave along x.
        depth_damping: Per-tick decay of depth, keeps the cloth near z = 0.
        pickup_radius: Screen-space radius within which a particle can be grabbed.
        focal_length: Perspective focal length.
        camera_offset: Distance from the camera to the z = 0 plane beyond the focal length.
        anchor_x: Horizontal screen anchor as a fraction of the viewport width.
        anchor_y: Vertical screen anchor as a fraction of the viewport height.
    """

    gravity: float = DEFAULT_GRAVITY
    damping: float = DEFAULT_DAMPING
    stretch_limit: float = DEFAULT_STRETCH_LIMIT
    iterations: int = DEFAULT_ITERATIONS
    min_distance: float = DEFAULT_MIN_DISTANCE
    time_scale: float = 1.5
    wind_amplitude: float = DEFAULT_WIND_AMPLITUDE
    wind_frequency: float = DEFAULT_WIND_FREQUENCY
    depth_damping: float = DEFAULT_DEPTH_DAMPING
    pickup_radius: float = DEFAULT_PICKUP_RADIUS
    focal_length: float = DEFAULT_FOCAL_LENGTH
    camera_offset: float = DEFAULT_CAMERA_OFFSET
    anchor_x: float = 0.5
    anchor_y: float = 0.1

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ConfigurationError if any parameter is out of range."""
        if not 0.0 <= self.damping < 1.0:
            raise ConfigurationError(
                f"damping must be in [0, 1), got {self.damping}; values >= 1 add energy every tick"
            )
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int) or self.iterations < 1:
            raise ConfigurationError(f"iterations must be a positive integer, got {self.iterations!r}")
        if self.stretch_limit <= 1.0:
            raise ConfigurationError(f"stretch_limit must be greater than 1, got {self.stretch_limit}")
        if self.min_distance < 0.0:
            raise ConfigurationError(f"min_distance must not be negative, got {self.min_distance}")
        if not 0.0 < self.depth_damping <= 1.0:
            raise ConfigurationError(f"depth_damping must be in (0, 1], got {self.depth_damping}")
        if self.pickup_radius <= 0.0:
            raise ConfigurationError(f"pickup_radius must be positive, got {self.pickup_radius}")
        if self.focal_length <= 0.0:
            raise ConfigurationError(f"focal_length must be positive, got {self.focal_length}")
        if self.focal_length + self.camera_offset <= 0.0:
            raise ConfigurationError(
                f"focal_length + camera_offset must be positive, got {self.focal_length + self.camera_offset}"
            )
        if self.anchor_x == self.anchor_y:
            raise ConfigurationError(
                f"anchor_x and anchor_y must differ, both are {self.anchor_x}"
            )

    def replace(self, **changes) -> "ClothConfig":
        """Return a validated copy with `changes` applied."""
        return dataclasses.replace(self, **changes)


def validate_grid(rows, cols, spacing):
    """Check the dimensions of a cloth grid before it is built."""
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    if not spacing > 0.0:
        raise ConfigurationError(f"spacing must be positive, got {spacing!r}")
