import math

from clothsim.Vec3 import Vec3
from clothsim.config import (
    DEFAULT_DAMPING,
    DEFAULT_DEPTH_DAMPING,
    DEFAULT_GRAVITY,
    DEFAULT_WIND_AMPLITUDE,
    DEFAULT_WIND_FREQUENCY,
)


class Particle:
    def __init__(self, pos, locked=False):
        self.pos = pos.copy() if isinstance(pos, Vec3) else Vec3(*pos)
        # Verlet history: velocity is implied by pos - prev_pos
        self.prev_pos = self.pos.copy()
        self.locked = bool(locked)
        self.grabbed = False

    @property
    def fixed(self):
        """True while the particle must not be moved by the physics."""
        return self.locked or self.grabbed

    @property
    def velocity(self):
        return self.pos - self.prev_pos

    def integrate(self, time,
                  gravity=DEFAULT_GRAVITY,
                  damping=DEFAULT_DAMPING,
                  wind_amplitude=DEFAULT_WIND_AMPLITUDE,
                  wind_frequency=DEFAULT_WIND_FREQUENCY,
                  depth_damping=DEFAULT_DEPTH_DAMPING):
        if self.locked or self.grabbed:
            return

        pos = self.pos
        vx = (pos.x - self.prev_pos.x) * damping
        vy = (pos.y - self.prev_pos.y) * damping
        vz = (pos.z - self.prev_pos.z) * damping
        self.prev_pos = pos.copy()

        pos.x += vx
        pos.y += vy + gravity
        pos.z += vz

        # wind: a travelling sine wave along x pushes the cloth in depth
        pos.z += math.sin(time + pos.x * wind_frequency) * wind_amplitude
        pos.z *= depth_damping

    def hold_at(self, x, y):
        """Move to (x, y) keeping depth, with zero implicit velocity."""
        self.pos.x = float(x)
        self.pos.y = float(y)
        self.prev_pos = self.pos.copy()

    def __repr__(self):
        return (f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}, {self.pos.z:.2f}), "
                f"locked={self.locked}, grabbed={self.grabbed})")

    def __str__(self):
        return self.__repr__()
