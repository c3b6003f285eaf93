import logging

import numpy as np

from .config import ClothConfig, validate_grid
from .DistanceConstraint import DistanceConstraint
from .Particle import Particle
from .Vec3 import Vec3

logger = logging.getLogger(__name__)


class ClothMesh:
    """
    A rows x cols grid of particles and the links between neighbours.

    Particles are stored row-major and never removed; `constraints` is the
    active set and only shrinks, keeping construction order.
    """

    def __init__(self, rows, cols, spacing):
        self.rows = rows
        self.cols = cols
        self.spacing = float(spacing)
        self.particles = []
        self.constraints = []

    def index(self, row, col):
        return row * self.cols + col

    def particle_at(self, row, col):
        return self.particles[self.index(row, col)]

    def iter_constraints(self):
        """Active constraints in construction order."""
        return iter(self.constraints)

    def positions(self):
        """(N, 3) array snapshot of particle positions."""
        return np.array([p.pos.as_tuple() for p in self.particles], dtype=np.float64).reshape(-1, 3)

    def unlocked_mask(self):
        return np.fromiter((not p.locked for p in self.particles), dtype=bool, count=len(self.particles))

    def set_tear_parameters(self, stretch_limit, min_distance):
        """Apply new tear settings to every active link."""
        for c in self.constraints:
            c.stretch_limit = float(stretch_limit)
            c.min_distance = float(min_distance)

    def prune_broken(self):
        """Drop broken constraints from the active set. Returns how many were removed."""
        before = len(self.constraints)
        self.constraints = [c for c in self.constraints if not c.broken]
        return before - len(self.constraints)

    def __len__(self):
        return len(self.particles)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.rows}x{self.cols} links={len(self.constraints)}>"


def create_mesh(rows, cols, spacing, config=None):
    """
    Build a cloth grid offset left by half its width, hanging down from y = 0.

    :param rows: Number of particle rows. Row 0 is pinned.
    :param cols: Number of particles per row.
    :param spacing: Distance between neighbouring particles.
    :param config: ClothConfig providing the tear parameters of the links.
    :return: The new ClothMesh.
    """
    if config is None:
        config = ClothConfig()
    else:
        config.validate()
    validate_grid(rows, cols, spacing)

    mesh = ClothMesh(rows, cols, spacing)
    half_width = (cols * spacing) / 2.0

    for y in range(rows):
        for x in range(cols):
            pos = Vec3(x * spacing - half_width, y * spacing, 0.0)
            mesh.particles.append(Particle(pos, locked=(y == 0)))

    # right neighbour first, then the one below, in row-major order
    for y in range(rows):
        for x in range(cols):
            curr = mesh.index(y, x)
            if x < cols - 1:
                mesh.constraints.append(DistanceConstraint(
                    mesh.particles, curr, curr + 1, config.stretch_limit, config.min_distance))
            if y < rows - 1:
                mesh.constraints.append(DistanceConstraint(
                    mesh.particles, curr, mesh.index(y + 1, x), config.stretch_limit, config.min_distance))

    logger.info(f"Built {rows}x{cols} cloth: {len(mesh.particles)} particles, {len(mesh.constraints)} links")
    return mesh
