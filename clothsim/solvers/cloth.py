import logging

from .solver import solver
from ..config import ClothConfig

logger = logging.getLogger(__name__)


class ClothSolver(solver):
    def __init__(self, config=None):
        """
        Relaxes a ClothMesh's distance constraints and integrates its particles.
        """
        if config is None:
            config = ClothConfig()
        super().__init__(config.iterations)
        self.config = config

    def configure(self, config):
        self.config = config
        self.iterations = config.iterations

    def relax(self, mesh):
        """
        Gauss-Seidel relaxation: every pass walks the links in construction
        order and each correction is visible to the links solved after it.
        """
        constraints = mesh.constraints
        for _ in range(self.iterations):
            for c in constraints:
                c.solve()

    def integrate(self, mesh, time):
        cfg = self.config
        for p in mesh.particles:
            p.integrate(time, cfg.gravity, cfg.damping,
                        cfg.wind_amplitude, cfg.wind_frequency, cfg.depth_damping)

    def step(self, mesh, time):
        """
        One tick: relax, drop links that tore or were cut, then integrate.
        Returns the number of links removed.
        """
        self.relax(mesh)

        removed = mesh.prune_broken()
        if removed:
            logger.debug(f"Removed {removed} broken links, {len(mesh.constraints)} remain")

        self.integrate(mesh, time)
        return removed
