"""
Per-tick orchestration of input, relaxation and integration.
"""

import logging

from .camera import Camera
from .config import ClothConfig
from .interaction import InputKind, InteractionController
from .mesh import create_mesh
from .solvers.cloth import ClothSolver

logger = logging.getLogger(__name__)


def tick(mesh, elapsed_time, events, pointer, viewport, controller, solver):
    """Advance the cloth by one frame.

    The order is fixed: grab/release events, drag, cut, then the solver's
    relaxation, pruning and integration. Cut links are pruned by the solver
    together with torn ones.

    Args:
        mesh: ClothMesh, mutated in place.
        elapsed_time: Seconds since the simulation started.
        events: Iterable of InputEvent collected this frame.
        pointer: Current pointer position (x, y) in screen space.
        viewport: Current viewport size (width, height).
        controller: InteractionController holding the grab and pointer history.
        solver: ClothSolver providing relaxation and integration.

    Returns:
        The same mesh.
    """
    cutting = False
    for event in events:
        if event.kind is InputKind.CUT_ACTIVE:
            cutting = True
        else:
            controller.handle(mesh, event)

    controller.drag(mesh, pointer, viewport)
    if cutting:
        controller.cut(mesh, pointer, viewport)

    solver.step(mesh, elapsed_time * solver.config.time_scale)

    controller.last_pointer = (float(pointer[0]), float(pointer[1]))
    return mesh


class ClothSimulation:
    """A cloth together with the camera, solver and controller that drive it."""

    def __init__(self, config=None, rows=45, cols=70, spacing=18.0):
        self.config = config if config is not None else ClothConfig()
        self.rows = rows
        self.cols = cols
        self.spacing = spacing
        self.mesh = create_mesh(rows, cols, spacing, self.config)
        self.camera = Camera.from_config(self.config)
        self.solver = ClothSolver(self.config)
        self.controller = InteractionController(self.camera, self.config.pickup_radius)

    def step(self, elapsed_time, events, pointer, viewport):
        return tick(self.mesh, elapsed_time, events, pointer, viewport, self.controller, self.solver)

    def reset(self):
        """Rebuild the cloth from scratch and drop any grab."""
        self.mesh = create_mesh(self.rows, self.cols, self.spacing, self.config)
        self.controller.reset()
        logger.info("Cloth reset")

    def reconfigure(self, **changes):
        """
        Swap in a copy of the config with `changes` applied.
        Raises ConfigurationError and keeps the old config if the result is invalid.
        """
        config = self.config.replace(**changes)
        if config == self.config:
            return config
        self.config = config
        self.solver.configure(config)
        self.mesh.set_tear_parameters(config.stretch_limit, config.min_distance)
        self.camera = Camera.from_config(config)
        self.controller.camera = self.camera
        self.controller.pickup_radius = config.pickup_radius
        logger.debug(f"Reconfigured: {changes}")
        return config
