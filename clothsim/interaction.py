"""
Pointer interaction with the cloth: grabbing a particle, dragging it and
cutting links with a swipe.

The controller is single-pointer: at most one particle is held at a time.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .camera import Camera
from .collision import nearest_within, segments_intersect_many
from .config import DEFAULT_PICKUP_RADIUS

logger = logging.getLogger(__name__)


class InputKind(Enum):
    GRAB_START = "grab_start"
    GRAB_END = "grab_end"
    CUT_ACTIVE = "cut_active"


@dataclass(frozen=True)
class InputEvent:
    """One input event, in screen coordinates.

    Attributes:
        kind: What happened.
        pointer: Pointer position (x, y) when the event was produced.
        viewport: Viewport size (width, height) when the event was produced.
    """

    kind: InputKind
    pointer: Tuple[float, float]
    viewport: Tuple[float, float]


class InteractionController:
    def __init__(self, camera=None, pickup_radius=DEFAULT_PICKUP_RADIUS):
        self.camera = camera if camera is not None else Camera()
        self.pickup_radius = float(pickup_radius)
        self.grabbed_index: Optional[int] = None
        self.last_pointer: Optional[Tuple[float, float]] = None

    @property
    def grabbing(self):
        return self.grabbed_index is not None

    def handle(self, mesh, event):
        """Apply a grab-start or grab-end event to the mesh."""
        if event.kind is InputKind.GRAB_START:
            self.pick(mesh, event.pointer, event.viewport)
        elif event.kind is InputKind.GRAB_END:
            self.release(mesh)

    def pick(self, mesh, pointer, viewport):
        """
        Grab the unlocked particle nearest to `pointer` on screen, if one is
        within the pickup radius. Returns the particle index or None.
        """
        if self.grabbing:
            # a second press without a release keeps the current grab
            return self.grabbed_index

        screen = self.camera.project_many(mesh.positions(), viewport)
        idx = nearest_within(screen, pointer, self.pickup_radius, candidates=mesh.unlocked_mask())
        if idx is None:
            logger.debug(f"No particle within {self.pickup_radius} of {pointer}")
            return None

        mesh.particles[idx].grabbed = True
        self.grabbed_index = idx
        logger.debug(f"Grabbed particle {idx}")
        return idx

    def release(self, mesh):
        if self.grabbed_index is None:
            return
        mesh.particles[self.grabbed_index].grabbed = False
        logger.debug(f"Released particle {self.grabbed_index}")
        self.grabbed_index = None

    def drag(self, mesh, pointer, viewport):
        """Pin the held particle under the pointer at its current depth."""
        if self.grabbed_index is None:
            return
        p = mesh.particles[self.grabbed_index]
        x, y = self.camera.unproject(pointer, p.pos.z, viewport)
        # zero implicit velocity so letting go does not fling the particle
        p.hold_at(x, y)

    def cut(self, mesh, pointer, viewport):
        """
        Break every link whose projection crosses the pointer's path since
        the previous tick. Returns the number of links hit.
        """
        if self.last_pointer is None or not mesh.constraints:
            return 0

        screen = self.camera.project_many(mesh.positions(), viewport)
        pairs = np.array([c.indices for c in mesh.constraints], dtype=np.int64)
        hits = segments_intersect_many(self.last_pointer, pointer, screen[pairs[:, 0]], screen[pairs[:, 1]])

        count = 0
        for k in np.nonzero(hits)[0]:
            c = mesh.constraints[int(k)]
            if not c.broken:
                c.cut()
                count += 1
        if count:
            logger.debug(f"Cut {count} links")
        return count

    def reset(self):
        self.grabbed_index = None
        self.last_pointer = None
