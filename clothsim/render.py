import pygame

from .camera import Camera

HIGHLIGHT_COLOR = (255, 255, 0)
NEAR_DEPTH = -100.0
DEPTH_RANGE = 400.0


def depth_intensity(z):
    """0 for links at or in front of z = -100, rising to 1 at z = 300."""
    return max(0.0, min(1.0, (z - NEAR_DEPTH) / DEPTH_RANGE))


def constraint_color(constraint):
    if constraint.p1.grabbed or constraint.p2.grabbed:
        return HIGHLIGHT_COLOR
    shade = int(255 * (1.0 - depth_intensity(constraint.p1.pos.z)))
    return (50, shade, 255)


def iter_segments(mesh, camera, viewport):
    """Yield (start, end, color) in screen space for every active link."""
    for c in mesh.iter_constraints():
        start = camera.project(c.p1.pos, viewport)
        end = camera.project(c.p2.pos, viewport)
        yield start, end, constraint_color(c)


def draw_mesh(screen, mesh, camera=None):
    """Helper to draw the cloth links onto a pygame surface."""
    if camera is None:
        camera = Camera()
    viewport = screen.get_size()
    for start, end, color in iter_segments(mesh, camera, viewport):
        pygame.draw.line(screen, color, start, end, 1)
