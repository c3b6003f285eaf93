import pytest

from clothsim.camera import Camera
from clothsim.DistanceConstraint import DistanceConstraint
from clothsim.interaction import InputEvent, InputKind, InteractionController
from clothsim.mesh import ClothMesh, create_mesh
from clothsim.Particle import Particle
from clothsim.Vec3 import Vec3

VIEWPORT = (1400, 900)


@pytest.fixture
def mesh():
    return create_mesh(3, 3, 10.0)


@pytest.fixture
def controller():
    return InteractionController(Camera())


def screen_of(controller, mesh, idx):
    return controller.camera.project(mesh.particles[idx].pos, VIEWPORT)


def test_pick_grabs_particle_under_pointer(mesh, controller):
    idx = controller.pick(mesh, screen_of(controller, mesh, 4), VIEWPORT)
    assert idx == 4
    assert controller.grabbing
    assert mesh.particles[4].grabbed
    assert sum(p.grabbed for p in mesh.particles) == 1


def test_pick_skips_locked_particles(mesh, controller):
    # pointer right on a pinned particle picks the nearest free one below it
    idx = controller.pick(mesh, screen_of(controller, mesh, 0), VIEWPORT)
    assert idx == 3
    assert not mesh.particles[0].grabbed


def test_pick_outside_radius_stays_idle(mesh, controller):
    assert controller.pick(mesh, (0.0, 0.0), VIEWPORT) is None
    assert not controller.grabbing
    assert not any(p.grabbed for p in mesh.particles)


def test_second_pick_keeps_current_grab(mesh, controller):
    controller.pick(mesh, screen_of(controller, mesh, 4), VIEWPORT)
    assert controller.pick(mesh, screen_of(controller, mesh, 8), VIEWPORT) == 4
    assert not mesh.particles[8].grabbed


def test_drag_follows_pointer_with_zero_velocity(mesh, controller):
    controller.pick(mesh, screen_of(controller, mesh, 7), VIEWPORT)
    p = mesh.particles[7]
    p.pos.z = 25.0

    controller.drag(mesh, (900.0, 400.0), VIEWPORT)

    expected = controller.camera.unproject((900.0, 400.0), 25.0, VIEWPORT)
    assert (p.pos.x, p.pos.y) == pytest.approx(expected)
    assert p.pos.z == 25.0
    assert p.prev_pos == p.pos


def test_drag_without_grab_is_a_noop(mesh, controller):
    before = [p.pos.copy() for p in mesh.particles]
    controller.drag(mesh, (900.0, 400.0), VIEWPORT)
    assert [p.pos for p in mesh.particles] == before


def test_release_returns_to_idle(mesh, controller):
    controller.handle(mesh, InputEvent(InputKind.GRAB_START, screen_of(controller, mesh, 5), VIEWPORT))
    assert mesh.particles[5].grabbed
    controller.handle(mesh, InputEvent(InputKind.GRAB_END, (0.0, 0.0), VIEWPORT))
    assert not mesh.particles[5].grabbed
    assert not controller.grabbing
    # releasing again is harmless
    controller.release(mesh)


def flat_camera_mesh(points):
    """Mesh whose particles project exactly onto `points` with the flat camera."""
    mesh = ClothMesh(1, len(points), 1.0)
    for sx, sy in points:
        # flat camera: scale 1 at z = 0, origin at (0, 100) for a 1000x1000 viewport
        mesh.particles.append(Particle(Vec3(sx, sy - 100.0, 0.0)))
    return mesh


FLAT_CAMERA = Camera(camera_offset=0.0, anchor_x=0.0, anchor_y=0.1)
FLAT_VIEWPORT = (1000, 1000)


def test_cut_marks_crossed_link_only():
    mesh = flat_camera_mesh([(0, 100), (100, 0), (200, 200), (300, 300)])
    crossed = DistanceConstraint(mesh.particles, 0, 1)
    apart = DistanceConstraint(mesh.particles, 2, 3)
    mesh.constraints = [crossed, apart]
    assert FLAT_CAMERA.project(mesh.particles[0].pos, FLAT_VIEWPORT) == (0.0, 100.0)

    controller = InteractionController(FLAT_CAMERA)
    controller.last_pointer = (0.0, 0.0)
    assert controller.cut(mesh, (100.0, 100.0), FLAT_VIEWPORT) == 1

    assert crossed.broken
    assert not apart.broken
    # cutting only flags; removal is left to the solver
    assert mesh.constraints == [crossed, apart]


def test_cut_needs_a_previous_pointer(mesh, controller):
    assert controller.cut(mesh, (700.0, 120.0), VIEWPORT) == 0
    assert not any(c.broken for c in mesh.constraints)


def test_cut_does_not_touch_grab_state(mesh, controller):
    controller.pick(mesh, screen_of(controller, mesh, 4), VIEWPORT)
    controller.last_pointer = (600.0, 100.0)
    controller.cut(mesh, (800.0, 100.0), VIEWPORT)
    assert controller.grabbed_index == 4
    assert mesh.particles[4].grabbed


def test_reset_forgets_grab_and_pointer(mesh, controller):
    controller.pick(mesh, screen_of(controller, mesh, 4), VIEWPORT)
    controller.last_pointer = (1.0, 2.0)
    controller.reset()
    assert controller.grabbed_index is None
    assert controller.last_pointer is None
