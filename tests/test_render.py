import pytest

from clothsim.camera import Camera
from clothsim.mesh import create_mesh
from clothsim.render import HIGHLIGHT_COLOR, constraint_color, depth_intensity, iter_segments

VIEWPORT = (1400, 900)


@pytest.mark.parametrize("z, expected", [(-500.0, 0.0), (-100.0, 0.0), (100.0, 0.5), (300.0, 1.0), (900.0, 1.0)])
def test_depth_intensity_is_clamped(z, expected):
    assert depth_intensity(z) == pytest.approx(expected)


def test_flat_cloth_color():
    mesh = create_mesh(2, 2, 10.0)
    assert constraint_color(mesh.constraints[0]) == (50, 191, 255)


def test_closer_links_are_brighter():
    mesh = create_mesh(2, 2, 10.0)
    c = mesh.constraints[0]
    c.p1.pos.z = -50.0
    near = constraint_color(c)
    c.p1.pos.z = 50.0
    far = constraint_color(c)
    assert near[1] > far[1]


def test_grabbed_endpoint_highlights_link():
    mesh = create_mesh(2, 2, 10.0)
    mesh.particles[3].grabbed = True
    colors = [constraint_color(c) for c in mesh.constraints]
    # links (1, 3) and (2, 3) touch the grabbed particle
    assert colors.count(HIGHLIGHT_COLOR) == 2


def test_iter_segments_covers_active_links():
    mesh = create_mesh(3, 3, 10.0)
    mesh.constraints[0].cut()
    mesh.prune_broken()
    cam = Camera()
    segments = list(iter_segments(mesh, cam, VIEWPORT))
    assert len(segments) == len(mesh.constraints)
    start, end, color = segments[0]
    c = mesh.constraints[0]
    assert start == pytest.approx(cam.project(c.p1.pos, VIEWPORT))
    assert end == pytest.approx(cam.project(c.p2.pos, VIEWPORT))
    assert len(color) == 3
