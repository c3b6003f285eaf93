import numpy as np


def ccw(p0, p1, p2):
    """Orientation test: True if p0, p1, p2 are in counter-clockwise order."""
    return (p2[1] - p0[1]) * (p1[0] - p0[0]) > (p1[1] - p0[1]) * (p2[0] - p0[0])


def segments_intersect(a, b, c, d):
    """
    Detect whether segment a-b crosses segment c-d.
    Collinear and merely touching segments are not reported.
    """
    return ccw(a, c, d) != ccw(b, c, d) and ccw(a, b, c) != ccw(a, b, d)


def _ccw_many(p0, p1, p2):
    return (p2[..., 1] - p0[..., 1]) * (p1[..., 0] - p0[..., 0]) > \
        (p1[..., 1] - p0[..., 1]) * (p2[..., 0] - p0[..., 0])


def segments_intersect_many(a, b, starts, ends):
    """
    Test one segment a-b against many segments at once.

    - a, b: points (x, y)
    - starts, ends: (M, 2) arrays with the endpoints of the other segments
    Returns a boolean array of length M.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    starts = np.asarray(starts, dtype=np.float64).reshape(-1, 2)
    ends = np.asarray(ends, dtype=np.float64).reshape(-1, 2)
    # broadcast the single segment against every other one
    a_ = np.broadcast_to(a, starts.shape)
    b_ = np.broadcast_to(b, starts.shape)
    return (_ccw_many(a_, starts, ends) != _ccw_many(b_, starts, ends)) & \
        (_ccw_many(a_, b_, starts) != _ccw_many(a_, b_, ends))


def nearest_within(points, target, radius, candidates=None):
    """
    Index of the point closest to `target` if it lies strictly inside
    `radius`, otherwise None. Ties go to the lowest index.

    - points: (N, 2) array of screen positions
    - candidates: optional boolean mask of points that may be picked
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if points.shape[0] == 0:
        return None
    dist = np.hypot(points[:, 0] - target[0], points[:, 1] - target[1])
    if candidates is not None:
        dist = np.where(np.asarray(candidates, dtype=bool), dist, np.inf)
    best = int(np.argmin(dist))
    if dist[best] < radius:
        return best
    return None
