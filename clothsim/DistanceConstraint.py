from clothsim.TwoPointConstraint import TwoPointConstraint
from clothsim.config import DEFAULT_MIN_DISTANCE, DEFAULT_STRETCH_LIMIT


class DistanceConstraint(TwoPointConstraint):
    def __init__(self, particles, i, j, stretch_limit=DEFAULT_STRETCH_LIMIT, min_distance=DEFAULT_MIN_DISTANCE):
        super().__init__(particles, i, j)
        # rest length is whatever the endpoints are apart right now
        self.rest_length = self.length()
        self.stretch_limit = float(stretch_limit)
        self.min_distance = float(min_distance)
        self.broken = False

    def solve(self):
        if self.broken:
            return

        a = self.p1
        b = self.p2
        dx = a.pos.x - b.pos.x
        dy = a.pos.y - b.pos.y
        dz = a.pos.z - b.pos.z
        dist = (dx * dx + dy * dy + dz * dz) ** 0.5

        # overstretched links tear without a final correction
        if dist > self.rest_length * self.stretch_limit:
            self.broken = True
            return
        if dist < self.min_distance:
            return

        # each endpoint takes half of the error; a fixed one simply ignores its share
        factor = (self.rest_length - dist) / dist * 0.5
        ox = dx * factor
        oy = dy * factor
        oz = dz * factor
        if not a.fixed:
            a.pos.x += ox
            a.pos.y += oy
            a.pos.z += oz
        if not b.fixed:
            b.pos.x -= ox
            b.pos.y -= oy
            b.pos.z -= oz

    def cut(self):
        self.broken = True

    def __repr__(self):
        return (f"<{self.__class__.__name__} i={self.i} j={self.j} "
                f"rest_length={self.rest_length:.3f} broken={self.broken}>")
