class TwoPointConstraint:
    """Base class for constraints involving two particles.

    Endpoints are stored as indices into a particle list owned by the mesh;
    the constraint only borrows that list.
    """
    def __init__(self, particles, i, j):
        self._particles = particles
        self.i = int(i)
        self.j = int(j)

    @property
    def p1(self):
        return self._particles[self.i]

    @property
    def p2(self):
        return self._particles[self.j]

    @property
    def indices(self):
        return (self.i, self.j)

    def length(self):
        return self.p1.pos.distance_to(self.p2.pos)

    def solve(self):
        """Solve the constraint. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} i={self.i} j={self.j}>"

    def __str__(self):
        return self.__repr__()
