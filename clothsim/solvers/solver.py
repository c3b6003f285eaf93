class solver:
    def __init__(self, iterations=1):
        self.iterations = int(iterations)

    def step(self, mesh, time):
        """
        Advance `mesh` by one tick. To be implemented by subclasses.
        """
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} iterations={self.iterations}>"

    def __str__(self):
        return self.__repr__()
