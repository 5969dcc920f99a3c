import math
from dataclasses import dataclass

import numpy as np

from ..errors import ConfigurationError

N_BODIES = 3


@dataclass
class Body:
    """
    One floating sphere. Only the PositionIntegrator writes x and y.
    """
    id: str
    x: float
    y: float

    @property
    def position(self):
        return (self.x, self.y)


class PositionIntegrator:
    """
    Keeps the three spheres from overlapping. Each tick, every pair closer
    than threshold is pushed apart by a fraction of the overlap. Only the
    x coordinate is pushed, y is left as is.

    The integrator is ticked every frame, but only moves the bodies while
    is_active() returns True. Otherwise the bodies stay frozen where they are.
    """

    def __init__(self, bodies, threshold=240., strength=0.05, is_active=None):
        """
        Parameters :
        bodies : list of Body
            Exactly three bodies, with finite positions.
        threshold : float
            Separation under which two bodies repel each other.
        strength : float
            Fraction of the overlap that is resolved in one tick.
        is_active : callable () -> bool, optional
            Gate consulted at the start of each tick. If None, always active.
        """
        bodies = list(bodies)
        if len(bodies) != N_BODIES:
            raise ConfigurationError(f"expected {N_BODIES} bodies, got {len(bodies)}")
        for body in bodies:
            if not (math.isfinite(body.x) and math.isfinite(body.y)):
                raise ConfigurationError(f"body {body.id!r} has a non-finite position {body.position}")
        if threshold <= 0:
            raise ConfigurationError(f"threshold must be positive, got {threshold}")

        self._bodies = bodies
        self.threshold = float(threshold)
        self.strength = float(strength)
        self.is_active = is_active if is_active is not None else (lambda: True)

        # Fixed processing order, i<j
        self._pairs = [(i, j) for i in range(N_BODIES) for j in range(i + 1, N_BODIES)]

    @property
    def bodies(self):
        return tuple(self._bodies)

    def tick(self):
        """
        Runs one relaxation sweep over the pairs. Updates are applied in place, so
        a pair sees the positions already moved by the pairs before it.
        """
        if not self.is_active():
            return

        for i, j in self._pairs:
            a, b = self._bodies[i], self._bodies[j]
            dx = a.x - b.x
            dy = a.y - b.y
            d = math.sqrt(dx * dx + dy * dy)
            if 0 < d < self.threshold:
                push = (dx / d) * (self.threshold - d) * self.strength
                a.x += push
                b.x -= push

    @property
    def positions(self):
        """
        Returns a copy of the body positions, as a (3,2) float numpy array.
        """
        return np.array([body.position for body in self._bodies], dtype=float)

    def pairwise_distances(self):
        """
        Returns a dict (i,j) -> distance between bodies i and j, for i<j.
        """
        pos = self.positions
        diff = pos[:, None, :] - pos[None, :, :]
        dist = np.hypot(diff[..., 0], diff[..., 1])
        return {(i, j): float(dist[i, j]) for i, j in self._pairs}

    def min_separation(self):
        return min(self.pairwise_distances().values())
