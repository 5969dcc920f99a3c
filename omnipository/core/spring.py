import math


class ZoomSpringController:
    """
    Spring-damped scalar, used as the zoom of the sphere layer. The value is pulled
    towards target with acceleration -stiffness*(value-target) - damping*velocity
    (unit mass). Changing the target keeps the current velocity, so the value
    re-converges smoothly.
    """

    MAX_SUBSTEP = 1. / 240.

    def __init__(self, initial=0.6, stiffness=50., damping=25.):
        """
        Parameters :
        initial : float
            Starting value, which is also the starting target.
        stiffness : float
            Spring constant.
        damping : float
            Velocity damping coefficient.
        """
        self._value = float(initial)
        self._velocity = 0.
        self._target = float(initial)

        self.stiffness = float(stiffness)
        self.damping = float(damping)

    @property
    def value(self):
        return self._value

    @property
    def velocity(self):
        return self._velocity

    @property
    def target(self):
        return self._target

    def set_target(self, value):
        self._target = float(value)

    def tick(self, dt):
        """
        Advances the spring by dt seconds. Long frames are split into sub-steps
        of at most MAX_SUBSTEP, integrated with semi-implicit Euler.
        """
        if dt <= 0:
            return

        n_steps = max(1, math.ceil(dt / self.MAX_SUBSTEP))
        h = dt / n_steps
        for _ in range(n_steps):
            accel = -self.stiffness * (self._value - self._target) - self.damping * self._velocity
            self._velocity += accel * h
            self._value += self._velocity * h

    @property
    def damping_ratio(self):
        """
        Damping ratio of the spring. Above 1 the spring is overdamped and never
        overshoots a target it starts at rest from.
        """
        return self.damping / (2 * math.sqrt(self.stiffness))
