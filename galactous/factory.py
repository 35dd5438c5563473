"""Generation of flattened, rotating disc galaxies."""

from __future__ import annotations

import math
import random
from typing import Optional

from galactous.galaxy import Galaxy
from galactous.particle import Particle, ParticleType
from galactous.simulation import Simulation
from galactous.vector import Vec3

_NORMAL = Vec3(0.0, 1.0, 0.0)
_SPEED_DIVISOR = 1300


class GalaxyFactory:
    """Builds galaxies for a simulation."""

    def __init__(self, simulation: Simulation, rng: Optional[random.Random] = None) -> None:
        self.simulation = simulation
        self.rng = rng if rng is not None else random.Random()

    def generate_galaxy(
        self,
        count: int,
        mass: float,
        radius: float,
        thickness: float,
        star_speed: float = 0.0,
    ) -> Galaxy:
        """Sample ``count`` stars uniformly inside a flattened ellipsoid.

        The disc lies in the xz plane; every star turns around the y axis
        with a speed proportional to ``star_speed`` and its distance to the axis.
        """
        if radius <= 0 or math.isnan(radius):
            raise ValueError("radius must be positive")
        if thickness <= 0 or math.isnan(thickness):
            raise ValueError("thickness must be positive")
        particles: list[Particle] = []
        while len(particles) < count:
            x = -radius + 2 * radius * self.rng.random()
            y = -thickness + 2 * thickness * self.rng.random()
            z = -radius + 2 * radius * self.rng.random()
            if x * x + z * z + y * y * radius * radius / thickness / thickness > radius * radius:
                continue
            pos = Vec3(x, y, z)
            velocity = pos.cross(_NORMAL) * star_speed / radius / _SPEED_DIVISOR
            velocity.y = 0.0
            particles.append(Particle(mass / count, pos, velocity, ParticleType.STAR))
        return Galaxy(particles)