"""Collections of particles forming a galaxy."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from galactous.particle import Particle, ParticleType
from galactous.vector import Vec3


@dataclass
class Galaxy:
    """A group of particles with a cached total mass and centre of mass."""

    particles: list[Particle] = field(default_factory=list)
    mass_center: Vec3 = field(default_factory=Vec3, init=False)
    mass: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.particles = list(self.particles)
        self.update_mass_center()

    @classmethod
    def random_cube(
        cls,
        count: int,
        mass: float,
        radius: float,
        rng: Optional[random.Random] = None,
    ) -> Galaxy:
        """Scatter ``count`` resting stars uniformly in a cube of half-width ``radius``.

        The total mass is ``mass`` and the centre of mass is left at the origin.
        """
        rng = rng if rng is not None else random.Random()
        diameter = 2 * radius
        particles = []
        if count > 0:
            particle_mass = mass / count
            for _ in range(count):
                position = Vec3(
                    rng.random() * diameter - radius,
                    rng.random() * diameter - radius,
                    rng.random() * diameter - radius,
                )
                particles.append(
                    Particle(particle_mass, position, Vec3(), ParticleType.STAR)
                )
        galaxy = cls(particles)
        galaxy.mass_center = Vec3()
        galaxy.mass = mass
        return galaxy

    def update_mass_center(self) -> None:
        """Recompute the total mass and the centre of mass from the particles."""
        center = Vec3()
        total = 0.0
        for particle in self.particles:
            center += particle.pos * particle.mass
            total += particle.mass
        if total != 0:
            center /= total
        self.mass_center = center
        self.mass = total

    def describe_particles(self) -> str:
        """Return one line per particle giving its id and position."""
        return "\n".join(
            f"Particle {particle.id} : {particle.pos}" for particle in self.particles
        )