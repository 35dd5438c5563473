"""Gravitational N-body stepping with a Barnes-Hut octree."""

from __future__ import annotations

from typing import Iterable, Optional

from galactous.galaxy import Galaxy
from galactous.octree import Octree
from galactous.particle import Particle
from galactous.vector import Vec3


class Simulation:
    """Galaxies evolving under gravity, approximated through an octree."""

    def __init__(
        self,
        width: float = 1000.0,
        octree_root: Optional[Octree] = None,
        galaxies: Optional[Iterable[Galaxy]] = None,
    ) -> None:
        self.time_step = 1000.0
        self.G = 6.67430e-11
        self.softening = 1e-4
        self.max_velocity = 1e5
        self.max_acceleration = 1e5
        # Opening angle: a node is used as a whole when width / distance < theta.
        self.theta = 1.0
        self.galaxies: list[Galaxy] = list(galaxies) if galaxies is not None else []
        self.octree_root = octree_root if octree_root is not None else Octree(Vec3(), width)

    def add_galaxy(self, galaxy: Galaxy) -> None:
        """Add a galaxy, insert its particles in the octree and refresh the masses."""
        self.galaxies.append(galaxy)
        self.octree_root.fill(galaxy.particles)
        self.octree_root.update_mass_center()

    def _particles(self):
        for galaxy in self.galaxies:
            yield from galaxy.particles

    def update(self) -> None:
        """Advance every particle by one time step."""
        for particle in self._particles():
            particle.acceleration = Vec3()
            self.update_acceleration(particle, self.octree_root)
        for particle in self._particles():
            self.update_position(particle)

    def update_acceleration(self, particle: Particle, node: Octree) -> None:
        """Accumulate on ``particle`` the pull of everything held in ``node``."""
        if node.particle is not None:
            r = node.particle.pos - particle.pos
            distance = r.norm()
            if distance != 0:
                particle.acceleration += r * (
                    self.G * node.particle.mass / distance - self.softening
                )
            return
        for branch in node.branches:
            d = (particle.pos - branch.mass_center).norm() + self.softening
            if branch.width / d < self.theta or branch.particle is not None:
                particle.acceleration += (branch.mass_center - particle.pos) * (
                    self.G * branch.mass / d
                )
            else:
                self.update_acceleration(particle, branch)

    def update_position(self, particle: Particle) -> bool:
        """Integrate one step; return True when the particle left its octree node."""
        half_kick = particle.acceleration * self.time_step / 2
        particle.velocity += half_kick
        particle.pos += particle.velocity * self.time_step
        particle.velocity += half_kick
        node = particle.octree
        if node is not None and not node.contains(particle.pos):
            (node.parent if node.parent is not None else node).migrate_particle_up(particle)
            node.particle = None
            return True
        return False