"""Barnes-Hut style octree holding at most one particle per leaf."""

from __future__ import annotations

from typing import Iterable, Optional

from galactous.particle import Particle
from galactous.vector import Vec3

_RED = "\033[31m"
_RESET = "\033[0m"


class Octree:
    """A cubic node of the octree; a leaf holds zero or one particle."""

    def __init__(self, center: Vec3, width: float, parent: Optional[Octree] = None) -> None:
        self.center = center.copy()
        self.width = width
        self.mass_center = center.copy()
        self.mass = 0.0
        self.branches: list[Octree] = []
        self.parent = parent
        self.particle: Optional[Particle] = None

    def contains(self, point: Vec3) -> bool:
        """Whether the point lies in this node (lower faces inclusive, upper exclusive)."""
        half = self.width / 2
        return (
            self.center.x - half <= point.x < self.center.x + half
            and self.center.y - half <= point.y < self.center.y + half
            and self.center.z - half <= point.z < self.center.z + half
        )

    def subdivide(self) -> None:
        """Create the eight child nodes."""
        half = self.width / 2.0
        q = half / 2.0
        offsets = (
            (-q, q, q),
            (-q, -q, q),
            (-q, -q, -q),
            (q, q, q),
            (q, q, -q),
            (q, -q, q),
            (-q, q, -q),
            (q, -q, -q),
        )
        self.branches = [Octree(self.center + Vec3(*off), half, self) for off in offsets]

    def add_particle(self, particle: Particle) -> None:
        """Insert a particle, subdividing an occupied leaf as needed.

        A particle that falls in none of the children is dropped.
        """
        if self.particle is None and not self.branches:
            self.particle = particle
            particle.octree = self
            return
        if not self.branches:
            self.subdivide()
            old = self.particle
            self.particle = None
            self.add_particle(old)
        for branch in self.branches:
            if branch.contains(particle.pos):
                branch.add_particle(particle)
                return

    def migrate_particle_up(self, particle: Particle) -> None:
        """Insert the particle here if it fits, otherwise hand it to the parent."""
        if self.contains(particle.pos):
            self.add_particle(particle)
        elif self.parent is not None:
            self.parent.migrate_particle_up(particle)

    def fill(self, particles: Iterable[Particle]) -> None:
        """Insert every particle in turn."""
        for particle in particles:
            self.add_particle(particle)

    def update_mass_center(self) -> None:
        """Recompute mass and centre of mass of this node and all below it."""
        self.mass = 0.0
        self.mass_center = Vec3()
        if self.particle is not None:
            self.mass = self.particle.mass
            self.mass_center = self.particle.pos.copy()
            return
        for branch in self.branches:
            branch.update_mass_center()
            self.mass += branch.mass
            self.mass_center += branch.mass_center * branch.mass
        if self.mass != 0:
            self.mass_center = self.mass_center / self.mass

    def describe(self, depth: int = 0) -> str:
        """Return an indented, multi-line description of the subtree."""
        return "\n".join(self._describe_lines(depth))

    def _describe_lines(self, depth: int) -> list[str]:
        if self.particle is not None and self.branches:
            raise RuntimeError("octree node has both a particle and branches")
        pad = " " * (3 * depth)
        lines = [
            f"{pad}Octree with  center {self.center} and mass center {self.mass_center}"
            f" with width {self.width:g} and mass {self.mass:g}"
        ]
        if self.particle is not None:
            lines.append(
                f"{pad} {_RED}Particle{_RESET} at position {self.particle.pos}"
                f" with mass {self.particle.mass:g}"
            )
        if not self.branches:
            return lines
        lines.append(f"{pad} Branches: ")
        for branch in self.branches:
            lines.extend(branch._describe_lines(depth + 1))
        lines.append(f"{pad}End of octree")
        return lines

    def __len__(self) -> int:
        if self.particle is not None:
            return 1
        return sum(len(branch) for branch in self.branches)