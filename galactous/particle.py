"""Point masses that populate galaxies and the octree."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from galactous.vector import Vec3

if TYPE_CHECKING:
    from galactous.octree import Octree

_ids = itertools.count()


class ParticleType(Enum):
    """The kind of matter a particle stands for."""

    STAR = "star"
    DARK_MATTER = "dark_matter"
    GAS = "gas"


@dataclass(eq=False)
class Particle:
    """A point mass with a unique id; equality and hashing use the id alone."""

    mass: float
    pos: Vec3
    velocity: Vec3
    kind: ParticleType = ParticleType.STAR
    octree: Optional["Octree"] = None
    acceleration: Vec3 = field(default_factory=Vec3)
    id: int = field(default_factory=lambda: next(_ids))

    def __post_init__(self) -> None:
        self.pos = self.pos.copy()
        self.velocity = self.velocity.copy()
        self.acceleration = self.acceleration.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Particle):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)