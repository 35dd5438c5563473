import random

import pytest

from galactous.octree import Octree
from galactous.particle import Particle
from galactous.vector import Vec3


def particle_at(x, y, z, mass=1.0):
    return Particle(mass, Vec3(x, y, z), Vec3())


def random_particles(count, half_width, seed=1):
    rng = random.Random(seed)
    return [
        particle_at(
            rng.uniform(-half_width, half_width * 0.999),
            rng.uniform(-half_width, half_width * 0.999),
            rng.uniform(-half_width, half_width * 0.999),
            mass=rng.uniform(0.5, 2.0),
        )
        for _ in range(count)
    ]


def test_contains_lower_bound_inclusive_upper_exclusive():
    node = Octree(Vec3(0, 0, 0), 10.0)
    assert node.contains(Vec3(-5, -5, -5))
    assert not node.contains(Vec3(5, 0, 0))
    assert node.contains(Vec3(4.999, 4.999, 4.999))
    assert not node.contains(Vec3(0, -5.001, 0))


def test_new_node_is_empty():
    node = Octree(Vec3(1, 2, 3), 4.0)
    assert len(node) == 0
    assert node.mass_center == Vec3(1, 2, 3)
    assert node.mass == 0
    assert node.branches == []


def test_subdivide_creates_eight_disjoint_children():
    node = Octree(Vec3(0, 0, 0), 8.0)
    node.subdivide()
    assert len(node.branches) == 8
    centers = {(b.center.x, b.center.y, b.center.z) for b in node.branches}
    assert len(centers) == 8
    for branch in node.branches:
        assert branch.width == 4.0
        assert branch.parent is node
        assert node.contains(branch.center)


def test_first_child_offset_order():
    node = Octree(Vec3(0, 0, 0), 8.0)
    node.subdivide()
    assert node.branches[0].center == Vec3(-2, 2, 2)
    assert node.branches[7].center == Vec3(2, -2, -2)


def test_single_particle_stored_in_root():
    root = Octree(Vec3(0, 0, 0), 10.0)
    p = particle_at(1, 2, 3)
    root.add_particle(p)
    assert root.particle is p
    assert p.octree is root
    assert len(root) == 1


def test_second_particle_subdivides():
    root = Octree(Vec3(0, 0, 0), 10.0)
    a = particle_at(1, 1, 1)
    b = particle_at(-1, -1, -1)
    root.fill([a, b])
    assert root.particle is None
    assert len(root.branches) == 8
    assert len(root) == 2
    for p in (a, b):
        assert p.octree is not root
        assert p.octree.particle is p
        assert p.octree.contains(p.pos)
    assert a.octree is not b.octree


def test_particle_outside_children_is_dropped():
    root = Octree(Vec3(0, 0, 0), 10.0)
    root.add_particle(particle_at(1, 1, 1))
    root.add_particle(particle_at(50, 50, 50))
    assert len(root) == 1


def test_fill_many_particles_each_in_own_leaf():
    root = Octree(Vec3(0, 0, 0), 100.0)
    particles = random_particles(200, 50.0)
    root.fill(particles)
    assert len(root) == len(particles)
    for p in particles:
        assert p.octree.particle is p
        assert p.octree.contains(p.pos)
        assert p.octree.branches == []


def test_update_mass_center_single_particle():
    root = Octree(Vec3(0, 0, 0), 10.0)
    p = particle_at(1, -2, 3, mass=4.0)
    root.add_particle(p)
    root.update_mass_center()
    assert root.mass == 4.0
    assert root.mass_center == p.pos


def test_update_mass_center_symmetric_pair():
    root = Octree(Vec3(0, 0, 0), 10.0)
    root.fill([particle_at(2, 2, 2, 3.0), particle_at(-2, -2, -2, 3.0)])
    root.update_mass_center()
    assert root.mass == pytest.approx(6.0)
    assert root.mass_center.x == pytest.approx(0.0)
    assert root.mass_center.y == pytest.approx(0.0)
    assert root.mass_center.z == pytest.approx(0.0)


def test_update_mass_center_total_mass_matches_particles():
    root = Octree(Vec3(0, 0, 0), 100.0)
    particles = random_particles(100, 50.0, seed=7)
    root.fill(particles)
    root.update_mass_center()
    assert root.mass == pytest.approx(sum(p.mass for p in particles))
    total = sum((p.pos * p.mass for p in particles), Vec3())
    expected = total / root.mass
    assert root.mass_center.x == pytest.approx(expected.x)
    assert root.mass_center.y == pytest.approx(expected.y)
    assert root.mass_center.z == pytest.approx(expected.z)


def test_migrate_particle_up_reinserts_moved_particle():
    root = Octree(Vec3(0, 0, 0), 10.0)
    a = particle_at(1, 1, 1)
    b = particle_at(-1, -1, -1)
    root.fill([a, b])
    leaf = a.octree
    a.pos = Vec3(-1, 1, -1)
    assert not leaf.contains(a.pos)
    leaf.particle = None
    leaf.parent.migrate_particle_up(a)
    assert a.octree.particle is a
    assert a.octree.contains(a.pos)
    assert len(root) == 2


def test_migrate_particle_up_outside_root_is_lost():
    root = Octree(Vec3(0, 0, 0), 10.0)
    a = particle_at(1, 1, 1)
    b = particle_at(-1, -1, -1)
    root.fill([a, b])
    leaf = a.octree
    a.pos = Vec3(100, 100, 100)
    leaf.particle = None
    leaf.migrate_particle_up(a)
    assert len(root) == 1


def test_describe_leaf_and_branches():
    root = Octree(Vec3(0, 0, 0), 10.0)
    root.fill([particle_at(1, 1, 1), particle_at(-1, -1, -1)])
    root.update_mass_center()
    text = root.describe()
    lines = text.split("\n")
    assert lines[0].startswith("Octree with  center (0, 0, 0)")
    assert lines[-1] == "End of octree"
    assert " Branches: " in lines
    assert sum("Particle" in line for line in lines) == 2
    assert any(line.startswith("   Octree with") for line in lines)


def test_describe_single_leaf_has_no_end_marker():
    root = Octree(Vec3(0, 0, 0), 10.0)
    root.add_particle(particle_at(1, 2, 3, mass=2.0))
    lines = root.describe().split("\n")
    assert len(lines) == 2
    assert "at position (1, 2, 3) with mass 2" in lines[1]


def test_describe_inconsistent_node_raises():
    root = Octree(Vec3(0, 0, 0), 10.0)
    root.subdivide()
    root.particle = particle_at(1, 1, 1)
    with pytest.raises(RuntimeError):
        root.describe()