import pytest

from galactous.galaxy import Galaxy
from galactous.octree import Octree
from galactous.particle import Particle
from galactous.simulation import Simulation
from galactous.vector import Vec3


def _particle(mass, x, y, z, vx=0.0, vy=0.0, vz=0.0):
    return Particle(mass, Vec3(x, y, z), Vec3(vx, vy, vz))


def _pair_simulation():
    sim = Simulation(1000.0)
    sim.G = 1.0
    sim.time_step = 1.0
    left = _particle(1.0, -100.0, 10.0, 10.0)
    right = _particle(1.0, 100.0, 10.0, 10.0)
    sim.add_galaxy(Galaxy([left, right]))
    return sim, left, right


def test_defaults_match_documented_parameters():
    sim = Simulation()
    assert sim.time_step == 1000
    assert sim.G == 6.67430e-11
    assert sim.octree_root.width == 1000.0
    assert sim.galaxies == []


def test_width_sets_root_node():
    sim = Simulation(250.0)
    assert sim.octree_root.width == 250.0
    assert sim.octree_root.center == Vec3()


def test_explicit_root_is_used():
    root = Octree(Vec3(1.0, 1.0, 1.0), 8.0)
    sim = Simulation(octree_root=root)
    assert sim.octree_root is root


def test_add_galaxy_fills_octree_and_masses():
    sim, left, right = _pair_simulation()
    assert len(sim.octree_root) == 2
    assert sim.octree_root.mass == pytest.approx(2.0)
    assert sim.octree_root.mass_center.x == pytest.approx(0.0)
    assert left.octree is not right.octree


def test_pair_accelerations_attract_and_balance():
    sim, left, right = _pair_simulation()
    for p in (left, right):
        p.acceleration = Vec3()
        sim.update_acceleration(p, sim.octree_root)
    assert left.acceleration.x > 0
    assert right.acceleration.x < 0
    assert left.acceleration.x == pytest.approx(-right.acceleration.x)
    assert left.acceleration.y == pytest.approx(0.0)


def test_root_leaf_pull_without_softening():
    sim = Simulation(100.0)
    sim.G = 1.0
    sim.softening = 0.0
    source = _particle(10.0, 0.0, 0.0, 0.0)
    sim.octree_root.fill([source])
    probe = _particle(1.0, 10.0, 0.0, 0.0)
    sim.update_acceleration(probe, sim.octree_root)
    assert probe.acceleration.x == pytest.approx(-10.0)
    assert probe.acceleration.y == 0.0
    assert probe.acceleration.z == 0.0


def test_self_in_root_leaf_gives_no_acceleration():
    sim = Simulation(100.0)
    lonely = _particle(5.0, 1.0, 1.0, 1.0)
    sim.add_galaxy(Galaxy([lonely]))
    sim.update_acceleration(lonely, sim.octree_root)
    assert lonely.acceleration == Vec3()


def test_update_position_inside_node():
    sim, left, _ = _pair_simulation()
    left.velocity = Vec3(2.0, 0.0, 0.0)
    left.acceleration = Vec3()
    moved = sim.update_position(left)
    assert moved is False
    assert left.pos == Vec3(-98.0, 10.0, 10.0)
    assert left.octree.particle is left


def test_update_position_leapfrog_velocity():
    sim, left, _ = _pair_simulation()
    left.acceleration = Vec3(1.0, 0.0, 0.0)
    sim.update_position(left)
    assert left.velocity.x == pytest.approx(sim.time_step * 1.0)
    assert left.pos.x == pytest.approx(-100.0 + sim.time_step * sim.time_step / 2)


def test_update_position_migrates_to_other_node():
    sim, left, right = _pair_simulation()
    old_node = left.octree
    left.acceleration = Vec3()
    left.velocity = Vec3(0.0, 0.0, -20.0)
    moved = sim.update_position(left)
    assert moved is True
    assert old_node.particle is None
    assert left.octree is not old_node
    assert left.octree.particle is left
    assert left.octree.contains(left.pos)
    assert len(sim.octree_root) == 2


def test_update_brings_pair_closer():
    sim, left, right = _pair_simulation()
    before = (right.pos - left.pos).norm()
    sim.update()
    after = (right.pos - left.pos).norm()
    assert after < before
    assert left.velocity.x > 0
    assert right.velocity.x < 0