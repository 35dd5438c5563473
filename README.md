# galactous

A small gravitational N-body simulation of a disc galaxy. Forces are
approximated with a Barnes-Hut octree, and the particles are drawn as
white points in a pygame window seen through a movable 3D camera.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
galactous
```

This opens an 800x600 window, generates one disc galaxy and advances the
simulation by one time step per frame. The window title shows the frame
time and frame rate.

Options:

- `--particles` number of stars (default 3000)
- `--mass` total mass of the galaxy (default 100.0)
- `--radius` disc radius (default 100.0)
- `--thickness` half-thickness of the disc (default 1.0)
- `--star-speed` rotation speed factor (default 1.0)
- `--frames` stop after this many frames (default: run until closed)

Controls:

- drag with the left mouse button to rotate the camera around its target
- scroll to zoom (changes the field of view, kept between 1 and 179 degrees)
- `Z` / `S` move the camera forward / backward
- `Q` / `D` move the camera left / right
- `Escape` or closing the window stops the viewer

## Using the library

```python
from galactous.simulation import Simulation
from galactous.factory import GalaxyFactory

simulation = Simulation()
factory = GalaxyFactory(simulation)
galaxy = factory.generate_galaxy(500, 100.0, 100.0, 1.0, 1.0)
simulation.add_galaxy(galaxy)

for _ in range(10):
    simulation.update()

galaxy.update_mass_center()
print(galaxy.mass, galaxy.mass_center)
```

Main building blocks:

- `galactous.vector.Vec3` — mutable 3D vector with arithmetic, `cross`,
  `norm`, `normalize`, `change_norm` and `limit_norm`
- `galactous.particle.Particle` and `ParticleType` — point masses with
  unique ids
- `galactous.octree.Octree` — Barnes-Hut tree with at most one particle
  per leaf; `fill`, `update_mass_center`, `describe` and `len()`
- `galactous.galaxy.Galaxy` — a list of particles with its total mass and
  centre of mass; `Galaxy.random_cube` scatters resting stars in a cube
- `galactous.simulation.Simulation` — `add_galaxy` and `update`, with the
  settings `time_step`, `G`, `softening` and `theta`
- `galactous.factory.GalaxyFactory` — `generate_galaxy` samples stars in a
  flattened ellipsoid turning around the y axis; accepts a
  `random.Random` for reproducible output
- `galactous.matrix.Mat4` — column-major 4x4 matrices (`identity`,
  `perspective`, `look_at`, `transform`)
- `galactous.camera.Camera` — view and projection matrices, orbiting,
  zooming and moving
- `galactous.controls.InputController` — turns cursor, scroll, button and
  key events into camera moves
- `galactous.viewer` — `project_point`, `PointRenderer`, `Viewer` and the
  `main` command

## Limitations

- `Simulation.update` moves the particles and re-inserts those that leave
  their octree node, but it does not recompute the masses of the octree
  nodes; call `simulation.octree_root.update_mass_center()` yourself if
  you need them refreshed.
- A particle that leaves the root node of the octree is no longer held by
  the tree, though it stays in its galaxy and keeps moving.
- `max_velocity` and `max_acceleration` are stored on `Simulation` but are
  not applied.
- The viewer has no on-screen control panel; it takes its settings from
  the command-line options above only, and it does not save or load
  simulations.