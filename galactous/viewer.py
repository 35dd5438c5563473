"""Interactive window that runs a simulation and draws its particles."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

import pygame

from galactous.camera import Camera
from galactous.controls import Action, InputController, Key, MouseButton
from galactous.factory import GalaxyFactory
from galactous.simulation import Simulation
from galactous.vector import Vec3

WINDOW_TITLE = "Galactous"
WINDOW_SIZE = (800, 600)
BACKGROUND = (0.149, 0.153, 0.2)
POINT_SIZE = 10
WHITE = (1.0, 1.0, 1.0)

_KEY_MAP = {
    pygame.K_z: Key.Z,
    pygame.K_s: Key.S,
    pygame.K_q: Key.Q,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}

_BUTTON_MAP = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


def _to_rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(channel * 255))) for channel in color)


def project_point(
    camera: Camera, position: Vec3, width: int, height: int
) -> Optional[tuple[int, int]]:
    """Return the pixel where ``position`` appears, or None outside the view volume."""
    view = camera.view_matrix()
    projection = camera.projection_matrix()
    clip = projection.transform(*view.transform(position.x, position.y, position.z, 1.0))
    cx, cy, cz, cw = clip
    if cw <= 0:
        return None
    ndc_x, ndc_y, ndc_z = cx / cw, cy / cw, cz / cw
    if abs(ndc_x) > 1 or abs(ndc_y) > 1 or abs(ndc_z) > 1:
        return None
    screen_x = (ndc_x + 1.0) / 2.0 * width
    screen_y = (1.0 - ndc_y) / 2.0 * height
    return round(screen_x), round(screen_y)


class PointRenderer:
    """Draws single 3D points as small discs as seen from a camera."""

    def __init__(self, camera: Optional[Camera] = None, point_size: int = POINT_SIZE) -> None:
        self.camera = camera if camera is not None else Camera()
        self.point_size = point_size

    def draw_point(
        self,
        surface: pygame.Surface,
        position: Vec3,
        color: tuple[float, float, float] = WHITE,
    ) -> bool:
        """Draw the point with an RGB colour in [0, 1]; return whether it was visible."""
        width, height = surface.get_size()
        pixel = project_point(self.camera, position, width, height)
        if pixel is None:
            return False
        pygame.draw.circle(surface, _to_rgb(color), pixel, max(1, self.point_size // 2))
        return True


class Viewer:
    """A page showing a simulation, with a camera driven by mouse and keyboard."""

    def __init__(
        self,
        simulation: Optional[Simulation] = None,
        size: tuple[int, int] = WINDOW_SIZE,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.size = size
        self.simulation = simulation if simulation is not None else Simulation()
        camera = Camera(aspect_ratio=size[0] / size[1])
        self.cameras = [camera]
        self.renderer = PointRenderer(camera)
        self.controls = InputController(camera)
        self.factory = GalaxyFactory(self.simulation, rng)
        self.running = True

    @property
    def camera(self) -> Camera:
        return self.cameras[0]

    def create_galaxy(
        self,
        count: int,
        mass: float,
        radius: float,
        thickness: float,
        star_speed: float = 0.0,
    ):
        """Generate a disc galaxy and add it to the simulation."""
        galaxy = self.factory.generate_galaxy(count, mass, radius, thickness, star_speed)
        self.simulation.add_galaxy(galaxy)
        return galaxy

    def draw_simulation(self, surface: pygame.Surface) -> int:
        """Draw every particle in white; return how many were visible."""
        return sum(
            self.renderer.draw_point(surface, particle.pos, WHITE)
            for galaxy in self.simulation.galaxies
            for particle in galaxy.particles
        )

    def handle_event(self, event: pygame.event.Event) -> None:
        """Forward a pygame event to the input controller."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.controls.on_cursor_move(float(x), float(y))
        elif event.type == pygame.MOUSEWHEEL:
            self.controls.on_scroll(float(event.x), float(event.y))
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _BUTTON_MAP.get(event.button)
            if button is not None:
                action = Action.PRESS if event.type == pygame.MOUSEBUTTONDOWN else Action.RELEASE
                self.controls.on_mouse_button(button, action)
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = _KEY_MAP.get(event.key, event.key)
            action = Action.PRESS if event.type == pygame.KEYDOWN else Action.RELEASE
            self.controls.on_key(key, action)
            if self.controls.is_key_pressed(Key.ESCAPE):
                self.running = False

    def step(self, surface: pygame.Surface) -> int:
        """Clear the surface, advance the simulation once and draw it."""
        surface.fill(_to_rgb(BACKGROUND))
        self.simulation.update()
        return self.draw_simulation(surface)

    def run(self, max_frames: Optional[int] = None) -> int:
        """Open the window and loop until closed; return the number of frames shown."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            frames = 0
            while self.running and (max_frames is None or frames < max_frames):
                self.step(screen)
                for event in pygame.event.get():
                    self.handle_event(event)
                pygame.display.flip()
                clock.tick()
                frames += 1
                fps = clock.get_fps()
                if fps > 0:
                    pygame.display.set_caption(
                        f"{WINDOW_TITLE} - {1000.0 / fps:.3f} ms/frame ({fps:.1f} FPS)"
                    )
            return frames
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a galaxy and show it in a window."""
    parser = argparse.ArgumentParser(prog="galactous", description="Galaxy N-body viewer.")
    parser.add_argument("--particles", type=int, default=3000)
    parser.add_argument("--mass", type=float, default=100.0)
    parser.add_argument("--radius", type=float, default=100.0)
    parser.add_argument("--thickness", type=float, default=1.0)
    parser.add_argument("--star-speed", type=float, default=1.0)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    viewer = Viewer()
    viewer.create_galaxy(args.particles, args.mass, args.radius, args.thickness, args.star_speed)
    viewer.run(args.frames)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())