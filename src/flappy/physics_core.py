"""
physics_core.py: The deterministic kinematic functions, pipe generation and collision logic.
"""

import random
from typing import Optional, Tuple

from .data_models import Bird, GameConfig, Pipe


def generate_pipe(height: float, gap: float, min_height: float, x: float,
                  width: float, rng: Optional[random.Random] = None) -> Pipe:
    """
    Creates one pipe at `x` with a uniformly random gap position.

    The top segment is drawn from [min_height, height - gap - min_height] and
    the bottom segment takes whatever is left, so
    top_height + gap + bottom_height == height always holds.
    """
    rng = rng or random
    top_height = rng.uniform(min_height, height - gap - min_height)
    bottom_height = height - top_height - gap
    return Pipe(x=float(x), width=width, top_height=top_height,
                bottom_height=bottom_height)


class PhysicsCore:
    """
    Fixed-step physics used by the game engine. Holds no state beyond its config.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """Calculates new position and velocity after one frame."""
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def rotation_for(self, velocity: float) -> float:
        """Nose-up while rising, nose-down while falling, clamped."""
        cfg = self.config
        return min(max(velocity * cfg.rotation_gain, cfg.rotation_min), cfg.rotation_max)

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.jump_impulse

    def step_bird(self, bird: Bird):
        """Advances the bird by one frame (mutates it)."""
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)
        bird.rotation = self.rotation_for(bird.velocity)

    def hits_boundary(self, bird: Bird) -> bool:
        """Ceiling or floor contact."""
        return bird.y <= 0 or bird.y + bird.height >= self.config.height

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        """Axis-aligned overlap between the bird box and either pipe segment."""
        overlaps_x = bird.x < pipe.x + pipe.width and bird.x + bird.width > pipe.x
        if not overlaps_x:
            return False
        return (bird.y < pipe.top_height or
                bird.y + bird.height > self.config.height - pipe.bottom_height)

    def spawn_pipe(self, rng: Optional[random.Random] = None) -> Pipe:
        """Generates a new pipe at the right edge of the playfield."""
        cfg = self.config
        return generate_pipe(cfg.height, cfg.pipe_gap, cfg.pipe_min_height,
                             cfg.width, cfg.pipe_width, rng)

    def respawn(self, bird: Bird):
        cfg = self.config
        bird.x = cfg.bird_x
        bird.y = cfg.respawn_y
        bird.width = cfg.bird_width
        bird.height = cfg.bird_height
        bird.velocity = 0.0
        bird.rotation = 0.0
