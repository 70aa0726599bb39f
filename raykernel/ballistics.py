from dataclasses import dataclass
from raykernel.math import Tuple


@dataclass
class Projectile:
    position: Tuple  # point
    velocity: Tuple  # vector


@dataclass
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return Projectile(proj.position + proj.velocity,
                      proj.velocity + env.gravity + env.wind)
