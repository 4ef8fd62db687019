"""Position, scale and rotation of a scene object."""

from __future__ import annotations

from dataclasses import dataclass, field

from mobagen.vector2 import Vector2


@dataclass
class Transform:
    """Placement in 2D; ``rotation`` is the vector pointing up."""

    position: Vector2 = field(default_factory=Vector2.zero)
    scale: Vector2 = field(default_factory=Vector2.identity)
    rotation: Vector2 = field(default_factory=Vector2.zero)