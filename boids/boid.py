"""
Boid class - a particle moving forward along its heading.
"""

from rendering.geometry import Point


class Boid:
    __slots__ = ('x', 'y', 'z', 'speed', 'angle')

    def __init__(self, x: float, y: float, z: float = 0.0, speed: float = 0.0, angle: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.speed = float(speed)  # negative when the boid reversed course
        self.angle = float(angle)  # degrees, never wrapped

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def __repr__(self) -> str:
        return f"Boid(({self.x:.2f}, {self.y:.2f}), speed={self.speed:.3f}, angle={self.angle:.1f})"
