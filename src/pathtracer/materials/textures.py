# materials/textures.py
from pathtracer.core.vector import Vector3

class Texture:
    """Base class for all textures."""
    def sample(self, p: Vector3) -> Vector3:
        """Sample the texture color at the given world-space point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, p: Vector3) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"SolidTexture({self.color!r})"
