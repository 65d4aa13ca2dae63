# materials/presets.py
from penumbra.core.vector import Vector3
from penumbra.materials.material import Material

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    YELLOW = Vector3(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)
    PURPLE = Vector3(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.1, 0.1, 0.1)

    @staticmethod
    def matte(color: Vector3) -> Material:
        """Create a fully diffuse material with the given color."""
        return Material(color, 0.0)

class MaterialPresets:
    """Predefined materials spanning the diffuse to mirror range."""

    NAMES = ("chalk", "plastic", "polished", "chrome", "mirror")

    @staticmethod
    def chalk() -> Material:
        return Material(ColorPresets.WHITE, 0.0)

    @staticmethod
    def plastic(color: Vector3 = ColorPresets.RED) -> Material:
        return Material(color, 0.1)

    @staticmethod
    def polished(color: Vector3 = ColorPresets.BLUE) -> Material:
        return Material(color, 0.4)

    @staticmethod
    def chrome() -> Material:
        return Material(Vector3(0.9, 0.9, 0.9), 0.8)

    @staticmethod
    def mirror() -> Material:
        return Material(Vector3(1.0, 1.0, 1.0), 1.0)

    @classmethod
    def by_name(cls, name: str) -> Material:
        """Look up a preset by name, e.g. "chrome"."""
        if name not in cls.NAMES:
            raise ValueError(f"Unknown material preset: {name} (expected one of {', '.join(cls.NAMES)})")
        return getattr(cls, name)()
