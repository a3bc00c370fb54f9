"""Scene mathematics for a lit teapot room: transforms, camera, OBJ models and lights."""

__version__ = "0.1.0"
__all__ = ["maths", "camera", "model", "light", "scene"]