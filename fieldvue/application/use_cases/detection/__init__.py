from .detect_objects import DetectObjectsUseCase

__all__ = ["DetectObjectsUseCase"]
