from .cpu import AhmesMachine

__all__ = ["AhmesMachine"]
