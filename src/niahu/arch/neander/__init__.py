from .cpu import NeanderMachine

__all__ = ["NeanderMachine"]
