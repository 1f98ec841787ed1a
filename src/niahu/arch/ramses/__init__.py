from .cpu import RamsesMachine

__all__ = ["RamsesMachine"]
