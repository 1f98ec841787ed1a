from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class MemoryPatch:
    address: int
    data: List[int] = field(default_factory=list)


@dataclass
class CpuInitialState:
    pc: int = 0x00
    registers: Dict[str, int] = field(default_factory=dict)


@dataclass
class MachineConfig:
    architecture: str
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
    memory: List[MemoryPatch] = field(default_factory=list)
