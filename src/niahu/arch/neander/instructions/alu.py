# niahu/arch/neander/instructions/alu.py
"""
算術論理演算命令の実装。
"""
from niahu.core.cpu import fetch
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.neander.state import NeanderState


# @intent:responsibility ADD addr: 桁あふれを無視してACに加算します。
def execute_add(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    state.ac = (state.ac + bus.read(addr)) & 0xFF


def execute_or(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    state.ac |= bus.read(addr)


def execute_and(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    state.ac &= bus.read(addr)


# @intent:responsibility NOT: ACの全ビットを反転します（オペランドなし）。
def execute_not(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    state.ac = ~state.ac & 0xFF
