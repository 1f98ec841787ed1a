# niahu/arch/neander/instructions/load.py
"""
ロード/ストア命令の実装。Ahmesも同じ実装を共有します。
"""
from niahu.core.cpu import fetch
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.neander.state import NeanderState


# @intent:responsibility LDA addr: メモリの値をACに読み込みます。
def execute_lda(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    state.ac = bus.read(addr)


# @intent:responsibility STA addr: ACの値をメモリに書き込みます。
def execute_sta(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    bus.write(addr, state.ac)
