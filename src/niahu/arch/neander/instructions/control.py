# niahu/arch/neander/instructions/control.py
"""
制御命令（分岐、停止）の実装。
分岐命令は条件の成否に関わらず必ずオペランドをフェッチします。
"""
from niahu.core.cpu import fetch
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.neander.state import NeanderState


def execute_nop(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    # Intentional: NOP (No Operation)
    pass


# @intent:responsibility JMP addr: 無条件にPCを書き換えます。
def execute_jmp(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    state.pc = fetch(state, bus)


# @intent:responsibility JN addr: ACが負（ビット7が1）の場合に分岐します。
def execute_jn(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    if state.negative:
        state.pc = addr


# @intent:responsibility JZ addr: ACがゼロの場合に分岐します。
def execute_jz(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    if state.zero:
        state.pc = addr


# @intent:responsibility HLT: 連続実行を停止します。
def execute_hlt(state: NeanderState, bus: MemoryBus, op: Operation) -> None:
    state.running = False
