# niahu/arch/ramses/instructions/control.py
"""
制御命令（分岐、サブルーチン呼び出し、停止）の実装。
分岐先は条件の成否に関わらず常に解決されます（間接モードではメモリ読み出しが計上されます）。
"""
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus, ADDRESS_MASK
from niahu.arch.ramses.state import RamsesState
from .common import fetch_target


def execute_nop(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    # Intentional: NOP (No Operation)
    pass


def execute_jmp(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    state.pc = fetch_target(state, bus, op)


def execute_jn(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    target = fetch_target(state, bus, op)
    if state.negative:
        state.pc = target


def execute_jz(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    target = fetch_target(state, bus, op)
    if state.zero:
        state.pc = target


def execute_jc(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    target = fetch_target(state, bus, op)
    if state.carry:
        state.pc = target


# @intent:responsibility JSR am: 戻り番地（現在のPC）を飛び先に書き込み、その次のバイトから実行を続けます。
# @intent:rationale 飛び先の1バイトは戻り番地で上書きされます。サブルーチンは `JMP target, INDIRECT` で戻ります。
def execute_jsr(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    target = fetch_target(state, bus, op)
    bus.write(target, state.pc)
    state.pc = (target + 1) & ADDRESS_MASK


def execute_hlt(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    state.running = False
