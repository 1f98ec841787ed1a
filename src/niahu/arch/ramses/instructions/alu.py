# niahu/arch/ramses/instructions/alu.py
"""
算術・論理演算命令の実装。

レジスタは全て read_register / write_register を経由するため、
読み出し時と書き込み時の両方でN/Zが更新されます。
"""
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.ramses.state import RamsesState
from .common import register_of, fetch_value


# @intent:responsibility ADD r, am: 加算し、Cに符号なし桁あふれを設定します。
def execute_add(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    reg = register_of(op)
    value = fetch_value(state, bus, op)
    result = state.read_register(reg) + value
    state.carry = result > 0xFF
    state.write_register(reg, result)


# @intent:responsibility SUB r, am: 減算します。Cは「借りが発生しなかった」ことを表します。
def execute_sub(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    reg = register_of(op)
    value = fetch_value(state, bus, op)
    current = state.read_register(reg)
    state.carry = not current < value
    state.write_register(reg, current - value)


def execute_or(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    reg = register_of(op)
    value = fetch_value(state, bus, op)
    state.write_register(reg, state.read_register(reg) | value)


def execute_and(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    reg = register_of(op)
    value = fetch_value(state, bus, op)
    state.write_register(reg, state.read_register(reg) & value)


def execute_not(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    reg = register_of(op)
    state.write_register(reg, ~state.read_register(reg))


# @intent:responsibility NEG r: 2の補数で符号反転します。Cはレジスタが0だった場合に立ちます。
def execute_neg(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    reg = register_of(op)
    current = state.read_register(reg)
    state.carry = current == 0
    state.write_register(reg, -current)


# @intent:responsibility SHR r: 論理右シフト。押し出されたビット0がCに入ります。
def execute_shr(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    reg = register_of(op)
    current = state.read_register(reg)
    state.carry = (current & 0x01) != 0
    state.write_register(reg, current >> 1)
