# niahu/arch/ahmes/instructions/alu.py
"""
算術演算・シフト命令の実装。

符号なしの桁あふれ（C/B）と符号付きのオーバーフロー（V）は別々の問いに答えるため、
それぞれ独立に計算します。
"""
from niahu.core.cpu import fetch
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.ahmes.state import AhmesState


# @intent:utility_function 8ビット値を2の補数の符号付き整数として解釈します。
def to_signed(value: int) -> int:
    return value - 0x100 if value & 0x80 else value


def _signed_overflow(result: int) -> bool:
    return not -0x80 <= result <= 0x7F


# @intent:responsibility ADD addr: 加算し、C（符号なし桁あふれ）とV（符号付きオーバーフロー）を更新します。Bは変化しません。
def execute_add(state: AhmesState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    operand = bus.read(addr)
    result = state.ac + operand
    state.overflow = _signed_overflow(to_signed(state.ac) + to_signed(operand))
    state.carry = result > 0xFF
    state.ac = result & 0xFF


# @intent:responsibility SUB addr: 減算し、B（符号なし借り）とVを更新します。Cは変化しません。
def execute_sub(state: AhmesState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch(state, bus)
    operand = bus.read(addr)
    state.overflow = _signed_overflow(to_signed(state.ac) - to_signed(operand))
    state.borrow = state.ac < operand
    state.ac = (state.ac - operand) & 0xFF


# @intent:responsibility SHR: 論理右シフト。押し出されたビット0がCに入ります。
def execute_shr(state: AhmesState, bus: MemoryBus, op: Operation) -> None:
    state.carry = (state.ac & 0x01) != 0
    state.ac >>= 1


# @intent:responsibility SHL: 左シフト。押し出されたビット7がCに入ります。
def execute_shl(state: AhmesState, bus: MemoryBus, op: Operation) -> None:
    state.carry = (state.ac & 0x80) != 0
    state.ac = (state.ac << 1) & 0xFF


# @intent:responsibility ROR: Cを経由した右ローテート。以前のCがビット7に入ります。
def execute_ror(state: AhmesState, bus: MemoryBus, op: Operation) -> None:
    prev_carry = 0x80 if state.carry else 0x00
    state.carry = (state.ac & 0x01) != 0
    state.ac = (state.ac >> 1) | prev_carry


# @intent:responsibility ROL: Cを経由した左ローテート。以前のCがビット0に入ります。
def execute_rol(state: AhmesState, bus: MemoryBus, op: Operation) -> None:
    prev_carry = 0x01 if state.carry else 0x00
    state.carry = (state.ac & 0x80) != 0
    state.ac = ((state.ac << 1) & 0xFF) | prev_carry
