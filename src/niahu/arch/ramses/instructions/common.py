# niahu/arch/ramses/instructions/common.py
"""
Ramses命令実装の共通ヘルパー。
"""
from niahu.core.cpu import fetch
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.ramses.state import RamsesState, Register
from niahu.arch.ramses.addressing import (
    AddressingMode, resolve_value, resolve_address, resolve_target,
)


def register_of(op: Operation) -> Register:
    return Register(op.register)


def mode_of(op: Operation) -> AddressingMode:
    return AddressingMode(op.mode)


# @intent:utility_function オペランドをフェッチし、アドレッシングモードに従って実効値を求めます。
def fetch_value(state: RamsesState, bus: MemoryBus, op: Operation) -> int:
    operand = fetch(state, bus)
    return resolve_value(mode_of(op), operand, state, bus)


def fetch_address(state: RamsesState, bus: MemoryBus, op: Operation) -> int:
    operand = fetch(state, bus)
    return resolve_address(mode_of(op), operand, state, bus)


def fetch_target(state: RamsesState, bus: MemoryBus, op: Operation) -> int:
    operand = fetch(state, bus)
    return resolve_target(mode_of(op), operand, state, bus)
