# niahu/arch/ramses/addressing.py
"""
アドレッシングモード解決

フェッチ直後のオペランドバイトとオペコード下位2ビットのモードから、
実効値・実効アドレス・分岐先を求めます。メモリの参照は全て計上パスを通ります。
"""
from enum import IntEnum

from niahu.transport.bus import MemoryBus, ADDRESS_MASK
from niahu.arch.ramses.state import RamsesState


# @intent:data_structure 2ビットのアドレッシングモード。4値全てが有効なので、範囲外の値は存在しません。
class AddressingMode(IntEnum):
    DIRECT = 0
    INDIRECT = 1
    IMMEDIATE = 2
    INDEXED = 3

    @classmethod
    def from_opcode(cls, opcode: int) -> "AddressingMode":
        return cls(opcode & 0x03)


# @intent:utility_function オペランドにインデックスレジスタを加算します。Xの読み出しはフラグを変化させません。
def _indexed(state: RamsesState, operand: int) -> int:
    return (operand + state.x) & ADDRESS_MASK


# @intent:responsibility LDR/ADD/OR/AND/SUB が使う実効値を返します。
def resolve_value(mode: AddressingMode, operand: int, state: RamsesState, bus: MemoryBus) -> int:
    if mode == AddressingMode.DIRECT:
        return bus.read(operand)
    if mode == AddressingMode.INDIRECT:
        return bus.read(bus.read(operand))
    if mode == AddressingMode.IMMEDIATE:
        return operand
    return bus.read(_indexed(state, operand))


# @intent:responsibility STR が書き込む実効アドレスを返します。
# @intent:rationale 即値モードではオペランドバイト自身のアドレス（pc - 1）に書き込みます。
def resolve_address(mode: AddressingMode, operand: int, state: RamsesState, bus: MemoryBus) -> int:
    if mode == AddressingMode.DIRECT:
        return operand
    if mode == AddressingMode.INDIRECT:
        return bus.read(operand)
    if mode == AddressingMode.IMMEDIATE:
        return (state.pc - 1) & ADDRESS_MASK
    return _indexed(state, operand)


# @intent:responsibility 分岐命令の飛び先を返します。即値モードは直接モードと同じ扱いです。
def resolve_target(mode: AddressingMode, operand: int, state: RamsesState, bus: MemoryBus) -> int:
    if mode == AddressingMode.INDIRECT:
        return bus.read(operand)
    if mode == AddressingMode.INDEXED:
        return _indexed(state, operand)
    return operand
