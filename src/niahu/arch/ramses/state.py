# niahu/arch/ramses/state.py
"""
Ramses固有の状態定義。
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Tuple

from niahu.core.state import MachineState


# @intent:data_structure オペコードのビット3..2で選択されるレジスタ。値3はどのレジスタも指しません。
class Register(IntEnum):
    A = 0
    B = 1
    X = 2


# @intent:responsibility 3本の汎用レジスタ（A, B, X）とN/Z/Cフラグを保持します。
# @intent:rationale N/Zはレジスタ経由の読み書きのたびに、アクセスした値から再計算されます。
@dataclass
class RamsesState(MachineState):
    a: int = 0x00
    b: int = 0x00
    x: int = 0x00  # Index Register
    negative: bool = False
    zero: bool = False
    carry: bool = False

    REGISTER_FIELDS: ClassVar[Tuple[str, ...]] = ("a", "b", "x")
    FLAG_FIELDS: ClassVar[Tuple[str, ...]] = ("negative", "zero", "carry")

    def _update_nz(self, value: int) -> None:
        self.negative = (value & 0x80) != 0
        self.zero = value == 0

    # @intent:responsibility レジスタを読み出し、その値でN/Zを更新します。
    def read_register(self, register: Register) -> int:
        value = getattr(self, register.name.lower())
        self._update_nz(value)
        return value

    # @intent:responsibility レジスタに書き込み、その値でN/Zを更新します。
    def write_register(self, register: Register, value: int) -> None:
        value &= 0xFF
        setattr(self, register.name.lower(), value)
        self._update_nz(value)
