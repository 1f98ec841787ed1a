# niahu/arch/neander/state.py
"""
Neander固有の状態定義。
"""
from dataclasses import dataclass
from typing import ClassVar, Tuple

from niahu.core.state import MachineState


# @intent:responsibility Neanderの唯一のレジスタであるアキュムレータ（AC）を保持します。
# @intent:rationale N/Zフラグは独立したビットを持たず、ACの値から導出されます。
@dataclass
class NeanderState(MachineState):
    ac: int = 0x00  # Accumulator

    REGISTER_FIELDS: ClassVar[Tuple[str, ...]] = ("ac",)
    FLAG_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @property
    def negative(self) -> bool:
        return (self.ac & 0x80) != 0

    @property
    def zero(self) -> bool:
        return self.ac == 0
