# niahu/arch/ahmes/state.py
"""
Ahmes固有の状態定義。
"""
from dataclasses import dataclass
from typing import ClassVar, Tuple

from niahu.arch.neander.state import NeanderState


# @intent:responsibility Neanderの状態に、算術演算が更新するV/C/Bフラグを追加します。
# @intent:rationale N/ZはNeanderと同じくACから導出し、独立に保持するのはV/C/Bの3つだけです。
@dataclass
class AhmesState(NeanderState):
    overflow: bool = False
    carry: bool = False
    borrow: bool = False

    FLAG_FIELDS: ClassVar[Tuple[str, ...]] = ("overflow", "carry", "borrow")
