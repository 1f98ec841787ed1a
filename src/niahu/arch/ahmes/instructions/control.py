# niahu/arch/ahmes/instructions/control.py
"""
Ahmesで追加された条件分岐命令の実装。
JMP/JN/JZ/NOP/HLTはNeanderの実装を共有します。
"""
from typing import Callable

from niahu.core.cpu import fetch
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.ahmes.state import AhmesState

ExecFunc = Callable[[AhmesState, MemoryBus, Operation], None]


# @intent:utility_function 条件を受け取り、「オペランドをフェッチし、条件が真なら分岐する」実行関数を生成します。
def _branch_if(condition: Callable[[AhmesState], bool]) -> ExecFunc:
    def execute(state: AhmesState, bus: MemoryBus, op: Operation) -> None:
        addr = fetch(state, bus)
        if condition(state):
            state.pc = addr
    return execute


execute_jp = _branch_if(lambda s: not s.negative)
execute_jv = _branch_if(lambda s: s.overflow)
execute_jnv = _branch_if(lambda s: not s.overflow)
execute_jnz = _branch_if(lambda s: not s.zero)
execute_jc = _branch_if(lambda s: s.carry)
execute_jnc = _branch_if(lambda s: not s.carry)
execute_jb = _branch_if(lambda s: s.borrow)
execute_jnb = _branch_if(lambda s: not s.borrow)
