# niahu/display/code_view.py
"""
メモリの逆アセンブル表示。

直前の命令のオペランドにあたるバイトにはニーモニックを付けません。
範囲が命令の途中から始まっていても補正はせず、与えられた範囲をそのまま機械的に整形します。
"""
from typing import List

from niahu.core.cpu import AbstractMachine
from niahu.display.data_view import format_cell, iter_addresses


# @intent:responsibility 指定範囲のメモリを、ニーモニック付きの行として返します。
def format_code(machine: AbstractMachine, start_addr: int, end_addr: int, hex_mode: bool = True) -> List[str]:
    """
    例（16進、Neander）:
        00 = 20  LDA
        01 = 81
        02 = 60  NOT
    """
    table = machine.instruction_table
    lines: List[str] = []
    needs_operand = False

    for addr in iter_addresses(start_addr, end_addr):
        value = machine.peek(addr)
        line = format_cell(addr, value, hex_mode)

        if needs_operand:
            needs_operand = False
        else:
            info = table.lookup(value)
            if info is not None:
                needs_operand = info.operand
                line += f"  {table.describe(value)}"

        lines.append(line)
    return lines
