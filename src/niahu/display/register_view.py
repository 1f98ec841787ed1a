# niahu/display/register_view.py
"""
レジスタ・フラグ・統計情報のテキスト表示。
"""
from typing import List

from niahu.core.cpu import AbstractMachine


def _format_value(value: int, hex_mode: bool) -> str:
    return f"{value:02X}" if hex_mode else f"{value:03}"


# @intent:responsibility レジスタ（PCを含む）とフラグを「name = value」形式の行で返します。フラグは0/1で表示します。
def format_registers(machine: AbstractMachine, hex_mode: bool = True) -> List[str]:
    lines = [
        f"{name:<2} = {_format_value(value, hex_mode)}"
        for name, value in machine.get_register_map().items()
    ]
    lines.extend(
        f"{name:<2} = {_format_value(int(flag), hex_mode)}"
        for name, flag in machine.get_flag_state().items()
    )
    return lines


def format_stats(machine: AbstractMachine) -> List[str]:
    return [
        f"cycles = {machine.cycle_count}",
        f"accesses = {machine.access_count}",
    ]
