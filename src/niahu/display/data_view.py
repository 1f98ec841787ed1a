# niahu/display/data_view.py
"""
メモリのデータ表示。
全ての読み出しはpeekで行い、アクセス統計を変化させません。
"""
from typing import Iterator, List, Tuple

from niahu.core.cpu import AbstractMachine


# @intent:utility_function 範囲の両端をどちらの順序で与えられても昇順の閉区間に正規化します。
def normalize_bounds(start_addr: int, end_addr: int) -> Tuple[int, int]:
    return min(start_addr, end_addr), max(start_addr, end_addr)


def iter_addresses(start_addr: int, end_addr: int) -> Iterator[int]:
    low, high = normalize_bounds(start_addr, end_addr)
    return iter(range(low, high + 1))


# @intent:utility_function 1バイトのアドレスと値を「addr = value」形式に整形します。
def format_cell(address: int, value: int, hex_mode: bool) -> str:
    if hex_mode:
        return f"{address:02X} = {value:02X}"
    return f"{address:03} = {value:03}"


# @intent:responsibility 指定範囲のメモリを1アドレス1行で返します。
def format_data(machine: AbstractMachine, start_addr: int, end_addr: int, hex_mode: bool = True) -> List[str]:
    return [
        format_cell(addr, machine.peek(addr), hex_mode)
        for addr in iter_addresses(start_addr, end_addr)
    ]
