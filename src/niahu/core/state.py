# niahu/core/state.py
"""
Core Layer (マシン状態)

このモジュールは、全アーキテクチャに共通するマシン状態（PC、命令レジスタ、
実行中フラグ、サイクル数）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass
from typing import ClassVar, Tuple


# @intent:responsibility マシンの共通レジスタ状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class MachineState:
    """
    マシンの共通状態を保持するデータクラス。
    アクセス回数はメモリバスが所有するため、ここには含まれません。
    """
    pc: int = 0x00  # Program Counter
    ir: int = 0x00  # Instruction Register (最後にフェッチしたバイト)
    running: bool = False
    cycle_count: int = 0

    # @intent:data_structure スナップショットファイルに書き出すフィールドの宣言順序。
    # @intent:rationale コーデックはこの宣言だけを見てレイアウトを決定するため、サブクラスで上書きします。
    REGISTER_FIELDS: ClassVar[Tuple[str, ...]] = ()
    FLAG_FIELDS: ClassVar[Tuple[str, ...]] = ()
