# niahu/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、デコード済み命令と、1サイクル実行後のマシン状態を
記録した不変のデータ構造を定義します。トレース出力に用います。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from niahu.core.state import MachineState
from niahu.transport.bus import BusAccess


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    デコードされた命令（オペコード、ニーモニック、オペランドの有無）を記録するデータクラス。
    レジスタ選択とアドレッシングモードはレジスタファイル型のマシンでのみ使われます。
    """
    opcode: int
    mnemonic: str
    has_operand: bool = False
    register: Optional[int] = None
    mode: Optional[int] = None

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:02X}"


# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    cycle_count: int
    access_count: int


# @intent:responsibility ある一時点におけるマシンとバスの状態を不変に記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    1サイクル実行直後の状態を記録した不変のデータ構造。
    stateはサイクル後のコピーであり、以後のマシンの変化の影響を受けません。
    """
    state: MachineState
    operation: Operation
    metadata: Metadata
    bus_activity: List[BusAccess] = field(default_factory=list)
