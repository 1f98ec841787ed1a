# niahu/core/cpu.py
"""
Core Layer (抽象マシン)

このモジュールは、マシンの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layer（各アーキテクチャのinstructionsパッケージ）に移譲されます。
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import ClassVar, Dict, List

from niahu.transport.bus import MemoryBus, ADDRESS_MASK, COUNTER_MAX
from niahu.core.isa import InstructionTable
from niahu.core.snapshot import Snapshot, Operation, Metadata
from niahu.core.state import MachineState

logger = logging.getLogger(__name__)

# 非同期ドライバ向けの1ラウンドあたりのサイクル数
CYCLES_PER_ROUND = 100


# @intent:utility_function PCの位置から1バイトを計上パスで読み、命令レジスタに格納してPCを進めます。
# @intent:rationale オペコードとオペランドのどちらの読み出しもこの関数を通るため、
#                  命令レジスタには常に最後に読んだバイトが残ります。
def fetch(state: MachineState, bus: MemoryBus) -> int:
    state.ir = bus.read(state.pc)
    state.pc = (state.pc + 1) & ADDRESS_MASK
    return state.ir


# @intent:responsibility 抽象マシンの基本機能とインターフェースを定義します。
class AbstractMachine(ABC):
    """
    全てのマシンエミュレーションの基底となる抽象クラス。
    メモリバスの所有、統計カウンタ、フェッチ・デコード・実行サイクルを提供します。
    """
    ARCHITECTURE: ClassVar[str] = ""
    MEMORY_MAGIC: ClassVar[bytes] = b""
    STATE_MAGIC: ClassVar[bytes] = b""

    def __init__(self):
        self._bus = MemoryBus()
        self._state: MachineState = self._create_initial_state()

    # @intent:responsibility 初期状態のMachineStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> MachineState:
        pass

    # @intent:responsibility このアーキテクチャの命令テーブルを返します。
    @property
    @abstractmethod
    def instruction_table(self) -> InstructionTable:
        pass

    # @intent:responsibility フェッチしたオペコードを解析し、Operationオブジェクトに変換します。
    @abstractmethod
    def _decode(self, opcode: int) -> Operation:
        pass

    # @intent:responsibility デコードされた命令を実行し、状態を更新します。
    # @intent:rationale オペランドを持つ命令は、実行中に自分でオペランドをフェッチします。
    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        表示用のレジスタ値を宣言順の辞書で返します（pcを含む）。
        """
        pass

    @abstractmethod
    def get_flag_state(self) -> Dict[str, bool]:
        """
        表示用のフラグ状態を宣言順の辞書で返します。
        """
        pass

    # --- 状態へのアクセス ---

    def create_state(self) -> MachineState:
        """
        このマシンの型に合った、ゼロ初期化された状態オブジェクトを返します。
        """
        return self._create_initial_state()

    def get_state(self) -> MachineState:
        return self._state

    def get_bus(self) -> MemoryBus:
        return self._bus

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def cycle_count(self) -> int:
        return self._state.cycle_count

    @property
    def access_count(self) -> int:
        return self._bus.access_count

    # @intent:responsibility マシン全体をゼロ初期化された状態に戻します。
    def reset(self) -> None:
        self._bus = MemoryBus()
        self._state = self._create_initial_state()

    # --- メモリ ---

    def read(self, address: int) -> int:
        return self._bus.read(address)

    def write(self, address: int, data: int) -> None:
        self._bus.write(address, data)

    # @intent:responsibility プログラムのロードやパッチ用の書き込みです。アクセス回数は変化しません。
    def write_raw(self, address: int, data: int) -> None:
        self._bus.load(address, data)

    def peek(self, address: int) -> int:
        return self._bus.peek(address)

    def memory_image(self) -> bytes:
        return self._bus.dump()

    # @intent:responsibility PCを設定し、両方の統計カウンタをゼロに戻します（新しい実行の開始）。
    def set_program_counter(self, address: int) -> None:
        if not 0 <= address <= ADDRESS_MASK:
            raise IndexError(f"Address {address} out of bounds for memory of size {ADDRESS_MASK + 1}.")
        self._state.pc = address
        self._state.cycle_count = 0
        self._bus.access_count = 0

    # @intent:responsibility 状態・アクセス回数・メモリを丸ごと置き換えます（スナップショット復元用）。
    def restore_state(self, state: MachineState, access_count: int, memory: bytes) -> None:
        if type(state) is not type(self._state):
            raise TypeError(f"{type(self).__name__} cannot restore a {type(state).__name__}.")
        self._bus.restore(memory)
        self._bus.access_count = access_count
        self._state = state

    # --- 命令サイクル ---

    def fetch(self) -> int:
        return fetch(self._state, self._bus)

    # @intent:responsibility 1回のフェッチ・デコード・実行サイクルを行います。
    # @intent:rationale サイクル数は、そのサイクル中のオペランドフェッチやメモリアクセスの回数に関係なく1だけ増えます。
    def cycle(self) -> Operation:
        """
        サイクル数を1増やし、オペコードを1つフェッチしてデコード・実行します。
        未定義のオペコードはNOPとして扱われ、エラーにはなりません。
        """
        self._bus.get_and_clear_activity_log()
        self._state.cycle_count = min(self._state.cycle_count + 1, COUNTER_MAX)
        opcode = self.fetch()
        operation = self._decode(opcode)
        self._execute(operation)
        return operation

    # @intent:responsibility 1サイクルを実行し、その結果のスナップショットを返します。
    def step(self) -> Snapshot:
        operation = self.cycle()
        return Snapshot(
            state=replace(self._state),
            operation=operation,
            metadata=Metadata(cycle_count=self.cycle_count, access_count=self.access_count),
            bus_activity=self._bus.get_and_clear_activity_log(),
        )

    # @intent:responsibility HLTに到達するまでサイクルを繰り返します。
    # @intent:pre-condition プログラムが停止することは呼び出し元が保証します。無限ループは永久にブロックします。
    def execute(self) -> None:
        self._state.running = True
        while self._state.running:
            self.cycle()
        logger.debug("%s halted at pc=%02X after %d cycles, %d accesses",
                     self.ARCHITECTURE, self._state.pc, self.cycle_count, self.access_count)

    # @intent:responsibility 最大`max_cycles`サイクルだけ実行し、HLTに到達したかどうかを返します。
    def run_steps(self, max_cycles: int = CYCLES_PER_ROUND) -> bool:
        """
        協調的スケジューリングを行うドライバ向けの有限ステップ実行です。
        """
        self._state.running = True
        for _ in range(max_cycles):
            self.cycle()
            if not self._state.running:
                break
        return not self._state.running

    # --- 表示 ---

    # @intent:responsibility 指定範囲のメモリを逆アセンブルしたテキスト行を返します。
    def disassemble(self, start_addr: int, end_addr: int, hex_mode: bool = True) -> List[str]:
        from niahu.display.code_view import format_code
        return format_code(self, start_addr, end_addr, hex_mode)
