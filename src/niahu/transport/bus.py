# niahu/transport/bus.py
"""
Transport Layer (メモリバス)

このモジュールは、256バイト固定のフラットなアドレス空間を抽象化します。
計上される読み書き（統計に数えられるアクセス）と、プログラムロードや表示用の
計上されないアクセス（load / peek）を明確に分離する責務を負います。
"""
from dataclasses import dataclass
from enum import Enum
from typing import List

MEMORY_SIZE = 0x100
ADDRESS_MASK = 0xFF
COUNTER_MAX = 0xFFFF_FFFF_FFFF_FFFF  # 64bit 統計カウンタの上限


# @intent:responsibility バスアクセスを記録するためのタイプを定義します。
class BusAccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"


# @intent:responsibility 個々のバスアクセス操作を記録します。
@dataclass(frozen=True)
class BusAccess:
    """
    バス上で行われた単一のアクセス（読み込みまたは書き込み）を記録するデータクラス。
    """
    address: int
    data: int
    access_type: BusAccessType


# @intent:responsibility 256バイトのメモリと、そのアクセス統計・アクティビティログを管理します。
# @intent:rationale アクセス回数は計上パス（read/write）でのみ増加し、load/peekは統計を汚しません。
class MemoryBus:
    """
    マシンのメモリを所有するバス。
    計上されるアクセスはカウンタとアクティビティログの両方に記録されます。
    """
    def __init__(self):
        self._memory = bytearray(MEMORY_SIZE)
        self._access_count: int = 0
        self._activity_log: List[BusAccess] = []

    @staticmethod
    def _check_address(address: int) -> None:
        if not 0 <= address <= ADDRESS_MASK:
            raise IndexError(f"Address {address} out of bounds for memory of size {MEMORY_SIZE}.")

    @staticmethod
    def _check_data(data: int) -> None:
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")

    def _count_access(self, address: int, data: int, access_type: BusAccessType) -> None:
        self._access_count = min(self._access_count + 1, COUNTER_MAX)
        self._activity_log.append(BusAccess(address=address, data=data, access_type=access_type))

    # @intent:responsibility 指定アドレスから1バイトを読み出し、アクセスを1回計上します。
    def read(self, address: int) -> int:
        self._check_address(address)
        data = self._memory[address]
        self._count_access(address, data, BusAccessType.READ)
        return data

    # @intent:responsibility 指定アドレスに1バイトを書き込み、アクセスを1回計上します。
    def write(self, address: int, data: int) -> None:
        self._check_address(address)
        self._check_data(data)
        self._memory[address] = data
        self._count_access(address, data, BusAccessType.WRITE)

    # @intent:responsibility ログも統計も残さずに読み出します。表示系（インスペクタ）用です。
    def peek(self, address: int) -> int:
        self._check_address(address)
        return self._memory[address]

    # @intent:responsibility プログラムロード用のバックドア書き込みです。統計には計上されません。
    def load(self, address: int, data: int) -> None:
        self._check_address(address)
        self._check_data(data)
        self._memory[address] = data

    # @intent:responsibility メモリ全体の不変コピーを返します。
    def dump(self) -> bytes:
        return bytes(self._memory)

    # @intent:responsibility メモリ全体を置き換えます（スナップショット復元用）。
    # @intent:pre-condition `data`はちょうどMEMORY_SIZEバイトである必要があります。
    def restore(self, data: bytes) -> None:
        if len(data) != MEMORY_SIZE:
            raise ValueError(f"Memory image must be {MEMORY_SIZE} bytes, got {len(data)}.")
        self._memory[:] = data

    @property
    def access_count(self) -> int:
        return self._access_count

    @access_count.setter
    def access_count(self, value: int) -> None:
        if not 0 <= value <= COUNTER_MAX:
            raise ValueError(f"Access count {value} does not fit in 64 bits.")
        self._access_count = value

    # @intent:responsibility 記録されたバスアクティビティログを取得し、クリアします。
    def get_and_clear_activity_log(self) -> List[BusAccess]:
        log = self._activity_log
        self._activity_log = []
        return log
