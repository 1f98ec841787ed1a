# niahu/codec/machine_file.py
"""
マシンファイル（.mem / .state）の読み書きモジュール。

メモリイメージ:  <マジック4バイト><256 x (値, 0x00)>
状態スナップショット: <マジック4バイト><IR><PC><レジスタ...><フラグ...><running>
                     <サイクル数 u64le><アクセス数 u64le><256 x (値, 0x00)>

マジックの先頭バイトはメモリイメージが0x03、スナップショットが0x04で、
続く3バイトがアーキテクチャを識別します。
"""
import logging
import struct
from pathlib import Path
from typing import BinaryIO, List, Union

from niahu.common.errors import InvalidFileError, MachineFileError
from niahu.core.cpu import AbstractMachine
from niahu.core.state import MachineState
from niahu.transport.bus import MEMORY_SIZE

logger = logging.getLogger(__name__)

MEMORY_EXTENSION = ".mem"
STATE_EXTENSION = ".state"

_COUNTERS = struct.Struct("<QQ")
_CELL_FILLER = 0x00

PathLike = Union[str, Path]


# @intent:utility_function ストリームからちょうど`size`バイトを読み出します。不足すれば破損ファイルとして扱います。
def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        raise InvalidFileError("unexpected end of file")
    return data


def _check_magic(stream: BinaryIO, expected: bytes) -> None:
    if _read_exact(stream, len(expected)) != expected:
        raise InvalidFileError("invalid or corrupted file")


def _encode_memory(image: bytes) -> bytes:
    cells = bytearray()
    for value in image:
        cells.append(value)
        cells.append(_CELL_FILLER)
    return bytes(cells)


# @intent:utility_function 2バイトセル256個を読み出し、値バイトだけを取り出します。埋め草バイトは読み捨てます。
def _decode_memory(stream: BinaryIO) -> bytes:
    cells = _read_exact(stream, MEMORY_SIZE * 2)
    return cells[0::2]


# --- メモリイメージ ---

# @intent:responsibility マシンのメモリをメモリイメージ形式で書き出します。
def save_memory(machine: AbstractMachine, stream: BinaryIO) -> None:
    stream.write(machine.MEMORY_MAGIC)
    stream.write(_encode_memory(machine.memory_image()))


# @intent:responsibility メモリイメージを読み込み、マシンのメモリだけを置き換えます。
# @intent:rationale 全体を読み終えて検証してからメモリを置き換えるため、失敗時にマシンは変化しません。
def load_memory(machine: AbstractMachine, stream: BinaryIO) -> None:
    _check_magic(stream, machine.MEMORY_MAGIC)
    image = _decode_memory(stream)
    machine.get_bus().restore(image)


# --- 状態スナップショット ---

# @intent:responsibility マシンの全状態（レジスタ、フラグ、統計、メモリ）をスナップショット形式で書き出します。
def save_state(machine: AbstractMachine, stream: BinaryIO) -> None:
    state = machine.get_state()
    header: List[int] = [state.ir, state.pc]
    header.extend(getattr(state, name) for name in state.REGISTER_FIELDS)
    header.extend(1 if getattr(state, name) else 0 for name in state.FLAG_FIELDS)
    header.append(1 if state.running else 0)

    stream.write(machine.STATE_MAGIC)
    stream.write(bytes(header))
    stream.write(_COUNTERS.pack(state.cycle_count, machine.access_count))
    stream.write(_encode_memory(machine.memory_image()))


# @intent:responsibility スナップショットを読み込み、マシンの全フィールドを置き換えます。
def load_state(machine: AbstractMachine, stream: BinaryIO) -> None:
    _check_magic(stream, machine.STATE_MAGIC)
    state: MachineState = machine.create_state()

    fields = ("ir", "pc") + state.REGISTER_FIELDS
    for name, value in zip(fields, _read_exact(stream, len(fields))):
        setattr(state, name, value)
    flags = _read_exact(stream, len(state.FLAG_FIELDS) + 1)
    for name, value in zip(state.FLAG_FIELDS, flags):
        setattr(state, name, value != 0)
    state.running = flags[-1] != 0

    cycle_count, access_count = _COUNTERS.unpack(_read_exact(stream, _COUNTERS.size))
    state.cycle_count = cycle_count
    image = _decode_memory(stream)

    machine.restore_state(state, access_count, image)


# --- パス単位の入出力 ---

def is_memory_file(path: PathLike) -> bool:
    return Path(path).suffix == MEMORY_EXTENSION


def is_state_file(path: PathLike) -> bool:
    return Path(path).suffix == STATE_EXTENSION


# @intent:utility_function 拡張子からファイル種別を判定します。未知の拡張子はファイルを開く前にエラーとします。
def _dispatch(path: PathLike, on_memory, on_state):
    if is_memory_file(path):
        return on_memory
    if is_state_file(path):
        return on_state
    raise MachineFileError(path, InvalidFileError("unknown file extension"))


# @intent:responsibility 拡張子（.mem / .state）に応じた形式でマシンをファイルに保存します。
# @intent:rationale OSErrorはファイル名を含んでいるためそのまま伝播し、コーデックのエラーにはパスを付加します。
def save_to_path(machine: AbstractMachine, path: PathLike) -> None:
    writer = _dispatch(path, save_memory, save_state)
    with open(path, "wb") as f:
        writer(machine, f)
    logger.debug("saved %s machine to %s", machine.ARCHITECTURE, path)


# @intent:responsibility 拡張子（.mem / .state）に応じた形式でファイルからマシンを読み込みます。
def load_from_path(machine: AbstractMachine, path: PathLike) -> None:
    reader = _dispatch(path, load_memory, load_state)
    with open(path, "rb") as f:
        try:
            reader(machine, f)
        except InvalidFileError as e:
            raise MachineFileError(path, e) from e
    logger.debug("loaded %s machine from %s", machine.ARCHITECTURE, path)
