# niahu/core/isa.py
"""
命令テーブル

オペコードのビットパターンからニーモニックと「オペランド/レジスタが必要か」という
形状情報への静的な対応表です。デコーダと逆アセンブラの両方がこの表を参照します。
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from niahu.core.snapshot import Operation

OPCODE_SPACE = 0x100


# @intent:data_structure 1つの命令の形状（ニーモニック、オペランドバイトの有無、レジスタ選択の有無）。
@dataclass(frozen=True)
class InstrInfo:
    mnemonic: str
    operand: bool = False
    register: bool = False


# @intent:data_structure `opcode & mask == value` で一致するオペコードの集合。
@dataclass(frozen=True)
class OpcodePattern:
    mask: int
    value: int
    info: InstrInfo

    def matches(self, opcode: int) -> bool:
        return (opcode & self.mask) == self.value


# @intent:responsibility オペコードパターンの宣言順リストから、256通り全てのオペコードの対応を引けるようにします。
# @intent:rationale 複数のパターンに一致する場合は先に宣言されたものが優先されます。
class InstructionTable:
    """
    アーキテクチャごとの命令テーブル。
    どのパターンにも一致しないオペコードはNoneとなり、実行時にはNOPとして扱われます。
    """
    def __init__(self, patterns: Sequence[OpcodePattern]):
        self._patterns = tuple(patterns)
        self._entries: List[Optional[InstrInfo]] = [
            self._match(opcode) for opcode in range(OPCODE_SPACE)
        ]

    def _match(self, opcode: int) -> Optional[InstrInfo]:
        for pattern in self._patterns:
            if pattern.matches(opcode):
                return pattern.info
        return None

    # @intent:responsibility オペコードに対応する命令情報を返します。未定義ならNone。
    def lookup(self, opcode: int) -> Optional[InstrInfo]:
        return self._entries[opcode & 0xFF]

    # @intent:responsibility 逆アセンブル表示用のテキストを返します。
    def describe(self, opcode: int) -> Optional[str]:
        info = self.lookup(opcode)
        return info.mnemonic if info else None

    # @intent:responsibility オペコードをOperationに変換します。未定義オペコードは"UNKNOWN"になります。
    def decode(self, opcode: int) -> Operation:
        info = self.lookup(opcode)
        if info is None:
            return Operation(opcode=opcode, mnemonic="UNKNOWN")
        return Operation(opcode=opcode, mnemonic=info.mnemonic, has_operand=info.operand)
