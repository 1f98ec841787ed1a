"""
共通の例外定義を提供するモジュール。

シミュレーションエンジン自体は失敗しません。例外はファイル入出力（コーデック）と
ドライバ層の入力検証でのみ発生します。
"""
from pathlib import Path
from typing import Union


# @intent:responsibility このパッケージが送出する全ての例外の基底クラスです。
class NiahuError(Exception):
    pass


# @intent:responsibility マジックヘッダの不一致、途中で途切れたストリーム、未知の拡張子を表します。
class InvalidFileError(NiahuError, ValueError):
    """
    無効または破損したマシンファイル。
    """
    def __init__(self, reason: str = "invalid or corrupted file"):
        super().__init__(reason)
        self.reason = reason


# @intent:responsibility 失敗の原因となったパスをエラーに付加します。
class MachineFileError(NiahuError):
    """
    コーデックのエラーを、対象ファイルのパス付きでラップします。
    """
    def __init__(self, path: Union[str, Path], error: Exception):
        super().__init__(f"{path}: {error}")
        self.path = Path(path)
        self.error = error


# @intent:responsibility CLIから与えられたバイト値（10進/16進テキスト）が不正であることを表します。
class InvalidNumberError(NiahuError, ValueError):
    def __init__(self, text: str, hex_mode: bool):
        base = "hexadecimal" if hex_mode else "decimal"
        super().__init__(f"{text!r}: not a {base} byte value (0-255)")
        self.text = text
        self.hex_mode = hex_mode
