# niahu/cli/main.py
"""
コマンドラインドライバ。

マシンファイル（.mem / .state）を読み込み、1つの操作を行って書き戻します。
"""
import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from niahu.common.errors import InvalidNumberError, NiahuError
from niahu.core.cpu import AbstractMachine
from niahu.codec.machine_file import load_from_path, save_to_path
from niahu.config.builder import ARCHITECTURES, MachineBuilder, create_machine
from niahu.config.loader import ConfigLoader
from niahu.display.code_view import format_code
from niahu.display.data_view import format_data
from niahu.display.register_view import format_registers, format_stats


DATA_RANGE = (128, 255)
CODE_RANGE = (0, 127)

_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


# @intent:utility_function CLIから与えられた10進/16進テキストを1バイトの値に変換します。
# @intent:pre-condition 数字のみを受け付けます。符号、"0x"接頭辞、区切り文字、空白は不正です。
def parse_byte(text: str, hex_mode: bool = False) -> int:
    digits = _HEX_DIGITS if hex_mode else _DECIMAL_DIGITS
    if not digits.fullmatch(text):
        raise InvalidNumberError(text, hex_mode)
    value = int(text, 16 if hex_mode else 10)
    if not 0 <= value <= 0xFF:
        raise InvalidNumberError(text, hex_mode)
    return value


def _load(args: argparse.Namespace) -> AbstractMachine:
    machine = create_machine(args.arch)
    load_from_path(machine, args.input)
    return machine


def _output_path(args: argparse.Namespace) -> Path:
    return args.output if args.output is not None else args.input


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


# --- サブコマンド ---

def cmd_new(args: argparse.Namespace) -> None:
    save_to_path(create_machine(args.arch), args.output)


def cmd_write(args: argparse.Namespace) -> None:
    address = parse_byte(args.address, args.hex)
    data = parse_byte(args.data, args.hex)
    machine = _load(args)
    machine.write_raw(address, data)
    save_to_path(machine, _output_path(args))


def cmd_setpc(args: argparse.Namespace) -> None:
    address = parse_byte(args.data, args.hex)
    machine = _load(args)
    machine.set_program_counter(address)
    save_to_path(machine, _output_path(args))


def cmd_run(args: argparse.Namespace) -> None:
    machine = _load(args)
    machine.execute()
    save_to_path(machine, _output_path(args))


# @intent:responsibility 最大N命令を1つずつ実行します。HLTを実行した時点で止まります。N=0なら何も実行せずに保存します。
def cmd_step(args: argparse.Namespace) -> None:
    if args.count < 0:
        raise InvalidNumberError(str(args.count), False)
    machine = _load(args)
    for _ in range(args.count):
        snapshot = machine.step()
        if args.trace:
            op = snapshot.operation
            print(f"{op.opcode_hex}  {op.mnemonic:<7} pc={snapshot.state.pc:02X} "
                  f"cycles={snapshot.metadata.cycle_count} accesses={snapshot.metadata.access_count}")
        if snapshot.operation.mnemonic == "HLT":
            break
    save_to_path(machine, _output_path(args))


def _range(args: argparse.Namespace, default) -> tuple:
    start = parse_byte(args.start, args.hex) if args.start is not None else default[0]
    end = parse_byte(args.end, args.hex) if args.end is not None else default[1]
    return start, end


def cmd_data(args: argparse.Namespace) -> None:
    machine = _load(args)
    _print_lines(format_data(machine, *_range(args, DATA_RANGE), hex_mode=args.hex))


def cmd_code(args: argparse.Namespace) -> None:
    machine = _load(args)
    _print_lines(format_code(machine, *_range(args, CODE_RANGE), hex_mode=args.hex))


def cmd_registers(args: argparse.Namespace) -> None:
    _print_lines(format_registers(_load(args), hex_mode=args.hex))


def cmd_stats(args: argparse.Namespace) -> None:
    _print_lines(format_stats(_load(args)))


# @intent:responsibility YAMLのマシン構成からマシンを構築して保存します。アーキテクチャは構成ファイルが決めます。
def cmd_build(args: argparse.Namespace) -> None:
    config = ConfigLoader().load_from_file(args.config)
    machine = MachineBuilder().build_machine(config)
    save_to_path(machine, args.output)


# --- 引数解析 ---

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="niahu", description="Didactic 8-bit machine simulator")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    ap.add_argument("--arch", choices=ARCHITECTURES, default="neander", help="machine architecture")
    sub = ap.add_subparsers(dest="command", required=True)

    def with_input(p: argparse.ArgumentParser) -> None:
        p.add_argument("-i", "--input", type=Path, required=True, help=".mem or .state file to load")

    def with_output(p: argparse.ArgumentParser, required: bool = False) -> None:
        p.add_argument("-o", "--output", type=Path, required=required,
                       help="file to save (defaults to the input file)")

    def with_hex(p: argparse.ArgumentParser) -> None:
        p.add_argument("-x", "--hex", action="store_true", help="numbers are hexadecimal")

    p = sub.add_parser("new", help="create a zeroed machine file")
    with_output(p, required=True)
    p.set_defaults(func=cmd_new)

    p = sub.add_parser("write", help="write a byte into memory")
    with_input(p)
    with_output(p)
    with_hex(p)
    p.add_argument("-a", "--address", required=True)
    p.add_argument("-d", "--data", required=True)
    p.set_defaults(func=cmd_write)

    p = sub.add_parser("setpc", help="set the program counter and reset statistics")
    with_input(p)
    with_output(p)
    with_hex(p)
    p.add_argument("-d", "--data", required=True)
    p.set_defaults(func=cmd_setpc)

    p = sub.add_parser("run", help="run until HLT")
    with_input(p)
    with_output(p)
    p.set_defaults(func=cmd_run)

    p = sub.add_parser("step", help="execute instructions one at a time")
    with_input(p)
    with_output(p)
    p.add_argument("-n", "--count", type=int, default=1, help="maximum number of instructions")
    p.add_argument("--trace", action="store_true", help="print each executed instruction")
    p.set_defaults(func=cmd_step)

    for name, func, default in (("data", cmd_data, DATA_RANGE), ("code", cmd_code, CODE_RANGE)):
        p = sub.add_parser(name, help=f"display memory (default {default[0]}..{default[1]})")
        with_input(p)
        with_hex(p)
        p.add_argument("-s", "--start")
        p.add_argument("-e", "--end")
        p.set_defaults(func=func)

    p = sub.add_parser("registers", help="display registers and flags")
    with_input(p)
    with_hex(p)
    p.set_defaults(func=cmd_registers)

    p = sub.add_parser("stats", help="display cycle and access counts")
    with_input(p)
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("build", help="build a machine file from a YAML configuration")
    p.add_argument("-c", "--config", type=Path, required=True)
    with_output(p, required=True)
    p.set_defaults(func=cmd_build)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        args.func(args)
    except (NiahuError, OSError, ValueError) as e:
        print(f"niahu: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
