# tests/config/test_config.py
"""
YAML構成ファイルの読み込みとマシン構築のテスト。
"""
import textwrap

import pytest

from niahu.config.builder import MachineBuilder, create_machine
from niahu.config.loader import ConfigLoader
from niahu.config.models import MachineConfig, CpuInitialState, MemoryPatch
from niahu.arch.neander import NeanderMachine
from niahu.arch.ahmes import AhmesMachine
from niahu.arch.ramses import RamsesMachine

STRING_LENGTH = textwrap.dedent("""
    architecture: ramses
    initial_state:
      pc: 0x01
    memory:
      - address: 0x00
        data: [0x00, 0x22, 0x00, 0x28, 0x80, 0x27, 0x00, 0xA0, 0x0F,
               0x3A, 0x01, 0x32, 0x01, 0x80, 0x05, 0x10, 0x81, 0xF0]
      - address: 0x80
        data: [0xA0]
      - address: "0xA0"
        data: [100, 99, 98, 97, 0]
""")


# @intent:test_suite 構成ファイルからマシンを構築し、そのまま実行できることを検証します。
class TestConfigLoader:
    def test_parse_full_document(self):
        config = ConfigLoader().load_from_string(STRING_LENGTH)
        assert config.architecture == "ramses"
        assert config.initial_state.pc == 0x01
        assert config.memory[1] == MemoryPatch(address=0x80, data=[0xA0])
        assert config.memory[2].address == 0xA0

    def test_defaults(self):
        config = ConfigLoader().load_from_string("architecture: ahmes")
        assert config == MachineConfig(architecture="ahmes")

    def test_string_integers(self):
        config = ConfigLoader().load_from_string(textwrap.dedent("""
            architecture: neander
            initial_state:
              pc: "16"
              registers: {AC: "0xff"}
        """))
        assert config.initial_state == CpuInitialState(pc=16, registers={"ac": 0xFF})

    @pytest.mark.parametrize("document", [
        "initial_state: {pc: 256}",
        "initial_state: {pc: -1}",
        "initial_state: {pc: zero}",
        "memory: [{address: 0xFE, data: [1, 2, 3]}]",
        "memory: [{address: 0x10, data: [0x100]}]",
        "memory: [5]",
        "[1, 2]",
        "architecture: [unterminated",
        "memory: 5",
        "memory: [{address: 0x10, data: 5}]",
        "memory: [{address: 0x10, data: {a: 1}}]",
        "initial_state: [1]",
        "initial_state: {registers: [1, 2]}",
        "initial_state: {pc: null}",
    ])
    def test_invalid_documents(self, document):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_string(document)

    def test_null_sections_are_empty(self):
        config = ConfigLoader().load_from_string(textwrap.dedent("""
            architecture: neander
            initial_state:
            memory:
        """))
        assert config == MachineConfig(architecture="neander")

    def test_null_patch_data_is_empty(self):
        config = ConfigLoader().load_from_string("memory: [{address: 0x10, data: }]")
        assert config.memory == [MemoryPatch(address=0x10, data=[])]

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text(STRING_LENGTH)
        assert ConfigLoader().load_from_file(str(path)).architecture == "ramses"


class TestMachineBuilder:
    @pytest.mark.parametrize("name, machine_class", [
        ("neander", NeanderMachine), ("Ahmes", AhmesMachine), ("RAMSES", RamsesMachine),
    ])
    def test_create_machine(self, name, machine_class):
        assert type(create_machine(name)) is machine_class

    def test_unknown_architecture(self):
        with pytest.raises(ValueError):
            create_machine("z80")

    # @intent:test_case_build_and_run 構成から構築したマシンはメモリアクセス0回の状態から実行を始めます。
    def test_build_and_run(self):
        config = ConfigLoader().load_from_string(STRING_LENGTH)
        machine = MachineBuilder().build_machine(config)
        assert machine.get_state().pc == 0x01
        assert machine.access_count == 0
        assert machine.cycle_count == 0

        machine.execute()
        assert machine.peek(0x81) == 4

    def test_initial_registers(self):
        config = MachineConfig(
            architecture="ramses",
            initial_state=CpuInitialState(pc=0x10, registers={"x": 0x80, "b": 2}),
        )
        machine = MachineBuilder().build_machine(config)
        state = machine.get_state()
        assert (state.a, state.b, state.x, state.pc) == (0, 2, 0x80, 0x10)

    def test_unknown_register(self):
        config = MachineConfig(
            architecture="neander",
            initial_state=CpuInitialState(registers={"x": 1}),
        )
        with pytest.raises(ValueError):
            MachineBuilder().build_machine(config)
