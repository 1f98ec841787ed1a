import logging

from niahu.core.cpu import AbstractMachine
from niahu.arch.neander.cpu import NeanderMachine
from .models import MachineConfig, CpuInitialState

logger = logging.getLogger(__name__)

ARCHITECTURES = ("neander", "ahmes", "ramses")


# @intent:responsibility アーキテクチャ名から、ゼロ初期化されたマシンを生成します。
def create_machine(architecture: str) -> AbstractMachine:
    arch = architecture.lower()
    if arch == "neander":
        return NeanderMachine()
    elif arch == "ahmes":
        from niahu.arch.ahmes.cpu import AhmesMachine
        return AhmesMachine()
    elif arch == "ramses":
        from niahu.arch.ramses.cpu import RamsesMachine
        return RamsesMachine()
    else:
        raise ValueError(f"Unsupported architecture: {architecture}")


# @intent:responsibility マシン構成（Config）に基づいてマシンを生成し、メモリと初期状態を適用します。
class MachineBuilder:
    def build_machine(self, config: MachineConfig) -> AbstractMachine:
        machine = create_machine(config.architecture)

        for patch in config.memory:
            for offset, value in enumerate(patch.data):
                machine.write_raw(patch.address + offset, value)

        # 初期状態の適用
        self.apply_initial_state(machine, config.initial_state)

        logger.debug("built %s machine: pc=%02X, %d memory patches",
                     machine.ARCHITECTURE, config.initial_state.pc, len(config.memory))
        return machine

    # @intent:responsibility Configで定義された初期状態をマシンに適用します。
    # @intent:rationale PCはset_program_counterで設定するため、統計カウンタもゼロから始まります。
    def apply_initial_state(self, machine: AbstractMachine, config_state: CpuInitialState):
        state = machine.get_state()
        for reg_name, value in config_state.registers.items():
            if reg_name not in state.REGISTER_FIELDS:
                raise ValueError(f"Unknown register for {machine.ARCHITECTURE}: {reg_name}")
            setattr(state, reg_name, value)

        machine.set_program_counter(config_state.pc)
