import yaml
from typing import Dict, Any
from .models import MachineConfig, MemoryPatch, CpuInitialState


class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            return self.load_from_string(f.read())

    def load_from_string(self, text: str) -> MachineConfig:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed configuration: {e}") from e
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Invalid configuration document: {data!r}")

        arch = str(data.get("architecture", "neander")).lower()

        # Parse Memory
        memory = []
        for patch_data in self._section(data, "memory", list):
            if not isinstance(patch_data, dict):
                raise ValueError(f"Invalid memory patch: {patch_data!r}")
            address = self._parse_byte(patch_data.get("address"))
            values = [self._parse_byte(v) for v in self._section(patch_data, "data", list)]
            if address + len(values) > 0x100:
                raise ValueError(f"Memory patch at {address:02X} overruns the 256-byte address space")
            memory.append(MemoryPatch(address=address, data=values))

        # Parse Initial State
        initial_state_data = self._section(data, "initial_state", dict)
        registers = {
            str(name).lower(): self._parse_byte(value)
            for name, value in self._section(initial_state_data, "registers", dict).items()
        }
        initial_state = CpuInitialState(
            pc=self._parse_byte(initial_state_data.get("pc", 0)),
            registers=registers
        )

        return MachineConfig(
            architecture=arch,
            initial_state=initial_state,
            memory=memory
        )

    # @intent:utility_function 省略またはnullのセクションを空として扱い、型が異なればValueErrorとします。
    def _section(self, data: Dict[str, Any], key: str, kind: type) -> Any:
        value = data.get(key)
        if value is None:
            return kind()
        if not isinstance(value, kind):
            raise ValueError(f"Invalid '{key}' section: expected a {kind.__name__}, got {value!r}")
        return value

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")

    def _parse_byte(self, value: Any) -> int:
        number = self._parse_int(value)
        if not 0 <= number <= 0xFF:
            raise ValueError(f"Value out of byte range: {value}")
        return number
