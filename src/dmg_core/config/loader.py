import yaml
from typing import Dict, Any, Optional
from .models import SystemConfig, CpuInitialState

class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> SystemConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> SystemConfig:
        arch = data.get("architecture", "LR35902")

        # Parse Initial State
        initial_state_data = data.get("initial_state") or {}
        registers = {
            str(name).lower(): self._parse_int(value)
            for name, value in (initial_state_data.get("registers") or {}).items()
        }
        initial_state = CpuInitialState(
            pc=self._parse_optional_int(initial_state_data.get("pc")),
            sp=self._parse_optional_int(initial_state_data.get("sp")),
            preset=initial_state_data.get("preset"),
            registers=registers
        )

        return SystemConfig(
            architecture=str(arch),
            initial_state=initial_state
        )

    def _parse_optional_int(self, value: Any) -> Optional[int]:
        if value is None:
            return None
        return self._parse_int(value)

    def _parse_int(self, value: Any) -> int:
        # YAMLではtrue/falseもintのサブクラスとして読まれるため除外する
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                if text.lower().startswith("0x"):
                    return int(text, 16)
                return int(text)
            except ValueError:
                pass
        raise ValueError(f"Invalid integer format: {value}")
