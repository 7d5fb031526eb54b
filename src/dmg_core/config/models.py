from dataclasses import dataclass, field
from typing import Dict, Optional

@dataclass
class CpuInitialState:
    pc: Optional[int] = None
    sp: Optional[int] = None
    preset: Optional[str] = None  # "zero", "dmg"
    registers: Dict[str, int] = field(default_factory=dict)  # "a", "hl", ... -> value

@dataclass
class SystemConfig:
    architecture: str = "LR35902"
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
