import logging

from dmg_core.arch.lr35902.presets import get_preset
from dmg_core.arch.lr35902.registers import Reg, RegPair
from dmg_core.arch.lr35902.state import RegisterFile
from dmg_core.common.types import WORD_MASK
from .models import SystemConfig, CpuInitialState

logger = logging.getLogger(__name__)

SUPPORTED_ARCHITECTURES = ("LR35902", "DMG", "GB")

_SLOTS = {slot.name.lower(): slot for slot in Reg}
_PAIRS = {pair.name.lower(): pair for pair in RegPair}

# @intent:responsibility システム構成（Config）に基づいて、RegisterFileを生成し初期状態を適用します。
class RegisterFileBuilder:
    def build(self, config: SystemConfig) -> RegisterFile:
        if config.architecture.upper() not in SUPPORTED_ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: {config.architecture}")

        register_file = RegisterFile()
        self.apply_initial_state(register_file, config.initial_state)
        logger.info(
            "Built %s register file (PC=%#06x, SP=%#06x)",
            config.architecture, register_file.pc, register_file.sp,
        )
        return register_file

    # @intent:responsibility Configで定義された初期状態をRegisterFileに適用します。
    # @intent:rationale 適用順は プリセット -> PC/SP -> 個別レジスタ とし、後から指定された値が優先されるようにします。
    def apply_initial_state(self, register_file: RegisterFile, config_state: CpuInitialState) -> None:
        """
        レジスタファイルをゼロクリアし、Configから指定された初期値を適用します。
        """
        self._apply_values(register_file, get_preset("zero"))

        if config_state.preset:
            logger.debug("Applying register preset '%s'", config_state.preset)
            self._apply_values(register_file, get_preset(config_state.preset))

        # PC/SP設定
        if config_state.pc is not None:
            register_file.pc = config_state.pc & WORD_MASK
        if config_state.sp is not None:
            register_file.sp = config_state.sp & WORD_MASK

        # その他のレジスタ
        self._apply_values(register_file, config_state.registers)

    def _apply_values(self, register_file: RegisterFile, values) -> None:
        for reg_name, value in values.items():
            name = reg_name.lower()
            if name in _SLOTS:
                register_file.set_register(_SLOTS[name], value)
            elif name in _PAIRS:
                register_file.set_register_pair(_PAIRS[name], value)
            elif name in ("pc", "sp"):
                setattr(register_file, name, value & WORD_MASK)
            else:
                logger.warning("Unknown register '%s' in initial state, skipping", reg_name)
                continue
            logger.debug("Initial %s = %#x", name.upper(), value)
