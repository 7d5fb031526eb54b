# tests/core/test_state.py
"""
dmg_core.core.stateモジュールの単体テスト。
"""
from dmg_core.core.state import CpuState
from dmg_core.arch.lr35902.state import RegisterFile

# @intent:test_suite 基底状態CpuStateのPC/SPの保持と、RegisterFileへの継承を検証します。

class TestCpuState:

    def test_default_values(self):
        state = CpuState()
        assert state.pc == 0x0000
        assert state.sp == 0x0000

    # @intent:test_case_pc_sp_inheritance PCとSPがRegisterFileに継承され、汎用レジスタと独立していることを検証します。
    def test_register_file_inherits_pc_sp(self):
        rf = RegisterFile(pc=0x1000, sp=0x2000)
        assert isinstance(rf, CpuState)
        rf.set_register_pair(0, 0xFFFF)
        rf.set_register_pair(6, 0xFFFF)
        assert rf.pc == 0x1000
        assert rf.sp == 0x2000
        rf.pc = 0x3000
        rf.sp = 0x4000
        assert rf.get_register_pair(0) == 0xFFFF
        assert rf.pc == 0x3000
        assert rf.sp == 0x4000
