# tests/arch/lr35902/test_state.py
"""
dmg_core.arch.lr35902.stateモジュールの単体テスト。
RegisterFileのレジスタ、レジスタペア、フラグの動作を検証します。
"""
import pytest
from dmg_core.arch.lr35902.registers import (
    A, F, B, C, D, E, H, L, CARRY, H_CARRY, SUBTRACT, ZERO, Flag, Reg, RegPair,
)
from dmg_core.arch.lr35902.state import RegisterFile

# @intent:test_suite RegisterFileの読み書き、ペア合成、フラグ操作の正しい動作を検証します。

PAIR_STARTS = [A, B, D, H]
PAIR_VALUES = [0x0000, 0x0001, 0x00FF, 0x0100, 0x7FFF, 0x8000, 0x80FF, 0xBEEF, 0xFFFF]


@pytest.fixture
def rf():
    return RegisterFile()


class TestRegisterFileInit:

    # @intent:test_case_init デフォルト値で全てのレジスタが0に初期化されることを検証します。
    def test_init_default_values(self, rf):
        assert rf.pc == 0x0000
        assert rf.sp == 0x0000
        for slot in Reg:
            assert rf.get_register(slot) == 0x00

    def test_pc_sp_keywords(self):
        rf = RegisterFile(pc=0x0100, sp=0xFFFE)
        assert rf.pc == 0x0100
        assert rf.sp == 0xFFFE

    # @intent:test_case_independent_storage インスタンスごとに独立したレジスタ配列を持つことを検証します。
    def test_instances_do_not_share_storage(self):
        first = RegisterFile()
        second = RegisterFile()
        first.set_register(A, 0x42)
        assert second.get_register(A) == 0x00


class TestSingleRegisters:

    # @intent:test_case_byte_round_trip 全スロット・全バイト値で書き込んだ値がそのまま読めることを検証します。
    @pytest.mark.parametrize("slot", list(Reg))
    def test_round_trip_all_bytes(self, rf, slot):
        for value in range(0x100):
            rf.set_register(slot, value)
            assert rf.get_register(slot) == value

    def test_accepts_plain_int_index(self, rf):
        rf.set_register(7, 0x5A)
        assert rf.get_register(L) == 0x5A

    # @intent:test_case_wraparound 8bitを超える値は下位8ビットに切り詰められることを検証します。
    def test_value_is_truncated_to_byte(self, rf):
        rf.set_register(B, 0x1FF)
        assert rf.get_register(B) == 0xFF
        rf.set_register(C, -1)
        assert rf.get_register(C) == 0xFF

    def test_write_touches_only_target_slot(self, rf):
        rf.set_register(E, 0xAB)
        assert [rf.get_register(slot) for slot in Reg] == [0, 0, 0, 0, 0, 0xAB, 0, 0]

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_out_of_range_index(self, rf, index):
        with pytest.raises(IndexError):
            rf.set_register(index, 0x00)
        with pytest.raises(IndexError):
            rf.get_register(index)

    # @intent:test_case_named_properties a-lプロパティがスロットと同じ記憶領域を参照することを検証します。
    @pytest.mark.parametrize("prop, slot", [
        ("a", A), ("f", F), ("b", B), ("c", C), ("d", D), ("e", E), ("h", H), ("l", L),
    ])
    def test_named_properties(self, rf, prop, slot):
        setattr(rf, prop, 0x3C)
        assert rf.get_register(slot) == 0x3C
        rf.set_register(slot, 0xC3)
        assert getattr(rf, prop) == 0xC3


class TestRegisterPairs:

    # @intent:test_case_pair_round_trip ペアに書き込んだ16bit値がそのまま読めることを検証します。
    @pytest.mark.parametrize("start", PAIR_STARTS)
    @pytest.mark.parametrize("value", PAIR_VALUES)
    def test_pair_round_trip(self, rf, start, value):
        rf.set_register_pair(start, value)
        assert rf.get_register_pair(start) == value

    # @intent:test_case_big_endian AF=0x1234でA=0x12, F=0x34となることを検証します。
    def test_af_is_big_endian(self, rf):
        rf.set_register_pair(A, 0x1234)
        assert rf.get_register(A) == 0x12
        assert rf.get_register(F) == 0x34

    def test_set_bc_beef(self, rf):
        rf.set_register_pair(B, 0xBEEF)
        assert rf.get_register(B) == 0xBE
        assert rf.get_register(C) == 0xEF
        assert rf.get_register_pair(B) == 0xBEEF

    # @intent:test_case_no_sign_extension 下位バイトの最上位ビットが立っていても上位バイトが壊れないことを検証します。
    def test_low_byte_high_bit_is_not_sign_extended(self, rf):
        rf.set_register(D, 0x01)
        rf.set_register(E, 0x80)
        assert rf.get_register_pair(D) == 0x0180

    def test_pair_reflects_individual_high_byte_update(self, rf):
        rf.set_register_pair(H, 0x00FF)
        rf.set_register(H, 0x01)
        assert rf.get_register_pair(H) == 0x01FF

    # @intent:test_case_pair_isolation あるペアへの書き込みが他のペアのスロットに影響しないことを検証します。
    @pytest.mark.parametrize("target", list(RegPair))
    def test_pair_write_isolated(self, rf, target):
        for pair in RegPair:
            rf.set_register_pair(pair, 0x1111 * (list(RegPair).index(pair) + 1))
        before = {pair: rf.get_register_pair(pair) for pair in RegPair}

        rf.set_register_pair(target, 0xA55A)

        for pair in RegPair:
            expected = 0xA55A if pair is target else before[pair]
            assert rf.get_register_pair(pair) == expected

    def test_accepts_reg_pair_member(self, rf):
        rf.set_register_pair(RegPair.DE, 0xCAFE)
        assert rf.get_register_pair(D) == 0xCAFE
        assert rf.de == 0xCAFE

    def test_pair_value_is_truncated_to_word(self, rf):
        rf.set_register_pair(H, 0x1ABCD)
        assert rf.get_register_pair(H) == 0xABCD

    # @intent:test_case_invalid_pair_start ペアの先頭でないスロットを指定するとIndexErrorになることを検証します。
    @pytest.mark.parametrize("index", [F, C, E, L, 8])
    def test_invalid_pair_start(self, rf, index):
        with pytest.raises(IndexError):
            rf.set_register_pair(index, 0x1234)
        with pytest.raises(IndexError):
            rf.get_register_pair(index)

    @pytest.mark.parametrize("prop, high, low", [
        ("af", A, F), ("bc", B, C), ("de", D, E), ("hl", H, L),
    ])
    def test_pair_properties(self, rf, prop, high, low):
        setattr(rf, prop, 0x1234)
        assert rf.get_register(high) == 0x12
        assert rf.get_register(low) == 0x34
        assert getattr(rf, prop) == 0x1234


class TestFlags:

    # @intent:test_case_set_flags ZEROとCARRYを立てるとF=0x90になることを検証します。
    def test_set_zero_and_carry(self, rf):
        rf.reset_flags()
        rf.set_flag(ZERO)
        rf.set_flag(CARRY)
        assert rf.get_register(F) == 0x90

        rf.reset_flags()
        assert rf.get_register(F) == 0x00

    # @intent:test_case_reset_clears_unused_bits リセットが未使用の下位4ビットもクリアすることを検証します。
    def test_reset_clears_all_bits(self, rf):
        rf.set_register(F, 0xFF)
        rf.reset_flags()
        assert rf.get_register(F) == 0x00

    def test_reset_leaves_a_untouched(self, rf):
        rf.set_register_pair(A, 0x12FF)
        rf.reset_flags()
        assert rf.get_register_pair(A) == 0x1200

    # @intent:test_case_set_flag_isolation set_flagが対象ビット以外を変更しないことを検証します。
    @pytest.mark.parametrize("bit", list(Flag))
    @pytest.mark.parametrize("initial", [0x00, 0x0F, 0xA5, 0x5A, 0xFF])
    def test_set_flag_only_touches_target_bit(self, rf, bit, initial):
        rf.set_register(F, initial)
        rf.set_flag(bit)
        assert rf.get_register(F) == initial | (1 << bit)

    @pytest.mark.parametrize("bit", list(Flag))
    @pytest.mark.parametrize("initial", [0x00, 0x0F, 0xA5, 0x5A, 0xFF])
    def test_clear_flag_only_touches_target_bit(self, rf, bit, initial):
        rf.set_register(F, initial)
        rf.clear_flag(bit)
        assert rf.get_register(F) == initial & ~(1 << bit) & 0xFF

    def test_get_flag(self, rf):
        rf.set_flag(H_CARRY)
        assert rf.get_flag(H_CARRY) is True
        assert rf.get_flag(SUBTRACT) is False
        rf.clear_flag(H_CARRY)
        assert rf.get_flag(H_CARRY) is False

    def test_set_flag_accepts_int_bit(self, rf):
        rf.set_flag(6)
        assert rf.get_register(F) == 0x40

    @pytest.mark.parametrize("bit", [0, 3, 8, -1])
    def test_undefined_flag_bit(self, rf, bit):
        with pytest.raises(IndexError):
            rf.set_flag(bit)
        with pytest.raises(IndexError):
            rf.clear_flag(bit)
        with pytest.raises(IndexError):
            rf.get_flag(bit)

    # @intent:test_case_flag_properties flag_*プロパティが対応するビットを読み書きすることを検証します。
    @pytest.mark.parametrize("flag_prop, mask", [
        ("flag_z", 0x80), ("flag_n", 0x40), ("flag_h", 0x20), ("flag_c", 0x10),
    ])
    def test_flag_properties(self, rf, flag_prop, mask):
        assert getattr(rf, flag_prop) is False

        setattr(rf, flag_prop, True)
        assert getattr(rf, flag_prop) is True
        assert rf.get_register(F) == mask

        rf.set_register(F, 0xFF)
        setattr(rf, flag_prop, False)
        assert rf.get_register(F) == 0xFF & ~mask


class TestInspection:

    def test_register_map(self, rf):
        rf.set_register_pair(RegPair.AF, 0x01B0)
        rf.set_register_pair(RegPair.HL, 0x014D)
        rf.sp = 0xFFFE
        rf.pc = 0x0100

        reg_map = rf.get_register_map()

        assert reg_map["A"] == 0x01
        assert reg_map["F"] == 0xB0
        assert reg_map["AF"] == 0x01B0
        assert reg_map["HL"] == 0x014D
        assert reg_map["BC"] == 0x0000
        assert reg_map["SP"] == 0xFFFE
        assert reg_map["PC"] == 0x0100
        assert set(reg_map) == {"A", "F", "B", "C", "D", "E", "H", "L",
                                "AF", "BC", "DE", "HL", "SP", "PC"}

    # @intent:test_case_flag_state フラグ状態がビット7から4の順に並ぶことを検証します。
    def test_flag_state(self, rf):
        rf.set_flag(ZERO)
        rf.set_flag(H_CARRY)
        state = rf.get_flag_state()
        assert list(state) == ["Z", "N", "H", "C"]
        assert state == {"Z": True, "N": False, "H": True, "C": False}

    def test_register_layout_names_are_in_map(self, rf):
        reg_map = rf.get_register_map()
        for group in rf.get_register_layout():
            for reg in group.registers:
                assert reg.name in reg_map
                assert reg.width == 16

    def test_equality_compares_contents(self):
        first = RegisterFile(pc=0x100)
        second = RegisterFile(pc=0x100)
        assert first == second
        second.set_register(H, 0x01)
        assert first != second
