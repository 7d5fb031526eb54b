# dmg_core/arch/lr35902/state.py
"""
LR35902 CPU固有の状態定義。

このモジュールは、LR35902 (Game Boy) CPUのレジスタファイルを定義します。
8つの汎用レジスタスロット（A, F, B, C, D, E, H, L）は1つの8バイト配列に格納され、
隣接する2スロットを組み合わせて16bitのレジスタペア（AF, BC, DE, HL）としてもアクセスできます。
Fレジスタはフラグレジスタを兼ね、上位4ビットがZero/Subtract/Half Carry/Carryを表します。
SPとPCは配列の外に置かれる独立した16bitレジスタです。
"""
from dataclasses import dataclass, field
from typing import List

from dmg_core.common.types import (
    BYTE_MASK,
    WORD_MASK,
    FlagState,
    RegisterInfo,
    RegisterLayoutInfo,
    RegisterMap,
)
from dmg_core.core.state import CpuState
from dmg_core.arch.lr35902.registers import (
    Flag,
    FlagBit,
    PairIndex,
    Reg,
    RegPair,
    SlotIndex,
    resolve_flag,
    resolve_pair,
    resolve_slot,
)
from dmg_core.arch.lr35902.snapshot import RegisterSnapshot

REGISTER_COUNT = len(Reg)

# UIに表示する際のフラグ名（ビット7から4の順）
_FLAG_NAMES = (
    ("Z", Flag.ZERO),
    ("N", Flag.SUBTRACT),
    ("H", Flag.H_CARRY),
    ("C", Flag.CARRY),
)


# @intent:responsibility LR35902 CPUの全てのレジスタとフラグの状態を保持する唯一のアクセス窓口です。
@dataclass
class RegisterFile(CpuState):
    """
    LR35902 CPUのレジスタファイル。
    CpuStateを拡張し、8バイトの汎用レジスタ配列とフラグ操作を提供します。

    命令実行エンジンが唯一の所有者として毎サイクル読み書きすることを想定しており、
    内部でのロックやログ出力は行いません。
    """
    _reg: bytearray = field(default_factory=lambda: bytearray(REGISTER_COUNT), init=False, repr=False)

    # @intent:rationale スロットの並びはペアの構成を表す。RegPairの定義と一致している限り、
    #                  ペアの上位バイトは常に下位バイトの直前に位置する。

    # --- 8-bit registers ---

    # @intent:responsibility 指定されたスロットに1バイトを書き込みます。
    # @intent:pre-condition indexはA, F, B, C, D, E, H, Lのいずれかである必要があります。
    def set_register(self, index: SlotIndex, value: int) -> None:
        self._reg[resolve_slot(index)] = value & BYTE_MASK

    # @intent:responsibility 指定されたスロットの現在値を返します。副作用はありません。
    def get_register(self, index: SlotIndex) -> int:
        return self._reg[resolve_slot(index)]

    # --- 16-bit register pairs ---

    # @intent:responsibility 16bit値をレジスタペアの2スロットに書き込みます。
    # @intent:pre-condition indexはペアの先頭スロット（A, B, D, H）またはRegPairである必要があります。
    def set_register_pair(self, index: PairIndex, value: int) -> None:
        """
        上位8ビットをペアの先頭スロットに、下位8ビットを次のスロットに書き込みます。
        例えばAFペアではAが上位バイト、Fが下位バイトになります。
        """
        pair = resolve_pair(index)
        value &= WORD_MASK
        self._reg[pair.high] = value >> 8    # upper byte
        self._reg[pair.low] = value & BYTE_MASK  # lower byte

    # @intent:responsibility レジスタペアの2スロットをビッグエンディアンで合成した16bit値を返します。
    def get_register_pair(self, index: PairIndex) -> int:
        pair = resolve_pair(index)
        # 各バイトは符号なしとして合成する
        return ((self._reg[pair.high] & BYTE_MASK) << 8) | (self._reg[pair.low] & BYTE_MASK)

    # --- Flags ---

    # @intent:responsibility Fレジスタの全8ビット（未使用の下位4ビットを含む）をクリアします。
    def reset_flags(self) -> None:
        self._reg[Reg.F] = 0

    # @intent:responsibility 指定されたフラグビットだけを1にします。他のビットは変更しません。
    # @intent:pre-condition bitはCARRY, H_CARRY, SUBTRACT, ZERO（4-7）のいずれかである必要があります。
    def set_flag(self, bit: FlagBit) -> None:
        self._reg[Reg.F] |= resolve_flag(bit).mask

    # @intent:responsibility 指定されたフラグビットだけを0にします。他のビットは変更しません。
    def clear_flag(self, bit: FlagBit) -> None:
        self._reg[Reg.F] &= ~resolve_flag(bit).mask & BYTE_MASK

    # @intent:responsibility 指定されたフラグビットが立っているかを返します。
    def get_flag(self, bit: FlagBit) -> bool:
        return (self._reg[Reg.F] & resolve_flag(bit).mask) != 0

    # @intent:accessor Fレジスタの各フラグビットにアクセスするためのプロパティを提供します。
    # @intent:rationale ALU実装側でビット位置を意識せずにフラグを読み書きできるようにします。

    def _assign_flag(self, bit: Flag, value: bool) -> None:
        if value:
            self.set_flag(bit)
        else:
            self.clear_flag(bit)

    @property
    def flag_z(self) -> bool:
        return self.get_flag(Flag.ZERO)

    @flag_z.setter
    def flag_z(self, value: bool) -> None:
        self._assign_flag(Flag.ZERO, value)

    @property
    def flag_n(self) -> bool:
        return self.get_flag(Flag.SUBTRACT)

    @flag_n.setter
    def flag_n(self, value: bool) -> None:
        self._assign_flag(Flag.SUBTRACT, value)

    @property
    def flag_h(self) -> bool:
        return self.get_flag(Flag.H_CARRY)

    @flag_h.setter
    def flag_h(self, value: bool) -> None:
        self._assign_flag(Flag.H_CARRY, value)

    @property
    def flag_c(self) -> bool:
        return self.get_flag(Flag.CARRY)

    @flag_c.setter
    def flag_c(self, value: bool) -> None:
        self._assign_flag(Flag.CARRY, value)

    # Named 8-bit registers
    @property
    def a(self) -> int:
        return self._reg[Reg.A]

    @a.setter
    def a(self, value: int) -> None:
        self._reg[Reg.A] = value & BYTE_MASK

    @property
    def f(self) -> int:
        return self._reg[Reg.F]

    @f.setter
    def f(self, value: int) -> None:
        self._reg[Reg.F] = value & BYTE_MASK

    @property
    def b(self) -> int:
        return self._reg[Reg.B]

    @b.setter
    def b(self, value: int) -> None:
        self._reg[Reg.B] = value & BYTE_MASK

    @property
    def c(self) -> int:
        return self._reg[Reg.C]

    @c.setter
    def c(self, value: int) -> None:
        self._reg[Reg.C] = value & BYTE_MASK

    @property
    def d(self) -> int:
        return self._reg[Reg.D]

    @d.setter
    def d(self, value: int) -> None:
        self._reg[Reg.D] = value & BYTE_MASK

    @property
    def e(self) -> int:
        return self._reg[Reg.E]

    @e.setter
    def e(self, value: int) -> None:
        self._reg[Reg.E] = value & BYTE_MASK

    @property
    def h(self) -> int:
        return self._reg[Reg.H]

    @h.setter
    def h(self, value: int) -> None:
        self._reg[Reg.H] = value & BYTE_MASK

    @property
    def l(self) -> int:
        return self._reg[Reg.L]

    @l.setter
    def l(self, value: int) -> None:
        self._reg[Reg.L] = value & BYTE_MASK

    # 16-bit register pairs
    @property
    def af(self) -> int:
        return self.get_register_pair(RegPair.AF)

    @af.setter
    def af(self, value: int) -> None:
        self.set_register_pair(RegPair.AF, value)

    @property
    def bc(self) -> int:
        return self.get_register_pair(RegPair.BC)

    @bc.setter
    def bc(self, value: int) -> None:
        self.set_register_pair(RegPair.BC, value)

    @property
    def de(self) -> int:
        return self.get_register_pair(RegPair.DE)

    @de.setter
    def de(self, value: int) -> None:
        self.set_register_pair(RegPair.DE, value)

    @property
    def hl(self) -> int:
        return self.get_register_pair(RegPair.HL)

    @hl.setter
    def hl(self, value: int) -> None:
        self.set_register_pair(RegPair.HL, value)

    # --- Inspection ---

    def get_register_map(self) -> RegisterMap:
        """
        現在のレジスタ値を辞書形式で返す。
        UIがレジスタファイルの内部構造を知らなくても値を表示できるようにするために使用される。
        """
        reg_map = {slot.name: self._reg[slot] for slot in Reg}
        reg_map.update({pair.name: self.get_register_pair(pair) for pair in RegPair})
        reg_map["SP"] = self.sp
        reg_map["PC"] = self.pc
        return reg_map

    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        """
        レジスタをUI上でどのように配置・グループ化すべきかの定義を返す。
        """
        return [
            RegisterLayoutInfo("Register Pairs", [
                RegisterInfo("AF", 16), RegisterInfo("BC", 16), RegisterInfo("DE", 16), RegisterInfo("HL", 16)
            ]),
            RegisterLayoutInfo("Special", [
                RegisterInfo("SP", 16), RegisterInfo("PC", 16)
            ]),
        ]

    def get_flag_state(self) -> FlagState:
        """
        Fレジスタの各フラグの状態を辞書形式で返す（ビット7から4の順）。
        """
        return {name: self.get_flag(bit) for name, bit in _FLAG_NAMES}

    # @intent:responsibility 現在の状態を不変のRegisterSnapshotとして複製します。
    def snapshot(self) -> RegisterSnapshot:
        return RegisterSnapshot(registers=tuple(self._reg), sp=self.sp, pc=self.pc)
