# dmg_core/arch/lr35902/registers.py
"""
LR35902 レジスタのアドレッシング定数。

レジスタスロット、フラグビット位置、レジスタペアを閉じた列挙型として定義します。
呼び出し側はこれらの列挙型を使うことで、範囲外アクセスを構造的に避けられます。
"""
from enum import Enum, IntEnum
from typing import Dict, Union

# @intent:constant 8つの汎用レジスタスロットの位置。ペアの上位バイトは常に下位バイトの直前に並ぶ。
class Reg(IntEnum):
    A = 0
    F = 1  # Flag register
    B = 2
    C = 3
    D = 4
    E = 5
    H = 6
    L = 7

# @intent:constant Fレジスタ内の各フラグのビット位置。下位4ビット(0-3)は未使用。
class Flag(IntEnum):
    CARRY = 4     # Carry (キャリー)
    H_CARRY = 5   # Half Carry (ハーフキャリー)
    SUBTRACT = 6  # Subtract (減算)
    ZERO = 7      # Zero (ゼロ)

    # @intent:accessor フラグビットに対応する単一ビットのマスクを返します。
    @property
    def mask(self) -> int:
        return 1 << self.value

# @intent:data_structure 各レジスタペアを構成する2つのスロットを明示的に対応付けます。
# @intent:rationale "index と index+1" という暗黙の算術に頼らず、ペアの構成を列挙型の値として持たせる。
class RegPair(Enum):
    AF = (Reg.A, Reg.F)
    BC = (Reg.B, Reg.C)
    DE = (Reg.D, Reg.E)
    HL = (Reg.H, Reg.L)

    @property
    def high(self) -> Reg:
        return self.value[0]

    @property
    def low(self) -> Reg:
        return self.value[1]

# 上位スロットからペアを逆引きするための表
_PAIR_BY_HIGH: Dict[int, RegPair] = {pair.high: pair for pair in RegPair}

# フラット定数名で参照したい呼び出し側のための別名
A, F, B, C, D, E, H, L = Reg
CARRY, H_CARRY, SUBTRACT, ZERO = Flag

SlotIndex = Union[Reg, int]
PairIndex = Union[RegPair, Reg, int]
FlagBit = Union[Flag, int]


# @intent:responsibility 任意のスロット指定をRegに正規化します。
# @intent:pre-condition indexは0-7のいずれかである必要があります。そうでなければIndexErrorを送出します。
def resolve_slot(index: SlotIndex) -> Reg:
    if isinstance(index, Reg):
        return index
    try:
        return Reg(index)
    except ValueError:
        raise IndexError(f"Register index {index} out of range.") from None


# @intent:responsibility ペアの指定（RegPair、または上位スロット A/B/D/H）をRegPairに正規化します。
def resolve_pair(index: PairIndex) -> RegPair:
    """
    RegPairはそのまま返し、整数またはRegは上位スロットとして逆引きします。
    ペアの先頭ではないスロット（F, C, E, L）や範囲外の値はIndexErrorになります。
    """
    if isinstance(index, RegPair):
        return index
    pair = _PAIR_BY_HIGH.get(index)
    if pair is None:
        raise IndexError(f"Register index {index} is not the start of a register pair.")
    return pair


# @intent:responsibility 任意のフラグ指定をFlagに正規化します。
def resolve_flag(bit: FlagBit) -> Flag:
    if isinstance(bit, Flag):
        return bit
    try:
        return Flag(bit)
    except ValueError:
        raise IndexError(f"Flag bit {bit} is not a defined flag.") from None
