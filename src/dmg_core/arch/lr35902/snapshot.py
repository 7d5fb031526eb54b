# dmg_core/arch/lr35902/snapshot.py
"""
レジスタファイルの不変スナップショット

ある一時点におけるLR35902レジスタファイルの内容を記録した不変のデータ構造を定義します。
トレースやデバッグ時に過去の状態を、実行中のレジスタファイルと同じ語彙で読み出すために用います。
"""
from dataclasses import dataclass
from typing import Tuple

from dmg_core.arch.lr35902.registers import (
    PairIndex,
    SlotIndex,
    resolve_pair,
    resolve_slot,
)


# @intent:responsibility ある一時点における8つのスロットとSP/PCを不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class RegisterSnapshot:
    """
    レジスタファイルの不変コピー。
    registersはスロット順（A, F, B, C, D, E, H, L）の8バイトです。
    """
    registers: Tuple[int, ...]
    sp: int = 0x0000
    pc: int = 0x0000

    # @intent:rationale 生きたbytearrayを共有しないよう、registersはタプルとして保持する。
    #                  frozen=Trueでフィールドの再代入も防ぐ。

    def get_register(self, index: SlotIndex) -> int:
        return self.registers[resolve_slot(index)]

    def get_register_pair(self, index: PairIndex) -> int:
        pair = resolve_pair(index)
        return ((self.registers[pair.high] & 0xFF) << 8) | (self.registers[pair.low] & 0xFF)
