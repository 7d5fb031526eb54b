"""
共通の型定義を提供するモジュール。
レジスタファイル、スナップショット、UIで共通して使用される型エイリアスなどを定義します。
"""
from typing import Dict, List, NamedTuple

# @intent:data_structure レジスタ名と値をマッピングする辞書の型エイリアス。
RegisterMap = Dict[str, int]

# @intent:data_structure フラグ名とビット状態をマッピングする辞書の型エイリアス。
FlagState = Dict[str, bool]

# @intent:constant 8bit/16bitの値をラップアラウンドさせるためのマスク。
BYTE_MASK = 0xFF
WORD_MASK = 0xFFFF

# @intent:data_structure 単一のレジスタの表示定義。UIが動的にフィールドを生成するために使用される。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (8 or 16)

# @intent:data_structure レジスタグループの表示定義。関連するレジスタ（例: "Register Pairs", "Special"）をまとめる。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]
