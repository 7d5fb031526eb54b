# dmg_core/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態（特殊レジスタ）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass

# @intent:responsibility どのアーキテクチャにも存在するPCとSPを保持します。汎用レジスタはこれを拡張して追加します。
@dataclass
class CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    これは抽象的な基底状態であり、特定のCPUアーキテクチャに応じて拡張されます。
    """
    pc: int = 0x0000  # Program Counter
    sp: int = 0x0000  # Stack Pointer
    # 汎用レジスタ（A, F, B, C, D, E, H, L）は arch/lr35902/state.py で追加されます。
    # @intent:rationale 初期値は0x0000とする。電源投入時の実際の値はプリセットや設定で上書きされる。
