# dmg_core/arch/lr35902/presets.py
"""
名前付きの初期レジスタ値（プリセット）。

レジスタファイル自体は電源投入時の値を持たないため、周辺のエミュレータや設定層はここから初期値を選びます。
"""
from typing import Dict

# @intent:constant プリセット名 -> (レジスタ名 -> 値)。レジスタ名はConfigの registers と同じ語彙を使う。
PRESETS: Dict[str, Dict[str, int]] = {
    "zero": {
        "af": 0x0000, "bc": 0x0000, "de": 0x0000, "hl": 0x0000,
        "sp": 0x0000, "pc": 0x0000,
    },
    # ブートROM終了直後のDMG (初代Game Boy) の状態
    "dmg": {
        "af": 0x01B0, "bc": 0x0013, "de": 0x00D8, "hl": 0x014D,
        "sp": 0xFFFE, "pc": 0x0100,
    },
}


# @intent:responsibility 名前からプリセットを取得します。呼び出し側が変更しても元の定義が壊れないようコピーを返します。
def get_preset(name: str) -> Dict[str, int]:
    try:
        return dict(PRESETS[name.lower()])
    except KeyError:
        raise ValueError(f"Unknown register preset: {name}") from None
