# src/dmg_core/ui/register_view.py
"""
レジスタファイルの内容を表示するウィジェット。
RegisterFileのレイアウト情報を利用して動的にUIを構築します。
"""
from typing import Dict, Optional
from PySide6.QtWidgets import QWidget, QVBoxLayout, QFormLayout, QLabel, QGroupBox
from PySide6.QtCore import Qt

from dmg_core.arch.lr35902.state import RegisterFile
from dmg_core.ui.fonts import get_monospace_font_family

_GROUP_STYLE = """
    QGroupBox {
        font-weight: bold;
        border: 1px solid #222;
        border-radius: 4px;
        margin-top: 20px;
        color: #EEE;
        background-color: #121212;
    }
    QGroupBox::title {
        subcontrol-origin: margin;
        subcontrol-position: top left;
        padding: 0 5px;
        left: 10px;
        color: #00AAAA;
    }
"""

# @intent:responsibility レジスタファイルの値を表示するUIウィジェットを提供します。
class RegisterView(QWidget):
    """
    レジスタファイルの状態を表示するウィジェット。
    get_register_layout()のグループごとにフィールドを生成し、get_register_map()の値で更新します。
    """
    def __init__(self, parent=None):
        super().__init__(parent)

        # Apply dark theme
        self.setStyleSheet("background-color: #121212; color: #BBBBBB;")

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(5, 5, 5, 5)

        self._font_family = get_monospace_font_family()
        self._register_labels: Dict[str, QLabel] = {}
        self._register_widths: Dict[str, int] = {}
        self._register_file: Optional[RegisterFile] = None

    # @intent:responsibility 表示対象のレジスタファイルを設定し、UIレイアウトを構築します。
    def set_register_file(self, register_file: RegisterFile) -> None:
        self._register_file = register_file
        self._setup_ui()
        self.update_registers()

    def _setup_ui(self):
        # 既存のウィジェットをクリア
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._register_labels.clear()
        self._register_widths.clear()

        for group in self._register_file.get_register_layout():
            group_box = QGroupBox(group.group_name)
            group_box.setStyleSheet(_GROUP_STYLE)
            group_layout = QFormLayout(group_box)
            group_layout.setLabelAlignment(Qt.AlignLeft)
            group_layout.setContentsMargins(10, 15, 10, 10)
            group_layout.setSpacing(5)

            for reg in group.registers:
                hex_width = (reg.width + 3) // 4 # 16bit -> 4chars, 8bit -> 2chars
                self._register_widths[reg.name] = hex_width

                label_name = QLabel(f"{reg.name}:")
                label_name.setStyleSheet("font-weight: bold; color: #BBBBBB;")

                label_value = QLabel(f"0x{'0'*hex_width}")
                label_value.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: #FFD700;") # Gold color
                label_value.setAlignment(Qt.AlignRight)

                group_layout.addRow(label_name, label_value)
                self._register_labels[reg.name] = label_value

            self._layout.addWidget(group_box)

        self._layout.addStretch()

    # @intent:responsibility 現在のレジスタ値を取得し、表示を更新します。
    def update_registers(self):
        if not self._register_file:
            return

        for name, value in self._register_file.get_register_map().items():
            if name in self._register_labels:
                width = self._register_widths[name]
                self._register_labels[name].setText(f"0x{value:0{width}X}")

    # @intent:responsibility 指定されたレジスタの表示中テキストを返します。未表示のレジスタはNone。
    def displayed_value(self, name: str) -> Optional[str]:
        label = self._register_labels.get(name)
        return label.text() if label else None
