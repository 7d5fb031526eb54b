# src/dmg_core/ui/flag_view.py
"""
Fレジスタのフラグを表示するウィジェット。
"""
from typing import Dict, Optional
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import Qt

from dmg_core.arch.lr35902.state import RegisterFile
from dmg_core.ui.fonts import get_monospace_font_family

# @intent:responsibility フラグ（Z, N, H, C）の状態を表示するUIウィジェットを提供します。
class FlagView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)

        # Apply dark theme
        self.setStyleSheet("background-color: #121212; color: #BBBBBB;")

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(10, 10, 10, 10)
        self._layout.setSpacing(15)

        self._font_family = get_monospace_font_family()
        self._flag_labels: Dict[str, QLabel] = {}
        self._register_file: Optional[RegisterFile] = None

        self._layout.addStretch(1)

    # @intent:responsibility 表示対象のレジスタファイルを設定し、フラグラベルを作り直します。
    def set_register_file(self, register_file: RegisterFile) -> None:
        self._register_file = register_file
        self._setup_flag_labels()
        self.update_flags()

    def _setup_flag_labels(self):
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._flag_labels.clear()

        # get_flag_stateのキーが表示するフラグの一覧になる
        for flag_name in self._register_file.get_flag_state():
            label_name = QLabel(f"{flag_name}:")
            label_name.setStyleSheet("font-weight: bold; color: #BBBBBB;")

            label_value = QLabel("0")
            label_value.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: #FFD700;")
            label_value.setFixedWidth(15)
            label_value.setAlignment(Qt.AlignCenter)

            self._layout.addWidget(label_name)
            self._layout.addWidget(label_value)
            self._flag_labels[flag_name] = label_value

        self._layout.addStretch(1)

    # @intent:responsibility 現在のFレジスタを読み、フラグの表示を更新します。
    def update_flags(self):
        if not self._register_file:
            return

        for name, is_set in self._register_file.get_flag_state().items():
            if name in self._flag_labels:
                self._flag_labels[name].setText("1" if is_set else "0")

    def displayed_flags(self) -> Dict[str, str]:
        return {name: label.text() for name, label in self._flag_labels.items()}
