import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QFrame, QLabel

import constants as const

log = logging.getLogger(__name__)


class ClickableFrame(QFrame):
    """
    A custom QFrame that emits a signal when clicked anywhere inside it.
    """

    clicked = Signal()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setCursor(Qt.PointingHandCursor)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
            event.accept()
            return
        super().mousePressEvent(event)


class TypeBadge(QLabel):
    """
    A rounded, colored label for one Pokémon type.
    """

    def __init__(self, type_name: str, large: bool = False, parent=None):
        super().__init__(type_name.capitalize(), parent)
        self.type_name = type_name
        self.color = const.type_color(type_name)
        padding = "6px 14px" if large else "3px 10px"
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet(
            f"background-color: {self.color}; color: white; font-weight: bold;"
            f" border-radius: 10px; padding: {padding};"
        )
