import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QMouseEvent, QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

import constants as const
from models.pokemon import Pokemon
from .custom_widgets import TypeBadge
from .hero_image_widget import HeroImageWidget

logger = logging.getLogger(__name__)


class DetailPanel(QFrame):
    """The white card in the middle of the overlay."""

    def mousePressEvent(self, event: QMouseEvent):
        # Clicks inside the panel must not reach the backdrop's dismiss handler.
        event.accept()


class DetailOverlay(QWidget):
    """
    A dimmed backdrop covering its parent with the selected Pokémon's details.
    Clicking the backdrop or the close button requests a dismiss.
    """

    dismiss_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.pokemon: Optional[Pokemon] = None
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet("DetailOverlay { background-color: rgba(0, 0, 0, 128); }")
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setAlignment(Qt.AlignCenter)

        self.panel = DetailPanel(self)
        self.panel.setObjectName("detailPanel")
        self.panel.setAttribute(Qt.WA_StyledBackground, True)
        self.panel.setStyleSheet(
            "#detailPanel { background-color: white; border-radius: 24px; }"
        )
        self.panel.setFixedWidth(420)
        outer.addWidget(self.panel, alignment=Qt.AlignCenter)

        layout = QVBoxLayout(self.panel)
        layout.setContentsMargins(24, 16, 24, 24)

        top_row = QHBoxLayout()
        top_row.addStretch()
        self.close_button = QPushButton(const.UIText.CLOSE.value, self.panel)
        self.close_button.setFlat(True)
        self.close_button.setFont(QFont("", 20, QFont.Bold))
        self.close_button.clicked.connect(self.dismiss_requested)
        top_row.addWidget(self.close_button)
        layout.addLayout(top_row)

        self.image_widget = HeroImageWidget(const.DETAIL_IMAGE_SIZE, self.panel)
        layout.addWidget(self.image_widget)

        self.name_label = QLabel("")
        self.name_label.setAlignment(Qt.AlignCenter)
        font = QFont(); font.setPointSize(22); font.setBold(True)
        self.name_label.setFont(font)
        layout.addWidget(self.name_label)

        self.number_label = QLabel("")
        self.number_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.number_label)

        self.badge_row = QHBoxLayout()
        self.badge_row.setAlignment(Qt.AlignCenter)
        layout.addLayout(self.badge_row)
        self.badges = []

        stats = QGridLayout()
        stats.addWidget(QLabel(const.UIText.HEIGHT.value), 0, 0)
        stats.addWidget(QLabel(const.UIText.WEIGHT.value), 0, 1)
        stat_font = QFont(); stat_font.setPointSize(18); stat_font.setBold(True)
        self.height_value = QLabel("")
        self.height_value.setFont(stat_font)
        self.weight_value = QLabel("")
        self.weight_value.setFont(stat_font)
        stats.addWidget(self.height_value, 1, 0)
        stats.addWidget(self.weight_value, 1, 1)
        layout.addLayout(stats)

    def set_pokemon(
        self,
        pokemon: Pokemon,
        pixmap: Optional[QPixmap] = None,
        image_failed: bool = False,
    ):
        self.pokemon = pokemon
        self.name_label.setText(pokemon.display_name)
        self.number_label.setText(pokemon.display_number)
        self.height_value.setText(f"{pokemon.display_height}m")
        self.weight_value.setText(f"{pokemon.display_weight}kg")

        for badge in self.badges:
            self.badge_row.removeWidget(badge)
            badge.deleteLater()
        self.badges = [TypeBadge(t, large=True, parent=self.panel) for t in pokemon.types]
        for badge in self.badges:
            self.badge_row.addWidget(badge)

        if pixmap is not None:
            self.image_widget.show_pixmap(pixmap)
        elif image_failed:
            self.image_widget.show_image_not_available()
        elif pokemon.sprite:
            self.image_widget.show_loading()
        else:
            self.image_widget.show_no_image()

    def set_pixmap(self, pixmap: QPixmap):
        self.image_widget.show_pixmap(pixmap)

    def clear(self):
        self.pokemon = None

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            logger.debug("Backdrop clicked, dismissing details.")
            self.dismiss_requested.emit()
            event.accept()
            return
        super().mousePressEvent(event)
