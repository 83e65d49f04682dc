import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QPixmap
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout

from models.pokemon import Pokemon
from .custom_widgets import ClickableFrame, TypeBadge
from .hero_image_widget import HeroImageWidget
import constants as const

logger = logging.getLogger(__name__)


class PokemonCard(ClickableFrame):
    """One grid entry: number, image, name and type badges."""

    pokemon_clicked = Signal(object)

    def __init__(self, pokemon: Pokemon, parent=None):
        super().__init__(parent)
        self.pokemon = pokemon
        self.setObjectName(f"card_{pokemon.id}")
        self.setFrameShape(QFrame.StyledPanel)
        self.setStyleSheet(
            "PokemonCard { background-color: white; border-radius: 16px; }"
        )
        self._setup_ui()
        self.clicked.connect(self._on_clicked)

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)

        self.number_label = QLabel(self.pokemon.display_number)
        font = QFont(); font.setBold(True)
        self.number_label.setFont(font)
        main_layout.addWidget(self.number_label, alignment=Qt.AlignLeft)

        self.image_widget = HeroImageWidget(const.CARD_IMAGE_SIZE, self)
        if self.pokemon.sprite:
            self.image_widget.show_loading()
        main_layout.addWidget(self.image_widget)

        self.name_label = QLabel(self.pokemon.display_name)
        font = QFont(); font.setPointSize(14); font.setBold(True)
        self.name_label.setFont(font)
        main_layout.addWidget(self.name_label)

        badge_row = QHBoxLayout()
        self.badges = [TypeBadge(t, parent=self) for t in self.pokemon.types]
        for badge in self.badges:
            badge_row.addWidget(badge)
        badge_row.addStretch()
        main_layout.addLayout(badge_row)

    def set_pixmap(self, pixmap: QPixmap):
        self.image_widget.show_pixmap(pixmap)

    def set_image_failed(self):
        self.image_widget.show_image_not_available()

    def _on_clicked(self):
        self.pokemon_clicked.emit(self.pokemon)
