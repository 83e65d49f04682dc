import logging
from typing import Dict, List, Sequence, Set

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QPixmap
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QLineEdit,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

import constants as const
from models.pokemon import Pokemon
from models.session import CatalogSession
from .detail_overlay import DetailOverlay
from .pokemon_card import PokemonCard

logger = logging.getLogger(__name__)


class PokedexPage(QWidget):
    query_changed = Signal(str)
    pokemon_selected = Signal(object)
    dismiss_requested = Signal()
    request_image = Signal(str)  # image_url

    def __init__(self, parent=None):
        super().__init__(parent)
        self._catalog: Sequence[Pokemon] = ()
        self._cards: Dict[int, PokemonCard] = {}
        self._pixmaps: Dict[str, QPixmap] = {}
        self._failed_images: Set[str] = set()
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        self.title_label = QLabel(const.UIText.TITLE.value)
        self.title_label.setAlignment(Qt.AlignCenter)
        font = QFont(); font.setPointSize(36); font.setBold(True)
        self.title_label.setFont(font)
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(const.UIText.SUBTITLE.value)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.subtitle_label)

        self.search_input = QLineEdit()
        self.search_input.setObjectName("searchInput")
        self.search_input.setPlaceholderText(const.UIText.SEARCH_PLACEHOLDER.value)
        self.search_input.setClearButtonEnabled(True)
        layout.addWidget(self.search_input)

        self.result_count_label = QLabel("")
        self.result_count_label.setAlignment(Qt.AlignCenter)
        self.result_count_label.hide()
        layout.addWidget(self.result_count_label)

        self.loading_label = QLabel(const.UIText.LOADING_POKEMON.value)
        self.loading_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.loading_label)

        self.empty_state_label = QLabel("")
        self.empty_state_label.setAlignment(Qt.AlignCenter)
        self.empty_state_label.setWordWrap(True)
        self.empty_state_label.hide()
        layout.addWidget(self.empty_state_label)

        self.grid_container = QWidget()
        self.grid_layout = QGridLayout(self.grid_container)
        self.grid_layout.setSpacing(16)
        self.grid_layout.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(self.grid_container)
        layout.addWidget(self.scroll_area, 1)

        # Child of the page, not of the layout, so it can cover everything.
        self.detail_overlay = DetailOverlay(self)

    def _connect_signals(self):
        self.search_input.textChanged.connect(self.query_changed)
        self.detail_overlay.dismiss_requested.connect(self.dismiss_requested)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.detail_overlay.setGeometry(self.rect())

    @property
    def visible_cards(self) -> List[PokemonCard]:
        """Cards currently placed in the grid, in display order."""
        cards = []
        for i in range(self.grid_layout.count()):
            card = self.grid_layout.itemAt(i).widget()
            if card is not None and not card.isHidden():
                cards.append(card)
        return cards

    def card_for(self, pokemon: Pokemon) -> PokemonCard:
        return self._cards[pokemon.id]

    def render(self, session: CatalogSession):
        """Brings every widget in line with the session state."""
        if session.pokemon is not self._catalog:
            self._build_cards(session.pokemon)

        self.loading_label.setVisible(session.loading)

        filtered = session.filtered()
        self._show_cards(filtered)

        self.result_count_label.setVisible(session.result_count_visible)
        self.result_count_label.setText(
            const.UIText.FOUND_COUNT.value.format(count=len(filtered))
        )

        self.empty_state_label.setVisible(session.empty_state_visible)
        self.empty_state_label.setText(
            const.UIText.NO_MATCHES.value.format(query=session.query)
        )

        if session.selection.is_open:
            self.show_details(session.selection.pokemon)
        else:
            self.hide_details()

    def _build_cards(self, catalog: Sequence[Pokemon]):
        for card in self._cards.values():
            self.grid_layout.removeWidget(card)
            card.deleteLater()
        self._cards = {}
        self._catalog = catalog
        for pokemon in catalog:
            card = PokemonCard(pokemon, self.grid_container)
            card.pokemon_clicked.connect(self.pokemon_selected)
            card.hide()
            self._cards[pokemon.id] = card
            if pokemon.sprite:
                self.request_image.emit(pokemon.sprite)
            else:
                card.image_widget.show_no_image()
        logger.info(f"Built {len(self._cards)} Pokémon cards.")

    def _show_cards(self, filtered: List[Pokemon]):
        for card in self._cards.values():
            self.grid_layout.removeWidget(card)
            card.hide()
        for index, pokemon in enumerate(filtered):
            card = self._cards[pokemon.id]
            row, column = divmod(index, const.GRID_COLUMNS)
            self.grid_layout.addWidget(card, row, column)
            card.show()

    def set_image(self, image_url: str, pixmap: QPixmap):
        self._pixmaps[image_url] = pixmap
        self._failed_images.discard(image_url)
        for card in self._cards.values():
            if card.pokemon.sprite == image_url:
                card.set_pixmap(pixmap)
        overlay_pokemon = self.detail_overlay.pokemon
        if overlay_pokemon and overlay_pokemon.sprite == image_url:
            self.detail_overlay.set_pixmap(pixmap)

    def set_image_failed(self, image_url: str):
        self._failed_images.add(image_url)
        for card in self._cards.values():
            if card.pokemon.sprite == image_url:
                card.set_image_failed()
        overlay_pokemon = self.detail_overlay.pokemon
        if overlay_pokemon and overlay_pokemon.sprite == image_url:
            self.detail_overlay.image_widget.show_image_not_available()

    def show_details(self, pokemon: Pokemon):
        self.detail_overlay.set_pokemon(
            pokemon,
            self._pixmaps.get(pokemon.sprite),
            image_failed=pokemon.sprite in self._failed_images,
        )
        self.detail_overlay.setGeometry(self.rect())
        self.detail_overlay.show()
        self.detail_overlay.raise_()

    def hide_details(self):
        self.detail_overlay.hide()
        self.detail_overlay.clear()
