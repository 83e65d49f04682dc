import logging
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget
from PySide6.QtGui import QPixmap
from PySide6.QtCore import Qt
import constants as const

logger = logging.getLogger(__name__)


class HeroImageWidget(QWidget):
    """Shows a Pokémon image scaled into a square, or a status text."""

    def __init__(self, size: int = const.CARD_IMAGE_SIZE, parent=None):
        super().__init__(parent)
        self._size = size
        self._pixmap = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setFixedSize(size, size)
        self.image_label.setWordWrap(True)
        layout.addWidget(self.image_label, alignment=Qt.AlignCenter)

        self.show_no_image()

    @property
    def has_image(self) -> bool:
        return self._pixmap is not None

    def show_text(self, text: str):
        self._pixmap = None
        self.image_label.clear()
        self.image_label.setText(text)

    def show_pixmap(self, pixmap: QPixmap):
        if pixmap.isNull():
            self.show_no_image()
            return
        self._pixmap = pixmap
        self.image_label.setPixmap(
            pixmap.scaled(
                self._size, self._size, Qt.KeepAspectRatio, Qt.SmoothTransformation
            )
        )

    def show_loading(self):
        self.show_text(const.UIText.LOADING.value)

    def show_no_image(self):
        self.show_text(const.UIText.NO_IMAGE.value)

    def show_image_not_available(self):
        self.show_text(const.UIText.IMAGE_NOT_AVAILABLE.value)
