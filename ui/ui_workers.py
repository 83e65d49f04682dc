# ui/ui_workers.py
import logging
from PySide6.QtCore import QObject, Signal, Slot

from adapters.catalog_source import CatalogSource
from catalog_loader import CatalogLoader

logger = logging.getLogger(__name__)


class CatalogLoadWorker(QObject):
    """
    A QObject worker that runs the one catalog load of a session in a
    separate thread.
    """

    load_completed = Signal(list)
    load_failed = Signal(str)
    finished = Signal()

    def __init__(self, loader: CatalogLoader):
        super().__init__()
        self._loader = loader

    @Slot()
    def run(self):
        try:
            pokemon = self._loader.load()
            self.load_completed.emit(pokemon)
        except Exception as e:
            # The only report of a failed load; the page just shows nothing.
            logger.error(f"Error fetching Pokémon: {e}", exc_info=True)
            self.load_failed.emit(str(e))
        finally:
            self.finished.emit()


class ImageWorker(QObject):
    """
    A QObject worker for loading images in a separate thread.
    """

    image_loaded = Signal(bytes, str)
    image_failed = Signal(str)

    def __init__(self, api_service: CatalogSource):
        super().__init__()
        self._api_service = api_service

    @Slot(str)
    def load_image(self, image_url):
        try:
            result = self._api_service.fetch_sprite(image_url)
            if result:
                image_data, _ = result
                self.image_loaded.emit(image_data, image_url)
            else:
                self.image_failed.emit(image_url)
        except Exception as e:
            logger.error(f"ImageWorker failed for {image_url}: {e}", exc_info=True)
            self.image_failed.emit(image_url)
