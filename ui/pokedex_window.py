import logging
import signal
import sys
from typing import List, Optional

from PySide6.QtCore import QObject, QThread, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QApplication, QMainWindow

import constants as const
from adapters.catalog_source import CatalogSource
from adapters.pokeapi.pokeapi_api import PokeApi
from catalog_loader import CatalogLoader
from models.pokemon import Pokemon
from models.session import CatalogSession

from .page_pokedex import PokedexPage
from .ui_workers import CatalogLoadWorker, ImageWorker

# Ensure SIGINT (Ctrl+C) quits the app properly
signal.signal(signal.SIGINT, signal.SIG_DFL)

logger = logging.getLogger(__name__)


class PokedexWindow(QMainWindow):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(const.UIText.TITLE.value)
        self.resize(1280, 860)
        self.page = PokedexPage(self)
        self.setCentralWidget(self.page)


class PokedexController(QObject):
    request_image = Signal(str)

    def __init__(
        self,
        window: PokedexWindow,
        api_service: Optional[CatalogSource] = None,
        loader: Optional[CatalogLoader] = None,
    ):
        super().__init__()
        self.window = window
        self.page = window.page
        self.api_service = api_service if api_service is not None else PokeApi()
        self.loader = loader if loader is not None else CatalogLoader(self.api_service)
        self.session = CatalogSession()
        self._setup_workers()
        self._connect_signals()
        self.page.render(self.session)
        self.load_thread.start()

    def _setup_workers(self):
        self.load_thread = QThread()
        self.load_worker = CatalogLoadWorker(self.loader)
        self.load_worker.moveToThread(self.load_thread)
        self.load_worker.load_completed.connect(self.on_load_completed)
        self.load_worker.load_failed.connect(self.on_load_failed)
        self.load_worker.finished.connect(self.load_thread.quit)
        self.load_thread.started.connect(self.load_worker.run)

        self.image_thread = QThread()
        self.image_worker = ImageWorker(self.api_service)
        self.image_worker.moveToThread(self.image_thread)
        self.image_worker.image_loaded.connect(self.on_image_loaded)
        self.image_worker.image_failed.connect(self.on_image_failed)
        self.request_image.connect(self.image_worker.load_image)
        self.image_thread.start()

    def _connect_signals(self):
        self.page.query_changed.connect(self.on_query_changed)
        self.page.pokemon_selected.connect(self.on_pokemon_selected)
        self.page.dismiss_requested.connect(self.on_dismiss_requested)
        self.page.request_image.connect(self.request_image)

    def on_load_completed(self, pokemon: List[Pokemon]):
        self.session.finish_load(pokemon)
        self.page.render(self.session)

    def on_load_failed(self, error_message: str):
        # Already logged by the worker; the page simply stays empty.
        self.session.fail_load()
        self.page.render(self.session)

    def on_query_changed(self, query: str):
        self.session.set_query(query)
        self.page.render(self.session)

    def on_pokemon_selected(self, pokemon: Pokemon):
        self.session.select(pokemon)
        self.page.render(self.session)

    def on_dismiss_requested(self):
        self.session.dismiss()
        self.page.render(self.session)

    def on_image_loaded(self, image_data: bytes, image_url: str):
        pixmap = QPixmap()
        pixmap.loadFromData(image_data)
        self.page.set_image(image_url, pixmap)

    def on_image_failed(self, image_url: str):
        self.page.set_image_failed(image_url)

    def cleanup(self):
        for thread in [self.load_thread, self.image_thread]:
            if thread.isRunning():
                thread.quit()
                thread.wait()


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    app = QApplication(sys.argv)
    window = PokedexWindow()
    controller = PokedexController(window)
    window.show()
    app.aboutToQuit.connect(controller.cleanup)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
