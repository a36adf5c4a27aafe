import logging
import sys
from pathlib import Path

from PySide6.QtGui import QGuiApplication
from PySide6.QtQml import QQmlApplicationEngine

from deckconfig import ConfigurationError, DesktopConfiguration
from desktop_ui.coordinator import DeckCoordinator

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # Configure default console logging if not already configured
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=getattr(logging, level, logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def main() -> int:
    config = DesktopConfiguration()
    configure_logging(config.log_level)

    try:
        controller = config.create_controller()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        print(f"Configuration error: {e}")
        return 1

    app = QGuiApplication(sys.argv)
    engine = QQmlApplicationEngine()

    coordinator = DeckCoordinator(controller)
    engine.rootContext().setContextProperty("coordinator", coordinator)

    qml_file = Path(__file__).parent / "qml" / "MainWindow.qml"
    engine.load(qml_file)

    if not engine.rootObjects():
        print("Failed to load QML")
        coordinator.cleanup()
        return 1

    try:
        return app.exec()
    finally:
        coordinator.cleanup()
