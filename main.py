import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.logging_config import setup_logging
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# SETTINGS
# -----------------------------------------------------------------------------

LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"     # DEBUG shows every message + status
LOG_FORMAT_ENV = "TICTACTOE_LOG_FORMAT"   # "simple" or "detailed"

# -----------------------------------------------------------------------------
# PALETTE
# -----------------------------------------------------------------------------

DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}

DISABLED_COLOR = QColor(127, 127, 127)


def apply_default_palette(app: QApplication):
    """
    Dark theme for the whole app; disabled text is greyed out.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    app.setPalette(palette)


def main(argv=None):
    setup_logging(os.environ.get(LOG_LEVEL_ENV, "WARNING"),
                  os.environ.get(LOG_FORMAT_ENV, "simple"))

    app = QApplication(sys.argv if argv is None else argv)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.resize(360, 440)
    window.show()
    return app.exec()

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())
