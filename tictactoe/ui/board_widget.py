from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, init
from ..view_model import render

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_LINE_COLOR = QColor("lime")


class BoardWidget(QWidget):
    """
    custom widget to draw a BoardView and turn clicks into cell coords
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.view = render(init())   # snapshot being drawn
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def set_view(self, view):
        # new snapshot, repaint
        self.view = view
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def _cell_center(self, pos, ox, oy, cell_size):
        return QPointF(ox + pos.col*cell_size + cell_size/2,
                       oy + pos.row*cell_size + cell_size/2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            rad = cell_size/2 * 0.7
            for cell in self.view.cells:
                if not cell.glyph:
                    continue
                c = self._cell_center(cell.position, ox, oy, cell_size)
                if cell.glyph == "X":
                    painter.setPen(QPen(X_COLOR, 4))
                    painter.drawLine(QPointF(c.x()-rad, c.y()-rad), QPointF(c.x()+rad, c.y()+rad))
                    painter.drawLine(QPointF(c.x()+rad, c.y()-rad), QPointF(c.x()-rad, c.y()+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(c, rad, rad)
            # strike through the winning line
            line = self.view.winning_line
            if line:
                painter.setPen(QPen(WIN_LINE_COLOR, 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(self._cell_center(line[0], ox, oy, cell_size),
                                 self._cell_center(line[-1], ox, oy, cell_size))
        finally:
            painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), or None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp against float rounding at the far edge
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row, col

    def mouseReleaseEvent(self, event):
        """
        emit cell_clicked only for squares that still take a move
        """
        hit = self.cell_at(event.position().x(), event.position().y())
        if hit is None:
            return
        row, col = hit
        if not self.view.cells[row*BOARD_SIZE + col].playable:
            return
        self.cell_clicked.emit(row, col)
