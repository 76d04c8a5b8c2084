from typing import Iterable, List, Optional, Set, Tuple

from PyQt5 import QtCore, QtGui, QtWidgets

from fleetcommand.domain.config import BOARD_SIZE, HIT, MISS, SHIP
from fleetcommand.domain.types import Coordinate, Grid
from fleetcommand.ui.theme import Theme


class BoardWidget(QtWidgets.QWidget):
    """A clickable grid of cells for one side's board."""

    cell_clicked = QtCore.pyqtSignal(int, int)
    cell_hovered = QtCore.pyqtSignal(int, int)
    hover_left = QtCore.pyqtSignal()

    CELL_SIZE = 36

    def __init__(self, title: str, reveal_ships: bool, board_size: int = BOARD_SIZE, parent=None):
        super().__init__(parent)
        self.board_size = board_size
        self.reveal_ships = reveal_ships
        self.active = False
        self._grid: Optional[Grid] = None
        self._preview: Set[Tuple[int, int]] = set()
        self._preview_valid = True
        self._build_ui(title)

    def _build_ui(self, title: str):
        outer = QtWidgets.QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(8)

        self.title_label = QtWidgets.QLabel(title.upper())
        f = self.title_label.font()
        f.setPointSize(f.pointSize() + 2)
        f.setBold(True)
        self.title_label.setFont(f)
        self.title_label.setAlignment(QtCore.Qt.AlignCenter)
        self.title_label.setStyleSheet(f"color: {Theme.TEXT_ACCENT};")
        outer.addWidget(self.title_label)

        self.board_frame = QtWidgets.QFrame()
        self.board_frame.installEventFilter(self)
        board_layout = QtWidgets.QGridLayout(self.board_frame)
        board_layout.setSpacing(2)
        board_layout.setContentsMargins(8, 8, 8, 8)

        for c in range(self.board_size):
            lbl = QtWidgets.QLabel(chr(ord("A") + c))
            lbl.setAlignment(QtCore.Qt.AlignCenter)
            lbl.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
            board_layout.addWidget(lbl, 0, c + 1)
        for r in range(self.board_size):
            lbl = QtWidgets.QLabel(str(r + 1))
            lbl.setAlignment(QtCore.Qt.AlignCenter)
            lbl.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
            board_layout.addWidget(lbl, r + 1, 0)

        self.cell_buttons: List[List[QtWidgets.QPushButton]] = []
        for r in range(self.board_size):
            row = []
            for c in range(self.board_size):
                btn = QtWidgets.QPushButton("")
                btn.setFixedSize(self.CELL_SIZE, self.CELL_SIZE)
                btn.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
                btn.setProperty("cell", (c, r))
                btn.installEventFilter(self)
                btn.clicked.connect(self._make_cell_handler(c, r))
                row.append(btn)
                board_layout.addWidget(btn, r + 1, c + 1)
            self.cell_buttons.append(row)

        outer.addWidget(self.board_frame, alignment=QtCore.Qt.AlignCenter)

        self.status_label = QtWidgets.QLabel("")
        self.status_label.setAlignment(QtCore.Qt.AlignCenter)
        self.status_label.setStyleSheet(f"color: {Theme.TEXT_LABEL}; font-family: monospace;")
        outer.addWidget(self.status_label)

    def _make_cell_handler(self, x: int, y: int):
        def handler():
            if self.active:
                self.cell_clicked.emit(x, y)

        return handler

    def eventFilter(self, obj, event):
        if event.type() == QtCore.QEvent.Enter and isinstance(obj, QtWidgets.QPushButton):
            cell = obj.property("cell")
            if cell is not None and self.active:
                self.cell_hovered.emit(int(cell[0]), int(cell[1]))
        elif event.type() == QtCore.QEvent.Leave and obj is self.board_frame:
            self.hover_left.emit()
        return super().eventFilter(obj, event)

    def set_status_text(self, text: str) -> None:
        self.status_label.setText(text)

    def set_active(self, active: bool) -> None:
        self.active = active
        border = Theme.ACTIVE_BORDER if active else Theme.INACTIVE_BORDER
        self.board_frame.setStyleSheet(
            f"QFrame {{ background-color: {Theme.BG_PANEL}; border: 1px solid {border}; border-radius: 4px; }}"
        )

    def set_preview(self, coords: Iterable[Coordinate], valid: bool) -> None:
        self._preview = {(c.x, c.y) for c in coords}
        self._preview_valid = valid
        self.update_board_view()

    def set_grid(self, grid: Grid) -> None:
        self._grid = grid
        self.update_board_view()

    def update_board_view(self):
        if self._grid is None:
            return
        for r in range(self.board_size):
            for c in range(self.board_size):
                btn = self.cell_buttons[r][c]
                status = self._grid[r][c].status
                text = ""

                if (c, r) in self._preview:
                    bg = Theme.PREVIEW_VALID_BG if self._preview_valid else Theme.PREVIEW_INVALID_BG
                    style = f"background-color: {bg}; border: 1px solid {Theme.EMPTY_BORDER};"
                elif status == HIT:
                    style = (
                        f"background-color: {Theme.HIT_BG}; color: {Theme.HIT_TEXT};"
                        f"border: 1px solid {Theme.HIT_BORDER}; font-weight: bold;"
                    )
                    text = "X"
                elif status == MISS:
                    style = (
                        f"background-color: {Theme.MISS_BG}; color: {Theme.MISS_TEXT};"
                        f"border: 1px solid {Theme.MISS_BORDER};"
                    )
                    text = "•"
                elif status == SHIP and self.reveal_ships:
                    style = f"background-color: {Theme.SHIP_BG}; border: 1px solid {Theme.SHIP_BORDER};"
                else:
                    # EMPTY, or an enemy ship that has not been found yet
                    style = f"background-color: {Theme.EMPTY_BG}; border: 1px solid {Theme.EMPTY_BORDER};"

                btn.setStyleSheet(style)
                btn.setText(text)
