from datetime import datetime
from typing import Tuple

from PyQt5 import QtCore, QtWidgets

from fleetcommand.domain.config import HORIZONTAL, PHASE_PLACEMENT
from fleetcommand.domain.fleet import all_placed
from fleetcommand.game.narrative import describe_event
from fleetcommand.game.state import GameEvent, GameState
from fleetcommand.ui.theme import Theme


class ControlsPanel(QtWidgets.QWidget):
    """Battle log, shipyard and game buttons."""

    ship_selected = QtCore.pyqtSignal(str)
    orientation_toggled = QtCore.pyqtSignal()
    auto_place_requested = QtCore.pyqtSignal()
    reset_requested = QtCore.pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._shown_events: Tuple[GameEvent, ...] = tuple()
        self._build_ui()

    def _build_ui(self):
        self.setMinimumWidth(320)
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        log_group = QtWidgets.QGroupBox("Bitácora de Batalla")
        log_layout = QtWidgets.QVBoxLayout(log_group)
        self.log_list = QtWidgets.QListWidget()
        self.log_list.setMinimumHeight(160)
        self.log_list.setWordWrap(True)
        self.log_list.setStyleSheet(f"font-family: monospace; background-color: {Theme.BG_PANEL};")
        log_layout.addWidget(self.log_list)
        layout.addWidget(log_group)

        self.shipyard_group = QtWidgets.QGroupBox("Astillero")
        shipyard_layout = QtWidgets.QVBoxLayout(self.shipyard_group)

        tools_row = QtWidgets.QHBoxLayout()
        self.auto_place_btn = QtWidgets.QPushButton("Colocar aleatoriamente")
        self.auto_place_btn.clicked.connect(self.auto_place_requested)
        self.orientation_btn = QtWidgets.QPushButton("Horiz")
        self.orientation_btn.setToolTip("Cambiar orientación")
        self.orientation_btn.clicked.connect(self.orientation_toggled)
        tools_row.addWidget(self.auto_place_btn)
        tools_row.addWidget(self.orientation_btn)
        shipyard_layout.addLayout(tools_row)

        self.ship_list_layout = QtWidgets.QVBoxLayout()
        self.ship_list_layout.setSpacing(4)
        shipyard_layout.addLayout(self.ship_list_layout)

        self.fleet_ready_label = QtWidgets.QLabel("¡Flota lista para el despliegue!")
        self.fleet_ready_label.setAlignment(QtCore.Qt.AlignCenter)
        self.fleet_ready_label.setStyleSheet(f"color: {Theme.VICTORY_TEXT}; font-weight: bold;")
        self.fleet_ready_label.hide()
        shipyard_layout.addWidget(self.fleet_ready_label)

        layout.addWidget(self.shipyard_group)
        layout.addStretch(1)

        self.reset_btn = QtWidgets.QPushButton("Reiniciar Misión")
        self.reset_btn.setStyleSheet(
            f"color: {Theme.RESET_TEXT}; border: 1px solid {Theme.RESET_BORDER}; padding: 10px; font-weight: bold;"
        )
        self.reset_btn.clicked.connect(self.reset_requested)
        layout.addWidget(self.reset_btn)

    def _make_ship_handler(self, ship_id: str):
        def handler():
            self.ship_selected.emit(ship_id)

        return handler

    def _rebuild_ship_buttons(self, state: GameState) -> None:
        while self.ship_list_layout.count():
            item = self.ship_list_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        for ship in state.player_fleet:
            if ship.placed:
                continue
            btn = QtWidgets.QPushButton(f"{ship.name}  {'■' * ship.size}")
            if ship.id == state.selected_ship_id:
                btn.setStyleSheet(f"color: {Theme.TEXT_ACCENT}; border: 1px solid {Theme.ACTIVE_BORDER}; font-weight: bold;")
            btn.clicked.connect(self._make_ship_handler(ship.id))
            self.ship_list_layout.addWidget(btn)

        self.fleet_ready_label.setVisible(all_placed(state.player_fleet))

    def _update_log(self, state: GameState) -> None:
        n = len(self._shown_events)
        if state.log[:n] != self._shown_events:
            self.log_list.clear()
            n = 0
        ts = datetime.now().strftime("%H:%M:%S")
        for event in state.log[n:]:
            # Newest entries go on top.
            self.log_list.insertItem(0, f"[{ts}] {describe_event(event)}")
        self._shown_events = state.log

    def set_state(self, state: GameState) -> None:
        self._update_log(state)
        placing = state.phase == PHASE_PLACEMENT
        self.shipyard_group.setVisible(placing)
        if placing:
            self.orientation_btn.setText("Horiz" if state.orientation == HORIZONTAL else "Vert")
            self._rebuild_ship_buttons(state)
