import random
import sys

from PyQt5 import QtCore, QtGui, QtWidgets

from fleetcommand.domain.config import OPPONENT, PHASE_GAME_OVER, PHASE_PLACEMENT, PHASE_PLAYING, PLAYER
from fleetcommand.engine.errors import EngineError
from fleetcommand.game.actions import AutoPlace, CellClick, OpponentTurn, Reset, SelectShip, ToggleOrientation
from fleetcommand.game.orchestrator import accepts_player_input, apply_action, opponent_delay_ms, placement_preview
from fleetcommand.game.state import GameState, new_game
from fleetcommand.ui.board_widget import BoardWidget
from fleetcommand.ui.controls import ControlsPanel
from fleetcommand.ui.theme import Theme
from fleetcommand.utils import debug


def apply_dark_palette(app: QtWidgets.QApplication):
    """Apply a consistent dark theme using the Theme color palette."""
    QtWidgets.QApplication.setStyle("Fusion")
    palette = QtGui.QPalette()

    palette.setColor(QtGui.QPalette.Window, QtGui.QColor(Theme.BG_DARK))
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(Theme.BG_PANEL))
    palette.setColor(QtGui.QPalette.AlternateBase, QtGui.QColor(Theme.BG_PANEL))

    palette.setColor(QtGui.QPalette.WindowText, QtGui.QColor(Theme.TEXT_MAIN))
    palette.setColor(QtGui.QPalette.Text, QtGui.QColor(Theme.TEXT_MAIN))
    palette.setColor(QtGui.QPalette.ButtonText, QtGui.QColor(Theme.TEXT_MAIN))

    palette.setColor(QtGui.QPalette.Button, QtGui.QColor(Theme.BG_BUTTON))
    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(Theme.TEXT_ACCENT))
    palette.setColor(QtGui.QPalette.HighlightedText, QtCore.Qt.black)

    app.setPalette(palette)


class MainWindow(QtWidgets.QMainWindow):
    FOOTER_TEXT = {
        PHASE_PLACEMENT: "INSTRUCCIONES: Seleccione un barco y haga clic en la cuadrícula aliada para posicionarlo.",
        PLAYER: "TURNO: Seleccione una coordenada en el Radar Enemigo para atacar.",
        OPPONENT: "TURNO ENEMIGO: Calculando trayectoria de impacto...",
    }

    def __init__(self, rng: random.Random = None):
        super().__init__()
        self.setWindowTitle("Battleship Command")
        self.resize(1200, 640)

        self.rng = rng if rng is not None else random.Random()
        self.state: GameState = new_game()

        # Opponent fires after a short pause; one pending shot at a time.
        self._opponent_timer = QtCore.QTimer(self)
        self._opponent_timer.setSingleShot(True)
        self._opponent_timer.timeout.connect(self._on_opponent_timer)

        self._build_ui()
        self._render()

    def _build_ui(self):
        central = QtWidgets.QWidget()
        root_layout = QtWidgets.QVBoxLayout(central)
        root_layout.setContentsMargins(16, 16, 16, 16)
        root_layout.setSpacing(12)

        header_row = QtWidgets.QHBoxLayout()
        title = QtWidgets.QLabel("BATTLESHIP COMMAND")
        f = title.font()
        f.setPointSize(f.pointSize() + 8)
        f.setBold(True)
        title.setFont(f)
        title.setStyleSheet(f"color: {Theme.TEXT_ACCENT};")
        header_row.addWidget(title)
        header_row.addStretch(1)
        self.result_banner = QtWidgets.QLabel("")
        self.result_banner.hide()
        header_row.addWidget(self.result_banner)
        root_layout.addLayout(header_row)

        main_row = QtWidgets.QHBoxLayout()
        main_row.setSpacing(32)

        self.player_board = BoardWidget("Flota Aliada", reveal_ships=True)
        self.player_board.cell_clicked.connect(lambda x, y: self._dispatch(CellClick(x, y, PLAYER)))
        self.player_board.cell_hovered.connect(self._on_player_hover)
        self.player_board.hover_left.connect(self._clear_preview)
        main_row.addWidget(self.player_board)

        self.controls = ControlsPanel()
        self.controls.ship_selected.connect(lambda ship_id: self._dispatch(SelectShip(ship_id)))
        self.controls.orientation_toggled.connect(lambda: self._dispatch(ToggleOrientation()))
        self.controls.auto_place_requested.connect(lambda: self._dispatch(AutoPlace()))
        self.controls.reset_requested.connect(lambda: self._dispatch(Reset()))
        main_row.addWidget(self.controls)

        self.opponent_board = BoardWidget("Radar Enemigo", reveal_ships=False)
        self.opponent_board.cell_clicked.connect(lambda x, y: self._dispatch(CellClick(x, y, OPPONENT)))
        main_row.addWidget(self.opponent_board)

        root_layout.addLayout(main_row, stretch=1)

        self.footer_label = QtWidgets.QLabel("")
        self.footer_label.setAlignment(QtCore.Qt.AlignCenter)
        self.footer_label.setStyleSheet(f"color: {Theme.TEXT_LABEL}; font-family: monospace;")
        root_layout.addWidget(self.footer_label)

        self.setCentralWidget(central)

    # -----------------------------
    # Actions
    # -----------------------------
    def _dispatch(self, action) -> None:
        try:
            new_state = apply_action(self.state, action, self.rng)
        except EngineError as e:
            debug.debug_event(self, "Engine error", str(e), repr(action), force_popup=True, level="error")
            return
        if new_state is self.state:
            if isinstance(action, CellClick) and self.state.phase == PHASE_PLACEMENT:
                debug.debug_log(f"INFO | placement | rejected {self.state.selected_ship_id} at ({action.x}, {action.y})")
            return
        if isinstance(action, Reset):
            self._opponent_timer.stop()
            debug.debug_log("INFO | game | reset")
        elif self.state.phase == PHASE_PLACEMENT and new_state.phase == PHASE_PLAYING:
            debug.debug_log("INFO | game | battle started")
        elif new_state.phase == PHASE_GAME_OVER and self.state.phase != PHASE_GAME_OVER:
            debug.debug_log(f"INFO | game | {new_state.winner.lower()} wins")
        self.state = new_state
        self._render()
        self._schedule_opponent_turn()

    def _schedule_opponent_turn(self) -> None:
        if self.state.phase != PHASE_PLAYING or self.state.turn != OPPONENT:
            return
        if self._opponent_timer.isActive():
            return
        self._opponent_timer.start(opponent_delay_ms(self.rng))

    def _on_opponent_timer(self) -> None:
        self._dispatch(OpponentTurn())

    def _on_player_hover(self, x: int, y: int) -> None:
        coords, valid = placement_preview(self.state, x, y)
        self.player_board.set_preview(coords, valid)

    def _clear_preview(self) -> None:
        self.player_board.set_preview([], True)

    # -----------------------------
    # Rendering
    # -----------------------------
    def _render(self) -> None:
        state = self.state
        placing = state.phase == PHASE_PLACEMENT

        self.player_board.set_active(placing or (state.phase == PHASE_PLAYING and state.turn == OPPONENT))
        self.player_board.set_preview([], True)
        self.player_board.set_grid(state.player_grid)
        self.player_board.set_status_text("COORDENADAS DE RED: [SECURE]")

        self.opponent_board.set_active(accepts_player_input(state))
        self.opponent_board.set_grid(state.opponent_grid)
        self.opponent_board.setEnabled(not placing)
        self.opponent_board.set_status_text(
            "ESTADO DEL OBJETIVO: " + ("OFFLINE" if placing else "DETECTADO")
        )

        self.controls.set_state(state)

        if placing:
            self.footer_label.setText(self.FOOTER_TEXT[PHASE_PLACEMENT])
        elif state.phase == PHASE_PLAYING:
            self.footer_label.setText(self.FOOTER_TEXT[state.turn])
        else:
            self.footer_label.setText("")

        if state.phase == PHASE_GAME_OVER:
            won = state.winner == PLAYER
            bg = Theme.VICTORY_BG if won else Theme.DEFEAT_BG
            fg = Theme.VICTORY_TEXT if won else Theme.DEFEAT_TEXT
            self.result_banner.setText("VICTORIA" if won else "DERROTA")
            self.result_banner.setStyleSheet(
                f"background-color: {bg}; color: {fg}; border: 1px solid {fg};"
                "border-radius: 6px; padding: 6px 18px; font-size: 18px; font-weight: bold;"
            )
            self.result_banner.show()
        else:
            self.result_banner.hide()


def main():
    # Enable debug via flag or env var (FLEETCOMMAND_DEBUG=1)
    argv = list(sys.argv)
    if "--debug" in argv:
        debug.DEBUG_ENABLED = True
        argv.remove("--debug")
    if debug.env_debug_enabled():
        debug.DEBUG_ENABLED = True

    app = QtWidgets.QApplication(argv)
    apply_dark_palette(app)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
