import os
from datetime import datetime

from fleetcommand.domain.config import DEBUG_ENV_VAR, DEBUG_LOG_ENV_VAR, DEFAULT_DEBUG_LOG_PATH

# -----------------------------
# Debug helpers (enable with --debug or env FLEETCOMMAND_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = False
DEBUG_LOG_PATH = os.environ.get(DEBUG_LOG_ENV_VAR, "").strip() or DEFAULT_DEBUG_LOG_PATH


def env_debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "on"}


def debug_log(line: str) -> None:
    """Append a timestamped line to the debug log; file errors are ignored."""
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    try:
        with open(DEBUG_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {line}\n")
    except OSError:
        pass


def debug_event(
    parent,
    title: str,
    message: str,
    details: str = "",
    *,
    force_popup: bool = False,
    level: str = "info",
) -> None:
    """Log a debug event and optionally show a popup."""
    debug_log(f"{level.upper()} | {title} | {message}")
    if details:
        for ln in details.splitlines():
            debug_log(f"    {ln}")

    if not (DEBUG_ENABLED or force_popup):
        return

    # Qt is only needed for the popup; the engine logs without it.
    from PyQt5 import QtWidgets

    box = QtWidgets.QMessageBox(parent)
    box.setWindowTitle(title)
    box.setText(message)
    if details:
        box.setDetailedText(details)
    if level == "error":
        box.setIcon(QtWidgets.QMessageBox.Critical)
    elif level == "warning":
        box.setIcon(QtWidgets.QMessageBox.Warning)
    else:
        box.setIcon(QtWidgets.QMessageBox.Information)
    box.exec_()
