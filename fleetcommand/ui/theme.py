class Theme:
    """Centralized colors used across the UI."""

    # Backgrounds
    BG_DARK = "#020617"  # slate-950
    BG_PANEL = "#0f172a"  # slate-900
    BG_BUTTON = "#1e293b"  # slate-800

    # Generic text
    TEXT_MAIN = "#e2e8f0"  # slate-200
    TEXT_LABEL = "#64748b"  # slate-500
    TEXT_ACCENT = "#22d3ee"  # cyan-400

    # Empty water
    EMPTY_BG = "#0f172a"
    EMPTY_BORDER = "#1e293b"

    # Own ships (never drawn on the opponent board)
    SHIP_BG = "#164e63"  # cyan-900
    SHIP_BORDER = "#06b6d4"

    # Miss styling
    MISS_BG = "#1e293b"
    MISS_TEXT = "#64748b"
    MISS_BORDER = "#334155"

    # Hit styling
    HIT_BG = "#4c0519"  # rose-950
    HIT_TEXT = "#f43f5e"  # rose-500
    HIT_BORDER = "#f43f5e"

    # Placement preview
    PREVIEW_VALID_BG = "#047857"  # emerald-700
    PREVIEW_INVALID_BG = "#9f1239"  # rose-800

    # Active board highlight
    ACTIVE_BORDER = "#22d3ee"
    INACTIVE_BORDER = "#334155"

    # Game-over banner
    VICTORY_BG = "#064e3b"
    VICTORY_TEXT = "#34d399"
    DEFEAT_BG = "#4c0519"
    DEFEAT_TEXT = "#fb7185"

    # Reset button
    RESET_TEXT = "#fb7185"
    RESET_BORDER = "#881337"
