"""Theme colors and color utilities for the UI."""


class HomeColors:
    """Light theme palette."""

    BG_TOP = "#fdf6ec"
    BG_BOTTOM = "#f3e7d3"

    PRIMARY = "#5b3cc4"
    PRIMARY_DARK = "#3a2386"

    COMPLETED = "#4CAF50"
    COMPLETED_BORDER = "#2E7D32"

    CARD_BG = "rgba(255, 255, 255, 0.85)"

    TEXT_PRIMARY = "#1f1a2e"
    TEXT_SECONDARY = "#4a4560"
    TEXT_MUTED = "#7d7894"

    GRID_LINE = "#2b2b2b"
    EXCLUDED_MARK = "#3b3b3b"


# Selector card color per board size; unknown sizes fall back to FALLBACK_SIZE_COLOR.
SIZE_COLORS = {
    7: "#FF6B6B",
    8: "#4ECDC4",
    9: "#45B7D1",
    10: "#96CEB4",
    11: "#FFEAA7",
}
FALLBACK_SIZE_COLOR = "#B0BEC5"


def size_color(size: int) -> str:
    return SIZE_COLORS.get(size, FALLBACK_SIZE_COLOR)


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"
