"""
Dugout Theme - Centralized color palette.

Color Philosophy:
- Infield dirt brown for screen backgrounds, outfield green for team cards
- Black chrome (top/bottom bars) with white text and icons
- Red is reserved for the favorite heart
"""

# =============================================================================
# PRIMARY COLORS
# =============================================================================
DIRT_BROWN = "#8B4513"         # Screen background
GRASS_GREEN = "#38471F"        # Team card background
CHALK_WHITE = "#FFFFFF"        # Text and icons on dark surfaces
CHROME_BLACK = "#000000"       # Top bar, bottom bar
HEART_RED = "#E53935"          # Favorite indicator

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_TITLE = CHALK_WHITE
TEXT_BODY = CHALK_WHITE
TEXT_MUTED = "#D7C4B0"         # Summaries on brown, placeholder text
TEXT_EMPTY_STATE = "#E8D9C8"

# =============================================================================
# SEMANTIC UI TOKENS (use these in views - change colors here only)
# =============================================================================
BG_SCREEN = DIRT_BROWN
BG_CARD = GRASS_GREEN
BG_BAR = CHROME_BLACK
BG_SEARCH_FIELD = CHALK_WHITE
BG_BANNER = "#323232"

ICON_BAR = CHALK_WHITE
ICON_FAVORITE_ON = HEART_RED
ICON_FAVORITE_OFF = CHALK_WHITE
ICON_DELETE = CHALK_WHITE

BUTTON_PRIMARY_BG = CHROME_BLACK
BUTTON_PRIMARY_TEXT = CHALK_WHITE

# =============================================================================
# SIZES
# =============================================================================
TOP_BAR_HEIGHT = 115
BOTTOM_BAR_HEIGHT = 56
AVATAR_RADIUS = 28
CARD_RADIUS = 16


def favorite_icon_color(is_favorite: bool) -> str:
    """Heart tint for a team card."""
    return ICON_FAVORITE_ON if is_favorite else ICON_FAVORITE_OFF


def team_initials(name: str) -> str:
    """Avatar fallback text: first letters of the last two words ("Boston Red Sox" -> "RS")."""
    words = [w for w in name.replace(".", " ").split() if w]
    return "".join(w[0].upper() for w in words[-2:]) or "?"
