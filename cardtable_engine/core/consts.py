from enum import Enum


# =============================================================================
#  LIMITES & Z-INDEX
# =============================================================================

MAX_CARDS_PER_DECK = 15
DEFAULT_CARDS_PER_DECK = 3
MIN_DECK_COUNT = 1
MAX_DECK_COUNT = 2

Z_INDEX_BASE = 10
Z_INDEX_DRAG = 1000

# =============================================================================
#  GESTES & ANIMATIONS (millisecondes / pixels)
# =============================================================================

# Deux clics séparés de moins de 300 ms forment un double-clic
DOUBLE_CLICK_WINDOW_MS = 300
# Durée de l'animation de retournement (Animating -> Settled)
FLIP_ANIMATION_MS = 600
# En dessous de ce déplacement, un appui/relâché est un clic et non un drag
CLICK_SLOP_PX = 5


class CardType(str, Enum):
    """Famille de contenu générée pour les cartes."""
    CLASSIC = "classic"
    CCG = "ccg"


class DragStatus(str, Enum):
    """États de la machine à états de drag (par carte)."""
    IDLE = "IDLE"
    DRAGGING = "DRAGGING"
    DISABLED = "DISABLED"


class FlipStatus(str, Enum):
    """États de la machine à états de retournement (par carte)."""
    SETTLED = "SETTLED"
    ANIMATING = "ANIMATING"
