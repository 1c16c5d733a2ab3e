"""
Fichier unique de définition des couleurs.
Tout changement ici se répercute sur l'ensemble de l'application.
"""

# =============================================================================
# 1. PALETTE BRUTE (Raw Definitions)
# =============================================================================
_WHITE      = (240, 240, 240)
_BLACK      = (15, 15, 20)
_GREY_DARK  = (40, 44, 52)
_GREY_LIGHT = (171, 178, 191)

# Thème "Tapis de jeu"
_FELT_GREEN = (26, 94, 58)     # Terrain
_DEEP_GREEN = (16, 48, 34)     # Fond fenêtre
_SOFT_BLUE  = (50, 60, 80)     # Fond widgets
_NEON_BLUE  = (97, 175, 239)   # Info / Primary
_NEON_GOLD  = (229, 192, 123)  # Drag
_NEON_RED   = (214, 48, 49)    # Cœur / Carreau

# =============================================================================
# 2. COULEURS SÉMANTIQUES (Usage Contextuel)
# Utilisez UNIQUEMENT celles-ci dans le code des écrans/widgets
# =============================================================================

# --- GÉNÉRAL ---
BG_COLOR       = _DEEP_GREEN
FIELD_COLOR    = _FELT_GREEN
FIELD_BORDER   = (60, 130, 90)
SECTION_DIVIDER = (200, 220, 200)
TEXT_PRIMARY   = _WHITE
TEXT_SECONDARY = _GREY_LIGHT
ACCENT         = _NEON_BLUE

# --- BOUTONS (États) ---
BTN_SURFACE  = _SOFT_BLUE
BTN_HOVER    = _NEON_BLUE
BTN_BORDER   = _WHITE
BTN_FOCUS    = _NEON_GOLD     # Contour au survol, comme la carte tirée
BTN_DANGER   = (100, 50, 50)
STATUS_OK    = (152, 195, 121)

# --- CARTES ---
CARD_FACE      = (250, 250, 245)
CARD_BORDER    = (80, 80, 80)
CARD_INK_BLACK = _BLACK
CARD_INK_RED   = _NEON_RED
CARD_BACK      = (44, 62, 140)
CARD_BACK_PATTERN = (90, 110, 190)
CARD_DRAG_GLOW = _NEON_GOLD

CCG_HEADER   = (52, 31, 90)
CCG_FOOTER   = (30, 30, 40)
CCG_ATTACK   = (230, 126, 34)
CCG_HEALTH   = (192, 57, 43)
