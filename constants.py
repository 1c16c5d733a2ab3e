import os
import sys

# --- CHEMIN DE BASE ---
# Détection automatique de l'environnement (Dev vs Exe)
if getattr(sys, 'frozen', False):
    # Mode EXE : settings.json est créé à côté de l'exécutable
    BASE_DIR = os.path.dirname(sys.executable)
else:
    # Mode DEV : dossier du projet
    BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# --- CONFIGURATION INITIALE ---
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
WINDOW_TITLE = "Card Game Engine"
FPS_CAP = 60

# --- MISE EN PAGE DE LA TABLE ---
# Bandeau du haut (titre + consignes) et marge autour du terrain
HEADER_HEIGHT = 90
FIELD_MARGIN = 20

INSTRUCTIONS = [
    "Click and drag any card to move it around the field.",
    "Double-click any card to flip it over.",
    "Drag one card over another and release to stack them!",
]

# Chemin du fichier de préférences (Externe -> BASE_DIR)
PATH_SETTINGS = os.path.join(BASE_DIR, "settings.json")
