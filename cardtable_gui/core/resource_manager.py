import pygame
from typing import Tuple

from cardtable_engine.core.models import CCGCard
from cardtable_engine.infrastructure.card_factory import avatar_color
from cardtable_engine.utils.logger import log_error


class ResourceManager:
    """
    Singleton responsable du chargement et du cache des Fontes et des avatars.
    Les avatars CCG ne sont pas téléchargés : on génère une vignette hors-ligne
    teintée avec la couleur de fond encodée dans l'URL.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ResourceManager, cls).__new__(cls)
            cls._instance._init_manager()
        return cls._instance

    def _init_manager(self):
        self.avatar_cache = {}
        self.fonts_cache = {}

        # Initialisation Font
        if not pygame.font.get_init():
            pygame.font.init()

    def get_font(self, size: int, bold: bool = False, name: str = "Arial") -> pygame.font.Font:
        key = (name, size, bold)
        if key in self.fonts_cache:
            return self.fonts_cache[key]

        try:
            # Essaie de charger la font système
            font = pygame.font.SysFont(name, size, bold=bold)
        except Exception as e:
            log_error(f"⚠️ Font '{name}' indisponible ({e}), fallback sur la font par défaut.")
            font = pygame.font.Font(None, size)

        self.fonts_cache[key] = font
        return font

    def get_avatar(self, card: CCGCard, size: Tuple[int, int]) -> pygame.Surface:
        """Vignette d'avatar (cache par URL et taille)."""
        key = (card.image_url, size)
        if key in self.avatar_cache:
            return self.avatar_cache[key]

        surf = pygame.Surface(size)
        surf.fill(self.hex_to_rgb(avatar_color(card.image_url)))

        # Motif identicon minimal : grille symétrique dérivée de la graine
        cell_w, cell_h = max(1, size[0] // 5), max(1, size[1] // 5)
        seed = sum(ord(c) for c in card.image_url)
        for row in range(5):
            for col in range(3):
                if (seed >> (row * 3 + col)) & 1:
                    for c in {col, 4 - col}:
                        pygame.draw.rect(surf, (255, 255, 255), (c * cell_w, row * cell_h, cell_w, cell_h))

        self.avatar_cache[key] = surf
        return surf

    @staticmethod
    def hex_to_rgb(value) -> Tuple[int, int, int]:
        """'ff6b6b' -> (255, 107, 107). Gris neutre si la couleur est absente ou invalide."""
        try:
            return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))
        except (TypeError, ValueError):
            return (128, 128, 128)
