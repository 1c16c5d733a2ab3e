import math
from typing import List

from cardtable_engine.core.models import DeckSection, Dimensions, Position, Rect
from cardtable_engine.core.validation import require_count, require_present


class LayoutGenerator:
    """
    Calcule les positions initiales des cartes en grille quasi carrée.
    Les cartes sont réparties uniformément entre le bord gauche/haut et le bord droit/bas.
    """

    @staticmethod
    def layout(card_count, bounds: Rect, card_dimensions: Dimensions) -> List[Position]:
        count = require_count(card_count, "Nombre de cartes")
        require_present(bounds, "bounds")
        require_present(card_dimensions, "card_dimensions")

        if count == 0:
            return []

        cols = math.ceil(math.sqrt(count))
        rows = math.ceil(count / cols)

        # Espace libre une fois la carte posée (jamais négatif : section plus petite que la carte)
        available_w = max(0, bounds.width - card_dimensions.width)
        available_h = max(0, bounds.height - card_dimensions.height)

        spacing_x = available_w / (cols - 1) if cols > 1 else 0
        spacing_y = available_h / (rows - 1) if rows > 1 else 0

        positions = []
        for i in range(count):
            col = i % cols
            row = i // cols
            positions.append(Position(bounds.x + col * spacing_x, bounds.y + row * spacing_y))

        return positions

    @staticmethod
    def for_section(section: DeckSection, card_dimensions: Dimensions) -> List[Position]:
        """Positions initiales des cartes d'une section de deck."""
        require_present(section, "deck section")
        return LayoutGenerator.layout(section.card_count, section.bounds, card_dimensions)
