from cardtable_engine.core.models import DeckSection, Dimensions, Position, Rect


class BoundsPolicy:
    """
    Appartenance et contrainte d'une carte dans une région rectangulaire.
    Utilisé au placement initial et à chaque mouvement de drag.
    """

    def __init__(self, rect: Rect, card_dimensions: Dimensions):
        self.rect = rect
        self.card_dimensions = card_dimensions

    @property
    def max_x(self) -> float:
        return self.rect.x + self.rect.width - self.card_dimensions.width

    @property
    def max_y(self) -> float:
        return self.rect.y + self.rect.height - self.card_dimensions.height

    def contains(self, position: Position) -> bool:
        """Vrai si toute la carte est dans la région (bords inclus)."""
        return (
            position.x >= self.rect.x and
            position.x + self.card_dimensions.width <= self.rect.right and
            position.y >= self.rect.y and
            position.y + self.card_dimensions.height <= self.rect.bottom
        )

    def clamp(self, position: Position) -> Position:
        """
        Ramène la position dans la région, axe par axe (max-of-min).
        Si la région est plus étroite que la carte, la plage se réduit à la borne basse.
        """
        x = max(self.rect.x, min(position.x, self.max_x))
        y = max(self.rect.y, min(position.y, self.max_y))
        return Position(x, y)


def is_position_in_section(position: Position, section: DeckSection, card_dimensions: Dimensions) -> bool:
    return BoundsPolicy(section.bounds, card_dimensions).contains(position)


def constrain_position_to_section(position: Position, section: DeckSection, card_dimensions: Dimensions) -> Position:
    return BoundsPolicy(section.bounds, card_dimensions).clamp(position)
