from dataclasses import dataclass, field
from typing import List

from cardtable_engine.core.consts import (
    DEFAULT_CARDS_PER_DECK, MAX_CARDS_PER_DECK, MAX_DECK_COUNT, MIN_DECK_COUNT,
    Z_INDEX_BASE, Z_INDEX_DRAG
)
from cardtable_engine.core.exceptions import InvalidArgument
from cardtable_engine.core.models import DeckSection, Dimensions, Rect
from cardtable_engine.core.validation import require_count, require_present


@dataclass(frozen=True)
class ZIndexConfig:
    """Z-index de repos (base) et z-index fixe d'une carte en cours de drag."""
    base: int = Z_INDEX_BASE
    drag: int = Z_INDEX_DRAG

    def __post_init__(self):
        if self.drag <= self.base:
            raise InvalidArgument(f"Le z-index de drag ({self.drag}) doit dépasser la base ({self.base})")


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration d'une scène : decks, terrain, cartes, z-index.
    Validée à la construction : une config existante est toujours cohérente.
    """
    deck_count: int
    deck_sections: List[DeckSection]
    field_dimensions: Dimensions
    card_dimensions: Dimensions
    z_index: ZIndexConfig = field(default_factory=ZIndexConfig)

    def __post_init__(self):
        _require_deck_count(self.deck_count)
        require_present(self.field_dimensions, "field_dimensions")
        require_present(self.card_dimensions, "card_dimensions")
        if not self.deck_sections or len(self.deck_sections) != self.deck_count:
            raise InvalidArgument(
                f"{self.deck_count} deck(s) annoncé(s) mais {len(self.deck_sections or [])} section(s) fournie(s)")

    @property
    def total_cards(self) -> int:
        return sum(s.card_count for s in self.deck_sections)

    def section(self, deck_id: int) -> DeckSection:
        for s in self.deck_sections:
            if s.id == deck_id:
                return s
        raise InvalidArgument(f"Section de deck inconnue : {deck_id}")


def _require_deck_count(deck_count) -> int:
    message = f"Le nombre de decks doit être 1 ou 2 (reçu : {deck_count!r})"
    if isinstance(deck_count, bool) or not isinstance(deck_count, (int, float)):
        raise InvalidArgument(message)
    if isinstance(deck_count, float) and not deck_count.is_integer():
        raise InvalidArgument(message)
    if not MIN_DECK_COUNT <= deck_count <= MAX_DECK_COUNT:
        raise InvalidArgument(message)
    return int(deck_count)


def generate_deck_sections(deck_count, field_dimensions: Dimensions,
                           card_count: int = DEFAULT_CARDS_PER_DECK) -> List[DeckSection]:
    """
    Découpe le terrain en sections de deck.
    1 deck : tout le terrain. 2 decks : moitiés gauche/droite, sans espace ni recouvrement.
    """
    count = _require_deck_count(deck_count)
    require_present(field_dimensions, "field_dimensions")
    cards = require_count(card_count, "Nombre de cartes", maximum=MAX_CARDS_PER_DECK)

    if count == 1:
        return [DeckSection(0, Rect(0, 0, field_dimensions.width, field_dimensions.height), cards)]

    half_width = field_dimensions.width / 2
    return [
        DeckSection(0, Rect(0, 0, half_width, field_dimensions.height), cards),
        DeckSection(1, Rect(half_width, 0, half_width, field_dimensions.height), cards),
    ]


def build_game_config(deck_count=1,
                      cards_per_deck=DEFAULT_CARDS_PER_DECK,
                      field_dimensions: Dimensions = Dimensions(800, 600),
                      card_dimensions: Dimensions = Dimensions(80, 120),
                      z_index: ZIndexConfig = ZIndexConfig()) -> GameConfig:
    """Construit une GameConfig complète à partir de la surface de configuration exposée."""
    sections = generate_deck_sections(deck_count, field_dimensions, cards_per_deck)
    return GameConfig(
        deck_count=int(deck_count),
        deck_sections=sections,
        field_dimensions=field_dimensions,
        card_dimensions=card_dimensions,
        z_index=z_index
    )


DEFAULT_GAME_CONFIG = build_game_config()
