from typing import Optional, Union
from dataclasses import dataclass

from cardtable_engine.core.consts import MAX_CARDS_PER_DECK, Z_INDEX_BASE
from cardtable_engine.core.exceptions import InvalidArgument


# =============================================================================
#  GÉOMÉTRIE (Coordonnées du terrain : origine en haut à gauche, Y vers le bas)
# =============================================================================

@dataclass(frozen=True)
class Position:
    """Coin haut-gauche d'un rectangle de la taille d'une carte."""
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def distance_sq(self, other: "Position") -> float:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2


@dataclass(frozen=True)
class Dimensions:
    """Taille fixe du terrain ou d'une carte (uniforme pour toutes les cartes)."""
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidArgument(f"Dimensions négatives : {self.width}x{self.height}")


@dataclass(frozen=True)
class Rect:
    """Région rectangulaire du terrain."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidArgument(f"Rect de taille négative : {self.width}x{self.height}")

    @property
    def origin(self) -> Position:
        return Position(self.x, self.y)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, x: float, y: float) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.bottom


@dataclass(frozen=True)
class DeckSection:
    """
    Sous-rectangle du terrain possédant un sous-ensemble de cartes.
    Invariant : 0 <= card_count <= max_cards.
    """
    id: int
    bounds: Rect
    card_count: int
    max_cards: int = MAX_CARDS_PER_DECK

    def __post_init__(self):
        if self.id < 0:
            raise InvalidArgument(f"Identifiant de section négatif : {self.id}")
        if not 0 <= self.card_count <= self.max_cards:
            raise InvalidArgument(
                f"Section {self.id} : {self.card_count} cartes hors de [0, {self.max_cards}]")


# =============================================================================
#  CONTENU DES CARTES (Type somme : Classic | CCG)
# =============================================================================

@dataclass(frozen=True)
class ClassicCard:
    """Carte à jouer classique (couleur + rang)."""
    suit: str
    rank: str

    @property
    def is_red(self) -> bool:
        return self.suit in ("♥", "♦")

    def __repr__(self):
        return f"[{self.rank}{self.suit}]"


@dataclass(frozen=True)
class CCGCard:
    """Carte de jeu à collectionner (nom, stats, avatar)."""
    name: str
    attack: int
    health: int
    description: str
    image_url: str

    def __repr__(self):
        return f"[{self.name} ({self.attack}/{self.health})]"


CardData = Union[ClassicCard, CCGCard]


# =============================================================================
#  ÉTAT DE SCÈNE
# =============================================================================

@dataclass
class CardState:
    """
    État complet d'une carte posée sur la table.
    Possédé par la scène : seuls les contrôleurs (drag, flip, empilement) le modifient.
    """
    card_id: int
    deck_id: int
    data: CardData
    position: Position
    z_index: int = Z_INDEX_BASE
    # Z-index de repos (celui qu'on retrouve après un drag sans empilement)
    resting_z_index: int = Z_INDEX_BASE
    flipped: bool = False
    draggable: bool = True

    def __repr__(self):
        return f"CardState(#{self.card_id} deck={self.deck_id} {self.data!r} @({self.position.x}, {self.position.y}) z={self.z_index})"


@dataclass(frozen=True)
class DragSession:
    """Sous-objet éphémère : n'existe qu'entre l'appui et le relâché du pointeur."""
    card_id: int
    # Écart pointeur/coin pour que la carte ne "saute" pas sous la souris
    pointer_start_offset: Position
    origin_bounds: Rect
    # Position de retour si le drag est abandonné
    start_position: Position
    pointer_start: Position


@dataclass(frozen=True)
class FlipGesture:
    """
    Mémoire de geste d'une carte (valeur immuable).
    Transformée uniquement par les fonctions pures de flip_manager.
    """
    last_click_timestamp: Optional[float] = None
    last_click_position: Optional[Position] = None
    press_position: Optional[Position] = None
    # Le pointeur s'est éloigné de l'appui au-delà du seuil pendant ce cycle
    travelled: bool = False
    animating: bool = False


@dataclass(frozen=True)
class CardSnapshot:
    """Instantané observable d'une carte (ce que la couche de rendu affiche)."""
    card_id: int
    deck_id: int
    data: CardData
    position: Position
    z_index: int
    flipped: bool
    dragging: bool
    animating: bool
