from typing import List, Optional, Union
from urllib.parse import parse_qs, quote, urlparse

from cardtable_engine.core.consts import CardType, MAX_CARDS_PER_DECK
from cardtable_engine.core.exceptions import InvalidArgument
from cardtable_engine.core.models import CardData, CCGCard, ClassicCard
from cardtable_engine.core.validation import require_count

SUITS = ["♠", "♥", "♦", "♣"]
RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]

# Table ordonnée des archétypes CCG (nom, attaque, vie, description)
CCG_ARCHETYPES = [
    ("Flame Warrior", 3, 2, "A fierce warrior wielding flames of destruction."),
    ("Crystal Guardian", 1, 4, "Ancient protector of the crystal realm."),
    ("Shadow Assassin", 4, 1, "Strikes from the darkness with deadly precision."),
    ("Thunder Mage", 2, 3, "Commands the power of lightning and storm."),
    ("Stone Golem", 1, 5, "Massive construct of living rock and earth."),
    ("Wind Dancer", 3, 2, "Swift and graceful, one with the breeze."),
    ("Frost Elemental", 2, 3, "Embodiment of winter's bitter cold."),
    ("Solar Phoenix", 4, 2, "Reborn from ashes in blazing glory."),
    ("Void Walker", 3, 3, "Traveler between dimensions and realities."),
    ("Nature Spirit", 2, 4, "Guardian of the ancient forest wisdom."),
]

AVATAR_PALETTE = ["ff6b6b", "4ecdc4", "45b7d1", "f9ca24", "6c5ce7",
                  "a0e7e5", "feca57", "ff9ff3", "54a0ff", "fc427b"]
AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/identicon/svg?seed={seed}&backgroundColor={color}"


def avatar_url(seed: str) -> str:
    """
    URL d'avatar déterministe : même graine => même URL.
    La couleur de fond est choisie par la somme des codes caractères modulo la palette.
    """
    color = AVATAR_PALETTE[sum(ord(c) for c in seed) % len(AVATAR_PALETTE)]
    # Même jeu de caractères réservés qu'encodeURIComponent
    return AVATAR_URL_TEMPLATE.format(seed=quote(seed, safe="-_.!~*'()"), color=color)


def avatar_color(url: str) -> Optional[str]:
    """Récupère la couleur hexadécimale encodée dans une URL d'avatar (None si absente)."""
    values = parse_qs(urlparse(url).query).get("backgroundColor")
    return values[0] if values else None


class CardFactory:
    """
    Service responsable de la génération du contenu des cartes.
    La génération est une fonction pure de (index, type de carte).
    """

    @staticmethod
    def parse_card_type(card_type: Union[CardType, str]) -> CardType:
        try:
            return CardType(card_type)
        except ValueError:
            raise InvalidArgument(f"Type de carte inconnu : {card_type!r}")

    @staticmethod
    def generate(count, card_type: Union[CardType, str] = CardType.CLASSIC,
                 max_cards: Optional[int] = MAX_CARDS_PER_DECK) -> List[CardData]:
        """
        Génère `count` cartes. Les cycles couleur (4) et rang (13) sont indépendants,
        les archétypes CCG bouclent tous les 10.
        """
        count = require_count(count, "Nombre de cartes", maximum=max_cards)
        kind = CardFactory.parse_card_type(card_type)

        if kind == CardType.CLASSIC:
            return [CardFactory.classic_card(i) for i in range(count)]
        return [CardFactory.ccg_card(i) for i in range(count)]

    @staticmethod
    def classic_card(index: int) -> ClassicCard:
        return ClassicCard(suit=SUITS[index % len(SUITS)], rank=RANKS[index % len(RANKS)])

    @staticmethod
    def ccg_card(index: int) -> CCGCard:
        name, attack, health, description = CCG_ARCHETYPES[index % len(CCG_ARCHETYPES)]
        # L'URL dépend de l'instance : deux copies d'un archétype n'ont pas le même avatar
        return CCGCard(
            name=name,
            attack=attack,
            health=health,
            description=description,
            image_url=avatar_url(f"{name}-{index}")
        )
