import json
import os
from typing import Tuple

from cardtable_engine.core.consts import (
    CardType, DEFAULT_CARDS_PER_DECK, MAX_CARDS_PER_DECK, MAX_DECK_COUNT, MIN_DECK_COUNT
)
from cardtable_engine.core.game_config import GameConfig, build_game_config
from cardtable_engine.core.models import Dimensions
from cardtable_engine.utils.logger import log_error, log_info
from constants import PATH_SETTINGS


class ConfigurationService:
    """
    Service unique gérant la persistance et la validation des préférences du bac à sable.
    Seules les préférences sont sauvegardées, jamais l'état de la table.
    """
    FILE_PATH = PATH_SETTINGS

    def __init__(self):
        # Valeurs par défaut
        self.deck_count: int = MIN_DECK_COUNT
        self.cards_per_deck: int = DEFAULT_CARDS_PER_DECK
        self.card_type: CardType = CardType.CLASSIC
        self.debug_mode: bool = False
        self.field_size: Tuple[int, int] = (800, 600)
        self.card_size: Tuple[int, int] = (80, 120)
        self.resolution: Tuple[int, int] = (1280, 720)
        self.fullscreen: bool = False

        self.load()

    def load(self):
        """Charge et valide les paramètres depuis le disque."""
        if not os.path.exists(self.FILE_PATH):
            return

        try:
            with open(self.FILE_PATH, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log_error(f"⚠️ Erreur lors du chargement des paramètres : {e}")
            return

        if not isinstance(data, dict):
            log_error(f"⚠️ Fichier de paramètres ignoré (format inattendu) : {self.FILE_PATH}")
            return

        self.debug_mode = bool(data.get("debug_mode", False))
        self.fullscreen = bool(data.get("fullscreen", False))
        self.resolution = self._read_size(data.get("resolution"), self.resolution)
        self.field_size = self._read_size(data.get("field_size"), self.field_size)
        self.card_size = self._read_size(data.get("card_size"), self.card_size)

        # Validation du nombre de decks
        raw_decks = data.get("deck_count", MIN_DECK_COUNT)
        if type(raw_decks) is int and MIN_DECK_COUNT <= raw_decks <= MAX_DECK_COUNT:
            self.deck_count = raw_decks

        # Validation du nombre de cartes (1-15 dans l'interface)
        raw_cards = data.get("cards_per_deck", DEFAULT_CARDS_PER_DECK)
        if type(raw_cards) is int and 1 <= raw_cards <= MAX_CARDS_PER_DECK:
            self.cards_per_deck = raw_cards

        # Validation du type de carte
        try:
            self.card_type = CardType(data.get("card_type", CardType.CLASSIC.value))
        except ValueError:
            self.card_type = CardType.CLASSIC

    def save(self):
        """Persiste les paramètres actuels sur le disque."""
        data = {
            "deck_count": self.deck_count,
            "cards_per_deck": self.cards_per_deck,
            "card_type": self.card_type.value,
            "debug_mode": self.debug_mode,
            "field_size": list(self.field_size),
            "card_size": list(self.card_size),
            "resolution": list(self.resolution),
            "fullscreen": self.fullscreen
        }
        try:
            with open(self.FILE_PATH, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
            log_info(f"Paramètres sauvegardés : {self.deck_count} deck(s), {self.cards_per_deck} carte(s)")
        except OSError as e:
            log_error(f"❌ Erreur lors de la sauvegarde : {e}")

    def to_game_config(self) -> GameConfig:
        """Traduit les préférences en configuration de scène (validée)."""
        return build_game_config(
            deck_count=self.deck_count,
            cards_per_deck=self.cards_per_deck,
            field_dimensions=Dimensions(*self.field_size),
            card_dimensions=Dimensions(*self.card_size)
        )

    @staticmethod
    def _read_size(raw, default: Tuple[int, int]) -> Tuple[int, int]:
        if isinstance(raw, (list, tuple)) and len(raw) == 2 and all(isinstance(v, int) and v > 0 for v in raw):
            return tuple(raw)
        return default
