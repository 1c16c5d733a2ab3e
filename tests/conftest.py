from cardtable_engine.core.consts import CardType
from cardtable_engine.core.game_config import DEFAULT_GAME_CONFIG, build_game_config
from cardtable_engine.core.models import CardState, Dimensions, Position
from cardtable_engine.scene import CardTableScene
import pytest
import sys
import os
from unittest.mock import MagicMock

# Ajout du dossier racine au path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


class MockConfig:
    """Simulation du ConfigurationService pour les tests d'écrans."""

    def __init__(self):
        self.deck_count = 1
        self.cards_per_deck = 3
        self.card_type = CardType.CLASSIC
        self.debug_mode = False
        self.field_size = (800, 600)
        self.card_size = (80, 120)
        self.resolution = (1280, 720)
        self.fullscreen = False

    def to_game_config(self):
        return build_game_config(
            deck_count=self.deck_count,
            cards_per_deck=self.cards_per_deck,
            field_dimensions=Dimensions(*self.field_size),
            card_dimensions=Dimensions(*self.card_size)
        )

    def save(self):
        pass


@pytest.fixture
def mock_config():
    return MockConfig()


@pytest.fixture
def callbacks():
    """Trois callbacks espions (position finale, position live, retournement)."""
    return MagicMock(), MagicMock(), MagicMock()


@pytest.fixture
def scene(callbacks):
    """Fixture STANDARD : 1 deck, 3 cartes classiques, terrain 800x600."""
    on_change, on_live, on_flip = callbacks
    return CardTableScene(
        DEFAULT_GAME_CONFIG,
        on_position_change=on_change,
        on_position_live=on_live,
        on_flip_change=on_flip
    )


@pytest.fixture
def two_deck_scene(callbacks):
    """Fixture SPÉCIFIQUE : 2 decks de 3 cartes (sections 400x600 côte à côte)."""
    on_change, on_live, on_flip = callbacks
    return CardTableScene(
        build_game_config(deck_count=2, cards_per_deck=3),
        on_position_change=on_change,
        on_position_live=on_live,
        on_flip_change=on_flip
    )


@pytest.fixture
def create_card_state():
    """Factory Helper pour créer des états de carte."""

    def _builder(card_id=0, x=0, y=0, deck_id=0, z=10, data=None):
        return CardState(
            card_id=card_id,
            deck_id=deck_id,
            data=data,
            position=Position(x, y),
            z_index=z,
            resting_z_index=z
        )

    return _builder
