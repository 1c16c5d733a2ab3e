import pytest

from cardtable_engine.core.exceptions import InvalidArgument
from cardtable_engine.core.game_config import (
    DEFAULT_GAME_CONFIG, GameConfig, ZIndexConfig, build_game_config, generate_deck_sections
)
from cardtable_engine.core.models import DeckSection, Dimensions, Rect


def test_default_config():
    cfg = DEFAULT_GAME_CONFIG
    assert cfg.deck_count == 1
    assert cfg.field_dimensions == Dimensions(800, 600)
    assert cfg.card_dimensions == Dimensions(80, 120)
    assert cfg.z_index == ZIndexConfig(base=10, drag=1000)
    assert cfg.deck_sections == [DeckSection(0, Rect(0, 0, 800, 600), 3, 15)]
    assert cfg.total_cards == 3


def test_two_decks_split_field_in_halves():
    sections = generate_deck_sections(2, Dimensions(800, 600))
    assert [s.bounds for s in sections] == [Rect(0, 0, 400, 600), Rect(400, 0, 400, 600)]
    assert [s.id for s in sections] == [0, 1]
    assert all(s.card_count == 3 for s in sections)


def test_single_deck_covers_field():
    sections = generate_deck_sections(1, Dimensions(1000, 500), card_count=7)
    assert sections == [DeckSection(0, Rect(0, 0, 1000, 500), 7)]


@pytest.mark.parametrize("bad", [0, 3, -1, 1.5, True, "2", None])
def test_invalid_deck_count(bad):
    with pytest.raises(InvalidArgument, match="nombre de decks doit être 1 ou 2"):
        generate_deck_sections(bad, Dimensions(800, 600))


def test_deck_count_integral_float_accepted():
    cfg = build_game_config(deck_count=2.0)
    assert cfg.deck_count == 2
    assert len(cfg.deck_sections) == 2


def test_invalid_cards_per_deck():
    with pytest.raises(InvalidArgument):
        build_game_config(cards_per_deck=16)
    with pytest.raises(InvalidArgument):
        build_game_config(cards_per_deck=-1)


def test_zindex_drag_must_exceed_base():
    with pytest.raises(InvalidArgument):
        ZIndexConfig(base=10, drag=10)


def test_section_lookup():
    cfg = build_game_config(deck_count=2)
    assert cfg.section(1).bounds == Rect(400, 0, 400, 600)
    with pytest.raises(InvalidArgument):
        cfg.section(5)


def test_sections_must_match_deck_count():
    sections = generate_deck_sections(1, Dimensions(800, 600))
    with pytest.raises(InvalidArgument):
        GameConfig(deck_count=2, deck_sections=sections,
                   field_dimensions=Dimensions(800, 600), card_dimensions=Dimensions(80, 120))


def test_deck_section_invariants():
    with pytest.raises(InvalidArgument):
        DeckSection(0, Rect(0, 0, 10, 10), 16)
    with pytest.raises(InvalidArgument):
        DeckSection(-1, Rect(0, 0, 10, 10), 1)


def test_negative_dimensions_rejected():
    with pytest.raises(InvalidArgument):
        Dimensions(-1, 10)
    with pytest.raises(InvalidArgument):
        Rect(0, 0, 10, -5)
