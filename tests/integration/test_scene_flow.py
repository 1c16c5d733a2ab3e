import pytest

from cardtable_engine.core.exceptions import InvalidArgument
from cardtable_engine.core.game_config import DEFAULT_GAME_CONFIG, build_game_config
from cardtable_engine.core.models import CCGCard, ClassicCard, Position
from cardtable_engine.managers.collision_manager import StackResult
from cardtable_engine.scene import CardTableScene


def double_click(scene, card_id, t0, x=10, y=10):
    scene.pointer_down(card_id, x, y, t0)
    scene.pointer_up(x, y, t0 + 50)
    scene.pointer_down(card_id, x, y, t0 + 150)
    scene.pointer_up(x, y, t0 + 200)


# =============================================================================
#  CONSTRUCTION
# =============================================================================

def test_default_scene_layout(scene):
    views = scene.views()
    assert [v.card_id for v in views] == [0, 1, 2]
    assert [v.position for v in views] == [Position(0, 0), Position(720, 0), Position(0, 480)]
    assert [v.data for v in views] == [ClassicCard("♠", "A"), ClassicCard("♥", "2"), ClassicCard("♦", "3")]
    assert all(v.z_index == 10 and not v.flipped and not v.dragging for v in views)


def test_two_deck_ids_are_global_and_contents_per_section(two_deck_scene):
    views = two_deck_scene.views()
    assert [v.card_id for v in views] == [0, 1, 2, 3, 4, 5]
    assert [v.deck_id for v in views] == [0, 0, 0, 1, 1, 1]
    # Les indices de génération repartent de 0 dans chaque section
    assert views[3].data == views[0].data
    assert views[3].position == Position(400, 0)


def test_ccg_scene():
    scene = CardTableScene(DEFAULT_GAME_CONFIG, card_type="ccg")
    assert all(isinstance(v.data, CCGCard) for v in scene.views())


def test_empty_deck_scene():
    scene = CardTableScene(build_game_config(cards_per_deck=0))
    assert scene.views() == []
    assert scene.card_at(10, 10) is None


def test_invalid_construction():
    with pytest.raises(InvalidArgument):
        CardTableScene(None)
    with pytest.raises(InvalidArgument):
        CardTableScene(DEFAULT_GAME_CONFIG, card_type="tarot")


# =============================================================================
#  DRAG
# =============================================================================

def test_drag_moves_card_and_reports_once(scene, callbacks):
    on_change, on_live, _ = callbacks

    scene.pointer_down(0, 10, 10, 0)
    assert scene.is_dragging(0)
    assert scene.view(0).z_index == 1000

    scene.pointer_move(110, 60)
    on_live.assert_called_with(0, Position(100, 50))
    on_change.assert_not_called()

    result = scene.pointer_up(110, 60, 100)

    assert result is None
    on_change.assert_called_once_with(0, Position(100, 50))
    view = scene.view(0)
    assert view.position == Position(100, 50)
    assert view.z_index == 10
    assert not view.dragging


def test_drag_is_clamped_to_section(scene, callbacks):
    on_change, _, _ = callbacks
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_move(2000, 2000)
    scene.pointer_up(2000, 2000, 100)
    on_change.assert_called_once_with(0, Position(720, 480))


def test_duplicate_move_events_are_harmless(scene, callbacks):
    _, on_live, _ = callbacks
    scene.pointer_down(0, 10, 10, 0)
    first = scene.pointer_move(200, 200)
    second = scene.pointer_move(200, 200)
    assert first == second == Position(190, 190)
    assert on_live.call_count == 2


def test_move_without_press_does_nothing(scene, callbacks):
    _, on_live, _ = callbacks
    assert scene.pointer_move(100, 100) is None
    assert scene.pointer_up(100, 100, 0) is None
    on_live.assert_not_called()


def test_click_is_not_a_drag(scene, callbacks):
    on_change, _, _ = callbacks
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_move(12, 11)
    scene.pointer_up(12, 11, 50)

    on_change.assert_not_called()
    assert scene.view(0).position == Position(0, 0)
    assert scene.view(0).z_index == 10


def test_second_press_while_engaged_is_ignored(scene):
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_down(1, 730, 10, 10)
    assert scene.pressed_card_id == 0
    assert not scene.is_dragging(1)


def test_cancel_snaps_back_without_callback(scene, callbacks):
    on_change, _, _ = callbacks
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_move(300, 300)
    assert scene.view(0).position == Position(290, 290)

    scene.pointer_cancel()

    on_change.assert_not_called()
    view = scene.view(0)
    assert view.position == Position(0, 0)
    assert view.z_index == 10
    assert not view.dragging
    assert scene.pointer_up(300, 300, 100) is None


def test_disable_mid_drag_snaps_back(scene, callbacks):
    on_change, _, _ = callbacks
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_move(300, 300)

    scene.set_draggable(0, False)

    assert scene.view(0).position == Position(0, 0)
    assert not scene.is_dragging(0)
    assert scene.pointer_move(400, 400) is None
    scene.pointer_up(400, 400, 100)
    on_change.assert_not_called()
    assert scene.view(0).position == Position(0, 0)


def test_disabled_card_cannot_be_dragged_but_can_flip(scene, callbacks):
    on_change, _, on_flip = callbacks
    scene.set_draggable(0, False)

    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_move(300, 300)
    scene.pointer_up(300, 300, 50)
    assert scene.view(0).position == Position(0, 0)
    on_change.assert_not_called()

    double_click(scene, 0, 1000)
    on_flip.assert_called_once_with(0, True)

    scene.set_draggable(0, True)
    scene.pointer_down(0, 10, 10, 5000)
    assert scene.is_dragging(0)


# =============================================================================
#  EMPILEMENT
# =============================================================================

def test_drop_on_card_stacks_on_top(scene, callbacks):
    on_change, _, _ = callbacks
    scene.pointer_down(1, 730, 10, 0)
    scene.pointer_move(50, 50)
    result = scene.pointer_up(50, 50, 100)

    assert result == StackResult(target_id=0, z_index=11)
    on_change.assert_called_once_with(1, Position(40, 40))
    assert scene.view(1).z_index == 11
    assert scene.views()[-1].card_id == 1
    assert scene.card_at(50, 50) == 1


def test_repeated_stacking_keeps_climbing(scene):
    scene.pointer_down(1, 730, 10, 0)
    scene.pointer_up(50, 50, 100)
    scene.pointer_down(2, 10, 490, 1000)
    result = scene.pointer_up(60, 60, 1100)

    assert result.target_id == 1
    assert scene.view(2).z_index == 12
    assert [v.card_id for v in scene.views()] == [0, 1, 2]


def test_stacking_ignores_other_section(two_deck_scene):
    # Carte 0 poussée contre le bord droit de sa section (320, 0) : elle touche la carte 3 (400, 0)
    two_deck_scene.pointer_down(0, 10, 10, 0)
    two_deck_scene.pointer_move(700, 10)
    result = two_deck_scene.pointer_up(700, 10, 100)

    assert two_deck_scene.view(0).position == Position(320, 0)
    assert result.target_id == 1


def test_drag_cannot_leave_its_section(two_deck_scene, callbacks):
    on_change, _, _ = callbacks
    two_deck_scene.pointer_down(3, 410, 10, 0)
    two_deck_scene.pointer_move(10, 300)
    two_deck_scene.pointer_up(10, 300, 100)
    on_change.assert_called_once_with(3, Position(400, 290))


# =============================================================================
#  RETOURNEMENT
# =============================================================================

def test_double_click_flips_and_animates(scene, callbacks):
    _, _, on_flip = callbacks
    double_click(scene, 0, 0)

    on_flip.assert_called_once_with(0, True)
    assert scene.view(0).flipped
    assert scene.is_animating(0)

    scene.tick(799)
    assert scene.is_animating(0)
    scene.tick(800)
    assert not scene.is_animating(0)
    assert scene.view(0).flipped


def test_double_click_during_animation_is_ignored(scene, callbacks):
    _, _, on_flip = callbacks
    double_click(scene, 0, 0)
    double_click(scene, 0, 300)

    on_flip.assert_called_once_with(0, True)
    assert scene.view(0).flipped

    double_click(scene, 0, 2000)
    assert on_flip.call_count == 2
    assert not scene.view(0).flipped


def test_slow_clicks_do_not_flip(scene, callbacks):
    _, _, on_flip = callbacks
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_up(10, 10, 50)
    scene.pointer_down(0, 10, 10, 600)
    scene.pointer_up(10, 10, 650)
    on_flip.assert_not_called()


def test_drag_back_to_start_is_not_a_second_click(scene, callbacks):
    """Aller-retour du pointeur : drag abouti, pas de retournement."""
    on_change, _, on_flip = callbacks
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_up(10, 10, 0)

    scene.pointer_down(0, 10, 10, 100)
    scene.pointer_move(300, 300)
    scene.pointer_move(10, 10)
    scene.pointer_up(10, 10, 200)

    on_change.assert_called_once_with(0, Position(0, 0))
    on_flip.assert_not_called()
    assert not scene.view(0).flipped

    # Le drag a aussi effacé le clic précédent
    scene.pointer_down(0, 10, 10, 250)
    scene.pointer_up(10, 10, 260)
    on_flip.assert_not_called()


def test_drag_back_to_start_on_disabled_card_does_not_flip(scene, callbacks):
    _, _, on_flip = callbacks
    scene.set_draggable(0, False)
    scene.pointer_down(0, 10, 10, 0)
    scene.pointer_up(10, 10, 0)

    scene.pointer_down(0, 10, 10, 100)
    scene.pointer_move(300, 300)
    scene.pointer_move(10, 10)
    scene.pointer_up(10, 10, 200)

    on_flip.assert_not_called()


def test_flip_progress(scene):
    assert scene.flip_progress(0, 0) == 1.0
    double_click(scene, 0, 0)
    assert scene.flip_progress(0, 500) == pytest.approx(0.5)


def test_flip_and_drag_are_independent(scene, callbacks):
    on_change, _, on_flip = callbacks
    double_click(scene, 0, 0)
    scene.pointer_down(0, 10, 10, 300)
    scene.pointer_move(210, 110)
    scene.pointer_up(210, 110, 400)

    on_change.assert_called_once_with(0, Position(200, 100))
    assert on_flip.call_count == 1
    assert scene.view(0).flipped


# =============================================================================
#  RETRAIT & ERREURS
# =============================================================================

def test_remove_card_cancels_pending_animation(scene):
    double_click(scene, 0, 0)
    assert len(scene.timers) == 1

    scene.remove_card(0)

    assert len(scene.timers) == 0
    assert scene.tick(10_000) == 0
    assert [v.card_id for v in scene.views()] == [1, 2]
    with pytest.raises(InvalidArgument):
        scene.view(0)


def test_remove_pressed_card_releases_pointer(scene):
    scene.pointer_down(0, 10, 10, 0)
    scene.remove_card(0)
    assert scene.pressed_card_id is None
    assert scene.pointer_up(50, 50, 100) is None


def test_unknown_card_raises(scene):
    with pytest.raises(InvalidArgument):
        scene.pointer_down(42, 0, 0, 0)
    with pytest.raises(InvalidArgument):
        scene.set_draggable(42, False)
    with pytest.raises(InvalidArgument):
        scene.remove_card(42)


def test_card_at_prefers_topmost(scene):
    assert scene.card_at(10, 10) == 0
    assert scene.card_at(400, 300) is None
