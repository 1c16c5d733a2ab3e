from typing import Callable, Dict, List, Optional, Union

from cardtable_engine.utils.logger import log_info, log_debug

# --- IMPORTS CORE ---
from cardtable_engine.core.consts import CardType
from cardtable_engine.core.exceptions import InvalidArgument
from cardtable_engine.core.game_config import GameConfig
from cardtable_engine.core.models import CardSnapshot, CardState, Position
from cardtable_engine.core.validation import require_present

# --- IMPORTS INFRASTRUCTURE ---
from cardtable_engine.infrastructure.card_factory import CardFactory
from cardtable_engine.infrastructure.layout_generator import LayoutGenerator

# --- IMPORTS MANAGERS ---
from cardtable_engine.managers.collision_manager import CollisionStacker, StackResult
from cardtable_engine.managers.drag_manager import DragController
from cardtable_engine.managers.flip_manager import FlipController
from cardtable_engine.utils.timers import TimerQueue

PositionCallback = Callable[[int, Position], None]
FlipCallback = Callable[[int, bool], None]


class CardTableScene:
    """
    Scène de la table : possède les cartes et route les événements pointeur
    vers les contrôleurs de chaque carte (drag, flip) et l'empileur.
    Mono-thread : chaque transition a lieu dans le handler de l'événement ou dans un rappel de la TimerQueue.
    """

    def __init__(self,
                 config: GameConfig,
                 card_type: Union[CardType, str] = CardType.CLASSIC,
                 on_position_change: Optional[PositionCallback] = None,
                 on_position_live: Optional[PositionCallback] = None,
                 on_flip_change: Optional[FlipCallback] = None):
        # 1. Configuration (validée avant toute construction d'état)
        self.config = require_present(config, "config")
        self.card_type = CardFactory.parse_card_type(card_type)

        # 2. Callbacks sortants
        self.on_position_change = on_position_change
        self.on_position_live = on_position_live
        self.on_flip_change = on_flip_change

        # 3. Managers
        self.timers = TimerQueue()
        self.stacker = CollisionStacker(config.card_dimensions, config.z_index)

        # 4. État de la table
        self.cards: Dict[int, CardState] = {}
        self.drag_controllers: Dict[int, DragController] = {}
        self.flip_controllers: Dict[int, FlipController] = {}

        # Carte sous le pointeur entre l'appui et le relâché
        self.pressed_card_id: Optional[int] = None

        self._populate()
        log_info(f"🃏 Table prête : {len(self.cards)} carte(s) sur {config.deck_count} deck(s) ({self.card_type.value}).")

    def _populate(self):
        """Génère contenu et positions de chaque section, puis crée les contrôleurs."""
        # On calcule tout avant de créer quoi que ce soit (pas de scène à moitié construite)
        seeds = []
        for section in self.config.deck_sections:
            contents = CardFactory.generate(section.card_count, self.card_type, max_cards=section.max_cards)
            positions = LayoutGenerator.for_section(section, self.config.card_dimensions)
            seeds.extend((section.id, data, pos) for data, pos in zip(contents, positions))

        base_z = self.config.z_index.base
        for card_id, (deck_id, data, pos) in enumerate(seeds):
            self.cards[card_id] = CardState(
                card_id=card_id, deck_id=deck_id, data=data, position=pos,
                z_index=base_z, resting_z_index=base_z
            )
            self.drag_controllers[card_id] = DragController(card_id, self.config.card_dimensions)
            self.flip_controllers[card_id] = FlipController(card_id, self.timers)

    # =========================================================================
    #  ÉVÉNEMENTS POINTEUR
    # =========================================================================

    def pointer_down(self, card_id: int, x: float, y: float, timestamp: float):
        """Appui sur une carte : démarre le geste de clic et, si autorisé, le drag."""
        card = self._require_card(card_id)
        self.tick(timestamp)

        if self.pressed_card_id is not None:
            log_debug(f"Appui ignoré sur #{card_id} : pointeur déjà engagé sur #{self.pressed_card_id}")
            return

        pointer = Position(x, y)
        self.pressed_card_id = card_id
        self.flip_controllers[card_id].press(pointer)

        section = self.config.section(card.deck_id)
        if self.drag_controllers[card_id].press(pointer, card.position, section.bounds):
            card.z_index = self.config.z_index.drag

    def pointer_move(self, x: float, y: float) -> Optional[Position]:
        """Mouvement du pointeur : met à jour la position live de la carte tirée."""
        card_id = self.pressed_card_id
        if card_id is None:
            return None

        pointer = Position(x, y)
        # Aussi pour une carte non déplaçable : un aller-retour du pointeur n'est pas un clic
        self.flip_controllers[card_id].move(pointer)

        position = self.drag_controllers[card_id].move(pointer)
        if position is None:
            return None

        self.cards[card_id].position = position
        if self.on_position_live:
            self.on_position_live(card_id, position)
        return position

    def pointer_up(self, x: float, y: float, timestamp: float) -> Optional[StackResult]:
        """Relâché : termine le drag (empilement + callback unique) puis le geste de clic."""
        card_id = self.pressed_card_id
        if card_id is None:
            return None
        self.pressed_card_id = None
        self.tick(timestamp)

        card = self.cards[card_id]
        pointer = Position(x, y)
        result = None

        outcome = self.drag_controllers[card_id].release(pointer)
        if outcome is not None:
            if outcome.moved:
                card.position = outcome.final_position
                result = self.stacker.resolve(card, self.cards.values())
                if self.on_position_change:
                    self.on_position_change(card_id, card.position)
                # Un drag abouti n'est jamais la moitié d'un double-clic
                self.flip_controllers[card_id].forget_clicks()
                return result

            # Simple clic : la carte reste en place
            card.position = outcome.start_position
            card.z_index = card.resting_z_index

        if self.flip_controllers[card_id].release(timestamp, pointer):
            card.flipped = not card.flipped
            log_info(f"🔄 Carte #{card_id} retournée (flipped={card.flipped})")
            if self.on_flip_change:
                self.on_flip_change(card_id, card.flipped)

        return result

    def pointer_cancel(self):
        """Pointeur perdu (sortie de la surface) : le drag est abandonné sans callback."""
        card_id = self.pressed_card_id
        if card_id is None:
            return
        self.pressed_card_id = None
        self._abandon_drag(card_id)
        self.flip_controllers[card_id].forget_clicks()

    # =========================================================================
    #  CONTRÔLE DES CARTES
    # =========================================================================

    def set_draggable(self, card_id: int, enabled: bool):
        card = self._require_card(card_id)
        card.draggable = enabled
        if enabled:
            self.drag_controllers[card_id].set_enabled(True)
        else:
            self._abandon_drag(card_id, disable=True)

    def remove_card(self, card_id: int):
        """Retire une carte ; le rappel de fin d'animation en attente est annulé."""
        self._require_card(card_id)
        if self.pressed_card_id == card_id:
            self.pressed_card_id = None
        self.drag_controllers.pop(card_id).cancel()
        self.flip_controllers.pop(card_id).cancel_pending()
        del self.cards[card_id]
        log_debug(f"Carte #{card_id} retirée de la table.")

    def tick(self, now: float) -> int:
        """Fait avancer l'horloge de la scène (fin des animations)."""
        return self.timers.advance(now)

    # =========================================================================
    #  LECTURE
    # =========================================================================

    def card_at(self, x: float, y: float) -> Optional[int]:
        """Id de la carte visible la plus haute sous le point, ou None."""
        w = self.config.card_dimensions.width
        h = self.config.card_dimensions.height
        hits = [
            c for c in self.cards.values()
            if c.position.x <= x <= c.position.x + w and c.position.y <= y <= c.position.y + h
        ]
        if not hits:
            return None
        return max(hits, key=lambda c: (c.z_index, c.card_id)).card_id

    def is_dragging(self, card_id: int) -> bool:
        self._require_card(card_id)
        return self.drag_controllers[card_id].is_dragging

    def is_animating(self, card_id: int) -> bool:
        self._require_card(card_id)
        return self.flip_controllers[card_id].is_animating

    def flip_progress(self, card_id: int, now: float) -> float:
        self._require_card(card_id)
        return self.flip_controllers[card_id].progress(now)

    def view(self, card_id: int) -> CardSnapshot:
        card = self._require_card(card_id)
        return CardSnapshot(
            card_id=card.card_id,
            deck_id=card.deck_id,
            data=card.data,
            position=card.position,
            z_index=card.z_index,
            flipped=card.flipped,
            dragging=self.drag_controllers[card_id].is_dragging,
            animating=self.flip_controllers[card_id].is_animating
        )

    def views(self) -> List[CardSnapshot]:
        """Instantanés triés dans l'ordre de tracé (du dessous vers le dessus)."""
        ordered = sorted(self.cards.values(), key=lambda c: (c.z_index, c.card_id))
        return [self.view(c.card_id) for c in ordered]

    # =========================================================================
    #  HELPERS
    # =========================================================================

    def _abandon_drag(self, card_id: int, disable: bool = False):
        controller = self.drag_controllers[card_id]
        session = controller.set_enabled(False) if disable else controller.cancel()
        if session is None:
            return
        card = self.cards[card_id]
        card.position = session.start_position
        card.z_index = card.resting_z_index
        log_debug(f"Drag abandonné : carte #{card_id} ramenée en ({card.position.x}, {card.position.y})")

    def _require_card(self, card_id: int) -> CardState:
        card = self.cards.get(card_id)
        if card is None:
            raise InvalidArgument(f"Carte inconnue : {card_id}")
        return card

    def __repr__(self):
        return f"<CardTableScene decks={self.config.deck_count} cards={len(self.cards)}>"
