from dataclasses import dataclass
from typing import Optional

from cardtable_engine.core.consts import CLICK_SLOP_PX, DragStatus
from cardtable_engine.core.models import Dimensions, DragSession, Position, Rect
from cardtable_engine.managers.bounds_policy import BoundsPolicy


@dataclass(frozen=True)
class DragOutcome:
    """Résultat d'un relâché : position finale contrainte et nature du geste."""
    card_id: int
    final_position: Position
    start_position: Position
    # False : le pointeur n'a pas bougé au-delà du seuil, c'était un simple clic
    moved: bool


class DragController:
    """
    Machine à états de drag d'une carte : IDLE -> DRAGGING -> IDLE (ou DISABLED).
    Convertit les événements pointeur en positions contraintes à la section propriétaire.
    """

    def __init__(self, card_id: int, card_dimensions: Dimensions, enabled: bool = True):
        self.card_id = card_id
        self.card_dimensions = card_dimensions
        self.enabled = enabled

        self.session: Optional[DragSession] = None
        self._policy: Optional[BoundsPolicy] = None
        self._travelled = False

    @property
    def status(self) -> DragStatus:
        if not self.enabled:
            return DragStatus.DISABLED
        return DragStatus.DRAGGING if self.session else DragStatus.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.session is not None

    # =========================================================================
    #  TRANSITIONS
    # =========================================================================

    def press(self, pointer: Position, card_position: Position, bounds: Rect) -> bool:
        """IDLE -> DRAGGING. Retourne False si le drag est désactivé ou déjà en cours."""
        if not self.enabled or self.session is not None:
            return False

        self.session = DragSession(
            card_id=self.card_id,
            pointer_start_offset=Position(pointer.x - card_position.x, pointer.y - card_position.y),
            origin_bounds=bounds,
            start_position=card_position,
            pointer_start=pointer
        )
        self._policy = BoundsPolicy(bounds, self.card_dimensions)
        self._travelled = False
        return True

    def move(self, pointer: Position) -> Optional[Position]:
        """
        Position live (contrainte) pour ce pointeur, ou None hors session.
        Fonction du seul pointeur : un doublon d'événement produit la même position.
        """
        if self.session is None:
            return None

        if pointer.distance_sq(self.session.pointer_start) > CLICK_SLOP_PX ** 2:
            self._travelled = True

        return self._constrained(pointer)

    def release(self, pointer: Position) -> Optional[DragOutcome]:
        """DRAGGING -> IDLE. Retourne le résultat du geste (None si aucune session)."""
        if self.session is None:
            return None

        final_position = self.move(pointer)
        outcome = DragOutcome(
            card_id=self.card_id,
            final_position=final_position,
            start_position=self.session.start_position,
            moved=self._travelled
        )
        self._teardown()
        return outcome

    def cancel(self) -> Optional[DragSession]:
        """Abandonne la session sans résultat. Retourne la session abandonnée (ou None)."""
        session = self.session
        self._teardown()
        return session

    def set_enabled(self, enabled: bool) -> Optional[DragSession]:
        """Active/désactive le drag. Désactiver en cours de drag abandonne la session."""
        self.enabled = enabled
        if not enabled and self.session is not None:
            return self.cancel()
        return None

    # =========================================================================
    #  HELPERS
    # =========================================================================

    def _constrained(self, pointer: Position) -> Position:
        offset = self.session.pointer_start_offset
        candidate = Position(pointer.x - offset.x, pointer.y - offset.y)
        return self._policy.clamp(candidate)

    def _teardown(self):
        self.session = None
        self._policy = None
        self._travelled = False
