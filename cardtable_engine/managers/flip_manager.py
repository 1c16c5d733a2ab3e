from dataclasses import replace
from typing import Optional, Tuple

from cardtable_engine.core.consts import CLICK_SLOP_PX, DOUBLE_CLICK_WINDOW_MS, FLIP_ANIMATION_MS, FlipStatus
from cardtable_engine.core.models import FlipGesture, Position
from cardtable_engine.utils.timers import TimerQueue


# =============================================================================
#  TRANSITIONS PURES (FlipGesture -> FlipGesture)
# =============================================================================

def _close_enough(a: Position, b: Position) -> bool:
    return a.distance_sq(b) <= CLICK_SLOP_PX ** 2


def register_press(gesture: FlipGesture, position: Position) -> FlipGesture:
    """Mémorise le point d'appui. Ignoré pendant l'animation."""
    if gesture.animating:
        return gesture
    return replace(gesture, press_position=position, travelled=False)


def register_move(gesture: FlipGesture, position: Position) -> FlipGesture:
    """Note un déplacement du pointeur au-delà du seuil depuis l'appui."""
    press = gesture.press_position
    if gesture.travelled or press is None or _close_enough(press, position):
        return gesture
    return replace(gesture, travelled=True)


def register_release(gesture: FlipGesture, timestamp: float, position: Position,
                     window_ms: float = DOUBLE_CLICK_WINDOW_MS) -> Tuple[FlipGesture, bool]:
    """
    Termine un cycle appui/relâché. Retourne (nouveau geste, double-clic reconnu ?).
    - Pendant l'animation : tout est ignoré, rien n'est mémorisé.
    - Un relâché loin de l'appui, ou après un aller-retour du pointeur (vrai drag), oublie le clic précédent.
    - Le double-clic consomme la paire de clics.
    """
    if gesture.animating:
        return replace(gesture, press_position=None, travelled=False), False

    press = gesture.press_position
    if press is None or gesture.travelled or not _close_enough(press, position):
        return FlipGesture(), False

    last_ts = gesture.last_click_timestamp
    last_pos = gesture.last_click_position
    if last_ts is not None and 0 <= timestamp - last_ts <= window_ms and _close_enough(last_pos, position):
        return start_animation(FlipGesture()), True

    return FlipGesture(last_click_timestamp=timestamp, last_click_position=position), False


def start_animation(gesture: FlipGesture) -> FlipGesture:
    return replace(gesture, animating=True, press_position=None)


def settle(gesture: FlipGesture) -> FlipGesture:
    """Animating -> Settled (fin de la durée d'animation)."""
    return replace(gesture, animating=False)


def forget_clicks(gesture: FlipGesture) -> FlipGesture:
    """Oublie l'appui et le clic mémorisés (geste interrompu), sans toucher à l'animation."""
    return FlipGesture(animating=gesture.animating)


# =============================================================================
#  CONTRÔLEUR PAR CARTE
# =============================================================================

class FlipController:
    """
    Machine à états de retournement d'une carte : SETTLED -> ANIMATING -> SETTLED.
    Le retour à SETTLED passe par un rappel programmé (annulable) dans la TimerQueue.
    """

    def __init__(self, card_id: int, timers: TimerQueue, duration_ms: float = FLIP_ANIMATION_MS):
        self.card_id = card_id
        self.timers = timers
        self.duration_ms = duration_ms

        self.gesture = FlipGesture()
        self.animation_started_at: Optional[float] = None
        self._settle_handle: Optional[int] = None

    @property
    def status(self) -> FlipStatus:
        return FlipStatus.ANIMATING if self.gesture.animating else FlipStatus.SETTLED

    @property
    def is_animating(self) -> bool:
        return self.gesture.animating

    def press(self, position: Position):
        self.gesture = register_press(self.gesture, position)

    def move(self, position: Position):
        self.gesture = register_move(self.gesture, position)

    def release(self, timestamp: float, position: Position) -> bool:
        """Retourne True si ce relâché déclenche un retournement."""
        self.gesture, triggered = register_release(self.gesture, timestamp, position)
        if triggered:
            self.animation_started_at = timestamp
            self._settle_handle = self.timers.schedule(self.duration_ms, self._on_animation_end, now=timestamp)
        return triggered

    def forget_clicks(self):
        self.gesture = forget_clicks(self.gesture)

    def progress(self, now: float) -> float:
        """Avancement de l'animation dans [0, 1] (1 si aucune animation)."""
        if not self.gesture.animating or self.animation_started_at is None or self.duration_ms <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.animation_started_at) / self.duration_ms))

    def cancel_pending(self):
        """Annule le rappel de fin d'animation (carte retirée de la scène)."""
        if self._settle_handle is not None:
            self.timers.cancel(self._settle_handle)
            self._settle_handle = None
        self.gesture = settle(self.gesture)

    def _on_animation_end(self):
        self._settle_handle = None
        self.animation_started_at = None
        self.gesture = settle(self.gesture)
