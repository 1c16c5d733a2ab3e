import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Set


@dataclass(order=True)
class _ScheduledCall:
    due: float
    seq: int
    callback: Callable = field(compare=False)


class TimerQueue:
    """
    File de rappels différés, pilotée par une horloge externe (ms).
    Aucune attente bloquante : la scène appelle advance(now) à chaque tick,
    les tests passent des temps synthétiques.
    """

    def __init__(self):
        self._heap: List[_ScheduledCall] = []
        self._cancelled: Set[int] = set()
        self._counter = itertools.count()
        self.now = 0.0

    def schedule(self, delay: float, callback: Callable, now: float = None) -> int:
        """Programme callback à now + delay. Retourne un handle annulable."""
        start = self.now if now is None else now
        seq = next(self._counter)
        heapq.heappush(self._heap, _ScheduledCall(start + delay, seq, callback))
        return seq

    def cancel(self, handle: int) -> bool:
        """Annule un rappel encore en attente. Retourne False s'il n'existe plus."""
        if handle is None or not self.is_pending(handle):
            return False
        self._cancelled.add(handle)
        return True

    def is_pending(self, handle: int) -> bool:
        if handle in self._cancelled:
            return False
        return any(call.seq == handle for call in self._heap)

    def advance(self, now: float) -> int:
        """Exécute, dans l'ordre d'échéance, tous les rappels dus à l'instant now."""
        self.now = max(self.now, now)
        fired = 0
        while self._heap and self._heap[0].due <= self.now:
            call = heapq.heappop(self._heap)
            if call.seq in self._cancelled:
                self._cancelled.discard(call.seq)
                continue
            call.callback()
            fired += 1
        return fired

    def __len__(self):
        return sum(1 for call in self._heap if call.seq not in self._cancelled)
