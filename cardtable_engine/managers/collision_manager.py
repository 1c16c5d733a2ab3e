from dataclasses import dataclass
from typing import Iterable, List, Optional

from cardtable_engine.core.game_config import ZIndexConfig
from cardtable_engine.core.models import CardState, Dimensions, Position
from cardtable_engine.utils.logger import log_debug


@dataclass(frozen=True)
class StackResult:
    """Décision d'empilement : carte recouverte et nouveau z-index de la carte déposée."""
    target_id: int
    z_index: int


class CollisionStacker:
    """
    Détection de chevauchement (AABB) et réordonnancement des z-index au dépôt.
    Seules les cartes de la même section de deck sont considérées.
    """

    def __init__(self, card_dimensions: Dimensions, z_index: ZIndexConfig):
        self.card_dimensions = card_dimensions
        self.z_index = z_index

    @staticmethod
    def overlaps(a: Position, b: Position, dims: Dimensions) -> bool:
        """Intersection d'intervalles fermés : des bords qui se touchent comptent comme chevauchement."""
        w, h = dims.width, dims.height
        return not (a.x + w < b.x or b.x + w < a.x or a.y + h < b.y or b.y + h < a.y)

    def find_overlaps(self, dragged: CardState, cards: Iterable[CardState]) -> List[CardState]:
        return [
            c for c in cards
            if c.card_id != dragged.card_id
            and c.deck_id == dragged.deck_id
            and self.overlaps(dragged.position, c.position, self.card_dimensions)
        ]

    def resolve(self, dragged: CardState, cards: Iterable[CardState]) -> Optional[StackResult]:
        """
        Applique la politique d'empilement sur la carte déposée.
        - Aucun chevauchement : retour au z-index de repos.
        - Sinon : la carte passe au-dessus de toute sa section.
          Cible en cas de chevauchements multiples : z-index le plus haut, puis id le plus grand.
        """
        cards = list(cards)
        hits = self.find_overlaps(dragged, cards)

        if not hits:
            dragged.z_index = dragged.resting_z_index
            return None

        target = max(hits, key=lambda c: (c.resting_z_index, c.card_id))

        section = [c for c in cards if c.deck_id == dragged.deck_id and c.card_id != dragged.card_id]
        top = max(c.resting_z_index for c in section)
        new_z = top + 1

        if new_z >= self.z_index.drag:
            new_z = self._compact(section, dragged)
        else:
            dragged.resting_z_index = new_z
            dragged.z_index = new_z

        log_debug(f"Empilement : carte #{dragged.card_id} sur #{target.card_id} (z={new_z})")
        return StackResult(target_id=target.card_id, z_index=new_z)

    def _compact(self, section: List[CardState], dragged: CardState) -> int:
        """Renumérote la section à partir de la base en gardant l'ordre de tracé, la carte déposée en dernier."""
        ordered = sorted(section, key=lambda c: (c.resting_z_index, c.card_id)) + [dragged]
        for i, card in enumerate(ordered):
            card.resting_z_index = self.z_index.base + i
            card.z_index = card.resting_z_index
        return dragged.z_index
