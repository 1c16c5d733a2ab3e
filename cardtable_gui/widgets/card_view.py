import pygame
from typing import Optional

from cardtable_engine.core.models import CardSnapshot, ClassicCard, CCGCard
# --- CORE & WIDGETS ---
from cardtable_gui.widgets.buttons import UIWidget
from cardtable_gui.core.resource_manager import ResourceManager

# --- STYLING ---
from cardtable_gui.core.colors import (
    CARD_FACE, CARD_BORDER, CARD_INK_BLACK, CARD_INK_RED,
    CARD_BACK, CARD_BACK_PATTERN, CARD_DRAG_GLOW,
    CCG_HEADER, CCG_FOOTER, CCG_ATTACK, CCG_HEALTH,
    TEXT_PRIMARY, TEXT_SECONDARY
)


class CardView(UIWidget):
    """
    Widget représentant une carte de la table.
    Ne possède aucun état métier : il dessine l'instantané (CardSnapshot) fourni par la scène.
    """

    def __init__(self, snapshot: CardSnapshot, x: int, y: int, w: int, h: int, progress: float = 1.0):
        super().__init__(x, y, w, h, action="CLICK_CARD")

        self.snapshot = snapshot
        # Avancement de l'animation de retournement dans [0, 1]
        self.progress = progress

        self.res_manager = ResourceManager()
        self.font_rank = self.res_manager.get_font(max(8, int(h * 0.14)), bold=True)
        self.font_pip = self.res_manager.get_font(max(10, int(h * 0.35)))
        self.font_title = self.res_manager.get_font(max(8, int(h * 0.09)), bold=True)
        self.font_small = self.res_manager.get_font(max(6, int(h * 0.065)))

    # =========================================================================
    #  MÉTHODES STANDARD UIWIDGET
    # =========================================================================

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        # Le drag et le double-clic sont gérés par la scène via le TableScreen
        return None

    def draw(self, surface: pygame.Surface):
        """Rendu complet de la carte (face ou dos, écrasée pendant le retournement)."""
        card_surf = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        local = card_surf.get_rect()

        if self.shows_back():
            self._draw_back(card_surf, local)
        else:
            self._draw_face(card_surf, local)

        # Écrasement horizontal : largeur nulle à mi-parcours
        scale = self.squash_factor()
        if scale < 1.0:
            new_w = max(1, int(self.rect.width * scale))
            card_surf = pygame.transform.scale(card_surf, (new_w, self.rect.height))

        target = card_surf.get_rect(center=self.rect.center)

        if self.snapshot.dragging:
            glow = target.inflate(8, 8)
            pygame.draw.rect(surface, CARD_DRAG_GLOW, glow, 4, border_radius=10)

        surface.blit(card_surf, target)

    # =========================================================================
    #  ÉTAT VISUEL
    # =========================================================================

    def squash_factor(self) -> float:
        if not self.snapshot.animating:
            return 1.0
        return abs(1.0 - 2.0 * self.progress)

    def shows_back(self) -> bool:
        """Dos visible si la carte est retournée (l'ancienne face reste visible pendant la 1ère moitié)."""
        back = self.snapshot.flipped
        if self.snapshot.animating and self.progress < 0.5:
            back = not back
        return back

    # =========================================================================
    #  MÉTHODES DE DESSIN INTERNES (Helpers)
    # =========================================================================

    def _draw_face(self, surface, rect):
        data = self.snapshot.data
        if isinstance(data, ClassicCard):
            self._draw_classic(surface, rect, data)
        elif isinstance(data, CCGCard):
            self._draw_ccg(surface, rect, data)
        else:
            raise TypeError(f"Type de carte inconnu : {type(data).__name__}")

    def _draw_back(self, surface, rect):
        """Dos de carte : bordure intérieure + 4 losanges."""
        pygame.draw.rect(surface, CARD_BACK, rect, border_radius=8)
        pygame.draw.rect(surface, CARD_BORDER, rect, 2, border_radius=8)

        inner = rect.inflate(-int(rect.width * 0.2), -int(rect.height * 0.2))
        pygame.draw.rect(surface, CARD_BACK_PATTERN, inner, 2, border_radius=4)

        rx, ry = max(2, inner.width // 6), max(2, inner.height // 8)
        centers = [
            (inner.centerx, inner.top + inner.height // 4),
            (inner.centerx, inner.bottom - inner.height // 4),
            (inner.left + inner.width // 4, inner.centery),
            (inner.right - inner.width // 4, inner.centery),
        ]
        for cx, cy in centers:
            diamond = [(cx, cy - ry), (cx + rx, cy), (cx, cy + ry), (cx - rx, cy)]
            pygame.draw.polygon(surface, CARD_BACK_PATTERN, diamond)

    def _draw_classic(self, surface, rect, card: ClassicCard):
        pygame.draw.rect(surface, CARD_FACE, rect, border_radius=8)
        pygame.draw.rect(surface, CARD_BORDER, rect, 2, border_radius=8)

        ink = CARD_INK_RED if card.is_red else CARD_INK_BLACK

        # Coin haut-gauche : rang au-dessus de la couleur
        rank_surf = self.font_rank.render(card.rank, True, ink)
        suit_surf = self.font_rank.render(card.suit, True, ink)
        surface.blit(rank_surf, (rect.x + 5, rect.y + 4))
        surface.blit(suit_surf, (rect.x + 5, rect.y + 4 + rank_surf.get_height()))

        # Coin bas-droit (retourné)
        corner = pygame.transform.rotate(rank_surf, 180)
        surface.blit(corner, corner.get_rect(bottomright=(rect.right - 5, rect.bottom - 4)))

        # Symbole central
        pip = self.font_pip.render(card.suit, True, ink)
        surface.blit(pip, pip.get_rect(center=rect.center))

    def _draw_ccg(self, surface, rect, card: CCGCard):
        pygame.draw.rect(surface, CARD_FACE, rect, border_radius=8)

        # Bandeau titre
        header = pygame.Rect(rect.x, rect.y, rect.width, int(rect.height * 0.16))
        pygame.draw.rect(surface, CCG_HEADER, header, border_top_left_radius=8, border_top_right_radius=8)
        name_txt = card.name if len(card.name) <= 14 else card.name[:12] + ".."
        name_surf = self.font_title.render(name_txt, True, TEXT_PRIMARY)
        surface.blit(name_surf, name_surf.get_rect(center=header.center))

        # Avatar
        art = pygame.Rect(rect.x + 4, header.bottom + 2, rect.width - 8, int(rect.height * 0.42))
        avatar = self.res_manager.get_avatar(card, art.size)
        surface.blit(avatar, art)

        # Description
        desc_top = art.bottom + 2
        desc_txt = card.description if len(card.description) <= 22 else card.description[:20] + ".."
        desc_surf = self.font_small.render(desc_txt, True, CARD_INK_BLACK)
        surface.blit(desc_surf, desc_surf.get_rect(midtop=(rect.centerx, desc_top)))

        # Pied : attaque / santé
        footer = pygame.Rect(rect.x, rect.bottom - int(rect.height * 0.18), rect.width, int(rect.height * 0.18))
        pygame.draw.rect(surface, CCG_FOOTER, footer, border_bottom_left_radius=8, border_bottom_right_radius=8)

        radius = max(4, footer.height // 2 - 2)
        for color, value, cx in (
                (CCG_ATTACK, card.attack, footer.left + radius + 3),
                (CCG_HEALTH, card.health, footer.right - radius - 3)):
            pygame.draw.circle(surface, color, (cx, footer.centery), radius)
            val_surf = self.font_title.render(str(value), True, TEXT_PRIMARY)
            surface.blit(val_surf, val_surf.get_rect(center=(cx, footer.centery)))

        pygame.draw.rect(surface, TEXT_SECONDARY if self.is_hovered else CARD_BORDER, rect, 2, border_radius=8)
