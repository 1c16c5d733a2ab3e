import pygame
from typing import List, Optional, Tuple

from cardtable_engine.utils.logger import log_debug
from cardtable_engine.core.models import Position
from cardtable_engine.scene import CardTableScene

# --- GUI BASE & WIDGETS ---
from cardtable_gui.screens.base_screen import BaseScreen
from cardtable_gui.widgets.buttons import Button, UIWidget
from cardtable_gui.widgets.card_view import CardView

# --- CONFIG & COLORS ---
from constants import FIELD_MARGIN, HEADER_HEIGHT, INSTRUCTIONS, WINDOW_TITLE
from cardtable_gui.core.colors import (
    FIELD_COLOR, FIELD_BORDER, SECTION_DIVIDER,
    TEXT_PRIMARY, TEXT_SECONDARY, BTN_SURFACE, BTN_HOVER
)


class TableScreen(BaseScreen):
    """
    Écran principal : le terrain de jeu et ses cartes.
    Traduit les événements souris en appels à la scène et dessine ses instantanés.
    Les coordonnées de la scène sont celles du terrain, mises à l'échelle pour la fenêtre.
    """

    def __init__(self, app, clock=None):
        super().__init__(app)
        self.config = app.config
        self.res = app.res_manager

        # Horloge en millisecondes (injectable pour les tests)
        self.clock = clock or pygame.time.get_ticks

        self.scene = CardTableScene(
            self.config.to_game_config(),
            card_type=self.config.card_type,
            on_position_change=self._on_position_change,
            on_flip_change=self._on_flip_change
        )

        self.widgets: List[UIWidget] = []
        self.scale = 1.0
        self.field_origin: Tuple[float, float] = (0, 0)

        self._init_ui()

    def on_resize(self, w, h):
        super().on_resize(w, h)
        self._init_ui()

    def _init_ui(self):
        """Calcule l'échelle du terrain et place les boutons."""
        self.widgets.clear()

        field = self.scene.config.field_dimensions
        avail_w = max(1, self.width - 2 * FIELD_MARGIN)
        avail_h = max(1, self.height - HEADER_HEIGHT - FIELD_MARGIN)
        if field.width > 0 and field.height > 0:
            self.scale = min(avail_w / field.width, avail_h / field.height)
        else:
            self.scale = 1.0

        ox = (self.width - field.width * self.scale) / 2
        self.field_origin = (ox, HEADER_HEIGHT)

        btn_options = Button(
            x=self.width - 160, y=20, width=140, height=44,
            text="OPTIONS",
            font=self.res.get_font(22, bold=True),
            action="GOTO_SETTINGS",
            bg_color=BTN_SURFACE,
            hover_color=BTN_HOVER
        )
        self.widgets.append(btn_options)

    # =========================================================================
    #  CONVERSIONS ÉCRAN <-> TERRAIN
    # =========================================================================

    def to_field(self, pos: Tuple[int, int]) -> Position:
        ox, oy = self.field_origin
        return Position((pos[0] - ox) / self.scale, (pos[1] - oy) / self.scale)

    def to_screen(self, position: Position) -> Tuple[int, int]:
        ox, oy = self.field_origin
        return int(ox + position.x * self.scale), int(oy + position.y * self.scale)

    # =========================================================================
    #  ÉVÉNEMENTS
    # =========================================================================

    def handle_events(self, events):
        for event in events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.scene.pointer_cancel()
                return "GOTO_SETTINGS"

            for widget in self.widgets:
                action = widget.handle_event(event)
                if action:
                    self.scene.pointer_cancel()
                    return action

            self._handle_pointer(event)
        return None

    def _handle_pointer(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            point = self.to_field(event.pos)
            card_id = self.scene.card_at(point.x, point.y)
            if card_id is not None:
                self.scene.pointer_down(card_id, point.x, point.y, self.clock())

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            point = self.to_field(event.pos)
            self.scene.pointer_up(point.x, point.y, self.clock())

        elif event.type == pygame.MOUSEMOTION:
            point = self.to_field(event.pos)
            self.scene.pointer_move(point.x, point.y)

        elif event.type == pygame.WINDOWLEAVE:
            self.scene.pointer_cancel()

    def _on_position_change(self, card_id: int, position: Position):
        log_debug(f"Carte #{card_id} déposée en ({position.x:.0f}, {position.y:.0f})")

    def _on_flip_change(self, card_id: int, flipped: bool):
        log_debug(f"Carte #{card_id} : face {'cachée' if flipped else 'visible'}")

    # =========================================================================
    #  UPDATE & RENDU
    # =========================================================================

    def update(self, dt):
        self.scene.tick(self.clock())
        mouse_pos = pygame.mouse.get_pos()
        for w in self.widgets:
            w.update(dt, mouse_pos)

    def card_views(self, now: Optional[float] = None) -> List[CardView]:
        """Widgets des cartes, du dessous vers le dessus."""
        now = self.clock() if now is None else now
        dims = self.scene.config.card_dimensions
        w, h = max(1, int(dims.width * self.scale)), max(1, int(dims.height * self.scale))

        views = []
        for snapshot in self.scene.views():
            x, y = self.to_screen(snapshot.position)
            progress = self.scene.flip_progress(snapshot.card_id, now)
            views.append(CardView(snapshot, x, y, w, h, progress=progress))
        return views

    def draw(self, surface):
        self._draw_header(surface)
        self._draw_field(surface)

        views = self.card_views()
        for cv in views:
            cv.draw(surface)

        if self.config.debug_mode:
            self._draw_debug(surface, views)

        for w in self.widgets:
            w.draw(surface)

    def _draw_header(self, surface):
        font_title = self.res.get_font(30, bold=True)
        font_small = self.res.get_font(16)

        title = font_title.render(WINDOW_TITLE, True, TEXT_PRIMARY)
        surface.blit(title, (FIELD_MARGIN, 10))

        y = 10 + title.get_height()
        for line in INSTRUCTIONS:
            txt = font_small.render(line, True, TEXT_SECONDARY)
            surface.blit(txt, (FIELD_MARGIN, y))
            y += txt.get_height()

    def _draw_field(self, surface):
        field = self.scene.config.field_dimensions
        ox, oy = self.field_origin
        field_rect = pygame.Rect(int(ox), int(oy), int(field.width * self.scale), int(field.height * self.scale))
        pygame.draw.rect(surface, FIELD_COLOR, field_rect)
        pygame.draw.rect(surface, FIELD_BORDER, field_rect, 3)

        # Séparateurs entre les sections (bord gauche de chaque section hors première)
        for section in self.scene.config.deck_sections[1:]:
            x, _ = self.to_screen(section.bounds.origin)
            pygame.draw.line(surface, SECTION_DIVIDER, (x, field_rect.top), (x, field_rect.bottom - 1), 2)

    def _draw_debug(self, surface, views: List[CardView]):
        font = self.res.get_font(12)
        for cv in views:
            label = f"#{cv.snapshot.card_id} z={cv.snapshot.z_index}"
            txt = font.render(label, True, TEXT_PRIMARY)
            surface.blit(txt, (cv.rect.x, cv.rect.bottom + 2))
