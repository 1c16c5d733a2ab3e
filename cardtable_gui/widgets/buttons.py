import pygame
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from cardtable_gui.core.colors import (
    BTN_SURFACE, BTN_HOVER, BTN_BORDER, BTN_FOCUS,
    TEXT_PRIMARY, STATUS_OK
)

Color = Tuple[int, int, int]


class UIWidget(ABC):
    """
    Élément interactif posé sur un écran (bouton, interrupteur, carte...).
    Un widget suit le survol, se dessine et convertit un clic en identifiant d'action
    que l'écran renvoie à l'App.
    """

    LABEL_GAP = 20

    def __init__(self, x: int, y: int, width: int, height: int, action: Optional[str] = None):
        self.rect = pygame.Rect(x, y, width, height)
        self.action = action  # ex : "GOTO_SETTINGS", "SET_DECKS"
        self.is_hovered = False

    def update(self, dt: float, mouse_pos: Optional[Tuple[int, int]]):
        self.is_hovered = bool(mouse_pos) and self.rect.collidepoint(mouse_pos)

    @abstractmethod
    def draw(self, surface: pygame.Surface):
        pass

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Retourne self.action si l'événement déclenche le widget, sinon None."""
        pass

    # --- Helpers communs ---

    @staticmethod
    def is_left_click(event: pygame.event.Event) -> bool:
        return event.type == pygame.MOUSEBUTTONDOWN and event.button == 1

    def clicked(self, event: pygame.event.Event, area: Optional[pygame.Rect] = None) -> bool:
        """Clic gauche dans la zone (le rect du widget par défaut), testé sur la position de l'événement."""
        return self.is_left_click(event) and (area or self.rect).collidepoint(event.pos)

    def outline_color(self) -> Color:
        return BTN_FOCUS if self.is_hovered else BTN_BORDER

    def draw_side_label(self, surface: pygame.Surface, font: pygame.font.Font, text: str):
        """Libellé aligné à droite, à gauche du widget."""
        if not text:
            return
        label = font.render(text, True, TEXT_PRIMARY)
        surface.blit(label, label.get_rect(midright=(self.rect.left - self.LABEL_GAP, self.rect.centery)))


class Button(UIWidget):
    """Bouton texte. Fond `hover_color` au survol, contour doré."""

    def __init__(self,
                 x: int, y: int, width: int, height: int,
                 text: str,
                 font: pygame.font.Font,
                 action: str,
                 bg_color: Color = BTN_SURFACE,
                 text_color: Color = TEXT_PRIMARY,
                 hover_color: Color = BTN_HOVER):
        super().__init__(x, y, width, height, action)
        self.text = text
        self.font = font
        self.bg_color = bg_color
        self.text_color = text_color
        self.hover_color = hover_color

    def draw(self, surface: pygame.Surface):
        fill = self.hover_color if self.is_hovered else self.bg_color
        pygame.draw.rect(surface, fill, self.rect, border_radius=8)
        pygame.draw.rect(surface, self.outline_color(), self.rect, 2, border_radius=8)

        if self.text:
            txt = self.font.render(self.text, True, self.text_color)
            surface.blit(txt, txt.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        return self.action if self.clicked(event) else None


class Toggle(UIWidget):
    """Interrupteur ON/OFF en forme de pilule, libellé à gauche."""

    SIZE = (60, 30)

    def __init__(self,
                 cx: int, y: int,
                 label_text: str,
                 font: pygame.font.Font,
                 initial_value: bool = False,
                 action: Optional[str] = None):
        w, h = self.SIZE
        super().__init__(cx - w // 2, y, w, h, action)
        self.label_text = label_text
        self.font = font
        self.value = initial_value

    def draw(self, surface: pygame.Surface):
        self.draw_side_label(surface, self.font, self.label_text)

        radius = self.rect.height // 2
        pygame.draw.rect(surface, STATUS_OK if self.value else BTN_SURFACE, self.rect, border_radius=radius)
        pygame.draw.rect(surface, self.outline_color(), self.rect, 2, border_radius=radius)

        # Pastille : à droite quand ON
        knob_x = self.rect.right - radius if self.value else self.rect.left + radius
        pygame.draw.circle(surface, self.outline_color(), (knob_x, self.rect.centery), radius - 4)

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        if not self.clicked(event):
            return None
        self.value = not self.value
        return self.action


class Stepper(UIWidget):
    """
    Sélecteur numérique borné : [ - ]  valeur  [ + ].
    Sert au nombre de decks et au nombre de cartes par deck.
    """

    SIZE = (160, 40)

    def __init__(self,
                 cx: int, y: int,
                 label_text: str,
                 font: pygame.font.Font,
                 value: int, minimum: int, maximum: int,
                 action: Optional[str] = None):
        w, h = self.SIZE
        super().__init__(cx - w // 2, y, w, h, action)

        self.label_text = label_text
        self.font = font
        self.minimum = minimum
        self.maximum = maximum
        self.value = max(minimum, min(value, maximum))

        self.minus_rect = pygame.Rect(self.rect.left, y, h, h)
        self.plus_rect = pygame.Rect(self.rect.right - h, y, h, h)

    def draw(self, surface: pygame.Surface):
        self.draw_side_label(surface, self.font, self.label_text)

        pygame.draw.rect(surface, BTN_SURFACE, self.rect, border_radius=8)
        pygame.draw.rect(surface, self.outline_color(), self.rect, 2, border_radius=8)

        for rect, sign, enabled in ((self.minus_rect, "-", self.value > self.minimum),
                                    (self.plus_rect, "+", self.value < self.maximum)):
            txt = self.font.render(sign, True, TEXT_PRIMARY if enabled else BTN_HOVER)
            surface.blit(txt, txt.get_rect(center=rect.center))

        val_surf = self.font.render(str(self.value), True, TEXT_PRIMARY)
        surface.blit(val_surf, val_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        if self.clicked(event, self.minus_rect) and self.value > self.minimum:
            self.value -= 1
            return self.action
        if self.clicked(event, self.plus_rect) and self.value < self.maximum:
            self.value += 1
            return self.action
        return None
