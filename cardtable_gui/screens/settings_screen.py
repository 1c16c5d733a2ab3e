import pygame
from typing import List

from cardtable_engine.utils.logger import log_info
from cardtable_engine.core.consts import CardType, MAX_CARDS_PER_DECK, MAX_DECK_COUNT, MIN_DECK_COUNT
# --- GUI BASE & WIDGETS ---
from cardtable_gui.screens.base_screen import BaseScreen
from cardtable_gui.widgets.buttons import Button, Stepper, Toggle, UIWidget

# --- CONFIG & COLORS ---
from cardtable_gui.core.colors import (
    TEXT_PRIMARY, TEXT_SECONDARY, ACCENT,
    BTN_SURFACE, BTN_DANGER, BTN_HOVER
)

CARD_TYPE_LABELS = {
    CardType.CLASSIC: "Classic Playing Cards",
    CardType.CCG: "Collectible Card Game",
}


class SettingsScreen(BaseScreen):
    """
    Écran de configuration de la table.
    Nombre de decks, cartes par deck, type de carte et plein écran.
    """

    def __init__(self, app):
        super().__init__(app)
        self.config = app.config
        self.res = app.res_manager

        self.widgets: List[UIWidget] = []

        self._init_ui()

    def on_resize(self, w, h):
        """Recalcule la mise en page lors du redimensionnement de la fenêtre."""
        super().on_resize(w, h)
        self._init_ui()

    def _init_ui(self):
        """Génère tous les widgets de l'écran en fonction de l'état actuel de la config."""
        self.widgets.clear()

        cx = self.width // 2
        y = 60
        spacing = 60

        font_title = self.res.get_font(60, bold=True)
        font_widget = self.res.get_font(24)

        # 1. TITRE
        self.title_surf = font_title.render("PARAMÈTRES", True, TEXT_PRIMARY)
        self.title_rect = self.title_surf.get_rect(center=(cx, y))
        y += 100

        # 2. NOMBRE DE DECKS
        self.deck_stepper = Stepper(
            cx=cx + 80, y=y,
            label_text="Decks",
            font=font_widget,
            value=self.config.deck_count,
            minimum=MIN_DECK_COUNT, maximum=MAX_DECK_COUNT,
            action="SET_DECKS"
        )
        self.widgets.append(self.deck_stepper)
        y += spacing

        # 3. CARTES PAR DECK
        self.cards_stepper = Stepper(
            cx=cx + 80, y=y,
            label_text="Cartes par deck",
            font=font_widget,
            value=self.config.cards_per_deck,
            minimum=1, maximum=MAX_CARDS_PER_DECK,
            action="SET_CARDS"
        )
        self.widgets.append(self.cards_stepper)
        y += spacing

        # 4. TYPE DE CARTE (Bouton Cycle)
        btn_type = Button(
            x=cx - 170, y=y, width=340, height=50,
            text=CARD_TYPE_LABELS[self.config.card_type],
            font=font_widget,
            action="CYCLE_CARD_TYPE",
            bg_color=BTN_SURFACE,
            text_color=ACCENT,
            hover_color=BTN_HOVER
        )
        self.widgets.append(btn_type)
        y += spacing + 10

        # 5. PLEIN ÉCRAN
        tg_full = Toggle(
            cx=cx + 80, y=y,
            label_text="Plein Écran",
            font=font_widget,
            initial_value=getattr(self.config, "fullscreen", False),
            action="TOGGLE_FULLSCREEN"
        )
        self.widgets.append(tg_full)
        y += spacing

        # 6. PIED DE PAGE (Bouton Retour)
        btn_y = max(y + 30, self.height - 80)
        btn_back = Button(
            x=cx - 100, y=btn_y, width=200, height=50,
            text="RETOUR",
            font=font_widget,
            action="TABLE",
            bg_color=BTN_DANGER,
            hover_color=BTN_HOVER
        )
        self.widgets.append(btn_back)

    def handle_events(self, events):
        """Gestion des entrées clavier et souris."""
        for event in events:
            # Raccourci ECHAP pour quitter et sauvegarder
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._save_and_exit()
                return "TABLE"

            for widget in self.widgets:
                action = widget.handle_event(event)
                if action:
                    return self._process_action(action)
        return None

    def _process_action(self, action: str):
        """Logique interne déclenchée par les clics widgets."""
        if action == "TABLE":
            self._save_and_exit()
            return "TABLE"

        elif action == "SET_DECKS":
            self.config.deck_count = self.deck_stepper.value
            return None

        elif action == "SET_CARDS":
            self.config.cards_per_deck = self.cards_stepper.value
            return None

        elif action == "CYCLE_CARD_TYPE":
            self._cycle_card_type()
            return None

        elif action == "TOGGLE_FULLSCREEN":
            self.config.fullscreen = not self.config.fullscreen
            self.app.apply_display_mode()
            w, h = self.app.screen.get_size()
            self.on_resize(w, h)
            return None

        return None

    def _cycle_card_type(self):
        """Alterne entre les types de carte disponibles."""
        types = list(CardType)
        idx = types.index(self.config.card_type)
        self.config.card_type = types[(idx + 1) % len(types)]
        self._init_ui()

    def _save_and_exit(self):
        """Persiste les paramètres via le ConfigurationService avant de quitter."""
        log_info("💾 Sauvegarde des paramètres en cours...")
        self.config.save()

    def update(self, dt):
        """Met à jour l'état de survol des boutons."""
        mouse_pos = pygame.mouse.get_pos()
        for w in self.widgets:
            w.update(dt, mouse_pos)

    def draw(self, surface):
        """Rendu visuel de l'écran."""
        surface.blit(self.title_surf, self.title_rect)

        for w in self.widgets:
            w.draw(surface)

        footer_font = self.res.get_font(14)
        hint = footer_font.render("ÉCHAP : sauvegarder et revenir à la table", True, TEXT_SECONDARY)
        surface.blit(hint, (15, self.height - 25))
