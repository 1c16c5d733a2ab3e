import pygame
import sys
from .colors import BG_COLOR
from cardtable_engine.core.config import ConfigurationService
from .resource_manager import ResourceManager

from constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, WINDOW_TITLE, FPS_CAP

from cardtable_engine.utils.logger import log_info, log_debug


class CardTableApp:
    """
    Classe principale de l'application (Contrôleur racine).
    Gère la fenêtre, la boucle principale, la configuration et la navigation.
    """

    def __init__(self):
        pygame.display.init()
        pygame.font.init()

        # Préférences (deck, cartes, résolution, plein écran)
        self.config = ConfigurationService()
        log_debug(
            f"Préférences : {self.config.deck_count} deck(s), "
            f"{self.config.cards_per_deck} carte(s), type={self.config.card_type.value}"
        )

        # Configuration Fenêtre
        w, h = getattr(self.config, "resolution", (DEFAULT_WIDTH, DEFAULT_HEIGHT))
        flags = pygame.RESIZABLE

        if getattr(self.config, "fullscreen", False):
            flags |= pygame.FULLSCREEN

        self.screen = pygame.display.set_mode((w, h), flags)
        pygame.display.set_caption(WINDOW_TITLE)

        # Moteur de rendu & Ressources
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = FPS_CAP
        self.res_manager = ResourceManager()

        self.current_screen = None

    def set_screen(self, screen_instance):
        """Change l'écran actif."""
        self.current_screen = screen_instance
        if hasattr(self.current_screen, "on_enter"):
            self.current_screen.on_enter()

    def run(self):
        """Boucle principale (Game Loop)."""
        while self.running:
            dt = self.clock.tick(self.fps)

            # 1. Gestion des événements système
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self._shutdown()
                    return
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)

            # 2. Gestion de l'écran courant
            if self.current_screen:
                # A. Input (retourne une action string ou None)
                action = self.current_screen.handle_events(events)
                if action:
                    self._handle_global_action(action)

                if self.running:
                    # B. Update Logique
                    self.current_screen.update(dt)

                    # C. Rendu
                    self.screen.fill(BG_COLOR)
                    self.current_screen.draw(self.screen)

            pygame.display.flip()

        self._shutdown()

    def _handle_global_action(self, action):
        """
        Routeur de navigation centralisé.
        Imports locaux pour éviter les cycles de dépendances.
        """
        if not action:
            return

        if action == "TABLE":
            # Nouvelle table construite à partir des préférences courantes
            from cardtable_gui.screens.table_screen import TableScreen
            self.set_screen(TableScreen(self))

        elif action == "GOTO_SETTINGS":
            from cardtable_gui.screens.settings_screen import SettingsScreen
            self.set_screen(SettingsScreen(self))

        elif action == "QUIT_APP":
            self.running = False

    def _handle_resize(self, w, h):
        """Gère le redimensionnement manuel de la fenêtre (souris)."""
        if not self.config.fullscreen:
            self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
            if self.current_screen:
                self.current_screen.on_resize(w, h)

    def _shutdown(self):
        log_info("Fermeture de l'application...")
        pygame.quit()
        sys.exit()

    def apply_display_mode(self):
        """
        Applique le mode fenêtre ou plein écran selon la configuration.
        (0, 0) = 'Desktop Fullscreen', la résolution de l'OS n'est pas modifiée.
        """
        target_res = getattr(self.config, "resolution", (DEFAULT_WIDTH, DEFAULT_HEIGHT))

        if self.config.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(target_res, pygame.RESIZABLE)

        if self.current_screen:
            w, h = self.screen.get_size()
            self.current_screen.on_resize(w, h)
