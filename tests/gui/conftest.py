import os

import pygame
import pytest

from cardtable_gui.core.resource_manager import ResourceManager

# Configuration "Headless" : uniquement le driver VIDEO dummy
os.environ["SDL_VIDEODRIVER"] = "dummy"


@pytest.fixture(scope="function")
def pygame_setup():
    """Initialisation SANS AUDIO. Le cache de fontes est vidé entre deux tests."""
    ResourceManager._instance = None
    try:
        pygame.display.init()
        pygame.font.init()
        yield pygame.display.set_mode((840, 710))
    finally:
        ResourceManager._instance = None
        pygame.quit()


class FakeClock:
    """Horloge en ms pilotée par le test (remplace pygame.time.get_ticks)."""

    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def fake_clock():
    return FakeClock()
