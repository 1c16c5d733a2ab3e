"""
Card Table GUI Package
Architecture : App -> Screens -> Widgets, la logique vit dans cardtable_engine.
"""

# On expose l'App pour faciliter l'accès depuis main.py
from .core.app import CardTableApp
