class InvalidArgument(ValueError):
    """
    Argument ou configuration invalide (compteur négatif, section absente, nombre de decks hors {1, 2}...).
    Toujours levée de façon synchrone, jamais corrigée en silence.
    """
    pass
