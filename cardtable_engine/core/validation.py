from typing import Any, Optional

from cardtable_engine.core.exceptions import InvalidArgument


def require_count(value: Any, name: str = "count", maximum: Optional[int] = None) -> int:
    """
    Valide un compteur entier >= 0 et le renvoie sous forme d'int.
    Les flottants entiers (3.0) sont acceptés, les booléens non.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} doit être un entier positif ou nul (reçu : {value!r})")

    if isinstance(value, float) and not value.is_integer():
        raise InvalidArgument(f"{name} doit être un entier positif ou nul (reçu : {value!r})")

    count = int(value)
    if count < 0:
        raise InvalidArgument(f"{name} doit être un entier positif ou nul (reçu : {value!r})")

    if maximum is not None and count > maximum:
        raise InvalidArgument(f"{name} doit être compris entre 0 et {maximum} (reçu : {value!r})")

    return count


def require_present(value: Any, name: str):
    """Lève InvalidArgument si un argument obligatoire est absent."""
    if value is None:
        raise InvalidArgument(f"{name} est obligatoire")
    return value
