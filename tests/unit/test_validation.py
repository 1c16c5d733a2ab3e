import pytest

from cardtable_engine.core.exceptions import InvalidArgument
from cardtable_engine.core.validation import require_count, require_present


def test_require_count_accepts_non_negative_integers():
    assert require_count(0) == 0
    assert require_count(15, maximum=15) == 15
    assert require_count(4.0) == 4
    assert isinstance(require_count(4.0), int)


@pytest.mark.parametrize("bad", [-1, 1.5, float("nan"), float("inf"), True, False, "2", None, [3]])
def test_require_count_rejects(bad):
    with pytest.raises(InvalidArgument):
        require_count(bad)


def test_require_count_maximum_message():
    with pytest.raises(InvalidArgument, match="entre 0 et 15"):
        require_count(16, "Nombre de cartes", maximum=15)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        require_count(-3)


def test_require_present():
    assert require_present(0, "x") == 0
    with pytest.raises(InvalidArgument, match="config"):
        require_present(None, "config")
