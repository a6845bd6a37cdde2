from __future__ import annotations

import pytest

from academy_system.common.validators import require_int, require_rating
from academy_system.core.exceptions import BadRequestError


@pytest.mark.parametrize("value", [7.9, 10.9, "7.9", True, None, "x"])
def test_require_int_rejects_non_integers(value):
    with pytest.raises(BadRequestError, match="playerId must be an integer"):
        require_int(value, "playerId")


@pytest.mark.parametrize("value, expected", [(7, 7), (7.0, 7), ("12", 12)])
def test_require_int_accepts_whole_numbers(value, expected):
    assert require_int(value, "playerId") == expected


def test_require_rating_rejects_fractional_rating():
    with pytest.raises(BadRequestError, match="rating must be an integer"):
        require_rating(7.5)
