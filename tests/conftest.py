from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from utopia.config import reset_settings


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def fresh_settings() -> Generator[None]:
    reset_settings()
    try:
        yield
    finally:
        reset_settings()
