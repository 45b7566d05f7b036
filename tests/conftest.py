"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from dependency_injector import providers

from recipe_core.core import Container, container
from recipe_core.domain.common.clock import Clock, fixed_clock

FIXED_MOMENT = datetime(2024, 5, 17, 12, 30, tzinfo=UTC)


@pytest.fixture
def moment() -> datetime:
    """The moment returned by the fixed clock."""
    return FIXED_MOMENT


@pytest.fixture
def clock(moment: datetime) -> Clock:
    """Clock frozen at a known moment."""
    return fixed_clock(moment)


@pytest.fixture
def recipe_input() -> dict[str, object]:
    """Raw input for a valid recipe."""
    return {
        "id": "10",
        "name": "Oregano Marinated Chicken",
        "tags": ["main", "chicken"],
        "ingredients": ["4 (6 to 7-ounce) boneless skinless chicken breasts\r"],
        "instructions": [
            "To marinate the chicken: In a non-reactive dish, combine the lemon juice, "
            "olive oil, oregano, salt, and pepper and mix together"
        ],
    }


@pytest.fixture
def test_container(clock: Clock) -> Generator[Container, None, None]:
    """Application container with the clock frozen."""
    with container.clock.override(providers.Object(clock)):
        yield container
