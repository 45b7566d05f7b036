"""Tests for the dependency injection container."""

from datetime import datetime

import structlog

from recipe_core.application.recipes.use_cases.create_recipe_use_case import CreateRecipeUseCase
from recipe_core.core import Container
from recipe_core.infrastructure.recipes.mappers.recipe_mapper import RecipeMapper
from recipe_core.infrastructure.recipes.schemas import RecipeCreate


def test_container_provides_use_case(test_container: Container) -> None:
    use_case = test_container.create_recipe_use_case()

    assert isinstance(use_case, CreateRecipeUseCase)


def test_use_case_uses_overridden_clock(
    test_container: Container, recipe_input: dict[str, object], moment: datetime
) -> None:
    recipe = test_container.create_recipe_use_case().create_recipe(**recipe_input)  # type: ignore[arg-type]

    assert recipe.published_at == moment


def test_mapper_uses_overridden_clock(
    test_container: Container, recipe_input: dict[str, object], moment: datetime
) -> None:
    mapper = test_container.recipe_mapper()

    recipe = mapper.to_domain(RecipeCreate.model_validate(recipe_input))

    assert isinstance(mapper, RecipeMapper)
    assert recipe.published_at == moment


def test_default_clock_is_timezone_aware() -> None:
    container = Container()

    now = container.clock()()

    assert now.tzinfo is not None


def test_init_resources_configures_logging() -> None:
    container = Container()

    try:
        container.init_resources()
        assert structlog.is_configured()
    finally:
        container.shutdown_resources()
        structlog.reset_defaults()
