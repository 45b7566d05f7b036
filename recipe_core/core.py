from dependency_injector import containers, providers

from recipe_core.application.recipes.use_cases.create_recipe_use_case import CreateRecipeUseCase
from recipe_core.config import configure_logging, get_settings
from recipe_core.domain.common.clock import system_clock
from recipe_core.infrastructure.recipes.mappers.recipe_mapper import RecipeMapper


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Started by container.init_resources()
    logging_setup = providers.Resource(
        configure_logging, environment=settings.provided.ENVIRONMENT
    )

    # Time source for published_at, override with a fixed clock in tests
    clock = providers.Singleton(system_clock, timezone=settings.provided.TIMEZONE)

    # Mappers
    recipe_mapper = providers.Factory(RecipeMapper, clock=clock)

    # Recipe module, application use cases
    create_recipe_use_case = providers.Factory(CreateRecipeUseCase, clock=clock)


container = Container()
