"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrient_resolver.adapters.openai_text_client import OpenAITextClient
from nutrient_resolver.adapters.supabase_food_data_repository import (
    SupabaseFoodDataRepository,
)
from nutrient_resolver.config import Settings
from nutrient_resolver.services.food_data import StandardNutrientStore
from nutrient_resolver.services.generation import GenerativeNutrientClient
from nutrient_resolver.services.resolution import NutrientResolutionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_store: StandardNutrientStore
    resolution_service: NutrientResolutionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_store = StandardNutrientStore(
        SupabaseFoodDataRepository(
            supabase_client, table_name=resolved_settings.food_data_table
        )
    )
    openai_client = OpenAITextClient.create(resolved_settings.openai_api_key)
    generator = GenerativeNutrientClient(
        client=openai_client,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
        max_output_tokens=resolved_settings.openai_max_output_tokens,
        store=resolved_settings.openai_store,
    )
    resolution_service = NutrientResolutionService(
        store=food_store,
        generator=generator,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_store=food_store,
        resolution_service=resolution_service,
        close_resources=close_resources,
    )
