"""Tests for container wiring."""

import asyncio

from nutrient_resolver.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.resolution_service.store is container.food_store
    assert container.resolution_service.generator.model == settings.openai_model
    asyncio.run(container.close_resources())
