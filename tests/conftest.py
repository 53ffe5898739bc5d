"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from nutrient_resolver.config import Settings
from nutrient_resolver.containers import AppContainer
from nutrient_resolver.domain.nutrients import NUTRIENT_FIELDS
from nutrient_resolver.services.food_data import (
    FoodDataRepository,
    StandardNutrientStore,
)
from nutrient_resolver.services.generation import (
    GenerativeNutrientClient,
    TextGenerationClient,
)
from nutrient_resolver.services.resolution import NutrientResolutionService

BASES = ("grams", "ml", "pieces", "pack")


def profile_payload(**amounts: float) -> dict[str, float]:
    """Return a twelve-field profile, zero unless overridden."""
    profile = dict.fromkeys(NUTRIENT_FIELDS, 0)
    profile.update(amounts)
    return profile


def table_payload(**bases: dict[str, float]) -> dict[str, object]:
    """Return a stored-shape table; unspecified bases are all zero."""
    payload: dict[str, object] = {"foodItem": "test food"}
    for basis in BASES:
        payload[basis] = bases.get(basis, profile_payload())
    return payload


def table_json(**bases: dict[str, float]) -> str:
    return json.dumps(table_payload(**bases), indent=2)


@dataclass
class InMemoryFoodDataRepository(FoodDataRepository):
    """In-memory food data repository for tests."""

    rows: dict[tuple[UUID, str], dict[str, object]] = field(default_factory=dict)
    writes: list[tuple[UUID, str]] = field(default_factory=list)
    fail_reads: bool = False
    fail_writes: bool = False

    def get_food_data(self, user_id: UUID, food_name: str) -> dict[str, object] | None:
        if self.fail_reads:
            raise ConnectionError("store unreachable")
        return self.rows.get((user_id, food_name))

    def upsert_food_data(
        self, user_id: UUID, food_name: str, payload: dict[str, object]
    ) -> None:
        if self.fail_writes:
            raise ConnectionError("store unreachable")
        self.writes.append((user_id, food_name))
        self.rows[(user_id, food_name)] = payload

    def list_food_names(self, user_id: UUID) -> list[str]:
        if self.fail_reads:
            raise ConnectionError("store unreachable")
        return [name for owner, name in self.rows if owner == user_id]


@dataclass
class FakeTextClient(TextGenerationClient):
    """Fake LLM client returning a fixed reply or raising."""

    reply: str = field(default_factory=table_json)
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)
    last_kwargs: dict[str, object] = field(default_factory=dict)

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
        store: bool,
    ) -> str:
        self.prompts.append(prompt)
        self.last_kwargs = {
            "model": model,
            "temperature": temperature,
            "max_output_tokens": max_output_tokens,
            "store": store,
        }
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
        openai_api_key="openai-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def repository() -> InMemoryFoodDataRepository:
    return InMemoryFoodDataRepository()


@pytest.fixture
def text_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def resolution_service(
    repository: InMemoryFoodDataRepository, text_client: FakeTextClient
) -> NutrientResolutionService:
    return NutrientResolutionService(
        store=StandardNutrientStore(repository),
        generator=GenerativeNutrientClient(client=text_client, model="test-model"),
    )


@pytest.fixture
def container(
    settings: Settings, resolution_service: NutrientResolutionService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_store=resolution_service.store,
        resolution_service=resolution_service,
        close_resources=close_resources,
    )
