"""OpenAI Responses API client for plain text generation."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from nutrient_resolver.services.generation import TextGenerationClient


@dataclass
class OpenAITextClient(TextGenerationClient):
    """Text generation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAITextClient":
        """Create an OpenAI text client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
        store: bool,
    ) -> str:
        """Send a single user prompt and return the reply text."""
        response = await self.client.responses.create(
            model=model,
            input=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            store=store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
