"""Structured generation through an LLM provider."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from diet_planner.domain.errors import GenerationError

_logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GenerationClient(Protocol):
    """Interface for LLM calls constrained by a JSON schema."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object] | None:
        """Return the provider's JSON object, or None when it produced none."""


@dataclass
class GenerationService:
    """Sends prompts to the provider and validates the structured output."""

    client: GenerationClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def generate(
        self,
        *,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
        output_model: type[ModelT],
    ) -> ModelT:
        """Run one prompt and parse its output into output_model."""
        raw = await self.client.generate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=prompt,
            schema=schema,
            schema_name=schema_name,
        )
        if not raw:
            raise GenerationError(f"The AI model returned no output for {schema_name}")
        try:
            return output_model.model_validate(raw)
        except ValidationError as exc:
            _logger.warning(
                "Invalid %s output: %s errors", schema_name, exc.error_count()
            )
            raise GenerationError(
                f"The AI model returned an invalid {schema_name} response"
            ) from exc
