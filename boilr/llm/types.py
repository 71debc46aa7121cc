# boilr/llm/types.py
"""Types shared by all provider client implementations."""

from dataclasses import dataclass
from typing import Any, Protocol

from boilr.config.schema import Provider


class StructuredClient(Protocol):
    """One structured-output request per call, no retries, no streaming."""

    provider: Provider
    model: str

    async def generate_structured(
        self, system: str, prompt: str, schema: dict, name: str
    ) -> Any:
        """Return the reply as a dict or as JSON text."""
        ...

    async def close(self) -> None: ...


@dataclass(frozen=True)
class ProviderSpec:
    """Lookup-table entry: display label, default model, client class."""

    provider: Provider
    label: str
    default_model: str
    client_class: type
