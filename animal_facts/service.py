"""Processor exposing the animal fact endpoint."""

import logging
from typing import List

import httpx
from pydantic import BaseModel, Field

from .config import Settings, settings as default_settings
from .errors import FactError
from .http_client import build_async_client
from .models import FactResponse
from .processor import BaseProcessor, StatelessAction
from .providers import endpoints_from_settings
from .resolver import FactResolver
from .shaper import ResponseShaper

logger = logging.getLogger(__name__)


class FactQuery(BaseModel):
    """Query parameters for ``GET /fact``; bounds are checked by the resolver."""

    animal: str | None = Field(
        None,
        description="Animal selector such as 'cat' or 'dog', or 'any' for a random animal.",
    )


class AnimalFactProcessor(BaseProcessor):
    """Processor that fetches a fact about the requested animal."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        resolver: FactResolver | None = None,
    ):
        """
        Args:
            settings: Optional settings override (defaults to the global settings)
            client: Shared HTTP client; when omitted the processor opens one on
                startup and closes it on shutdown
            resolver: Optional resolver override
        """
        self.settings = settings or default_settings
        self.owns_client = client is None
        self.client = client
        self.resolver = resolver
        if self.resolver is None and client is not None:
            self.resolver = self._build_resolver(client)
        self._owns_resolver = resolver is None
        self.shaper = ResponseShaper()

    def _build_resolver(self, client: httpx.AsyncClient) -> FactResolver:
        return FactResolver(client, endpoints_from_settings(self.settings))

    @property
    def name(self) -> str:
        return self.settings.service_name

    @property
    def version(self) -> str:
        return self.settings.service_version

    def get_stateless_actions(self) -> List[StatelessAction]:
        return [
            StatelessAction(
                name="get_animal_fact",
                path="/fact",
                query_params_model=FactQuery,
                response_model=FactResponse,
                handler=self.handle_fact,
                summary="Fetch a fact about an animal.",
                description=(
                    "Returns a fact from the upstream provider for the requested animal. "
                    "Use animal=any to let the service pick one at random; the response "
                    "names the animal that was chosen."
                ),
                tags=("facts",),
            ),
        ]

    async def handle_fact(self, query: FactQuery):
        try:
            result = await self.resolver.resolve(query.animal)
        except FactError as exc:
            return self.shaper.to_http(exc)
        return self.shaper.to_http(result)

    async def startup(self) -> None:
        if not self.owns_client:
            return
        self.client = build_async_client(self.settings)
        if self._owns_resolver:
            self.resolver = self._build_resolver(self.client)
        logger.info("Opened upstream HTTP client")

    async def shutdown(self) -> None:
        if not self.owns_client or self.client is None:
            return
        await self.client.aclose()
        self.client = None
        logger.info("Closed upstream HTTP client")
