"""Upstream fact providers, one per animal kind."""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

import httpx
from pydantic import BaseModel, ValidationError

from .catalog import AnimalKind
from .config import Settings
from .errors import ApiRequestError, ApiResponseError, DeserializationError, ToTextError

logger = logging.getLogger(__name__)

FACT_NOT_AVAILABLE = "Not available"


class CatFactPayload(BaseModel):
    """Cat API body: a single fact."""

    text: str


class DogFactPayload(BaseModel):
    """Dog API body: a list of facts, only the first is used."""

    facts: list[str]


def _first_dog_fact(payload: DogFactPayload) -> str:
    return payload.facts[0] if payload.facts else FACT_NOT_AVAILABLE


@dataclass(frozen=True)
class ProviderAdapter:
    """
    How to fetch and unwrap a fact from one upstream API.

    Attributes:
        kind: Animal this provider serves.
        payload_model: Pydantic model describing the upstream JSON body.
        extract: Pulls the fact text out of a validated payload.
    """

    kind: AnimalKind
    payload_model: type[BaseModel]
    extract: Callable[[BaseModel], str]

    async def fetch_fact(self, client: httpx.AsyncClient, url: str) -> str:
        """
        GET ``url`` and return the fact text it carries.

        Raises:
            ApiRequestError: the request could not be sent
            ApiResponseError: upstream answered with a non-2xx status
            ToTextError: the body could not be read
            DeserializationError: the body is not the expected JSON
        """
        logger.debug("Fetching %s fact from %s", self.kind.value, url)

        try:
            response = await client.send(client.build_request("GET", url), stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ApiRequestError(repr(exc)) from exc

        try:
            if not response.is_success:
                raise ApiResponseError(response.status_code)
            try:
                await response.aread()
                body = response.text
            except (httpx.HTTPError, httpx.StreamError, UnicodeError) as exc:
                raise ToTextError(repr(exc)) from exc
        finally:
            await response.aclose()

        try:
            payload = self.payload_model.model_validate_json(body)
        except ValidationError as exc:
            raise DeserializationError(str(exc)) from exc

        return self.extract(payload)


PROVIDERS: Mapping[AnimalKind, ProviderAdapter] = {
    AnimalKind.CAT: ProviderAdapter(
        kind=AnimalKind.CAT,
        payload_model=CatFactPayload,
        extract=lambda payload: payload.text,
    ),
    AnimalKind.DOG: ProviderAdapter(
        kind=AnimalKind.DOG,
        payload_model=DogFactPayload,
        extract=_first_dog_fact,
    ),
}


def endpoints_from_settings(settings: Settings) -> dict[AnimalKind, str]:
    """Map each animal kind to its configured upstream URL."""
    return {
        AnimalKind.CAT: str(settings.cat_api_url),
        AnimalKind.DOG: str(settings.dog_api_url),
    }
