"""Turns an animal selector into a fact from the matching provider."""

import logging
import random
from dataclasses import dataclass
from typing import Mapping, Sequence

import httpx

from .catalog import ANY_SELECTOR, AnimalKind, all_kinds, from_selector, to_selector
from .errors import SelectorValidationError
from .providers import PROVIDERS, ProviderAdapter

logger = logging.getLogger(__name__)

MAX_SELECTOR_LENGTH = 24


@dataclass(frozen=True)
class ResolvedFact:
    """A fact and the animal it was fetched for."""

    fact: str
    kind: AnimalKind

    @property
    def animal(self) -> str:
        return to_selector(self.kind)


def validate_selector(selector: str | None) -> str:
    """Return the selector if present and within bounds, else raise SelectorValidationError."""
    if selector is None:
        raise SelectorValidationError("Missing required query parameter 'animal'.")
    if not selector:
        raise SelectorValidationError("Query parameter 'animal' must not be empty.")
    if len(selector) > MAX_SELECTOR_LENGTH:
        raise SelectorValidationError(
            f"Query parameter 'animal' must be at most {MAX_SELECTOR_LENGTH} characters."
        )
    return selector


class FactResolver:
    """
    Validates a selector, resolves it to one animal and fetches its fact.

    One upstream call per ``resolve``; nothing is retried.

    Args:
        client: Shared HTTP client passed to every provider call
        endpoints: Upstream URL per animal kind
        providers: Adapter per animal kind (defaults to the built-in registry)
        kinds: Pool used when the caller asks for ``any`` animal
        rng: Random source with a ``choice`` method
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoints: Mapping[AnimalKind, str],
        providers: Mapping[AnimalKind, ProviderAdapter] | None = None,
        kinds: Sequence[AnimalKind] | None = None,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.endpoints = endpoints
        self.providers = PROVIDERS if providers is None else providers
        self.kinds = all_kinds() if kinds is None else tuple(kinds)
        self.rng = rng or random.Random()

    def pick_random_kind(self) -> AnimalKind:
        try:
            return self.rng.choice(self.kinds)
        except IndexError:
            logger.warning("No animal kinds to choose from, falling back to %s", AnimalKind.DOG.value)
            return AnimalKind.DOG

    def resolve_kind(self, selector: str | None) -> AnimalKind:
        selector = validate_selector(selector)
        if selector.lower() == ANY_SELECTOR:
            kind = self.pick_random_kind()
            logger.debug("Randomly picked %s", kind.value)
            return kind
        return from_selector(selector)

    async def resolve(self, selector: str | None) -> ResolvedFact:
        """
        Fetch a fact for ``selector``.

        Raises:
            FactError: tagged failure from validation, resolution or the provider
        """
        kind = self.resolve_kind(selector)
        provider = self.providers[kind]
        fact = await provider.fetch_fact(self.client, self.endpoints[kind])
        return ResolvedFact(fact=fact, kind=kind)
