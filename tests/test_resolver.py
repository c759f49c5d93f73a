"""Tests for selector validation, random resolution and provider dispatch."""

import pytest

from animal_facts.catalog import AnimalKind
from animal_facts.errors import ConvertToAnimalError, ErrorTag, SelectorValidationError
from animal_facts.providers import endpoints_from_settings
from animal_facts.resolver import MAX_SELECTOR_LENGTH, FactResolver, validate_selector

from .conftest import CAT_FACT, DOG_FACT


class FixedChoice:
    """Random source that always picks the same position."""

    def __init__(self, index: int):
        self.index = index

    def choice(self, seq):
        return seq[self.index]


@pytest.fixture
def resolver(http_client, test_settings):
    return FactResolver(http_client, endpoints_from_settings(test_settings))


@pytest.mark.parametrize(
    "selector, message",
    [
        (None, "Missing required query parameter 'animal'."),
        ("", "Query parameter 'animal' must not be empty."),
        ("x" * (MAX_SELECTOR_LENGTH + 1), "must be at most 24 characters"),
    ],
)
def test_validate_selector_rejects(selector, message):
    with pytest.raises(SelectorValidationError) as exc_info:
        validate_selector(selector)

    assert exc_info.value.tag is ErrorTag.VALIDATION
    assert message in exc_info.value.message


def test_validate_selector_accepts_max_length():
    selector = "x" * MAX_SELECTOR_LENGTH
    assert validate_selector(selector) == selector


@pytest.mark.asyncio
async def test_resolve_cat(resolver, upstream):
    result = await resolver.resolve("Cat")

    assert result.fact == CAT_FACT
    assert result.kind is AnimalKind.CAT
    assert result.animal == "cat"
    assert len(upstream.calls) == 1


@pytest.mark.asyncio
async def test_resolve_dog(resolver, upstream):
    result = await resolver.resolve("DOG")

    assert result.fact == DOG_FACT
    assert result.animal == "dog"
    assert upstream.calls_to("dog.test") == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("selector", [None, "", "a" * 25])
async def test_invalid_selector_never_reaches_upstream(resolver, upstream, selector):
    with pytest.raises(SelectorValidationError):
        await resolver.resolve(selector)

    assert upstream.calls == []


@pytest.mark.asyncio
async def test_unknown_selector_never_reaches_upstream(resolver, upstream):
    with pytest.raises(ConvertToAnimalError) as exc_info:
        await resolver.resolve("elephant")

    assert "elephant" in exc_info.value.message
    assert upstream.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("index, kind", [(0, AnimalKind.CAT), (1, AnimalKind.DOG)])
async def test_any_uses_random_choice(http_client, test_settings, upstream, index, kind):
    resolver = FactResolver(
        http_client, endpoints_from_settings(test_settings), rng=FixedChoice(index)
    )

    result = await resolver.resolve("ANY")

    assert result.kind is kind
    assert result.animal == kind.value
    assert len(upstream.calls) == 1


def test_any_draws_every_kind(resolver):
    drawn = {resolver.resolve_kind("any") for _ in range(200)}
    assert drawn == set(AnimalKind)


@pytest.mark.asyncio
async def test_any_with_empty_pool_falls_back_to_dog(http_client, test_settings, upstream):
    # Observed behaviour: an empty random draw silently becomes a dog.
    resolver = FactResolver(http_client, endpoints_from_settings(test_settings), kinds=())

    result = await resolver.resolve("any")

    assert result.kind is AnimalKind.DOG
    assert result.fact == DOG_FACT
    assert upstream.calls_to("dog.test") == 1
