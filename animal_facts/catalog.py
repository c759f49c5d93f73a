"""Supported animal kinds and their query selectors."""

from enum import Enum

from .errors import ConvertToAnimalError


class AnimalKind(str, Enum):
    """An animal we can fetch facts for. The value is its canonical selector."""

    CAT = "cat"
    DOG = "dog"


# Random choice pool; order is stable.
ANIMAL_KINDS: tuple[AnimalKind, ...] = (
    AnimalKind.CAT,
    AnimalKind.DOG,
)

ANY_SELECTOR = "any"


def all_kinds() -> tuple[AnimalKind, ...]:
    return ANIMAL_KINDS


def to_selector(kind: AnimalKind) -> str:
    return kind.value


def from_selector(value: str) -> AnimalKind:
    """
    Parse a caller supplied selector, ignoring case.

    Raises:
        ConvertToAnimalError: if the selector does not name a supported animal
    """
    selector = value.lower()
    for kind in ANIMAL_KINDS:
        if kind.value == selector:
            return kind
    raise ConvertToAnimalError(value)
