"""Error taxonomy for animal fact resolution."""

from enum import Enum


class ErrorTag(str, Enum):
    """Every way a fact lookup can fail."""

    VALIDATION = "Validation"
    CONVERT_TO_ANIMAL = "ConvertToAnimal"
    API_REQUEST = "ApiRequest"
    API_RESPONSE = "ApiResponse"
    TO_TEXT = "ToText"
    DESERIALIZATION = "Deserialization"


class FactError(Exception):
    """Base class for tagged fact lookup failures."""

    tag: ErrorTag

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SelectorValidationError(FactError):
    """The animal selector is missing, empty or too long."""

    tag = ErrorTag.VALIDATION


class ConvertToAnimalError(FactError):
    """The selector does not name a supported animal."""

    tag = ErrorTag.CONVERT_TO_ANIMAL

    def __init__(self, value: str):
        self.value = value.lower()
        super().__init__(f"'{self.value}' is not a supported animal.")


class ApiRequestError(FactError):
    """The upstream provider could not be reached."""

    tag = ErrorTag.API_REQUEST

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error during Request to animal API: {detail}")


class ApiResponseError(FactError):
    """The upstream provider answered with a non-2xx status."""

    tag = ErrorTag.API_RESPONSE

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Request to animal API failed with status code: {status_code}")


class ToTextError(FactError):
    """The upstream response body could not be read as text."""

    tag = ErrorTag.TO_TEXT

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error fetching text: {detail}")


class DeserializationError(FactError):
    """The upstream body is not JSON of the expected shape."""

    tag = ErrorTag.DESERIALIZATION

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error deserializing json string: {detail}")
