"""Animal facts service: one uniform JSON contract over several fact APIs."""

from .api import ServiceConfig, create_app
from .catalog import AnimalKind, all_kinds, from_selector, to_selector
from .config import Settings, settings
from .errors import ErrorTag, FactError
from .processor import BaseProcessor, StatelessAction
from .providers import PROVIDERS, ProviderAdapter
from .resolver import FactResolver, ResolvedFact
from .service import AnimalFactProcessor
from .shaper import ResponseShaper

__version__ = "0.1.0"


__all__ = [
    "AnimalFactProcessor",
    "AnimalKind",
    "BaseProcessor",
    "ErrorTag",
    "FactError",
    "FactResolver",
    "PROVIDERS",
    "ProviderAdapter",
    "ResolvedFact",
    "ResponseShaper",
    "ServiceConfig",
    "Settings",
    "StatelessAction",
    "all_kinds",
    "create_app",
    "from_selector",
    "settings",
    "to_selector",
]
