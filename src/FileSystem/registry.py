"""
File service registry.

This module maps adapter names to file service implementations and builds
adapter instances from a name and an option mapping.
"""

import importlib
import inspect
import logging
from typing import Any, Dict, Mapping, Optional, Type

from FileSystem.base import AbstractFileService
from FileSystem.errors import AdapterConfigurationError, AdapterNotFoundError
from FileSystem.local import LocalFileService

# Registry of file service implementations
_FILE_SERVICE_REGISTRY: Dict[str, Type[AbstractFileService]] = {}
logger = logging.getLogger(__name__)


def register_file_service(name: str, service_class: Type[AbstractFileService]) -> None:
    """
    Register a file service implementation.

    Args:
        name: The name the implementation is selected by
        service_class: The file service implementation class
    """
    logger.debug(f"Registering file service: {name}")
    _FILE_SERVICE_REGISTRY[name] = service_class


def _import_class(class_path: str) -> Optional[type]:
    """Import a class from a dotted path, returning None if it cannot be found."""
    module_name, _, class_name = class_path.rpartition('.')
    if not module_name:
        return None

    try:
        module = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        logger.debug(f"Cannot import module {module_name}: {e}")
        return None

    return getattr(module, class_name, None)


def resolve_file_service(name: str) -> Type[AbstractFileService]:
    """
    Find the file service class for a name.

    The name is looked up in the registry first, then imported as a fully
    qualified class path such as "FileSystem.local.LocalFileService".

    Args:
        name: A registered name or a dotted class path

    Returns:
        The file service class

    Raises:
        AdapterNotFoundError: If no file service class matches the name
    """
    if name in _FILE_SERVICE_REGISTRY:
        return _FILE_SERVICE_REGISTRY[name]

    service_class = _import_class(name) if name else None
    if not inspect.isclass(service_class) or not issubclass(service_class, AbstractFileService):
        raise AdapterNotFoundError(f"File service not found: {name!r}")
    return service_class


def _check_options(service_class: Type[AbstractFileService], options: Mapping[str, Any]) -> None:
    """Reject option keys the adapter constructor does not accept."""
    parameters = inspect.signature(service_class.__init__).parameters
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters.values()):
        return

    accepted = {
        p.name for p in parameters.values()
        if p.name != 'self' and p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    }
    unknown = sorted(set(options) - accepted)
    if unknown:
        raise AdapterConfigurationError(
            f"Unknown options for {service_class.__name__}: {', '.join(unknown)}"
        )


def create_file_service(name: str, options: Optional[Mapping[str, Any]] = None) -> AbstractFileService:
    """
    Build and initialize a file service.

    Args:
        name: A registered name or a dotted class path
        options: Keyword arguments for the adapter constructor

    Returns:
        An initialized file service instance

    Raises:
        AdapterNotFoundError: If the name does not match a file service
        AdapterConfigurationError: If the options are rejected by the adapter
    """
    logger.debug(f"Creating file service: {name}")
    options = dict(options or {})

    service_class = resolve_file_service(name)
    _check_options(service_class, options)

    try:
        service = service_class(**options)
        service.initialize()
    except (TypeError, ValueError) as e:
        raise AdapterConfigurationError(f"Cannot configure {service_class.__name__}: {e}") from e

    return service


# Register built-in file service implementations
register_file_service("local", LocalFileService)
