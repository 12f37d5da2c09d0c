"""Discovery document support: pydantic models, loader and model adapters."""

from discoview.discovery.adapters import (
    DiscoveryApiModel,
    DiscoveryField,
    DiscoveryInterface,
    DiscoveryMethod,
)
from discoview.discovery.discovery import (
    Method,
    ParameterLocation,
    Resource,
    RestDescription,
    Schema,
)
from discoview.discovery.loader import DiscoveryLoader

__all__ = [
    # Document models
    'RestDescription',
    'Resource',
    'Method',
    'Schema',
    'ParameterLocation',
    # Loading
    'DiscoveryLoader',
    # Adapters
    'DiscoveryApiModel',
    'DiscoveryInterface',
    'DiscoveryMethod',
    'DiscoveryField',
]
