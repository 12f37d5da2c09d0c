"""
Pydantic V2 models for Google API Discovery documents.

Based on the Discovery Document format described at:
https://developers.google.com/discovery/v1/reference/apis

Usage Example:
-------------

    from discoview.discovery import RestDescription
    import json

    with open('compute.v1.json') as f:
        document = RestDescription.model_validate(json.load(f))

    print(f'API: {document.name} {document.version}')
    for name, resource in document.resources.items():
        for method_name, method in resource.methods.items():
            print(f'{method.http_method} {method.path} ({method.id})')

Only the parts of the format the lowering stage reads are modelled
explicitly; everything else is kept as extra data.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class ParameterLocation(str, Enum):
    """Where a method parameter is sent."""

    PATH = 'path'
    QUERY = 'query'


# ============================================================================
# Base Models
# ============================================================================


class BaseDiscoveryModel(BaseModel):
    """Base model that keeps unknown keys and accepts field names or aliases."""

    model_config = ConfigDict(extra='allow', populate_by_name=True)


# ============================================================================
# Schema Models
# ============================================================================


class Schema(BaseDiscoveryModel):
    """A JSON schema as used by discovery documents.

    The same object describes named schemas, object properties and method
    parameters; parameters additionally carry ``location``, ``required``
    and ``repeated``.
    """

    id: Optional[str] = None
    type: Optional[str] = None
    ref: Optional[str] = Field(None, alias='$ref')
    description: Optional[str] = None
    format: Optional[str] = None
    default: Optional[Any] = None
    pattern: Optional[str] = None
    required: bool = False
    repeated: bool = False
    location: Optional[ParameterLocation] = None
    enum: Optional[list[str]] = None
    enum_descriptions: Optional[list[str]] = Field(None, alias='enumDescriptions')
    minimum: Optional[Any] = None
    maximum: Optional[Any] = None
    items: Optional['Schema'] = None
    properties: dict[str, 'Schema'] = Field(default_factory=dict)
    additional_properties: Optional['Schema'] = Field(
        None, alias='additionalProperties'
    )


class Method(BaseDiscoveryModel):
    """A single method of a resource."""

    id: str
    path: str
    http_method: str = Field('GET', alias='httpMethod')
    flat_path: Optional[str] = Field(None, alias='flatPath')
    description: Optional[str] = None
    parameters: dict[str, Schema] = Field(default_factory=dict)
    parameter_order: list[str] = Field(default_factory=list, alias='parameterOrder')
    request: Optional[Schema] = None
    response: Optional[Schema] = None
    scopes: list[str] = Field(default_factory=list)


class Resource(BaseDiscoveryModel):
    """A resource: methods plus nested resources."""

    methods: dict[str, Method] = Field(default_factory=dict)
    resources: dict[str, 'Resource'] = Field(default_factory=dict)


class RestDescription(BaseDiscoveryModel):
    """The root of a discovery document."""

    kind: Optional[str] = None
    discovery_version: Optional[str] = Field(None, alias='discoveryVersion')
    id: Optional[str] = None
    name: str
    version: str
    title: Optional[str] = None
    description: Optional[str] = None
    root_url: Optional[str] = Field(None, alias='rootUrl')
    service_path: Optional[str] = Field(None, alias='servicePath')
    base_path: Optional[str] = Field(None, alias='basePath')
    parameters: dict[str, Schema] = Field(default_factory=dict)
    schemas: dict[str, Schema] = Field(default_factory=dict)
    resources: dict[str, Resource] = Field(default_factory=dict)
    methods: dict[str, Method] = Field(default_factory=dict)


Schema.model_rebuild()
Resource.model_rebuild()
