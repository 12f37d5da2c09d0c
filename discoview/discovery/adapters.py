"""Adapters exposing discovery documents through the format-agnostic contract.

Each adapter wraps one pydantic discovery model and answers the questions
the lowering stage asks through ``discoview.codegen.model``.
"""

from collections.abc import Iterator, Mapping

from discoview.codegen.model import ApiModel, FieldModel, InterfaceModel, MethodModel
from discoview.codegen.utils import Name, singularize
from discoview.discovery.discovery import (
    Method,
    ParameterLocation,
    Resource,
    RestDescription,
    Schema,
)
from discoview.exceptions import SchemaReferenceError

__all__ = [
    'DiscoveryApiModel',
    'DiscoveryField',
    'DiscoveryInterface',
    'DiscoveryMethod',
]

# Methods whose request names keep the plural collection name.
PLURAL_METHOD_NAMES = frozenset({'list', 'aggregatedList'})

# HTTP methods whose requests accept an extra field mask.
FIELD_MASK_HTTP_METHODS = frozenset({'PATCH', 'PUT'})


class DiscoveryField(FieldModel):
    """A discovery parameter, property or request body schema."""

    def __init__(self, schema: Schema, name: str | None = None):
        self._schema = schema
        self._name = name or schema.id or ''

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._schema.description or ''

    @property
    def schema_type(self) -> str | None:
        return self._schema.type

    @property
    def format(self) -> str | None:
        return self._schema.format

    @property
    def reference(self) -> str | None:
        return self._schema.ref

    @property
    def is_required(self) -> bool:
        return self._schema.required

    @property
    def is_repeated(self) -> bool:
        return self._schema.repeated or self._schema.type == 'array'

    @property
    def may_be_in_resource_name(self) -> bool:
        # A resource name only ever contains path parameters.
        return self._schema.location == ParameterLocation.PATH

    @property
    def element(self) -> FieldModel | None:
        if self._schema.type == 'array':
            if self._schema.items is None:
                return None
            return DiscoveryField(self._schema.items, self._name)
        if self._schema.repeated:
            return DiscoveryField(
                self._schema.model_copy(update={'repeated': False}), self._name
            )
        return None

    @property
    def map_value(self) -> FieldModel | None:
        if self._schema.ref or self._schema.type != 'object':
            return None
        if self._schema.additional_properties is None:
            return None
        return DiscoveryField(self._schema.additional_properties, self._name)

    def __repr__(self) -> str:
        return f'DiscoveryField({self._name!r})'


class DiscoveryMethod(MethodModel):
    """A discovery method, with its request body checked against the document."""

    def __init__(self, method: Method, schemas: Mapping[str, Schema] | None = None):
        """Wrap a discovery method.

        Args:
            method: The method as found in the document.
            schemas: Named schemas of the document, used to check that the
                request body reference exists.
        """
        self._method = method
        self._schemas = schemas if schemas is not None else {}
        self._input_fields = {
            name: DiscoveryField(parameter, name)
            for name, parameter in method.parameters.items()
        }

    @property
    def id(self) -> str:
        return self._method.id

    @property
    def description(self) -> str:
        return self._method.description or ''

    @property
    def path(self) -> str:
        return self._method.path

    @property
    def input_fields(self) -> Mapping[str, FieldModel]:
        return self._input_fields

    @property
    def request_body(self) -> FieldModel | None:
        request = self._method.request
        if request is None:
            return None
        if request.ref and request.ref not in self._schemas:
            raise SchemaReferenceError(
                request.ref, reason=f'request body of {self.id} names no schema'
            )
        return DiscoveryField(request, self.input_type_name)

    @property
    def has_extra_field_mask(self) -> bool:
        return self._method.http_method.upper() in FIELD_MASK_HTTP_METHODS

    @property
    def is_plural(self) -> bool:
        return self._id_pieces[-1] in PLURAL_METHOD_NAMES

    @property
    def request_name(self) -> str:
        method_name = self._id_pieces[-1]
        resource_name = self._resource_piece
        if not self.is_plural:
            resource_name = singularize(resource_name)
        return Name.any_camel(method_name, resource_name, 'http', 'request').to_lower_camel()

    @property
    def input_type_name(self) -> str:
        request = self._method.request
        if request is not None and request.ref:
            return Name.any_camel(request.ref, 'resource').to_lower_camel()
        return Name.any_camel(singularize(self._resource_piece), 'resource').to_lower_camel()

    @property
    def _id_pieces(self) -> list[str]:
        return self._method.id.split('.')

    @property
    def _resource_piece(self) -> str:
        pieces = self._id_pieces
        return pieces[-2] if len(pieces) > 1 else ''

    def __repr__(self) -> str:
        return f'DiscoveryMethod({self.id!r})'


class DiscoveryInterface(InterfaceModel):
    def __init__(self, name: str, methods: list[DiscoveryMethod]):
        self._name = name
        self._methods = methods

    @property
    def name(self) -> str:
        return self._name

    @property
    def methods(self) -> list[DiscoveryMethod]:
        return self._methods

    def __repr__(self) -> str:
        return f'DiscoveryInterface({self._name!r}, methods={len(self._methods)})'


class DiscoveryApiModel(ApiModel):
    """A whole discovery document.

    Every resource that declares methods becomes one interface; nested
    resources are named with dotted paths (``projects.locations``). Methods
    declared at the top level of the document form an interface named after
    the API.

    Example:
        >>> api = DiscoveryApiModel(RestDescription.model_validate(document))
        >>> [interface.name for interface in api.interfaces()]
        ['addresses', 'instances']
    """

    def __init__(self, document: RestDescription):
        self._document = document
        self._interfaces: list[DiscoveryInterface] | None = None

    @property
    def document(self) -> RestDescription:
        return self._document

    @property
    def name(self) -> str:
        return self._document.name

    def interfaces(self) -> list[DiscoveryInterface]:
        if self._interfaces is None:
            self._interfaces = list(self._build_interfaces())
        return self._interfaces

    def _build_interfaces(self) -> Iterator[DiscoveryInterface]:
        if self._document.methods:
            yield self._interface(self._document.name, self._document.methods)
        for name, resource in self._document.resources.items():
            yield from self._walk_resource([name], resource)

    def _walk_resource(
        self, path: list[str], resource: Resource
    ) -> Iterator[DiscoveryInterface]:
        if resource.methods:
            yield self._interface('.'.join(path), resource.methods)
        for child_name, child in resource.resources.items():
            yield from self._walk_resource(path + [child_name], child)

    def _interface(self, name: str, methods: Mapping[str, Method]) -> DiscoveryInterface:
        return DiscoveryInterface(
            name,
            [DiscoveryMethod(method, self._document.schemas) for method in methods.values()],
        )
