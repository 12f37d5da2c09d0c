"""Lowering of one API method into the view of its request message.

The RequestViewBuilder derives every property of a request message from the
method's fields, its configuration and a fixed set of standard query
parameters. Names are drawn from a per-method SymbolTable, so the order of
the steps in ``build`` determines the generated identifiers and must stay
fixed.
"""

import logging
import re
from collections.abc import Iterable

from discoview.codegen.method_config import MethodConfig
from discoview.codegen.model import FieldModel, MethodModel
from discoview.codegen.namer import SurfaceNamer
from discoview.codegen.symbol_table import SymbolTable
from discoview.codegen.type_resolver import TypeResolver
from discoview.codegen.views import (
    FieldView,
    RequestView,
    ResourceNameParamView,
    property_sort_key,
)
from discoview.exceptions import PreconditionError

__all__ = ['STANDARD_QUERY_PARAMS', 'RequestViewBuilder', 'resource_identifier']

logger = logging.getLogger(__name__)

# Query parameters accepted by every method, in insertion order.
# See https://cloud.google.com/compute/docs/reference/parameters.
STANDARD_QUERY_PARAMS: dict[str, str] = {
    'access_token': 'OAuth 2.0 token for the current user.',
    'callback': 'Name of the JavaScript callback function that handles the response.',
    'fields': 'Selector specifying a subset of fields to include in the response.',
    'key': 'API key. Required unless you provide an OAuth 2.0 token.',
    'prettyPrint': 'Returns response with indentations and line breaks.',
    'quotaUser': 'Alternative to userIp.',
    'userIp': 'IP address of the end user for whom the API call is being made.',
}

RESOURCE_IDENTIFIER_FORMAT = (
    'It must have the format `{path}`. `{{{name}}}` must start with a letter,\n'
    'and contain only letters (`[A-Za-z]`), numbers (`[0-9]`), dashes (`-`),\n'
    'underscores (`_`), periods (`.`), tildes (`~`), plus (`+`) or percent\n'
    'signs (`%`). It must be between 3 and 255 characters in length, and it\n'
    'must not start with `"goog"`.'
)

_PLACEHOLDER = re.compile(r'\{\+?([^{}]+)\}')


def resource_identifier(path: str) -> str | None:
    """Return the last ``{placeholder}`` of a path template, or None.

    Example:
        >>> resource_identifier('projects/{project}/zones/{zone}/instances/{instance}')
        'instance'
        >>> resource_identifier('v1/{+name}')
        'name'
    """
    placeholders = _PLACEHOLDER.findall(path)
    return placeholders[-1] if placeholders else None


class RequestViewBuilder:
    """Builds the RequestView of a method.

    The builder itself is stateless between calls; every ``build`` call gets a
    fresh SymbolTable seeded with the namer's reserved words plus any extra
    words passed here.

    Example:
        >>> builder = RequestViewBuilder(JavaSurfaceNamer())
        >>> resolver = TypeResolver(JavaSurfaceNamer(), 'com.google.compute.v1')
        >>> view, resource_param = builder.build(method, MethodConfig(), resolver)
        >>> [p.name for p in view.properties][:3]
        ['accessToken', 'callback', 'fields']
    """

    def __init__(self, namer: SurfaceNamer, reserved_words: Iterable[str] = ()):
        """Initialize the builder.

        Args:
            namer: Naming conventions of the generated surface.
            reserved_words: Extra words to seed every symbol table with.
        """
        self._namer = namer
        self._reserved_words = frozenset(namer.reserved_words) | frozenset(reserved_words)

    def build(
        self,
        method: MethodModel,
        method_config: MethodConfig,
        type_resolver: TypeResolver,
    ) -> tuple[RequestView, ResourceNameParamView | None]:
        """Build the request view of ``method``.

        Args:
            method: The method to lower.
            method_config: Flattening groups and resource-name policy.
            type_resolver: Resolver shared by the method's interface.

        Returns:
            The request view and the resource-name parameter, if one of the
            flattening groups produced it.

        Raises:
            PreconditionError: If the path template has no placeholder.
            UnsupportedFeatureError: If a field has a type the namer can't map.
        """
        symbol_table = SymbolTable(self._reserved_words)
        namer = self._namer

        resource_param = self._resource_name_param(method_config)

        raw_name = namer.private_field_name(method.request_name)
        name = symbol_table.allocate(raw_name)
        type_name = namer.public_class_name(method.request_name)

        string_type = type_resolver.nickname(namer.string_type)

        properties: list[FieldView] = []
        properties.extend(
            self._standard_query_params(method, string_type, symbol_table)
        )

        schema_fields, has_required_properties = self._schema_fields(
            method, symbol_table, type_resolver
        )
        properties.extend(schema_fields)

        properties.append(
            self._resource_identifier_field(
                method, resource_param, string_type, symbol_table
            )
        )

        properties.sort(key=property_sort_key)

        request_view = RequestView(
            raw_name=raw_name,
            name=name,
            type_name=type_name,
            properties=tuple(properties),
            has_required_properties=has_required_properties,
            has_field_mask=method.has_extra_field_mask,
            request_body_type=self._request_body_field(method, type_resolver),
            doc_lines=namer.doc_lines(
                f'Request object for method {method.id}. {method.description}'
            ),
        )
        logger.debug(
            f'Built {type_name} for {method.id} with {len(properties)} properties'
        )
        return request_view, resource_param

    def _resource_name_param(
        self, method_config: MethodConfig
    ) -> ResourceNameParamView | None:
        # First match wins across all groups.
        for group in method_config.flattening_groups:
            for field_config in group.fields:
                if method_config.use_resource_name_format(field_config):
                    raw = field_config.name
                    return ResourceNameParamView(
                        name=self._namer.private_field_name(raw),
                        field_name=raw,
                        get_call_name=self._namer.getter_name(raw),
                        set_call_name=self._namer.setter_name(raw),
                        pattern=field_config.pattern,
                    )
        return None

    def _standard_query_params(
        self, method: MethodModel, string_type: str, symbol_table: SymbolTable
    ) -> list[FieldView]:
        views = []
        for param, description in STANDARD_QUERY_PARAMS.items():
            if method.input_field(param) is not None:
                continue
            views.append(
                FieldView(
                    raw_name=param,
                    name=symbol_table.allocate(self._namer.private_field_name(param)),
                    type_name=string_type,
                    inner_type_name=string_type,
                    is_required=False,
                    is_repeated=False,
                    get_function=self._namer.getter_name(param),
                    set_function=self._namer.setter_name(param),
                    doc_lines=self._namer.doc_lines(description),
                )
            )
        return views

    def _schema_fields(
        self,
        method: MethodModel,
        symbol_table: SymbolTable,
        type_resolver: TypeResolver,
    ) -> tuple[list[FieldView], bool]:
        views = []
        has_required_properties = False
        for method_field in method.input_fields.values():
            if method_field.may_be_in_resource_name:
                # Represented by the resource identifier field instead.
                has_required_properties |= method_field.is_required
                continue
            views.append(
                self._field_view(method_field, method_field.name, type_resolver, symbol_table)
            )
            has_required_properties |= method_field.is_required
        return views, has_required_properties

    def _resource_identifier_field(
        self,
        method: MethodModel,
        resource_param: ResourceNameParamView | None,
        string_type: str,
        symbol_table: SymbolTable,
    ) -> FieldView:
        identifier = resource_identifier(method.path)
        if identifier is None:
            raise PreconditionError(
                f"Path '{method.path}' has no resource identifier placeholder",
                method_id=method.id,
            )

        declared = method.input_field(identifier)
        parts = [declared.description] if declared and declared.description else []
        parts.append(RESOURCE_IDENTIFIER_FORMAT.format(path=method.path, name=identifier))
        description = '\n'.join(parts)

        if resource_param is not None:
            raw_name = resource_param.field_name
            candidate = resource_param.name
            get_function = resource_param.get_call_name
            set_function = resource_param.set_call_name
        else:
            raw_name = identifier
            candidate = self._namer.private_field_name(identifier)
            get_function = self._namer.getter_name(identifier)
            set_function = self._namer.setter_name(identifier)

        return FieldView(
            raw_name=raw_name,
            name=symbol_table.allocate(candidate),
            type_name=string_type,
            inner_type_name=string_type,
            is_required=True,
            is_repeated=False,
            get_function=get_function,
            set_function=set_function,
            doc_lines=self._namer.doc_lines(description),
        )

    def _request_body_field(
        self, method: MethodModel, type_resolver: TypeResolver
    ) -> FieldView | None:
        request_body = method.request_body
        if request_body is None or not request_body.reference:
            return None
        # The body occupies its own slot, so its name is not escaped.
        return self._field_view(request_body, method.input_type_name, type_resolver)

    def _field_view(
        self,
        method_field: FieldModel,
        preferred_name: str,
        type_resolver: TypeResolver,
        symbol_table: SymbolTable | None = None,
    ) -> FieldView:
        type_name, inner_type_name = type_resolver.resolve(method_field)
        name = self._namer.private_field_name(preferred_name)
        field_name = symbol_table.allocate(name) if symbol_table is not None else name
        return FieldView(
            raw_name=preferred_name,
            name=field_name,
            type_name=type_name,
            inner_type_name=inner_type_name,
            is_required=method_field.is_required,
            is_repeated=method_field.is_repeated,
            get_function=self._namer.getter_name(name),
            set_function=self._namer.setter_name(name, repeated=method_field.is_repeated),
            add_function=self._namer.adder_name(name),
            doc_lines=self._namer.doc_lines(method_field.description),
        )
