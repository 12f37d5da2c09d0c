"""Render-ready view models produced by the lowering stage.

All views are frozen dataclasses holding tuples. The renderer consumes them
as-is and never mutates them.
"""

from dataclasses import dataclass, field

__all__ = [
    'FieldView',
    'FileHeaderView',
    'ImportView',
    'OutputUnit',
    'RequestView',
    'ResourceNameParamView',
    'property_sort_key',
]


@dataclass(frozen=True)
class FieldView:
    """A single property of a request message.

    Attributes:
        raw_name: The field name as written in the source document.
        name: The collision-free surface name of the field.
        type_name: The surface type, e.g. ``list[str]``.
        inner_type_name: The element type of a repeated field, else ``type_name``.
        is_required: Whether callers must set the field.
        is_repeated: Whether the field holds a list of values.
        get_function: Name of the getter accessor.
        set_function: Name of the setter accessor.
        add_function: Name of the adder accessor, when the field has one.
        doc_lines: Description split into lines.
        properties: Nested properties; always empty for request fields.
    """

    raw_name: str
    name: str
    type_name: str
    inner_type_name: str
    is_required: bool
    is_repeated: bool
    get_function: str
    set_function: str
    add_function: str | None = None
    doc_lines: tuple[str, ...] = ()
    properties: tuple['FieldView', ...] = ()


@dataclass(frozen=True)
class ResourceNameParamView:
    """The resource-name parameter synthesized from a flattening group.

    Attributes:
        name: Surface name of the parameter.
        field_name: Raw name of the field it was derived from.
        get_call_name: Getter accessor of the parameter.
        set_call_name: Setter accessor of the parameter.
        pattern: The configured resource name pattern, if any.
    """

    name: str
    field_name: str
    get_call_name: str
    set_call_name: str
    pattern: str | None = None


@dataclass(frozen=True)
class RequestView:
    """The request message one method's callers construct.

    ``properties`` is sorted with ``property_sort_key``. The request body,
    when the method has one, lives only in ``request_body_type``.
    """

    raw_name: str
    name: str
    type_name: str
    properties: tuple[FieldView, ...]
    has_required_properties: bool
    has_field_mask: bool
    request_body_type: FieldView | None = None
    doc_lines: tuple[str, ...] = ()
    is_required: bool = True
    is_repeated: bool = False


@dataclass(frozen=True)
class ImportView:
    qualified_name: str
    alias: str

    @property
    def is_aliased(self) -> bool:
        return self.qualified_name.rsplit('.', 1)[-1] != self.alias


@dataclass(frozen=True)
class FileHeaderView:
    package_name: str
    imports: tuple[ImportView, ...] = ()


@dataclass(frozen=True)
class OutputUnit:
    """One generated file: a request view plus everything needed to place it.

    Attributes:
        output_path: Where the renderer writes the file.
        imports: Imports sorted by qualified name.
        file_header: Package and import section of the file.
        message_view: The request view rendered into the file.
        template_name: Template the renderer applies.
    """

    output_path: str
    imports: tuple[ImportView, ...]
    file_header: FileHeaderView
    message_view: RequestView
    template_name: str = field(default='')

    @property
    def import_list(self) -> list[str]:
        return [entry.qualified_name for entry in self.imports]


def property_sort_key(view: FieldView) -> tuple[str, str, str]:
    """Total order for request properties: case-insensitive name first."""
    return view.name.casefold(), view.name, view.raw_name
