"""Surface type resolution and import deduplication.

This module provides the TypeResolver class which maps fields to the type
names of the generated surface and keeps the import section of every file
of one interface free of duplicates and alias clashes.
"""

import logging

from discoview.codegen.model import FieldModel
from discoview.codegen.namer import SurfaceNamer
from discoview.codegen.symbol_table import SymbolTable
from discoview.codegen.views import ImportView
from discoview.exceptions import UnsupportedFeatureError

__all__ = ['TypeResolver']

logger = logging.getLogger(__name__)


class TypeResolver:
    """Resolves field types and records the imports they need.

    One resolver is shared by all methods of an interface so that a type
    used by several request messages is imported under a single alias.
    Aliases are allocated from the resolver's own SymbolTable: the first
    qualified name claiming a short name keeps it, later distinct names with
    the same short name get a numeric suffix.

    Example:
        >>> resolver = TypeResolver(PythonSurfaceNamer(), 'compute')
        >>> resolver.record_import('datetime.datetime')
        'datetime'
        >>> resolver.record_import('pendulum.datetime')
        'datetime2'
        >>> [i.qualified_name for i in resolver.imports()]
        ['datetime.datetime', 'pendulum.datetime']
    """

    def __init__(self, namer: SurfaceNamer, package_name: str):
        """Initialize an empty resolver.

        Args:
            namer: Naming conventions of the generated surface.
            package_name: Package that generated message types live in.
        """
        self._namer = namer
        self._package_name = package_name
        self._aliases: dict[str, str] = {}
        self._symbols = SymbolTable()

    def record_import(self, qualified_name: str) -> str:
        """Record an import and return the alias to refer to it by.

        Args:
            qualified_name: Dotted name, e.g. ``java.util.List``.

        Returns:
            The alias, stable across repeated calls with the same name.
        """
        if qualified_name in self._aliases:
            return self._aliases[qualified_name]

        short_name = qualified_name.rsplit('.', 1)[-1]
        alias = self._symbols.allocate(short_name)
        if alias != short_name:
            logger.debug(f"Aliasing '{qualified_name}' as '{alias}'")
        self._aliases[qualified_name] = alias
        return alias

    def nickname(self, qualified_name: str) -> str:
        """Return the name to use for a type, importing it when needed.

        Types from the namer's implicit modules are used by short name and
        never imported.
        """
        module, _, short_name = qualified_name.rpartition('.')
        if module in self._namer.implicit_modules:
            return short_name
        return self.record_import(qualified_name)

    def resolve(self, field: FieldModel) -> tuple[str, str]:
        """Return ``(type_name, inner_type_name)`` for a field.

        ``inner_type_name`` is the element type of a repeated field and equals
        ``type_name`` for every other field.

        Raises:
            UnsupportedFeatureError: If the field's primitive type is unknown
                to the namer.
        """
        if field.is_repeated:
            element = field.element if field.element is not None else field
            inner_type_name = self._type_name(element)
            container = self.nickname(self._namer.list_container)
            return self._namer.format_generic(container, inner_type_name), inner_type_name

        type_name = self._type_name(field)
        return type_name, type_name

    def _type_name(self, field: FieldModel) -> str:
        if field.reference:
            class_name = self._namer.public_class_name(field.reference)
            return self.nickname(
                self._namer.message_qualified_name(self._package_name, class_name)
            )

        if field.is_repeated and field.element is not None:
            inner_type_name = self._type_name(field.element)
            container = self.nickname(self._namer.list_container)
            return self._namer.format_generic(container, inner_type_name)

        if field.map_value is not None:
            key_type = self.nickname(self._namer.string_type)
            value_type = self._type_name(field.map_value)
            container = self.nickname(self._namer.map_container)
            return self._namer.format_generic(container, key_type, value_type)

        qualified_name = self._namer.primitive_type_name(field.schema_type, field.format)
        if qualified_name is None:
            raise UnsupportedFeatureError(
                f"type '{field.schema_type}' with format '{field.format}' "
                f"of field '{field.name}'"
            )
        return self.nickname(qualified_name)

    def imports(self) -> tuple[ImportView, ...]:
        """Return every recorded import, sorted by qualified name."""
        return tuple(
            ImportView(qualified_name=name, alias=alias)
            for name, alias in sorted(self._aliases.items())
        )

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self._aliases
