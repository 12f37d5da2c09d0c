"""Target-surface naming and formatting conventions.

A SurfaceNamer turns raw discovery identifiers into names that suit the
surface being generated: field and class casing, accessor names, doc
lines, the primitive type table and the shape of generic container types.
The lowering stage receives one namer and never hard-codes a convention.
"""

import keyword
from abc import ABC, abstractmethod

from discoview.codegen.utils import Name
from discoview.exceptions import ConfigurationError

__all__ = [
    'JavaSurfaceNamer',
    'PythonSurfaceNamer',
    'SurfaceNamer',
    'get_namer',
]

_JAVA_KEYWORDS = frozenset(
    {
        'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch',
        'char', 'class', 'const', 'continue', 'default', 'do', 'double',
        'else', 'enum', 'extends', 'false', 'final', 'finally', 'float',
        'for', 'goto', 'if', 'implements', 'import', 'instanceof', 'int',
        'interface', 'long', 'native', 'new', 'null', 'package', 'private',
        'protected', 'public', 'return', 'short', 'static', 'strictfp',
        'super', 'switch', 'synchronized', 'this', 'throw', 'throws',
        'transient', 'true', 'try', 'void', 'volatile', 'while',
    }
)  # fmt: skip


class SurfaceNamer(ABC):
    """Naming conventions of one generated surface.

    Subclasses fill in the class attributes and the abstract formatting
    methods; primitive type lookup and doc line splitting are shared.

    Attributes:
        language: Short identifier of the surface, used in configuration.
        reserved_words: Words a generated field name must never equal.
        implicit_modules: Modules whose names are usable without an import.
        string_type: Qualified name of the surface string type.
        list_container: Qualified name of the repeated-value container.
        map_container: Qualified name of the map container.
        core_imports: Imports every generated request message needs.
        template_name: Template the external renderer applies to a message.
    """

    language: str
    reserved_words: frozenset[str]
    implicit_modules: frozenset[str]
    string_type: str
    list_container: str
    map_container: str
    core_imports: tuple[str, ...]
    template_name: str
    primitive_types: dict[tuple[str, str | None], str]

    def primitive_type_name(self, schema_type: str | None, format: str | None) -> str | None:
        """Return the qualified surface type for a primitive, or None if unknown.

        An exact ``(type, format)`` match wins; otherwise the format is
        ignored.
        """
        if (schema_type, format) in self.primitive_types:
            return self.primitive_types[(schema_type, format)]
        return self.primitive_types.get((schema_type, None))

    def doc_lines(self, text: str | None) -> tuple[str, ...]:
        if not text:
            return ()
        return tuple(line.rstrip() for line in text.strip().splitlines())

    def package_path(self, package_name: str) -> list[str]:
        return [part for part in package_name.split('.') if part]

    @abstractmethod
    def private_field_name(self, raw: str) -> str:
        pass

    @abstractmethod
    def public_class_name(self, raw: str) -> str:
        pass

    @abstractmethod
    def getter_name(self, raw: str) -> str:
        pass

    @abstractmethod
    def setter_name(self, raw: str, repeated: bool = False) -> str:
        pass

    @abstractmethod
    def adder_name(self, raw: str) -> str:
        pass

    @abstractmethod
    def format_generic(self, container: str, *arguments: str) -> str:
        """Spell a parameterized container type, e.g. ``list[str]``."""

    @abstractmethod
    def message_qualified_name(self, package_name: str, class_name: str) -> str:
        pass

    @abstractmethod
    def source_file_name(self, type_name: str) -> str:
        pass


class JavaSurfaceNamer(SurfaceNamer):
    """Java bean conventions: lowerCamel fields, ``getX``/``setX`` accessors."""

    language = 'java'
    reserved_words = _JAVA_KEYWORDS | {'Builder'}
    implicit_modules = frozenset({'java.lang'})
    string_type = 'java.lang.String'
    list_container = 'java.util.List'
    map_container = 'java.util.Map'
    core_imports = (
        'com.google.api.core.BetaApi',
        'com.google.api.gax.httpjson.ApiMessage',
        'com.google.common.collect.ImmutableList',
        'com.google.common.collect.ImmutableMap',
        'com.google.gson.annotations.SerializedName',
        'java.util.Collections',
        'java.util.HashMap',
        'java.util.LinkedList',
        'java.util.List',
        'java.util.Map',
        'java.util.Objects',
        'java.util.Set',
        'javax.annotation.Generated',
        'javax.annotation.Nullable',
    )
    template_name = 'java/message.snip'
    primitive_types = {
        ('string', None): 'java.lang.String',
        ('string', 'int64'): 'java.lang.Long',
        ('string', 'uint64'): 'java.math.BigInteger',
        ('integer', None): 'java.lang.Integer',
        ('integer', 'uint32'): 'java.lang.Integer',
        ('number', None): 'java.lang.Double',
        ('number', 'float'): 'java.lang.Float',
        ('boolean', None): 'java.lang.Boolean',
        ('any', None): 'java.lang.Object',
        ('object', None): 'java.lang.Object',
    }

    def private_field_name(self, raw: str) -> str:
        return Name.any_camel(raw).to_lower_camel()

    def public_class_name(self, raw: str) -> str:
        return Name.any_camel(raw).to_upper_camel()

    def getter_name(self, raw: str) -> str:
        return Name.any_camel('get', raw).to_lower_camel()

    def setter_name(self, raw: str, repeated: bool = False) -> str:
        prefix = 'addAll' if repeated else 'set'
        return Name.any_camel(prefix, raw).to_lower_camel()

    def adder_name(self, raw: str) -> str:
        return Name.any_camel('add', raw).to_lower_camel()

    def format_generic(self, container: str, *arguments: str) -> str:
        return f'{container}<{", ".join(arguments)}>'

    def message_qualified_name(self, package_name: str, class_name: str) -> str:
        return f'{package_name}.{class_name}'

    def source_file_name(self, type_name: str) -> str:
        return f'{type_name}.java'


class PythonSurfaceNamer(SurfaceNamer):
    """Python conventions: snake_case fields, one module per message."""

    language = 'python'
    reserved_words = frozenset(keyword.kwlist) | {'self'}
    implicit_modules = frozenset({'builtins'})
    string_type = 'builtins.str'
    list_container = 'builtins.list'
    map_container = 'builtins.dict'
    core_imports = (
        'dataclasses.dataclass',
        'dataclasses.field',
        'typing.Any',
    )
    template_name = 'python/message.snip'
    primitive_types = {
        ('string', None): 'builtins.str',
        ('string', 'date'): 'datetime.date',
        ('string', 'date-time'): 'datetime.datetime',
        ('string', 'google-datetime'): 'datetime.datetime',
        ('string', 'google-duration'): 'datetime.timedelta',
        ('string', 'int64'): 'builtins.int',
        ('string', 'uint64'): 'builtins.int',
        ('integer', None): 'builtins.int',
        ('number', None): 'builtins.float',
        ('boolean', None): 'builtins.bool',
        ('any', None): 'typing.Any',
        ('object', None): 'typing.Any',
    }

    def private_field_name(self, raw: str) -> str:
        return Name.any_camel(raw).to_lower_underscore()

    def public_class_name(self, raw: str) -> str:
        return Name.any_camel(raw).to_upper_camel()

    def getter_name(self, raw: str) -> str:
        return Name.any_camel('get', raw).to_lower_underscore()

    def setter_name(self, raw: str, repeated: bool = False) -> str:
        prefix = 'extend' if repeated else 'set'
        return Name.any_camel(prefix, raw).to_lower_underscore()

    def adder_name(self, raw: str) -> str:
        return Name.any_camel('add', raw).to_lower_underscore()

    def format_generic(self, container: str, *arguments: str) -> str:
        return f'{container}[{", ".join(arguments)}]'

    def message_qualified_name(self, package_name: str, class_name: str) -> str:
        module = Name.any_camel(class_name).to_lower_underscore()
        return f'{package_name}.{module}.{class_name}'

    def source_file_name(self, type_name: str) -> str:
        return f'{Name.any_camel(type_name).to_lower_underscore()}.py'


_NAMERS: dict[str, type[SurfaceNamer]] = {
    JavaSurfaceNamer.language: JavaSurfaceNamer,
    PythonSurfaceNamer.language: PythonSurfaceNamer,
}


def get_namer(language: str) -> SurfaceNamer:
    """Return the namer for a configured surface language."""
    try:
        return _NAMERS[language]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown surface language '{language}'", field='language'
        ) from None
