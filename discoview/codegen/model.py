"""Format-agnostic contract for the API model consumed by the lowering stage.

The request view builder only talks to these abstract classes. Discovery
documents are the one implemented source format (see
``discoview.discovery.adapters``); a second format can be added by
implementing the same four classes without touching the builder.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

__all__ = ['ApiModel', 'FieldModel', 'InterfaceModel', 'MethodModel']


class FieldModel(ABC):
    """A single field of a method or schema."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The raw field name as written in the source document."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Free-text description, empty when the document has none."""

    @property
    @abstractmethod
    def schema_type(self) -> str | None:
        """Declared primitive type (``string``, ``integer``, ``array``, ...)."""

    @property
    @abstractmethod
    def format(self) -> str | None:
        """Declared format refining ``schema_type`` (``int64``, ``date-time``, ...)."""

    @property
    @abstractmethod
    def reference(self) -> str | None:
        """Name of the referenced named schema, or None for inline types."""

    @property
    @abstractmethod
    def is_required(self) -> bool:
        pass

    @property
    @abstractmethod
    def is_repeated(self) -> bool:
        pass

    @property
    @abstractmethod
    def may_be_in_resource_name(self) -> bool:
        """Whether the field can be part of a structured resource name."""

    @property
    @abstractmethod
    def element(self) -> 'FieldModel | None':
        """Element field of a repeated field, None otherwise."""

    @property
    @abstractmethod
    def map_value(self) -> 'FieldModel | None':
        """Value field of a map-typed field, None otherwise."""

    @property
    def is_map(self) -> bool:
        return self.map_value is not None


class MethodModel(ABC):
    """A single API method."""

    @property
    @abstractmethod
    def id(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        """URL path template, e.g. ``projects/{project}/zones/{zone}``."""

    @property
    @abstractmethod
    def input_fields(self) -> Mapping[str, FieldModel]:
        """Declared input fields by raw name, in declaration order."""

    @property
    @abstractmethod
    def request_body(self) -> FieldModel | None:
        """The request body field, or None when the method takes no body."""

    @property
    @abstractmethod
    def has_extra_field_mask(self) -> bool:
        pass

    @property
    @abstractmethod
    def request_name(self) -> str:
        """Raw name of the request message, e.g. ``insertInstanceHttpRequest``."""

    @property
    @abstractmethod
    def input_type_name(self) -> str:
        """Canonical raw name of the request body, e.g. ``instanceResource``."""

    def input_field(self, name: str) -> FieldModel | None:
        """Return the declared input field named exactly ``name``, if any."""
        return self.input_fields.get(name)


class InterfaceModel(ABC):
    """A group of methods rendered against one shared type resolver."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def methods(self) -> Sequence[MethodModel]:
        pass


class ApiModel(ABC):
    """The whole API as seen by the lowering stage."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def interfaces(self) -> Sequence[InterfaceModel]:
        """All interfaces of the API, in a stable order."""
