"""Per-method configuration: flattening groups and resource-name policy.

The MethodConfigProvider turns the ``methods`` section of a DocumentConfig
into MethodConfig values bound to the fields of an actual method.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from discoview.codegen.model import FieldModel, MethodModel
from discoview.config import DocumentConfig, MethodSettings, ResourceNameTreatment
from discoview.exceptions import ConfigurationError

__all__ = [
    'FeatureConfig',
    'FieldConfig',
    'FlatteningGroup',
    'MethodConfig',
    'MethodConfigProvider',
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldConfig:
    """A method field as configured inside a flattening group.

    Attributes:
        field: The method field.
        resource_name_treatment: How the field is represented.
        pattern: Resource name pattern configured for the field, if any.
    """

    field: FieldModel
    resource_name_treatment: ResourceNameTreatment = ResourceNameTreatment.NONE
    pattern: str | None = None

    @property
    def name(self) -> str:
        return self.field.name


@dataclass(frozen=True)
class FlatteningGroup:
    fields: tuple[FieldConfig, ...]

    @property
    def field_names(self) -> list[str]:
        return [field_config.name for field_config in self.fields]


@dataclass(frozen=True)
class FeatureConfig:
    """Document-wide feature switches."""

    resource_names_enabled: bool = True

    def use_resource_name_format(self, field_config: FieldConfig) -> bool:
        return (
            self.resource_names_enabled
            and field_config.resource_name_treatment is ResourceNameTreatment.STATIC_TYPES
            and field_config.pattern is not None
        )


@dataclass(frozen=True)
class MethodConfig:
    """Configuration of one method.

    Attributes:
        flattening_groups: Flattening groups in configured order.
        feature_config: Switches deciding resource-name representation.
    """

    flattening_groups: tuple[FlatteningGroup, ...] = ()
    feature_config: FeatureConfig = field(default_factory=FeatureConfig)

    def use_resource_name_format(self, field_config: FieldConfig) -> bool:
        return self.feature_config.use_resource_name_format(field_config)


class MethodConfigProvider:
    """Builds MethodConfig values from a document configuration.

    Example:
        >>> provider = MethodConfigProvider(document_config)
        >>> method_config = provider.get_method_config(method)
        >>> [group.field_names for group in method_config.flattening_groups]
        [['project', 'zone', 'instance']]
    """

    def __init__(self, config: DocumentConfig):
        self._settings = config.methods
        self._feature_config = FeatureConfig(
            resource_names_enabled=config.enable_resource_names
        )

    def get_method_config(self, method: MethodModel) -> MethodConfig:
        """Return the configuration of ``method``.

        Methods without settings get an empty configuration.

        Raises:
            ConfigurationError: If a flattening group names a field the
                method does not declare.
        """
        settings = self._settings.get(method.id)
        if settings is None:
            return MethodConfig(feature_config=self._feature_config)

        groups = tuple(
            FlatteningGroup(self._field_configs(method, settings, group.parameters))
            for group in settings.flattening
        )
        return MethodConfig(flattening_groups=groups, feature_config=self._feature_config)

    def _field_configs(
        self, method: MethodModel, settings: MethodSettings, parameters: list[str]
    ) -> tuple[FieldConfig, ...]:
        field_configs = []
        for parameter in parameters:
            method_field = method.input_field(parameter)
            if method_field is None:
                raise ConfigurationError(
                    f"Flattening parameter '{parameter}' is not a field of {method.id}",
                    field=f'methods.{method.id}.flattening',
                )
            pattern = settings.field_name_patterns.get(parameter)
            treatment = (
                settings.resource_name_treatment
                if pattern is not None
                else ResourceNameTreatment.NONE
            )
            field_configs.append(
                FieldConfig(
                    field=method_field, resource_name_treatment=treatment, pattern=pattern
                )
            )
        return tuple(field_configs)

    def unknown_method_ids(self, known_ids: Iterable[str]) -> list[str]:
        """Return configured method ids that do not appear in ``known_ids``."""
        known = set(known_ids)
        return sorted(method_id for method_id in self._settings if method_id not in known)
