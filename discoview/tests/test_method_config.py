"""Test the method configuration provider."""

import pytest

from discoview.codegen.method_config import (
    FeatureConfig,
    FieldConfig,
    MethodConfig,
    MethodConfigProvider,
)
from discoview.config import (
    DocumentConfig,
    FlatteningGroupConfig,
    MethodSettings,
    ResourceNameTreatment,
)
from discoview.discovery import DiscoveryField, Schema
from discoview.exceptions import ConfigurationError

from .fixtures import COMPUTE_DISCOVERY, INSTANCE_GET_PATH, find_method


def _get_method():
    return find_method(COMPUTE_DISCOVERY, 'compute.instances.get')


def _document_config(**settings) -> DocumentConfig:
    return DocumentConfig(
        source='compute.v1.json',
        output='gen',
        package_name='com.google.compute.v1',
        methods={'compute.instances.get': MethodSettings(**settings)},
    )


class TestFeatureConfig:
    """Tests for the resource-name predicate."""

    def _field_config(self, **kwargs) -> FieldConfig:
        field = DiscoveryField(Schema(type='string', location='path'), 'instance')
        return FieldConfig(field=field, **kwargs)

    def test_requires_static_types_and_pattern(self):
        features = FeatureConfig()

        assert features.use_resource_name_format(
            self._field_config(
                resource_name_treatment=ResourceNameTreatment.STATIC_TYPES,
                pattern=INSTANCE_GET_PATH,
            )
        )
        assert not features.use_resource_name_format(
            self._field_config(resource_name_treatment=ResourceNameTreatment.STATIC_TYPES)
        )
        assert not features.use_resource_name_format(
            self._field_config(pattern=INSTANCE_GET_PATH)
        )

    def test_disabled_resource_names(self):
        features = FeatureConfig(resource_names_enabled=False)
        field_config = self._field_config(
            resource_name_treatment=ResourceNameTreatment.STATIC_TYPES,
            pattern=INSTANCE_GET_PATH,
        )
        assert not features.use_resource_name_format(field_config)


class TestMethodConfigProvider:
    """Tests for MethodConfigProvider."""

    def test_unconfigured_method(self):
        """Test that methods without settings get an empty configuration."""
        provider = MethodConfigProvider(
            DocumentConfig(source='compute.v1.json', output='gen', package_name='compute')
        )

        method_config = provider.get_method_config(_get_method())

        assert method_config == MethodConfig()
        assert method_config.flattening_groups == ()

    def test_flattening_groups(self):
        provider = MethodConfigProvider(
            _document_config(
                flattening=[
                    FlatteningGroupConfig(parameters=['project', 'zone', 'instance']),
                    FlatteningGroupConfig(parameters=['instance']),
                ],
                resource_name_treatment='static_types',
                field_name_patterns={'instance': INSTANCE_GET_PATH},
            )
        )

        method_config = provider.get_method_config(_get_method())

        assert [g.field_names for g in method_config.flattening_groups] == [
            ['project', 'zone', 'instance'],
            ['instance'],
        ]
        project, zone, instance = method_config.flattening_groups[0].fields
        assert not method_config.use_resource_name_format(project)
        assert not method_config.use_resource_name_format(zone)
        assert method_config.use_resource_name_format(instance)
        assert instance.pattern == INSTANCE_GET_PATH

    def test_pattern_without_static_types(self):
        provider = MethodConfigProvider(
            _document_config(
                flattening=[FlatteningGroupConfig(parameters=['instance'])],
                field_name_patterns={'instance': INSTANCE_GET_PATH},
            )
        )

        (instance,) = provider.get_method_config(_get_method()).flattening_groups[0].fields

        assert instance.resource_name_treatment is ResourceNameTreatment.NONE

    def test_unknown_flattening_parameter(self):
        provider = MethodConfigProvider(
            _document_config(flattening=[FlatteningGroupConfig(parameters=['region'])])
        )

        with pytest.raises(ConfigurationError, match="'region'"):
            provider.get_method_config(_get_method())

    def test_unknown_method_ids(self):
        provider = MethodConfigProvider(_document_config())

        assert provider.unknown_method_ids(['compute.instances.get']) == []
        assert provider.unknown_method_ids(['compute.instances.list']) == [
            'compute.instances.get'
        ]
