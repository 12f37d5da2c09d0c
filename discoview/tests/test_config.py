"""Test configuration for discoview package."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from discoview.config import (
    CodegenConfig,
    DocumentConfig,
    MethodSettings,
    ResourceNameTreatment,
    get_config,
)
from discoview.exceptions import ConfigurationError

from .fixtures import COMPUTE_CONFIG_YAML


class TestDocumentConfig:
    """Test DocumentConfig model."""

    def test_valid_document_config(self):
        """Test creating a DocumentConfig with defaults."""
        config = DocumentConfig(
            source='./compute.v1.json', output='./gen', package_name='compute_v1'
        )
        assert config.language == 'python'
        assert config.reserved_words == []
        assert config.enable_resource_names is True
        assert config.methods == {}

    def test_method_settings(self):
        config = DocumentConfig(
            source='./compute.v1.json',
            output='./gen',
            package_name='com.google.compute.v1',
            language='java',
            methods={
                'compute.instances.get': {
                    'flattening': [{'parameters': ['project', 'zone', 'instance']}],
                    'resource_name_treatment': 'static_types',
                }
            },
        )
        settings = config.methods['compute.instances.get']
        assert isinstance(settings, MethodSettings)
        assert settings.flattening[0].parameters == ['project', 'zone', 'instance']
        assert settings.resource_name_treatment is ResourceNameTreatment.STATIC_TYPES

    def test_document_config_validation(self):
        """Test DocumentConfig validation."""
        with pytest.raises(ValueError):
            DocumentConfig(source='./compute.v1.json', output='./gen')

        with pytest.raises(ValueError):
            DocumentConfig(
                source='./compute.v1.json',
                output='./gen',
                package_name='compute_v1',
                language='cobol',
            )

    def test_empty_package_name_rejected(self):
        """Test that generated messages always live in a named package."""
        with pytest.raises(ValueError, match='package_name'):
            DocumentConfig(source='./compute.v1.json', output='./gen', package_name='')


class TestCodegenConfig:
    """Test CodegenConfig model."""

    def test_codegen_config_multiple_documents(self):
        doc1 = DocumentConfig(source='compute.json', output='./gen1', package_name='a')
        doc2 = DocumentConfig(source='storage.json', output='./gen2', package_name='b')

        config = CodegenConfig(documents=[doc1, doc2])

        assert len(config.documents) == 2

    def test_codegen_config_validation(self):
        with pytest.raises(ValueError):
            CodegenConfig()


class TestGetConfig:
    """Test get_config function."""

    def test_get_config_with_yaml_file(self):
        """Test loading config from an explicit YAML file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write(COMPUTE_CONFIG_YAML)
            f.flush()

            try:
                config = get_config(f.name)
                document = config.documents[0]
                assert document.language == 'java'
                assert document.package_name == 'com.google.compute.v1'
                assert 'compute.instances.get' in document.methods
            finally:
                os.unlink(f.name)

    def test_get_config_default_yaml(self):
        """Test loading discoview.yaml from the working directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'discoview.yaml').write_text(COMPUTE_CONFIG_YAML)

            with patch('os.getcwd', return_value=tmpdir):
                config = get_config()

        assert config.documents[0].source == './compute.v1.json'

    def test_get_config_default_yml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'discoview.yml').write_text(COMPUTE_CONFIG_YAML)

            with patch('os.getcwd', return_value=tmpdir):
                config = get_config()

        assert len(config.documents) == 1

    def test_get_config_from_pyproject_toml(self):
        """Test loading the [tool.discoview] table of pyproject.toml."""
        pyproject = """
[project]
name = "compute-client"

[[tool.discoview.documents]]
source = "./compute.v1.json"
output = "./gen"
package_name = "compute_v1"
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'pyproject.toml').write_text(pyproject)

            with patch('os.getcwd', return_value=tmpdir):
                config = get_config()

        assert config.documents[0].package_name == 'compute_v1'
        assert config.documents[0].language == 'python'

    def test_pyproject_without_table(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'pyproject.toml').write_text('[project]\nname = "x"\n')

            with patch('os.getcwd', return_value=tmpdir):
                with pytest.raises(ConfigurationError, match='Configuration not found'):
                    get_config()

    def test_get_config_not_found(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch('os.getcwd', return_value=tmpdir):
                with pytest.raises(ConfigurationError) as exc_info:
                    get_config()

        assert exc_info.value.config_path == tmpdir
