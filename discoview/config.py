import os
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from discoview.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['discoview.yaml', 'discoview.yml']


class ResourceNameTreatment(str, Enum):
    """How resource-name fields of a method are represented."""

    NONE = 'none'
    STATIC_TYPES = 'static_types'


class FlatteningGroupConfig(BaseModel):
    """One flattening group: method fields folded into a single call form."""

    parameters: list[str] = Field(
        ..., description='Names of the method fields in this group, in order.'
    )


class MethodSettings(BaseModel):
    """Per-method configuration, keyed by discovery method id."""

    flattening: list[FlatteningGroupConfig] = Field(
        default_factory=list, description='Flattening groups, in priority order.'
    )

    resource_name_treatment: ResourceNameTreatment = Field(
        ResourceNameTreatment.NONE,
        description='Whether fields with a pattern use resource-name representation.',
    )

    field_name_patterns: dict[str, str] = Field(
        default_factory=dict,
        description='Resource name pattern per field name, e.g. {"instance": "projects/{project}/..."}.',
    )


class DocumentConfig(BaseModel):
    """Represents a single discovery document to be processed."""

    source: str = Field(..., description='Path or URL to the discovery document.')

    output: str = Field(..., description='Output directory for the generated code.')

    package_name: str = Field(
        ...,
        min_length=1,
        description='Package the generated request messages belong to.',
    )

    language: Literal['java', 'python'] = Field(
        'python', description='Surface naming conventions to generate for.'
    )

    reserved_words: list[str] = Field(
        default_factory=list,
        description='Extra words generated field names must never use.',
    )

    enable_resource_names: bool = Field(
        True, description='Whether configured resource-name fields are honored.'
    )

    methods: dict[str, MethodSettings] = Field(
        default_factory=dict, description='Method settings keyed by method id.'
    )


class CodegenConfig(BaseSettings):
    documents: list[DocumentConfig] = Field(
        ..., description='List of discovery documents to process.'
    )


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.safe_load(Path(path).read_text())


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file, the working directory or pyproject.toml."""
    if path:
        return CodegenConfig.model_validate(load_yaml(path))

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return CodegenConfig.model_validate(load_yaml(path))

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        pyproject = tomllib.loads(path.read_text())
        tools = pyproject.get('tool', {})

        if 'discoview' in tools:
            return CodegenConfig.model_validate(tools['discoview'])

    raise ConfigurationError('Configuration not found', config_path=cwd)
