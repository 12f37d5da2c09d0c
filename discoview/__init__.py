"""discoview - Lower Google discovery documents into request message views.

discoview reads a discovery document, walks every method of every resource
and produces one render-ready request view per method: collision-free field
names, surface types with deduplicated imports, standard query parameters
and the resource identifier field. Each view is wrapped into an output unit
that tells an external template renderer where to write the file.

Quick Start:
    >>> from discoview import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(
    ...     source='https://compute.googleapis.com/$discovery/rest?version=v1',
    ...     output='./gen',
    ...     package_name='com.google.compute.v1',
    ...     language='java',
    ... )
    >>> units = Codegen(config).generate()

CLI Usage:
    $ discoview generate --config discoview.yaml
    $ discoview generate --json
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

from discoview.codegen.codegen import Codegen
from discoview.codegen.request_view import RequestViewBuilder
from discoview.codegen.type_resolver import TypeResolver
from discoview.config import CodegenConfig, DocumentConfig, get_config
from discoview.discovery.loader import DiscoveryLoader
from discoview.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    DiscoViewError,
    PreconditionError,
    RequestGenerationError,
    SchemaError,
    SchemaLoadError,
    SchemaReferenceError,
    SchemaValidationError,
    UnsupportedFeatureError,
)

__all__ = [
    # Main classes
    'Codegen',
    'DiscoveryLoader',
    'RequestViewBuilder',
    'TypeResolver',
    # Configuration
    'CodegenConfig',
    'DocumentConfig',
    'get_config',
    # Exceptions
    'DiscoViewError',
    'SchemaError',
    'SchemaLoadError',
    'SchemaValidationError',
    'SchemaReferenceError',
    'CodeGenerationError',
    'PreconditionError',
    'RequestGenerationError',
    'ConfigurationError',
    'UnsupportedFeatureError',
]

try:
    __version__ = _package_version('discoview')
except PackageNotFoundError:
    __version__ = 'unknown'
