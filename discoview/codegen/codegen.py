"""Code generation module for discoview.

This module provides the main Codegen class that lowers every method of a
discovery document into a positioned output unit, ready for an external
template renderer.
"""

import logging

from discoview.codegen.file_assembler import FileAssembler, sort_output_units
from discoview.codegen.method_config import MethodConfigProvider
from discoview.codegen.model import ApiModel, MethodModel
from discoview.codegen.namer import SurfaceNamer, get_namer
from discoview.codegen.request_view import RequestViewBuilder
from discoview.codegen.type_resolver import TypeResolver
from discoview.codegen.views import OutputUnit
from discoview.config import DocumentConfig
from discoview.discovery.adapters import DiscoveryApiModel
from discoview.discovery.discovery import RestDescription
from discoview.discovery.loader import DiscoveryLoader
from discoview.exceptions import RequestGenerationError

logger = logging.getLogger(__name__)


class Codegen:
    """Lowers an API model into a sorted batch of output units.

    Methods are processed interface by interface. All methods of one
    interface share a TypeResolver, so every request message of the
    interface agrees on import aliases; each method gets its own symbol
    table inside the RequestViewBuilder.

    The first failing method aborts the batch with a RequestGenerationError
    naming the method and carrying the original error as its cause.

    Attributes:
        config: The DocumentConfig describing source, output and naming.
        namer: The surface naming conventions in use.
        document: The loaded discovery document (populated by generate()).

    Example:
        >>> from discoview.config import DocumentConfig
        >>> from discoview.codegen.codegen import Codegen
        >>>
        >>> config = DocumentConfig(
        ...     source='./compute.v1.json',
        ...     output='./gen',
        ...     package_name='com.google.compute.v1',
        ...     language='java',
        ... )
        >>> units = Codegen(config).generate()
        >>> units[0].output_path
        'gen/com/google/compute/v1/AggregatedListAddressesHttpRequest.java'
    """

    def __init__(
        self,
        config: DocumentConfig,
        loader: DiscoveryLoader | None = None,
        namer: SurfaceNamer | None = None,
    ):
        """Initialize the code generator.

        Args:
            config: Configuration of the document to process.
            loader: Optional custom document loader. If not provided,
                    a default DiscoveryLoader will be created.
            namer: Optional naming conventions. Defaults to the namer of
                   ``config.language``.
        """
        self.config = config
        self.namer = namer or get_namer(config.language)
        self.document: RestDescription | None = None
        self._loader = loader or DiscoveryLoader()
        self._builder = RequestViewBuilder(self.namer, config.reserved_words)
        self._assembler = FileAssembler(self.namer, config.package_name, config.output)
        self._method_configs = MethodConfigProvider(config)

    def generate(self) -> list[OutputUnit]:
        """Load the configured document and lower all of its methods.

        Raises:
            SchemaLoadError: If the document cannot be read.
            SchemaValidationError: If the content is not a discovery document.
            RequestGenerationError: If any method fails to lower.
        """
        self.document = self._loader.load(self.config.source)
        return self.transform(DiscoveryApiModel(self.document))

    def transform(self, api: ApiModel) -> list[OutputUnit]:
        """Lower every method of ``api``.

        Returns:
            Output units sorted by output path, case-insensitively.

        Raises:
            RequestGenerationError: If any method fails to lower.
        """
        interfaces = api.interfaces()
        self._warn_unknown_methods(interfaces)

        units: list[OutputUnit] = []
        for interface in interfaces:
            logger.debug(
                f'Generating {len(interface.methods)} request views for {interface.name}'
            )
            type_resolver = TypeResolver(self.namer, self.config.package_name)
            for method in interface.methods:
                try:
                    units.append(self._generate_method(method, type_resolver))
                except Exception as e:
                    raise RequestGenerationError(
                        method.id, interface=interface.name, cause=e
                    ) from e

        logger.debug(f'Generated {len(units)} output units for {api.name}')
        return sort_output_units(units)

    def _generate_method(
        self, method: MethodModel, type_resolver: TypeResolver
    ) -> OutputUnit:
        method_config = self._method_configs.get_method_config(method)
        request_view, resource_param = self._builder.build(
            method, method_config, type_resolver
        )
        if resource_param is not None:
            logger.debug(
                f'{method.id} uses resource name {resource_param.field_name} '
                f'({resource_param.pattern})'
            )
        return self._assembler.assemble(request_view, type_resolver)

    def _warn_unknown_methods(self, interfaces) -> None:
        known_ids = [method.id for interface in interfaces for method in interface.methods]
        for method_id in self._method_configs.unknown_method_ids(known_ids):
            logger.warning(f"Ignoring settings of unknown method '{method_id}'")
