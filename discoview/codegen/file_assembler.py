"""Placement of request views into output units.

The FileAssembler decides where a request message is written and which
imports its file needs. Imports are snapshotted from the interface's
TypeResolver only after the request view is complete, so every type used by
the view is included.
"""

from collections.abc import Iterable

from upath import UPath

from discoview.codegen.namer import SurfaceNamer
from discoview.codegen.type_resolver import TypeResolver
from discoview.codegen.views import FileHeaderView, OutputUnit, RequestView

__all__ = ['FileAssembler', 'output_unit_sort_key', 'sort_output_units']


class FileAssembler:
    """Wraps request views into positioned output units.

    Example:
        >>> assembler = FileAssembler(JavaSurfaceNamer(), 'com.google.compute.v1', 'gen')
        >>> unit = assembler.assemble(request_view, resolver)
        >>> unit.output_path
        'gen/com/google/compute/v1/GetInstanceHttpRequest.java'
    """

    def __init__(self, namer: SurfaceNamer, package_name: str, output: str):
        """Initialize the assembler.

        Args:
            namer: Naming conventions of the generated surface.
            package_name: Package of the generated messages.
            output: Root directory (local path or fsspec URL) of the output.
        """
        self._namer = namer
        self._package_name = package_name
        self._output_root = UPath(output)

    def output_path(self, type_name: str) -> str:
        """Return the output path of the file holding ``type_name``."""
        path = self._output_root.joinpath(
            *self._namer.package_path(self._package_name),
            self._namer.source_file_name(type_name),
        )
        return str(path)

    def assemble(self, request_view: RequestView, type_resolver: TypeResolver) -> OutputUnit:
        """Build the output unit of a finished request view.

        Args:
            request_view: The complete request view.
            type_resolver: The resolver the view was built with.

        Returns:
            The output unit, with the core imports and every import the
            resolver has accumulated so far.
        """
        for qualified_name in self._namer.core_imports:
            type_resolver.record_import(qualified_name)

        # Must stay last to catch every import of the view.
        imports = type_resolver.imports()

        return OutputUnit(
            output_path=self.output_path(request_view.type_name),
            imports=imports,
            file_header=FileHeaderView(package_name=self._package_name, imports=imports),
            message_view=request_view,
            template_name=self._namer.template_name,
        )


def output_unit_sort_key(unit: OutputUnit) -> tuple[str, str]:
    return unit.output_path.casefold(), unit.output_path


def sort_output_units(units: Iterable[OutputUnit]) -> list[OutputUnit]:
    """Sort a batch by output path, case-insensitively."""
    return sorted(units, key=output_unit_sort_key)
