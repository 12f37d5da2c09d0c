"""Lowering of API methods into render-ready request views.

The orchestrator lives in ``discoview.codegen.codegen`` and is not imported
here, since the discovery adapters depend on this package's leaf modules.
"""

from discoview.codegen.file_assembler import FileAssembler, sort_output_units
from discoview.codegen.model import ApiModel, FieldModel, InterfaceModel, MethodModel
from discoview.codegen.namer import (
    JavaSurfaceNamer,
    PythonSurfaceNamer,
    SurfaceNamer,
    get_namer,
)
from discoview.codegen.request_view import STANDARD_QUERY_PARAMS, RequestViewBuilder
from discoview.codegen.symbol_table import SymbolTable
from discoview.codegen.type_resolver import TypeResolver
from discoview.codegen.views import (
    FieldView,
    FileHeaderView,
    ImportView,
    OutputUnit,
    RequestView,
    ResourceNameParamView,
)

__all__ = [
    # Contract
    'ApiModel',
    'InterfaceModel',
    'MethodModel',
    'FieldModel',
    # Lowering
    'SymbolTable',
    'TypeResolver',
    'RequestViewBuilder',
    'STANDARD_QUERY_PARAMS',
    'FileAssembler',
    'sort_output_units',
    # Naming
    'SurfaceNamer',
    'JavaSurfaceNamer',
    'PythonSurfaceNamer',
    'get_namer',
    # Views
    'FieldView',
    'RequestView',
    'ResourceNameParamView',
    'ImportView',
    'FileHeaderView',
    'OutputUnit',
]
