"""Custom exceptions for discoview.

This module defines a hierarchy of exceptions used throughout discoview to
provide clear, actionable error messages for malformed discovery documents,
invalid configuration and failed request view generation.

Naming and import alias collisions are never raised: the symbol table and
the type resolver always resolve them internally.
"""


class DiscoViewError(Exception):
    """Base exception for all discoview errors.

    All exceptions raised by discoview inherit from this class, making it
    easy to catch every discoview-related error with a single except clause.

    Example:
        try:
            codegen.generate()
        except DiscoViewError as e:
            print(f"discoview error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(DiscoViewError):
    """Base exception for discovery document errors."""

    pass


class SchemaLoadError(SchemaError):
    """Failed to load a discovery document from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load discovery document from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """The loaded document is not a valid discovery document.

    Attributes:
        source: The source path or URL of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Discovery document validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class SchemaReferenceError(SchemaError):
    """A $ref in the document names a schema that does not exist.

    Attributes:
        reference: The $ref string that could not be resolved.
        reason: Explanation of why the reference couldn't be resolved.
    """

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f"Failed to resolve reference '{reference}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class CodeGenerationError(DiscoViewError):
    """Error while lowering the API model into request views.

    Attributes:
        context: Additional context about what was being generated.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while generating {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class PreconditionError(CodeGenerationError):
    """Upstream model or configuration data violates a precondition.

    Raised when a method lacks data the lowering stage cannot do without,
    e.g. a path template without any ``{placeholder}``. It is never handled
    inside the lowering stage and aborts the batch.

    Attributes:
        method_id: The id of the method whose data is malformed.
    """

    def __init__(self, message: str, method_id: str | None = None):
        self.method_id = method_id
        super().__init__(message, context=method_id)


class RequestGenerationError(CodeGenerationError):
    """Error generating the request view of one method.

    Attributes:
        method_id: The discovery id of the method, e.g. ``compute.instances.get``.
        interface: The interface the method belongs to.
    """

    def __init__(
        self,
        method_id: str,
        interface: str | None = None,
        cause: Exception | None = None,
    ):
        self.method_id = method_id
        self.interface = interface
        message = f"Failed to generate request view for '{method_id}'"
        if interface:
            message += f' (interface {interface})'
        super().__init__(message, context=method_id, cause=cause)


class ConfigurationError(DiscoViewError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class UnsupportedFeatureError(DiscoViewError):
    """The document uses a feature the lowering stage does not support.

    Attributes:
        feature: Description of the unsupported feature.
        suggestion: Optional suggestion for a workaround.
    """

    def __init__(self, feature: str, suggestion: str | None = None):
        self.feature = feature
        self.suggestion = suggestion
        message = f'Unsupported feature: {feature}'
        if suggestion:
            message += f'. {suggestion}'
        super().__init__(message)
