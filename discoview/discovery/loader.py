"""Loading utilities for discovery documents.

This module provides the DiscoveryLoader class which reads a discovery
document from a URL or a local JSON/YAML file and validates it into the
pydantic models of ``discoview.discovery.discovery``.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError

from discoview.codegen.utils import is_url
from discoview.discovery.discovery import RestDescription
from discoview.exceptions import SchemaLoadError, SchemaValidationError

logger = logging.getLogger(__name__)


class DiscoveryLoader:
    """Loads discovery documents from URLs or file paths.

    Example:
        >>> loader = DiscoveryLoader()
        >>> document = loader.load('https://compute.googleapis.com/$discovery/rest?version=v1')
        >>> # or
        >>> document = loader.load('./compute.v1.json')
    """

    def __init__(self, http_client: httpx.Client | None = None, timeout: float = 30.0):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, a short-lived client is created per load.
            timeout: Timeout in seconds for URL requests.
        """
        self._http_client = http_client
        self._timeout = timeout

    def load(self, source: str) -> RestDescription:
        """Load and validate a discovery document.

        Args:
            source: URL or file path of the document.

        Returns:
            The validated document.

        Raises:
            SchemaLoadError: If the document cannot be read or parsed.
            SchemaValidationError: If the content is not a discovery document.
        """
        try:
            if is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
        except SchemaLoadError:
            raise
        except Exception as e:
            raise SchemaLoadError(source, cause=e) from e

        return self.validate(content, source)

    def validate(self, content: Any, source: str = '<memory>') -> RestDescription:
        """Validate already-parsed content into a RestDescription."""
        if not isinstance(content, dict):
            raise SchemaValidationError(
                source, errors=[f'expected a mapping, got {type(content).__name__}']
            )
        try:
            document = RestDescription.model_validate(content)
        except ValidationError as e:
            errors = [
                f'{".".join(str(loc) for loc in error["loc"])}: {error["msg"]}'
                for error in e.errors()
            ]
            raise SchemaValidationError(source, errors=errors) from e

        logger.debug(f'Loaded discovery document {document.name} {document.version}')
        return document

    def _load_from_url(self, url: str) -> Any:
        if self._http_client is not None:
            response = self._http_client.get(url)
        else:
            with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                response = client.get(url)
        response.raise_for_status()

        content_type = response.headers.get('content-type', '')
        if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
            return yaml.safe_load(response.text)
        return json.loads(response.text)

    def _load_from_file(self, path: str) -> Any:
        file_path = Path(path)
        if not file_path.exists():
            raise SchemaLoadError(path, cause=FileNotFoundError(f'No such file: {path}'))

        content = file_path.read_text(encoding='utf-8')
        if file_path.suffix.lower() in ('.yaml', '.yml'):
            return yaml.safe_load(content)
        return json.loads(content)
