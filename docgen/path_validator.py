# docgen/path_validator.py

"""
Path validation and security checks for source files and outputs.
"""

import os
import logging
from typing import List, Optional

from .code_parser import JAVASCRIPT_EXTENSIONS, PYTHON_EXTENSIONS

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = PYTHON_EXTENSIONS + JAVASCRIPT_EXTENSIONS


class PathValidator:
    """Validates file paths before they are read or written."""

    def __init__(self, forbidden_paths: Optional[List[str]] = None):
        """
        Initialize the path validator.

        Args:
            forbidden_paths: List of forbidden directory paths
        """
        if forbidden_paths is None:
            forbidden_paths = [
                '/etc', '/sys', '/proc', '/boot', '/var/log',
                os.path.expanduser('~/.ssh'),
            ]
        self.forbidden_paths = [os.path.abspath(os.path.expanduser(p))
                                for p in forbidden_paths]

    def _is_forbidden(self, path: str) -> bool:
        for forbidden in self.forbidden_paths:
            if path == forbidden or path.startswith(forbidden + os.sep):
                return True
        return False

    def is_safe_path(self, path: str) -> bool:
        """
        Check if a path is safe to access.

        Args:
            path: Path to validate

        Returns:
            True if path is safe, False otherwise
        """
        if not path:
            return False
        if '..' in path.replace('\\', '/').split('/') or '%2e%2e' in path.lower():
            logger.error(f"Path traversal detected and rejected: {path}")
            return False

        try:
            abs_path = os.path.abspath(os.path.expanduser(path))
            real_path = os.path.realpath(abs_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error validating path {path}: {e}")
            return False

        if self._is_forbidden(abs_path) or self._is_forbidden(real_path):
            logger.error(f"Access denied to forbidden path: {path}")
            return False
        return True

    def validate_source_file(self, path: str) -> bool:
        """
        Validate a source file to document.

        Args:
            path: Path of the file

        Returns:
            True if the file exists, has a supported extension and is safe
        """
        if not path or not os.path.isfile(os.path.expanduser(path)):
            logger.error(f"Not a valid file: {path}")
            return False
        if not path.lower().endswith(SUPPORTED_EXTENSIONS):
            logger.error(f"Unsupported file type: {path}")
            return False
        return self.is_safe_path(path)

    def get_output_path(self, source_path: str, suffix: str = '.documented',
                        output: Optional[str] = None) -> Optional[str]:
        """
        Decide where the documented file is written.

        Args:
            source_path: Input file path
            suffix: Inserted between stem and extension when ``output`` is not given
            output: Explicit output path

        Returns:
            Output path, or None if it is not safe to write
        """
        if output:
            target = output
        else:
            stem, ext = os.path.splitext(source_path)
            target = f"{stem}{suffix}{ext}"

        if not self.is_safe_path(target):
            return None
        return target
