"""Base storage interface for template sources

Defines the abstract interface the resolver and pipeline use to reach
template files.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class TemplateStorageBase(ABC):
    """Abstract base class for template source storage"""

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """
        Check whether a path names an existing regular file

        Args:
            path: Candidate template path

        Returns:
            True for an existing non-directory entry, False otherwise
        """
        pass

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """
        Read a template source

        Args:
            path: Path previously accepted by is_file()

        Returns:
            Decoded template text

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid text
        """
        pass
