# src/texmeta/parsers/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import MetadataRecord


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: BinaryIO) -> MetadataRecord:
        """
        Parse a metadata document from a binary stream.

        Requirements:
        - Pure function of the bytes read
        - The whole document must be consumed
        - Raises GrammarError on malformed input
        """
        raise NotImplementedError
