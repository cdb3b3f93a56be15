from .base import BibEntry, Bibliography
from .bibtex import load_bibtex, load_bibtex_file
from .memory import InMemoryBibliography

__all__ = [
    "BibEntry",
    "Bibliography",
    "InMemoryBibliography",
    "load_bibtex",
    "load_bibtex_file",
]
