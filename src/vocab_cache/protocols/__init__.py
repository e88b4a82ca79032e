"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, API Ninjas → another API)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .upstream import DefinitionFetcher, WordGenerator
from .vocabulary_store import VocabularyStore

__all__ = [
    "DefinitionFetcher",
    "VocabularyStore",
    "WordGenerator",
]
