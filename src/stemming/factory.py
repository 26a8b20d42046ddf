"""
Factory to create stemmer backends based on configuration.
"""

import logging
from typing import Callable, Dict

from nltk.stem.snowball import SnowballStemmer

from .stemmer import PorterStemmer

logger = logging.getLogger(__name__)

StemFunction = Callable[[str], str]


class StemmerFactory:
    """Factory to create stem functions by backend name."""

    BACKENDS = ("porter", "snowball")

    _cache: Dict[str, StemFunction] = {}

    @classmethod
    def create(cls, name: str = "porter") -> StemFunction:
        """
        Create a stem function for the named backend.

        Supported backends:
            - porter: Built-in Porter (1980) stemmer (default)
            - snowball: NLTK's Snowball (Porter2) English stemmer, useful
              for comparing groupings against the improved algorithm

        Args:
            name: Backend name (case-insensitive)

        Returns:
            Callable mapping a lowercase word to its stem

        Raises:
            ValueError: If the backend name is unknown
        """
        backend = (name or "").strip().lower()
        if backend in cls._cache:
            return cls._cache[backend]

        if backend == "porter":
            stem_function = PorterStemmer().stem
        elif backend == "snowball":
            stem_function = SnowballStemmer("english").stem
        else:
            raise ValueError(
                f"Unknown stemmer backend: {name}. "
                f"Valid options: {', '.join(cls.BACKENDS)}"
            )

        logger.debug(f"Created stemmer backend: {backend}")
        cls._cache[backend] = stem_function
        return stem_function
