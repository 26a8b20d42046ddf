"""
Result aggregator - groups word occurrences under their stem.

Each distinct word is stemmed (after irregular-form resolution) and merged
into a StemRecord holding the word's frequency and the stem total:

    stem    word       frequency   frequency in total
    run     running    1           3
    run     run        2           3

Merge priority for an incoming (word, count):
1. Word already recorded anywhere → add count to that entry and its record
2. Stem already recorded → append the word to that record
3. Otherwise → new record

A surface word is never split across two records: if it could stem
differently in two calls (e.g. due to the irregular table), the first-seen
stem wins.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .errors import is_valid_word, validate_word
from .irregular import IrregularResolver
from .stemmer import stem as porter_stem

logger = logging.getLogger(__name__)


@dataclass
class WordEntry:
    """Single surface word with its occurrence count"""
    word: str
    frequency: int

    def increment(self, count: int = 1) -> None:
        self.frequency += count


@dataclass
class StemRecord:
    """All words sharing a stem, with the stem's total frequency"""
    stem: str
    total_frequency: int = 0
    words: List[WordEntry] = field(default_factory=list)
    _entries: Dict[str, WordEntry] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        for entry in self.words:
            if entry.word in self._entries:
                raise ValueError(f"Word {entry.word!r} listed twice under stem {self.stem!r}")
            self._entries[entry.word] = entry

        word_total = sum(entry.frequency for entry in self.words)
        if self.total_frequency != word_total:
            raise ValueError(
                f"total_frequency {self.total_frequency} of stem {self.stem!r} "
                f"does not match its word frequencies ({word_total})"
            )

    def add_word(self, word: str, count: int) -> WordEntry:
        """Append a new word (must not already be in this record)."""
        if word in self._entries:
            raise ValueError(f"Word {word!r} already recorded under stem {self.stem!r}")
        entry = WordEntry(word=word, frequency=count)
        self.words.append(entry)
        self._entries[word] = entry
        self.total_frequency += count
        return entry

    def increment(self, word: str, count: int) -> None:
        """Add count to an existing word and to the stem total."""
        self._entries[word].increment(count)
        self.total_frequency += count

    def get(self, word: str) -> Optional[WordEntry]:
        return self._entries.get(word)


class ResultAggregator:
    """
    Builds stem-grouped records from (word, count) pairs.

    Not thread-safe: ingest() mutates shared state and must be called
    sequentially. Stemming itself is pure.
    """

    def __init__(self, stemmer: Callable[[str], str] = porter_stem):
        """
        Args:
            stemmer: Function mapping a lowercase word to its stem
                Default: built-in Porter stemmer
        """
        self.stemmer = stemmer
        self._records: List[StemRecord] = []
        self._by_word: Dict[str, StemRecord] = {}
        self._by_stem: Dict[str, StemRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def ingest(
        self,
        word: str,
        count: int = 1,
        resolver: Optional[IrregularResolver] = None,
    ) -> StemRecord:
        """
        Merge one word occurrence count into the result.

        Args:
            word: Lowercase ASCII alphabetic token
            count: Occurrences of the word in the corpus (> 0)
            resolver: Optional irregular-form resolver (anything with resolve())

        Returns:
            The StemRecord the word now belongs to

        Raises:
            InvalidWordError: If word is empty or not lowercase ASCII letters
            ValueError: If count is not a positive integer
        """
        validate_word(word)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError(f"count must be a positive integer, got {count!r}")

        # Exact word match beats stem match, across all records
        record = self._by_word.get(word)
        if record is not None:
            record.increment(word, count)
            return record

        computed_stem = self.stem_for(word, resolver)

        record = self._by_stem.get(computed_stem)
        if record is None:
            record = StemRecord(stem=computed_stem)
            self._records.append(record)
            self._by_stem[computed_stem] = record

        record.add_word(word, count)
        self._by_word[word] = record
        return record

    def ingest_counts(
        self,
        counts: Union[Mapping[str, int], Iterable[Tuple[str, int]]],
        resolver: Optional[IrregularResolver] = None,
    ) -> None:
        """Ingest pre-counted words in iteration order."""
        items = counts.items() if isinstance(counts, Mapping) else counts
        for word, count in items:
            self.ingest(word, count, resolver)

    def stem_for(self, word: str, resolver: Optional[IrregularResolver] = None) -> str:
        """
        Compute the stem of a word, resolving irregular forms first.

        A resolver answer that is empty, not a valid word, or the word itself
        is ignored and the word is stemmed directly.
        """
        target = word
        if resolver is not None:
            lemma = resolver.resolve(word)
            if lemma is not None and lemma != word:
                if is_valid_word(lemma):
                    target = lemma
                else:
                    logger.debug(f"Ignoring invalid lemma {lemma!r} for {word!r}")

        computed_stem = self.stemmer(target)
        if not computed_stem:
            # Never group under an empty stem
            logger.debug(f"Empty stem for {target!r}, keeping {word!r} as its own stem")
            computed_stem = word
        return computed_stem

    def export(self) -> List[StemRecord]:
        """
        Return all records sorted by stem.

        Word order inside each record is first-seen order.
        """
        result = sorted(self._records, key=lambda record: record.stem)
        logger.debug(
            f"Exported {len(result)} stems covering {len(self._by_word)} distinct words"
        )
        return result
