"""
Porter stemmer for English.

Implements the suffix-stripping algorithm from:
Porter, 1980, "An algorithm for suffix stripping", Program 14(3), pp 130-137
https://tartarus.org/martin/PorterStemmer/

The word is copied into a mutable character buffer and reduced in six
stages. Two cursors drive every rule:
- k: index of the last character of the current stem region
- j: boundary set by a successful suffix match (stem = b[0..j])

Most replacements are gated by the measure m() of b[0..j], the number
of vowel-sequence/consonant-sequence pairs:

    <c><v>       gives 0   (tr, ee, tree, by)
    <c>vc<v>     gives 1   (trouble, oats, trees)
    <c>vcvc<v>   gives 2   (troubles, private)

Examples:
- "caresses" → "caress"
- "ponies" → "poni"
- "meeting" → "meet"
- "relational" → "relat"
"""

from typing import Dict, List, Tuple

from .errors import validate_word

VOWELS = frozenset("aeiou")

# Stage 3: double suffixes, keyed by the penultimate letter of the word
DOUBLE_SUFFIXES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "a": (("ational", "ate"), ("tional", "tion")),
    "c": (("enci", "ence"), ("anci", "ance")),
    "e": (("izer", "ize"),),
    "l": (("bli", "ble"), ("alli", "al"), ("entli", "ent"), ("eli", "e"), ("ousli", "ous")),
    "o": (("ization", "ize"), ("ation", "ate"), ("ator", "ate")),
    "s": (("alism", "al"), ("iveness", "ive"), ("fulness", "ful"), ("ousness", "ous")),
    "t": (("aliti", "al"), ("iviti", "ive"), ("biliti", "ble")),
    "g": (("logi", "log"),),
}

# Stage 4: -ic-, -full, -ness etc., keyed by the last letter
IC_FUL_NESS_SUFFIXES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "e": (("icate", "ic"), ("ative", ""), ("alize", "al")),
    "i": (("iciti", "ic"),),
    "l": (("ical", "ic"), ("ful", "")),
    "s": (("ness", ""),),
}

# Stage 5: suffixes removed in context <c>vcvc<v>, keyed by the penultimate letter.
# Order matters: "ement" before "ment" before "ent".
RESIDUAL_SUFFIXES: Dict[str, Tuple[str, ...]] = {
    "a": ("al",),
    "c": ("ance", "ence"),
    "e": ("er",),
    "i": ("ic",),
    "l": ("able", "ible"),
    "n": ("ant", "ement", "ment", "ent"),
    "o": ("ion", "ou"),
    "s": ("ism",),
    "t": ("ate", "iti"),
    "u": ("ous",),
    "v": ("ive",),
    "z": ("ize",),
}

STAGE_COUNT = 6


class _StemBuffer:
    """Character buffer and cursors for stemming a single word."""

    def __init__(self, word: str):
        self.b: List[str] = list(word)
        self.k = len(word) - 1
        self.j = 0

    def result(self) -> str:
        return "".join(self.b[: self.k + 1])

    # --- classification helpers -------------------------------------------

    def is_consonant(self, i: int) -> bool:
        """
        True if b[i] is a consonant.

        'y' is a consonant at index 0 or after a vowel, and a vowel after a
        consonant. A run of y's alternates, so walk back to the first non-y
        (or index 0) and count the flips.
        """
        flips = 0
        while True:
            ch = self.b[i]
            if ch in VOWELS:
                consonant = False
                break
            if ch != "y" or i == 0:
                consonant = True
                break
            flips += 1
            i -= 1
        return consonant if flips % 2 == 0 else not consonant

    def measure(self) -> int:
        """Number of VC sequences in b[0..j]."""
        cv_sequence = "".join(
            "c" if self.is_consonant(i) else "v" for i in range(self.j + 1)
        )
        return cv_sequence.count("vc")

    def has_vowel_in_stem(self) -> bool:
        return any(not self.is_consonant(i) for i in range(self.j + 1))

    def ends_double_consonant(self, pos: int) -> bool:
        if pos < 1:
            return False
        if self.b[pos] != self.b[pos - 1]:
            return False
        return self.is_consonant(pos)

    def is_consonant_vowel_consonant(self, pos: int) -> bool:
        """
        True if b[pos-2..pos] is consonant-vowel-consonant and b[pos] is not
        w, x or y. Used to restore an e at the end of a short word:
        cav(e), lov(e), hop(e), crim(e), but snow, box, tray.
        """
        if (
            pos < 2
            or not self.is_consonant(pos)
            or self.is_consonant(pos - 1)
            or not self.is_consonant(pos - 2)
        ):
            return False
        return self.b[pos] not in "wxy"

    # --- suffix matching --------------------------------------------------

    def ends_with(self, suffix: str) -> bool:
        """True if b[0..k] ends with suffix; sets j to the stem boundary."""
        offset = self.k - len(suffix) + 1
        if offset < 0:
            return False
        if "".join(self.b[offset : self.k + 1]) != suffix:
            return False
        self.j = self.k - len(suffix)
        return True

    def replace_suffix(self, replacement: str) -> None:
        """Set b[j+1..] to replacement and move k to its last character."""
        start = self.j + 1
        self.b[start : start + len(replacement)] = list(replacement)
        self.k = self.j + len(replacement)

    def replace_if_measure_positive(self, replacement: str) -> None:
        if self.measure() > 0:
            self.replace_suffix(replacement)

    # --- stages -----------------------------------------------------------

    def step1(self) -> None:
        """
        Plurals and -ed / -ing:

            caresses -> caress    feed    -> feed     matting -> mat
            ponies   -> poni      agreed  -> agree    mating  -> mate
            ties     -> ti        plastered -> plaster  meeting -> meet
            cats     -> cat       disabled  -> disable  milling -> mill
        """
        b = self.b
        if b[self.k] == "s":
            if self.ends_with("sses"):
                self.k -= 2
            elif self.ends_with("ies"):
                self.replace_suffix("i")
            elif b[self.k - 1] != "s":
                self.k -= 1

        if self.ends_with("eed"):
            if self.measure() > 0:
                self.k -= 1
        elif (self.ends_with("ed") or self.ends_with("ing")) and self.has_vowel_in_stem():
            self.k = self.j
            if self.ends_with("at"):
                self.replace_suffix("ate")
            elif self.ends_with("bl"):
                self.replace_suffix("ble")
            elif self.ends_with("iz"):
                self.replace_suffix("ize")
            elif self.ends_double_consonant(self.k):
                if b[self.k] not in "lsz":
                    self.k -= 1
            elif self.measure() == 1 and self.is_consonant_vowel_consonant(self.k):
                self.replace_suffix("e")

    def step2(self) -> None:
        """Terminal y -> i when there is another vowel in the stem."""
        if self.ends_with("y") and self.has_vowel_in_stem():
            self.b[self.k] = "i"

    def step3(self) -> None:
        """Double suffixes to single ones: -ization (-ize + -ation) -> -ize."""
        if self.k == 0:
            return
        self._replace_first_match(DOUBLE_SUFFIXES.get(self.b[self.k - 1], ()))

    def step4(self) -> None:
        """-ic-, -full, -ness etc."""
        self._replace_first_match(IC_FUL_NESS_SUFFIXES.get(self.b[self.k], ()))

    def step5(self) -> None:
        """Remove -ant, -ence etc. when the remaining stem has m() > 1."""
        if self.k == 0:
            return
        for suffix in RESIDUAL_SUFFIXES.get(self.b[self.k - 1], ()):
            if not self.ends_with(suffix):
                continue
            # -ion only after s or t (and never as the whole word)
            if suffix == "ion" and not (self.j >= 0 and self.b[self.j] in "st"):
                continue
            if self.measure() > 1:
                self.k = self.j
            return

    def step6(self) -> None:
        """Remove a final -e, and -ll -> -l, when m() > 1."""
        self.j = self.k
        if self.b[self.k] == "e":
            m = self.measure()
            if m > 1 or (m == 1 and not self.is_consonant_vowel_consonant(self.k - 1)):
                self.k -= 1
        if self.b[self.k] == "l" and self.ends_double_consonant(self.k) and self.measure() > 1:
            self.k -= 1

    def _replace_first_match(self, rules: Tuple[Tuple[str, str], ...]) -> None:
        # Only the first matching suffix is considered, even if m() blocks it
        for suffix, replacement in rules:
            if self.ends_with(suffix):
                self.replace_if_measure_positive(replacement)
                return


class PorterStemmer:
    """
    Stateless Porter stemmer.

    Every call gets its own buffer, so one instance can be shared between
    threads.
    """

    def stem(self, word: str, last_stage: int = STAGE_COUNT) -> str:
        """
        Stem a single word.

        Args:
            word: Lowercase ASCII alphabetic word
            last_stage: Stop after this stage (1-6). Stage-level output is
                handy for checking individual rules.

        Returns:
            Stemmed word (words of length <= 2 are returned unchanged)

        Raises:
            InvalidWordError: If word is empty or not lowercase ASCII letters
        """
        validate_word(word)
        if not 1 <= last_stage <= STAGE_COUNT:
            raise ValueError(f"last_stage must be between 1 and {STAGE_COUNT}, got {last_stage}")

        buffer = _StemBuffer(word)
        if buffer.k <= 1:
            return word

        stages = (buffer.step1, buffer.step2, buffer.step3, buffer.step4, buffer.step5, buffer.step6)
        for step in stages[:last_stage]:
            step()
        return buffer.result()


# Initialize stemmer once (stateless, reusable)
_stemmer = PorterStemmer()


def stem(word: str) -> str:
    """
    Stem a single word using the Porter algorithm.

    Args:
        word: Lowercase word to stem

    Returns:
        Stemmed word

    Examples:
        >>> stem("caresses")
        'caress'
        >>> stem("running")
        'run'
        >>> stem("conditional")
        'condit'
    """
    return _stemmer.stem(word)
