"""Two-buffer Hangeul input composition: committed text plus jamo being composed."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from autohmjeum.jamo import (
    HangeulError,
    compose_char,
    decompose_char,
    ends_with_jongseong,
    is_compat_jamo,
    is_jaeum,
    is_jamo,
    is_moeum,
)

_VOWEL_PAIRS = {
    ("ㅗ", "ㅏ"): "ㅘ",
    ("ㅗ", "ㅐ"): "ㅙ",
    ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ",
    ("ㅜ", "ㅔ"): "ㅞ",
    ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
}

_FINAL_PAIRS = {
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ",
    ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ",
    ("ㄹ", "ㅁ"): "ㄻ",
    ("ㄹ", "ㅂ"): "ㄼ",
    ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ",
    ("ㄹ", "ㅍ"): "ㄿ",
    ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
}

_FINAL_SPLITS = {compound: pair for pair, compound in _FINAL_PAIRS.items()}

_PUNCTUATION = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~ ")

_MAX_COMPOSING = 5


def collapse_to_syllable(clustered: Sequence[str]) -> str | None:
    """Collapse up to three clusters (initial, medial, final) into one character."""
    match len(clustered):
        case 1:
            return clustered[0]
        case 2 | 3:
            tail = clustered[2] if len(clustered) == 3 else None
            try:
                return compose_char(clustered[0], clustered[1], tail)
            except HangeulError:
                return None
        case _:
            return None


def try_combine_vowel(a: str, b: str) -> str | None:
    """Combine two simple medials into a compound vowel, if they form one."""
    return _VOWEL_PAIRS.get((a, b))


def try_combine_final(a: str, b: str) -> str | None:
    """Combine two simple finals into a compound final, if they form one."""
    return _FINAL_PAIRS.get((a, b))


def cluster_jamo_with_spans(raw: Sequence[str]) -> tuple[list[str], list[int]]:
    """Merge adjacent jamo into compound vowels and finals, greedily from the left.

    Returns the clusters and, for each, how many raw characters it consumed.
    """
    clusters: list[str] = []
    spans: list[int] = []
    for ch in raw:
        if clusters and spans[-1] == 1:
            merged = try_combine_vowel(clusters[-1], ch) or try_combine_final(clusters[-1], ch)
            if merged is not None:
                clusters[-1] = merged
                spans[-1] = 2
                continue
        clusters.append(ch)
        spans.append(1)
    return clusters, spans


def split_final_jamo(j: str) -> tuple[str | None, str]:
    """Split a final into (part that stays, part that moves on); simple finals move whole."""
    if j in _FINAL_SPLITS:
        return _FINAL_SPLITS[j]
    if is_jaeum(ord(j)):
        return None, j
    return None, j


def is_punctuation(c: str) -> bool:
    """Whether ``c`` is ASCII punctuation or a space."""
    return c in _PUNCTUATION


def _safe_ends_with_jongseong(text: str) -> bool:
    try:
        return ends_with_jongseong(text)
    except HangeulError:
        return False


@dataclass
class InputComposer:
    """Keyboard-driven Hangeul composition state."""

    committed: str = ""
    composing: list[str] = field(default_factory=list)
    history: list[str] = field(default_factory=list)

    def display(self) -> str:
        """The committed text followed by the composing jamo as they would render."""
        clusters, _ = cluster_jamo_with_spans(self.composing)
        syllable = collapse_to_syllable(clusters)
        tail = syllable if syllable is not None else "".join(clusters)
        return self.committed + tail

    def feed(self, ch: str) -> None:
        """Handle one typed character."""
        if is_punctuation(ch):
            self.commit_punctuation(ch)
            return

        code = ord(ch)
        if is_moeum(code) and self._move_final_before_vowel(ch):
            return

        if not (is_jamo(code) or is_compat_jamo(code)):
            self.committed += "".join(self.composing) + ch
            self.composing.clear()
            return

        self.composing.append(ch)
        if len(self.composing) > _MAX_COMPOSING:
            self.committed += self.composing.pop(0)
        self._commit_complete_prefixes()

    def backspace(self) -> None:
        """Remove the last jamo, reopening committed syllables when nothing is composing."""
        if self.composing:
            self.composing.pop()
            return
        # Two committed characters are taken back, the second replacing what the first left.
        self._reopen_last_committed()
        self._reopen_last_committed()

    def enter(self) -> str:
        """Finish the line, store it in the history and return it."""
        self.finalize()
        line = self.committed
        self.history.append(line)
        self.committed = ""
        return line

    def commit_punctuation(self, ch: str) -> None:
        """Finish the composing syllable, then commit ``ch``."""
        self.finalize()
        self.committed += ch

    def finalize(self) -> None:
        """Move everything composing into the committed text."""
        clusters, _ = cluster_jamo_with_spans(self.composing)
        syllable = collapse_to_syllable(clusters)
        self.committed += syllable if syllable is not None else "".join(clusters)
        self.composing.clear()

    def _move_final_before_vowel(self, vowel: str) -> bool:
        if not self.composing and _safe_ends_with_jongseong(self.committed):
            last = self.committed[-1]
            self.committed = self.committed[:-1]
            lead, medial, tail = decompose_char(last)
            keep, moved = split_final_jamo(tail)
            self.committed += compose_char(lead, medial, keep) + vowel
            self.composing = [moved]
            return True

        clusters, _ = cluster_jamo_with_spans(self.composing)
        syllable = collapse_to_syllable(clusters)
        if syllable is not None and _safe_ends_with_jongseong(syllable):
            lead, medial, tail = decompose_char(syllable)
            keep, moved = split_final_jamo(tail)
            self.committed += compose_char(lead, medial, keep)
            self.composing = [moved, vowel]
            return True
        return False

    def _commit_complete_prefixes(self) -> None:
        while True:
            clusters, spans = cluster_jamo_with_spans(self.composing)
            if collapse_to_syllable(clusters) is not None:
                return
            for end in range(len(clusters) - 1, 0, -1):
                syllable = collapse_to_syllable(clusters[:end])
                if syllable is not None:
                    self.committed += syllable
                    del self.composing[: sum(spans[:end])]
                    break
            else:
                return

    def _reopen_last_committed(self) -> None:
        if not self.committed:
            return
        last = self.committed[-1]
        self.committed = self.committed[:-1]
        try:
            lead, medial, tail = decompose_char(last)
        except HangeulError:
            return
        self.composing = [jamo for jamo in (lead, medial, tail) if jamo is not None]
        self.composing.pop()