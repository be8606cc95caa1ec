"""Hangeul jamo classification and syllable composition."""

from __future__ import annotations

from dataclasses import dataclass

_SYLLABLE_BASE = 0xAC00
_SYLLABLE_LAST = 0xD7A3
_VOWEL_COUNT = 21
_TAIL_COUNT = 28

_JAMO_START = 0x1100
_JAMO_END = 0x11FF
_LEAD_START = 0x1100
_LEAD_END = 0x1112
_VOWEL_START = 0x1161
_VOWEL_END = 0x1175
_TAIL_START = 0x11A8
_TAIL_END = 0x11C2

_COMPAT_START = 0x3130
_COMPAT_END = 0x318F
_COMPAT_CONSONANT_START = 0x3131
_COMPAT_CONSONANT_END = 0x314E
_COMPAT_VOWEL_START = 0x314F
_COMPAT_VOWEL_END = 0x3163

_CHOSEONG = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
_JUNGSEONG = "".join(chr(code) for code in range(_COMPAT_VOWEL_START, _COMPAT_VOWEL_END + 1))
_JONGSEONG = "ㄱㄲㄳㄴㄵㄶㄷㄹㄺㄻㄼㄽㄾㄿㅀㅁㅂㅄㅅㅆㅇㅈㅊㅋㅌㅍㅎ"


class HangeulError(ValueError):
    """Raised when jamo cannot be composed or a character cannot be decomposed."""


def is_jamo(code: int) -> bool:
    """True for a code point in the conjoining Hangul Jamo block."""
    return _JAMO_START <= code <= _JAMO_END


def is_compat_jamo(code: int) -> bool:
    """True for a code point in the Hangul Compatibility Jamo block."""
    return _COMPAT_START <= code <= _COMPAT_END


def is_jaeum(code: int) -> bool:
    """True for a consonant jamo, conjoining or compatibility."""
    return (
        _LEAD_START <= code <= _LEAD_END
        or _TAIL_START <= code <= _TAIL_END
        or _COMPAT_CONSONANT_START <= code <= _COMPAT_CONSONANT_END
    )


def is_moeum(code: int) -> bool:
    """True for a vowel jamo, conjoining or compatibility."""
    return _VOWEL_START <= code <= _VOWEL_END or _COMPAT_VOWEL_START <= code <= _COMPAT_VOWEL_END


def is_choseong(code: int) -> bool:
    """True for a jamo that can open a syllable."""
    if _LEAD_START <= code <= _LEAD_END:
        return True
    return is_compat_jamo(code) and chr(code) in _CHOSEONG


def _single(ch: str, role: str) -> int:
    if not isinstance(ch, str) or len(ch) != 1:
        raise HangeulError(f"{role} must be a single character, got {ch!r}")
    return ord(ch)


def _lead_index(ch: str) -> int:
    code = _single(ch, "choseong")
    if _LEAD_START <= code <= _LEAD_END:
        return code - _LEAD_START
    index = _CHOSEONG.find(ch)
    if index < 0:
        raise HangeulError(f"{ch!r} is not a valid choseong")
    return index


def _vowel_index(ch: str) -> int:
    code = _single(ch, "jungseong")
    if _VOWEL_START <= code <= _VOWEL_END:
        return code - _VOWEL_START
    index = _JUNGSEONG.find(ch)
    if index < 0:
        raise HangeulError(f"{ch!r} is not a valid jungseong")
    return index


def _tail_index(ch: str | None) -> int:
    if ch is None:
        return 0
    code = _single(ch, "jongseong")
    if _TAIL_START <= code <= _TAIL_END:
        return code - _TAIL_START + 1
    index = _JONGSEONG.find(ch)
    if index < 0:
        raise HangeulError(f"{ch!r} is not a valid jongseong")
    return index + 1


def compose_char(choseong: str, jungseong: str, jongseong: str | None) -> str:
    """Build one syllable from an initial, a medial and an optional final jamo."""
    lead = _lead_index(choseong)
    vowel = _vowel_index(jungseong)
    tail = _tail_index(jongseong)
    return chr(_SYLLABLE_BASE + (lead * _VOWEL_COUNT + vowel) * _TAIL_COUNT + tail)


def decompose_char(syllable: str) -> tuple[str, str, str | None]:
    """Split a syllable into compatibility jamo: (initial, medial, final or None)."""
    code = _single(syllable, "syllable")
    if not _SYLLABLE_BASE <= code <= _SYLLABLE_LAST:
        raise HangeulError(f"{syllable!r} is not a Hangul syllable")
    offset = code - _SYLLABLE_BASE
    lead, rest = divmod(offset, _VOWEL_COUNT * _TAIL_COUNT)
    vowel, tail = divmod(rest, _TAIL_COUNT)
    return _CHOSEONG[lead], _JUNGSEONG[vowel], _JONGSEONG[tail - 1] if tail else None


def ends_with_jongseong(text: str) -> bool:
    """Whether the last syllable of ``text`` carries a final consonant."""
    if not text:
        raise HangeulError("empty text has no final syllable")
    return decompose_char(text[-1])[2] is not None


@dataclass
class Karacter:
    """A small look-ahead window over a stream of jamo."""

    first: str | None = None
    second: str | None = None
    third: str | None = None
    choseong: str | None = None
    jungseong: str | None = None
    jongseong: str | None = None

    def process_char(self, c: str) -> str | None:
        """Take the next character; echoes it back while the window is still empty."""
        if self.first is None:
            if is_choseong(ord(c)):
                self.first = c
            return c
        return None