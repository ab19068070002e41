"""Encoding of alphanumeric text to Morse code and back."""

from __future__ import annotations

import string

_CODES = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---", "-.-",
    ".-..", "--", "-.", "---", ".--.", "--.-", ".-.", "...", "-", "..-", "...-",
    ".--", "-..-", "-.--", "--..", "-----", ".----", "..---", "...--", "....-",
    ".....", "-....", "--...", "---..", "----.",
)

_ALPHABET = string.ascii_uppercase + string.digits

CHAR_TO_MORSE: dict[str, str] = dict(zip(_ALPHABET, _CODES))
MORSE_TO_CHAR: dict[str, str] = dict(zip(_CODES, _ALPHABET))

WORD_SEPARATOR = "/"


def _symbol_for(char: str) -> str | None:
    if char in string.ascii_lowercase:
        char = char.upper()
    return CHAR_TO_MORSE.get(char)


def encode_to_morse(text: str) -> str:
    """Encode text as Morse code.

    Every known character becomes its code followed by a space; a space in
    the input becomes "/ ". Characters without a code are dropped.
    """
    parts = []
    for char in text:
        if char == " ":
            parts.append(WORD_SEPARATOR + " ")
            continue
        symbol = _symbol_for(char)
        if symbol is not None:
            parts.append(symbol + " ")
    return "".join(parts)


def decode_from_morse(morse_text: str) -> str:
    """Decode space-separated Morse code into upper-case text.

    A "/" symbol followed by a space becomes a space. Symbols without a
    match are dropped.
    """
    *terminated, last = morse_text.split(" ")
    decoded = []
    for symbol in terminated:
        if symbol == WORD_SEPARATOR:
            decoded.append(" ")
        elif symbol in MORSE_TO_CHAR:
            decoded.append(MORSE_TO_CHAR[symbol])
    if last in MORSE_TO_CHAR:
        decoded.append(MORSE_TO_CHAR[last])
    return "".join(decoded)