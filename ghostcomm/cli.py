"""Interactive console menu for encoding and decoding Morse code."""

from __future__ import annotations

import re
import sys

from ghostcomm.morse import decode_from_morse, encode_to_morse

_MENU = (
    "=== Ghost Comm ===\n"
    "1. Encode text to Morse\n"
    "2. Decode Morse to text\n"
    "3. Exit\n"
    "Enter your option: "
)

_OPTION = re.compile(r"\s*([+-]?\d+)")
_MAX_LINE = 1999


def _read_line() -> str | None:
    line = sys.stdin.readline()
    if not line:
        return None
    return line.split("\n", 1)[0][:_MAX_LINE]


def main(argv=None) -> int:
    """Run the menu loop until the user chooses to exit or input ends."""
    out = sys.stdout
    option: int | None = None
    while option != 3:
        out.write(_MENU)
        out.flush()
        line = _read_line()
        if line is None:
            break
        match = _OPTION.match(line)
        if match:
            option = int(match.group(1))

        if option == 1:
            out.write("Enter text to encode:\n")
            text = _read_line()
            if text is None:
                break
            out.write(f"Encoded Morse: {encode_to_morse(text)}\n")
        elif option == 2:
            out.write("Enter Morse Code to decode:\n")
            text = _read_line()
            if text is None:
                break
            out.write(f"Decoded Morse: {decode_from_morse(text)}\n")
        elif option == 3:
            out.write("\nSalute!\n")
        else:
            out.write("Invalid option.\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())