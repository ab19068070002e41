# ghostcomm

Convert plain alphanumeric text to International Morse code and back.

## Installation

```
pip install .
```

## Interactive use

```
ghostcomm
```

This opens a menu:

```
=== Ghost Comm ===
1. Encode text to Morse
2. Decode Morse to text
3. Exit
Enter your option:
```

- `1` asks for a line of text and prints `Encoded Morse: ...`.
- `2` asks for a line of Morse code and prints `Decoded Morse: ...`.
- `3` prints `Salute!` and exits.
- Any other number prints `Invalid option.` and shows the menu again.

The option is read as the integer at the start of the line. A line that does
not start with a number leaves the previous choice in effect (and counts as
invalid if nothing was chosen yet). Input lines are cut to 1999 characters.
The program also ends when standard input reaches end of file.

The same menu can be started from Python with `ghostcomm.cli.main()`, which
returns `0`.

## Library use

```python
from ghostcomm.morse import encode_to_morse, decode_from_morse

encode_to_morse("SOS")            # '... --- ... '
decode_from_morse("... --- ... ") # 'SOS'

encode_to_morse("Hello World")
# '.... . .-.. .-.. --- / .-- --- .-. .-.. -.. '
```

The lookup tables are available as `ghostcomm.morse.CHAR_TO_MORSE` and
`ghostcomm.morse.MORSE_TO_CHAR`, and the word separator as
`ghostcomm.morse.WORD_SEPARATOR` (`"/"`).

### Encoding rules

- ASCII letters are converted to upper case before they are looked up, so `a` and `A` encode the same way.
- Only `A`–`Z` and `0`–`9` have codes. Any other character is silently dropped.
- Each encoded symbol is followed by a single space.
- A space in the input becomes `/ `.

### Decoding rules

- Symbols are separated by single spaces; a `/` followed by a space stands for a space between words.
- A symbol that is not a known Morse code is skipped.
- A final symbol without a trailing space is still decoded if it is a letter or digit.
- Decoded letters are always upper case, so a round trip of `"Ghost123"` gives `"GHOST123"`.

## What it does not do

Only letters and digits are covered: punctuation and prosigns have no codes,
and there is no audio, light or keying output — input and output are text only.

## Running the tests

```
pip install ".[test]"
pytest
```