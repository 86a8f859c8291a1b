#!/usr/bin/env python3
"""
Old Phone Pad Decoder/Encoder

Decode key presses typed on an old numeric phone keypad (multi-tap) into text,
or encode text into the key presses that would type it.

Keys:
    2-9 : letters (press repeatedly to cycle, e.g. 222 -> C)
    1   : symbols & ' (
    0   : space
    ' ' : pause, needed between two letters on the same key
    *   : backspace
    #   : send (end of input)

Examples:
    # Decode
    python3 oldphonepad.py decode "4433555 555666#"
    # Output: HELLO

    # Backspace removes the last committed letter
    python3 oldphonepad.py decode "8 88777444666*664#"
    # Output: TURING

    # Encode
    python3 oldphonepad.py encode "hello"
    # Output: 4433555 555666#

    # Decode one message per line
    python3 oldphonepad.py decode --lines -i messages.txt
"""

import sys
import argparse
from pathlib import Path
from typing import Iterable, List, Optional, Tuple


# Keypad Mapping

KEYPAD = {
    '1': "&'(",
    '2': 'abc',
    '3': 'def',
    '4': 'ghi',
    '5': 'jkl',
    '6': 'mno',
    '7': 'pqrs',
    '8': 'tuv',
    '9': 'wxyz',
    '0': ' ',
}

TERMINATOR = '#'
BACKSPACE = '*'
PAUSE = ' '

# Reverse mapping: output character -> (key, presses)
LETTER_MAP = {}
for key, letters in KEYPAD.items():
    for pos, letter in enumerate(letters, 1):
        LETTER_MAP[letter.upper()] = (key, pos)


# Errors

class PhonePadError(ValueError):
    """Base class for keypad input errors."""


class InvalidInput(PhonePadError):
    """No input was supplied."""


class MissingTerminator(PhonePadError):
    """Input never presses the send key."""


class UnsupportedCharacter(PhonePadError):
    """Character cannot be typed on the keypad."""


# Decoding

def resolve_presses(key: str, presses: int) -> str:
    """
    Resolve N presses of a key to its character.

    Presses past the end of the key's letters wrap around, so 2222 is A
    again. Zero presses resolve to an empty string.
    """
    if key not in KEYPAD:
        raise ValueError(f"Invalid key: '{key}'")
    if presses < 0:
        raise ValueError(f"Negative press count: {presses}")
    if presses == 0:
        return ''

    letters = KEYPAD[key]
    return letters[(presses - 1) % len(letters)].upper()


def decode(sequence: Optional[str]) -> str:
    """
    Decode a multi-tap key sequence to text.

    Processing stops at the first '#'. Spaces commit the current letter,
    '*' commits it and then deletes the last letter typed, and any other
    character commits the current letter and is otherwise ignored.

    Raises:
        InvalidInput: sequence is None
        MissingTerminator: sequence contains no '#'
    """
    if sequence is None:
        raise InvalidInput("Input cannot be None")

    if TERMINATOR not in sequence:
        raise MissingTerminator(
            f"Input must contain the send character '{TERMINATOR}'"
        )

    output: List[str] = []
    pending_key = None
    presses = 0

    def commit():
        if pending_key is not None:
            char = resolve_presses(pending_key, presses)
            if char:
                output.append(char)

    for char in sequence:
        if char == TERMINATOR:
            commit()
            break

        if char in KEYPAD:
            if char == pending_key:
                presses += 1
                continue
            commit()
            pending_key, presses = char, 1
            continue

        # Pause, backspace and unknown characters all end the current letter
        commit()
        pending_key, presses = None, 0

        if char == BACKSPACE and output:
            output.pop()

    return ''.join(output)


def decode_lines(lines: Iterable[str]) -> List[str]:
    """Decode each non-blank line as a separate message."""
    results = []

    for lineno, line in enumerate(lines, 1):
        line = line.rstrip('\r\n')
        if not line.strip():
            continue

        try:
            results.append(decode(line))
        except PhonePadError as e:
            raise type(e)(f"line {lineno}: {e}") from e

    return results


# Encoding

def encode_char(char: str) -> Tuple[str, int]:
    """Return (key, presses) for a single character."""
    try:
        return LETTER_MAP[char.upper()]
    except KeyError:
        raise UnsupportedCharacter(f"Unsupported character: '{char}'") from None


def encode(text: str, pause: str = PAUSE) -> str:
    """
    Encode text to a multi-tap key sequence ending with '#'.

    A pause is inserted between consecutive letters on the same key.
    """
    if len(pause) != 1 or pause in KEYPAD or pause in (BACKSPACE, TERMINATOR):
        raise ValueError(f"Invalid pause character: '{pause}'")

    parts = []
    last_key = None

    for char in text:
        key, presses = encode_char(char)
        if key == last_key:
            parts.append(pause)
        parts.append(key * presses)
        last_key = key

    parts.append(TERMINATOR)
    return ''.join(parts)


# File I/O

def read_input(path: str) -> str:
    """Read input from file or stdin."""
    if path == '-':
        return sys.stdin.read()

    try:
        return Path(path).read_text(encoding='utf-8')
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"Error: Invalid UTF-8 encoding: {path}", file=sys.stderr)
        sys.exit(1)


def write_output(content: str, path: Optional[str]) -> None:
    """Write output to file or stdout."""
    if path:
        try:
            Path(path).write_text(content + '\n', encoding='utf-8')
            print(f"Saved: {path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='oldphonepad',
        description='Old phone keypad (multi-tap) decoder/encoder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', required=True,
                                       help='Operation mode')

    # Decode command
    decode_parser = subparsers.add_parser('decode',
                                          help='Decode key presses to text')
    decode_parser.add_argument('sequence', nargs='?',
                               help='Key sequence ending with # (or use -i for file)')
    decode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    decode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')
    decode_parser.add_argument('--lines', action='store_true',
                               help='Decode each input line as a separate message')
    decode_parser.add_argument('-v', '--verbose', action='store_true',
                               help='Verbose output')

    # Encode command
    encode_parser = subparsers.add_parser('encode',
                                          help='Encode text to key presses')
    encode_parser.add_argument('text', nargs='?',
                               help='Text to encode (or use -i for file)')
    encode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    encode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')
    encode_parser.add_argument('-p', '--pause', default=PAUSE,
                               help="Pause between letters on the same key (default: ' ')")
    encode_parser.add_argument('-v', '--verbose', action='store_true',
                               help='Verbose output')

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == 'decode':
            if args.input:
                if args.verbose:
                    print(f"Reading from: {args.input}...", file=sys.stderr)
                input_data = read_input(args.input)
            elif args.sequence is not None:
                input_data = args.sequence
            else:
                parser.error('Provide sequence or use -i for file input')

            if args.lines:
                messages = decode_lines(input_data.splitlines())
                if args.verbose:
                    print(f"Decoded {len(messages)} message(s)", file=sys.stderr)
                result = '\n'.join(messages)
            else:
                # Newlines from a file are noise; decode treats them as pauses
                result = decode(input_data.strip('\r\n'))
                if args.verbose:
                    print(f"Decoded {len(input_data)} key(s) to "
                          f"{len(result)} character(s)", file=sys.stderr)

        else:  # encode
            if args.input:
                if args.verbose:
                    print(f"Reading from: {args.input}...", file=sys.stderr)
                input_data = read_input(args.input).strip('\r\n')
            elif args.text is not None:
                input_data = args.text
            else:
                parser.error('Provide text or use -i for file input')

            result = encode(input_data, args.pause)
            if args.verbose:
                print(f"Encoded {len(input_data)} character(s)", file=sys.stderr)

        write_output(result, args.output)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
