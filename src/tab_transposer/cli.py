#!/usr/bin/env python3
"""
Tab Transposer CLI - Transposes the chords of a tab into a new key

Reads a tab from a file (plain text or a saved .html page) or from the
terminal, rewrites every chord line into the new key and prints the result.
Keys not given on the command line are asked for interactively.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional, TextIO

from .config import OUTPUT_FORMATS, ConfigError, TransposerConfig
from .key import InvalidKeyError, Key
from .notes import is_valid_note
from .sources import read_tab_file, read_until_sentinel
from .tab import TabTransposer, TranspositionReport


WELCOME = (
    "Welcome to the Tab Transposer.  What is the tonic note in the\n"
    "original key?  (Ex: for the key of A minor you would type 'A')"
)
TARGET_KEY_QUESTION = "What is the tonic note in the key you would like to transpose to?"
PASTE_INSTRUCTIONS = (
    'Great, now paste the original tab below and type the word "{sentinel}".\n'
    "(You can use control+V on Windows or command+V on Mac to paste.)"
)

RULE = "~/" * 28 + "~"
BANNER = (
    f"{RULE}\n\n"
    "  Here is your transposed tab!  Copy and paste the text below\n"
    "  and you are ready to go.  (You can use control+C on Windows or\n"
    "  command+C on Mac to copy.)\n\n"
    f"{RULE}\n\n"
)


def prompt_for_key(question: str, stream: Optional[TextIO] = None,
                   output: Optional[TextIO] = None) -> Optional[Key]:
    """
    Ask for a tonic until a valid note name comes back.

    Only the first word of each answer counts. Returns None if the input
    runs out before a valid name is given.
    """
    stream = stream or sys.stdin
    output = output or sys.stderr
    print(question, file=output)
    while True:
        print("> ", end="", file=output, flush=True)
        response = stream.readline()
        if not response:
            return None
        words = response.split()
        if words and is_valid_note(words[0]):
            return Key.from_name(words[0])


def format_text_output(new_tab: str, banner: bool = True) -> str:
    """Format the transposed tab for the terminal"""
    if banner:
        return "\n" + BANNER + new_tab
    return new_tab


def format_json_output(new_tab: str, report: TranspositionReport) -> str:
    """Format the transposed tab and its chord changes as JSON"""
    data = {
        'old_key': report.old_key,
        'new_key': report.new_key,
        'interval': report.interval,
        'chord_line_count': report.chord_line_count,
        'chord_count': report.chord_count,
        'tab': new_tab,
        'chord_lines': [asdict(line) for line in report.lines if line.chord_line],
    }
    return json.dumps(data, indent=2) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Transpose the chords of a tab into a new key',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  %(prog)s                              # Prompt for keys, paste the tab
  %(prog)s song.txt --from A --to C     # Transpose a text file
  %(prog)s page.html --from G --to Bb   # Transpose the tab in a saved web page
  %(prog)s song.txt --from A --to C -o song-in-c.txt
  %(prog)s song.txt --from A --to C --format json
        '''
    )

    parser.add_argument(
        'input',
        nargs='?',
        default=None,
        help='Tab file to transpose (default: read from the terminal)'
    )
    parser.add_argument(
        '--from',
        dest='from_key',
        metavar='KEY',
        help='Tonic of the original key (e.g. A, Bb, F#)'
    )
    parser.add_argument(
        '--to',
        dest='to_key',
        metavar='KEY',
        help='Tonic of the key to transpose to'
    )
    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Output file path (default: print to stdout)'
    )
    parser.add_argument(
        '-c', '--config',
        type=str,
        default=None,
        metavar='FILE',
        help='YAML file with default settings'
    )
    parser.add_argument(
        '-f', '--format',
        choices=OUTPUT_FORMATS,
        default=None,
        help='Output format (default: text)'
    )
    parser.add_argument(
        '--sentinel',
        default=None,
        metavar='WORD',
        help='Line that ends a tab typed into the terminal (default: end)'
    )
    parser.add_argument(
        '--no-banner',
        action='store_true',
        help='Print only the transposed tab'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (use -vv for every changed chord)'
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = TransposerConfig.load(args.config) if args.config else TransposerConfig()
    except ConfigError as e:
        parser.error(f"Invalid config {args.config}: {e}")

    from_name = args.from_key or config.from_key
    to_name = args.to_key or config.to_key
    sentinel = args.sentinel or config.sentinel
    output_format = args.format or config.output_format

    try:
        old_key = Key.from_name(from_name) if from_name else None
        new_key = Key.from_name(to_name) if to_name else None
    except InvalidKeyError as e:
        parser.error(str(e))

    if args.input:
        input_path = Path(args.input)
        if not input_path.is_file():
            parser.error(f"Input file does not exist: {args.input}")

    # Interactive session: keys first, then the tab
    if old_key is None:
        old_key = prompt_for_key(WELCOME)
    if old_key is not None and new_key is None:
        print(file=sys.stderr)
        new_key = prompt_for_key(TARGET_KEY_QUESTION)
    if old_key is None or new_key is None:
        print("No key given, nothing to transpose", file=sys.stderr)
        sys.exit(1)

    if args.input:
        if args.verbose >= 1:
            print(f"Reading tab: {input_path}", file=sys.stderr)
        tab = read_tab_file(input_path)
    else:
        print("\n" + PASTE_INSTRUCTIONS.format(sentinel=sentinel), file=sys.stderr)
        tab = read_until_sentinel(sys.stdin, sentinel=sentinel)

    transposer = TabTransposer(old_key, new_key)
    new_tab, report = transposer.transpose_with_report(tab)

    if args.verbose >= 1:
        print(f"Transposing from {old_key} to {new_key} ({report.interval} semitones)", file=sys.stderr)
        print(f"Transposed {report.chord_count} chords on {report.chord_line_count} chord lines",
              file=sys.stderr)
    if args.verbose >= 2:
        for line in report.lines:
            for replacement in line.replacements:
                print(f"  line {line.line_number}: {replacement.chord} -> {replacement.transposed}",
                      file=sys.stderr)

    if output_format == 'json':
        output_text = format_json_output(new_tab, report)
    else:
        banner = config.show_banner and not args.no_banner and not args.output
        output_text = format_text_output(new_tab, banner=banner)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(output_text, encoding='utf-8')
        if args.verbose >= 1:
            print(f"Transposed tab written to: {output_path}", file=sys.stderr)
    else:
        sys.stdout.write(output_text)


if __name__ == '__main__':
    main()
