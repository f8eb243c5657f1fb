# ------------------------------------------------------------------------------
# Purpose:       hum2ly command line app: converts a Humdrum file (or stdin)
#                to LilyPond (on stdout).
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
#
import argparse
import io
import sys
import typing as t

from hum2ly.lilypond import HumdrumToLilypondConverter
from hum2ly.lilypond.lywriter import DEFAULT_LILYPOND_VERSION

def makeArgumentParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python3 -m hum2ly',
        description='Convert a Humdrum **kern file into a LilyPond file'
    )
    parser.add_argument('input_file', nargs='?', default='-',
                        help='Humdrum file to convert (default, or \'-\': read from stdin)')
    parser.add_argument('-v', '--version', default=DEFAULT_LILYPOND_VERSION,
                        help='LilyPond version to put in the \\version statement '
                            + f'(default: {DEFAULT_LILYPOND_VERSION})')
    return parser

def main(argv: t.Optional[t.List[str]] = None) -> int:
    args = makeArgumentParser().parse_args(argv)

    converter = HumdrumToLilypondConverter()
    converter.lilypondVersion = args.version

    out = io.StringIO()
    if args.input_file == '-':
        fileName = '<STDIN>'
        status = converter.convertString(out, sys.stdin.read())
    else:
        fileName = args.input_file
        status = converter.convertFile(out, fileName)

    if not status:
        print(f'Error converting file: {fileName}', file=sys.stderr)

    # whatever we managed to convert goes to stdout, even after an error
    sys.stdout.write(out.getvalue())
    return 0


# main entry point (parse arguments and do conversion)
if __name__ == "__main__":
    sys.exit(main())
