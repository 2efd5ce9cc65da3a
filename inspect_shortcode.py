"""Encode identifiers and decode shortcodes for debugging.

Shortcodes are the Base62 form of the sequential identifier Redis allocated
for a link, so either one can be recovered from the other.

Usage:
    python inspect_shortcode.py decode 3dE 10
    python inspect_shortcode.py encode 12378 62

Expect one "<input> -> <output>" line per value. Invalid values are reported
on stderr and make the script exit with status 1.
"""

import sys
import argparse
from typing import Optional

from linkshortener.utils.shortener import generate_shortcode, decode_shortcode


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Convert between link identifiers and Base62 shortcodes.')
    parser.add_argument('action', choices=['encode', 'decode'], help='encode=identifier to shortcode, decode=shortcode to identifier')
    parser.add_argument('values', nargs='+', help='Identifiers (encode) or shortcodes (decode)')
    args = parser.parse_args(argv)

    status = 0
    for value in args.values:
        try:
            if args.action == 'encode':
                result = generate_shortcode(int(value))
            else:
                result = decode_shortcode(value)
        except ValueError as e:
            print(f'{value}: {e}', file=sys.stderr)
            status = 1
        else:
            print(f'{value} -> {result}')
    return status


if __name__ == '__main__':
    sys.exit(main())
