"""Shortcode generation utility

This module converts sequential numeric identifiers into compact Base62
shortcodes and back. The encoding is plain positional base conversion, so
it is a bijection between non-negative integers and canonical shortcodes:
distinct identifiers can never produce the same shortcode.

Functions:
    generate_shortcode(counter):
        Encode a non-negative integer as a Base62 string.

    decode_shortcode(shortcode):
        Decode a Base62 string back into the integer it represents.

    is_valid_shortcode(value):
        Check whether a value looks like a shortcode this service could issue.

Example:
    >>> from linkshortener.utils import generate_shortcode, decode_shortcode
    >>> generate_shortcode(12378)
    '3dE'
    >>> decode_shortcode('3dE')
    12378
"""

from linkshortener.utils.constants import BASE62_ALPHABET, MAX_SHORTCODE_LENGTH


ALPHABET = BASE62_ALPHABET
BASE = len(ALPHABET)  # 10 digits + 26 lowercase + 26 uppercase
_INDEX = {character: index for index, character in enumerate(ALPHABET)}


def generate_shortcode(counter: int) -> str:
    """Encode a counter value into a Base62 shortcode.

    Digits are produced least significant first and prepended, so the most
    significant symbol ends up on the left. The output has no padding, which
    keeps early links as short as possible.

    Args:
        counter (int):
            Unique non-negative integer identifying the URL.

    Returns:
        str: Base62 representation of the counter.

    Raises:
        TypeError: If counter is not an integer.
        ValueError: If counter is negative.

    Example:
        >>> generate_shortcode(0)
        '0'
        >>> generate_shortcode(61)
        'Z'
        >>> generate_shortcode(62)
        '10'
    """
    if not isinstance(counter, int) or isinstance(counter, bool):
        raise TypeError(f'Counter must be of type integer (given type: {type(counter)}).')
    if counter < 0:
        raise ValueError(f'Counter must be a non-negative integer (given value: {counter}).')

    # The loop below never runs for 0
    if counter == 0:
        return ALPHABET[0]

    symbols = []
    while counter > 0:
        counter, remainder = divmod(counter, BASE)
        symbols.append(ALPHABET[remainder])
    return ''.join(reversed(symbols))


def decode_shortcode(shortcode: str) -> int:
    """Decode a Base62 shortcode back into its counter value.

    Args:
        shortcode (str):
            Shortcode produced by generate_shortcode().

    Returns:
        int: The counter value the shortcode was generated from.

    Raises:
        TypeError: If shortcode is not a string.
        ValueError: If shortcode is empty or contains non-Base62 characters.

    Example:
        >>> decode_shortcode('10')
        62
    """
    if not isinstance(shortcode, str):
        raise TypeError(f'Shortcode must be of type string (given type: {type(shortcode)}).')
    if not shortcode:
        raise ValueError('Shortcode must be a non-empty string.')

    value = 0
    for character in shortcode:
        try:
            value = value * BASE + _INDEX[character]
        except KeyError:
            raise ValueError(f"Invalid character {character!r} in shortcode '{shortcode}'.") from None
    return value


def is_valid_shortcode(value: object) -> bool:
    """Return True if value is a non-empty Base62 string of acceptable length."""
    if not isinstance(value, str) or not 0 < len(value) <= MAX_SHORTCODE_LENGTH:
        return False
    return all(character in _INDEX for character in value)
