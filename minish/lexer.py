"""
Line tokenization for minish.

Splitting happens in two stages. ``split_command_line`` only separates the
command word from the raw argument string and leaves quoting untouched.
Each consumer then parses the raw arguments the way it needs:
- ``exit`` and ``type`` split on ASCII whitespace
- ``echo`` uses the string verbatim
- external programs get shell-word splitting via ``split_words``
"""

import re
import shlex
from typing import List, Optional, Tuple

from .exceptions import UnmatchedQuoteError

# Same set as str.isspace() restricted to ASCII, minus \v
ASCII_WHITESPACE = ' \t\n\x0c\r'

_WHITESPACE_RE = re.compile(f'[{re.escape(ASCII_WHITESPACE)}]+')


def split_ascii_whitespace(text: str) -> List[str]:
    """
    Split text on runs of ASCII whitespace, dropping empty tokens.

    Examples:
        >>> split_ascii_whitespace('  1   2 ')
        ['1', '2']
        >>> split_ascii_whitespace('')
        []
    """
    return [token for token in _WHITESPACE_RE.split(text) if token]


def split_command_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Separate the command word from the rest of the line.

    Args:
        line: Raw input line

    Returns:
        ``(word, raw_args)`` or None when the line is empty or blank.
        ``raw_args`` keeps internal spacing and quotes; only surrounding
        whitespace is trimmed.

    Examples:
        >>> split_command_line('echo   hello   world')
        ('echo', 'hello   world')
        >>> split_command_line('   ') is None
        True
    """
    stripped = line.lstrip(ASCII_WHITESPACE)
    tokens = split_ascii_whitespace(stripped)
    if not tokens:
        return None

    word = tokens[0]
    raw_args = stripped[len(word):].strip()
    return word, raw_args


def strip_comments(raw_args: str) -> str:
    """
    Drop comments: an unquoted ``#`` that starts a word, up to end of line.

    A ``#`` inside a word or inside quotes is kept.

    Examples:
        >>> strip_comments('a #b c')
        'a '
        >>> strip_comments("a#b '#c'")
        "a#b '#c'"
    """
    out = []
    quote = None
    at_word_start = True
    i = 0
    n = len(raw_args)
    while i < n:
        ch = raw_args[i]
        if quote is None and at_word_start and ch == '#':
            end = raw_args.find('\n', i)
            if end == -1:
                break
            i = end
            continue

        out.append(ch)
        if quote == "'":
            if ch == "'":
                quote = None
        elif quote == '"':
            if ch == '\\' and i + 1 < n:
                i += 1
                out.append(raw_args[i])
            elif ch == '"':
                quote = None
        elif ch == '\\':
            if i + 1 < n:
                i += 1
                out.append(raw_args[i])
            at_word_start = False
        elif ch in '\'"':
            quote = ch
            at_word_start = False
        else:
            at_word_start = ch in ASCII_WHITESPACE
        i += 1
    return ''.join(out)


def split_words(raw_args: str) -> List[str]:
    """
    Split an argument string using shell-word rules.

    Supports single quotes, double quotes and backslash escapes. A ``#``
    starting an unquoted word begins a comment running to end of line.
    No expansion of any kind happens.

    Raises:
        UnmatchedQuoteError: If a quote is left open or the string ends
            with a dangling escape

    Examples:
        >>> split_words('a "b c" \\'d\\'')
        ['a', 'b c', 'd']
        >>> split_words('a #b')
        ['a']
    """
    try:
        return shlex.split(strip_comments(raw_args), comments=False, posix=True)
    except ValueError as e:
        raise UnmatchedQuoteError(raw_args, str(e)) from e
