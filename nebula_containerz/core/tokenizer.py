# nebula_containerz/core/tokenizer.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import List

from ..errors import InvalidArgumentError

_NORMAL = "normal"
_SINGLE = "single"
_DOUBLE = "double"

_QUOTE_STATES = {"'": _SINGLE, '"': _DOUBLE}


def split_command(command: str) -> List[str]:
    """Split a shell-like command line into an argv list.

    Only whitespace splitting and quoting are handled: text between matching
    single or double quotes belongs to the current word verbatim and the
    quote characters are dropped. No escapes, expansion or globbing.

    >>> split_command('sh -c "echo 2"')
    ['sh', '-c', 'echo 2']
    """
    argv: List[str] = []
    word: List[str] = []
    # A word exists once any character or quote pair was seen, so '' yields an empty token.
    in_word = False
    state = _NORMAL

    for ch in command:
        if state == _NORMAL:
            if ch.isspace():
                if in_word:
                    argv.append("".join(word))
                    word = []
                    in_word = False
            elif ch in _QUOTE_STATES:
                state = _QUOTE_STATES[ch]
                in_word = True
            else:
                word.append(ch)
                in_word = True
        elif (state == _SINGLE and ch == "'") or (state == _DOUBLE and ch == '"'):
            state = _NORMAL
        else:
            word.append(ch)

    if state != _NORMAL:
        raise InvalidArgumentError(f"unterminated {state} quote in command: {command}")
    if in_word:
        argv.append("".join(word))
    return argv
