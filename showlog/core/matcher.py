"""Pattern matching used to filter log entries.

All comparisons work on single characters of latin-1 decoded text, so they
behave byte-wise. Case folding is limited to ASCII letters.
"""

_ASCII_FOLD = {c: c + 32 for c in range(ord("A"), ord("Z") + 1)}


def fold(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_ASCII_FOLD)


def wildcasecmp(wild: str, string: str) -> bool:
    """Case-insensitive glob match supporting ``*`` and ``?``.

    ``*`` matches any run of characters (including none), ``?`` matches
    exactly one character.
    """
    wild = fold(wild)
    string = fold(string)
    w = s = 0
    star = resume = -1

    while s < len(string) and (w >= len(wild) or wild[w] != "*"):
        if w >= len(wild) or (wild[w] != "?" and wild[w] != string[s]):
            return False
        w += 1
        s += 1

    while s < len(string):
        if w < len(wild) and wild[w] == "*":
            w += 1
            if w == len(wild):
                return True
            star = w
            resume = s + 1
        elif w < len(wild) and (wild[w] == "?" or wild[w] == string[s]):
            w += 1
            s += 1
        else:
            w = star
            s = resume
            resume += 1

    while w < len(wild) and wild[w] == "*":
        w += 1
    return w == len(wild)


def match_any_pattern(patterns: str, string: str) -> bool:
    """Return True if any of the space separated patterns matches."""
    return any(wildcasecmp(pattern, string) for pattern in patterns.split(" "))


def basename(path: str) -> str:
    """Return the text after the last ``/``, or the whole path without one."""
    return path.rsplit("/", 1)[-1]


def matchpath(tokens: str, path: str) -> bool:
    """Check whether ``path`` lies under one of the space separated root paths.

    A token matches the path itself and anything below it, never a sibling
    sharing the same prefix: ``/site/old`` matches ``/site/old`` and
    ``/site/old/x`` but not ``/site/oldstuff``. A token ending in ``/`` also
    matches the same path written without the trailing separator.
    """
    if len(tokens) < 2 or len(path) < 2:
        return False

    for token in tokens.split(" "):
        if not token:
            continue
        if token.endswith("/"):
            if path.startswith(token):
                return True
            if path == token[:-1] and not path.endswith("/"):
                return True
        elif path.startswith(token):
            rest = path[len(token):]
            if not rest or rest.startswith("/"):
                return True
    return False


def subcomp(tokens: str, directory: str) -> bool:
    """Check the base name of ``directory`` against comma separated subdir tokens.

    The text of a token before its first ``?`` is a required prefix and the
    token's full length is the longest name it accepts, so ``cd??`` matches
    ``cd``, ``cd1`` and ``cd12`` but not ``cd123``.
    """
    if len(directory) < 2:
        return False

    name = fold(basename(directory))
    for token in tokens.split(","):
        prefix = token.split("?", 1)[0]
        if not prefix:
            continue
        if len(prefix) <= len(name) <= len(token) and name.startswith(fold(prefix)):
            return True
    return False
