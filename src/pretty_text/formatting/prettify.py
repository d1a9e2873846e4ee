"""Rules for turning machine identifiers into display names."""


def capitalize(target: str | None) -> str | None:
    """Upper-case the first character and lower-case the rest.

    Case mapping is Python's Unicode default, which is locale independent.

    >>> capitalize("aBC")
    'Abc'
    >>> capitalize("")
    ''
    """
    if not target:
        return target
    return target[:1].upper() + target[1:].lower()


def _split(value: str, delimiter: str) -> list[str]:
    # Interior and leading empty segments survive, trailing ones are dropped.
    parts = value.split(delimiter)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def _join_capitalized(parts: list[str]) -> str:
    return " ".join(capitalize(p) or "" for p in parts)


def prettify(raw: str) -> str:
    """Produce a display name from a raw identifier.

    Underscores are only treated as separators when the value has no spaces;
    otherwise the value is split on spaces alone.

    >>> prettify("IRON_PICKAXE")
    'Iron Pickaxe'
    >>> prettify("ENDER DRAGON")
    'Ender Dragon'
    >>> prettify("already_has_and has space")
    'Already_has_and Has Space'
    """
    if "_" in raw and " " not in raw:
        return _join_capitalized(_split(raw, "_"))
    if " " in raw:
        return _join_capitalized(_split(raw, " "))
    return capitalize(raw) or ""
