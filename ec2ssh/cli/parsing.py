"""CLI argument normalization."""

from __future__ import annotations

from typing import Any


def normalize_text_argument(value: Any) -> str | None:
    """Convert a Fire-parsed argument back into the string the user typed.

    Fire evaluates arguments that look like Python literals, so ``123``
    arrives as an int and ``a,b`` as a tuple.

    Parameters
    ----------
    value : Any
        Value as parsed by Fire

    Returns
    -------
    str | None
        String form of the value, None if value is None
    """
    if value is None:
        return None

    if isinstance(value, (tuple, list)):
        return ",".join(str(v) for v in value)

    return str(value)


VALUE_FLAGS = {
    "-t": "target",
    "--target": "target",
    "-k": "key_dir",
    "--key_dir": "key_dir",
    "--key-dir": "key_dir",
    "-c": "command",
    "--command": "command",
    "-r": "region",
    "--region": "region",
}
"""Flags that take a string value, mapped to their keyword."""

BOOL_FLAGS = {
    "-v": "verbose",
    "--verbose": "verbose",
    "-l": "list_all",
    "--list": "list_all",
    "--list_all": "list_all",
    "--list-all": "list_all",
}
"""Flags that take no value, mapped to their keyword."""

FIRE_SEPARATOR = "--"


def quote_literal(value: str) -> str:
    """Quote a string so Fire's literal parsing returns it unchanged.

    Parameters
    ----------
    value : str
        Text exactly as typed

    Returns
    -------
    str
        Python string literal evaluating to value
    """
    return repr(value)


def prepare_fire_args(argv: list[str]) -> list[str]:
    """Rewrite command-line arguments into the form Fire parses verbatim.

    Flags may appear before or after the lookup. The lookup and every
    string-valued flag are passed as ``--name='value'`` so Fire does not
    evaluate them as numbers, lists or None. Arguments after ``--`` are
    Fire's own flags and are kept as given.

    Parameters
    ----------
    argv : list[str]
        Arguments without the program name

    Returns
    -------
    list[str]
        Arguments to hand to ``fire.Fire``

    Raises
    ------
    ValueError
        If a flag is missing its value or more than one lookup is given
    """
    positional: list[str] = []
    flags: list[str] = []
    fire_flags: list[str] = []

    index = 0
    while index < len(argv):
        arg = argv[index]

        if arg == FIRE_SEPARATOR:
            fire_flags = argv[index:]
            break

        name, has_value, value = arg.partition("=")

        if name in BOOL_FLAGS and not has_value:
            flags.append(f"--{BOOL_FLAGS[name]}=True")
        elif name in VALUE_FLAGS:
            if not has_value:
                index += 1
                if index == len(argv):
                    raise ValueError(f"flag needs an argument: {arg}")
                value = argv[index]
            flags.append(f"--{VALUE_FLAGS[name]}={quote_literal(value)}")
        elif arg.startswith("-") and len(arg) > 1:
            flags.append(arg)
        else:
            positional.append(arg)

        index += 1

    if len(positional) > 1:
        raise ValueError(f"Unexpected argument '{positional[1]}'")

    targets = [f"--target={quote_literal(p)}" for p in positional]
    return [*targets, *flags, *fire_flags]


def parse_verbose(verbose: Any) -> bool:
    """Parse the verbose flag into a boolean.

    Parameters
    ----------
    verbose : Any
        Flag value - boolean, or ``"true"``/``"false"`` string

    Returns
    -------
    bool
        Boolean flag value

    Raises
    ------
    ValueError
        If a string value is not "true" or "false"
    """
    if isinstance(verbose, bool):
        return verbose

    if isinstance(verbose, str):
        verbose_lower = verbose.lower()

        if verbose_lower not in ("true", "false"):
            raise ValueError(f"verbose must be 'true' or 'false', got: {verbose}")

        return verbose_lower == "true"

    return bool(verbose)


__all__ = [
    "normalize_text_argument",
    "prepare_fire_args",
    "quote_literal",
    "parse_verbose",
]
