"""
Copyright (c) 2020 Eduardo Bart
Distributed under the MIT software license, see the LICENSE file

Utility functions - error reporting
"""


def error(format_str: str, *args) -> bool:
    """
    Print a diagnostic for the command line

    The library itself never prints; failures there are exceptions or None
    results, which the CLI turns into one "ERROR: " line each.

    Returns:
        False, so callers can write ``return error(...)``
    """
    try:
        message = format_str % args if args else format_str
    except (TypeError, ValueError):
        # Mismatched format, keep the arguments readable
        message = format_str + " " + " ".join(str(arg) for arg in args)

    print(f"ERROR: {message}")
    return False
