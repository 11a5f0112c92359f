"""Extract file arguments from a host's quoted argument list.

The host hands over the command's arguments as one comma-separated string
in which commas and percent signs inside arguments are escaped as %2C and
%25. Options are mixed in with the files:

    "-d,-c,1234,//depot/main/a.c,../b.c"  ->  ["//depot/main/a.c", "../b.c"]
"""

from __future__ import annotations

# Options that consume the following argument as their value.
OPTIONS_WITH_VALUE = frozenset({"-c", "-a"})


def parse_file_args(args_quoted: str) -> list[str]:
    """Return the file arguments, in order, with quoting undone.

    Empty tokens are ignored. -c and -a are dropped along with the token
    that follows them; any other token starting with "-" is dropped.

    Args:
        args_quoted: The raw argsQuoted value supplied by the host.

    Returns:
        File paths as typed by the user (depot or client-relative).
    """
    files: list[str] = []
    skip_next = False

    for token in args_quoted.split(","):
        token = token.strip()
        if token and not skip_next:
            if token in OPTIONS_WITH_VALUE:
                skip_next = True
            elif token.startswith("-"):
                continue
            else:
                files.append(token.replace("%2C", ",").replace("%25", "%"))
        elif skip_next:
            skip_next = False

    return files
