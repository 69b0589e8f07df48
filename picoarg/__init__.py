import os
import sys
import logging

from typing import Optional

from . import const, vt100
from .options import OptionSpec, Registry
from .results import ParsedOccurrence, Results
from .parser import (
    ErrorKind,
    ExpectedOption,
    MissingValue,
    OptionParser,
    ParseError,
    UnexpectedValue,
    UnknownOption,
    parse,
)

__all__ = [
    "ErrorKind",
    "ExpectedOption",
    "MissingValue",
    "OptionParser",
    "OptionSpec",
    "ParseError",
    "ParsedOccurrence",
    "Registry",
    "Results",
    "UnexpectedValue",
    "UnknownOption",
    "main",
    "parse",
]


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )


def printUsage(parser: OptionParser):
    print(f"Usage: {const.ARGV0} {parser.usage()}")


def printHelp(parser: OptionParser):
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Usage")
    print(vt100.indent(f"{const.ARGV0} {parser.usage()}"))
    print()

    vt100.subtitle("Options")
    for line in parser.help():
        print(vt100.indent(line))
    print()


def main(argv: Optional[list[str]] = None) -> int:
    logger.setup(bool(os.environ.get(const.DEBUG_ENV)))

    parser = OptionParser()
    parser.add("h", description="show this help message")
    parser.add("v", description="show version information")
    parser.add("f", True, "process <value> as a file")

    try:
        parser.parse(sys.argv[1:] if argv is None else argv)
    except ParseError as e:
        vt100.error(str(e))
        printUsage(parser)
        return 1

    if parser.has("h"):
        printHelp(parser)
        return 0

    if parser.has("v"):
        print(f"{const.ARGV0} v{const.VERSION_STR}")

    while parser.has("f"):
        filename = parser.popValue("f")
        print(f"processing '{filename}'")

    return 0
