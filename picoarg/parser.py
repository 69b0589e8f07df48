import logging

from enum import Enum
from typing import Optional

from . import options
from .options import OptionSpec, Registry
from .results import ParsedOccurrence, Results

_logger = logging.getLogger(__name__)


# --- Errors ----------------------------------------------------------------- #


class ErrorKind(Enum):
    """
    Enum representing why a parse was rejected.
    """

    EXPECTED_OPTION = "expected-option"
    UNKNOWN_OPTION = "unknown-option"
    UNEXPECTED_VALUE = "unexpected-value"
    MISSING_VALUE = "missing-value"


class ParseError(ValueError):
    """
    Base class for parse failures.

    Attributes:
        kind: The category of the failure.
        token: The offending command-line token, if any.
        key: The offending option character, if any.
    """

    kind: ErrorKind

    def __init__(
        self, message: str, token: Optional[str] = None, key: Optional[str] = None
    ):
        super().__init__(message)
        self.token = token
        self.key = key


class ExpectedOption(ParseError):
    kind = ErrorKind.EXPECTED_OPTION

    def __init__(self, token: str):
        super().__init__(f"Expected an option, found '{token}'", token=token)


class UnknownOption(ParseError):
    kind = ErrorKind.UNKNOWN_OPTION

    def __init__(self, key: str, token: Optional[str] = None):
        super().__init__(f"Unknown option '-{key}'", token=token, key=key)


class UnexpectedValue(ParseError):
    kind = ErrorKind.UNEXPECTED_VALUE

    def __init__(self, key: str, token: Optional[str] = None):
        super().__init__(
            f"Option '-{key}' doesn't expect a value", token=token, key=key
        )


class MissingValue(ParseError):
    kind = ErrorKind.MISSING_VALUE

    def __init__(self, key: str, token: Optional[str] = None):
        super().__init__(f"Option '-{key}' expects a value", token=token, key=key)


# --- Parser ----------------------------------------------------------------- #


def isOption(token: str) -> bool:
    """Checks if the token looks like "-<key>" or "-<key><value>"."""
    return len(token) >= 2 and token[0] == "-"


def parseToken(registry: Registry, token: str) -> ParsedOccurrence:
    """
    Parses a single command-line token against the registry.

    Raises:
        ParseError: If the token is not a declared option, or if its inline
            value doesn't match the declaration.
    """
    if not isOption(token):
        raise ExpectedOption(token)

    key = token[1]
    spec: OptionSpec | None = registry.lookup(key)
    if spec is None:
        raise UnknownOption(key, token)

    _logger.debug(f"Found option '-{key}'")

    value = token[2:] if len(token) > 2 else None
    if value is not None and not spec.expectsValue:
        raise UnexpectedValue(key, token)

    # Values are inline only, the next token is never consumed
    if value is None and spec.expectsValue:
        raise MissingValue(key, token)

    if value is not None:
        _logger.debug(f"Found value '{value}' for option '-{key}'")

    return ParsedOccurrence(key, value)


def parse(registry: Registry, args: list[str]) -> Results:
    """
    Parses a list of arguments, without the program name, against the registry.

    The first invalid token aborts the parse. On success the registry is
    cleared, a new parse needs its options declared again.

    Raises:
        ParseError: Describing the first offending token.
    """
    results = Results()
    for token in args:
        results.append(parseToken(registry, token))

    registry.clear()
    return results


class OptionParser:
    """
    Declares options, parses the command line once and answers queries
    about it.
    """

    registry: Registry
    results: Results
    declared: tuple[OptionSpec, ...]

    def __init__(self, strict: bool = False):
        self.registry = Registry(strict)
        self.results = Results()
        self.declared = ()

    def add(
        self, key: str, expectsValue: bool = False, description: str = ""
    ) -> OptionSpec:
        return self.registry.declare(key, expectsValue, description)

    def parse(self, args: list[str]) -> Results:
        declared = self.registry.specs
        self.results = parse(self.registry, args)
        self.declared = declared
        return self.results

    def tryParse(self, args: list[str]) -> Optional[ParseError]:
        """Like `parse`, but returns the error instead of raising it."""
        try:
            self.parse(args)
        except ParseError as e:
            _logger.info(f"Parse failed: {e}")
            return e
        return None

    def has(self, key: str) -> bool:
        return self.results.has(key)

    def popValue(self, key: str) -> Optional[str]:
        return self.results.popValue(key)

    def _specs(self) -> tuple[OptionSpec, ...]:
        # The registry is cleared by a successful parse
        return self.registry.specs or self.declared

    def usage(self) -> str:
        return options.usage(self._specs())

    def help(self) -> list[str]:
        return options.helpLines(self._specs())
