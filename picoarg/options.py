import json
import logging
import dataclasses as dt

from pathlib import Path
from typing import Any, Iterable, Iterator, Optional
from dataclasses_json import DataClassJsonMixin

_logger = logging.getLogger(__name__)


# --- Option Spec ------------------------------------------------------------ #


@dt.dataclass(frozen=True)
class OptionSpec(DataClassJsonMixin):
    """
    Declaration of a single short option.
    """

    key: str
    """The option character, e.g. "f" for "-f"."""
    expectsValue: bool = False
    """Whether the option must carry an inline value, e.g. "-fhello"."""
    description: str = ""
    """Shown next to the option in the help message."""

    def flag(self) -> str:
        """Returns the option as written on the command line."""
        if self.expectsValue:
            return f"-{self.key}<value>"
        return f"-{self.key}"


def _ensureKey(key: Any):
    if not isinstance(key, str) or len(key) != 1:
        raise ValueError(f"Option key must be a single character, got {key!r}")


def usage(specs: Iterable[OptionSpec]) -> str:
    """Returns a one-line synopsis of the options, e.g. "[-h] [-f<value>]"."""
    return " ".join(f"[{spec.flag()}]" for spec in specs)


def helpLines(specs: Iterable[OptionSpec]) -> list[str]:
    """Returns one line per option, with its description if it has one."""
    specs = list(specs)
    width = max((len(spec.flag()) for spec in specs), default=0)
    lines = []
    for spec in specs:
        line = spec.flag().ljust(width)
        if spec.description:
            line += f"  {spec.description}"
        lines.append(line.rstrip())
    return lines


# --- Registry --------------------------------------------------------------- #


class Registry:
    """
    The ordered set of option declarations consulted while parsing.

    Declarations are kept in the order they were made. When the same key is
    declared twice the first declaration wins, unless the registry is
    `strict`, in which case the second declaration is rejected.
    """

    _specs: list[OptionSpec]
    strict: bool

    def __init__(self, strict: bool = False):
        self._specs = []
        self.strict = strict

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    @property
    def specs(self) -> tuple[OptionSpec, ...]:
        return tuple(self._specs)

    def declare(
        self, key: str, expectsValue: bool = False, description: str = ""
    ) -> OptionSpec:
        """
        Declares an option.

        Args:
            key: The option character.
            expectsValue: True if the option requires an inline value.
            description: A description of the option.

        Raises:
            ValueError: If the key is not a single character, or if the
                registry is strict and the key is already declared.
        """
        return self.append(OptionSpec(key, expectsValue, description))

    def append(self, spec: OptionSpec) -> OptionSpec:
        _ensureKey(spec.key)
        if self.lookup(spec.key) is not None:
            if self.strict:
                raise ValueError(f"Option '-{spec.key}' is already declared")
            _logger.debug(f"Option '-{spec.key}' declared twice, keeping the first")

        _logger.debug(f"Declaring option {spec.flag()}")
        self._specs.append(spec)
        return spec

    def lookup(self, key: str) -> Optional[OptionSpec]:
        for spec in self._specs:
            if spec.key == key:
                return spec
        return None

    def clear(self):
        self._specs.clear()

    def usage(self) -> str:
        return usage(self._specs)

    def help(self) -> list[str]:
        return helpLines(self._specs)

    # --- Manifest ----------------------------------------------------------- #

    @staticmethod
    def fromManifest(data: Any, path: str = "<manifest>") -> "Registry":
        """
        Builds a registry from a manifest of the form
        `{"strict": false, "options": [{"key": "f", "expectsValue": true}]}`.
        """
        if not isinstance(data, dict):
            raise RuntimeError(f"Manifest '{path}' should be a dictionary")

        options = data.get("options")
        if not isinstance(options, list):
            raise RuntimeError(f"Manifest '{path}' should have an 'options' list")

        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise RuntimeError(f"Manifest '{path}' has a non-boolean 'strict' {strict!r}")

        registry = Registry(strict=strict)
        for entry in options:
            if (
                not isinstance(entry, dict)
                or "key" not in entry
                or not isinstance(entry.get("expectsValue", False), bool)
            ):
                raise RuntimeError(f"Invalid option {entry!r} in '{path}'")
            try:
                spec = OptionSpec.from_dict(entry)
            except (KeyError, TypeError, ValueError) as e:
                raise RuntimeError(f"Invalid option {entry!r} in '{path}': {e}")
            registry.append(spec)
        return registry

    @staticmethod
    def load(path: Path | str) -> "Registry":
        """Loads a registry from a JSON manifest file."""
        path = Path(path)
        _logger.info(f"Loading options from '{path}'")
        try:
            with path.open("r", encoding="utf8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RuntimeError(f"Failed to read {path}: {e}")
        return Registry.fromManifest(data, str(path))
