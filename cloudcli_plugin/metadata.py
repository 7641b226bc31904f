"""Metadata that plugins declare to the host CLI."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from .versions import compare_versions, parse_segment

if TYPE_CHECKING:
    from .context import PluginContext


@dataclass(frozen=True, order=True)
class VersionType:
    """A ``major.minor.build`` triple, ordered lexicographically."""

    major: int = 0
    minor: int = 0
    build: int = 0

    @classmethod
    def parse(cls, text: str) -> "VersionType":
        parts = [parse_segment(part) for part in (text or "").split(".")[:3]]
        parts += [0] * (3 - len(parts))
        return cls(*parts)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"


SDK_VERSION = VersionType(0, 1, 1)


@dataclass(frozen=True)
class Namespace:
    """A group of commands; ``"A B"`` names namespace ``B`` nested under ``A``."""

    name: str
    description: str = ""

    def parent_name(self) -> str:
        head, sep, _ = self.name.rpartition(" ")
        return head if sep else ""


@dataclass(frozen=True)
class Flag:
    name: str
    description: str = ""
    has_value: bool = False
    hidden: bool = False


@dataclass(frozen=True)
class Command:
    """A plugin command, addressed as ``<namespace> <name>``."""

    namespace: str
    name: str
    alias: str = ""
    description: str = ""
    usage: str = ""
    flags: tuple[Flag, ...] = ()
    hidden: bool = False

    def full_name(self) -> str:
        return f"{self.namespace} {self.name}".strip()

    def full_names(self) -> list[str]:
        """Return the qualified name followed by the qualified alias, if any."""

        names = [self.full_name()]
        if self.alias:
            names.append(f"{self.namespace} {self.alias}".strip())
        return names


@dataclass(frozen=True)
class PluginMetadata:
    name: str
    version: VersionType = VersionType()
    min_cli_version: VersionType = VersionType()
    namespaces: tuple[Namespace, ...] = ()
    commands: tuple[Command, ...] = ()
    sdk_version: VersionType = SDK_VERSION

    def supports_cli(self, cli_version: str) -> bool:
        """Return whether a host at ``cli_version`` satisfies ``min_cli_version``."""

        return compare_versions(cli_version, str(self.min_cli_version)) >= 0


class Plugin(ABC):
    """Base interface for CLI plugins."""

    @abstractmethod
    def get_metadata(self) -> PluginMetadata:
        """Describe the plugin to the host."""

    @abstractmethod
    def run(self, context: "PluginContext", args: Sequence[str]) -> None:
        """Run a command; ``args[0]`` is the command name or alias.

        The namespace is not part of ``args``; read it from
        ``context.command_namespace()``.
        """
