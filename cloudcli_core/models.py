"""Value types describing the targeted session scope."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, TypeVar

_T = TypeVar("_T")


def _from_mapping(cls: type[_T], data: Mapping[str, Any] | None) -> _T:
    if not isinstance(data, Mapping):
        return cls()
    known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True)
class Region:
    id: str = ""
    name: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Region":
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Account:
    guid: str = ""
    name: str = ""
    owner_guid: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Account":
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ResourceGroup:
    guid: str = ""
    name: str = ""
    default: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ResourceGroup":
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OrganizationFields:
    """Targeted CloudFoundry organization."""

    guid: str = ""
    name: str = ""
    quota_definition: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "OrganizationFields":
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SpaceFields:
    """Targeted CloudFoundry space."""

    guid: str = ""
    name: str = ""
    allow_ssh: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SpaceFields":
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
