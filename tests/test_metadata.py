"""Tests for plugin metadata declarations."""

from cloudcli_plugin.metadata import (
    SDK_VERSION,
    Command,
    Namespace,
    PluginMetadata,
    VersionType,
)


def test_command_full_name_includes_namespace() -> None:
    assert Command(namespace="service plan", name="create").full_name() == "service plan create"
    assert Command(namespace="", name="login").full_name() == "login"


def test_command_full_names_append_alias() -> None:
    assert Command(namespace="", name="login", alias="l").full_names() == ["login", "l"]
    assert Command(namespace="service", name="list", alias="ls").full_names() == [
        "service list",
        "service ls",
    ]
    assert Command(namespace="", name="login").full_names() == ["login"]


def test_namespace_parent_name() -> None:
    assert Namespace(name="service plan").parent_name() == "service"
    assert Namespace(name="a b c").parent_name() == "a b"
    assert Namespace(name="service").parent_name() == ""


def test_version_type_formats_and_orders() -> None:
    assert str(VersionType(1, 2, 3)) == "1.2.3"
    assert VersionType(0, 1, 0) < VersionType(0, 1, 1) < VersionType(1, 0, 0)
    assert VersionType.parse("2.5") == VersionType(2, 5, 0)
    assert VersionType.parse("x.1.2.9") == VersionType(0, 1, 2)


def test_metadata_defaults_to_current_sdk_version() -> None:
    metadata = PluginMetadata(name="sample")
    assert metadata.sdk_version == SDK_VERSION
    assert str(metadata.sdk_version) == "0.1.1"


def test_supports_cli_checks_minimum_version() -> None:
    metadata = PluginMetadata(name="sample", min_cli_version=VersionType(0, 5, 0))
    assert metadata.supports_cli("0.5.0")
    assert metadata.supports_cli("1.0")
    assert not metadata.supports_cli("0.4.9")
