"""Tests for naming utilities.

Tests cover:
- Module names per namespace level (aliases, capitalization)
- Full namespaces
- Camel-case to underscored names
- Namespace directories and paths
- The legacy preset and config-driven converters
- Project layouts
"""

import os

import pytest

from rps_naming.constants import DEFAULT_ALIASES, LEGACY_ALIASES, PROJECT_DIRS
from rps_naming.exceptions import ConfigurationError
from rps_naming.models.config import NamingConfig
from rps_naming.models.enums import AliasPreset
from rps_naming.naming import (
    NameConverter,
    default_converter,
    module_of,
    modules_of,
    names_in,
    namespace_dirs_of,
    namespace_of,
    namespace_path_of,
    project_layout,
    underscore,
)

# =============================================================================
# modules_of()
# =============================================================================

_MODULES_CASES = [
    # (input, expected, description)
    ("foo", ["Foo"], "single word"),
    ("foo_bar", ["FooBar"], "underscored words are joined"),
    ("dm-core", ["DataMapper", "Core"], "alias then plain word"),
    ("dm-serializer_json", ["DataMapper", "SerializerJson"], "alias and joined words"),
    ("ffi-opengl", ["FFI", "Opengl"], "acronym alias"),
    ("ffi_dm", ["FFIDataMapper"], "aliases within one segment"),
    ("rdoc", ["Rdoc"], "no rdoc alias in default table"),
    ("FOO", ["Foo"], "capitalization lowercases the rest"),
    ("2fa-tool", ["2fa", "Tool"], "leading digit is left alone"),
    ("", [""], "empty string"),
    ("foo--bar", ["Foo", "", "Bar"], "consecutive hyphens give an empty segment"),
    ("foo-", ["Foo", ""], "trailing hyphen"),
    ("foo__bar", ["FooBar"], "consecutive underscores"),
]


@pytest.mark.parametrize(
    "name,expected",
    [(c[0], c[1]) for c in _MODULES_CASES],
    ids=[c[2] for c in _MODULES_CASES],
)
def test_modules_of(name: str, expected: list[str]) -> None:
    """Verify modules_of maps every namespace level to a module name."""
    assert modules_of(name) == expected


def test_names_in_keeps_every_segment_by_default() -> None:
    assert names_in("dm-core-ruby") == ["dm", "core", "ruby"]


# =============================================================================
# namespace_of()
# =============================================================================


def test_namespace_of() -> None:
    """Test joining module names into a namespace."""
    assert namespace_of("dm-core") == "DataMapper::Core"
    assert namespace_of("foo-bar_baz-qux") == "Foo::BarBaz::Qux"
    assert namespace_of("rdoc") == "Rdoc"
    assert namespace_of("") == ""


@pytest.mark.parametrize(
    "name",
    ["dm-core", "foo_bar-baz", "a-b-c", "ffi-1_2-x", "foo--bar", "x_", "-"],
)
def test_namespace_of_agrees_with_modules_of(name: str) -> None:
    """Splitting the namespace gives back the module names."""
    assert namespace_of(name).split("::") == modules_of(name)


# =============================================================================
# module_of()
# =============================================================================


@pytest.mark.parametrize("word", sorted(DEFAULT_ALIASES))
def test_module_of_is_idempotent_for_aliases(word: str) -> None:
    once = module_of(word)
    assert module_of(once) == once


@pytest.mark.parametrize("word", sorted(LEGACY_ALIASES))
def test_legacy_module_of_is_idempotent_for_aliases(
    legacy_converter: NameConverter, word: str
) -> None:
    once = legacy_converter.module_of(word)
    assert legacy_converter.module_of(once) == once


def test_module_of_alias_lookup_is_exact() -> None:
    """Only lowercase keys match; other spellings are capitalized."""
    assert module_of("dm") == "DataMapper"
    assert module_of("Dm") == "Dm"
    assert module_of("DM") == "Dm"


def test_alias_values_pass_through_unchanged() -> None:
    """A word spelled like an alias value is never re-capitalized."""
    assert modules_of("DataMapper") == ["DataMapper"]

    converter = NameConverter(aliases={"pg": "postgres"})
    assert converter.modules_of("pg") == ["postgres"]
    assert converter.modules_of("postgres-adapter") == ["postgres", "Adapter"]
    assert converter.modules_of("Postgres") == ["Postgres"]


# =============================================================================
# underscore()
# =============================================================================

_UNDERSCORE_CASES = [
    # (input, expected, description)
    ("FooBar", "foo_bar", "two capitalized words"),
    ("fooBar", "foo_bar", "camel case"),
    ("FooBarBaz", "foo_bar_baz", "three words"),
    ("DataMapper", "data_mapper", "alias module name"),
    ("Foo", "foo", "single word"),
    ("foo", "foo", "already lowercase"),
    ("foo_bar", "foo_bar", "already underscored"),
    ("Foo_Bar", "foo_bar", "capital after underscore is not a boundary"),
    ("XMLParser", "xmlparser", "capital preceded by a capital is not a boundary"),
    ("HTTPServer", "httpserver", "acronym prefix stays joined"),
    ("getHTTPResponse", "gethttpresponse", "acronym in the middle stays joined"),
    ("FooB", "foob", "trailing capital is not a boundary"),
    ("Version2Beta", "version2_beta", "digit before a capital is a boundary"),
    ("aBaBa", "a_baba", "matches do not overlap"),
    ("", "", "empty string"),
]


@pytest.mark.parametrize(
    "name,expected",
    [(c[0], c[1]) for c in _UNDERSCORE_CASES],
    ids=[c[2] for c in _UNDERSCORE_CASES],
)
def test_underscore(name: str, expected: str) -> None:
    """Verify underscore only splits at lower-Upper-lower boundaries."""
    assert underscore(name) == expected


def test_underscore_reverses_simple_module_names() -> None:
    assert underscore(modules_of("foo")[0]) == "foo"
    assert underscore(modules_of("foo_bar")[0]) == "foo_bar"


def test_converter_underscore_matches_module_function() -> None:
    assert default_converter.underscore("FooBar") == underscore("FooBar")


# =============================================================================
# namespace_dirs_of() / namespace_path_of()
# =============================================================================

_DIRS_CASES = [
    # (input, expected, description)
    ("foo-bar_baz", ["foo", "bar_baz"], "underscores kept within a level"),
    ("dm-core", ["dm", "core"], "aliases are not applied"),
    ("FooBar-BazQux", ["foo_bar", "baz_qux"], "camel-case segments are underscored"),
    ("foo", ["foo"], "single segment"),
    ("", [""], "empty string"),
]


@pytest.mark.parametrize(
    "name,expected",
    [(c[0], c[1]) for c in _DIRS_CASES],
    ids=[c[2] for c in _DIRS_CASES],
)
def test_namespace_dirs_of(name: str, expected: list[str]) -> None:
    assert namespace_dirs_of(name) == expected


def test_namespace_path_of() -> None:
    """Test joining namespace directories with the platform separator."""
    assert namespace_path_of("foo-bar") == os.path.join("foo", "bar")
    assert namespace_path_of("dm-serializer_json") == os.path.join("dm", "serializer_json")
    assert namespace_path_of("foo") == "foo"
    assert namespace_path_of("") == ""


# =============================================================================
# Legacy preset
# =============================================================================


def test_legacy_preset_ignores_namespace_words(legacy_converter: NameConverter) -> None:
    assert legacy_converter.modules_of("dm-core") == ["DataMapper"]
    assert legacy_converter.namespace_of("ruby-ffi") == "FFI"
    assert legacy_converter.namespace_dirs_of("dm-core") == ["dm"]
    assert legacy_converter.namespace_dirs_of("core") == []
    assert legacy_converter.namespace_path_of("core") == ""


def test_legacy_preset_acronyms_and_namespaces(legacy_converter: NameConverter) -> None:
    assert legacy_converter.namespace_of("rdoc") == "RDoc"
    assert legacy_converter.namespace_of("net-http") == "Net::HTTP"
    assert legacy_converter.namespace_of("rubygems-json_pure") == "Gem::JSONPure"
    assert legacy_converter.namespace_of("github-api") == "GitHub::Api"


def test_from_preset_accepts_enum_and_string() -> None:
    assert dict(NameConverter.from_preset(AliasPreset.DEFAULT).aliases) == dict(DEFAULT_ALIASES)
    assert dict(NameConverter.from_preset("legacy").aliases) == dict(LEGACY_ALIASES)


def test_from_preset_unknown() -> None:
    with pytest.raises(ConfigurationError, match="Unknown preset 'modern'") as exc_info:
        NameConverter.from_preset("modern")
    assert exc_info.value.key == "preset"


# =============================================================================
# Config-driven converters
# =============================================================================


def test_from_config_adds_tables() -> None:
    config = NamingConfig(
        aliases={"AR": "ActiveRecord"},
        acronyms=["xml"],
        ignore_namespaces=["ruby"],
    )
    converter = NameConverter.from_config(config)

    assert converter.namespace_of("ar-migrations") == "ActiveRecord::Migrations"
    assert converter.namespace_of("xml-parser") == "XML::Parser"
    assert converter.modules_of("ruby-dm") == ["DataMapper"]


def test_from_config_overrides_preset_aliases() -> None:
    config = NamingConfig(preset=AliasPreset.LEGACY, aliases={"dm": "DM"})
    converter = NameConverter.from_config(config)

    assert converter.namespace_of("dm-core") == "DM"
    assert converter.namespace_of("rdoc") == "RDoc"


def test_default_config_matches_default_converter() -> None:
    converter = NameConverter.from_config(NamingConfig())
    assert dict(converter.aliases) == dict(default_converter.aliases)
    assert converter.acronyms == frozenset()
    assert converter.ignore_namespaces == frozenset()


def test_converter_tables_are_read_only() -> None:
    aliases = {"foo": "FOO"}
    converter = NameConverter(aliases=aliases)
    aliases["foo"] = "Changed"

    assert converter.module_of("foo") == "FOO"
    with pytest.raises(TypeError):
        converter.aliases["bar"] = "BAR"  # type: ignore[index]


def test_empty_alias_table() -> None:
    converter = NameConverter(aliases={})
    assert converter.namespace_of("dm-ffi") == "Dm::Ffi"


# =============================================================================
# project_layout()
# =============================================================================


def test_project_layout() -> None:
    layout = project_layout("dm-core")

    for role, directory in PROJECT_DIRS.items():
        assert layout[role] == directory
    assert layout["namespace_dir"] == os.path.join("lib", "dm", "core")
    assert layout["namespace_file"] == os.path.join("lib", "dm", "core.rb")


def test_project_layout_custom_extension() -> None:
    layout = project_layout("foo_bar", extension=".py")
    assert layout["namespace_file"] == os.path.join("lib", "foo_bar.py")


def test_project_layout_without_namespace(legacy_converter: NameConverter) -> None:
    layout = legacy_converter.project_layout("core")
    assert "namespace_dir" not in layout
    assert "namespace_file" not in layout
    assert layout["lib"] == "lib"
