"""Tests for loading the rendering configuration from YAML."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from html_index.config import RenderConfig, RenderConfigError, load_render_config

if typ.TYPE_CHECKING:
    from collections.abc import Callable

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes YAML text to a temporary config file."""

    def _write(text: str) -> Path:
        path = tmp_path / "completion.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def test_sample_config_matches_defaults() -> None:
    """The bundled sample configuration spells out the defaults."""
    config = load_render_config(REPO_ROOT / "config" / "completion.yaml")
    assert config == RenderConfig()


def test_missing_section_uses_defaults(write_config: Callable[[str], Path]) -> None:
    """A file without a ``rendering`` section yields the default settings."""
    path = write_config("other: {}\n")
    assert load_render_config(path) == RenderConfig()


def test_empty_file_uses_defaults(write_config: Callable[[str], Path]) -> None:
    path = write_config("")
    assert load_render_config(path) == RenderConfig()


def test_overrides_are_applied(write_config: Callable[[str], Path]) -> None:
    """Provided keys replace defaults; absent keys keep them."""
    path = write_config(
        "rendering:\n"
        "  global_attribute_color: '#00F'\n"
        "  icon_root: /static/icons/\n"
        "  icons:\n"
        "    attribute: attr\n"
    )
    config = load_render_config(path)
    assert config.global_attribute_color == "#0000ff", (
        "expected shorthand colour to be expanded and lowercased"
    )
    assert config.icon_root == "/static/icons/"
    assert config.attribute_icon == "attr"
    assert config.element_icon == RenderConfig().element_icon
    assert config.icon_extension == ".svg"


@pytest.mark.parametrize("colour", ["blue", "#12345", "'#GGGGGG'", "42"])
def test_invalid_colour_is_rejected(
    write_config: Callable[[str], Path], colour: str
) -> None:
    path = write_config(f"rendering:\n  global_attribute_color: {colour}\n")
    with pytest.raises(RenderConfigError, match="Invalid colour"):
        load_render_config(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_render_config(tmp_path / "absent.yaml")


def test_non_mapping_top_level_raises(write_config: Callable[[str], Path]) -> None:
    path = write_config("- rendering\n- icons\n")
    with pytest.raises(TypeError, match="Top-level YAML structure"):
        load_render_config(path)


def test_non_mapping_rendering_section_raises(
    write_config: Callable[[str], Path],
) -> None:
    path = write_config("rendering: blue\n")
    with pytest.raises(RenderConfigError, match="'rendering' section"):
        load_render_config(path)


def test_non_mapping_icons_raises(write_config: Callable[[str], Path]) -> None:
    path = write_config("rendering:\n  icons: [element, attribute]\n")
    with pytest.raises(RenderConfigError, match="'rendering.icons'"):
        load_render_config(path)


def test_empty_icon_name_raises(write_config: Callable[[str], Path]) -> None:
    path = write_config("rendering:\n  icons:\n    element: '  '\n")
    with pytest.raises(RenderConfigError, match="icons.element"):
        load_render_config(path)
