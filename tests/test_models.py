from pathlib import Path

import pytest

from ratchet.models import RenderSettings, load_settings


def test_render_settings_defaults():
    settings = RenderSettings()

    assert settings.marker == "data-prop"
    assert settings.parser_features == "html.parser"
    assert settings.evaluate is True
    assert settings.strict_undefined is True


def test_load_settings_accepts_aliases(tmp_path: Path):
    path = tmp_path / "ratchet.yaml"
    path.write_text("markerAttribute: data-bind\nstrictUndefined: false\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.marker == "data-bind"
    assert settings.strict_undefined is False


def test_load_settings_empty_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "ratchet.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == RenderSettings()


@pytest.mark.parametrize(
    "content",
    ["- not\n- a mapping\n", "markerAttribute: ''\n", "unknownOption: 1\n"],
)
def test_load_settings_rejects_invalid_files(tmp_path: Path, content: str):
    path = tmp_path / "ratchet.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(SystemExit):
        load_settings(path)
