# =============================================================================
# Configuration Tests
# =============================================================================

import pytest

from kestrel.config import (
    Config,
    ConfigError,
    DEFAULT_HOME_URL,
    get_xdg_config_home,
    get_xdg_state_home,
)


def test_missing_file_gives_defaults(temp_dir):
    config = Config.load(temp_dir / "absent.toml")

    assert config.general.home_url == DEFAULT_HOME_URL
    assert config.ui.scroll_step == 1
    assert config.ui.page_step == 10
    assert config.network.timeout == 10.0


def test_partial_file_overrides_only_given_keys(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text(
        '[general]\nhome_url = "http://localhost:8000/"\n\n'
        '[ui]\npage_step = 20\n'
    )

    config = Config.load(path)

    assert config.general.home_url == "http://localhost:8000/"
    assert config.ui.page_step == 20
    assert config.ui.scroll_step == 1
    assert config.rendering.link_style == "blue underline"


def test_save_then_load(temp_dir):
    config = Config()
    config.network.timeout = 3.5
    config.rendering.selected_style = "reverse"

    written = config.save(temp_dir / "nested" / "config.toml")
    loaded = Config.load(written)

    assert loaded == config


def test_invalid_toml_raises(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[general\nhome_url = ")

    with pytest.raises(ConfigError):
        Config.load(path)


def test_invalid_style_raises(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text('[rendering]\nlink_style = "not-a-colour underline"\n')

    with pytest.raises(ConfigError):
        Config.load(path)


def test_non_positive_steps_rejected(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[ui]\nscroll_step = 0\n")

    with pytest.raises(ConfigError):
        Config.load(path)


def test_xdg_environment_respected(monkeypatch, temp_dir):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "cfg"))
    monkeypatch.setenv("XDG_STATE_HOME", str(temp_dir / "state"))

    assert get_xdg_config_home() == temp_dir / "cfg" / "kestrel"
    assert get_xdg_state_home() == temp_dir / "state" / "kestrel"
    assert Config.config_file_path() == temp_dir / "cfg" / "kestrel" / "config.toml"


@pytest.mark.parametrize(
    "contents",
    [
        '[ui]\nscroll_step = "2"\n',
        '[network]\ntimeout = "fast"\n',
        'general = "x"\n',
        "[rendering]\nlink_style = 3\n",
        "[ui]\npage_step = true\n",
        "[network]\ntimeout = -1\n",
    ],
)
def test_wrong_types_raise_config_error(temp_dir, contents):
    path = temp_dir / "config.toml"
    path.write_text(contents)

    with pytest.raises(ConfigError):
        Config.load(path)


def test_integer_timeout_accepted(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[network]\ntimeout = 3\n")

    assert Config.load(path).network.timeout == 3.0
