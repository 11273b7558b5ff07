import pytest

from cmdweave.settings import ProgramSettings, Setting


def test_defaults():
    settings = ProgramSettings()
    assert settings[Setting.AUTO_INCLUDE_HELP_SUBCOMMAND] is True
    assert settings[Setting.SHOW_HELP_ON_EMPTY_ARGS] is True
    assert settings[Setting.IGNORE_ALL_ERRORS] is False
    assert settings[Setting.OVERRIDE_ALL_DEFAULT_LISTENERS] is False
    assert settings[Setting.SHOW_COMMAND_ALIASES] is False
    assert settings[Setting.SHOW_HELP_ON_ALL_ERRORS] is False


def test_set_and_get_round_trip():
    settings = ProgramSettings()
    for setting in Setting:
        settings[setting] = True
        assert settings[setting] is True
        settings[setting] = False
        assert settings[setting] is False


def test_instances_are_independent():
    first, second = ProgramSettings(), ProgramSettings()
    first[Setting.SHOW_COMMAND_ALIASES] = True
    assert second[Setting.SHOW_COMMAND_ALIASES] is False


def test_rejects_non_setting_key():
    with pytest.raises(TypeError):
        ProgramSettings()["ShowCommandAliases"] = True