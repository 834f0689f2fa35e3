import pytest

from wordle_game.config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config_class


@pytest.mark.parametrize("name, expected", [
    ("development", DevelopmentConfig),
    ("production", ProductionConfig),
    ("Testing", TestingConfig),
    ("staging", DevelopmentConfig),
])
def test_config_class_by_name(name, expected):
    assert get_config_class(name) is expected


def test_config_class_from_environment(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'production')
    assert get_config_class() is ProductionConfig

    monkeypatch.delenv('APP_ENV')
    assert get_config_class() is DevelopmentConfig


def test_debug_flags():
    assert DevelopmentConfig.DEBUG is True
    assert ProductionConfig.DEBUG is False
    assert TestingConfig.TESTING is True
