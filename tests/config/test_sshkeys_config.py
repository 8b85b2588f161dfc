import logging
import os
import pytest

from sshkeys.config.sshkeys_config import SSHKeysConfig, set_logger, \
    SSHKEYS_OPTIONS_SECTION, \
    LOGGING_LEVEL_OPTION, \
    LOGGING_LEVEL_DEFAULT, \
    ALLOWED_KEY_TYPES_OPTION


def test_empty_config():
    config = SSHKeysConfig(config_file='')
    assert LOGGING_LEVEL_DEFAULT == config.get(SSHKEYS_OPTIONS_SECTION, LOGGING_LEVEL_OPTION)
    assert ['ssh-rsa', 'ssh-dss', 'ssh-ed25519', 'ecdsa-sha2-nistp256', 'ecdsa-sha2-nistp384',
            'ecdsa-sha2-nistp521'] == config.getallowedkeytypes()


def test_missing_config_file():
    config = SSHKeysConfig(config_file=os.path.join(os.path.dirname(__file__), 'does-not-exist.cfg'))
    assert LOGGING_LEVEL_DEFAULT == config.get(SSHKEYS_OPTIONS_SECTION, LOGGING_LEVEL_OPTION)


def test_config_file():
    config = SSHKeysConfig(config_file=os.path.join(os.path.dirname(__file__), 'full.cfg'))
    assert 'DEBUG' == config.get(SSHKEYS_OPTIONS_SECTION, LOGGING_LEVEL_OPTION)
    assert ['ssh-ed25519', 'ecdsa-sha2-nistp256', 'ecdsa-sha2-nistp384',
            'ecdsa-sha2-nistp521'] == config.getallowedkeytypes()


def test_environment_overrides_config_file(monkeypatch):
    monkeypatch.setenv('ssh_keys_options_logging_level', 'WARNING')
    monkeypatch.setenv('ssh_keys_options_allowed_key_types', ' ssh-rsa ,, ')

    config = SSHKeysConfig(config_file=os.path.join(os.path.dirname(__file__), 'full.cfg'))
    assert 'WARNING' == config.get(SSHKEYS_OPTIONS_SECTION, LOGGING_LEVEL_OPTION)
    assert ['ssh-rsa'] == config.getallowedkeytypes()


def test_has_option_from_environment(monkeypatch):
    config = SSHKeysConfig()
    assert not config.has_option(SSHKEYS_OPTIONS_SECTION, 'bogus_option')

    monkeypatch.setenv('ssh_keys_options_bogus_option', 'yes')
    assert config.has_option(SSHKEYS_OPTIONS_SECTION, 'bogus_option')
    assert config.has_option(SSHKEYS_OPTIONS_SECTION, ALLOWED_KEY_TYPES_OPTION)


def test_set_logger():
    root_logger = logging.getLogger()
    old_level = root_logger.level
    try:
        config = SSHKeysConfig(config_file=os.path.join(os.path.dirname(__file__), 'full.cfg'))
        logger = set_logger(config)
        assert root_logger is logger
        assert logging.DEBUG == logger.level
    finally:
        root_logger.setLevel(old_level)


def test_set_logger_invalid_level():
    config = SSHKeysConfig(config_file=os.path.join(os.path.dirname(__file__), 'bad-logging-level.cfg'))
    with pytest.raises(ValueError) as e:
        set_logger(config)
    assert 'Invalid log level: LOUD' == str(e.value)
