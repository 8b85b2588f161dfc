"""
.. module: sshkeys.config.sshkeys_config
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
import configparser
import logging
import os
import re

from sshkeys.ssh.public_keys.ssh_public_key import SSHPublicKeyType

SSHKEYS_OPTIONS_SECTION = 'SSH Keys Options'

LOGGING_LEVEL_OPTION = 'logging_level'
LOGGING_LEVEL_DEFAULT = 'INFO'

ALLOWED_KEY_TYPES_OPTION = 'allowed_key_types'
# Every key type sshkeys can read:
ALLOWED_KEY_TYPES_DEFAULT = ','.join([SSHPublicKeyType.RSA,
                                      SSHPublicKeyType.DSA,
                                      SSHPublicKeyType.ED25519,
                                      SSHPublicKeyType.ECDSA_NISTP256,
                                      SSHPublicKeyType.ECDSA_NISTP384,
                                      SSHPublicKeyType.ECDSA_NISTP521])


class SSHKeysConfig(configparser.RawConfigParser, object):
    def __init__(self, config_file=None):
        """
        Parses the sshkeys config file, and provides reasonable default values if they are
        absent from the config file.

        The [SSH Keys Options] section is entirely optional, and has defaults.  Any option can
        also be set from the environment, i.e. ssh_keys_options_logging_level=DEBUG.
        :param config_file: Path to the config file.
        """
        defaults = {LOGGING_LEVEL_OPTION: LOGGING_LEVEL_DEFAULT,
                    ALLOWED_KEY_TYPES_OPTION: ALLOWED_KEY_TYPES_DEFAULT}
        configparser.RawConfigParser.__init__(self, defaults=defaults)
        if config_file:
            self.read(config_file)

        if not self.has_section(SSHKEYS_OPTIONS_SECTION):
            self.add_section(SSHKEYS_OPTIONS_SECTION)

    def getallowedkeytypes(self):
        """
        Returns the key types that get_ssh_public_key will accept.
        :return: A list of key types, i.e. ['ssh-rsa', 'ssh-ed25519']
        """
        key_types = self.get(SSHKEYS_OPTIONS_SECTION, ALLOWED_KEY_TYPES_OPTION).split(',')
        return [key_type.strip() for key_type in key_types if key_type.strip()]

    def has_option(self, section, option):
        """
        Checks if an option exists.

        This will search in both the environment variables and in the config file
        :param section: The section to search in
        :param option: The option to check
        :return: True if it exists, False otherwise
        """
        environment_key = self._environment_key(section, option)
        if environment_key in os.environ:
            return True
        else:
            return super(SSHKeysConfig, self).has_option(section, option)

    def get(self, section, option, **kwargs):
        """
        Gets a value from the configuration.

        Checks the environment  before looking in the config file.
        :param section: The config section to look in
        :param option: The config option to look at
        :return: The value of the config option
        """
        environment_key = self._environment_key(section, option)
        output = os.environ.get(environment_key, None)
        if output is None:
            output = super(SSHKeysConfig, self).get(section, option, **kwargs)
        return output

    @staticmethod
    def _environment_key(section, option):
        return (re.sub(r'\W+', '_', section) + '_' + re.sub(r'\W+', '_', option)).lower()


def set_logger(config):
    """
    Sets the root logger level from the logging_level option.
    :param config: SSHKeysConfig
    :return: The root logger.
    """
    logging_level = config.get(SSHKEYS_OPTIONS_SECTION, LOGGING_LEVEL_OPTION)
    numeric_level = getattr(logging, logging_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError('Invalid log level: {}'.format(logging_level))

    logger = logging.getLogger()
    logger.setLevel(numeric_level)
    return logger
