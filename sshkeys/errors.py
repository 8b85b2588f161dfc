"""
.. module: sshkeys.errors
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""


class SSHKeyError(ValueError):
    """
    Base class for every error raised while reading an SSH public key.
    """


class InvalidFormat(SSHKeyError):
    def __init__(self, message='invalid key format'):
        super(InvalidFormat, self).__init__(message)


class UnsupportedKeytype(SSHKeyError, TypeError):
    def __init__(self, keytype):
        """
        :param keytype: The algorithm identifier that is not supported (i.e. 'ssh-foo').
        """
        super(UnsupportedKeytype, self).__init__('unsupported keytype: {}'.format(keytype))
        self.keytype = keytype


class UnsupportedCurve(SSHKeyError):
    def __init__(self, curve):
        """
        :param curve: The ECDSA curve name that is not supported (i.e. 'nistp192').
        """
        super(UnsupportedCurve, self).__init__('unsupported curve: {}'.format(curve))
        self.curve = curve


class Utf8Error(SSHKeyError):
    def __init__(self, error):
        """
        :param error: The UnicodeDecodeError raised while decoding a text field.
        """
        super(Utf8Error, self).__init__('invalid utf-8 in text field: {}'.format(error))
        self.error = error
