"""
.. module: sshkeys.ssh.public_keys.ssh_public_key
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
import base64

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from sshkeys.ssh.protocol.ssh_protocol import SSHWriter

NO_COMMENT = 'no comment'


class SSHPublicKeyType(object):
    RSA = 'ssh-rsa'
    DSA = 'ssh-dss'
    ED25519 = 'ssh-ed25519'
    ECDSA_NISTP256 = 'ecdsa-sha2-nistp256'
    ECDSA_NISTP384 = 'ecdsa-sha2-nistp384'
    ECDSA_NISTP521 = 'ecdsa-sha2-nistp521'


class SSHPublicKey(object):
    """
    The parts of an SSH Public Key file that every key type shares.
    Subclasses hold the algorithm specific fields and know how to read and write them.
    :param comment: Optional free text that follows the key in the file.
    """
    # Name printed by ssh-keygen -l, i.e. 'RSA'
    key_name = None

    def __init__(self, comment=None):
        self.comment = comment

    @classmethod
    def from_ssh_reader(cls, key_type, reader):
        """
        Reads the algorithm specific fields that follow the key type in the key body.
        :param key_type: The key type already read from the key body.
        :param reader: SSHReader positioned right after the key type.
        :return: An instance of the subclass, without a comment.
        """
        raise NotImplementedError("Child classes should override this")

    def keytype(self):
        """
        :return: The key type in the format described by rfc4253, i.e. 'ssh-rsa'.
        """
        raise NotImplementedError("Child classes should override this")

    def size(self):
        """
        :return: The size of the key in bits, as reported by ssh-keygen.
        """
        raise NotImplementedError("Child classes should override this")

    def _serialize_ssh_public_key(self, writer):
        """
        Writes the algorithm specific fields, in the order they appear after the key type.
        :param writer: SSHWriter to append to.
        """
        raise NotImplementedError("Child classes should override this")

    def set_comment(self, comment):
        self.comment = comment

    def data(self):
        """
        The key body per https://tools.ietf.org/html/rfc4253#section-6.6, not base64 encoded.
        This is what gets fingerprinted.
        :return: bytes
        """
        writer = SSHWriter()
        writer.write_string(self.keytype())
        self._serialize_ssh_public_key(writer)
        return writer.to_bytes()

    def fingerprint(self):
        """
        The ssh-keygen default fingerprint: an unpadded base64 encoded SHA256 of the key body.
        See https://tools.ietf.org/html/rfc4716#section-4
        :return: String like 'SHA256:YTw/JyJm...'.
        """
        digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
        digest.update(self.data())
        fingerprint = base64.b64encode(digest.finalize()).decode('ascii')
        return 'SHA256:' + fingerprint.rstrip('=')

    def to_key_file(self):
        """
        :return: The key as a line of an SSH Public Key file, 'ssh-keytype body comment'.
        """
        return '{} {} {}'.format(self.keytype(),
                                 base64.b64encode(self.data()).decode('ascii'),
                                 self.comment or '')

    def to_fingerprint_string(self, no_comment=NO_COMMENT):
        """
        The fingerprint line printed by `ssh-keygen -l -f key`.
        :param no_comment: Printed in place of a missing comment.
        :return: String like '2048 SHA256:YTw/JyJm... demos@siril (RSA)'.
        """
        return '{} {} {} ({})'.format(self.size(), self.fingerprint(), self.comment or no_comment,
                                      self.key_name)

    def __str__(self):
        return self.to_key_file()

    def __repr__(self):
        fields = ', '.join('{}={!r}'.format(k, self.__dict__[k]) for k in sorted(self.__dict__))
        return '{}({})'.format(type(self).__name__, fields)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__
