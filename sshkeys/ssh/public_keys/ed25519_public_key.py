"""
.. module: sshkeys.ssh.public_keys.ed25519_public_key
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
from sshkeys.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType


class ED25519PublicKey(SSHPublicKey):
    key_name = 'ED25519'

    def __init__(self, point, comment=None):
        """
        An ED25519 public key.  The encoded point is kept verbatim and never decoded.
        :param point: The 32 byte public key A, see https://tools.ietf.org/html/rfc8032#section-5.1.5
        :param comment: Optional key comment.
        """
        super(ED25519PublicKey, self).__init__(comment)
        self.point = bytes(point)

    @classmethod
    def from_ssh_reader(cls, key_type, reader):
        # ed25519 public key is a single string
        return cls(reader.read_bytes())

    def keytype(self):
        return SSHPublicKeyType.ED25519

    def size(self):
        # ssh-keygen reports 256 for every ed25519 key
        return 256

    def _serialize_ssh_public_key(self, writer):
        writer.write_bytes(self.point)
