"""
.. module: sshkeys.ssh.public_keys.rsa_public_key
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
from sshkeys.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType


class RSAPublicKey(SSHPublicKey):
    key_name = 'RSA'

    def __init__(self, exponent, modulus, comment=None):
        """
        An RSA public key, from components that were generated elsewhere.
        :param exponent: Big-endian bytes of the public exponent e.
        :param modulus: Big-endian bytes of the modulus n.
        :param comment: Optional key comment.
        """
        super(RSAPublicKey, self).__init__(comment)
        self.exponent = bytes(exponent)
        self.modulus = bytes(modulus)

    @classmethod
    def from_ssh_reader(cls, key_type, reader):
        # ssh-rsa e n, see https://tools.ietf.org/html/rfc4253#section-6.6
        exponent = reader.read_mpint()
        modulus = reader.read_mpint()
        return cls(exponent, modulus)

    def keytype(self):
        return SSHPublicKeyType.RSA

    def size(self):
        """
        The number of bits in the modulus.
        See https://github.com/openssh/openssh-portable/blob/master/sshkey.c#L261
        """
        return len(self.modulus) * 8

    def _serialize_ssh_public_key(self, writer):
        writer.write_mpint(self.exponent)
        writer.write_mpint(self.modulus)
