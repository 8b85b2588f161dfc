"""
.. module: sshkeys.ssh.public_keys.dsa_public_key
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
from sshkeys.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType


class DSAPublicKey(SSHPublicKey):
    key_name = 'DSA'

    def __init__(self, p, q, g, public_value, comment=None):
        """
        A DSA public key, from components that were generated elsewhere.
        None of the parameters are checked for primality or consistency.
        :param p: Big-endian bytes of the prime modulus p.
        :param q: Big-endian bytes of the prime divisor q.
        :param g: Big-endian bytes of the generator g.
        :param public_value: Big-endian bytes of the public value y.
        :param comment: Optional key comment.
        """
        super(DSAPublicKey, self).__init__(comment)
        self.p = bytes(p)
        self.q = bytes(q)
        self.g = bytes(g)
        self.public_value = bytes(public_value)

    @classmethod
    def from_ssh_reader(cls, key_type, reader):
        # ssh-dss p q g y, see https://tools.ietf.org/html/rfc4253#section-6.6
        p = reader.read_mpint()
        q = reader.read_mpint()
        g = reader.read_mpint()
        public_value = reader.read_mpint()
        return cls(p, q, g, public_value)

    def keytype(self):
        return SSHPublicKeyType.DSA

    def size(self):
        return len(self.p) * 8

    def _serialize_ssh_public_key(self, writer):
        writer.write_mpint(self.p)
        writer.write_mpint(self.q)
        writer.write_mpint(self.g)
        writer.write_mpint(self.public_value)
