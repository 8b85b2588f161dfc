"""
.. module: sshkeys.ssh.public_keys.ecdsa_public_key
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
from sshkeys.errors import UnsupportedCurve
from sshkeys.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType


class Curve(object):
    """
    One of the NIST curves named in https://tools.ietf.org/html/rfc5656#section-10.1
    Use Curve.get() or the NISTP256, NISTP384 and NISTP521 members, never the constructor.
    """
    NISTP256 = None
    NISTP384 = None
    NISTP521 = None

    _curves = {}

    def __init__(self, name, bits, key_type):
        self.name = name
        self.bits = bits
        self.key_type = key_type

    @classmethod
    def get(cls, name):
        """
        :param name: Curve identifier, i.e. 'nistp256'.
        :return: The matching Curve.
        """
        try:
            return cls._curves[name]
        except KeyError:
            raise UnsupportedCurve(name)

    @classmethod
    def _register(cls, name, bits, key_type):
        curve = cls(name, bits, key_type)
        cls._curves[name] = curve
        return curve

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'Curve({!r})'.format(self.name)


Curve.NISTP256 = Curve._register('nistp256', 256, SSHPublicKeyType.ECDSA_NISTP256)
Curve.NISTP384 = Curve._register('nistp384', 384, SSHPublicKeyType.ECDSA_NISTP384)
Curve.NISTP521 = Curve._register('nistp521', 521, SSHPublicKeyType.ECDSA_NISTP521)


class ECDSAPublicKey(SSHPublicKey):
    key_name = 'ECDSA'

    def __init__(self, curve, point, comment=None):
        """
        An ECDSA public key.  The encoded point is kept verbatim and never decoded, see
        section 2.3.3 of https://www.secg.org/sec1-v2.pdf for its layout.
        :param curve: The Curve the point is on.
        :param point: The encoded public point Q.
        :param comment: Optional key comment.
        """
        super(ECDSAPublicKey, self).__init__(comment)
        self.curve = curve
        self.point = bytes(point)

    @classmethod
    def from_ssh_reader(cls, key_type, reader):
        # ecdsa-sha2-[identifier] [identifier] Q
        # see https://tools.ietf.org/html/rfc5656#section-3.1
        curve_name = reader.read_text()
        curve = Curve.get(curve_name)
        if curve.key_type != key_type:
            raise UnsupportedCurve(curve_name)
        return cls(curve, reader.read_bytes())

    def keytype(self):
        return self.curve.key_type

    def size(self):
        return self.curve.bits

    def _serialize_ssh_public_key(self, writer):
        writer.write_string(self.curve.name)
        writer.write_bytes(self.point)
