"""
.. module: sshkeys.ssh.protocol.ssh_protocol
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
import struct


def pack_ssh_mpint(mpint):
    """
    Packs multiple precision integers.
    See Section 5 of https://www.ietf.org/rfc/rfc4251.txt for more information.

    Public key material is never negative, so the integer is taken as its big-endian magnitude
    and only the positive half of the two's complement encoding is produced.
    :param mpint: Bytes holding the big-endian magnitude of a non-negative integer.
    :return: An SSH string containing the mpint in two's complement format.
    """
    mpint = bytes(mpint)

    # A set MSB would read back as a negative number, pad with a leading 0x00
    if mpint and mpint[0] & 0x80:
        mpint = b'\x00' + mpint

    # Per RFC4251 a 0 value mpint results in a null string.
    return pack_ssh_string(mpint)


def pack_ssh_string(string):
    """
    Packs arbitrary length binary strings.
    See Section 5 of https://www.ietf.org/rfc/rfc4251.txt for more information.
    :param string: String or Unicode string.  Unicode is encoded as utf-8.
    :return: An SSH String stored as a unint32 representing the length of the input string,
    followed by that many bytes.
    """
    if isinstance(string, str):
        string = string.encode('utf-8')
    else:
        string = bytes(string)

    str_len = len(string)

    if str_len > 4294967295:
        raise ValueError("String must be less than 2^32 bytes long.")

    return struct.pack('>I{}s'.format(str_len), str_len, string)


class SSHWriter(object):
    def __init__(self):
        """
        Accumulates SSH wire encoded fields in the order they are written.
        """
        self._fields = []

    def write_string(self, string):
        self._fields.append(pack_ssh_string(string))

    def write_bytes(self, blob):
        self._fields.append(pack_ssh_string(blob))

    def write_mpint(self, mpint):
        self._fields.append(pack_ssh_mpint(mpint))

    def to_bytes(self):
        """
        :return: Every field written so far, concatenated.
        """
        return b''.join(self._fields)
