"""
.. module: sshkeys.ssh.protocol.ssh_reader
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
import struct

from sshkeys.errors import InvalidFormat, Utf8Error


class SSHReader(object):
    def __init__(self, data):
        """
        Reads SSH wire encoded fields from a buffer, front to back.
        See Section 5 of https://www.ietf.org/rfc/rfc4251.txt for more information.
        :param data: bytes-like object holding the encoded fields.  It is not copied.
        """
        self._data = memoryview(data)
        self._offset = 0

    @property
    def remaining(self):
        return len(self._data) - self._offset

    def read_string(self):
        """
        Reads a uint32 length followed by that many bytes.
        :return: The bytes of the string, without the length.
        """
        if self.remaining < 4:
            raise InvalidFormat('Not enough data to read a string length.')

        (str_len,) = struct.unpack_from('>I', self._data, self._offset)
        start = self._offset + 4
        end = start + str_len

        if end > len(self._data):
            raise InvalidFormat('String length {} exceeds the remaining data.'.format(str_len))

        self._offset = end
        return self._data[start:end].tobytes()

    def read_bytes(self):
        return self.read_string()

    def read_text(self):
        """
        Reads a string and decodes it as utf-8.
        :return: Unicode string.
        """
        string = self.read_string()
        try:
            return string.decode('utf-8')
        except UnicodeDecodeError as e:
            raise Utf8Error(e)

    def read_mpint(self):
        """
        Reads a multiple precision integer.

        Public key material is never negative, so the single 0x00 that keeps a positive value
        with its MSB set from reading as two's complement negative is dropped.
        :return: Bytes holding the big-endian magnitude of the integer.
        """
        mpint = self.read_string()
        if len(mpint) > 1 and mpint[0] == 0 and mpint[1] & 0x80:
            mpint = mpint[1:]
        return mpint
