"""
.. module: sshkeys.ssh.public_keys.ssh_public_key_factory
    :copyright: (c) 2026 by The sshkeys developers
    :license: Apache License, Version 2.0
"""
import base64
import logging

from sshkeys.config.sshkeys_config import ALLOWED_KEY_TYPES_OPTION
from sshkeys.errors import InvalidFormat, UnsupportedKeytype
from sshkeys.ssh.protocol.ssh_reader import SSHReader
from sshkeys.ssh.public_keys.dsa_public_key import DSAPublicKey
from sshkeys.ssh.public_keys.ecdsa_public_key import ECDSAPublicKey
from sshkeys.ssh.public_keys.ed25519_public_key import ED25519PublicKey
from sshkeys.ssh.public_keys.rsa_public_key import RSAPublicKey
from sshkeys.ssh.public_keys.ssh_public_key import SSHPublicKeyType

logger = logging.getLogger(__name__)

SSH_PUBLIC_KEY_CLASSES = {
    SSHPublicKeyType.RSA: RSAPublicKey,
    SSHPublicKeyType.DSA: DSAPublicKey,
    SSHPublicKeyType.ED25519: ED25519PublicKey,
    SSHPublicKeyType.ECDSA_NISTP256: ECDSAPublicKey,
    SSHPublicKeyType.ECDSA_NISTP384: ECDSAPublicKey,
    SSHPublicKeyType.ECDSA_NISTP521: ECDSAPublicKey,
}


def get_ssh_public_key(ssh_public_key, config=None):
    """
    Returns the proper SSHPublicKey instance based off of the SSH Public Key file.
    The format is described in https://tools.ietf.org/html/rfc4253#section-6.6
    :param ssh_public_key: SSH Public Key file contents. (i.e. 'ssh-XXX AAAA.... comment').
    :param config: Optional SSHKeysConfig restricting which key types are accepted.
    :return: An SSHPublicKey instance.
    """
    split_ssh_public_key = ssh_public_key.split()

    if len(split_ssh_public_key) < 2:
        raise InvalidFormat('Key is not in the proper format.')

    key_type = split_ssh_public_key[0]
    key_body = split_ssh_public_key[1]

    # is there a key comment at the end?
    if len(split_ssh_public_key) > 2:
        key_comment = ' '.join(split_ssh_public_key[2:])
    else:
        key_comment = None

    if key_type not in SSH_PUBLIC_KEY_CLASSES:
        logger.info('Rejected public key with unsupported type {}'.format(key_type))
        raise UnsupportedKeytype(key_type)

    if config is not None and key_type not in config.getallowedkeytypes():
        logger.info('Rejected public key type {}, not in {}'.format(key_type, ALLOWED_KEY_TYPES_OPTION))
        raise UnsupportedKeytype(key_type)

    try:
        decoded_data = base64.b64decode(key_body, validate=True)
    except ValueError:
        # binascii.Error for bad characters or padding, plain ValueError for non-ascii input
        raise InvalidFormat('Key body is not valid base64.')

    reader = SSHReader(decoded_data)
    inner_key_type = reader.read_text()

    if inner_key_type != key_type:
        raise InvalidFormat('Key header and key body contain different key type values.')

    public_key = SSH_PUBLIC_KEY_CLASSES[key_type].from_ssh_reader(key_type, reader)
    public_key.set_comment(key_comment)

    logger.debug('Parsed {} public key of {} bits'.format(key_type, public_key.size()))
    return public_key


def from_rsa(e, n):
    """
    Builds an RSA SSHPublicKey from components generated by another library.
    :param e: Big-endian bytes of the public exponent.
    :param n: Big-endian bytes of the modulus.
    :return: An RSAPublicKey without a comment.
    """
    return RSAPublicKey(e, n)


def from_dsa(p, q, g, public_value):
    """
    Builds a DSA SSHPublicKey from components generated by another library.
    :param p: Big-endian bytes of the prime modulus p.
    :param q: Big-endian bytes of the prime divisor q.
    :param g: Big-endian bytes of the generator g.
    :param public_value: Big-endian bytes of the public value y.
    :return: A DSAPublicKey without a comment.
    """
    return DSAPublicKey(p, q, g, public_value)
