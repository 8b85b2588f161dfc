__all__ = [
    "__title__", "__summary__", "__uri__", "__version__", "__author__",
    "__email__", "__license__", "__copyright__",
]

__title__ = "sshkeys"
__summary__ = (
    "sshkeys parses, inspects and re-serializes SSH public keys (RSA, DSA, ED25519 and ECDSA) "
    "and computes their SHA256 fingerprints.")
__uri__ = ""

__version__ = "0.1.0"

__author__ = "The sshkeys developers"
__email__ = ""

__license__ = "Apache License, Version 2.0"
__copyright__ = "Copyright 2026 {0}".format(__author__)
