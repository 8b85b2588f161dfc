from sshkeys.ssh.public_keys.dsa_public_key import DSAPublicKey
from sshkeys.ssh.public_keys.ssh_public_key_factory import get_ssh_public_key, from_dsa
from tests.ssh.vectors import EXAMPLE_DSA_PUBLIC_KEY, EXAMPLE_DSA_PUBLIC_KEY_FINGERPRINT


def test_valid_key():
    pub_key = get_ssh_public_key(EXAMPLE_DSA_PUBLIC_KEY)
    assert isinstance(pub_key, DSAPublicKey)
    assert 'demos@siril' == pub_key.comment
    assert 128 == len(pub_key.p)
    assert 20 == len(pub_key.q)
    assert 0xbc == pub_key.q[0]
    assert 128 == len(pub_key.g)
    assert 128 == len(pub_key.public_value)


def test_parse_to_string():
    assert EXAMPLE_DSA_PUBLIC_KEY == str(get_ssh_public_key(EXAMPLE_DSA_PUBLIC_KEY))


def test_size():
    assert 1024 == get_ssh_public_key(EXAMPLE_DSA_PUBLIC_KEY).size()


def test_keytype():
    assert 'ssh-dss' == get_ssh_public_key(EXAMPLE_DSA_PUBLIC_KEY).keytype()


def test_fingerprint():
    assert EXAMPLE_DSA_PUBLIC_KEY_FINGERPRINT == get_ssh_public_key(EXAMPLE_DSA_PUBLIC_KEY).fingerprint()


def test_fingerprint_string():
    pub_key = get_ssh_public_key(EXAMPLE_DSA_PUBLIC_KEY)
    assert '1024 SHA256:/Pyxrjot1Hs5PN2Dpg/4pK2wxxtP9Igc3sDTAWIEXT4 demos@siril (DSA)' == \
        pub_key.to_fingerprint_string()


def test_from_dsa():
    parsed = get_ssh_public_key(EXAMPLE_DSA_PUBLIC_KEY)
    pub_key = from_dsa(parsed.p, parsed.q, parsed.g, parsed.public_value)
    pub_key.set_comment('demos@siril')
    assert parsed == pub_key
    assert EXAMPLE_DSA_PUBLIC_KEY == pub_key.to_key_file()
