from tuition_api.core.security import CredentialCodec, derive_key

codec = CredentialCodec("unit-test-secret", rounds=4)


def test_hash_verifies_matching_secret_only():
    hashed = codec.hash("secret1")
    assert hashed != "secret1"
    assert codec.verify("secret1", hashed)
    assert not codec.verify("secret2", hashed)


def test_verify_rejects_empty_and_unknown_hashes():
    hashed = codec.hash("secret1")
    assert not codec.verify("", hashed)
    assert not codec.verify("secret1", "")
    assert not codec.verify("secret1", "not-a-bcrypt-hash")


def test_encrypt_uses_fresh_iv_each_call():
    first = codec.encrypt("secret1")
    second = codec.encrypt("secret1")
    assert first != second

    iv_hex, data_hex = first.split(":")
    assert len(bytes.fromhex(iv_hex)) == 16
    assert len(bytes.fromhex(data_hex)) % 16 == 0


def test_decrypt_recovers_plaintext():
    for secret in ("secret1", "pässwörd", "x" * 40):
        assert codec.decrypt(codec.encrypt(secret)) == secret


def test_empty_secret_encrypts_to_empty_string():
    assert codec.encrypt("") == ""
    assert codec.decrypt("") == ""


def test_unreadable_payloads_decrypt_to_empty_string():
    assert codec.decrypt("no-separator") == ""
    assert codec.decrypt("zz:zz") == ""
    # ciphertext shorter than a block
    assert codec.decrypt("00" * 16 + ":abcd") == ""


def test_same_secret_gives_same_key():
    assert derive_key("abc") == derive_key("abc")
    assert len(derive_key("abc")) == 32
    assert derive_key("abc") != derive_key("abd")
