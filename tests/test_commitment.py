"""
承诺-揭示测试
Commitment Tests
"""
import secrets

import pytest

from hmac_rps.game.commitment import CommitmentProvider, SecureRandomSource
from hmac_rps.utils.exceptions import RandomSourceException

# RFC 4231 测试用例 2
RFC4231_KEY = b"Jefe"
RFC4231_DATA = "what do ya want for nothing?"
RFC4231_SHA256 = "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"


def test_commit_matches_hmac_sha256_reference():
    provider = CommitmentProvider()
    assert provider.commit(RFC4231_KEY, RFC4231_DATA) == RFC4231_SHA256


def test_commit_is_deterministic():
    provider = CommitmentProvider()
    key = b"k" * 32
    assert provider.commit(key, "rock") == provider.commit(key, "rock")


def test_revealed_values_verify(fixed_random):
    provider = CommitmentProvider(random_source=fixed_random())
    commitment = provider.create("scissors")
    assert commitment.message == "scissors"
    assert provider.verify(commitment.key, "scissors", commitment.digest)
    assert provider.verify(bytes.fromhex(commitment.key_hex), "scissors", commitment.digest.upper())


def test_tampered_message_or_key_fails(fixed_random):
    provider = CommitmentProvider(random_source=fixed_random())
    commitment = provider.create("scissors")
    assert not provider.verify(commitment.key, "rock", commitment.digest)
    tampered_key = bytes([commitment.key[0] ^ 1]) + commitment.key[1:]
    assert not provider.verify(tampered_key, "scissors", commitment.digest)


def test_generate_secret_uses_injected_source_and_length(fixed_random):
    source = fixed_random()
    provider = CommitmentProvider(random_source=source, key_length=48)
    assert len(provider.generate_secret()) == 48
    assert len(provider.generate_secret(16)) == 16
    assert source.requested_lengths == [48, 16]


def test_default_source_produces_fresh_keys():
    provider = CommitmentProvider()
    first = provider.create("rock")
    second = provider.create("rock")
    assert len(first.key) == 32
    assert first.key != second.key
    assert first.digest != second.digest


def test_key_is_not_in_repr(fixed_random):
    commitment = CommitmentProvider(random_source=fixed_random()).create("rock")
    assert commitment.key_hex not in repr(commitment)


def test_configurable_digest():
    provider = CommitmentProvider(digest="sha3_256")
    digest = provider.commit(b"key", "rock")
    assert len(digest) == 64
    assert digest != CommitmentProvider().commit(b"key", "rock")


def test_random_source_failure_is_fatal(monkeypatch):
    def exhausted(length):
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "token_bytes", exhausted)
    provider = CommitmentProvider(random_source=SecureRandomSource())
    with pytest.raises(RandomSourceException) as excinfo:
        provider.create("rock")
    assert excinfo.value.source == "secrets"


def test_randbelow_stays_in_range():
    source = SecureRandomSource()
    for _ in range(50):
        assert 0 <= source.randbelow(5) < 5
