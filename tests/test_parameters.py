"""
Test suite for WOTS+ parameter derivation and validation
"""

import pytest

from wotsplus import (
    WOTSPlus,
    WOTSPlusParameterSet,
    WOTSPLUS_KECCAK256_W16,
    WOTSPLUS_KECCAK256_W4,
    WOTSPLUS_SHA512_W16,
    PARAMETER_SETS,
    InvalidParameterError,
    get_parameter_set,
    keccak_256,
    sha512,
)


class TestParameterSizes:
    """Verify derived sizes"""

    def test_default_sizes(self, wots):
        assert wots.hash_len == 32
        assert wots.message_len == 32
        assert wots.chain_len == 16
        assert wots.lg_chain_len == 4
        assert wots.num_message_chunks == 64
        assert wots.num_checksum_chunks == 3
        assert wots.num_signature_chunks == 67
        assert wots.signature_size == 2144
        assert wots.public_key_size == 64

    def test_keccak256_w4_sizes(self):
        params = WOTSPLUS_KECCAK256_W4
        assert params.lg_w == 2
        assert params.len1 == 128
        assert params.len2 == 5
        assert params.len_total == 133
        assert params.sig_size == 4256
        assert params.pk_size == 64

    def test_sha512_w16_sizes(self):
        params = WOTSPLUS_SHA512_W16
        assert params.len1 == 128
        assert params.len2 == 3
        assert params.len_total == 131
        assert params.sig_size == 8384
        assert params.pk_size == 128

    def test_default_set_matches_default_constructor(self, wots):
        params = WOTSPLUS_KECCAK256_W16
        assert (params.n, params.w) == (wots.hash_len, wots.chain_len)
        assert params.len_total == wots.num_signature_chunks


class TestParameterValidation:
    """Construction must reject unusable parameters"""

    def test_chain_len_power_of_two_not_supported(self):
        with pytest.raises(InvalidParameterError):
            WOTSPlus(keccak_256, 32, 8)

    def test_chain_len_not_power_of_two(self):
        with pytest.raises(InvalidParameterError):
            WOTSPlus(keccak_256, 32, 15)

    def test_chain_len_zero(self):
        with pytest.raises(InvalidParameterError):
            WOTSPlusParameterSet(name="bad", n=32, w=0)

    def test_hash_len_zero(self):
        with pytest.raises(InvalidParameterError):
            WOTSPlus(keccak_256, hash_len=0)

    def test_hash_len_negative(self):
        with pytest.raises(InvalidParameterError):
            WOTSPlusParameterSet(name="bad", n=-1, w=16)

    def test_too_few_chains_for_chain_length(self):
        # A full chain walk XORs randomization elements 1..w-1, and only len_total
        # elements exist. n=2, w=16 gives 6 chains, so keygen would run out of
        # masks; the parameter set is refused at construction instead.
        with pytest.raises(InvalidParameterError):
            WOTSPlusParameterSet(name="tiny", n=2, w=16)

    def test_digest_length_mismatch(self):
        with pytest.raises(InvalidParameterError):
            WOTSPlus(keccak_256, hash_len=64)

    def test_matching_digest_length(self):
        wots = WOTSPlus(sha512, hash_len=64)
        assert wots.signature_size == 8384

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            WOTSPlus(keccak_256, 32, 8)

    def test_parameter_set_is_frozen(self):
        with pytest.raises(AttributeError):
            WOTSPLUS_KECCAK256_W16.n = 16


class TestParameterRegistry:
    """Named parameter set lookup"""

    def test_lookup(self):
        for name, params in PARAMETER_SETS.items():
            assert get_parameter_set(name) is params
            assert params.name == name

    def test_unknown_name(self):
        with pytest.raises(InvalidParameterError):
            get_parameter_set("WOTS+-MD5-W16")

    def test_from_parameter_set_resolves_hash(self):
        wots = WOTSPlus.from_parameter_set(WOTSPLUS_KECCAK256_W4)
        assert wots.params is WOTSPLUS_KECCAK256_W4
        assert wots.hash_funcs.F(b"abc") == keccak_256(b"abc")

    def test_custom_set_without_hash_name(self):
        params = WOTSPlusParameterSet(name="custom", n=32, w=16)
        with pytest.raises(InvalidParameterError):
            WOTSPlus.from_parameter_set(params)
        assert WOTSPlus.from_parameter_set(params, keccak_256).num_signature_chunks == 67
