"""
Unit tests for HasherImpl and the block digest algorithms.
"""
import pytest
from bayan.core import HasherImpl, Crc32AlgorithmImpl, Md5AlgorithmImpl, XXHashAlgorithmImpl
from bayan.core import HashAlgorithm


class TestAlgorithms:
    """Known digests for every algorithm."""

    def test_crc32_is_unsigned_decimal(self):
        assert Crc32AlgorithmImpl.hash(b"123456789") == "3421780262"  # 0xCBF43926

    def test_crc32_of_empty_block(self):
        assert Crc32AlgorithmImpl.hash(b"") == "0"

    def test_md5_is_uppercase_hex(self):
        assert Md5AlgorithmImpl.hash(b"") == "D41D8CD98F00B204E9800998ECF8427E"
        assert Md5AlgorithmImpl.hash(b"abc") == "900150983CD24FB0D6963F7D28E17F72"

    def test_xxhash_is_64bit_hex(self):
        digest = XXHashAlgorithmImpl.hash(b"")
        assert digest == "ef46db3751d8e999"
        assert len(XXHashAlgorithmImpl.hash(b"some block")) == 16


class TestHasherImpl:
    """Test algorithm selection and determinism."""

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_same_bytes_same_digest(self, algorithm):
        hasher = HasherImpl.for_algorithm(algorithm)
        block = b"test content " * 100
        assert hasher.hash_block(block) == hasher.hash_block(bytes(block))

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_different_bytes_different_digest(self, algorithm):
        hasher = HasherImpl.for_algorithm(algorithm)
        assert hasher.hash_block(b"A" * 1024) != hasher.hash_block(b"B" * 1024)

    def test_for_algorithm_selects_implementation(self):
        assert isinstance(HasherImpl.for_algorithm(HashAlgorithm.CRC32).algorithm, Crc32AlgorithmImpl)
        assert isinstance(HasherImpl.for_algorithm(HashAlgorithm.MD5).algorithm, Md5AlgorithmImpl)
        assert isinstance(HasherImpl.for_algorithm(HashAlgorithm.XXHASH).algorithm, XXHashAlgorithmImpl)

    def test_two_hashers_agree(self):
        """Selection is deterministic across instances."""
        first = HasherImpl.for_algorithm(HashAlgorithm.MD5)
        second = HasherImpl.for_algorithm(HashAlgorithm.MD5)
        assert first.hash_block(b"xyz") == second.hash_block(b"xyz")
