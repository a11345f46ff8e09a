"""
Tests for ScanParams validation and hash algorithm parsing.
"""
import pytest
from bayan.core.models import ScanParams, HashAlgorithm, DuplicateGroup, GroupingStats
from bayan.core.errors import ConfigurationError


class TestHashAlgorithmParsing:

    @pytest.mark.parametrize("name,expected", [
        ("crc32", HashAlgorithm.CRC32),
        ("CRC32", HashAlgorithm.CRC32),
        ("crc", HashAlgorithm.CRC32),
        ("md5", HashAlgorithm.MD5),
        (" MD5 ", HashAlgorithm.MD5),
        ("xxhash", HashAlgorithm.XXHASH),
        ("xxh64", HashAlgorithm.XXHASH),
    ])
    def test_known_names(self, name, expected):
        assert HashAlgorithm.from_name(name) is expected

    @pytest.mark.parametrize("name", ["sha256", "", "fastmd5", "crc-32"])
    def test_unknown_names_rejected(self, name):
        """No substring matching and no silent fallback to a default."""
        with pytest.raises(ConfigurationError, match="Unknown hash algorithm"):
            HashAlgorithm.from_name(name)


class TestScanParams:

    def test_defaults(self):
        params = ScanParams(root_dir="/data")
        assert params.level == 1
        assert params.depth_restricted is False
        assert params.min_size_bytes == 0
        assert params.name_pattern == "*"
        assert params.block_size_bytes == 4096
        assert params.algorithm is HashAlgorithm.CRC32

    def test_level_zero_is_depth_restricted(self):
        assert ScanParams(root_dir="/data", level=0).depth_restricted is True
        assert ScanParams(root_dir="/data", level=3).depth_restricted is False

    def test_algorithm_string_is_parsed(self):
        assert ScanParams(root_dir="/data", algorithm="md5").algorithm is HashAlgorithm.MD5

    def test_unknown_algorithm_string_rejected(self):
        with pytest.raises(ConfigurationError):
            ScanParams(root_dir="/data", algorithm="sha1")

    @pytest.mark.parametrize("kwargs,message", [
        ({"root_dir": ""}, "Root directory cannot be empty"),
        ({"root_dir": "/d", "min_size_bytes": -1}, "Minimum size cannot be negative"),
        ({"root_dir": "/d", "block_size_bytes": 0}, "Block size must be positive"),
        ({"root_dir": "/d", "level": -1}, "Level cannot be negative"),
    ])
    def test_invalid_values(self, kwargs, message):
        with pytest.raises(ConfigurationError, match=message):
            ScanParams(**kwargs)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            ScanParams(root_dir="/d", min_size_bytes=-5)

    def test_excluded_suffixes_normalized(self):
        params = ScanParams(root_dir="/d", excluded_dirs=["tmp/", " cache ", "", "build\\"])
        assert params.excluded_dirs == ["tmp", "cache", "build"]

    def test_excluded_dirs_none_means_no_exclusions(self):
        assert ScanParams(root_dir="/d", excluded_dirs=None).excluded_dirs == []

    def test_from_human_readable(self):
        params = ScanParams.from_human_readable(
            root_dir="/d", min_size_str="1K", block_size_str="64KB",
            excluded_dirs=["tmp"], level=0, name_pattern="*.bin", algorithm="xxhash")
        assert params.min_size_bytes == 1024
        assert params.block_size_bytes == 64 * 1024
        assert params.excluded_dirs == ["tmp"]
        assert params.depth_restricted
        assert params.name_pattern == "*.bin"
        assert params.algorithm is HashAlgorithm.XXHASH

    def test_from_human_readable_bad_size(self):
        with pytest.raises(ConfigurationError, match="Invalid size format"):
            ScanParams.from_human_readable(root_dir="/d", min_size_str="lots")

    def test_from_human_readable_names_failing_option(self):
        with pytest.raises(ConfigurationError, match="Minimum size"):
            ScanParams.from_human_readable(root_dir="/d", min_size_str="-1")
        with pytest.raises(ConfigurationError, match="Block size"):
            ScanParams.from_human_readable(root_dir="/d", block_size_str="4X")
        with pytest.raises(ConfigurationError, match="Block size must be positive"):
            ScanParams.from_human_readable(root_dir="/d", block_size_str="0K")


class TestDuplicateGroup:

    def test_representative_and_paths(self):
        group = DuplicateGroup(size=10, files=("/a", "/b", "/c"))
        assert group.representative == "/a"
        assert group.paths == frozenset({"/a", "/b", "/c"})
        assert group.duplicate_count == 3
        assert "/b" in group
        assert "/z" not in group

    def test_group_is_immutable(self):
        group = DuplicateGroup(size=10, files=("/a", "/b"))
        with pytest.raises(AttributeError):
            group.size = 20


class TestGroupingStats:

    def test_unreadable_recorded_once(self):
        stats = GroupingStats()
        assert stats.add_unreadable("/x") is True
        assert stats.add_unreadable("/x") is False
        assert stats.unreadable_files == ["/x"]
        assert "Unreadable files: 1" in stats.print_summary()

    def test_summary_contains_counters(self):
        stats = GroupingStats(candidates=4, comparisons=6, size_mismatches=2,
                              blocks_read=5, cache_hits=3, groups_found=1)
        summary = stats.print_summary()
        assert "Candidates: 4" in summary
        assert "Comparisons: 6 (2 rejected by size)" in summary
        assert "Blocks read from disk: 5" in summary
        assert "Blocks served from cache: 3" in summary
        assert "Duplicate groups: 1" in summary
        assert "Unreadable" not in summary
