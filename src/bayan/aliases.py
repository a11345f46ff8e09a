from bayan.core.models import HashAlgorithm

HASH_ALIASES = {
    "crc32": HashAlgorithm.CRC32,
    "md5": HashAlgorithm.MD5,
    "xxhash": HashAlgorithm.XXHASH,
}

HASH_CHOICES = list(HASH_ALIASES.keys())

HASH_HELP_TEXT = (
    "Block hash algorithm:\n"
    "  crc32      : 32-bit checksum (fastest, default)\n"
    "  md5        : 128-bit cryptographic digest\n"
    "  xxhash     : 64-bit xxHash digest\n"
    "Example    : %(prog)s -i ~/Downloads -a md5 -b 64K\n"
)

LEVEL_HELP_TEXT = (
    "Scan level:\n"
    "  0          : only files directly inside the input directory\n"
    "  1 or more  : all nested directories (default: 1)\n"
)

EPILOG_TEXT = """
Examples:
  Basic usage - find duplicates in Downloads folder
  %(prog)s -i ~/Downloads

  Only top-level text files of at least 1KB, compared in 64KB blocks
  %(prog)s -i ~/Downloads -l 0 -n '*.txt' -m 1K -b 64K

  Skip every directory whose path ends with 'tmp' or '.git'
  %(prog)s -i ~/projects -e tmp .git

  Move duplicates to trash, keeping the first file of each group (with confirmation prompt)
  %(prog)s -i ~/Downloads --keep-one

  Same as above but without confirmation (for scripts)
  %(prog)s -i ~/Downloads --keep-one --force > ~/Downloads/report.txt
"""
