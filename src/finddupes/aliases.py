from finddupes.core.models import ScanConfig

ALGORITHM_CHOICES = list(ScanConfig.ALGORITHMS)

ALGORITHM_HELP_TEXT = (
    "Fingerprint algorithm (full file content is always hashed):\n"
    "  md5        : Cryptographic digest (default)\n"
    "  sha1       : Cryptographic digest\n"
    "  sha256     : Cryptographic digest, slowest\n"
    "  xxh64      : xxHash64, non-cryptographic, fastest\n"
)

LOG_LAYOUT_CHOICES = list(ScanConfig.LOG_LAYOUTS)

LOG_LAYOUT_HELP_TEXT = (
    "Layout of the --duplicate-log file (one path per line):\n"
    "  grouped    : blank line between duplicate groups (default)\n"
    "  flat       : all paths, no separators\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates in the current directory
  %(prog)s

  Search Downloads and all its subdirectories
  %(prog)s -p ~/Downloads -r

  Only compare text files, show progress and timing
  %(prog)s -p ~/Documents -f "*.txt" -r -v

  Also dump duplicate paths to a file (e.g. for a cleanup script)
  %(prog)s -p ~/Pictures -r --duplicate-log dupes.txt --log-layout flat
"""
