"""Constants for the B2 upload API: header names, part limits and progress bar settings."""

PACKAGE_ROOT = "b2_client"

# Request headers of b2_upload_part
AUTHORIZATION_HEADER = "Authorization"
PART_NUMBER_HEADER = "X-Bz-Part-Number"
CONTENT_LENGTH_HEADER = "Content-Length"
CONTENT_SHA1_HEADER = "X-Bz-Content-Sha1"
SSE_C_ALGORITHM_HEADER = "X-Bz-Server-Side-Encryption-Customer-Algorithm"
SSE_C_KEY_HEADER = "X-Bz-Server-Side-Encryption-Customer-Key"
SSE_C_KEY_MD5_HEADER = "X-Bz-Server-Side-Encryption-Customer-Key-Md5"

# Special X-Bz-Content-Sha1 value to send the checksum after the body
HEX_DIGITS_AT_END = "hex_digits_at_end"

# Part numbers of one large file are contiguous, starting at 1
MIN_PART_NUMBER = 1
MAX_PART_NUMBER = 10000

# Every part but the last one must be at least this large
MEGABYTE = 1000 * 1000
GIGABYTE = 1000 * MEGABYTE
MIN_PART_SIZE = 5 * MEGABYTE
MAX_PART_SIZE = 5 * GIGABYTE

# Default request timeout in seconds for a single part upload
DEFAULT_UPLOAD_TIMEOUT = 300

TQDM_BAR_FORMAT = "{desc} ▕{bar:50}▏ {n_fmt:>10}/{total_fmt:<10} ({rate_fmt:>12}, ETA: {remaining:>6}) {postfix}"
TQDM_DEFAULTS = {
    "bar_format": TQDM_BAR_FORMAT,
    "unit": "iB",
    "unit_scale": True,
    "miniters": 1,
    "smoothing": 0.00001,
    "colour": "cyan",
    "ascii": "░▒█",
}
