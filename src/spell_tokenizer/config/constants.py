"""Fixed text-shape rules used during tokenization."""

# Any match over a trimmed chunk disqualifies the whole chunk.
URL_PATTERN = r"https?://\S+"
FILE_PATH_PATTERN = r"[\w\-.]+(?:/[\w\-.]+)+"
BARE_NUMBER_PATTERN = r"\b\d+\b"
REGEX_LITERAL_PATTERN = r"\\[a-zA-Z]+[^()]*"
EMAIL_PATTERN = r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"

IGNORE_PATTERNS = (
    URL_PATTERN,
    FILE_PATH_PATTERN,
    BARE_NUMBER_PATTERN,
    REGEX_LITERAL_PATTERN,
    EMAIL_PATTERN,
)

# Letters, optionally an embedded digit run, optionally more letters.
WORD_PATTERN = r"[a-zA-Z]+[0-9]*[a-zA-Z]*"

# Space, underscore, hyphen, em-dash.
SPLIT_PATTERN = r"[ _\-—]"

# Edge characters kept by the trim step besides alphanumerics.
KEPT_EDGE_CHARS = "'"

MIN_TOKEN_LENGTH = 2
