"""Product catalog constants."""

DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
# Keeps ``page * limit`` within a signed 64-bit OFFSET/LIMIT.
MAX_PAGE = (2**63 - 1) // MAX_PAGE_LIMIT

NAME_MAX_LENGTH = 255
# ``str.lower()`` can expand a character in two ("İ" -> "i" + U+0307),
# so a slug may be up to twice as long as the name it comes from.
SLUG_MAX_LENGTH = 2 * NAME_MAX_LENGTH

# Newest first; ``id`` (UUIDv7) breaks ties between equal timestamps.
PRODUCT_LIST_ORDERING: tuple[str, ...] = ("-created_at", "-id")

SLUG_UNIQUE_CONSTRAINT = "products_slug_unique_alive"
