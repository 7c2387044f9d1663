"""Cache key generation logic."""

FEATURED_BUSINESSES_PREFIX = "featured_businesses_"
RANDOM_BUSINESSES_PREFIX = "random_businesses_"

# Keys dropped whenever a business row changes
BUSINESS_KEY_PREFIXES = (FEATURED_BUSINESSES_PREFIX, RANDOM_BUSINESSES_PREFIX)


def featured_businesses_key(limit: int = 10) -> str:
    """
    Generate the cache key for a featured-businesses listing.

    Each limit is cached separately.

    Example:
        >>> featured_businesses_key(10)
        'featured_businesses_10'
    """
    return f"{FEATURED_BUSINESSES_PREFIX}{limit}"


def random_businesses_key(limit: int = 10) -> str:
    """
    Generate the cache key for a random-businesses listing.

    Example:
        >>> random_businesses_key(9)
        'random_businesses_9'
    """
    return f"{RANDOM_BUSINESSES_PREFIX}{limit}"


def categories_key() -> str:
    return "categories_all"


def business_stats_key() -> str:
    return "business_stats"
