"""ID generators (CUID2-based, entity-prefixed)."""

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_id(prefix: str) -> str:
    """Return a new entity id such as ``song-<cuid>``.

    The id never contains the cache key separator, so it can be used
    directly as the identifier segment of a cache key.
    """
    return f"{prefix}-{generate_cuid()}"
