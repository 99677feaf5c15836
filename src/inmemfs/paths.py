"""Path construction for in-memory file system nodes."""

# Separator placed between path segments; also the name of a root created by Directory.create_root()
DELIMITER = "/"


def combine(base: str, *segments: str) -> str:
    """Append path segments to a base path.

    A delimiter is inserted before each segment unless the accumulated path already
    ends with one, so combining with the root path never doubles the delimiter. No other
    normalization is performed: ``.`` and ``..`` are treated as ordinary names.

    Args:
        base: The path to extend, typically the path of a directory.
        *segments: Names to append in order.

    Returns:
        The combined path.

    Example:
        >>> combine("/", "a", "b")
        '/a/b'
        >>> combine("/a", "1.txt")
        '/a/1.txt'
        >>> combine("/")
        '/'
    """
    path = base
    for segment in segments:
        if path.endswith(DELIMITER):
            path = f"{path}{segment}"
        else:
            path = f"{path}{DELIMITER}{segment}"
    return path
