import stat
import time

SIZE_UNITS = ('B', 'K', 'M', 'G', 'T')
MTIME_FORMAT = '%b %d %H:%M'

_PERMISSION_BITS = (
    (stat.S_IRUSR, 'r'), (stat.S_IWUSR, 'w'), (stat.S_IXUSR, 'x'),
    (stat.S_IRGRP, 'r'), (stat.S_IWGRP, 'w'), (stat.S_IXGRP, 'x'),
    (stat.S_IROTH, 'r'), (stat.S_IWOTH, 'w'), (stat.S_IXOTH, 'x'),
)


def format_permissions(mode: int) -> str:
    """Format mode bits as a 10-character permission string.

    Parameters
    ----------
    mode : int
        ``st_mode`` value.

    Returns
    -------
    str
        String like ``drwxr-xr-x``.
    """
    kind = 'd' if stat.S_ISDIR(mode) else '-'
    return kind + ''.join(char if mode & bit else '-' for bit, char in _PERMISSION_BITS)


def format_size(size: int, human_readable: bool = False) -> str:
    """Format size in bytes.

    Parameters
    ----------
    size : int
        Size in bytes.
    human_readable : bool, default=False
        Use 1024-based units with one decimal digit.

    Returns
    -------
    str
        Formatted size.
    """
    if not human_readable:
        return str(size)
    value = float(size)
    unit = 0
    while value > 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f'{value:.1f}{SIZE_UNITS[unit]}'


def format_mtime(timestamp: float) -> str:
    return time.strftime(MTIME_FORMAT, time.localtime(timestamp))
