"""Data directory bootstrap."""

from pathlib import Path

from allzone.exceptions import StorageUnavailableError
from allzone.logging import get_logger

logger = get_logger(__name__)


def ensure_data_dir(path: str | Path) -> Path:
    """Create the data directory if it does not exist yet.

    Parameters
    ----------
    path : str | Path
        Directory that will hold the backing files.

    Returns
    -------
    Path
        The directory, guaranteed to exist.

    Raises
    ------
    StorageUnavailableError
        If the directory cannot be created, e.g. for permission reasons or
        because a regular file already occupies the path.
    """
    data_dir = Path(path)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageUnavailableError(f"Cannot create data directory {data_dir}: {exc}") from exc
    logger.debug("Data directory ready: %s", data_dir)
    return data_dir
