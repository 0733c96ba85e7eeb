"""Input file reading for the comparison boundary"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """Return the decoded text of path, or raise ValueError if it can't be used as diff input."""
    if not path.exists():
        raise ValueError(f"File not found: {path}")
    if not path.is_file():
        raise ValueError(f"Not a file: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    if b"\x00" in data:
        raise ValueError(f"Binary content is not supported: {path}")
    try:
        text = data.decode(encoding)
    except LookupError as e:
        raise ValueError(f"Unknown encoding '{encoding}'") from e
    except UnicodeDecodeError as e:
        raise ValueError(f"Cannot decode {path} as {encoding}: {e}") from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return text
