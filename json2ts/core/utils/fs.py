import os
import logging

logger = logging.getLogger(__name__)


def create_file_if_missing(path: str, content: str) -> bool:
    """Creates a file with content if it doesn't already exist."""
    if not os.path.exists(path):
        with open(path, 'w') as f:
            f.write(content)
        logger.info(f"Created file: {path}")
        return True
    return False


def write_output(path: str, content: str) -> None:
    """Writes generated source to a file, creating parent directories."""
    parent = os.path.dirname(path)
    if parent and not os.path.exists(parent):
        os.makedirs(parent)
        logger.info(f"Created directory: {parent}")
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
