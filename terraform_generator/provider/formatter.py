"""
Best-effort source formatting of generated files.

The formatter runs after a resource file is written. Its failures are
logged and never fail generation.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

FORMATTER_TIMEOUT_SECONDS = 60


def format_source(path: Path, command: Sequence[str]) -> bool:
    """Run ``command`` with ``path`` appended, e.g. ``goimports -w <path>``.

    Args:
        path: The generated source file, formatted in place.
        command: The formatter and its arguments; empty disables formatting.

    Returns:
        True if the formatter ran and exited cleanly, False otherwise
        (including when no command is configured).
    """
    if not command:
        return False

    cmd = [*command, str(path)]
    try:
        result = subprocess.run(  # noqa: S603
            cmd,
            capture_output=True,
            text=True,
            timeout=FORMATTER_TIMEOUT_SECONDS,
            check=False,
        )
    except FileNotFoundError:
        logger.warning("Formatter %s not found; leaving %s unformatted", command[0], path)
        return False
    except subprocess.TimeoutExpired:
        logger.warning("Formatter %s timed out on %s", command[0], path)
        return False
    except OSError as e:
        logger.warning("Formatter %s could not run on %s: %s", command[0], path, e)
        return False

    if result.returncode != 0:
        logger.warning(
            "Formatter %s exited with %d on %s: %s",
            command[0],
            result.returncode,
            path,
            result.stderr.strip(),
        )
        return False
    return True
