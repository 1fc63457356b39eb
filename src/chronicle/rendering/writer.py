"""Output file handling."""

import os
import tempfile
from pathlib import Path

from chronicle.models import OutputFormat


def output_path_for(path: Path, output_format: OutputFormat) -> Path:
    """Give the output path the extension matching the format.

    Args:
        path: Requested output path
        output_format: Rendered format

    Returns:
        ``path`` unchanged if it already has the right extension, otherwise
        ``path`` with its extension replaced (e.g. CHANGELOG.md -> CHANGELOG.html)
    """
    if path.suffix == output_format.extension:
        return path
    return path.with_suffix(output_format.extension)


def write_changelog(text: str, path: Path) -> Path:
    """Write the rendered changelog using atomic write.

    Uses a temporary file and rename so that a failed run never leaves a
    partially written changelog behind.

    Args:
        text: Rendered changelog
        path: Destination file

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)

        # Atomic rename
        os.replace(temp_path, path)
    except Exception:
        # Clean up temp file on error
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise

    return path
