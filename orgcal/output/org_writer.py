"""Org file writer for exported calendars."""

import logging
import os
import stat
import tempfile
from pathlib import Path

from orgcal.constants import MODE_LINE
from orgcal.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


class OrgWriter:
    """Writer for org-mode calendar files."""

    def render(self, document: str) -> str:
        """Prepend the mode line to a document."""
        if not document:
            return f"{MODE_LINE}\n"
        return f"{MODE_LINE}\n{document}"

    def write(self, document: str, path: Path) -> Path:
        """Write document to path, replacing any existing file.

        Content goes to a temporary file in the target directory first and
        is moved over the target only once fully written.

        Args:
            document: Outline document without the mode line
            path: Output file path

        Returns:
            The written path

        Raises:
            OutputWriteError: If the directory is missing or the write fails
        """
        path = Path(path)
        directory = path.parent
        if not directory.is_dir():
            raise OutputWriteError(f"Output directory does not exist: {directory}")

        content = self.render(document).encode("utf-8")
        temp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=directory, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as f:
                temp_name = f.name
                f.write(content)
            os.chmod(temp_name, _target_mode(path))
            os.replace(temp_name, path)
        except OSError as e:
            if temp_name is not None:
                Path(temp_name).unlink(missing_ok=True)
            raise OutputWriteError(f"Failed to write {path}: {e}") from e

        logger.info(f"Wrote {len(content)} bytes to {path}")
        return path


def _target_mode(path: Path) -> int:
    """Permission bits a plain overwrite of path would leave it with."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
