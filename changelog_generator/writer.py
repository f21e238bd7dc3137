"""
Changelog file splicing.

The generated section is inserted directly after the line holding the
changelog's top-level heading; everything that followed the heading is
preserved unchanged. The updated file is written next to the original and
swapped in, so a failed write leaves the changelog untouched.
"""

import logging
import os
import re
import shutil
import tempfile

from .errors import SpliceError

logger = logging.getLogger("changelog-generator.writer")

DEFAULT_HEADING = "# Changelog"


def _heading_re(heading: str):
    return re.compile(rf"^{re.escape(heading)}[ \t]*$", re.M)


def splice_changelog(path: str, insertion: str, heading: str = DEFAULT_HEADING) -> None:
    """
    Insert a generated section into an existing changelog file.

    Args:
        path: Changelog file to update in place
        insertion: Markdown to insert
        heading: Heading line the insertion follows; must match a whole line

    Raises:
        SpliceError: If the file cannot be read or written, or lacks the heading
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeError) as e:
        raise SpliceError(f"Could not read changelog {path}: {e}") from e

    m = _heading_re(heading).search(content)
    if not m:
        raise SpliceError(f"Heading {heading!r} not found in {path}")
    offset = m.end()

    updated = content[:offset] + "\n\n" + insertion + content[offset:]

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(mode="w", encoding="utf-8", dir=directory,
                                         suffix=".tmp", delete=False) as tmp:
            tmp_path = tmp.name
            tmp.write(updated)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except (OSError, UnicodeError) as e:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise SpliceError(f"Could not write changelog {path}: {e}") from e

    logger.info("Inserted %d characters into %s", len(insertion), path)
