"""
Atomic text file writer.

Output is written to a temporary file next to the target and moved into
place only once fully written, so a failure never leaves a partial artifact.
"""
import os
import tempfile
from pathlib import Path


def write_text_atomic(path: str, text: str) -> None:
    """
    Write text to file atomically.

    Creates parent directories if they don't exist.

    Args:
        path: Path to output file
        text: Complete file contents

    Raises:
        OSError: If file cannot be written
    """
    output_path = Path(path)

    # Create parent directories if needed
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
    )
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        os.replace(tmp_name, output_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
