"""
Text file loader for exchange strings and JSON documents.
"""
from pathlib import Path


def read_text(path: str) -> str:
    """
    Read a whole UTF-8 text file.

    Args:
        path: Path to input file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: If file cannot be read
    """
    text_path = Path(path)

    if not text_path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(text_path, 'r', encoding='utf-8') as f:
        return f.read()
