"""
Codec configuration: central settings for the exchange string envelope.

Reads environment variables (and a local .env file) once at import and
defines defaults. Callers read these module attributes at call time, so
tests can monkeypatch them.

Environment Variables:
    FACTORIO_BP_VERSION_MARKER: Marker character prepended on encode
    FACTORIO_BP_KNOWN_MARKERS: Comma-separated markers accepted on decode
    FACTORIO_BP_STRICT_MARKER: Reject unknown markers instead of warning
    FACTORIO_BP_LINE_WIDTH: Wrap encoded strings at this width (0 = no wrap)
    FACTORIO_BP_COMPRESSION_LEVEL: zlib compression level (0-9)
    FACTORIO_BP_VALIDATE: Run the validation pass after every parse
    VERBOSE: Default CLI verbosity
"""
import os

from dotenv import load_dotenv

# Load .env file early
load_dotenv(override=True)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_markers(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(m.strip() for m in raw.split(",") if m.strip())


# -----------------------------------------------------------------------------
# Envelope
# -----------------------------------------------------------------------------
# Every exchange string produced by the game so far starts with "0"
VERSION_MARKER = os.getenv("FACTORIO_BP_VERSION_MARKER", "0")
KNOWN_MARKERS = _env_markers("FACTORIO_BP_KNOWN_MARKERS", "0")
STRICT_MARKER = _env_flag("FACTORIO_BP_STRICT_MARKER")

LINE_WIDTH = int(os.getenv("FACTORIO_BP_LINE_WIDTH", "0"))
COMPRESSION_LEVEL = int(os.getenv("FACTORIO_BP_COMPRESSION_LEVEL", "9"))

# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------
VALIDATE = _env_flag("FACTORIO_BP_VALIDATE")

# Logging
VERBOSE = _env_flag("VERBOSE")


def validate_config() -> None:
    """
    Validate that configured values are usable.

    Raises:
        RuntimeError: If a marker is not a single character or a numeric
            setting is out of range
    """
    if len(VERSION_MARKER) != 1:
        raise RuntimeError(
            f"FACTORIO_BP_VERSION_MARKER must be a single character, got {VERSION_MARKER!r}"
        )

    for marker in KNOWN_MARKERS:
        if len(marker) != 1:
            raise RuntimeError(
                f"FACTORIO_BP_KNOWN_MARKERS entries must be single characters, got {marker!r}"
            )

    if not 0 <= COMPRESSION_LEVEL <= 9:
        raise RuntimeError(
            f"FACTORIO_BP_COMPRESSION_LEVEL must be between 0 and 9, got {COMPRESSION_LEVEL}"
        )

    if LINE_WIDTH < 0:
        raise RuntimeError(f"FACTORIO_BP_LINE_WIDTH must not be negative, got {LINE_WIDTH}")


if __name__ == "__main__":
    print(f"VERSION_MARKER: {VERSION_MARKER}")
    print(f"KNOWN_MARKERS: {KNOWN_MARKERS}")
    print(f"STRICT_MARKER: {STRICT_MARKER}")
    print(f"LINE_WIDTH: {LINE_WIDTH}")
    print(f"COMPRESSION_LEVEL: {COMPRESSION_LEVEL}")
    print(f"VALIDATE: {VALIDATE}")
