import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = [
    "MAX_FILE_SIZE_BYTES",
    "STRICT_PARSE",
    "VOCABULARY_PATH",
    "AnalyzerConfig",
    "env_bool",
]

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def env_bool(name: str, *, default: bool) -> bool:
    """Read a boolean environment variable.

    Unset or unrecognized values fall back to ``default``.
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid boolean for %s: %r (using %s)", name, raw, default)
    return default


# Replacement vocabulary file (YAML, same layout as the packaged vocabulary.yaml)
VOCABULARY_PATH = os.getenv("UI_FLOW_VOCABULARY_PATH", "").strip() or None

# Reject sources whose syntax tree contains errors (default: true)
STRICT_PARSE = env_bool("UI_FLOW_STRICT_PARSE", default=True)

# File size limit (10MB) for analyze_file
MAX_FILE_SIZE_BYTES = int(os.getenv("UI_FLOW_MAX_FILE_SIZE_BYTES", "") or str(10 * 1024 * 1024))


@dataclass(frozen=True)
class AnalyzerConfig:
    strict_parse: bool = True
    max_file_size_bytes: int = 10 * 1024 * 1024
    vocabulary_path: str | None = None  # None: packaged vocabulary.yaml

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        strict_parse = env_bool("UI_FLOW_STRICT_PARSE", default=STRICT_PARSE)

        raw_limit = os.getenv("UI_FLOW_MAX_FILE_SIZE_BYTES", "").strip()
        try:
            max_file_size_bytes = int(raw_limit) if raw_limit else MAX_FILE_SIZE_BYTES
        except ValueError as exc:
            raise RuntimeError(
                f"UI_FLOW_MAX_FILE_SIZE_BYTES must be an integer, got {raw_limit!r}"
            ) from exc
        if max_file_size_bytes <= 0:
            raise RuntimeError(
                f"UI_FLOW_MAX_FILE_SIZE_BYTES must be positive, got {max_file_size_bytes}"
            )

        vocabulary_path = os.getenv("UI_FLOW_VOCABULARY_PATH", "").strip() or VOCABULARY_PATH
        if vocabulary_path:
            resolved = Path(vocabulary_path).expanduser().resolve()
            if not resolved.is_file():
                raise RuntimeError(f"UI_FLOW_VOCABULARY_PATH does not exist: {vocabulary_path}")
            vocabulary_path = str(resolved)

        return cls(
            strict_parse=strict_parse,
            max_file_size_bytes=max_file_size_bytes,
            vocabulary_path=vocabulary_path,
        )
