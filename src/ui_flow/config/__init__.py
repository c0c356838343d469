"""Configuration module for ui-flow-analyzer."""

from .settings import (
    MAX_FILE_SIZE_BYTES,
    STRICT_PARSE,
    VOCABULARY_PATH,
    AnalyzerConfig,
    env_bool,
)
from .vocabulary import (
    DEFAULT_VOCABULARY,
    INVENTORY_VOCABULARY,
    TEA_VOCABULARY,
    VOCABULARY_FILE,
    TeaVocabulary,
    Vocabularies,
    Vocabulary,
    load_vocabularies,
)

__all__ = [
    # Settings
    "MAX_FILE_SIZE_BYTES",
    "STRICT_PARSE",
    "VOCABULARY_PATH",
    "AnalyzerConfig",
    "env_bool",
    # Vocabularies
    "DEFAULT_VOCABULARY",
    "INVENTORY_VOCABULARY",
    "TEA_VOCABULARY",
    "VOCABULARY_FILE",
    "TeaVocabulary",
    "Vocabularies",
    "Vocabulary",
    "load_vocabularies",
]
