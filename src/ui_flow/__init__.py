__version__ = "0.1.0.dev0"

from .analysis import (
    extract_actions,
    extract_flows,
    extract_msg_emissions,
    extract_msg_handlers,
    extract_state_mutations,
    extract_ui_elements,
)
from .analyzer import Analyzer
from .config import AnalyzerConfig, Vocabulary
from .errors import (
    AnalyzerError,
    FileTooLargeError,
    SourceParseError,
    SourceReadError,
    VocabularyError,
)
from .types import (
    Action,
    FileAnalysis,
    MsgEmission,
    MsgHandler,
    StateMutation,
    TeaFlow,
    UiElement,
    UiFlow,
)

__all__ = [
    "__version__",
    "Action",
    "Analyzer",
    "AnalyzerConfig",
    "AnalyzerError",
    "FileAnalysis",
    "FileTooLargeError",
    "MsgEmission",
    "MsgHandler",
    "SourceParseError",
    "SourceReadError",
    "StateMutation",
    "TeaFlow",
    "UiElement",
    "UiFlow",
    "Vocabulary",
    "VocabularyError",
    "extract_actions",
    "extract_flows",
    "extract_msg_emissions",
    "extract_msg_handlers",
    "extract_state_mutations",
    "extract_ui_elements",
]
