import logging
from pathlib import Path

from tree_sitter import Node, Tree

from .analysis.flows import extract_flows
from .analysis.inventory import extract_actions, extract_state_mutations, extract_ui_elements
from .analysis.tea import build_tea_flows, extract_msg_emissions, extract_msg_handlers
from .config.settings import AnalyzerConfig
from .config.vocabulary import load_vocabularies
from .errors import FileTooLargeError, SourceParseError, SourceReadError
from .syntax.parser import parse_source, syntax_errors
from .types import FileAnalysis

logger = logging.getLogger(__name__)


class Analyzer:
    """Analyze Rust UI source files for UI -> action -> state flows."""

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config if config is not None else AnalyzerConfig.from_env()
        vocabularies = load_vocabularies(self.config.vocabulary_path)
        self.flow_vocabulary = vocabularies.flow
        self.inventory_vocabulary = vocabularies.inventory
        self.tea_vocabulary = vocabularies.tea

    def analyze_file(self, file_path: str | Path) -> FileAnalysis:
        """Read and analyze a single source file.

        Raises:
            FileTooLargeError: File exceeds ``max_file_size_bytes``.
            SourceReadError: File cannot be read or is not valid UTF-8.
            SourceParseError: Strict mode and the source has syntax errors.
        """
        path = Path(file_path)
        path_str = str(path)

        try:
            file_size = path.stat().st_size
        except OSError as exc:
            raise SourceReadError(path_str, str(exc)) from exc
        if file_size > self.config.max_file_size_bytes:
            raise FileTooLargeError(path_str, file_size, self.config.max_file_size_bytes)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(path_str, str(exc)) from exc

        return self.analyze_source(path_str, content)

    def analyze_source(self, file_path: str, content: str) -> FileAnalysis:
        """Parse and analyze source text.

        Args:
            file_path: Identifier stamped on every record.
            content: Rust source text.

        Raises:
            SourceParseError: Strict mode and the source has syntax errors.
        """
        tree = parse_source(content)
        errors = syntax_errors(tree)
        if errors:
            if self.config.strict_parse:
                raise SourceParseError(file_path, errors)
            logger.warning(
                "Analyzing %s despite %d syntax error(s); first at line %d",
                file_path,
                len(errors),
                errors[0][0],
            )
        return self.analyze_tree(file_path, tree)

    def analyze_tree(self, file_path: str, tree: Tree | Node) -> FileAnalysis:
        msg_emissions = extract_msg_emissions(file_path, tree, self.tea_vocabulary)
        msg_handlers = extract_msg_handlers(file_path, tree, self.tea_vocabulary)
        analysis = FileAnalysis(
            path=file_path,
            ui_elements=tuple(extract_ui_elements(file_path, tree, self.inventory_vocabulary)),
            actions=tuple(extract_actions(file_path, tree, self.inventory_vocabulary)),
            state_mutations=tuple(
                extract_state_mutations(file_path, tree, self.inventory_vocabulary)
            ),
            flows=tuple(extract_flows(file_path, tree, self.flow_vocabulary)),
            msg_emissions=tuple(msg_emissions),
            msg_handlers=tuple(msg_handlers),
            tea_flows=tuple(build_tea_flows(msg_emissions, msg_handlers)),
        )
        logger.debug(
            "Analyzed %s: %d ui element(s), %d action(s), %d mutation(s), %d flow(s), "
            "%d tea flow(s)",
            file_path,
            len(analysis.ui_elements),
            len(analysis.actions),
            len(analysis.state_mutations),
            len(analysis.flows),
            len(analysis.tea_flows),
        )
        return analysis
