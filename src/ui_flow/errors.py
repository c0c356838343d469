class AnalyzerError(Exception):
    """Base exception for the analyzer front end."""

    error_code: str = "ANALYZER_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SourceReadError(AnalyzerError):
    """Source file could not be read or decoded."""

    error_code = "SOURCE_READ_ERROR"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class FileTooLargeError(AnalyzerError):
    """Source file exceeds the configured size limit."""

    error_code = "FILE_TOO_LARGE"

    def __init__(self, path: str, file_size: int, max_size: int) -> None:
        self.path = path
        self.file_size = file_size
        self.max_size = max_size
        super().__init__(
            f"File too large: {path} ({file_size} bytes). Maximum allowed: {max_size} bytes"
        )


class SourceParseError(AnalyzerError):
    """Source contains syntax errors."""

    error_code = "PARSE_ERROR"

    def __init__(self, path: str, positions: list[tuple[int, int]]) -> None:
        self.path = path
        self.positions = positions
        if positions:
            line, column = positions[0]
            where = f"line {line}, column {column}"
            if len(positions) > 1:
                where += f" (+{len(positions) - 1} more)"
        else:
            where = "unknown position"
        super().__init__(f"Parse error in {path} at {where}")


class VocabularyError(AnalyzerError):
    """Vocabulary file is missing or malformed."""

    error_code = "VOCABULARY_ERROR"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid vocabulary file {path}: {reason}")
