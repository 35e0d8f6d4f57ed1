class TdmError(Exception):
    """Base class for errors raised by the tdm package."""


class ConfigurationError(TdmError, ValueError):
    """Invalid bounds, tokenizer or pipeline settings."""


class TermNotFoundError(TdmError, KeyError):
    def __init__(self, term: str):
        super().__init__(term)
        self.term = term

    def __str__(self) -> str:
        return f"term not in vocabulary: {self.term!r}"
