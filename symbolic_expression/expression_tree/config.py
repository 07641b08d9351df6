from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Parser limits.

    max_nesting_depth bounds how many parentheses may be open at once; each
    level costs a few interpreter frames during descent.
    """
    max_nesting_depth: int = 200

    def __post_init__(self):
        """Validate fields after initialization"""
        if isinstance(self.max_nesting_depth, bool) or not isinstance(self.max_nesting_depth, int):
            raise ValueError("max_nesting_depth must be an integer")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be greater than 0")


DEFAULT_PARSER_CONFIG = ParserConfig()
