"""Results feed (competition page data) source."""
from .transformer import ResultsFeedTransformer

__all__ = ["ResultsFeedTransformer"]
