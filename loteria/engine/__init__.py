"""Pure matching and tally engine."""

from loteria.engine.matcher import compare, count_matches, parse_drawn
from loteria.engine.summarizer import summarize

__all__ = ["compare", "count_matches", "parse_drawn", "summarize"]
