"""PageLint - SEO, accessibility and structure checks for static HTML pages."""

__version__ = "0.1.0"

from pagelint.document import Document, ParseError, load_document
from pagelint.models import (
    Rule,
    RuleContext,
    RuleResult,
    Severity,
)

__all__ = [
    "Document",
    "ParseError",
    "Rule",
    "RuleContext",
    "RuleResult",
    "Severity",
    "load_document",
]
