"""
Montant RDC — canonical amounts and French narration for public-finance documents.

Architecture: Sanitize → Slash | Separator resolution → Canonical format
              Integer → 3-digit groups → French words → "Nous disons : …"
Philosophy:  Never crash the data-entry screen. Offer a strict path for callers who must know.
"""

from .formatting import correct_amount, format_amount, is_canonical, parse_canonical
from .narration import legal_statement, narrate_amount

__version__ = "1.0.0"

__all__ = [
    "correct_amount",
    "format_amount",
    "is_canonical",
    "legal_statement",
    "narrate_amount",
    "parse_canonical",
]
