"""Invoice template recognition engine."""

from .recognition import TemplateRecognitionService, TemplateStore, TemplateScorer
from .utils import (
    CanonicalInvoice,
    InvoiceTemplate,
    TemplateMatch,
    normalize_text,
    load_templates,
)

__all__ = [
    "TemplateRecognitionService",
    "TemplateStore",
    "TemplateScorer",
    "CanonicalInvoice",
    "InvoiceTemplate",
    "TemplateMatch",
    "normalize_text",
    "load_templates",
]
