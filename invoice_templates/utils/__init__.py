"""Utility modules for template recognition."""

from .schemas import (
    InvoiceTemplate,
    TemplateMatch,
    LineItem,
    CanonicalInvoice,
)
from .text_normalizer import normalize_text
from .template_loader import load_templates, TemplateFileError

__all__ = [
    "InvoiceTemplate",
    "TemplateMatch",
    "LineItem",
    "CanonicalInvoice",
    "normalize_text",
    "load_templates",
    "TemplateFileError",
]
