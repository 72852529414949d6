"""Shared fixtures for template recognition tests."""

import pytest

from invoice_templates.recognition import TemplateRecognitionService
from invoice_templates.utils.schemas import InvoiceTemplate


AMAZON_OCR_TEXT = (
    "AMAZON.COM ORDER #123 ORDER TOTAL: $45.00 SOLD BY AMAZON BILLING ADDRESS"
)


@pytest.fixture
def service():
    """Service seeded with the built-in templates."""
    return TemplateRecognitionService()


@pytest.fixture
def empty_service():
    """Service with an empty template store."""
    return TemplateRecognitionService(include_builtin=False)


@pytest.fixture
def make_template():
    """Factory for templates with sensible defaults."""
    def _make(template_id="acme", **overrides):
        data = {
            "id": template_id,
            "name": template_id.title(),
            "category": "Testing",
            "vendor_patterns": [],
            "field_patterns": {},
            "layout_indicators": [],
            "confidence_threshold": 0.3,
        }
        data.update(overrides)
        return InvoiceTemplate(**data)

    return _make
