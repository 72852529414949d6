"""Template Recognition Service - Matches OCR text to known invoice layouts."""

import logging
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ..config import (
    DEFAULT_CATEGORY,
    FALLBACK_CATEGORY_KEYWORDS,
    INVOICE_TEMPLATES_PATH,
)
from ..utils.schemas import CanonicalInvoice, InvoiceTemplate, TemplateMatch
from ..utils.template_loader import load_templates
from ..utils.text_normalizer import normalize_text
from .builtin_templates import BUILT_IN_TEMPLATES
from .scoring import TemplateScorer
from .template_store import TemplateLike, TemplateStore

logger = logging.getLogger(__name__)

InvoiceLike = Union[CanonicalInvoice, Mapping]


class TemplateRecognitionService:
    """Identifies the vendor layout of an invoice and derives its category."""

    def __init__(
        self,
        custom_templates: Iterable[TemplateLike] = (),
        include_builtin: bool = True,
    ):
        """
        Initialize the service with its own template store.

        Args:
            custom_templates: Templates added after the built-in set; an entry
                reusing a built-in id replaces that template in place
            include_builtin: Seed the store with the built-in templates
        """
        self.store = TemplateStore(BUILT_IN_TEMPLATES if include_builtin else ())
        for template in custom_templates:
            self.store.add(template)

    @classmethod
    def from_config(cls, templates_path: Optional[str] = None) -> "TemplateRecognitionService":
        """Create a service with custom templates from ``INVOICE_TEMPLATES_PATH``."""
        path = templates_path or INVOICE_TEMPLATES_PATH
        custom_templates = load_templates(path) if path else []
        return cls(custom_templates)

    @staticmethod
    def _coerce_invoice(extracted_data: Optional[InvoiceLike]) -> Optional[CanonicalInvoice]:
        if extracted_data is None or isinstance(extracted_data, CanonicalInvoice):
            return extracted_data

        # Only the vendor name is read, so other extractor fields are not validated
        vendor_name = extracted_data.get("vendor_name")
        if not isinstance(vendor_name, str):
            vendor_name = None
        return CanonicalInvoice(vendor_name=vendor_name)

    def recognize_template(
        self,
        ocr_text: str,
        extracted_data: Optional[InvoiceLike] = None,
    ) -> Optional[TemplateMatch]:
        """
        Match OCR text against the known invoice templates.

        A template is only eligible when its score is strictly above its own
        confidence threshold. On equal scores the template earlier in store
        order wins.

        Args:
            ocr_text: Raw OCR text of the invoice
            extracted_data: Structured fields already extracted, if any

        Returns:
            The best match, or None if no template clears its threshold
        """
        normalized_text = normalize_text(ocr_text)
        invoice = self._coerce_invoice(extracted_data)

        best_template: Optional[InvoiceTemplate] = None
        highest_score = 0.0

        for template in self.store:
            score = TemplateScorer.score(normalized_text, template, invoice)
            logger.debug("Template '%s' scored %.3f", template.id, score)

            if score > template.confidence_threshold and score > highest_score:
                highest_score = score
                best_template = template

        if best_template is None:
            logger.debug("No template matched")
            return None

        match = TemplateMatch(
            template_id=best_template.id,
            template_name=best_template.name,
            confidence=highest_score,
            matched_patterns=TemplateScorer.matched_patterns(normalized_text, best_template),
        )
        logger.info(
            "Recognized template '%s' with confidence %.2f",
            match.template_id,
            match.confidence,
        )
        return match

    def score_templates(
        self,
        ocr_text: str,
        extracted_data: Optional[InvoiceLike] = None,
    ) -> List[Tuple[str, float]]:
        """Return (template_id, score) for every template in store order."""
        normalized_text = normalize_text(ocr_text)
        invoice = self._coerce_invoice(extracted_data)
        return [
            (template.id, TemplateScorer.score(normalized_text, template, invoice))
            for template in self.store
        ]

    def categorize_invoice(
        self,
        template_match: Optional[TemplateMatch],
        extracted_data: Optional[InvoiceLike] = None,
    ) -> str:
        """
        Auto-categorize an invoice.

        Uses the category of the matched template when it is still in the
        store, otherwise falls back to keywords in the extracted vendor name.
        """
        if template_match is not None:
            template = self.store.get(template_match.template_id)
            if template is not None:
                return template.category

        invoice = self._coerce_invoice(extracted_data)
        if invoice is not None and invoice.vendor_name:
            vendor_lower = invoice.vendor_name.lower()
            for keywords, category in FALLBACK_CATEGORY_KEYWORDS:
                if any(keyword in vendor_lower for keyword in keywords):
                    return category

        return DEFAULT_CATEGORY

    def apply_to_invoice(
        self,
        ocr_text: str,
        extracted_data: Optional[InvoiceLike] = None,
    ) -> Tuple[CanonicalInvoice, Optional[TemplateMatch]]:
        """
        Recognize and categorize an invoice in one step.

        Returns:
            Tuple of (copy of the extracted invoice with ``template_id`` and
            ``category`` filled in, template match or None)

        Raises:
            pydantic.ValidationError: If a mapping passed as ``extracted_data``
                cannot be validated as a ``CanonicalInvoice``
        """
        if extracted_data is None or isinstance(extracted_data, CanonicalInvoice):
            invoice = extracted_data or CanonicalInvoice()
        else:
            invoice = CanonicalInvoice.model_validate(extracted_data)
        match = self.recognize_template(ocr_text, invoice)

        updates = {"category": self.categorize_invoice(match, invoice)}
        if match is not None:
            updates["template_id"] = match.template_id

        return invoice.model_copy(update=updates, deep=True), match

    # Template store access

    def get_template(self, template_id: str) -> Optional[InvoiceTemplate]:
        return self.store.get(template_id)

    def get_all_templates(self) -> List[InvoiceTemplate]:
        return self.store.all()

    def get_templates_by_category(self, category: str) -> List[InvoiceTemplate]:
        return self.store.by_category(category)

    def add_template(self, template: TemplateLike) -> None:
        """Add a custom template, replacing any template with the same id."""
        self.store.add(template)

    def remove_template(self, template_id: str) -> bool:
        return self.store.remove(template_id)
