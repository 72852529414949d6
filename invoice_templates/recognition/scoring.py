"""Weighted scoring of normalized OCR text against invoice templates."""

from typing import List, Optional

from ..config import RecognitionWeights
from ..utils.schemas import CanonicalInvoice, InvoiceTemplate


class TemplateScorer:
    """Pattern scoring utilities for template recognition."""

    @staticmethod
    def vendor_score(
        normalized_text: str,
        template: InvoiceTemplate,
        extracted_data: Optional[CanonicalInvoice] = None,
    ) -> float:
        """Fraction of vendor patterns found in the text or the extracted vendor name."""
        if not template.vendor_patterns:
            return 0.0

        vendor_text = ""
        if extracted_data is not None and extracted_data.vendor_name:
            vendor_text = extracted_data.vendor_name.lower()

        matches = 0
        for pattern in template.vendor_patterns:
            pattern = pattern.lower()
            if pattern in normalized_text or pattern in vendor_text:
                matches += 1

        return matches / len(template.vendor_patterns)

    @staticmethod
    def field_score(normalized_text: str, template: InvoiceTemplate) -> float:
        """Fraction of all field label patterns, pooled across fields, found in the text."""
        total_patterns = 0
        matches = 0

        for patterns in template.field_patterns.values():
            for pattern in patterns:
                total_patterns += 1
                if pattern.lower() in normalized_text:
                    matches += 1

        return matches / total_patterns if total_patterns else 0.0

    @staticmethod
    def layout_score(normalized_text: str, template: InvoiceTemplate) -> float:
        """Fraction of layout indicators found in the text."""
        if not template.layout_indicators:
            return 0.0

        matches = sum(
            1 for indicator in template.layout_indicators
            if indicator.lower() in normalized_text
        )
        return matches / len(template.layout_indicators)

    @classmethod
    def score(
        cls,
        normalized_text: str,
        template: InvoiceTemplate,
        extracted_data: Optional[CanonicalInvoice] = None,
    ) -> float:
        """
        Composite template score in [0, 1].

        Vendor: 40%, Fields: 30%, Layout: 30%. A signal with no patterns
        scores 0 and still counts towards the denominator.
        """
        score = (
            cls.vendor_score(normalized_text, template, extracted_data) * RecognitionWeights.VENDOR +
            cls.field_score(normalized_text, template) * RecognitionWeights.FIELD +
            cls.layout_score(normalized_text, template) * RecognitionWeights.LAYOUT
        )
        return score / RecognitionWeights.TOTAL

    @staticmethod
    def matched_patterns(normalized_text: str, template: InvoiceTemplate) -> List[str]:
        """
        List every template pattern present in the text.

        Returns:
            Tagged strings, vendor hits first, then field hits grouped by
            field, then layout hits, e.g. ``"field(total): amount due"``
        """
        matched = []

        for pattern in template.vendor_patterns:
            if pattern.lower() in normalized_text:
                matched.append(f"vendor: {pattern}")

        for field_name, patterns in template.field_patterns.items():
            for pattern in patterns:
                if pattern.lower() in normalized_text:
                    matched.append(f"field({field_name}): {pattern}")

        for indicator in template.layout_indicators:
            if indicator.lower() in normalized_text:
                matched.append(f"layout: {indicator}")

        return matched
