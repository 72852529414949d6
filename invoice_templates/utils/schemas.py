"""Pydantic data models for the template recognition engine."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldPatternMap(dict):
    """Read-only mapping of field name to label patterns."""

    def _read_only(self, *args, **kwargs):
        raise TypeError("field patterns are read-only; replace the template instead")

    __setitem__ = __delitem__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only
    __ior__ = _read_only

    def __reduce__(self):
        return (type(self), (dict(self),))


class InvoiceTemplate(BaseModel):
    """A known vendor/invoice layout described by literal text patterns."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    vendor_patterns: tuple[str, ...] = ()
    field_patterns: dict[str, tuple[str, ...]] = Field(default_factory=FieldPatternMap)
    layout_indicators: tuple[str, ...] = ()
    confidence_threshold: float = Field(ge=0.0, le=1.0)

    @field_validator("id", "name", "category")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("vendor_patterns", "layout_indicators")
    @classmethod
    def _no_empty_patterns(cls, patterns: tuple[str, ...]) -> tuple[str, ...]:
        # An empty pattern is a substring of every text
        if any(not p for p in patterns):
            raise ValueError("patterns must be non-empty strings")
        return patterns

    @field_validator("field_patterns")
    @classmethod
    def _no_empty_field_patterns(
        cls, field_patterns: dict[str, tuple[str, ...]]
    ) -> FieldPatternMap:
        for field_name, patterns in field_patterns.items():
            if any(not p for p in patterns):
                raise ValueError(
                    f"patterns for field '{field_name}' must be non-empty strings"
                )
        return FieldPatternMap(field_patterns)


class TemplateMatch(BaseModel):
    """Result of matching OCR text against the template store."""
    template_id: str
    template_name: str
    confidence: float = Field(ge=0.0, le=1.0)
    matched_patterns: list[str] = Field(default_factory=list)


class LineItem(BaseModel):
    """A line item from an extracted invoice."""
    line_number: Optional[int] = None
    sku: Optional[str] = None
    description: str = ""
    qty: Optional[float] = None
    unit_price: Optional[float] = None
    amount: Optional[float] = None
    tax: Optional[float] = None


class CanonicalInvoice(BaseModel):
    """Structured data extracted from an invoice; every field may be missing."""
    invoice_number: Optional[str] = None
    invoice_date: Optional[str] = None
    due_date: Optional[str] = None
    vendor_name: Optional[str] = None
    vendor_address: Optional[str] = None
    bill_to: Optional[str] = None
    ship_to: Optional[str] = None
    currency: Optional[str] = None
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    shipping: Optional[float] = None
    total: Optional[float] = None
    line_items: list[LineItem] = Field(default_factory=list)
    template_id: Optional[str] = None
    category: Optional[str] = None
