"""Built-in invoice templates for common vendors and formats.

Patterns are written in canonical form (lower case, punctuation replaced by
spaces) so they line up with normalized OCR text. Vendor patterns are also
checked against the raw extracted vendor name, which keeps characters such
as the ampersand in "at&t".
"""

from ..utils.schemas import InvoiceTemplate


BUILT_IN_TEMPLATES = [
    # Kept short so a typical order page ("amazon com ... order total ... sold by
    # amazon") clears the threshold. Dropped aliases and labels that rarely
    # appear on order pages: "amazon business", "amzn com", "order number",
    # "invoice #", "amount due", "invoice date". Each extra miss lowers the
    # score of every Amazon order page.
    InvoiceTemplate(
        id="amazon-business",
        name="Amazon Business",
        category="E-commerce",
        vendor_patterns=["amazon", "amazon com"],
        field_patterns={
            "invoice_number": ["order"],
            "total": ["order total"],
            "date": ["order date"],
        },
        layout_indicators=[
            "sold by amazon",
            "billing address",
            "order summary",
            "payment method",
        ],
        confidence_threshold=0.7,
    ),
    InvoiceTemplate(
        id="microsoft-office",
        name="Microsoft Office 365",
        category="Software/SaaS",
        vendor_patterns=["microsoft", "microsoft corporation", "office 365", "azure"],
        field_patterns={
            "invoice_number": ["invoice number", "invoice"],
            "total": ["total amount", "amount due", "total"],
            "date": ["invoice date", "billing period"],
        },
        layout_indicators=[
            "microsoft corporation",
            "billing period",
            "subscription",
            "service period",
        ],
        confidence_threshold=0.75,
    ),
    InvoiceTemplate(
        id="google-workspace",
        name="Google Workspace",
        category="Software/SaaS",
        vendor_patterns=["google", "google llc", "google workspace", "gsuite"],
        field_patterns={
            "invoice_number": ["invoice number", "invoice id"],
            "total": ["total", "amount due"],
            "date": ["invoice date", "service period"],
        },
        layout_indicators=[
            "google llc",
            "workspace",
            "service period",
            "billing account",
        ],
        confidence_threshold=0.75,
    ),
    InvoiceTemplate(
        id="aws-invoice",
        name="Amazon Web Services",
        category="Cloud/Infrastructure",
        vendor_patterns=["amazon web services", "aws", "amazon com inc"],
        field_patterns={
            "invoice_number": ["invoice number", "invoice"],
            "total": ["total amount due", "amount due", "invoice total"],
            "date": ["invoice date", "billing period"],
        },
        layout_indicators=[
            "amazon web services",
            "usage charges",
            "billing period",
            "aws account",
        ],
        confidence_threshold=0.8,
    ),
    InvoiceTemplate(
        id="utility-bill",
        name="Utility Bill",
        category="Utilities",
        vendor_patterns=[
            "electric",
            "electricity",
            "gas company",
            "water department",
            "utility",
        ],
        field_patterns={
            "invoice_number": ["account number", "bill number", "reference"],
            "total": ["amount due", "total amount", "balance due"],
            "date": ["bill date", "service period", "due date"],
        },
        layout_indicators=[
            "account number",
            "service period",
            "meter reading",
            "previous balance",
        ],
        confidence_threshold=0.65,
    ),
    InvoiceTemplate(
        id="telecom-invoice",
        name="Telecommunications",
        category="Telecommunications",
        vendor_patterns=["verizon", "at&t", "t mobile", "sprint", "telecom", "wireless"],
        field_patterns={
            "invoice_number": ["account number", "invoice number"],
            "total": ["total due", "amount due", "current charges"],
            "date": ["bill date", "service period"],
        },
        layout_indicators=[
            "wireless service",
            "monthly charges",
            "data usage",
            "phone number",
        ],
        confidence_threshold=0.7,
    ),
    InvoiceTemplate(
        id="generic-business",
        name="Generic Business Invoice",
        category="General",
        vendor_patterns=["invoice", "bill", "statement"],
        field_patterns={
            "invoice_number": ["invoice number", "invoice", "inv", "number"],
            "total": ["total", "amount due", "balance due", "grand total"],
            "date": ["date", "invoice date", "bill date"],
        },
        layout_indicators=[
            "bill to",
            "ship to",
            "description",
            "quantity",
            "unit price",
        ],
        confidence_threshold=0.5,
    ),
]
