"""Configuration settings for the invoice template recognition engine."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# Optional JSON file with custom templates, loaded on top of the built-in set
INVOICE_TEMPLATES_PATH = os.getenv("INVOICE_TEMPLATES_PATH") or None

# Log level used by the command-line entry point
LOG_LEVEL = os.getenv("INVOICE_TEMPLATES_LOG_LEVEL", "WARNING").upper()


# Scoring weights (must sum to 1.0)
class RecognitionWeights:
    VENDOR = 0.4
    FIELD = 0.3
    LAYOUT = 0.3

    # Every signal always counts towards the denominator, even when a
    # template defines no patterns for it
    TOTAL = VENDOR + FIELD + LAYOUT


# Fallback categories keyed by vendor-name keywords, checked in order
FALLBACK_CATEGORY_KEYWORDS = [
    (("amazon", "aws"), "E-commerce/Cloud"),
    (("microsoft", "google"), "Software/SaaS"),
    (("electric", "gas", "water"), "Utilities"),
    (("verizon", "at&t", "wireless"), "Telecommunications"),
]

DEFAULT_CATEGORY = "General"
