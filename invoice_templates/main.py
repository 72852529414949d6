"""Main entry point for the invoice template recognition engine."""

import sys
import json
import logging
import argparse
from typing import Optional

from .config import LOG_LEVEL
from .recognition import TemplateRecognitionService
from .utils.schemas import CanonicalInvoice


def recognize_text(
    service: TemplateRecognitionService,
    ocr_text: str,
    vendor_name: Optional[str] = None,
) -> dict:
    """
    Recognize a single invoice text.

    Args:
        service: Recognition service to use
        ocr_text: Raw OCR text
        vendor_name: Extracted vendor name, if known

    Returns:
        Result dictionary with the match and derived category
    """
    extracted = CanonicalInvoice(vendor_name=vendor_name)
    invoice, match = service.apply_to_invoice(ocr_text, extracted)

    return {
        "template_match": match.model_dump() if match else None,
        "category": invoice.category,
        "scores": dict(service.score_templates(ocr_text, extracted)),
    }


def print_summary(result: dict) -> None:
    """Print a human-readable recognition summary."""
    match = result["template_match"]

    if match:
        print(f"\n🔗 Template: {match['template_name']} ({match['template_id']})")
        print(f"📈 Confidence: {match['confidence']:.0%}")
        print(f"🧩 Matched patterns: {len(match['matched_patterns'])}")
        for pattern in match["matched_patterns"]:
            print(f"   - {pattern}")
    else:
        print("\n⚠️  No template matched")

    print(f"🏷️  Category: {result['category']}")


def print_templates(service: TemplateRecognitionService) -> None:
    """Print the template catalogue."""
    templates = service.get_all_templates()
    print(f"\n📋 {len(templates)} templates:")
    for template in templates:
        print(
            f"   {template.id:<20} {template.name:<28} "
            f"{template.category:<22} threshold {template.confidence_threshold:.2f}"
        )


def main(argv=None) -> int:
    """Main entry point with CLI support."""
    parser = argparse.ArgumentParser(
        description="Invoice Template Recognition Engine"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file", "-f",
        help="Read OCR text from a file"
    )
    source.add_argument(
        "--text", "-t",
        help="OCR text to recognize"
    )
    parser.add_argument(
        "--vendor",
        help="Extracted vendor name"
    )
    parser.add_argument(
        "--templates",
        help="JSON file with custom templates (default: INVOICE_TEMPLATES_PATH)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available templates"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    try:
        service = TemplateRecognitionService.from_config(args.templates)

        if args.list:
            print_templates(service)
            return 0

        if args.file:
            with open(args.file, "r", encoding="utf-8") as f:
                ocr_text = f.read()
        elif args.text is not None:
            ocr_text = args.text
        else:
            ocr_text = sys.stdin.read()

        result = recognize_text(service, ocr_text, args.vendor)
    except (OSError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print_summary(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
