"""Tests for loading custom templates from JSON."""

import json

import pytest
from pydantic import ValidationError

from invoice_templates.recognition import TemplateRecognitionService
from invoice_templates.utils.template_loader import TemplateFileError, load_templates


CUSTOM_TEMPLATE = {
    "id": "acme-supplies",
    "name": "Acme Supplies",
    "category": "Office Supplies",
    "vendor_patterns": ["acme supplies", "acme"],
    "field_patterns": {"total": ["amount payable"], "date": ["dispatch date"]},
    "layout_indicators": ["goods dispatched", "returns policy"],
    "confidence_threshold": 0.6,
}


def _write(tmp_path, data):
    path = tmp_path / "templates.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_list(tmp_path):
    templates = load_templates(_write(tmp_path, [CUSTOM_TEMPLATE]))

    assert len(templates) == 1
    assert templates[0].id == "acme-supplies"
    assert templates[0].field_patterns["total"] == ("amount payable",)


def test_load_wrapped_object(tmp_path):
    templates = load_templates(_write(tmp_path, {"templates": [CUSTOM_TEMPLATE]}))

    assert [t.id for t in templates] == ["acme-supplies"]


@pytest.mark.parametrize("data", [{"other": []}, "just a string", 42])
def test_unexpected_structure(tmp_path, data):
    with pytest.raises(TemplateFileError):
        load_templates(_write(tmp_path, data))


def test_invalid_template(tmp_path):
    bad = dict(CUSTOM_TEMPLATE)
    del bad["id"]

    with pytest.raises(ValidationError):
        load_templates(_write(tmp_path, [CUSTOM_TEMPLATE, bad]))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_templates(tmp_path / "missing.json")


def test_service_from_config_with_path(tmp_path):
    service = TemplateRecognitionService.from_config(
        str(_write(tmp_path, [CUSTOM_TEMPLATE]))
    )

    assert service.get_all_templates()[-1].id == "acme-supplies"

    match = service.recognize_template(
        "ACME SUPPLIES LTD - Goods dispatched 01/02. Amount payable: 10.00. "
        "Dispatch date 01/02. Returns policy applies."
    )
    assert match.template_id == "acme-supplies"
    assert service.categorize_invoice(match) == "Office Supplies"


def test_service_from_config_without_path(monkeypatch):
    monkeypatch.setattr(
        "invoice_templates.recognition.recognizer.INVOICE_TEMPLATES_PATH", None
    )

    service = TemplateRecognitionService.from_config()

    assert len(service.get_all_templates()) == 7
