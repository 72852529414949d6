"""Loading of custom invoice templates from JSON files."""

import json
import logging
from pathlib import Path
from typing import List, Union
from pydantic import ValidationError

from .schemas import InvoiceTemplate

logger = logging.getLogger(__name__)


class TemplateFileError(ValueError):
    """Raised when a template file does not have the expected structure."""


def load_templates(path: Union[str, Path]) -> List[InvoiceTemplate]:
    """
    Load template definitions from a JSON file.

    The file holds either a list of template objects or an object with a
    ``"templates"`` list, using the same keys as ``InvoiceTemplate``.

    Args:
        path: Path to the JSON file

    Returns:
        Validated templates in file order
    """
    path = Path(path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("templates")

    if not isinstance(data, list):
        logger.error("Template file %s has no template list", path)
        raise TemplateFileError(
            f"{path}: expected a list of templates or an object with a 'templates' list"
        )

    templates = []
    for index, entry in enumerate(data):
        try:
            templates.append(InvoiceTemplate.model_validate(entry))
        except ValidationError:
            logger.error("Invalid template at index %d in %s", index, path)
            raise

    logger.info("Loaded %d templates from %s", len(templates), path)
    return templates
