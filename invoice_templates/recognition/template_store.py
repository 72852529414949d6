"""Ordered, id-keyed store of invoice templates."""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

from ..utils.schemas import InvoiceTemplate

logger = logging.getLogger(__name__)

TemplateLike = Union[InvoiceTemplate, Mapping]


class TemplateStore:
    """
    Templates keyed by id, iterated in insertion order.

    Replacing a template keeps its original position, so store order stays a
    stable tie-break for recognition. Not thread-safe: callers that mutate the
    store from several threads must synchronise themselves.
    """

    def __init__(self, templates: Iterable[TemplateLike] = ()):
        self._templates: Dict[str, InvoiceTemplate] = {}
        for template in templates:
            self.add(template)

    @staticmethod
    def _coerce(template: TemplateLike) -> InvoiceTemplate:
        if isinstance(template, InvoiceTemplate):
            return template
        return InvoiceTemplate.model_validate(template)

    def add(self, template: TemplateLike) -> None:
        """Add a template, replacing in place any template with the same id."""
        template = self._coerce(template)
        replaced = template.id in self._templates

        # Assigning to an existing key keeps its position in a dict
        self._templates[template.id] = template

        logger.info(
            "%s template '%s' (%s)",
            "Replaced" if replaced else "Added",
            template.id,
            template.category,
        )

    def remove(self, template_id: str) -> bool:
        """Remove a template by id. Returns False if it was not present."""
        if self._templates.pop(template_id, None) is None:
            return False
        logger.info("Removed template '%s'", template_id)
        return True

    def get(self, template_id: str) -> Optional[InvoiceTemplate]:
        return self._templates.get(template_id)

    def all(self) -> List[InvoiceTemplate]:
        """Return a copy of the templates in store order."""
        return list(self._templates.values())

    def by_category(self, category: str) -> List[InvoiceTemplate]:
        """Return templates whose category equals ``category`` exactly."""
        return [t for t in self._templates.values() if t.category == category]

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[InvoiceTemplate]:
        return iter(self.all())

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates
