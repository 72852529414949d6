"""Template recognition: rule store, scoring and selection."""

from .builtin_templates import BUILT_IN_TEMPLATES
from .template_store import TemplateStore
from .scoring import TemplateScorer
from .recognizer import TemplateRecognitionService

__all__ = [
    "BUILT_IN_TEMPLATES",
    "TemplateStore",
    "TemplateScorer",
    "TemplateRecognitionService",
]
