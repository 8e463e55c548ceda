from .integrity import VocabularyReport, check_vocabulary
from .vocabulary import Vocabulary, default_vocabulary

__all__ = [
    "Vocabulary",
    "VocabularyReport",
    "check_vocabulary",
    "default_vocabulary",
]
