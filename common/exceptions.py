class VocabError(Exception):
    """Base class for learning-domain errors."""


class NotFound(VocabError):
    """Referenced user, word, question or test does not exist."""


class QuestionMismatch(NotFound):
    """The question exists but belongs to a different test."""


class PreconditionFailed(VocabError):
    """The entity is in a state that does not allow the operation."""
