"""In-memory English–Uzbek word catalog loaded once from words.json"""
import json
import logging
import random
from dataclasses import dataclass, asdict
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Word:
    id: int
    category: str
    english: str
    uzbek: str
    example_en: str = ''
    example_uz: str = ''

    def to_dict(self) -> dict:
        return asdict(self)


def _text(item, key, default=None) -> str:
    value = item[key] if default is None else item.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"word {item.get('id')!r}: {key} must be a string, got {value!r}")
    return value


class WordCatalog:
    """
    Read-only, ordered word list. File order is kept: the study scheduler
    relies on it to pick words deterministically.
    """

    def __init__(self, words=()):
        self._words = tuple(words)
        self._by_id = {w.id: w for w in self._words}

    @classmethod
    def load(cls, source) -> 'WordCatalog':
        """
        Build a catalog from a JSON file (list of word objects).
        A missing or broken file gives an empty catalog and a warning.
        """
        path = Path(source)
        if not path.exists():
            logger.warning('words file not found at %s, starting with an empty catalog', path)
            return cls()
        try:
            with path.open(encoding='utf-8') as fh:
                raw = json.load(fh)
            words = [
                Word(
                    id=int(item['id']),
                    category=_text(item, 'category', ''),
                    english=_text(item, 'english'),
                    uzbek=_text(item, 'uzbek'),
                    example_en=_text(item, 'example_en', ''),
                    example_uz=_text(item, 'example_uz', ''),
                )
                for item in raw
            ]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning('could not load words from %s: %s', path, e)
            return cls()

        logger.info('Loaded %d words from %s', len(words), path)
        return cls(words)

    def __len__(self):
        return len(self._words)

    def all(self) -> list:
        return list(self._words)

    def get_by_id(self, word_id):
        return self._by_id.get(word_id)

    def by_category(self, category) -> list:
        return [w for w in self._words if w.category == category]

    def categories(self) -> list:
        seen = {}
        for w in self._words:
            seen.setdefault(w.category, None)
        return list(seen)

    def random_sample(self, n, category=None, rng=None) -> list:
        """Up to ``n`` distinct words, uniformly drawn."""
        if n <= 0:
            return []
        pool = self.by_category(category) if category else list(self._words)
        rng = rng or random
        return rng.sample(pool, min(n, len(pool)))


_catalog = WordCatalog()


def get_catalog() -> WordCatalog:
    return _catalog


def set_catalog(catalog: WordCatalog):
    global _catalog
    _catalog = catalog
