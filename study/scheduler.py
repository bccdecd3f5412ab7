from datetime import timedelta

from django.conf import settings
from django.utils import timezone

DEFAULT_LIMIT = settings.VOCAB_TRAINER['TODAY_WORDS_LIMIT']
REVIEW_LADDER = [timedelta(days=d) for d in settings.VOCAB_TRAINER['REVIEW_LADDER_DAYS']]
FAIL_RETRY = timedelta(hours=settings.VOCAB_TRAINER['FAIL_RETRY_HOURS'])


def review_interval(success_count: int) -> timedelta:
    """1 day after the first success, 3 after the second, 7 from then on."""
    step = min(max(success_count, 1), len(REVIEW_LADDER)) - 1
    return REVIEW_LADDER[step]


class Scheduler:
    """Picks the words a user should study today."""

    def __init__(self, catalog, gateway):
        self.catalog = catalog
        self.gateway = gateway

    def select_today_words(self, user_id, limit=DEFAULT_LIMIT, category=None, now=None):
        """
        First ``limit`` words, in catalog order, that are new to the user or
        due for review. Every selected word gets a memory state: new words
        are created due now, known ones only have ``last_seen_at`` touched.
        """
        if limit <= 0:
            return []
        pool = self.catalog.by_category(category) if category else self.catalog.all()
        if not pool:
            return []

        now = now or timezone.now()
        states = {s.word_id: s for s in self.gateway.list_memory_states(user_id)}
        available = [
            w for w in pool
            if w.id not in states or states[w.id].next_review_at <= now
        ]
        selected = available[:limit]

        for word in selected:
            self.gateway.upsert_memory_state(
                user_id, word.id,
                create={'last_seen_at': now, 'next_review_at': now},
                update={'last_seen_at': now},
            )
        return selected
