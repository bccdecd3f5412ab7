from datetime import timedelta

import pytest
from django.utils import timezone

from study.models import MemoryState
from study.scheduler import Scheduler, review_interval
from vocabulary.catalog import WordCatalog

pytestmark = pytest.mark.django_db


@pytest.fixture
def scheduler(catalog, gateway):
    return Scheduler(catalog, gateway)


class TestSelectTodayWords:

    def test_new_user_gets_first_words_in_catalog_order(self, scheduler, user):
        now = timezone.now()
        words = scheduler.select_today_words(user.id, limit=10, now=now)

        assert [w.id for w in words] == list(range(1, 11))
        states = MemoryState.objects.filter(user=user)
        assert states.count() == 10
        assert all(s.next_review_at <= now for s in states)
        assert all(s.last_seen_at == now for s in states)

    def test_second_call_does_not_duplicate_rows(self, scheduler, user):
        now = timezone.now()
        first = scheduler.select_today_words(user.id, limit=5, now=now)
        second = scheduler.select_today_words(user.id, limit=5, now=now)

        assert first == second
        assert MemoryState.objects.filter(user=user).count() == 5

    def test_not_due_words_are_skipped(self, scheduler, user):
        now = timezone.now()
        MemoryState.objects.create(user=user, word_id=1, next_review_at=now + timedelta(days=1))
        MemoryState.objects.create(user=user, word_id=2, next_review_at=now - timedelta(hours=1))

        words = scheduler.select_today_words(user.id, limit=3, now=now)

        assert [w.id for w in words] == [2, 3, 4]

    def test_touch_keeps_next_review(self, scheduler, user):
        now = timezone.now()
        due_at = now - timedelta(hours=2)
        MemoryState.objects.create(
            user=user, word_id=1, next_review_at=due_at,
            last_seen_at=now - timedelta(days=3), success_count=2,
        )

        scheduler.select_today_words(user.id, limit=1, now=now)

        state = MemoryState.objects.get(user=user, word_id=1)
        assert state.last_seen_at == now
        assert state.next_review_at == due_at
        assert state.success_count == 2

    def test_preferred_category(self, scheduler, user):
        words = scheduler.select_today_words(user.id, limit=20, category='food')
        assert [w.id for w in words] == list(range(21, 31))

    def test_non_positive_limit(self, scheduler, user):
        assert scheduler.select_today_words(user.id, limit=0) == []
        assert scheduler.select_today_words(user.id, limit=-1) == []
        assert not MemoryState.objects.filter(user=user).exists()

    def test_empty_pool(self, gateway, user):
        scheduler = Scheduler(WordCatalog(), gateway)
        assert scheduler.select_today_words(user.id, limit=10) == []

    def test_unknown_category_is_empty(self, scheduler, user):
        assert scheduler.select_today_words(user.id, category='space') == []

    def test_users_are_independent(self, scheduler, user, make_user):
        other = make_user()
        now = timezone.now()
        MemoryState.objects.create(user=other, word_id=1, next_review_at=now + timedelta(days=7))

        words = scheduler.select_today_words(user.id, limit=1, now=now)

        assert words[0].id == 1


class TestReviewInterval:

    @pytest.mark.parametrize('count, days', [(1, 1), (2, 3), (3, 7), (4, 7), (10, 7)])
    def test_ladder(self, count, days):
        assert review_interval(count) == timedelta(days=days)
