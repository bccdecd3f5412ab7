"""
Persistence gateway: the only place the learning services touch the ORM.

Contract
--------
* Single-entity lookups raise ``common.exceptions.NotFound`` for unknown ids.
* ``upsert_memory_state`` is an atomic insert-or-update keyed by
  ``(user_id, word_id)``. Counter increments run in the database
  (``F() + 1``) inside the same transaction, so concurrent writers converge
  on one row and never lose an increment.
* Database errors are not caught here; they reach the caller unchanged.
"""
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from study.models import MemoryState
from quizzes.models import Assessment, Question
from .exceptions import NotFound


class PersistenceGateway:

    # ── Memory states ──

    def upsert_memory_state(self, user_id, word_id, create, update=None, increment=()):
        """
        Insert ``create`` for a missing row, otherwise apply ``update`` and
        bump every field named in ``increment`` by one.
        Returns the row as stored after the write.
        """
        qs = MemoryState.objects.filter(user_id=user_id, word_id=word_id)
        changes = dict(update or {})
        for field in increment:
            changes[field] = F(field) + 1
        if changes:
            changes['updated_at'] = timezone.now()

        with transaction.atomic():
            if changes:
                if qs.update(**changes):
                    return qs.get()
            elif qs.exists():
                return qs.get()
            try:
                with transaction.atomic():
                    return MemoryState.objects.create(user_id=user_id, word_id=word_id, **create)
            except IntegrityError:
                # lost the insert race: the row exists now
                if changes:
                    qs.update(**changes)
                return qs.get()

    def update_memory_state(self, user_id, word_id, **patch):
        patch['updated_at'] = timezone.now()
        if not MemoryState.objects.filter(user_id=user_id, word_id=word_id).update(**patch):
            raise NotFound(f"memory state for user {user_id}, word {word_id} not found")

    def list_memory_states(self, user_id, filters=None, order_by=(), limit=None):
        qs = MemoryState.objects.filter(user_id=user_id, **(filters or {}))
        if order_by:
            qs = qs.order_by(*order_by)
        if limit is not None:
            qs = qs[:max(limit, 0)]
        return list(qs)

    # ── Assessments ──

    def create_assessment(self, **fields):
        return Assessment.objects.create(**fields)

    def create_questions(self, batch):
        with transaction.atomic():
            return [Question.objects.create(**fields) for fields in batch]

    def get_question(self, question_id):
        try:
            return Question.objects.get(id=question_id)
        except Question.DoesNotExist:
            raise NotFound(f"question {question_id} not found")

    def update_question(self, question_id, **patch):
        if not Question.objects.filter(id=question_id).update(**patch):
            raise NotFound(f"question {question_id} not found")

    def list_questions(self, test_id):
        return list(Question.objects.filter(test_id=test_id).order_by('id'))

    def get_assessment(self, test_id):
        try:
            return Assessment.objects.get(id=test_id)
        except Assessment.DoesNotExist:
            raise NotFound(f"test {test_id} not found")

    def update_assessment(self, test_id, unfinished_only=False, **patch):
        """
        Returns the number of rows written; with ``unfinished_only`` a finished
        assessment is left untouched and 0 is returned.
        """
        qs = Assessment.objects.filter(id=test_id)
        if unfinished_only:
            qs = qs.filter(finished_at__isnull=True)
        updated = qs.update(**patch)
        if not updated and not Assessment.objects.filter(id=test_id).exists():
            raise NotFound(f"test {test_id} not found")
        return updated

    def query_assessments(self, **filters):
        return Assessment.objects.filter(**filters)
