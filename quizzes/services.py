import logging
import random

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from common.exceptions import NotFound, PreconditionFailed, QuestionMismatch
from study.scheduler import FAIL_RETRY, review_interval

logger = logging.getLogger(__name__)

EN_TO_UZ = 'en_to_uz'
UZ_TO_EN = 'uz_to_en'

DEFAULT_WORD_COUNT = settings.VOCAB_TRAINER['ASSESSMENT_WORD_COUNT']
POINTS_PER_CORRECT = settings.VOCAB_TRAINER['POINTS_PER_CORRECT']


def normalize_answer(text) -> str:
    # Case and outer whitespace only; Uzbek apostrophes and diacritics are kept
    return (text or '').strip().lower()


def correct_answer_for(word, question_type) -> str:
    return word.uzbek if question_type == EN_TO_UZ else word.english


class AssessmentGenerator:
    """Builds a test: previously failed words first, random catalog words after."""

    def __init__(self, catalog, gateway, rng=None):
        self.catalog = catalog
        self.gateway = gateway
        self.rng = rng or random.Random()

    def pick_words(self, user_id, word_count):
        if word_count <= 0:
            return []

        history = self.gateway.list_memory_states(
            user_id,
            order_by=('-fail_count', '-last_seen_at'),
            limit=word_count * 2,
        )
        selected = []
        for state in history:
            if len(selected) >= word_count:
                break
            word = self.catalog.get_by_id(state.word_id)
            if state.fail_count > 0 and word is not None:
                selected.append(word)

        remaining = word_count - len(selected)
        if remaining > 0:
            taken = {w.id for w in selected}
            pool = [w for w in self.catalog.all() if w.id not in taken]
            selected.extend(self.rng.sample(pool, min(remaining, len(pool))))
        return selected

    def generate(self, user_id, type='', word_count=DEFAULT_WORD_COUNT, now=None):
        words = self.pick_words(user_id, word_count)
        with transaction.atomic():
            assessment = self.gateway.create_assessment(
                user_id=user_id,
                type=type or '',
                total_questions=len(words),
                started_at=now or timezone.now(),
            )
            questions = self.gateway.create_questions([
                {
                    'test_id': assessment.id,
                    'word_id': word.id,
                    'question_type': EN_TO_UZ if self.rng.random() < 0.5 else UZ_TO_EN,
                }
                for word in words
            ])

        logger.info('test %s created for user %s with %d questions', assessment.id, user_id, len(questions))
        by_id = {w.id: w for w in words}
        return {
            'assessment': assessment,
            'questions': [(q, by_id[q.word_id]) for q in questions],
        }


class AnswerEvaluator:
    """Grades one answer and moves the word along the review ladder."""

    def __init__(self, catalog, gateway):
        self.catalog = catalog
        self.gateway = gateway

    def submit(self, test_id, question_id, raw_answer, now=None):
        question = self.gateway.get_question(question_id)
        if question.test_id != test_id:
            raise QuestionMismatch(f"question {question_id} does not belong to test {test_id}")

        word = self.catalog.get_by_id(question.word_id)
        if word is None:
            raise NotFound(f"word {question.word_id} not found")

        correct_answer = correct_answer_for(word, question.question_type)
        is_correct = normalize_answer(raw_answer) == normalize_answer(correct_answer)
        assessment = self.gateway.get_assessment(test_id)
        now = now or timezone.now()

        with transaction.atomic():
            # a resubmission overwrites the previous answer
            self.gateway.update_question(question_id, user_answer=raw_answer, is_correct=is_correct)
            if is_correct:
                self._on_correct(assessment.user_id, word.id, now)
            else:
                self._on_wrong(assessment.user_id, word.id, now)

        return {'isCorrect': is_correct, 'correctAnswer': correct_answer}

    def _on_correct(self, user_id, word_id, now):
        state = self.gateway.upsert_memory_state(
            user_id, word_id,
            create={
                'last_seen_at': now,
                'success_count': 1,
                'next_review_at': now + review_interval(1),
            },
            increment=('success_count',),
        )
        self.gateway.update_memory_state(
            user_id, word_id, next_review_at=now + review_interval(state.success_count)
        )

    def _on_wrong(self, user_id, word_id, now):
        self.gateway.upsert_memory_state(
            user_id, word_id,
            create={
                'last_seen_at': now,
                'fail_count': 1,
                'next_review_at': now + FAIL_RETRY,
            },
            update={'next_review_at': now + FAIL_RETRY},
            increment=('fail_count',),
        )


class Finisher:

    def __init__(self, gateway):
        self.gateway = gateway

    def finish(self, test_id, now=None):
        """
        Closes a test and stores its result. Finishing twice raises
        PreconditionFailed; the first result is kept.
        """
        assessment = self.gateway.get_assessment(test_id)
        if assessment.is_finished:
            logger.warning('test %s already finished at %s', test_id, assessment.finished_at)
            raise PreconditionFailed(f"test {test_id} is already finished")

        questions = self.gateway.list_questions(test_id)
        total = len(questions)
        correct = sum(1 for q in questions if q.is_correct is True)
        percent = correct * 100 / total if total else 0
        score = correct * POINTS_PER_CORRECT

        updated = self.gateway.update_assessment(
            test_id,
            unfinished_only=True,
            finished_at=now or timezone.now(),
            correct_answers=correct,
            percent=percent,
            score=score,
        )
        if not updated:
            raise PreconditionFailed(f"test {test_id} is already finished")

        logger.info('test %s finished: %d/%d, score %d', test_id, correct, total, score)
        return {
            'testId': test_id,
            'totalQuestions': total,
            'correctAnswers': correct,
            'percent': round(percent, 2),
            'score': score,
        }
