from django.db import models
from django.conf import settings
from django.utils import timezone


class Assessment(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='assessments')
    type = models.CharField(max_length=50, blank=True)
    total_questions = models.PositiveSmallIntegerField(default=0)
    started_at = models.DateTimeField(default=timezone.now, db_index=True)
    finished_at = models.DateTimeField(null=True, blank=True, db_index=True)
    correct_answers = models.PositiveSmallIntegerField(null=True, blank=True)
    percent = models.FloatField(null=True, blank=True)
    score = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        ordering = ['-started_at']

    def __str__(self):
        score = self.score if self.score is not None else '—'
        return f"{self.user} | {self.type or 'test'} | Score {score}"

    @property
    def is_finished(self):
        return self.finished_at is not None


class Question(models.Model):
    TYPE_CHOICES = [
        ('en_to_uz', 'English → Uzbek'),
        ('uz_to_en', 'Uzbek → English'),
    ]

    test = models.ForeignKey(Assessment, on_delete=models.CASCADE, related_name='questions')
    word_id = models.PositiveIntegerField()
    question_type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    user_answer = models.TextField(null=True, blank=True)
    is_correct = models.BooleanField(null=True, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"Q{self.id} word {self.word_id} ({self.question_type})"
