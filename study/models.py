from django.db import models
from django.conf import settings
from django.utils import timezone


class MemoryState(models.Model):
    """Per-user, per-word spaced repetition record."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='memory_states')
    word_id = models.PositiveIntegerField(db_index=True)
    last_seen_at = models.DateTimeField(default=timezone.now)
    next_review_at = models.DateTimeField(default=timezone.now, db_index=True)
    success_count = models.PositiveIntegerField(default=0)
    fail_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Memory State'
        verbose_name_plural = 'Memory States'
        constraints = [
            models.UniqueConstraint(fields=['user', 'word_id'], name='unique_memory_state_per_word'),
        ]

    def __str__(self):
        return f"{self.user} | word {self.word_id} (+{self.success_count}/-{self.fail_count})"

    def is_due(self, now=None):
        return self.next_review_at <= (now or timezone.now())
