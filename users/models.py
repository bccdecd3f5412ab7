from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    telegram_id = models.BigIntegerField(null=True, blank=True, unique=True)
    full_name = models.CharField(max_length=200, blank=True)
    last_seen_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username

    @property
    def learning_settings(self):
        settings_obj, _ = UserSettings.objects.get_or_create(user=self)
        return settings_obj


class UserSettings(models.Model):
    DIRECTION_CHOICES = [
        ('mixed', 'Mixed'),
        ('en_to_uz', 'English → Uzbek'),
        ('uz_to_en', 'Uzbek → English'),
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='settings')
    preferred_category = models.CharField(max_length=100, null=True, blank=True)
    direction = models.CharField(max_length=10, choices=DIRECTION_CHOICES, default='mixed')
    daily_words = models.PositiveSmallIntegerField(default=10)

    class Meta:
        verbose_name = 'User Settings'
        verbose_name_plural = 'User Settings'

    def __str__(self):
        return f"{self.user} settings"
