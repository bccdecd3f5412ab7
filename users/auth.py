"""Telegram WebApp initData verification and user lookup"""
import hashlib
import hmac
import json
from urllib.parse import parse_qsl

from django.utils import timezone


def verify_telegram_webapp(init_data: str, bot_token: str) -> dict | None:
    """
    Verify Telegram Web App initData.
    Returns user dict if valid, None if invalid.
    """
    if not init_data or not bot_token:
        return None

    parts = dict(parse_qsl(init_data, keep_blank_values=True))

    hash_value = parts.pop('hash', None)
    if not hash_value:
        return None

    data_check_string = '\n'.join(
        f"{k}={v}" for k, v in sorted(parts.items())
    )

    secret_key = hmac.new(
        b'WebAppData',
        bot_token.encode('utf-8'),
        hashlib.sha256
    ).digest()

    computed_hash = hmac.new(
        secret_key,
        data_check_string.encode('utf-8'),
        hashlib.sha256
    ).hexdigest()

    if not hmac.compare_digest(computed_hash, hash_value):
        return None

    try:
        user = json.loads(parts.get('user', '{}'))
    except ValueError:
        return None
    return user if isinstance(user, dict) else None


def get_or_create_telegram_user(telegram_id, username='', first_name='', last_name=''):
    """
    Get or create a user by Telegram id.
    Returns (user, created) tuple; returning users get last_seen_at bumped.
    """
    from users.models import User, UserSettings

    full_name = f"{first_name or ''} {last_name or ''}".strip()

    user = User.objects.filter(telegram_id=telegram_id).first()
    if user:
        user.last_seen_at = timezone.now()
        user.save(update_fields=['last_seen_at'])
        return user, False

    # New user: pick a free username
    base_username = (username or f'tg_{telegram_id}').lower()
    final_username = base_username
    counter = 1
    while User.objects.filter(username=final_username).exists():
        final_username = f"{base_username}_{counter}"
        counter += 1

    user = User.objects.create_user(
        username=final_username,
        first_name=first_name or '',
        last_name=last_name or '',
        full_name=full_name,
        telegram_id=telegram_id,
        password=None,
    )
    UserSettings.objects.create(user=user)
    return user, True
