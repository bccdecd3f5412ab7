from datetime import datetime, timedelta, timezone as dt_timezone

from django.conf import settings
from django.db.models import Count, IntegerField, Max, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

RANGE_WINDOWS = {
    'week': timedelta(days=7),
    'month': timedelta(days=30),
}
EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)
LEADERBOARD_SIZE = settings.VOCAB_TRAINER['LEADERBOARD_SIZE']


def window_start(range_name, now):
    """Start of the ranking window; anything but week/month is all-time."""
    window = RANGE_WINDOWS.get(range_name)
    return now - window if window else EPOCH


class ScoreAggregator:
    """
    Ranks users by the summed score of their finished tests started inside
    the window. Equal totals are ordered by who reached the total first
    (earliest last finish), then by user id, so repeated queries agree.
    """

    def __init__(self, gateway, size=LEADERBOARD_SIZE):
        self.gateway = gateway
        self.size = size

    def get_leaderboard(self, user_id, range_name='week', now=None):
        now = now or timezone.now()
        finished = self.gateway.query_assessments(
            finished_at__isnull=False,
            started_at__gte=window_start(range_name, now),
        )

        rows = (
            finished
            .values('user_id', 'user__telegram_id', 'user__username', 'user__full_name')
            .annotate(
                total_score=Coalesce(Sum('score'), Value(0), output_field=IntegerField()),
                test_count=Count('id'),
                reached_at=Max('finished_at'),
            )
            .order_by('-total_score', 'reached_at', 'user_id')[:self.size]
        )

        board = []
        for i, row in enumerate(rows, 1):
            board.append({
                'id': row['user_id'],
                'telegramId': str(row['user__telegram_id']) if row['user__telegram_id'] is not None else None,
                'username': row['user__username'],
                'fullName': row['user__full_name'],
                'totalScore': row['total_score'],
                'testCount': row['test_count'],
                'position': i,
            })

        me = next((b for b in board if b['id'] == user_id), None)
        if me:
            current = {'position': me['position'], 'totalScore': me['totalScore']}
        else:
            own = finished.filter(user_id=user_id).aggregate(
                total=Coalesce(Sum('score'), Value(0), output_field=IntegerField())
            )['total']
            current = {'position': None, 'totalScore': own}

        return {
            'leaderboard': board,
            'currentUser': current,
            'range': range_name,
        }
