from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.utils import timezone
from common.gateway import PersistenceGateway
from vocabulary.catalog import get_catalog
from vocabulary.serializers import WordSerializer
from .scheduler import Scheduler
from .serializers import MemoryStateSerializer


class TodayWordsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        prefs = request.user.learning_settings
        limit = request.query_params.get("limit")
        try:
            limit = int(limit) if limit else prefs.daily_words
        except ValueError:
            return Response({"error": "limit must be an integer"}, status=400)

        scheduler = Scheduler(get_catalog(), PersistenceGateway())
        words = scheduler.select_today_words(
            request.user.id, limit=limit, category=prefs.preferred_category
        )
        return Response(WordSerializer(words, many=True).data)


class ProgressView(APIView):
    """Foydalanuvchining so'zlar bo'yicha holati"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        now = timezone.now()
        states = PersistenceGateway().list_memory_states(
            request.user.id, order_by=('next_review_at',)
        )
        return Response({
            "total": len(states),
            "due": sum(1 for s in states if s.is_due(now)),
            "learned": sum(1 for s in states if s.success_count > 0),
            "words": MemoryStateSerializer(states, many=True).data,
        })
