from rest_framework import serializers
from vocabulary.catalog import get_catalog
from vocabulary.serializers import WordSerializer
from .models import MemoryState


class MemoryStateSerializer(serializers.ModelSerializer):
    wordId = serializers.IntegerField(source='word_id', read_only=True)
    lastSeenAt = serializers.DateTimeField(source='last_seen_at', read_only=True)
    nextReviewAt = serializers.DateTimeField(source='next_review_at', read_only=True)
    successCount = serializers.IntegerField(source='success_count', read_only=True)
    failCount = serializers.IntegerField(source='fail_count', read_only=True)
    word = serializers.SerializerMethodField()

    class Meta:
        model = MemoryState
        fields = ['wordId', 'lastSeenAt', 'nextReviewAt', 'successCount', 'failCount', 'word']

    def get_word(self, obj):
        catalog = self.context.get('catalog') or get_catalog()
        word = catalog.get_by_id(obj.word_id)
        return WordSerializer(word).data if word else None
