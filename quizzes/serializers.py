from rest_framework import serializers
from vocabulary.serializers import WordSerializer
from .models import Assessment


class AssessmentSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    totalQuestions = serializers.IntegerField(source='total_questions', read_only=True)
    startedAt = serializers.DateTimeField(source='started_at', read_only=True)
    finishedAt = serializers.DateTimeField(source='finished_at', read_only=True)
    correctAnswers = serializers.IntegerField(source='correct_answers', read_only=True)
    percent = serializers.SerializerMethodField()

    class Meta:
        model = Assessment
        fields = [
            "id", "userId", "type", "totalQuestions", "startedAt",
            "finishedAt", "correctAnswers", "percent", "score",
        ]

    def get_percent(self, obj):
        return round(obj.percent, 2) if obj.percent is not None else None


def serialize_generated(result):
    """Assessment plus its questions, each carrying the full word."""
    data = AssessmentSerializer(result['assessment']).data
    data['questions'] = [
        {
            "id": question.id,
            "wordId": question.word_id,
            "questionType": question.question_type,
            "word": WordSerializer(word).data,
        }
        for question, word in result['questions']
    ]
    return data


class StartTestSerializer(serializers.Serializer):
    type = serializers.CharField(required=False, allow_blank=True, default='', max_length=50)
    wordCount = serializers.IntegerField(required=False, max_value=100)


class SubmitAnswerSerializer(serializers.Serializer):
    questionId = serializers.IntegerField()
    userAnswer = serializers.CharField(allow_blank=True, trim_whitespace=False)
