from rest_framework import generics
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from common.exceptions import NotFound, PreconditionFailed
from common.gateway import PersistenceGateway
from vocabulary.catalog import get_catalog
from .models import Assessment
from .serializers import (
    AssessmentSerializer, StartTestSerializer, SubmitAnswerSerializer, serialize_generated,
)
from .services import AnswerEvaluator, AssessmentGenerator, Finisher, DEFAULT_WORD_COUNT


def _own_test(request, test_id):
    return Assessment.objects.filter(id=test_id, user=request.user).exists()


class StartTestView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = StartTestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        generator = AssessmentGenerator(get_catalog(), PersistenceGateway())
        result = generator.generate(
            request.user.id,
            type=data.get("type", ""),
            word_count=data.get("wordCount", DEFAULT_WORD_COUNT),
        )
        return Response(serialize_generated(result))


class SubmitAnswerView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, test_id):
        serializer = SubmitAnswerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        if not _own_test(request, test_id):
            return Response({"error": "Test not found"}, status=404)

        evaluator = AnswerEvaluator(get_catalog(), PersistenceGateway())
        try:
            result = evaluator.submit(
                test_id,
                serializer.validated_data["questionId"],
                serializer.validated_data["userAnswer"],
            )
        except NotFound as e:
            return Response({"error": str(e)}, status=404)
        return Response(result)


class FinishTestView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, test_id):
        if not _own_test(request, test_id):
            return Response({"error": "Test not found"}, status=404)

        try:
            result = Finisher(PersistenceGateway()).finish(test_id)
        except NotFound as e:
            return Response({"error": str(e)}, status=404)
        except PreconditionFailed as e:
            return Response({"error": str(e)}, status=409)
        return Response(result)


class MyTestsView(generics.ListAPIView):
    serializer_class = AssessmentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Assessment.objects.filter(user=self.request.user, finished_at__isnull=False)
