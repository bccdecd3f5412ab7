from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from .catalog import get_catalog
from .serializers import WordSerializer


class WordListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        words = get_catalog().all()
        return Response(WordSerializer(words, many=True).data)


class CategoryListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({"categories": get_catalog().categories()})


class CategoryWordsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, category):
        words = get_catalog().by_category(category)
        return Response(WordSerializer(words, many=True).data)
