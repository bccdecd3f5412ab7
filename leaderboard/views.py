from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from common.gateway import PersistenceGateway
from .services import ScoreAggregator


class LeaderboardView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        range_name = request.query_params.get("range", "week")
        board = ScoreAggregator(PersistenceGateway()).get_leaderboard(request.user.id, range_name)
        return Response(board)
