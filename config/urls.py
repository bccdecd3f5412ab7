from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenRefreshView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('users.auth_urls')),
    path('api/users/', include('users.urls')),
    path('api/words/', include('vocabulary.urls')),
    path('api/study/', include('study.urls')),
    path('api/tests/', include('quizzes.urls')),
    path('api/leaderboard/', include('leaderboard.urls')),
    path('api/token/refresh/', TokenRefreshView.as_view()),
]
