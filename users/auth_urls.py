from django.urls import path
from . import views

urlpatterns = [
    path('telegram/', views.TelegramAuthView.as_view()),
    path('bot/', views.BotAuthView.as_view()),
    path('me/', views.MeView.as_view()),
]
