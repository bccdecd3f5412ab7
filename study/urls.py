from django.urls import path
from . import views

urlpatterns = [
    path("today/", views.TodayWordsView.as_view()),
    path("progress/", views.ProgressView.as_view()),
]
