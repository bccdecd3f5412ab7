from django.urls import path
from . import views

urlpatterns = [
    path("start/", views.StartTestView.as_view()),
    path("<int:test_id>/answer/", views.SubmitAnswerView.as_view()),
    path("<int:test_id>/finish/", views.FinishTestView.as_view()),
    path("history/", views.MyTestsView.as_view()),
]
