from django.urls import path
from . import views

urlpatterns = [
    path("", views.WordListView.as_view()),
    path("categories/", views.CategoryListView.as_view()),
    path("category/<str:category>/", views.CategoryWordsView.as_view()),
]
