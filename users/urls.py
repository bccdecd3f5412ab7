from django.urls import path
from . import views

urlpatterns = [
    path('me/', views.ProfileView.as_view()),
    path('settings/', views.SettingsView.as_view()),
]
