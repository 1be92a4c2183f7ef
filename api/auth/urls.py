"""
URL configuration for account endpoints.
"""

from django.urls import path

from api.auth import views

urlpatterns = [
    path("register", views.RegisterView.as_view(), name="register"),
    path("login", views.LoginView.as_view(), name="login"),
    path("me", views.MeView.as_view(), name="me"),
]
