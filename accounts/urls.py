from django.urls import path
from rest_framework.authtoken.views import obtain_auth_token

from .views import RegisterView, MeView

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/token", obtain_auth_token, name="auth-token"),
    path("users/me", MeView.as_view(), name="user-me"),
]
