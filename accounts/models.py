from django.contrib.auth.models import AbstractUser
from django.db import models

class User(AbstractUser):
    """
    Auth principal for the application.

    Groups reference users as organizers; memberships join users to groups.
    """
    email = models.EmailField(unique=True)

    def __str__(self):
        return self.username

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
