from django.contrib.auth import password_validation
from rest_framework import serializers

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Authenticated user's own profile. Includes contact fields.
    """
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ("id", "firstName", "lastName", "email", "username")
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """
    Public-facing user summary. Do NOT include email here.
    """
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ("id", "firstName", "lastName")
        read_only_fields = fields


class RegisterSerializer(serializers.ModelSerializer):
    """
    Registration serializer. Password is validated with Django's validators.
    """
    firstName = serializers.CharField(source="first_name", max_length=150)
    lastName = serializers.CharField(source="last_name", max_length=150)
    password = serializers.CharField(write_only=True)

    class Meta:
        model = User
        fields = ("id", "username", "firstName", "lastName", "email", "password")
        read_only_fields = ("id",)

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User with that email already exists")
        return value.lower()

    def validate_password(self, value):
        password_validation.validate_password(value)
        return value

    def create(self, validated_data):
        password = validated_data.pop("password")
        user = User(**validated_data)
        user.set_password(password)
        user.save()
        return user
