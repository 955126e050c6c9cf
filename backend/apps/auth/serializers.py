from rest_framework import serializers

from apps.users.models import Role


class LoginRequestSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    # any string: an unknown role simply matches no account
    role = serializers.CharField()


class ChangePasswordRequestSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(write_only=True, trim_whitespace=False)
    newPassword = serializers.CharField(write_only=True, trim_whitespace=False)


class CreateUserRequestSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    role = serializers.ChoiceField(choices=Role.choices)


class UserProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()


class CreatedUserSerializer(UserProfileSerializer):
    created_at = serializers.DateTimeField(allow_null=True)


class SessionIdentitySerializer(serializers.Serializer):
    userId = serializers.IntegerField()
    username = serializers.CharField()
    role = serializers.CharField()


class LoginResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    user = UserProfileSerializer()


class VerifyResponseSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    user = SessionIdentitySerializer()


class CreateUserResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    user = CreatedUserSerializer()


class MessageResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
