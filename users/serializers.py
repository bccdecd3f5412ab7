from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken
from .models import User, UserSettings


class UserSerializer(serializers.ModelSerializer):
    telegramId = serializers.SerializerMethodField()
    fullName = serializers.CharField(source='full_name', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'telegramId', 'username', 'fullName']

    def get_telegramId(self, obj):
        # BigInteger -> string, JS clients lose precision otherwise
        return str(obj.telegram_id) if obj.telegram_id is not None else None


class UserSettingsSerializer(serializers.ModelSerializer):
    preferredCategory = serializers.CharField(
        source='preferred_category', required=False, allow_null=True, allow_blank=True
    )
    dailyWords = serializers.IntegerField(
        source='daily_words', required=False, min_value=1, max_value=100
    )

    class Meta:
        model = UserSettings
        fields = ['preferredCategory', 'direction', 'dailyWords']

    def validate_preferredCategory(self, value):
        return value or None


class ProfileSerializer(UserSerializer):
    settings = serializers.SerializerMethodField()
    lastSeenAt = serializers.DateTimeField(source='last_seen_at', read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['lastSeenAt', 'settings']

    def get_settings(self, obj):
        return UserSettingsSerializer(obj.learning_settings).data


class BotAuthSerializer(serializers.Serializer):
    telegramId = serializers.IntegerField()
    username = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    firstName = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    lastName = serializers.CharField(required=False, allow_blank=True, allow_null=True)


def token_response(user):
    tokens = RefreshToken.for_user(user)
    return {
        'token': str(tokens.access_token),
        'refresh': str(tokens),
        'user': UserSerializer(user).data,
    }
