from rest_framework import serializers


class WordSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    category = serializers.CharField()
    english = serializers.CharField()
    uzbek = serializers.CharField()
    example_en = serializers.CharField(allow_blank=True)
    example_uz = serializers.CharField(allow_blank=True)
