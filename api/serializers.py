from rest_framework import serializers
from wiki.models import ContentFormat


class ContentPreviewSerializer(serializers.Serializer):
    content = serializers.CharField(allow_blank=True, trim_whitespace=False)
    content_format = serializers.ChoiceField(choices=ContentFormat.choices, required=False, allow_null=True)
    autolink = serializers.BooleanField(required=False, default=True)

    def validate_content(self, value):
        if len(value) > 200_000:
            raise serializers.ValidationError("Content is too long to preview.")
        return value
