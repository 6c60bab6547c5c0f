from rest_framework import serializers


class SkillSearchSerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default='')
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100, default=10)


class SkillValidationSerializer(serializers.Serializer):
    skills = serializers.ListField(child=serializers.CharField(), allow_empty=True)
