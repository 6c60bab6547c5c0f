from rest_framework import serializers

from core.querysets import split_csv
from .models import Mission


class MissionSerializer(serializers.ModelSerializer):
    """
    Serializer for missions.

    Fields:
        read-only: id, company_id, company_name, created_at, updated_at
        required on create: title, description, required_skills, budget, duration
        optional: location, is_remote, urgency, status (updates only)
    """
    company_id = serializers.IntegerField(source='company.id', read_only=True)
    company_name = serializers.CharField(source='company.company_name', read_only=True)
    required_skills = serializers.ListField(child=serializers.CharField(max_length=100), allow_empty=True)

    class Meta:
        model = Mission
        fields = [
            'id', 'company_id', 'company_name', 'title', 'description', 'required_skills',
            'budget', 'duration', 'location', 'is_remote', 'status', 'urgency',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'title': {'allow_blank': True},
            'description': {'allow_blank': True},
            'budget': {'validators': []},
            'duration': {'min_value': 0},
        }


class MissionSearchSerializer(serializers.Serializer):
    """
    Query Parameters:
        - status, urgency (exact)
        - skills: comma separated, any-of match
        - min_budget / max_budget: inclusive range
        - location: substring
        - is_remote: true / false
        - company_id
    """
    status = serializers.ChoiceField(choices=Mission.STATUS_CHOICES, required=False)
    skills = serializers.CharField(required=False)
    min_budget = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    max_budget = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    location = serializers.CharField(required=False)
    is_remote = serializers.BooleanField(required=False, allow_null=True, default=None)
    urgency = serializers.ChoiceField(choices=Mission.URGENCY_CHOICES, required=False)
    company_id = serializers.IntegerField(required=False)

    def validate_skills(self, value):
        return split_csv(value)
