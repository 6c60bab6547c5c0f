from rest_framework import serializers

from core.querysets import split_csv
from .models import FreelanceProfile


class FreelanceProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for freelance profiles.

    Fields:
        read-only: id, user_id, first_name, last_name, email, is_verified, timestamps
        required on create: daily_rate, availability
        optional: skills, experience, bio, location
    """
    user_id = serializers.IntegerField(source='user.id', read_only=True)
    first_name = serializers.CharField(source='user.first_name', read_only=True)
    last_name = serializers.CharField(source='user.last_name', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    skills = serializers.ListField(child=serializers.CharField(max_length=100), required=False)

    class Meta:
        model = FreelanceProfile
        fields = [
            'id', 'user_id', 'first_name', 'last_name', 'email', 'skills', 'daily_rate',
            'availability', 'experience', 'bio', 'location', 'is_verified', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'is_verified', 'created_at', 'updated_at']


class FreelancerSearchSerializer(serializers.Serializer):
    """
    Query Parameters:
        - skills: comma separated, any-of match
        - min_rate / max_rate: inclusive daily rate range
        - location: substring
        - min_experience: years
    """
    skills = serializers.CharField(required=False)
    min_rate = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    max_rate = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    location = serializers.CharField(required=False)
    min_experience = serializers.IntegerField(required=False, min_value=0)

    def validate_skills(self, value):
        return split_csv(value)
