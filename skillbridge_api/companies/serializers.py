from rest_framework import serializers

from .models import CompanyProfile


class CompanyProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for company profiles.

    Fields:
        read-only: id, user_id, email, is_verified, created_at, updated_at
        required on create: company_name, industry, size
        optional: description, website, location
    """
    user_id = serializers.IntegerField(source='user.id', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = CompanyProfile
        fields = [
            'id', 'user_id', 'email', 'company_name', 'industry', 'size',
            'description', 'website', 'location', 'is_verified', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'user_id', 'email', 'is_verified', 'created_at', 'updated_at']
        extra_kwargs = {
            'company_name': {'allow_blank': True},
            'industry': {'allow_blank': True},
        }


class CompanySearchSerializer(serializers.Serializer):
    industry = serializers.CharField(required=False)
    size = serializers.ChoiceField(choices=CompanyProfile.SIZE_CHOICES, required=False)
    location = serializers.CharField(required=False)


class CompanyStatsSerializer(serializers.Serializer):
    total_missions = serializers.IntegerField()
    open_missions = serializers.IntegerField()
    total_applications = serializers.IntegerField()
    average_applications_per_mission = serializers.FloatField()
