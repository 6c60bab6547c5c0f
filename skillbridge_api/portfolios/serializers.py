from rest_framework import serializers

from core.querysets import split_csv
from .models import PortfolioProject


class PortfolioProjectSerializer(serializers.ModelSerializer):
    freelancer_id = serializers.IntegerField(read_only=True)
    freelancer_name = serializers.CharField(source='freelancer.full_name', read_only=True)
    technologies = serializers.ListField(child=serializers.CharField(max_length=100), allow_empty=True)

    class Meta:
        model = PortfolioProject
        fields = [
            'id', 'freelancer_id', 'freelancer_name', 'title', 'description', 'technologies',
            'image_url', 'project_url', 'github_url', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'title': {'allow_blank': True},
            'description': {'allow_blank': True},
        }


class PortfolioSearchSerializer(serializers.Serializer):
    """
    Query Parameters:
        - technologies: comma separated, any-of match
        - freelancer_id
    """
    technologies = serializers.CharField(required=False)
    freelancer_id = serializers.IntegerField(required=False)

    def validate_technologies(self, value):
        return split_csv(value)
