from rest_framework import serializers

from .models import Application
from .services import SORTABLE_FIELDS


class ApplicationSerializer(serializers.ModelSerializer):
    """
    Serializer for mission applications.

    Fields:
        read-only: id, mission_title, freelancer_id, freelancer_name, company_id, company_name, timestamps
        required on create: mission_id, proposal, proposed_rate
        optional: estimated_duration, status (updates only)
    """
    mission_id = serializers.IntegerField()
    mission_title = serializers.CharField(source='mission.title', read_only=True)
    freelancer_id = serializers.IntegerField(read_only=True)
    freelancer_name = serializers.CharField(source='freelancer.full_name', read_only=True)
    company_id = serializers.IntegerField(read_only=True)
    company_name = serializers.CharField(source='company.company_name', read_only=True)

    class Meta:
        model = Application
        fields = [
            'id', 'mission_id', 'mission_title', 'freelancer_id', 'freelancer_name',
            'company_id', 'company_name', 'proposal', 'proposed_rate', 'estimated_duration',
            'status', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'status', 'created_at', 'updated_at']
        extra_kwargs = {
            'proposal': {'allow_blank': True},
        }


class ApplicationUpdateSerializer(serializers.Serializer):
    proposal = serializers.CharField(required=False, allow_blank=True)
    proposed_rate = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    estimated_duration = serializers.IntegerField(required=False)
    status = serializers.ChoiceField(choices=Application.STATUS_CHOICES, required=False)


class ApplicationQuerySerializer(serializers.Serializer):
    """
    Query Parameters:
        - mission_id, freelancer_id, company_id, status
        - min_rate / max_rate, min_duration / max_duration (inclusive)
        - date_from / date_to (YYYY-MM-DD, on created_at)
        - sort_by, sort_order, page, limit
    """
    mission_id = serializers.IntegerField(required=False)
    freelancer_id = serializers.IntegerField(required=False)
    company_id = serializers.IntegerField(required=False)
    status = serializers.ChoiceField(choices=Application.STATUS_CHOICES, required=False)
    min_rate = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    max_rate = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    min_duration = serializers.IntegerField(required=False, min_value=0)
    max_duration = serializers.IntegerField(required=False, min_value=0)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    sort_by = serializers.ChoiceField(choices=SORTABLE_FIELDS, required=False, default='created_at')
    sort_order = serializers.ChoiceField(choices=('asc', 'desc'), required=False, default='desc')


class ApplicationStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    pending = serializers.IntegerField()
    accepted = serializers.IntegerField()
    rejected = serializers.IntegerField()
    withdrawn = serializers.IntegerField()
    average_rate = serializers.DecimalField(max_digits=12, decimal_places=2)
