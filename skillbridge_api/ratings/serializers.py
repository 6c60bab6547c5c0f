from rest_framework import serializers

from .models import Rating


class RatingSerializer(serializers.ModelSerializer):
    """
    Fields:
        read-only: id, from_user_email, to_user_email, timestamps
        required on create: application_id, to_user_id, rating
        optional: comment, from_user_id (must match the caller)
    """
    application_id = serializers.IntegerField()
    from_user_id = serializers.IntegerField(required=False)
    to_user_id = serializers.IntegerField()
    from_user_email = serializers.EmailField(source='from_user.email', read_only=True)
    to_user_email = serializers.EmailField(source='to_user.email', read_only=True)
    rating = serializers.IntegerField()

    class Meta:
        model = Rating
        fields = [
            'id', 'application_id', 'from_user_id', 'from_user_email', 'to_user_id',
            'to_user_email', 'rating', 'comment', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {'comment': {'required': False, 'allow_blank': True, 'allow_null': True}}


class RatingUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(required=False)
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class RatingSearchSerializer(serializers.Serializer):
    from_user_id = serializers.IntegerField(required=False)
    to_user_id = serializers.IntegerField(required=False)
    application_id = serializers.IntegerField(required=False)


class AverageRatingSerializer(serializers.Serializer):
    average = serializers.DecimalField(max_digits=4, decimal_places=2)
    count = serializers.IntegerField()
