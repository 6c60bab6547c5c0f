from django.contrib import admin

from .models import Rating


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ('id', 'application', 'from_user', 'to_user', 'rating', 'created_at')
    list_filter = ('rating',)
    search_fields = ('from_user__email', 'to_user__email')
