from django.contrib import admin

from .models import Mission


@admin.register(Mission)
class MissionAdmin(admin.ModelAdmin):
    list_display = ('title', 'company', 'status', 'urgency', 'budget', 'duration', 'is_remote', 'created_at')
    list_filter = ('status', 'urgency', 'is_remote')
    search_fields = ('title', 'description', 'company__company_name')
