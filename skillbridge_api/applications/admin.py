from django.contrib import admin

from .models import Application


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'mission', 'freelancer', 'company', 'proposed_rate', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('mission__title', 'freelancer__user__email', 'company__company_name')
