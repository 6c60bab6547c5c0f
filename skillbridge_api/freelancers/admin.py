from django.contrib import admin

from .models import FreelanceProfile


@admin.register(FreelanceProfile)
class FreelanceProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'daily_rate', 'availability', 'experience', 'location', 'is_verified')
    list_filter = ('is_verified',)
    search_fields = ('user__email', 'user__first_name', 'user__last_name', 'location')
