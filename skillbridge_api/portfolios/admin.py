from django.contrib import admin

from .models import PortfolioProject


@admin.register(PortfolioProject)
class PortfolioProjectAdmin(admin.ModelAdmin):
    list_display = ('title', 'freelancer', 'created_at')
    search_fields = ('title', 'description', 'freelancer__user__email')
