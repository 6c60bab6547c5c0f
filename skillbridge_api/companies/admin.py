from django.contrib import admin

from .models import CompanyProfile


@admin.register(CompanyProfile)
class CompanyProfileAdmin(admin.ModelAdmin):
    list_display = ('company_name', 'industry', 'size', 'location', 'is_verified', 'created_at')
    list_filter = ('size', 'is_verified')
    search_fields = ('company_name', 'industry', 'user__email')
