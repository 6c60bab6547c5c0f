from django.contrib import admin
from django.urls import path, include
from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

from core.views import HealthCheckAPIView

schema_view = get_schema_view(
    openapi.Info(
        title="SkillBridge API",
        default_version='v1',
        description="API documentation for the SkillBridge freelance marketplace",
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health/', HealthCheckAPIView.as_view(), name='health'),
    path('api/auth/', include('accounts.urls')),
    path('api/company/', include('companies.urls')),
    path('api/freelance/', include('freelancers.urls')),
    path('api/mission/', include('missions.urls')),
    path('api/application/', include('applications.urls')),
    path('api/rating/', include('ratings.urls')),
    path('api/portfolio/', include('portfolios.urls')),
    path('api/notification/', include('notifications.urls')),
    path('api/skills/', include('skills.urls')),

    # swagger/openapi routes
    path('swagger', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    path('openapi.json/', schema_view.without_ui(cache_timeout=0), name='schema-json'),
]
