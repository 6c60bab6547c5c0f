from django.urls import path

from . import views as my_views


urlpatterns = [
    path('', my_views.SkillListAPIView.as_view(), name='skill-list'),
    path('search/', my_views.SkillSearchAPIView.as_view(), name='skill-search'),
    path('validate/', my_views.SkillValidateAPIView.as_view(), name='skill-validate'),
    path('categories/', my_views.SkillCategoriesAPIView.as_view(), name='skill-categories'),
    path('popular/', my_views.PopularSkillsAPIView.as_view(), name='skill-popular'),
]
