"""
Shared fixtures.

Provides:
- users of each type and their profiles
- a mission owned by the company and a pending application to it
- APIClient instances authenticated as a given user
- a fresh NotificationService installed on the notifications app per test
"""
from decimal import Decimal

import pytest
from django.apps import apps
from django.core.cache import cache
from rest_framework.test import APIClient

from accounts.models import CustomUser
from applications.models import Application
from companies.models import CompanyProfile
from freelancers.models import FreelanceProfile
from missions.models import Mission
from notifications.services import NotificationService

PASSWORD = "Sk1llBridge!pass"


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def notifications(monkeypatch):
    service = NotificationService()
    monkeypatch.setattr(apps.get_app_config('notifications'), 'service', service)
    return service


@pytest.fixture
def make_user(db):
    def _make(email, user_type='FREELANCER', **extra):
        extra.setdefault('first_name', 'Test')
        extra.setdefault('last_name', 'User')
        return CustomUser.objects.create_user(email=email, password=PASSWORD, user_type=user_type, **extra)
    return _make


@pytest.fixture
def company_user(make_user):
    return make_user('hiring@acme.test', 'COMPANY', first_name='Alice', last_name='Acme')


@pytest.fixture
def freelancer_user(make_user):
    return make_user('dev@freelance.test', 'FREELANCER', first_name='Bob', last_name='Builder')


@pytest.fixture
def admin_user(make_user):
    return make_user('admin@skillbridge.test', 'COMPANY', role='ADMIN')


@pytest.fixture
def company_profile(company_user):
    return CompanyProfile.objects.create(
        user=company_user,
        company_name='Acme Corp',
        industry='Software',
        size='SMALL',
        location='Paris',
    )


@pytest.fixture
def freelance_profile(freelancer_user):
    return FreelanceProfile.objects.create(
        user=freelancer_user,
        skills=['Python', 'Django'],
        daily_rate=Decimal('400.00'),
        availability=40,
        experience=5,
        location='Lyon',
    )


@pytest.fixture
def make_mission(company_profile):
    def _make(**extra):
        company = extra.pop('company', company_profile)
        data = {
            'title': 'Build an API',
            'description': 'REST API for a marketplace',
            'required_skills': ['Python', 'React'],
            'budget': Decimal('5000.00'),
            'duration': 4,
        }
        data.update(extra)
        return Mission.objects.create(company=company, **data)
    return _make


@pytest.fixture
def mission(make_mission):
    return make_mission()


@pytest.fixture
def application(mission, freelance_profile):
    return Application.objects.create(
        mission=mission,
        freelancer=freelance_profile,
        company=mission.company,
        proposal='I have built many APIs like this one.',
        proposed_rate=Decimal('300.00'),
        estimated_duration=3,
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client
