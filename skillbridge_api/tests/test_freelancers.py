from decimal import Decimal

import pytest
from rest_framework.exceptions import ValidationError

from core.exceptions import Conflict
from freelancers.models import FreelanceProfile
from freelancers.services import FreelanceService, FreelancerFilters

pytestmark = pytest.mark.django_db


def profile_data(**extra):
    data = {'skills': ['React', 'TypeScript'], 'daily_rate': Decimal('450'), 'availability': 30, 'experience': 3}
    data.update(extra)
    return data


def test_create_profile(freelancer_user):
    profile = FreelanceService().create_profile(freelancer_user, profile_data())

    assert profile.skills == ['React', 'TypeScript']
    assert profile.daily_rate == Decimal('450')


def test_create_profile_twice_is_conflict(freelance_profile):
    with pytest.raises(Conflict):
        FreelanceService().create_profile(freelance_profile.user, profile_data())


@pytest.mark.parametrize('overrides', [
    {'daily_rate': Decimal('0')},
    {'daily_rate': Decimal('-10')},
    {'availability': 0},
    {'availability': 169},
    {'experience': -1},
])
def test_create_profile_field_rules(freelancer_user, overrides):
    with pytest.raises(ValidationError):
        FreelanceService().create_profile(freelancer_user, profile_data(**overrides))


def test_company_cannot_create_freelance_profile(company_user):
    with pytest.raises(ValidationError):
        FreelanceService().create_profile(company_user, profile_data())


def test_update_profile_applies_same_rules(freelance_profile):
    service = FreelanceService()

    with pytest.raises(ValidationError):
        service.update_profile(freelance_profile.user, {'availability': 200})

    updated = service.update_profile(freelance_profile.user, {'availability': 168, 'bio': 'Backend person'})
    assert updated.availability == 168
    assert updated.bio == 'Backend person'


def test_search_matches_any_skill_case_insensitively(make_user, freelance_profile):
    js_dev = FreelanceService().create_profile(make_user('js@freelance.test'), profile_data(skills=['JavaScript']))
    java_dev = FreelanceService().create_profile(make_user('java@freelance.test'), profile_data(skills=['Java']))

    service = FreelanceService()
    assert list(service.search_freelancers(FreelancerFilters(skills=['java']))) == [java_dev]
    assert set(service.search_freelancers(FreelancerFilters(skills=['python', 'javascript']))) == {freelance_profile, js_dev}


def test_search_matches_non_ascii_skills(make_user, freelance_profile):
    writer = FreelanceService().create_profile(
        make_user('redac@freelance.test'), profile_data(skills=['Développement', 'Rédaction'])
    )

    service = FreelanceService()
    assert list(service.search_freelancers(FreelancerFilters(skills=['développement']))) == [writer]
    assert list(service.search_freelancers(FreelancerFilters(skills=['Rédac']))) == []


def test_search_by_rate_range_and_experience(make_user, freelance_profile):
    cheap = FreelanceService().create_profile(
        make_user('cheap@freelance.test'), profile_data(daily_rate=Decimal('150'), experience=1)
    )

    service = FreelanceService()
    assert list(service.search_freelancers(FreelancerFilters(max_rate=Decimal('150')))) == [cheap]
    assert list(service.search_freelancers(FreelancerFilters(min_rate=Decimal('150'), min_experience=4))) == [freelance_profile]


def test_recommended_missions_are_open_and_share_a_skill(freelance_profile, make_mission):
    matching = make_mission(required_skills=['django', 'Vue.js'])
    make_mission(required_skills=['Python'], status='IN_PROGRESS')
    make_mission(required_skills=['Rust'])

    missions = FreelanceService().get_recommended_missions(freelance_profile.user)

    assert list(missions) == [matching]


def test_profile_endpoint_rejects_invalid_rate(client_for, freelancer_user):
    response = client_for(freelancer_user).post(
        '/api/freelance/profile/', {'skills': ['Go'], 'daily_rate': '0', 'availability': 20}, format='json'
    )

    assert response.status_code == 400
    assert not FreelanceProfile.objects.exists()


def test_search_endpoint_parses_comma_separated_skills(api_client, freelance_profile):
    response = api_client.get('/api/freelance/search/', {'skills': 'rust, django', 'min_rate': '100'})

    assert response.status_code == 200
    assert [item['id'] for item in response.json()['data']['results']] == [freelance_profile.id]


def test_recommended_missions_endpoint(client_for, freelance_profile, mission):
    response = client_for(freelance_profile.user).get('/api/freelance/recommended-missions/')

    assert response.status_code == 200
    assert [item['id'] for item in response.json()['data']] == [mission.id]
