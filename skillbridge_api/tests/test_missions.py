from decimal import Decimal

import pytest
from django.db import connection
from django.db.models import QuerySet
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from applications.models import Application
from freelancers.models import FreelanceProfile
from missions.models import Mission
from missions.services import MissionService, MissionFilters
from notifications.services import MISSION_COMPLETED, MISSION_UPDATED, NotificationService

pytestmark = pytest.mark.django_db

MISSIONS_URL = '/api/mission/'


def mission_data(**extra):
    data = {
        'title': 'Mobile app',
        'description': 'React Native app for bookings',
        'required_skills': ['React Native'],
        'budget': Decimal('8000'),
        'duration': 6,
    }
    data.update(extra)
    return data


def test_create_mission_is_always_open(company_profile, notifications):
    mission = MissionService(notifications).create_mission(company_profile.user, mission_data(status='COMPLETED'))

    assert mission.status == 'OPEN'
    assert mission.company == company_profile


def test_create_mission_requires_company_profile(company_user, notifications):
    with pytest.raises(ValidationError):
        MissionService(notifications).create_mission(company_user, mission_data())


@pytest.mark.parametrize('overrides', [
    {'title': '  '},
    {'description': ''},
    {'required_skills': []},
    {'required_skills': [' ']},
    {'budget': Decimal('0')},
    {'duration': 0},
])
def test_create_mission_field_rules(company_profile, notifications, overrides):
    with pytest.raises(ValidationError):
        MissionService(notifications).create_mission(company_profile.user, mission_data(**overrides))
    assert not Mission.objects.exists()


def test_get_unknown_mission(notifications):
    with pytest.raises(NotFound):
        MissionService(notifications).get_mission(4242)


def test_only_owner_can_update_or_delete(make_user, mission, notifications):
    stranger = make_user('other@company.test', 'COMPANY')
    service = MissionService(notifications)

    with pytest.raises(PermissionDenied):
        service.update_mission(mission.id, stranger, {'title': 'Hijacked'})
    with pytest.raises(PermissionDenied):
        service.delete_mission(mission.id, stranger)


@pytest.mark.parametrize('current, target, allowed', [
    ('OPEN', 'IN_PROGRESS', True),
    ('OPEN', 'CANCELLED', True),
    ('OPEN', 'COMPLETED', False),
    ('OPEN', 'EXPIRED', False),
    ('IN_PROGRESS', 'COMPLETED', True),
    ('IN_PROGRESS', 'CANCELLED', True),
    ('IN_PROGRESS', 'OPEN', False),
    ('COMPLETED', 'OPEN', False),
    ('COMPLETED', 'CANCELLED', False),
    ('CANCELLED', 'OPEN', False),
    ('EXPIRED', 'OPEN', False),
])
def test_status_transitions(make_mission, notifications, current, target, allowed):
    mission = make_mission(status=current)
    service = MissionService(notifications)

    if allowed:
        assert service.update_mission(mission.id, mission.company.user, {'status': target}).status == target
    else:
        with pytest.raises(ValidationError) as excinfo:
            service.update_mission(mission.id, mission.company.user, {'status': target})
        assert f"from {current} to {target}" in str(excinfo.value.detail[0])
        mission.refresh_from_db()
        assert mission.status == current


def test_status_transition_is_checked_on_a_locked_fresh_row(monkeypatch, mission, notifications):
    locked = []
    select_for_update = QuerySet.select_for_update

    def tracking_select_for_update(self, *args, **kwargs):
        locked.append((self.model, connection.in_atomic_block))
        return select_for_update(self, *args, **kwargs)

    monkeypatch.setattr(QuerySet, 'select_for_update', tracking_select_for_update)
    stale = Mission.objects.get(pk=mission.pk)
    Mission.objects.filter(pk=mission.pk).update(status='CANCELLED')

    with pytest.raises(ValidationError):
        MissionService(notifications).update_mission(stale.id, stale.company.user, {'status': 'IN_PROGRESS'})

    assert locked == [(Mission, True)]
    stale.refresh_from_db()
    assert stale.status == 'CANCELLED'


def test_same_status_is_a_plain_update(application, notifications):
    mission = application.mission
    mission.status = 'COMPLETED'
    mission.save()

    updated = MissionService(notifications).update_mission(
        mission.id, mission.company.user, {'status': 'COMPLETED', 'title': 'Renamed'}
    )

    assert updated.title == 'Renamed'
    assert notifications.get_user_notifications(application.freelancer.user_id) == []


def test_status_change_notifies_applicants(application, notifications):
    mission = application.mission
    freelancer_user_id = application.freelancer.user_id
    service = MissionService(notifications)

    service.update_mission(mission.id, mission.company.user, {'status': 'IN_PROGRESS'})
    service.update_mission(mission.id, mission.company.user, {'status': 'COMPLETED'})

    received = notifications.get_user_notifications(freelancer_user_id)
    assert [n.type for n in received] == [MISSION_COMPLETED, MISSION_UPDATED]
    assert "Acme Corp" in received[0].message
    assert received[1].data['update_type'] == "Status changed to In Progress"


def test_notification_failure_does_not_undo_status_change(application):
    class BrokenNotifications(NotificationService):
        def notify_mission_updated(self, *args, **kwargs):
            raise RuntimeError("delivery failed")

    mission = application.mission
    MissionService(BrokenNotifications()).update_mission(mission.id, mission.company.user, {'status': 'CANCELLED'})

    mission.refresh_from_db()
    assert mission.status == 'CANCELLED'


def test_search_missions(make_mission, company_profile, notifications):
    remote = make_mission(title='Remote gig', is_remote=True, budget=Decimal('1000'), required_skills=['Go'])
    onsite = make_mission(title='Onsite gig', location='Paris', urgency='HIGH')
    make_mission(title='Closed gig', status='CANCELLED', required_skills=['Go'])

    service = MissionService(notifications)
    assert list(service.search_missions(MissionFilters(is_remote=True))) == [remote]
    assert list(service.search_missions(MissionFilters(is_remote=False, urgency='HIGH'))) == [onsite]
    assert list(service.search_missions(MissionFilters(skills=['go'], status='OPEN'))) == [remote]
    assert list(service.search_missions(MissionFilters(max_budget=Decimal('1000')))) == [remote]
    assert service.search_missions(MissionFilters(company_id=company_profile.id)).count() == 3


def test_search_missions_by_non_ascii_skill(make_mission, notifications):
    writing = make_mission(title='Blog posts', required_skills=['Rédaction', 'SEO'])
    make_mission(title='Backend', required_skills=['Python'])

    service = MissionService(notifications)
    assert list(service.search_missions(MissionFilters(skills=['Rédaction']))) == [writing]
    assert list(service.search_missions(MissionFilters(skills=['rédaction', 'Go']))) == [writing]


def test_recommended_freelancers(mission, freelance_profile, make_user, notifications):
    FreelanceProfile.objects.create(
        user=make_user('rust@freelance.test'), skills=['Rust'], daily_rate=Decimal('500'), availability=10
    )

    freelancers = MissionService(notifications).get_recommended_freelancers(mission.id)

    assert list(freelancers) == [freelance_profile]


def test_search_endpoint_is_public_and_paginated(api_client, make_mission):
    for index in range(3):
        make_mission(title=f'Mission {index}')

    response = api_client.get(MISSIONS_URL, {'limit': 2, 'page': 2})

    assert response.status_code == 200
    data = response.json()['data']
    assert data['total'] == 3
    assert data['page'] == 2
    assert data['total_pages'] == 2
    assert len(data['results']) == 1


def test_search_endpoint_ignores_absent_remote_flag(api_client, make_mission):
    make_mission(is_remote=True)
    make_mission(is_remote=False)

    assert api_client.get(MISSIONS_URL).json()['data']['total'] == 2
    assert api_client.get(MISSIONS_URL, {'is_remote': 'false'}).json()['data']['total'] == 1


def test_create_endpoint_requires_authentication(api_client, company_profile):
    response = api_client.post(MISSIONS_URL, mission_data(), format='json')

    assert response.status_code == 401


def test_create_and_update_endpoints(client_for, company_profile):
    client = client_for(company_profile.user)

    response = client.post(MISSIONS_URL, mission_data(budget='8000.00'), format='json')
    assert response.status_code == 201
    created = response.json()['data']
    assert created['status'] == 'OPEN'
    assert created['company_name'] == 'Acme Corp'

    response = client.patch(f"{MISSIONS_URL}{created['id']}/", {'status': 'COMPLETED'}, format='json')
    assert response.status_code == 400
    assert response.json()['message'] == "Cannot change mission status from OPEN to COMPLETED"

    response = client.patch(f"{MISSIONS_URL}{created['id']}/", {'status': 'IN_PROGRESS'}, format='json')
    assert response.status_code == 200
    assert response.json()['data']['status'] == 'IN_PROGRESS'


def test_update_endpoint_forbidden_for_other_company(client_for, make_user, mission):
    stranger = make_user('other@company.test', 'COMPANY')

    response = client_for(stranger).put(f'{MISSIONS_URL}{mission.id}/', {'title': 'Mine now'}, format='json')

    assert response.status_code == 403
    assert response.json()['message'] == "Not authorized to update this mission"


def test_detail_endpoint(api_client):
    response = api_client.get(f'{MISSIONS_URL}999/')

    assert response.status_code == 404
    assert response.json() == {'success': False, 'message': "Mission not found", 'errors': None}


def test_delete_cascades_applications(client_for, application):
    mission = application.mission

    response = client_for(mission.company.user).delete(f'{MISSIONS_URL}{mission.id}/')

    assert response.status_code == 200
    assert not Application.objects.exists()


def test_company_missions_endpoint(client_for, make_user, mission):
    assert [m['id'] for m in client_for(mission.company.user).get(f'{MISSIONS_URL}company/my-missions/').json()['data']] == [mission.id]
    assert client_for(make_user('nobody@company.test', 'COMPANY')).get(f'{MISSIONS_URL}company/my-missions/').status_code == 404
