import pytest

from core.exceptions import Conflict, first_message
from core.querysets import json_list_overlaps, split_csv
from freelancers.models import FreelanceProfile

pytestmark = pytest.mark.django_db


def test_health(api_client):
    response = api_client.get('/api/health/')

    assert response.status_code == 200
    assert response.json() == {
        'success': True,
        'message': "Service is healthy.",
        'data': {'status': 'ok', 'database': 'ok'},
    }


@pytest.mark.parametrize('raw, expected', [
    ('', []),
    (None, []),
    ('python', ['python']),
    (' python , react ,, ', ['python', 'react']),
    (['Go', ' ', 'Rust '], ['Go', 'Rust']),
])
def test_split_csv(raw, expected):
    assert split_csv(raw) == expected


def test_json_list_overlap_matches_whole_entries(freelance_profile):
    matching = FreelanceProfile.objects.filter(json_list_overlaps('skills', ['DJANGO', 'Go']))
    partial = FreelanceProfile.objects.filter(json_list_overlaps('skills', ['Djang']))

    assert list(matching) == [freelance_profile]
    assert list(partial) == []


def test_json_list_overlap_matches_non_ascii_entries(freelance_profile):
    freelance_profile.skills = ['Développement', 'Django']
    freelance_profile.save()

    matching = FreelanceProfile.objects.filter(json_list_overlaps('skills', ['Développement']))

    assert list(matching) == [freelance_profile]


@pytest.mark.parametrize('detail, expected', [
    ({'detail': "Not found."}, "Not found."),
    ({'non_field_errors': ["Passwords do not match."]}, "Passwords do not match."),
    ({'email': ["Enter a valid email address."]}, "email: Enter a valid email address."),
    (["Budget must be greater than 0"], "Budget must be greater than 0"),
    ([], ''),
])
def test_first_message(detail, expected):
    assert first_message(detail) == expected


def test_field_errors_are_kept_in_envelope(api_client):
    response = api_client.post('/api/auth/register/', {'email': 'not-an-email'}, format='json')

    assert response.status_code == 400
    body = response.json()
    assert body['success'] is False
    assert 'email' in body['errors']
    assert 'password' in body['errors']


def test_non_validation_errors_have_no_field_errors(api_client):
    response = api_client.get('/api/mission/12345/')

    assert response.status_code == 404
    assert response.json()['errors'] is None


def test_conflict_status():
    assert Conflict().status_code == 409
    assert Conflict("Taken").detail == "Taken"
