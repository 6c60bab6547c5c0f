import pytest

from skills.services import PREDEFINED_SKILLS, POPULAR_SKILLS, SKILL_CATEGORIES, SkillsService

SKILLS_URL = '/api/skills/'


@pytest.fixture
def service():
    return SkillsService()


def test_catalogue_has_no_duplicates():
    assert len(PREDEFINED_SKILLS) == len(set(PREDEFINED_SKILLS))


def test_categories_and_popular_skills_come_from_the_catalogue(service):
    known = set(service.get_all_skills())

    assert set(service.get_popular_skills()) <= known
    for skills in SKILL_CATEGORIES.values():
        assert set(skills) <= known
    assert set(POPULAR_SKILLS) == set(service.get_popular_skills())


def test_search_is_case_insensitive_substring(service):
    results = service.search_skills('java')

    assert 'Java' in results
    assert 'JavaScript' in results
    assert all('java' in skill.lower() for skill in results)


def test_search_limit(service):
    assert len(service.search_skills('a', limit=3)) == 3
    assert service.search_skills('', limit=5) == list(PREDEFINED_SKILLS[:5])
    assert service.search_skills('no-such-skill') == []


def test_validate_skills(service):
    assert service.validate_skills(['Python', 'python', 'COBOL']) == {
        'valid': ['Python'],
        'invalid': ['python', 'COBOL'],
    }


@pytest.mark.django_db
def test_endpoints_are_public(api_client):
    response = api_client.get(f'{SKILLS_URL}search/', {'q': 'react', 'limit': 2})
    assert response.status_code == 200
    assert response.json()['data'] == ['React', 'React Native']

    response = api_client.post(f'{SKILLS_URL}validate/', {'skills': ['Django', 'Nope']}, format='json')
    assert response.json()['data'] == {'valid': ['Django'], 'invalid': ['Nope']}

    assert api_client.get(SKILLS_URL).status_code == 200
    assert api_client.get(f'{SKILLS_URL}categories/').status_code == 200
    assert api_client.get(f'{SKILLS_URL}popular/').status_code == 200


@pytest.mark.django_db
def test_search_rejects_bad_limit(api_client):
    response = api_client.get(f'{SKILLS_URL}search/', {'limit': 0})

    assert response.status_code == 400
    assert response.json()['success'] is False
