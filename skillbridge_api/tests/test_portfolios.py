import pytest
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from portfolios.models import PortfolioProject
from portfolios.services import PortfolioService, PortfolioFilters

pytestmark = pytest.mark.django_db

PORTFOLIO_URL = '/api/portfolio/'


def project_data(**extra):
    data = {
        'title': 'Booking engine',
        'description': 'Hotel booking backend',
        'technologies': ['Python', 'PostgreSQL'],
        'github_url': 'https://github.com/bob/booking',
    }
    data.update(extra)
    return data


@pytest.fixture
def project(freelance_profile):
    return PortfolioService().create_project(freelance_profile.user, project_data())


def test_create_project(project, freelance_profile):
    assert project.freelancer == freelance_profile
    assert project.technologies == ['Python', 'PostgreSQL']


def test_create_requires_freelance_profile(freelancer_user):
    with pytest.raises(ValidationError):
        PortfolioService().create_project(freelancer_user, project_data())


@pytest.mark.parametrize('overrides', [{'title': ''}, {'description': '  '}, {'technologies': []}])
def test_create_field_rules(freelance_profile, overrides):
    with pytest.raises(ValidationError):
        PortfolioService().create_project(freelance_profile.user, project_data(**overrides))


def test_only_owner_updates_or_deletes(project, make_user):
    stranger = make_user('stranger@freelance.test')
    service = PortfolioService()

    with pytest.raises(PermissionDenied):
        service.update_project(project.id, stranger, {'title': 'Stolen'})
    with pytest.raises(PermissionDenied):
        service.delete_project(project.id, stranger)

    assert service.update_project(project.id, project.freelancer.user, {'title': 'Booking engine v2'}).title == 'Booking engine v2'
    service.delete_project(project.id, project.freelancer.user)
    assert not PortfolioProject.objects.exists()


def test_update_rejects_empty_technologies(project):
    with pytest.raises(ValidationError):
        PortfolioService().update_project(project.id, project.freelancer.user, {'technologies': []})


def test_user_portfolio(project, company_user):
    assert list(PortfolioService().get_user_portfolio(project.freelancer.user)) == [project]

    with pytest.raises(NotFound):
        PortfolioService().get_user_portfolio(company_user)


def test_search_by_technology(project):
    service = PortfolioService()

    assert list(service.search_portfolios(PortfolioFilters(technologies=['postgresql']))) == [project]
    assert list(service.search_portfolios(PortfolioFilters(technologies=['Postgres']))) == []
    assert list(service.search_portfolios(PortfolioFilters(freelancer_id=project.freelancer_id))) == [project]


def test_search_by_non_ascii_technology(freelance_profile):
    service = PortfolioService()
    project = service.create_project(freelance_profile.user, project_data(technologies=['Développement web']))

    assert list(service.search_portfolios(PortfolioFilters(technologies=['développement web']))) == [project]


def test_endpoints(client_for, api_client, freelance_profile):
    client = client_for(freelance_profile.user)

    response = client.post(PORTFOLIO_URL, project_data(), format='json')
    assert response.status_code == 201
    project_id = response.json()['data']['id']

    assert api_client.get(f'{PORTFOLIO_URL}{project_id}/').status_code == 200
    assert api_client.delete(f'{PORTFOLIO_URL}{project_id}/').status_code == 401

    response = api_client.get(f'{PORTFOLIO_URL}search/', {'technologies': 'python'})
    assert response.json()['data']['total'] == 1

    response = client.get(f'{PORTFOLIO_URL}user/my-portfolio/')
    assert [item['id'] for item in response.json()['data']] == [project_id]
