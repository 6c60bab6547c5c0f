import pytest
from django.core.management import call_command
from django.db.models import QuerySet
from rest_framework_simplejwt.tokens import RefreshToken

from accounts.models import CustomUser
from accounts.services import AuthService
from core.exceptions import Conflict
from companies.models import CompanyProfile
from freelancers.models import FreelanceProfile
from tests.conftest import PASSWORD

pytestmark = pytest.mark.django_db

REGISTER_URL = '/api/auth/register/'
LOGIN_URL = '/api/auth/login/'


def registration_payload(**extra):
    payload = {
        'email': 'new.dev@freelance.test',
        'password': PASSWORD,
        'first_name': 'Nina',
        'last_name': 'Nguyen',
        'user_type': 'FREELANCER',
    }
    payload.update(extra)
    return payload


def test_register_freelancer_with_profile_returns_tokens(api_client):
    payload = registration_payload(skills=['Python', 'Go'], daily_rate='350.00', availability=35, experience=2)

    response = api_client.post(REGISTER_URL, payload, format='json')

    assert response.status_code == 201
    body = response.json()
    assert body['success'] is True
    assert body['data']['user']['email'] == 'new.dev@freelance.test'
    assert body['data']['access'] and body['data']['refresh']
    profile = FreelanceProfile.objects.get(user__email='new.dev@freelance.test')
    assert profile.skills == ['Python', 'Go']


def test_register_company_without_profile_fields_creates_only_user(api_client):
    payload = registration_payload(email='boss@corp.test', user_type='COMPANY', company_name='Corp')

    response = api_client.post(REGISTER_URL, payload, format='json')

    assert response.status_code == 201
    assert CustomUser.objects.filter(email='boss@corp.test').exists()
    assert not CompanyProfile.objects.exists()


def test_register_company_with_profile(api_client):
    payload = registration_payload(
        email='boss@corp.test', user_type='COMPANY', company_name='Corp', industry='Retail', size='LARGE'
    )

    response = api_client.post(REGISTER_URL, payload, format='json')

    assert response.status_code == 201
    assert CompanyProfile.objects.get(user__email='boss@corp.test').industry == 'Retail'


def test_register_duplicate_email_is_conflict_and_creates_nothing(api_client, freelancer_user):
    payload = registration_payload(email=freelancer_user.email.upper())

    response = api_client.post(REGISTER_URL, payload, format='json')

    assert response.status_code == 409
    assert response.json()['success'] is False
    assert CustomUser.objects.filter(email__iexact=freelancer_user.email).count() == 1


def test_register_maps_unique_constraint_race_to_conflict(monkeypatch, freelancer_user):
    # the pre-insert lookup misses, as it would for a concurrent request
    monkeypatch.setattr(QuerySet, 'exists', lambda self: False)

    with pytest.raises(Conflict):
        AuthService().register(
            email=freelancer_user.email, password=PASSWORD, first_name='Nina', last_name='Nguyen',
            user_type='FREELANCER',
        )

    monkeypatch.undo()
    assert CustomUser.objects.filter(email=freelancer_user.email).count() == 1


def test_register_invalid_profile_rolls_back_user(api_client):
    payload = registration_payload(skills=['Python'], daily_rate='0', availability=10, experience=1)

    response = api_client.post(REGISTER_URL, payload, format='json')

    assert response.status_code == 400
    assert not CustomUser.objects.filter(email='new.dev@freelance.test').exists()


def test_register_rejects_short_password(api_client):
    response = api_client.post(REGISTER_URL, registration_payload(password='abc'), format='json')

    assert response.status_code == 400
    assert 'password' in response.json()['errors']


def test_login_returns_user_and_tokens(api_client, freelancer_user):
    response = api_client.post(LOGIN_URL, {'email': freelancer_user.email, 'password': PASSWORD}, format='json')

    assert response.status_code == 200
    data = response.json()['data']
    assert data['user']['email'] == freelancer_user.email
    assert data['access'] and data['refresh']


def test_login_with_wrong_password_is_bad_request(api_client, freelancer_user):
    response = api_client.post(LOGIN_URL, {'email': freelancer_user.email, 'password': 'nope-nope'}, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == "Invalid email or password"


def test_login_unknown_email_is_bad_request(api_client):
    response = api_client.post(LOGIN_URL, {'email': 'ghost@nowhere.test', 'password': PASSWORD}, format='json')

    assert response.status_code == 400


def test_login_deactivated_account_is_unauthorized(api_client, freelancer_user):
    freelancer_user.is_active = False
    freelancer_user.save()

    response = api_client.post(LOGIN_URL, {'email': freelancer_user.email, 'password': PASSWORD}, format='json')

    assert response.status_code == 401
    assert response.json()['message'] == "Account is deactivated"


def test_refresh_returns_new_access_token(api_client, freelancer_user):
    refresh = RefreshToken.for_user(freelancer_user)

    response = api_client.post('/api/auth/refresh/', {'refresh': str(refresh)}, format='json')

    assert response.status_code == 200
    assert response.json()['data']['access']


def test_me_returns_and_updates_current_user(client_for, freelancer_user):
    client = client_for(freelancer_user)

    assert client.get('/api/auth/me/').json()['data']['email'] == freelancer_user.email

    response = client.patch('/api/auth/me/', {'first_name': 'Robert', 'email': 'hijack@x.test'}, format='json')

    assert response.status_code == 200
    freelancer_user.refresh_from_db()
    assert freelancer_user.first_name == 'Robert'
    assert freelancer_user.email == 'dev@freelance.test'


def test_me_requires_authentication(api_client):
    response = api_client.get('/api/auth/me/')

    assert response.status_code == 401
    assert response.json()['success'] is False


def test_change_password(client_for, freelancer_user):
    client = client_for(freelancer_user)
    payload = {'current_password': PASSWORD, 'new_password': 'An0ther!secret', 'confirm_password': 'An0ther!secret'}

    response = client.post('/api/auth/change-password/', payload, format='json')

    assert response.status_code == 200
    freelancer_user.refresh_from_db()
    assert freelancer_user.check_password('An0ther!secret')


@pytest.mark.parametrize('current, new, confirm', [
    ('wrong-password', 'An0ther!secret', 'An0ther!secret'),
    (PASSWORD, 'An0ther!secret', 'Different!secret'),
])
def test_change_password_rejections(client_for, freelancer_user, current, new, confirm):
    client = client_for(freelancer_user)
    payload = {'current_password': current, 'new_password': new, 'confirm_password': confirm}

    response = client.post('/api/auth/change-password/', payload, format='json')

    assert response.status_code == 400


def test_logout_blacklists_refresh_token(client_for, freelancer_user):
    client = client_for(freelancer_user)
    refresh = str(RefreshToken.for_user(freelancer_user))

    assert client.post('/api/auth/logout/', {'refresh': refresh}, format='json').status_code == 200
    assert client.post('/api/auth/logout/', {'refresh': refresh}, format='json').status_code == 400


def test_logout_with_garbage_token_is_bad_request(client_for, freelancer_user):
    response = client_for(freelancer_user).post('/api/auth/logout/', {'refresh': 'not-a-token'}, format='json')

    assert response.status_code == 400


def test_deactivate_soft_deletes_account(client_for, freelancer_user):
    response = client_for(freelancer_user).post('/api/auth/deactivate/', {}, format='json')

    assert response.status_code == 200
    freelancer_user.refresh_from_db()
    assert freelancer_user.is_active is False
    assert freelancer_user.deleted_at is not None
    assert CustomUser.objects.filter(pk=freelancer_user.pk).exists()


def test_admin_user_list_requires_admin_role(client_for, freelancer_user):
    response = client_for(freelancer_user).get('/api/auth/admin/users/')

    assert response.status_code == 403


def test_admin_user_list_filters_by_user_type(client_for, admin_user, freelancer_user, company_user):
    response = client_for(admin_user).get('/api/auth/admin/users/', {'user_type': 'FREELANCER'})

    assert response.status_code == 200
    data = response.json()['data']
    assert data['total'] == 1
    assert data['results'][0]['email'] == freelancer_user.email


def test_admin_user_detail_requires_admin_role(client_for, freelancer_user, company_user):
    client = client_for(freelancer_user)

    assert client.get(f'/api/auth/admin/users/{company_user.id}/').status_code == 403
    assert client.delete(f'/api/auth/admin/users/{company_user.id}/').status_code == 403
    assert CustomUser.objects.filter(pk=company_user.pk).exists()


def test_admin_user_detail_unknown_user_is_not_found(client_for, admin_user):
    response = client_for(admin_user).get('/api/auth/admin/users/999999/')

    assert response.status_code == 404
    assert response.json()['message'] == "User not found"


def test_admin_can_retrieve_and_update_user(client_for, admin_user, freelancer_user):
    client = client_for(admin_user)
    url = f'/api/auth/admin/users/{freelancer_user.id}/'

    assert client.get(url).json()['data']['email'] == freelancer_user.email

    response = client.patch(url, {'role': 'ADMIN', 'email': 'Bob@Freelance.test'}, format='json')

    assert response.status_code == 200
    freelancer_user.refresh_from_db()
    assert freelancer_user.role == 'ADMIN'
    assert freelancer_user.is_admin
    assert freelancer_user.email == 'bob@freelance.test'


def test_admin_deactivation_stamps_deleted_at(client_for, admin_user, freelancer_user):
    url = f'/api/auth/admin/users/{freelancer_user.id}/'
    client = client_for(admin_user)

    client.patch(url, {'is_active': False}, format='json')
    freelancer_user.refresh_from_db()
    assert freelancer_user.is_active is False
    assert freelancer_user.deleted_at is not None

    client.patch(url, {'is_active': True}, format='json')
    freelancer_user.refresh_from_db()
    assert freelancer_user.is_active is True
    assert freelancer_user.deleted_at is None


def test_admin_update_to_taken_email_is_conflict(client_for, admin_user, freelancer_user, company_user):
    url = f'/api/auth/admin/users/{freelancer_user.id}/'

    response = client_for(admin_user).put(url, {'email': company_user.email.upper()}, format='json')

    assert response.status_code == 409
    assert response.json()['message'] == "Email is already in use"
    freelancer_user.refresh_from_db()
    assert freelancer_user.email == 'dev@freelance.test'


def test_admin_update_rejects_unknown_role(client_for, admin_user, freelancer_user):
    url = f'/api/auth/admin/users/{freelancer_user.id}/'

    assert client_for(admin_user).patch(url, {'role': 'ROOT'}, format='json').status_code == 400


def test_admin_can_delete_user_but_not_themselves(client_for, admin_user, freelancer_user):
    client = client_for(admin_user)

    response = client.delete(f'/api/auth/admin/users/{admin_user.id}/')
    assert response.status_code == 403
    assert response.json()['message'] == "Users cannot delete themselves"

    assert client.delete(f'/api/auth/admin/users/{freelancer_user.id}/').status_code == 200
    assert not CustomUser.objects.filter(pk=freelancer_user.pk).exists()
    assert client.get(f'/api/auth/admin/users/{freelancer_user.id}/').status_code == 404


def test_promote_admin_command(freelancer_user):
    call_command('promote_admin', email=freelancer_user.email)

    freelancer_user.refresh_from_db()
    assert freelancer_user.role == 'ADMIN'
    assert freelancer_user.is_admin


def test_promote_admin_skips_deactivated_accounts(freelancer_user):
    AuthService().deactivate(freelancer_user)

    call_command('promote_admin', email=freelancer_user.email)

    freelancer_user.refresh_from_db()
    assert freelancer_user.role == 'USER'
