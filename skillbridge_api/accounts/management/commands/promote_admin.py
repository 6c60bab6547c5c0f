from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model

from accounts.services import UserService

User = get_user_model()


class Command(BaseCommand):
    help = "Grants the ADMIN role (and staff access) to an existing user."

    def add_arguments(self, parser):
        parser.add_argument('--email', type=str, required=True, help='Email of the user to promote')

    def handle(self, *args, **options):
        email = options['email']

        try:
            user = UserService().promote_to_admin(email)
        except User.DoesNotExist:
            self.stdout.write(self.style.ERROR(f"No active user with email {email}."))
            return

        self.stdout.write(self.style.SUCCESS(f"User {user.email} is now an administrator."))
