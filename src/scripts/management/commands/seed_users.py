"""Seed demo admin and user accounts."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from authentication.managers import UserManager
from authentication.models import Role

DEMO_ACCOUNTS = {
    "admin": {
        "email": "admin@example.com",
        "phone": "+10000000001",
        "password": "adminpass",
        "role": Role.ADMIN,
    },
    "user": {
        "email": "user@example.com",
        "phone": "+10000000002",
        "password": "userpass",
        "role": Role.USER,
    },
}


def create_seed_users(accounts: dict | None = None) -> dict:
    """Create (or fetch) the demo accounts and return a username->User map."""
    User = get_user_model()
    users = {}
    for username, spec in (accounts or DEMO_ACCOUNTS).items():
        user, _ = User.objects.get_or_create(
            username=username,
            defaults={
                "email": spec["email"],
                "phone": spec["phone"],
                "role": spec["role"],
                "password_hash": UserManager.hash_password(spec["password"]),
            },
        )
        users[username] = user
    return users


def delete_seed_users() -> int:
    """Delete the demo accounts; their articles cascade with them."""
    User = get_user_model()
    deleted, _ = User.objects.filter(username__in=list(DEMO_ACCOUNTS)).delete()
    return deleted


class Command(BaseCommand):
    """Management command to seed demo accounts."""

    help = (
        "Create the demo 'admin' and 'user' accounts. "
        "Use --reset to delete previously seeded accounts first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo accounts (and their articles) before seeding.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            self.stdout.write("Resetting demo accounts...")
            delete_seed_users()
            self.stdout.write(self.style.WARNING("Demo accounts cleared."))

        self.stdout.write("Seeding demo accounts...")
        users = create_seed_users()
        for username, user in users.items():
            self.stdout.write(f"  {username} ({user.role})")
        self.stdout.write(self.style.SUCCESS("Seed completed."))
