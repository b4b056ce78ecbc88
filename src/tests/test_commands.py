"""Tests for management commands and system checks."""

from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from access_control.checks import role_gated_views_declare_required_role
from articles.models import Article
from authentication.managers import UserManager
from authentication.models import Role, User


class SeedUsersCommandTests(TestCase):
    def test_seed_creates_demo_accounts(self):
        out = StringIO()
        call_command("seed_users", stdout=out)

        admin = User.objects.get(username="admin")
        self.assertEqual(admin.role, Role.ADMIN)
        self.assertEqual(User.objects.get(username="user").role, Role.USER)
        self.assertTrue(UserManager.verify_password(admin, "adminpass"))
        self.assertIn("Seed completed.", out.getvalue())

    def test_seed_is_idempotent(self):
        call_command("seed_users", stdout=StringIO())
        call_command("seed_users", stdout=StringIO())

        self.assertEqual(User.objects.count(), 2)

    def test_reset_removes_demo_articles(self):
        call_command("seed_users", stdout=StringIO())
        Article.objects.create(
            owner=User.objects.get(username="user"),
            title="Demo",
            slug="demo",
            description="Demo body",
            image="demo.png",
        )

        call_command("seed_users", "--reset", stdout=StringIO())

        self.assertFalse(Article.objects.exists())
        self.assertEqual(User.objects.count(), 2)


class SystemCheckTests(TestCase):
    def test_role_gated_views_declare_required_role(self):
        self.assertEqual(role_gated_views_declare_required_role(None), [])
