"""Unit tests for the upload policy and slug derivation."""

from __future__ import annotations

import os
import re

from django.conf import settings
from django.test import SimpleTestCase, override_settings
from rest_framework.exceptions import UnsupportedMediaType

from articles.services import slugify_title
from articles.uploads import (
    discard_image,
    image_extension,
    public_image_url,
    storage_name,
    store_image,
    validate_image,
)
from core.exceptions import PayloadTooLarge
from tests.utils import image_upload


class UploadPolicyTests(SimpleTestCase):
    """Extension and size checks run before anything touches storage."""

    def test_extension_is_lowercased(self):
        self.assertEqual(image_extension("Holiday.JPEG"), ".jpeg")
        self.assertEqual(image_extension("archive.tar.png"), ".png")
        self.assertEqual(image_extension("noext"), "")

    def test_allowed_extensions_pass(self):
        for name in ("a.png", "b.jpg", "c.jpeg", "D.PNG"):
            self.assertEqual(validate_image(image_upload(name)), image_extension(name))

    def test_disallowed_extensions_fail(self):
        for name in ("a.gif", "b.webp", "c", "d.png.exe"):
            with self.assertRaises(UnsupportedMediaType, msg=name):
                validate_image(image_upload(name))

    def test_size_limit_is_inclusive(self):
        self.assertEqual(validate_image(image_upload(size=settings.MAX_UPLOAD_SIZE)), ".png")
        with self.assertRaises(PayloadTooLarge):
            validate_image(image_upload(size=settings.MAX_UPLOAD_SIZE + 1))

    def test_extension_is_checked_before_size(self):
        with self.assertRaises(UnsupportedMediaType):
            validate_image(image_upload("big.gif", size=settings.MAX_UPLOAD_SIZE + 1))

    def test_storage_name_is_timestamp_plus_extension(self):
        self.assertRegex(storage_name(".png"), r"^\d{13}\.png$")


class UploadStorageTests(SimpleTestCase):
    def test_store_and_discard(self):
        name = store_image(image_upload("photo.jpg"))
        path = os.path.join(settings.MEDIA_ROOT, name)

        self.assertTrue(re.match(r"^\d{13}.*\.jpg$", name))
        self.assertTrue(os.path.exists(path))

        discard_image(name)
        self.assertFalse(os.path.exists(path))

    def test_same_millisecond_names_do_not_overwrite(self):
        first = store_image(image_upload("a.png"))
        second = store_image(image_upload("b.png"))

        self.assertNotEqual(first, second)
        discard_image(first)
        discard_image(second)

    def test_rejected_upload_writes_nothing(self):
        before = set(os.listdir(settings.MEDIA_ROOT))
        with self.assertRaises(UnsupportedMediaType):
            store_image(image_upload("anim.gif"))
        self.assertEqual(set(os.listdir(settings.MEDIA_ROOT)), before)

    def test_public_url_uses_configured_base(self):
        self.assertEqual(public_image_url("1.png"), "http://testserver/uploads/1.png")

    @override_settings(PUBLIC_BASE_URL="")
    def test_public_url_without_base_or_request_is_relative(self):
        self.assertEqual(public_image_url("nested/1.png"), "/uploads/1.png")


class SlugTests(SimpleTestCase):
    def test_hello_world(self):
        self.assertEqual(slugify_title("Hello World!"), "hello-world")

    def test_runs_of_separators_collapse(self):
        self.assertEqual(slugify_title("  Tips -- & tricks__for  2024 "), "tips-tricks-for-2024")

    def test_accents_are_folded(self):
        self.assertEqual(slugify_title("Crème Brûlée"), "creme-brulee")

    def test_symbols_only_title_yields_empty_slug(self):
        self.assertEqual(slugify_title("!!!"), "")
