"""
Tests for form validation rules.
"""

import pytest

from pricewatch.validation import (
    MAX_UPLOAD_BYTES,
    is_password_valid,
    password_requirements,
    validate_coordinates,
    validate_login_form,
    validate_override,
    validate_rating,
    validate_report_upload,
    validate_selection,
    validate_signup_form,
    validate_tag_form,
)


class TestPasswords:
    def test_each_requirement(self):
        assert password_requirements("abc") == {
            "length": False,
            "uppercase": False,
            "lowercase": True,
            "number": False,
            "special": False,
        }
        assert all(password_requirements("Secret#123").values())

    def test_is_password_valid(self):
        assert is_password_valid("Secret#123")
        assert not is_password_valid("Secret123")
        assert not is_password_valid(None)


class TestForms:
    def test_login(self):
        assert validate_login_form("", "x") == "Please enter your email"
        assert validate_login_form("a@b.com", "") == "Please enter your password"
        assert validate_login_form("a@b.com", "x") is None

    def test_signup(self):
        assert validate_signup_form(" ", "a@b.com", "Secret#123", "Secret#123") == "Please enter your name"
        assert validate_signup_form("Ana", "nope", "Secret#123", "Secret#123") == "Please enter a valid email address"
        assert validate_signup_form("Ana", "a@b.com", "weak", "weak") == "Password does not meet all requirements"
        assert validate_signup_form("Ana", "a@b.com", "Secret#123", "Secret#124") == "Passwords do not match"
        assert validate_signup_form("Ana", "a@b.com", "Secret#123", "Secret#123") is None

    def test_tag_form_requires_both_fields(self):
        assert validate_tag_form("", "desc") == "Please enter a tag name"
        assert validate_tag_form("Vegan", "  ") == "Please enter a tag description"
        assert validate_tag_form("Vegan", "No animal products") is None


class TestReportUpload:
    def test_requires_file(self):
        assert validate_report_upload(None, None, None) == "Please select a file first."

    def test_requires_pdf(self):
        assert validate_report_upload("prices.xlsx", "application/vnd.ms-excel", 100) == "Please select a PDF file."

    def test_extension_fallback_when_content_type_missing(self):
        assert validate_report_upload("prices.PDF", "", 100) is None

    def test_size_limit(self):
        assert validate_report_upload("p.pdf", "application/pdf", MAX_UPLOAD_BYTES) is None
        assert validate_report_upload("p.pdf", "application/pdf", MAX_UPLOAD_BYTES + 1) == "File size must be less than 10MB."


class TestRanges:
    def test_rating(self):
        assert validate_rating(None) is None
        assert validate_rating(5) is None
        assert validate_rating(5.1) == "Rating must be between 0 and 5"

    def test_coordinates(self):
        assert validate_coordinates(14.6, 120.98) is None
        assert validate_coordinates(None, 1) is None
        assert validate_coordinates(91, 0) is not None


class TestOverridesAndSelection:
    def test_override_requires_concrete_type(self):
        assert validate_override(None) == "Please select an override type"
        assert validate_override("NO_OVERRIDE") == "Please select an override type"
        assert validate_override("+30% PANIC") == "Unknown override type: +30% PANIC"
        assert validate_override("STABILIZE") is None
        assert validate_override("-20% DECREASE") is None

    def test_selection(self):
        assert validate_selection([], "market", "archive") == "Please select at least one market to archive."
        assert validate_selection([1], "market", "archive") is None

