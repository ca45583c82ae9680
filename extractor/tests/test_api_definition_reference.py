"""Tests for parsing API item references."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aedoc.models.api_reference import ApiItemReference
from aedoc.parsers.api_definition_reference import ApiDefinitionReference


def parse(text):
    """Parse a reference, returning it with the reported errors."""
    errors = []
    reference = ApiDefinitionReference.create_from_string(text, errors.append)
    return reference, errors


class TestCreateFromString:
    """Test suite for ApiDefinitionReference.create_from_string."""

    def test_fully_qualified_reference(self):
        """Test scope, package, export and member are all split out."""
        reference, errors = parse("@microsoft/sp-core-library:Guid.newGuid")

        assert errors == []
        assert reference.scope_name == "@microsoft"
        assert reference.package_name == "sp-core-library"
        assert reference.export_name == "Guid"
        assert reference.member_name == "newGuid"

    def test_unscoped_package(self):
        """Test a package without a scope."""
        reference, errors = parse("lodash:map")

        assert errors == []
        assert reference.scope_name == ""
        assert reference.package_name == "lodash"
        assert reference.export_name == "map"

    def test_local_export(self):
        """Test a reference with no package."""
        reference, errors = parse("Guid")

        assert errors == []
        assert reference.package_name == ""
        assert reference.export_name == "Guid"
        assert reference.member_name == ""

    def test_local_member(self):
        """Test a local export.member reference."""
        reference, _ = parse("Widget.render")

        assert (reference.export_name, reference.member_name) == ("Widget", "render")

    def test_empty_reference(self):
        """Test that empty text is reported."""
        reference, errors = parse("")

        assert reference is None
        assert errors == [ApiDefinitionReference.NOTATION_MESSAGE]

    def test_whitespace_is_rejected(self):
        """Test that a reference must be a single token."""
        reference, errors = parse("Foo bar")

        assert reference is None
        assert errors == [ApiDefinitionReference.NOTATION_MESSAGE]

    def test_too_many_parts(self):
        """Test that only export.member depth is supported."""
        reference, errors = parse("A.b.c")

        assert reference is None
        assert "maximum of two parts" in errors[0]

    def test_bad_package_part(self):
        """Test that a scope without a package name is rejected."""
        reference, errors = parse("@scope:Foo")

        assert reference is None
        assert errors == [ApiDefinitionReference.NOTATION_MESSAGE]

    def test_invalid_export_name(self):
        """Test that the export must be an identifier."""
        reference, errors = parse("pkg:1abc")

        assert reference is None
        assert "valid export name" in errors[0]

    def test_invalid_member_name(self):
        """Test that a trailing dot is rejected."""
        reference, errors = parse("Foo.")

        assert reference is None
        assert "valid member name" in errors[0]

    def test_dollar_identifiers(self):
        """Test that JavaScript identifiers with '$' are accepted."""
        reference, errors = parse("$jquery.$fn")

        assert errors == []
        assert reference.export_name == "$jquery"


class TestConversions:
    """Tests for converting between references and item keys."""

    def test_round_trip_through_parts(self):
        """Test create_from_parts and to_api_item_reference agree."""
        parts = ApiItemReference("@scope", "pkg", "Foo", "bar")

        reference = ApiDefinitionReference.create_from_parts(parts)

        assert reference.to_api_item_reference() == parts

    def test_item_reference_is_a_fresh_copy(self):
        """Test that mutating the item key does not affect the reference."""
        reference, _ = parse("Foo")

        key = reference.to_api_item_reference()
        key.package_name = "changed"

        assert reference.package_name == ""

    def test_string_form(self):
        """Test the notation produced by str()."""
        reference, _ = parse("@microsoft/sp-core-library:Guid.newGuid")

        assert str(reference) == "@microsoft/sp-core-library:Guid.newGuid"
