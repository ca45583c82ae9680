"""Tests for PackageResolver."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aedoc.analysis.collector import DocumentationCollector
from aedoc.analysis.extractor_context import ExtractorContext
from aedoc.models.api_item import ApiItemKind, ResolvedApiItem
from aedoc.models.markup import MarkupText
from aedoc.models.release_tag import ReleaseTag
from aedoc.parsers.api_definition_reference import ApiDefinitionReference
from aedoc.resolution.base_resolver import ReferenceResolver
from aedoc.resolution.package_resolver import PackageResolver
from aedoc.utils.config import ExtractorConfig


def ref(text):
    errors = []
    reference = ApiDefinitionReference.create_from_string(text, errors.append)
    assert errors == []
    return reference


@pytest.fixture
def package():
    """A package with one class and one of its members."""
    context = ExtractorContext("@scope/pkg", config=ExtractorConfig())
    collector = DocumentationCollector(context)
    widget = collector.add_item("Widget", ApiItemKind.CLASS, "A widget.\n@beta")
    collector.add_item("render", ApiItemKind.METHOD, "Renders it.", parent=widget)
    return context.package


@pytest.fixture
def resolver():
    return PackageResolver()


class TestLocalResolution:
    """Tests for references into the package being documented."""

    def test_is_a_reference_resolver(self, resolver):
        """Test that PackageResolver implements the interface."""
        assert isinstance(resolver, ReferenceResolver)

    def test_unqualified_export(self, resolver, package):
        """Test resolving an export by name."""
        warnings = []
        resolved = resolver.resolve(ref("Widget"), package, warnings)

        assert resolved.kind == ApiItemKind.CLASS
        assert resolved.release_tag == ReleaseTag.BETA
        assert resolved.summary == [MarkupText("A widget.")]
        assert resolved.documentation is package.find("Widget").documentation
        assert warnings == []

    def test_member(self, resolver, package):
        """Test resolving a member through its export."""
        resolved = resolver.resolve(ref("Widget.render"), package, [])

        assert resolved.kind == ApiItemKind.METHOD
        assert resolved.summary == [MarkupText("Renders it.")]

    def test_qualified_with_own_package(self, resolver, package):
        """Test that naming the current package resolves locally."""
        resolved = resolver.resolve(ref("@scope/pkg:Widget"), package, [])

        assert resolved.kind == ApiItemKind.CLASS

    def test_unqualified_miss_is_silent(self, resolver, package):
        """Test that an unqualified miss returns None without a warning."""
        warnings = []

        assert resolver.resolve(ref("Missing"), package, warnings) is None
        assert warnings == []

    def test_qualified_miss_warns(self, resolver, package):
        """Test that a qualified miss is reported."""
        warnings = []

        assert resolver.resolve(ref("@scope/pkg:Widget.missing"), package, warnings) is None
        assert warnings == ['Unable to resolve reference "@scope/pkg:Widget.missing"']

    def test_member_of_missing_export(self, resolver, package):
        """Test that a member lookup needs its export."""
        assert resolver.resolve(ref("Missing.render"), package, []) is None


class TestExternalResolution:
    """Tests for references into other packages."""

    def test_external_item(self, resolver, package):
        """Test looking up registered API data."""
        item = ResolvedApiItem(kind=ApiItemKind.FUNCTION, release_tag=ReleaseTag.PUBLIC)
        resolver.add_external_package("lodash", {"map": item})

        assert resolver.resolve(ref("lodash:map"), package, []) is item

    def test_external_member_key(self, resolver, package):
        """Test that members are keyed as 'Export.member'."""
        item = ResolvedApiItem(kind=ApiItemKind.METHOD)
        resolver.add_external_package("@other/lib", {"Base.run": item})

        assert resolver.resolve(ref("@other/lib:Base.run"), package, []) is item

    def test_unknown_package(self, resolver, package):
        """Test the warning for a package without API data."""
        warnings = []

        assert resolver.resolve(ref("@nope/pkg:Foo.bar"), package, warnings) is None
        assert warnings == [
            'Unable to find referenced package "@nope/pkg" for reference "@nope/pkg:Foo.bar"'
        ]

    def test_unknown_external_item(self, resolver, package):
        """Test the warning for a missing item in a known package."""
        resolver.add_external_package("lodash", {})
        warnings = []

        assert resolver.resolve(ref("lodash:nothing"), package, warnings) is None
        assert warnings == ['Unable to resolve reference "lodash:nothing"']

    def test_warnings_are_logged(self, resolver, package, caplog):
        """Test that warnings also go to the logger."""
        with caplog.at_level("WARNING", logger="aedoc.resolution.package_resolver"):
            resolver.resolve(ref("@nope/pkg:Foo"), package, [])

        assert "Unable to find referenced package" in caplog.text


class TestResolvedApiItemFromDict:
    """Tests for loading external API data."""

    def test_from_dict(self):
        """Test converting JSON data into a ResolvedApiItem."""
        resolved = ResolvedApiItem.from_dict(
            {
                "kind": "method",
                "release_tag": "alpha",
                "summary": [
                    {"kind": "text", "text": "See "},
                    {
                        "kind": "api-link",
                        "elements": [{"kind": "text", "text": "Foo"}],
                        "target": {
                            "scope_name": "",
                            "package_name": "lib",
                            "export_name": "Foo",
                            "member_name": "",
                        },
                    },
                ],
                "parameters": {
                    "x": {"description": [{"kind": "text", "text": "The x."}]}
                },
            }
        )

        assert resolved.kind == ApiItemKind.METHOD
        assert resolved.release_tag == ReleaseTag.ALPHA
        assert resolved.summary[1].target.export_name == "Foo"
        assert resolved.parameters["x"].description == [MarkupText("The x.")]
        assert resolved.remarks == []
        assert resolved.documentation is None

    def test_unknown_element_kind(self):
        """Test that unknown markup is rejected."""
        with pytest.raises(ValueError, match="Unknown markup element kind"):
            ResolvedApiItem.from_dict({"kind": "class", "summary": [{"kind": "video"}]})
