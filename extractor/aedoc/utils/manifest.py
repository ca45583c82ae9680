"""Loading of extraction manifests.

A manifest lists the documented package's items and their raw comments::

    {
      "package": "@scope/pkg",
      "items": [
        {"name": "Widget", "kind": "class", "docs": "/** ... */",
         "members": [{"name": "render", "kind": "method", "docs": "..."}]}
      ],
      "external": {
        "@other/pkg": {"Base.render": {"kind": "method", "summary": [...]}}
      }
    }
"""

import json
from pathlib import Path
from typing import Optional

from ..analysis.collector import DocumentationCollector
from ..analysis.extractor_context import ExtractorContext
from ..models.api_item import ApiItem, ApiItemKind, ResolvedApiItem
from ..resolution.package_resolver import PackageResolver
from .config import ExtractorConfig

_JSON_TYPE_NAMES = {dict: "object", list: "array", str: "string"}


def load_manifest(path: Path) -> dict:
    """Read a manifest file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Manifest {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Manifest {path} must contain a JSON object")
    return data


def build_collector(
    data: dict, config: Optional[ExtractorConfig] = None
) -> DocumentationCollector:
    """Create a collector and run the first pass over every manifest item.

    Args:
        data: Parsed manifest.
        config: Extraction settings (defaults to ExtractorConfig.from_env()).

    Returns:
        DocumentationCollector ready for complete().

    Raises:
        ValueError: If the manifest is malformed.
    """
    if "package" not in data:
        raise ValueError("Manifest is missing the 'package' field")
    if not isinstance(data["package"], str):
        raise ValueError("Manifest field 'package' must be a string")

    resolver = PackageResolver()
    external = _expect(data.get("external", {}), dict, "Manifest field 'external'")
    for package_name, items in external.items():
        items = _expect(items, dict, f"API data for package {package_name!r}")
        try:
            resolver.add_external_package(
                package_name,
                {key: ResolvedApiItem.from_dict(item) for key, item in items.items()},
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid API data for package {package_name!r}: {e}") from e

    context = ExtractorContext(data["package"], config=config)
    collector = DocumentationCollector(context, resolver)
    for item_data in _expect(data.get("items", []), list, "Manifest field 'items'"):
        _add_item(collector, item_data, parent=None)
    return collector


def _expect(value, expected_type: type, what: str):
    """Return value, or raise ValueError if it is not of expected_type."""
    if not isinstance(value, expected_type):
        raise ValueError(
            f"{what} must be a JSON {_JSON_TYPE_NAMES[expected_type]},"
            f" got {type(value).__name__}"
        )
    return value


def _add_item(
    collector: DocumentationCollector, item_data: dict, parent: Optional[ApiItem]
) -> None:
    _expect(item_data, dict, "Manifest item")
    try:
        name = item_data["name"]
        kind = ApiItemKind(item_data["kind"])
    except KeyError as e:
        raise ValueError(f"Manifest item is missing the {e.args[0]!r} field") from e
    except ValueError as e:
        raise ValueError(f"Manifest item {item_data.get('name')!r}: {e}") from e

    _expect(name, str, "Manifest item name")
    docs = _expect(item_data.get("docs", ""), str, f"Manifest item {name!r} docs")
    members = _expect(
        item_data.get("members", []), list, f"Manifest item {name!r} members"
    )

    if parent is not None and members:
        raise ValueError(
            f"Manifest item {parent.name}.{name}: members may only be nested one level"
        )

    item = collector.add_item(name, kind, docs, parent=parent)
    for member_data in members:
        _add_item(collector, member_data, parent=item)
