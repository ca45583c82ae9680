"""AEDoc Extractor Package.

This package turns AEDoc annotation comments attached to API declarations into
a normalized, cross-referenced documentation model, including:
- Tokenizing and parsing block and inline AEDoc tags
- Markdown-ish text handling (paragraphs, HTML tags, backslash escapes)
- {@link} and {@inheritdoc} resolution across a whole package
"""

__version__ = "0.3.0"
