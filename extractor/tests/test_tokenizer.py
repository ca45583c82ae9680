"""Tests for the AEDoc tokenizer and comment body extraction."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aedoc.models.token import Token, TokenType
from aedoc.parsers.comment_text import extract_comment_body
from aedoc.parsers.tokenizer import Tokenizer


def tokenize(text):
    """Return all tokens and reported errors for a comment."""
    errors = []
    tokenizer = Tokenizer(text, errors.append)
    tokens = []
    while True:
        token = tokenizer.get_token()
        if token is None:
            break
        tokens.append(token)
    return tokens, errors


class TestTokenizer:
    """Test suite for Tokenizer."""

    def test_splits_text_and_block_tags(self):
        """Test that block tags separate the surrounding text."""
        tokens, errors = tokenize("Summary text. @remarks More.")

        assert tokens == [
            Token(TokenType.TEXT, text="Summary text. "),
            Token(TokenType.BLOCK_TAG, tag="@remarks"),
            Token(TokenType.TEXT, text=" More."),
        ]
        assert errors == []

    def test_inline_tag_has_tag_and_text(self):
        """Test that an inline tag is split into its tag and trimmed body."""
        tokens, _ = tokenize("See {@link Foo.bar | label} here")

        assert tokens == [
            Token(TokenType.TEXT, text="See "),
            Token(TokenType.INLINE_TAG, tag="@link", text="Foo.bar | label"),
            Token(TokenType.TEXT, text=" here"),
        ]

    def test_inline_tag_without_body(self):
        """Test that an empty inline tag has empty text."""
        tokens, _ = tokenize("{@link}")

        assert tokens == [Token(TokenType.INLINE_TAG, tag="@link", text="")]

    def test_escaped_braces_inside_inline_tag(self):
        """Test that escaped braces stay inside the inline tag and are unescaped."""
        tokens, _ = tokenize(r"{@link Foo | a \{b\}}")

        assert len(tokens) == 1
        assert tokens[0].text == "Foo | a {b}"

    def test_at_sign_inside_word_is_not_a_tag(self):
        """Test that an email address is plain text."""
        tokens, _ = tokenize("Contact me@example.com today")

        assert tokens == [Token(TokenType.TEXT, text="Contact me@example.com today")]

    def test_tag_followed_by_punctuation_is_text(self):
        """Test that '@public.' is not treated as a block tag."""
        tokens, _ = tokenize("Use @public.")

        assert [token.type for token in tokens] == [TokenType.TEXT]

    def test_block_tag_at_start_and_end(self):
        """Test block tags at the boundaries of the comment."""
        tokens, _ = tokenize("@beta\n@sealed")

        assert tokens == [
            Token(TokenType.BLOCK_TAG, tag="@beta"),
            Token(TokenType.TEXT, text="\n"),
            Token(TokenType.BLOCK_TAG, tag="@sealed"),
        ]

    def test_carriage_returns_are_removed(self):
        """Test that Windows line endings are normalized."""
        tokens, _ = tokenize("line one\r\nline two")

        assert tokens == [Token(TokenType.TEXT, text="line one\nline two")]

    def test_empty_comment_has_no_tokens(self):
        """Test that an empty comment yields no tokens."""
        tokens, errors = tokenize("")

        assert tokens == []
        assert errors == []

    def test_peek_does_not_consume(self):
        """Test one-token lookahead."""
        tokenizer = Tokenizer("@public", lambda message: None)

        assert tokenizer.peek_token() == tokenizer.peek_token()
        assert tokenizer.get_token().tag == "@public"
        assert tokenizer.peek_token() is None
        assert tokenizer.get_token() is None

    def test_unbalanced_brace_is_text(self):
        """Test that a lone brace does not start an inline tag."""
        tokens, _ = tokenize("a { b")

        assert tokens == [Token(TokenType.TEXT, text="a { b")]


class TestExtractCommentBody:
    """Test suite for extract_comment_body."""

    def test_strips_delimiters_and_gutter(self):
        """Test a typical multi-line comment."""
        comment = "/**\n * Adds numbers.\n *\n * @public\n */"

        assert extract_comment_body(comment) == "Adds numbers.\n\n@public"

    def test_single_line_comment(self):
        """Test a comment on one line."""
        assert extract_comment_body("/** Single line. */") == "Single line."

    def test_body_without_delimiters_is_unchanged(self):
        """Test that already-extracted text passes through."""
        body = "Summary.\n@remarks Remarks."

        assert extract_comment_body(body) == body

    def test_gutter_without_space(self):
        """Test lines where text follows the star directly."""
        assert extract_comment_body("/**\n *Tight.\n */") == "Tight."
