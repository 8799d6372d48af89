import pytest

from phpharness.lexer import PhpTokenizer, TokenKind
from phpharness.normalizer import normalize
from phpharness.tokens import BareToken, NewlineToken, Sentinel, TypedToken, join_text


@pytest.fixture()
def tokenizer():
    return PhpTokenizer()


SOURCES = [
    "",
    "<?php\n$x = 1;\n",
    "<?php\r\n$x = 1;\r\n",
    "<html>\n<body>\n<?php echo 'a\nb'; ?>\n</body>\n",
    "<?php\n/* uno\n   dos */\n// fin\n$y = \"x $y\n\";\n",
    "<?php\n$s = <<<EOT\nlinea\nEOT;\n",
]


@pytest.mark.parametrize("source", SOURCES)
def test_concatenation_reproduces_source(tokenizer, source):
    assert join_text(normalize(tokenizer.tokenize(source))) == source


@pytest.mark.parametrize("source", SOURCES)
def test_normalize_is_idempotent(tokenizer, source):
    once = normalize(tokenizer.tokenize(source))
    assert normalize(once) == once


def test_open_tag_and_whitespace_scenario(tokenizer):
    tokens = normalize(tokenizer.tokenize("<?php\n$x = 1;\n"))
    assert tokens == [
        TypedToken(TokenKind.T_OPEN_TAG, "<?php"),
        NewlineToken("\n"),
        TypedToken(TokenKind.T_VARIABLE, "$x"),
        TypedToken(TokenKind.T_WHITESPACE, " "),
        BareToken("="),
        TypedToken(TokenKind.T_WHITESPACE, " "),
        TypedToken(TokenKind.T_LNUMBER, "1"),
        BareToken(";"),
        NewlineToken("\n"),
    ]


def test_crlf_is_a_single_newline_token():
    raw = [(TokenKind.T_WHITESPACE, "  \r\n\n  ")]
    assert normalize(raw) == [
        TypedToken(TokenKind.T_WHITESPACE, "  "),
        NewlineToken("\r\n"),
        NewlineToken("\n"),
        TypedToken(TokenKind.T_WHITESPACE, "  "),
    ]


def test_atomic_tokens_are_not_split():
    string = (TokenKind.T_CONSTANT_ENCAPSED_STRING, "'a\nb'")
    comment = (TokenKind.T_COMMENT, "/* a\n b */")
    doc = (TokenKind.T_DOC_COMMENT, "/** a\n */")
    assert normalize([string, comment, doc]) == [
        TypedToken(*string),
        TypedToken(*comment),
        TypedToken(*doc),
    ]


def test_bare_tokens_keep_their_variant():
    assert normalize(["{", "\n"]) == [BareToken("{"), NewlineToken("\n")]


def test_every_newline_fragment_is_isolated(tokenizer):
    source = "<?php\nif ($a) {\n\techo $a;\r\n}\n?>\n<p>\n"
    for token in normalize(tokenizer.tokenize(source)):
        if "\n" in token.text and token.kind is not Sentinel.NEWLINE:
            assert token.kind == TokenKind.T_CONSTANT_ENCAPSED_STRING or token.text.startswith("/*")
        if token.kind is Sentinel.NEWLINE:
            assert token.text in ("\n", "\r\n")


def test_empty_input_gives_new_empty_list():
    raw = []
    result = normalize(raw)
    assert result == []
    assert result is not raw


def test_newline_sentinel_never_equals_integer_kind():
    assert all(Sentinel.NEWLINE != kind for kind in TokenKind)
    assert NewlineToken("\n").kind is Sentinel.NEWLINE
    assert BareToken(";").kind is None


@pytest.mark.parametrize("bad", [42, (1,), ("x", 1), None])
def test_malformed_entries_raise_type_error(bad):
    with pytest.raises(TypeError):
        normalize([bad])
