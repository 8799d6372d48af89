import pytest

from phpharness.lexer import PhpTokenizer, TokenKind, token_name
from phpharness.tokens import join_text


@pytest.fixture()
def tokenizer():
    return PhpTokenizer()


def php_tokens(tokenizer, code):
    """Tokens del codigo tras ``<?php `` sin espacios en blanco."""
    raw = tokenizer.tokenize("<?php " + code)
    return [tok for tok in raw[1:] if not (isinstance(tok, tuple) and tok[0] == TokenKind.T_WHITESPACE)]


def single_token(tokenizer, code):
    tokens = php_tokens(tokenizer, code)
    assert len(tokens) == 1, f"expected 1 token, got {tokens}"
    return tokens[0]


def test_open_tag_takes_one_trailing_newline(tokenizer):
    assert tokenizer.tokenize("<?php\n\n") == [
        (TokenKind.T_OPEN_TAG, "<?php\n"),
        (TokenKind.T_WHITESPACE, "\n"),
    ]


def test_inline_html_and_echo_tag(tokenizer):
    assert tokenizer.tokenize("<b><?= $x ?>\n</b>") == [
        (TokenKind.T_INLINE_HTML, "<b>"),
        (TokenKind.T_OPEN_TAG_WITH_ECHO, "<?="),
        (TokenKind.T_WHITESPACE, " "),
        (TokenKind.T_VARIABLE, "$x"),
        (TokenKind.T_WHITESPACE, " "),
        (TokenKind.T_CLOSE_TAG, "?>\n"),
        (TokenKind.T_INLINE_HTML, "</b>"),
    ]


def test_text_without_open_tag_is_inline_html(tokenizer):
    assert tokenizer.tokenize("hola <mundo>") == [(TokenKind.T_INLINE_HTML, "hola <mundo>")]


@pytest.mark.parametrize(
    "code, kind",
    [
        ("$miVariable", TokenKind.T_VARIABLE),
        ("miFuncion", TokenKind.T_STRING),
        ("42", TokenKind.T_LNUMBER),
        ("0x1F", TokenKind.T_LNUMBER),
        ("3.14", TokenKind.T_DNUMBER),
        ("1e3", TokenKind.T_DNUMBER),
        ("'hola'", TokenKind.T_CONSTANT_ENCAPSED_STRING),
        ('"hola"', TokenKind.T_CONSTANT_ENCAPSED_STRING),
        ("// comentario", TokenKind.T_COMMENT),
        ("# comentario", TokenKind.T_COMMENT),
        ("/* bloque */", TokenKind.T_COMMENT),
        ("/** doc */", TokenKind.T_DOC_COMMENT),
        ("==", TokenKind.T_IS_EQUAL),
        ("!==", TokenKind.T_IS_NOT_IDENTICAL),
        ("->", TokenKind.T_OBJECT_OPERATOR),
        ("::", TokenKind.T_PAAMAYIM_NEKUDOTAYIM),
        ("??=", TokenKind.T_COALESCE_EQUAL),
        ("(int)", TokenKind.T_INT_CAST),
        ("( string )", TokenKind.T_STRING_CAST),
        ("\\", TokenKind.T_NS_SEPARATOR),
    ],
)
def test_single_typed_tokens(tokenizer, code, kind):
    assert single_token(tokenizer, code) == (kind, code)


@pytest.mark.parametrize("keyword, kind", [("echo", TokenKind.T_ECHO), ("ECHO", TokenKind.T_ECHO), ("Function", TokenKind.T_FUNCTION), ("die", TokenKind.T_EXIT)])
def test_keywords_are_case_insensitive(tokenizer, keyword, kind):
    assert single_token(tokenizer, keyword) == (kind, keyword)


@pytest.mark.parametrize("char", [";", "=", "(", ")", "{", "}", "[", "]", ",", "+", "."])
def test_single_punctuation_is_bare(tokenizer, char):
    assert single_token(tokenizer, char) == char


def test_interpolated_string_is_split(tokenizer):
    assert php_tokens(tokenizer, '"hola $nombre!"') == [
        '"',
        (TokenKind.T_ENCAPSED_AND_WHITESPACE, "hola "),
        (TokenKind.T_VARIABLE, "$nombre"),
        (TokenKind.T_ENCAPSED_AND_WHITESPACE, "!"),
        '"',
    ]


def test_heredoc_is_three_tokens(tokenizer):
    assert php_tokens(tokenizer, "<<<EOT\nlinea uno\nEOT;") == [
        (TokenKind.T_START_HEREDOC, "<<<EOT\n"),
        (TokenKind.T_ENCAPSED_AND_WHITESPACE, "linea uno\n"),
        (TokenKind.T_END_HEREDOC, "EOT"),
        ";",
    ]


def test_unknown_character_is_bad_character(tokenizer):
    assert php_tokens(tokenizer, "\x01") == [(TokenKind.T_BAD_CHARACTER, "\x01")]


def test_unterminated_single_quote_runs_to_end(tokenizer):
    assert php_tokens(tokenizer, "'abc\n") == [(TokenKind.T_ENCAPSED_AND_WHITESPACE, "'abc\n")]


@pytest.mark.parametrize(
    "source",
    [
        "<?php\nclass A { public function f($x = [1, 2]) { return $x?->y ?? null; } }\n",
        "<html>\r\n<?php if ($a <> 1): echo \"v=$a\"; endif; ?>\r\n</html>",
        "<?php $a = (object) ['k' => 1]; // fin ?>texto",
        "<?php \x01 ' sin cerrar",
    ],
)
def test_tokenizer_is_lossless(tokenizer, source):
    assert join_text(tokenizer.tokenize(source)) == source


def test_token_name_lookup():
    assert token_name(TokenKind.T_VARIABLE) == "T_VARIABLE"
    assert token_name(1) == "UNKNOWN"
