import pytest

from phpharness.tolerant import TokenForm, TolerantLexer, TolerantToken, all_token_kinds


@pytest.fixture()
def lexer():
    return TolerantLexer()


def kinds(lexer, code):
    return [tok.kind for tok in lexer.get_tokens(code)]


def test_offsets_fold_trivia_into_full_start(lexer):
    tokens = lexer.get_tokens("<?php echo 1;")
    assert tokens == [
        TolerantToken("ScriptSectionStartTag", 0, 0, 6),
        TolerantToken("EchoKeyword", 6, 6, 4),
        TolerantToken("IntegerLiteralToken", 10, 11, 2),
        TolerantToken("SemicolonToken", 12, 12, 1),
        TolerantToken("EndOfFileToken", 13, 13, 0),
    ]


def test_comments_are_trivia(lexer):
    tokens = lexer.get_tokens("<?php /* c */ $a")
    variable = tokens[1]
    assert variable.kind == "VariableName"
    assert (variable.full_start, variable.start, variable.length) == (6, 14, 10)
    assert variable.text == "$a"


def test_trailing_trivia_belongs_to_end_of_file(lexer):
    end = lexer.get_tokens("<?php $a;  \n")[-1]
    assert end.kind == "EndOfFileToken"
    assert (end.full_start, end.start, end.length) == (9, 12, 3)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("<?php $a = true;", ["ScriptSectionStartTag", "VariableName", "EqualsToken", "TrueReservedWord", "SemicolonToken", "EndOfFileToken"]),
        ("<?php Foo\\bar();", ["ScriptSectionStartTag", "Name", "BackslashToken", "Name", "OpenParenToken", "CloseParenToken", "SemicolonToken", "EndOfFileToken"]),
        ("<?php (int)$a;", ["ScriptSectionStartTag", "IntCastToken", "VariableName", "SemicolonToken", "EndOfFileToken"]),
        ("<?php $a <> $b;", ["ScriptSectionStartTag", "VariableName", "LessThanGreaterThanToken", "VariableName", "SemicolonToken", "EndOfFileToken"]),
        ("<?php \x01", ["ScriptSectionStartTag", "Unknown", "EndOfFileToken"]),
        ("hola ?>", ["InlineHtml", "EndOfFileToken"]),
        ('<?php "a $b";', ["ScriptSectionStartTag", "DoubleQuoteToken", "EncapsedAndWhitespace", "VariableName", "DoubleQuoteToken", "SemicolonToken", "EndOfFileToken"]),
    ],
)
def test_kind_names(lexer, code, expected):
    assert kinds(lexer, code) == expected


def test_serialize_forms():
    token = TolerantToken("IntegerLiteralToken", 10, 11, 2, "1")
    assert token.serialize() == {"kind": "IntegerLiteralToken", "fullStart": 10, "start": 11, "length": 2}
    assert token.serialize(TokenForm.SHORT) == {"kind": "IntegerLiteralToken", "textLength": 1, "text": "1"}


def test_empty_source_is_only_end_of_file(lexer):
    assert lexer.get_tokens("") == [TolerantToken("EndOfFileToken", 0, 0, 0)]


def test_every_kind_is_known():
    known = set(all_token_kinds())
    for code in ("<?php class A { public $x = [1 => 'a']; }", "<?= $x ?? 'y' ?>", "<?php @$a->b::c++;"):
        assert set(kinds(TolerantLexer(), code)) <= known
