import json

import pytest

from phpharness.config import HarnessConfig
from phpharness.errors import FileAccessError, RenderError
from phpharness.inspector import InspectMode, SourceInspector, Toolchain, to_serializable
from phpharness.lexer import PhpTokenizer
from phpharness.parser import TolerantParser
from phpharness.tolerant import TokenForm, TolerantLexer


@pytest.fixture(scope="module")
def inspector():
    return SourceInspector()


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_bytes(content.encode("utf-8"))
    return path


def test_tokens_rendering(inspector, tmp_path):
    path = write(tmp_path, "x.php", "<?php\n$x = 1;\n")
    assert inspector.tokens(path) == (
        "<?php\n$x = 1;\n"
        "T_OPEN_TAG: `<?php`\n"
        "NEWLINE: `\n`\n"
        "T_VARIABLE: `$x`\n"
        "T_WHITESPACE: ` `\n"
        "`=`\n"
        "T_WHITESPACE: ` `\n"
        "T_LNUMBER: `1`\n"
        "`;`\n"
        "NEWLINE: `\n`\n"
    )


def test_tokens_adds_newline_after_source(inspector, tmp_path):
    path = write(tmp_path, "x.php", "<?php echo 1;")
    rendered = inspector.tokens(path)
    assert rendered.startswith("<?php echo 1;\nT_OPEN_TAG: `<?php `\n")


class FakeTokenizer:
    def tokenize(self, source):
        return [(7, "a\nb"), "x"]

    def token_name(self, kind):
        return f"KIND{kind}"


def test_tokens_mode_only_uses_tokenizer_interface(tmp_path):
    default = Toolchain.default()
    inspector = SourceInspector(Toolchain(FakeTokenizer(), default.lexer, default.parser))
    path = write(tmp_path, "x.php", "ignorado\n")
    assert inspector.tokens(path) == "ignorado\nKIND7: `a`\nNEWLINE: `\n`\nKIND7: `b`\n`x`\n"


def test_scan_is_compact_by_default(inspector, tmp_path):
    path = write(tmp_path, "x.php", "<?php echo 1;")
    rendered = inspector.scan(path)
    assert " " not in rendered
    assert json.loads(rendered) == [
        {"kind": "ScriptSectionStartTag", "fullStart": 0, "start": 0, "length": 6},
        {"kind": "EchoKeyword", "fullStart": 6, "start": 6, "length": 4},
        {"kind": "IntegerLiteralToken", "fullStart": 10, "start": 11, "length": 2},
        {"kind": "SemicolonToken", "fullStart": 12, "start": 12, "length": 1},
        {"kind": "EndOfFileToken", "fullStart": 13, "start": 13, "length": 0},
    ]


def test_scan_pretty_and_short_form(inspector, tmp_path):
    path = write(tmp_path, "x.php", "<?php echo 1;")
    rendered = inspector.scan(path, pretty=True, token_form=TokenForm.SHORT)
    assert rendered.startswith('[\n    {\n        "kind": "ScriptSectionStartTag",')
    assert json.loads(rendered)[2] == {"kind": "IntegerLiteralToken", "textLength": 1, "text": "1"}


def test_scan_pretty_from_config(tmp_path):
    inspector = SourceInspector(config=HarnessConfig(pretty_tokens=True, indent=2))
    path = write(tmp_path, "x.php", "<?php")
    assert inspector.scan(path).startswith('[\n  {\n    "kind"')


def test_parse_renders_tree_json(inspector, tmp_path):
    path = write(tmp_path, "x.php", "<?php $a;")
    tree = json.loads(inspector.parse(path))

    body = tree["SourceFileNode"]
    assert body["endOfFileToken"]["kind"] == "EndOfFileToken"
    opening, statement = body["statementList"]
    assert opening == {
        "InlineHtml": {
            "scriptSectionEndTag": None,
            "text": None,
            "scriptSectionStartTag": {"kind": "ScriptSectionStartTag", "fullStart": 0, "start": 0, "length": 6},
        }
    }
    expression = statement["ExpressionStatement"]["expression"]
    assert expression == {"Variable": {"name": {"kind": "VariableName", "fullStart": 6, "start": 6, "length": 2}}}


def test_parse_output_has_unix_line_endings(inspector, tmp_path):
    path = write(tmp_path, "x.php", "<?php\r\n$a = 'x\r\ny';\r\n")
    rendered = inspector.parse(path, token_form=TokenForm.SHORT)
    assert "\r" not in rendered
    assert rendered.startswith('{\n    "SourceFileNode": {')
    assert not rendered.endswith("\n")


def test_read_source_keeps_crlf(inspector, tmp_path):
    path = write(tmp_path, "x.php", "a\r\nb")
    assert inspector.read_source(path) == "a\r\nb"


def test_missing_file_raises_file_access_error(inspector, tmp_path):
    with pytest.raises(FileAccessError) as excinfo:
        inspector.tokens(tmp_path / "missing.php")
    assert excinfo.value.path == tmp_path / "missing.php"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_undecodable_file_raises_file_access_error(inspector, tmp_path):
    path = tmp_path / "bad.php"
    path.write_bytes(b"<?php \xff\xfe")
    with pytest.raises(FileAccessError):
        inspector.scan(path)


@pytest.mark.parametrize("mode", list(InspectMode))
def test_inspect_dispatches_by_mode(inspector, tmp_path, mode):
    path = write(tmp_path, "x.php", "<?php echo 1;\n")
    assert inspector.inspect(path, mode.value) == getattr(inspector, mode.value)(path)


def test_to_serializable_uses_camel_case():
    parser = TolerantParser(lexer=TolerantLexer(PhpTokenizer()))
    tree = to_serializable(parser.parse_source_file("<?php foreach ($a as $b) {}"), TokenForm.SHORT)
    foreach = tree["SourceFileNode"]["statementList"][1]["ForeachStatement"]
    assert set(foreach) == {
        "foreachKeyword",
        "openParen",
        "forEachCollectionName",
        "asKeyword",
        "forEachKey",
        "arrowToken",
        "forEachValue",
        "closeParen",
        "statements",
    }
    assert foreach["forEachKey"] is None
    assert foreach["forEachValue"] == {"kind": "VariableName", "textLength": 2, "text": "$b"}


def concat_chain(operands):
    return "<?php $x = " + " . ".join(["'a'"] * operands) + ";\n"


@pytest.mark.parametrize("operands", [300, 500, 1000])
def test_parse_of_long_concatenation_chain(inspector, tmp_path, operands):
    path = write(tmp_path, "chain.php", concat_chain(operands))
    rendered = inspector.parse(path, token_form=TokenForm.SHORT)
    assert rendered.count('"BinaryExpression"') == operands - 1
    assert rendered.count('"DotToken"') == operands - 1


def test_to_serializable_of_deep_tree_keeps_field_order():
    parser = TolerantParser(lexer=TolerantLexer(PhpTokenizer()))
    tree = to_serializable(parser.parse_source_file(concat_chain(2000)), TokenForm.SHORT)

    node = tree["SourceFileNode"]["statementList"][1]["ExpressionStatement"]["expression"]
    node = node["AssignmentExpression"]["rightOperand"]
    depth = 0
    while "BinaryExpression" in node:
        assert list(node["BinaryExpression"]) == ["leftOperand", "operator", "rightOperand"]
        node = node["BinaryExpression"]["leftOperand"]
        depth += 1
    assert depth == 1999


def test_recursion_failure_becomes_render_error(tmp_path):
    class ExplodingParser:
        def parse_source_file(self, source):
            raise RecursionError("demasiado profundo")

    default = Toolchain.default()
    inspector = SourceInspector(Toolchain(default.tokenizer, default.lexer, ExplodingParser()))
    path = write(tmp_path, "x.php", "<?php $a;")

    with pytest.raises(RenderError) as excinfo:
        inspector.parse(path)

    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, RecursionError)


def test_syntax_warnings_name_the_file(tmp_path):
    messages = []
    inspector = SourceInspector(reporter=lambda level, message: messages.append((level, message)))
    path = write(tmp_path, "bad.php", "<?php $a = ;\necho 1;")

    inspector.parse(path)

    [(level, message)] = messages
    assert level == "warning"
    assert message.startswith(f"{path}: Token inesperado")
