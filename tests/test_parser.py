import pytest
from hypothesis import given, strategies as st

from tern.reader import ast
from tern.reader.lexer import KEYWORDS, Lexer
from tern.reader.parser import Parser, PRECEDENCES


def _parse_with_errors(source):
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors


def _single_expression(parse, source):
    program = parse(source)
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert isinstance(stmt, ast.ExpressionStatement)
    return stmt.expression


@pytest.mark.parametrize(
    "source,name,value",
    [
        ("let x = 5;", "x", "5"),
        ("let y = true;", "y", "true"),
        ("let foobar = y;", "foobar", "y"),
        ("let s = \"hi\"", "s", '"hi"'),
        ("let f = fn(a) { a }", "f", "fn(a) {a}"),
    ]
)
def test_let_statements(parse, source, name, value):
    program = parse(source)
    [stmt] = program.statements
    assert isinstance(stmt, ast.LetStatement)
    assert stmt.token_literal() == "let"
    assert stmt.name.value == name
    assert str(stmt.value) == value


@pytest.mark.parametrize(
    "source,value",
    [
        ("return 5;", "5"),
        ("return x + y;", "(x + y)"),
        ("return fn(x) { x };", "fn(x) {x}"),
    ]
)
def test_return_statements(parse, source, value):
    [stmt] = parse(source).statements
    assert isinstance(stmt, ast.ReturnStatement)
    assert str(stmt.return_value) == value


def test_statements_without_semicolons(parse):
    program = parse("let a = 1 let b = 2 a b")
    assert [type(s) for s in program.statements] == [
        ast.LetStatement, ast.LetStatement, ast.ExpressionStatement, ast.ExpressionStatement,
    ]
    assert str(program) == "let a = 1; let b = 2; a; b"


def test_literals(parse):
    ident = _single_expression(parse, "foobar;")
    assert isinstance(ident, ast.Identifier) and ident.value == "foobar"
    integer = _single_expression(parse, "5;")
    assert isinstance(integer, ast.IntegerLiteral) and integer.value == 5
    largest = _single_expression(parse, "9223372036854775807")
    assert largest.value == 2 ** 63 - 1
    string = _single_expression(parse, '"hello world";')
    assert isinstance(string, ast.StringLiteral) and string.value == "hello world"
    assert _single_expression(parse, "true").value is True
    assert _single_expression(parse, "false").value is False


@pytest.mark.parametrize(
    "source,operator,right",
    [
        ("!5;", "!", "5"),
        ("-15;", "-", "15"),
        ("!true;", "!", "true"),
        ("!false;", "!", "false"),
    ]
)
def test_prefix_expressions(parse, source, operator, right):
    expr = _single_expression(parse, source)
    assert isinstance(expr, ast.PrefixExpression)
    assert expr.operator == operator
    assert str(expr.right) == right


@pytest.mark.parametrize("operator", ["+", "-", "*", "/", "%", ">", "<", ">=", "<=", "==", "!=", "&&", "||"])
def test_infix_expressions(parse, operator):
    expr = _single_expression(parse, f"5 {operator} 5;")
    assert isinstance(expr, ast.InfixExpression)
    assert expr.operator == operator
    assert expr.left.value == 5 and expr.right.value == 5


@pytest.mark.parametrize(
    "source,expected",
    [
        ("-a * b", "((-a) * b)"),
        ("!-a", "(!(-a))"),
        ("a + b + c", "((a + b) + c)"),
        ("a + b - c", "((a + b) - c)"),
        ("a * b * c", "((a * b) * c)"),
        ("a * b / c", "((a * b) / c)"),
        ("a + b / c", "(a + (b / c))"),
        ("a % b * c", "((a % b) * c)"),
        ("a + b * c + d / e - f", "(((a + (b * c)) + (d / e)) - f)"),
        ("3 + 4; -5 * 5", "(3 + 4); ((-5) * 5)"),
        ("5 > 4 == 3 < 4", "((5 > 4) == (3 < 4))"),
        ("5 < 4 != 3 > 4", "((5 < 4) != (3 > 4))"),
        ("a <= b == c >= d", "((a <= b) == (c >= d))"),
        ("3 + 4 * 5 == 3 * 1 + 4 * 5", "((3 + (4 * 5)) == ((3 * 1) + (4 * 5)))"),
        ("true", "true"),
        ("3 > 5 == false", "((3 > 5) == false)"),
        ("3 < 5 == true", "((3 < 5) == true)"),
        ("a || b && c", "(a || (b && c))"),
        ("a && b || c", "((a && b) || c)"),
        ("a && b == c", "(a && (b == c))"),
        ("1 + (2 + 3) + 4", "((1 + (2 + 3)) + 4)"),
        ("(5 + 5) * 2", "((5 + 5) * 2)"),
        ("2 / (5 + 5)", "(2 / (5 + 5))"),
        ("-(5 + 5)", "(-(5 + 5))"),
        ("!(true == true)", "(!(true == true))"),
        ("a + add(b * c) + d", "((a + add((b * c))) + d)"),
        ("add(a, b, 1, 2 * 3, 4 + 5, add(6, 7 * 8))", "add(a, b, 1, (2 * 3), (4 + 5), add(6, (7 * 8)))"),
        ("add(a + b + c * d / f + g)", "add((((a + b) + ((c * d) / f)) + g))"),
        ("a * [1, 2, 3, 4][b * c] * d", "((a * ([1, 2, 3, 4][(b * c)])) * d)"),
        ("add(a * b[2], b[1], 2 * [1, 2][1])", "add((a * (b[2])), (b[1]), (2 * ([1, 2][1])))"),
        ("f(x)(y)", "f(x)(y)"),
        ("a[0][1]", "((a[0])[1])"),
    ]
)
def test_operator_precedence(parse, source, expected):
    assert str(parse(source)) == expected


def test_if_expression(parse):
    expr = _single_expression(parse, "if (x < y) { x }")
    assert isinstance(expr, ast.IfExpression)
    assert str(expr.condition) == "(x < y)"
    assert [str(s) for s in expr.consequence.statements] == ["x"]
    assert expr.alternative is None


def test_if_else_expression(parse):
    expr = _single_expression(parse, "if (x < y) { x } else { y; z }")
    assert [str(s) for s in expr.alternative.statements] == ["y", "z"]
    assert str(expr) == "if ((x < y)) {x} else {y; z}"


def test_function_literal(parse):
    expr = _single_expression(parse, "fn(x, y) { x + y; }")
    assert isinstance(expr, ast.FunctionLiteral)
    assert [p.value for p in expr.parameters] == ["x", "y"]
    assert str(expr.body) == "(x + y)"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("fn() {};", []),
        ("fn(x) {};", ["x"]),
        ("fn(x, y, z) {};", ["x", "y", "z"]),
    ]
)
def test_function_parameters(parse, source, expected):
    expr = _single_expression(parse, source)
    assert [p.value for p in expr.parameters] == expected
    assert expr.body.statements == []


def test_call_expression(parse):
    expr = _single_expression(parse, "add(1, 2 * 3, 4 + 5);")
    assert isinstance(expr, ast.CallExpression)
    assert str(expr.function) == "add"
    assert [str(a) for a in expr.arguments] == ["1", "(2 * 3)", "(4 + 5)"]


def test_call_on_function_literal(parse):
    expr = _single_expression(parse, "fn(x) { x }(5)")
    assert isinstance(expr.function, ast.FunctionLiteral)
    assert [str(a) for a in expr.arguments] == ["5"]


def test_array_and_index(parse):
    array = _single_expression(parse, "[1, 2 * 2, 3 + 3]")
    assert isinstance(array, ast.ArrayLiteral)
    assert [str(e) for e in array.elements] == ["1", "(2 * 2)", "(3 + 3)"]
    assert _single_expression(parse, "[]").elements == []

    index = _single_expression(parse, "myArray[1 + 1]")
    assert isinstance(index, ast.IndexExpression)
    assert str(index.left) == "myArray"
    assert str(index.index) == "(1 + 1)"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("{}", []),
        ('{"one": 1, "two": 2, "three": 3}', [('"one"', "1"), ('"two"', "2"), ('"three"', "3")]),
        ("{1: true, true: 2}", [("1", "true"), ("true", "2")]),
        ('{"one": 0 + 1, "two": 10 - 8}', [('"one"', "(0 + 1)"), ('"two"', "(10 - 8)")]),
        ('{"a": 1,}', [('"a"', "1")]),
    ]
)
def test_hash_literal(parse, source, expected):
    expr = _single_expression(parse, source)
    assert isinstance(expr, ast.HashLiteral)
    assert [(str(k), str(v)) for k, v in expr.pairs] == expected


def test_loop_and_break(parse):
    expr = _single_expression(parse, "loop { let i = i + 1; break; }")
    assert isinstance(expr, ast.LoopExpression)
    assert [type(s) for s in expr.body.statements] == [ast.LetStatement, ast.BreakStatement]
    assert str(expr) == "loop {let i = (i + 1); break}"


def test_import_statement(parse):
    [stmt] = parse('import "lib/util.tn";').statements
    assert isinstance(stmt, ast.ImportStatement)
    assert stmt.path.value == "lib/util.tn"
    assert str(stmt) == 'import "lib/util.tn"'


def test_exit_statement(parse):
    [stmt] = parse("exit 2;").statements
    assert isinstance(stmt, ast.ExitStatement)
    assert stmt.code.value == 2
    assert str(stmt) == "exit 2"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("let = 5;", "expected next token to be IDENT, got = instead"),
        ("let 838383;", "expected next token to be IDENT, got INT instead"),
        ("let x 5;", "expected next token to be =, got INT instead"),
        ("let x = ;", "no prefix parse function for ; found"),
        ("@", "no prefix parse function for ILLEGAL found"),
        ('"abc', "no prefix parse function for ILLEGAL found"),
        ("fn(x, y { x }", "expected next token to be ), got { instead"),
        ("if (x { x }", "expected next token to be ), got { instead"),
        ("[1, 2", "expected next token to be ], got EOF instead"),
        ("fn() { 1", "expected next token to be }, got EOF instead"),
        ("import x", "expected next token to be STRING, got IDENT instead"),
        ("exit x", "expected next token to be INT, got IDENT instead"),
        ("9223372036854775808", "could not parse '9223372036854775808' as integer"),
        ("-9223372036854775808", "could not parse '9223372036854775808' as integer"),
        ("let x = 99999999999999999999;", "could not parse '99999999999999999999' as integer"),
        ("exit 99999999999999999999", "could not parse '99999999999999999999' as integer"),
    ]
)
def test_parser_errors(source, expected):
    _, errors = _parse_with_errors(source)
    assert errors[0] == expected


def test_parser_collects_every_error_and_keeps_going():
    program, errors = _parse_with_errors("let = 1; let y 2; let z = 3;")
    assert errors == [
        "expected next token to be IDENT, got = instead",
        "expected next token to be =, got INT instead",
    ]
    assert str(program) == "let z = 3"


@pytest.mark.parametrize(
    "source,expected_errors,expected_program",
    [
        ("if (true) { 1 + }; let y = 2; y",
         ["no prefix parse function for } found"],
         "if (true) {}; let y = 2; y"),
        ("loop { let x = }; 5",
         ["no prefix parse function for } found"],
         "loop {}; 5"),
        ("fn() { let h = {1: }; 2 }; let z = 1",
         ["no prefix parse function for } found"],
         "fn() {2}; let z = 1"),
        ("if (a) { if (b) { -} else { 3 } }; 4",
         ["no prefix parse function for } found"],
         "if (a) {if (b) {} else {3}}; 4"),
    ]
)
def test_error_on_closing_brace_ends_only_that_block(source, expected_errors, expected_program):
    program, errors = _parse_with_errors(source)
    assert errors == expected_errors
    assert str(program) == expected_program


def test_program_token_literal(parse):
    assert parse("let x = 1").token_literal() == "let"
    assert parse("").token_literal() == ""


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

BINARY_OPERATORS = sorted(op for op in PRECEDENCES if op not in ("(", "["))

identifiers = st.from_regex(r"[a-z][a-z0-9_]{0,5}", fullmatch=True).filter(
    lambda name: name not in KEYWORDS
)
atoms = st.one_of(
    identifiers,
    st.integers(min_value=0, max_value=10**6).map(str),
    st.from_regex(r"[a-z ]{0,6}", fullmatch=True).map(lambda s: f'"{s}"'),
    st.sampled_from(["true", "false"]),
)


def _extend(children):
    return st.one_of(
        st.tuples(children, st.sampled_from(BINARY_OPERATORS), children).map(
            lambda t: f"({t[0]} {t[1]} {t[2]})"
        ),
        st.tuples(st.sampled_from(["-", "!"]), children).map(lambda t: f"({t[0]}{t[1]})"),
        st.tuples(identifiers, st.lists(children, max_size=3)).map(
            lambda t: f"{t[0]}({', '.join(t[1])})"
        ),
        st.lists(children, max_size=3).map(lambda xs: f"[{', '.join(xs)}]"),
        st.tuples(children, children).map(lambda t: f"({t[0]}[{t[1]}])"),
    )


canonical_expressions = st.recursive(atoms, _extend, max_leaves=12)


@given(canonical_expressions)
def test_canonical_form_is_a_fixed_point(source):
    program, errors = _parse_with_errors(source)
    assert errors == []
    assert str(program) == source


@given(st.lists(canonical_expressions, min_size=1, max_size=4))
def test_stringified_program_reparses_to_same_string(sources):
    program, errors = _parse_with_errors("; ".join(sources))
    assert errors == []
    again, errors = _parse_with_errors(str(program))
    assert errors == []
    assert str(again) == str(program)


def _shunting_yard(operands, operators):
    """Reference grouping for a flat chain of left-associative binary operators."""
    out = [operands[0]]
    stack = []

    def reduce():
        right = out.pop()
        left = out.pop()
        out.append(f"({left} {stack.pop()} {right})")

    for op, operand in zip(operators, operands[1:]):
        while stack and PRECEDENCES[stack[-1]] >= PRECEDENCES[op]:
            reduce()
        stack.append(op)
        out.append(operand)
    while stack:
        reduce()
    return out[0]


@given(st.data())
def test_binary_chains_group_by_precedence(data):
    n = data.draw(st.integers(min_value=1, max_value=8))
    operands = data.draw(st.lists(identifiers, min_size=n + 1, max_size=n + 1))
    operators = data.draw(st.lists(st.sampled_from(BINARY_OPERATORS), min_size=n, max_size=n))

    source = operands[0] + "".join(f" {op} {x}" for op, x in zip(operators, operands[1:]))
    program, errors = _parse_with_errors(source)
    assert errors == []
    assert str(program) == _shunting_yard(operands, operators)
