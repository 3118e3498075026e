"""Registry of node forms for the Tern evaluator.

Maps syntax tree node classes to the handler that evaluates them. Every
handler has the signature ``(node, env, evaluate_fn) -> TernValue``.
"""

from tern.reader import ast
from tern.evaluation.forms.block_forms import program_form, block_form
from tern.evaluation.forms.statement_forms import (
    let_form,
    return_form,
    expression_statement_form,
    break_form,
    exit_form,
)
from tern.evaluation.forms.literal_forms import (
    integer_form,
    string_form,
    boolean_form,
    identifier_form,
    array_form,
    hash_form,
    function_form,
)
from tern.evaluation.forms.operator_forms import prefix_form, infix_form
from tern.evaluation.forms.if_form import if_form
from tern.evaluation.forms.loop_form import loop_form
from tern.evaluation.forms.call_form import call_form
from tern.evaluation.forms.index_form import index_form
from tern.evaluation.forms.import_form import import_form

NODE_FORMS = {
    ast.Program: program_form,
    ast.BlockStatement: block_form,
    ast.LetStatement: let_form,
    ast.ReturnStatement: return_form,
    ast.ExpressionStatement: expression_statement_form,
    ast.BreakStatement: break_form,
    ast.ExitStatement: exit_form,
    ast.ImportStatement: import_form,
    ast.IntegerLiteral: integer_form,
    ast.StringLiteral: string_form,
    ast.BooleanLiteral: boolean_form,
    ast.Identifier: identifier_form,
    ast.ArrayLiteral: array_form,
    ast.HashLiteral: hash_form,
    ast.FunctionLiteral: function_form,
    ast.PrefixExpression: prefix_form,
    ast.InfixExpression: infix_form,
    ast.IfExpression: if_form,
    ast.LoopExpression: loop_form,
    ast.CallExpression: call_form,
    ast.IndexExpression: index_form,
}
