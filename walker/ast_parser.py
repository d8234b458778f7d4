import json
import os
import shutil
import subprocess

from walker.ast_nodes import (
    AbstractConstructor,
    AbstractMethod,
    AssignmentExpression,
    BlockBody,
    BlockStatement,
    Case,
    CatchBlock,
    ClassStatement,
    ConcreteConstructor,
    ConcreteMethod,
    Constant,
    EchoStatement,
    ElseIf,
    ExpressionStatement,
    FinallyBlock,
    ForStatement,
    ForeachStatement,
    IfStatement,
    MethodCallExpression,
    NamespaceStatement,
    NewExpression,
    OpaqueStatement,
    Parameter,
    Property,
    RawExpression,
    ReturnStatement,
    Span,
    SwitchStatement,
    TraitStatement,
    TryStatement,
    WhileStatement,
)


# PHP-Parser modifier flags (PhpParser\Modifiers).
MODIFIER_FLAGS = (
    (1, "public"),
    (2, "protected"),
    (4, "private"),
    (8, "static"),
    (16, "abstract"),
    (32, "final"),
    (64, "readonly"),
)

# Namespace_::KIND_BRACED
NAMESPACE_KIND_BRACED = 2


class ParsePhpError(RuntimeError):
    pass


def _find_php_parse():
    env_path = os.environ.get("PHP_PARSE_BIN")
    if env_path:
        return env_path

    for candidate in ("php-parse", os.path.join("vendor", "bin", "php-parse")):
        found = shutil.which(candidate)
        if found:
            return found

    return None


def _php_parse_failure_hint(filename):
    base = os.path.basename(filename)
    return (
        f"Could not parse '{base}'. "
        "Install nikic/php-parser (composer global require nikic/php-parser) or set PHP_PARSE_BIN, "
        "then try: php-parse --json-dump <file> to see the parser output."
    )


def parse_php_file(filename):
    """
    Parses a PHP file into a list of top-level statements.

    ``.json`` files are read as an existing PHP-Parser JSON dump; anything
    else is handed to ``php-parse --json-dump``.
    """
    if not os.path.exists(filename):
        raise ParsePhpError(f"Input file does not exist: {filename}")
    if not os.path.isfile(filename):
        raise ParsePhpError(f"Input path is not a file: {filename}")

    if filename.endswith(".json"):
        with open(filename, encoding="utf-8") as handle:
            raw = handle.read()
    else:
        raw = _run_php_parse(filename)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParsePhpError(f"Parser output for '{os.path.basename(filename)}' is not valid JSON: {exc}") from exc

    return load_php_ast(data)


def _run_php_parse(filename):
    binary = _find_php_parse()
    if binary is None:
        raise ParsePhpError(_php_parse_failure_hint(filename))

    try:
        proc = subprocess.run(
            [binary, "--json-dump", filename],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ParsePhpError(_php_parse_failure_hint(filename)) from exc

    if proc.returncode != 0:
        detail = (proc.stderr or proc.stdout).strip()
        raise ParsePhpError(f"php-parse failed on '{os.path.basename(filename)}': {detail}")

    # Some php-parse versions print progress headers before the dump.
    start = proc.stdout.find("[")
    if start < 0:
        raise ParsePhpError(_php_parse_failure_hint(filename))
    return proc.stdout[start:]


def load_php_ast(data):
    """
    Converts a decoded PHP-Parser JSON dump (a list of ``Stmt_*`` nodes)
    into walker statements.
    """
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ParsePhpError(f"Expected a list of statements, got {type(data).__name__}")
    return _statements(data)


def _span(node):
    attributes = node.get("attributes") or {}
    line = attributes.get("startLine")
    return Span(line=line if isinstance(line, int) and line > 0 else 0)


def _name(node):
    if node is None:
        return None
    if isinstance(node, str):
        return node
    if not isinstance(node, dict):
        return None

    node_type = node.get("nodeType", "")
    if node_type == "Expr_Variable":
        name = node.get("name")
        return f"${name}" if isinstance(name, str) else None
    if node_type == "NullableType":
        inner = _name(node.get("type"))
        return f"?{inner}" if inner else None
    if node_type in ("UnionType", "IntersectionType"):
        separator = "|" if node_type == "UnionType" else "&"
        parts = [_name(t) for t in node.get("types") or []]
        return separator.join(p for p in parts if p) or None
    if "parts" in node:
        return "\\".join(node["parts"])
    name = node.get("name")
    if isinstance(name, str):
        return name
    return None


def _modifiers(flags):
    if not isinstance(flags, int):
        return ()
    return tuple(name for bit, name in MODIFIER_FLAGS if flags & bit)


def _statements(nodes):
    return tuple(_statement(node) for node in nodes or [] if isinstance(node, dict))


def _block(node):
    return BlockBody(statements=_statements(node.get("stmts")))


def _statement(node):
    node_type = node.get("nodeType", "")
    span = _span(node)

    if node_type == "Stmt_Expression":
        return ExpressionStatement(expression=_expression(node.get("expr")), span=span)

    if node_type == "Stmt_Return":
        expr = node.get("expr")
        return ReturnStatement(expression=_expression(expr) if expr else None, span=span)

    if node_type == "Stmt_Echo":
        return EchoStatement(expressions=tuple(_expression(e) for e in node.get("exprs") or []), span=span)

    if node_type == "Stmt_Block":
        return BlockStatement(statements=_statements(node.get("stmts")), span=span)

    if node_type == "Stmt_If":
        else_node = node.get("else")
        return IfStatement(
            condition=_expression(node.get("cond")),
            body=_block(node),
            elseifs=tuple(
                ElseIf(condition=_expression(e.get("cond")), body=_block(e)) for e in node.get("elseifs") or []
            ),
            else_body=_block(else_node) if else_node else None,
            span=span,
        )

    if node_type == "Stmt_While":
        return WhileStatement(condition=_expression(node.get("cond")), body=_block(node), span=span)

    if node_type == "Stmt_For":
        return ForStatement(body=_block(node), span=span)

    if node_type == "Stmt_Foreach":
        return ForeachStatement(body=_block(node), span=span)

    if node_type == "Stmt_Switch":
        cases = tuple(
            Case(
                condition=_expression(case.get("cond")) if case.get("cond") else None,
                statements=_statements(case.get("stmts")),
            )
            for case in node.get("cases") or []
        )
        return SwitchStatement(condition=_expression(node.get("cond")), cases=cases, span=span)

    if node_type == "Stmt_TryCatch":
        finally_node = node.get("finally")
        return TryStatement(
            body=_statements(node.get("stmts")),
            catches=tuple(
                CatchBlock(
                    types=tuple(t for t in (_name(n) for n in catch.get("types") or []) if t),
                    var=_name(catch.get("var")),
                    body=_statements(catch.get("stmts")),
                )
                for catch in node.get("catches") or []
            ),
            finally_block=FinallyBlock(body=_statements(finally_node.get("stmts"))) if finally_node else None,
            span=span,
        )

    if node_type == "Stmt_Class":
        return ClassStatement(
            name=_name(node.get("name")) or "",
            modifiers=_modifiers(node.get("flags")),
            members=_members(node.get("stmts")),
            span=span,
        )

    if node_type == "Stmt_Trait":
        return TraitStatement(name=_name(node.get("name")) or "", members=_members(node.get("stmts")), span=span)

    if node_type == "Stmt_Namespace":
        attributes = node.get("attributes") or {}
        return NamespaceStatement(
            name=_name(node.get("name")),
            statements=_statements(node.get("stmts")),
            braced=attributes.get("kind") == NAMESPACE_KIND_BRACED,
            span=span,
        )

    return OpaqueStatement(node_type=node_type or "Stmt", span=span)


def _members(nodes):
    members = []
    for node in nodes or []:
        if not isinstance(node, dict):
            continue
        node_type = node.get("nodeType", "")
        span = _span(node)
        modifiers = _modifiers(node.get("flags"))

        if node_type == "Stmt_ClassMethod":
            members.append(_method(node, modifiers, span))
        elif node_type == "Stmt_Property":
            for prop in node.get("props") or []:
                members.append(Property(name=_name(prop.get("name")) or "", modifiers=modifiers, span=span))
        elif node_type == "Stmt_ClassConst":
            for const in node.get("consts") or []:
                members.append(Constant(name=_name(const.get("name")) or "", modifiers=modifiers, span=span))

    return tuple(members)


def _method(node, modifiers, span):
    name = _name(node.get("name")) or ""
    parameters = tuple(
        Parameter(name=_name(param.get("var")) or "", type=_name(param.get("type")))
        for param in node.get("params") or []
    )
    stmts = node.get("stmts")
    is_constructor = name.lower() == "__construct"

    if stmts is None:
        if is_constructor:
            return AbstractConstructor(name=name, modifiers=modifiers, parameters=parameters, span=span)
        return AbstractMethod(
            name=name,
            modifiers=modifiers,
            parameters=parameters,
            return_type=_name(node.get("returnType")),
            span=span,
        )

    body = _statements(stmts)
    if is_constructor:
        return ConcreteConstructor(name=name, modifiers=modifiers, parameters=parameters, body=body, span=span)
    return ConcreteMethod(
        name=name,
        modifiers=modifiers,
        parameters=parameters,
        return_type=_name(node.get("returnType")),
        body=body,
        span=span,
    )


def _expression(node):
    if not isinstance(node, dict):
        return RawExpression()

    node_type = node.get("nodeType", "Expr")

    if node_type == "Expr_Assign":
        return AssignmentExpression(target=_name(node.get("var")), value=_expression(node.get("expr")))

    if node_type == "Expr_New":
        return NewExpression(class_name=_name(node.get("class")))

    if node_type == "Expr_MethodCall":
        return MethodCallExpression(target=_name(node.get("var")), method=_name(node.get("name")))

    return RawExpression(kind=node_type)
