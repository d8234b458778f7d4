import unittest

from walker.ast_children import child_statements
from walker.ast_nodes import (
    AbstractMethod,
    BlockBody,
    BlockStatement,
    Case,
    CatchBlock,
    ClassStatement,
    ConcreteConstructor,
    ConcreteMethod,
    Constant,
    ElseIf,
    ExpressionStatement,
    FinallyBlock,
    ForStatement,
    ForeachStatement,
    IfStatement,
    NamespaceStatement,
    OpaqueStatement,
    Property,
    ReturnStatement,
    Span,
    StatementBody,
    SwitchStatement,
    TraitStatement,
    TryStatement,
    WhileStatement,
)


def expr(line):
    return ExpressionStatement(span=Span(line=line))


def exprs(*lines):
    return tuple(expr(line) for line in lines)


class LeafShapesTest(unittest.TestCase):
    def test_leaf_statements_have_no_children(self):
        for statement in (expr(1), ReturnStatement(), OpaqueStatement(node_type="Stmt_Nop")):
            self.assertEqual(child_statements(statement), [])

    def test_unrecognized_values_have_no_children(self):
        self.assertEqual(child_statements(object()), [])
        self.assertEqual(child_statements(None), [])


class BodyShapesTest(unittest.TestCase):
    def test_block_returns_statements_in_order(self):
        body = exprs(1, 2, 3)
        self.assertEqual(child_statements(BlockStatement(statements=body)), list(body))

    def test_loop_and_conditional_block_form(self):
        body = exprs(4, 5)
        for cls in (IfStatement, WhileStatement, ForStatement, ForeachStatement):
            with self.subTest(cls=cls.__name__):
                statement = cls(body=BlockBody(statements=body))
                self.assertEqual(child_statements(statement), list(body))

    def test_loop_and_conditional_single_statement_form(self):
        inner = expr(7)
        for cls in (IfStatement, WhileStatement, ForStatement, ForeachStatement):
            with self.subTest(cls=cls.__name__):
                children = child_statements(cls(body=StatementBody(statement=inner)))
                self.assertEqual(len(children), 1)
                self.assertIs(children[0], inner)

    def test_if_does_not_expand_elseif_or_else(self):
        primary = exprs(1)
        statement = IfStatement(
            body=BlockBody(statements=primary),
            elseifs=(ElseIf(body=BlockBody(statements=exprs(2, 3))),),
            else_body=BlockBody(statements=exprs(4)),
        )
        self.assertEqual(child_statements(statement), list(primary))


class SwitchShapeTest(unittest.TestCase):
    def test_cases_are_concatenated_in_order(self):
        first, third = exprs(1, 2), exprs(3, 4, 5)
        statement = SwitchStatement(
            cases=(Case(statements=first), Case(statements=()), Case(statements=third)),
        )
        children = child_statements(statement)
        self.assertEqual(len(children), 5)
        self.assertEqual([c.span.line for c in children], [1, 2, 3, 4, 5])


class TryShapeTest(unittest.TestCase):
    def test_try_catch_finally_order_and_count(self):
        statement = TryStatement(
            body=exprs(1, 2),
            catches=(
                CatchBlock(types=("RuntimeException",), body=exprs(3)),
                CatchBlock(types=("LogicException",), body=()),
                CatchBlock(types=("Exception",), body=exprs(4, 5, 6)),
            ),
            finally_block=FinallyBlock(body=exprs(7)),
        )
        children = child_statements(statement)
        self.assertEqual(len(children), 2 + (1 + 0 + 3) + 1)
        self.assertEqual([c.span.line for c in children], [1, 2, 3, 4, 5, 6, 7])

    def test_try_without_finally(self):
        statement = TryStatement(body=exprs(1), catches=(CatchBlock(body=exprs(2)),))
        self.assertEqual([c.span.line for c in child_statements(statement)], [1, 2])


class MemberShapesTest(unittest.TestCase):
    def test_class_only_yields_concrete_method_and_constructor_bodies(self):
        statement = ClassStatement(
            name="Foo",
            members=(
                Constant(name="LIMIT"),
                Property(name="$bar"),
                AbstractMethod(name="build"),
                ConcreteConstructor(body=exprs(1)),
                ConcreteMethod(name="run", body=exprs(2, 3)),
            ),
        )
        self.assertEqual([c.span.line for c in child_statements(statement)], [1, 2, 3])

    def test_abstract_and_concrete_method(self):
        statement = ClassStatement(
            members=(AbstractMethod(name="a"), ConcreteMethod(name="b", body=exprs(9))),
        )
        self.assertEqual([c.span.line for c in child_statements(statement)], [9])

    def test_trait_skips_constructors(self):
        statement = TraitStatement(
            name="Loggable",
            members=(
                ConcreteConstructor(body=exprs(1)),
                ConcreteMethod(name="log", body=exprs(2)),
                AbstractMethod(name="channel"),
            ),
        )
        self.assertEqual([c.span.line for c in child_statements(statement)], [2])


class NamespaceShapeTest(unittest.TestCase):
    def test_braced_and_unbraced_namespaces(self):
        body = exprs(1, 2)
        for braced in (True, False):
            with self.subTest(braced=braced):
                statement = NamespaceStatement(name="App", statements=body, braced=braced)
                self.assertEqual(child_statements(statement), list(body))


if __name__ == "__main__":
    unittest.main()
