"""
Tests for snippet extraction.
"""

import pytest

from jsgraft import graft
from jsgraft.exceptions import ExtractionArityError, UnsupportedParentError
from jsgraft.tree import extract_block, extract_expression, extract_statement


class TestExtractStatement:
    """Exactly one top-level statement."""

    def test_returns_the_statement(self, builder):
        statement = extract_statement("if (a) b();", builder)
        assert statement.is_if_statement()

    def test_any_statement_kind_is_accepted(self, builder):
        assert extract_statement("var a = 1;", builder).is_variable_declaration()

    def test_empty_snippet(self, builder):
        with pytest.raises(ExtractionArityError) as exc_info:
            extract_statement("", builder)
        assert exc_info.value.count == 0
        assert exc_info.value.snippet == ""

    def test_several_statements(self, builder):
        with pytest.raises(ExtractionArityError) as exc_info:
            extract_statement("a(); b(); c();", builder)
        assert exc_info.value.count == 3
        assert "got 3" in str(exc_info.value)


class TestExtractExpression:
    """Exactly one expression statement, unwrapped to its expression."""

    def test_returns_the_expression(self, builder):
        expression = extract_expression("a + b", builder)
        assert expression.is_binary_expression()

    def test_expression_belongs_to_its_statement(self, builder):
        expression = extract_expression("f()", builder)
        assert expression.parent.is_expression_statement()
        assert expression.parent_key == "expression"

    def test_rejects_non_expression_statement(self, builder):
        with pytest.raises(ExtractionArityError):
            extract_expression("return_value: while (x) {}", builder)

    def test_rejects_several_expressions(self, builder):
        with pytest.raises(ExtractionArityError):
            extract_expression("a; b", builder)


class TestExtractBlock:
    """Function body blocks."""

    def test_under_function_declaration(self, builder):
        parent = graft("function f() {}").body[0]
        block = extract_block("return 1;", parent, builder)

        assert block.is_block_statement()
        assert len(block.body) == 1
        assert block.body[0].is_return_statement()

    def test_under_function_expression(self, builder):
        parent = graft("(function () {})").body[0].expression
        block = extract_block("a(); b();", parent, builder)

        assert len(block.body) == 2

    def test_caller_braces_are_unwrapped(self, builder):
        parent = graft("function f() {}").body[0]
        block = extract_block("{ return 1; }", parent, builder)

        assert block.body[0].is_return_statement()

    def test_two_braced_blocks_are_kept(self, builder):
        parent = graft("function f() {}").body[0]
        block = extract_block("{ a(); } { b(); }", parent, builder)

        assert len(block.body) == 2
        assert block.body[0].is_block_statement()

    def test_unsupported_parent(self, builder):
        parent = graft("if (a) {}").body[0]
        with pytest.raises(UnsupportedParentError) as exc_info:
            extract_block("b();", parent, builder)
        assert exc_info.value.parent_type == "IfStatement"

    def test_missing_parent(self, builder):
        with pytest.raises(UnsupportedParentError) as exc_info:
            extract_block("b();", None, builder)
        assert exc_info.value.parent_type is None
