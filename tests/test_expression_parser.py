import unittest
from unittest import mock

from config.config import PARSER_CONFIG
from core.errors import LiteralParseError, NestingTooDeepError
from core.expression_parser import add_operation, parse_expression, parse_value, to_postfix
from core.token_system import OperatorKind, Token


def num(value):
    return Token.operand(value)


def op(kind):
    return Token.operator(kind)


ADD = OperatorKind.ADD
SUB = OperatorKind.SUBTRACT
MUL = OperatorKind.MULTIPLY
DIV = OperatorKind.DIVIDE
NEG = OperatorKind.NEGATE


class TestParseValue(unittest.TestCase):
    def test_comma_is_decimal_point(self):
        self.assertEqual(parse_value("1,5"), 1.5)
        self.assertEqual(parse_value("1.5"), 1.5)

    def test_partial_literals(self):
        self.assertEqual(parse_value("1."), 1.0)
        self.assertEqual(parse_value(",5"), 0.5)

    def test_invalid_literals(self):
        for text in ["", "1.2.3", "1,2.3", ",", "."]:
            with self.subTest(text=text):
                with self.assertRaises(LiteralParseError) as ctx:
                    parse_value(text)
                self.assertEqual(ctx.exception.literal, text)


class TestAddOperation(unittest.TestCase):
    def test_higher_priority_stays_pending(self):
        output, pending = [], [ADD]
        add_operation(output, pending, MUL)
        self.assertEqual(output, [])
        self.assertEqual(pending, [ADD, MUL])

    def test_equal_priority_is_emitted(self):
        output, pending = [], [SUB]
        add_operation(output, pending, ADD)
        self.assertEqual(output, [op(SUB)])
        self.assertEqual(pending, [ADD])

    def test_lower_priority_flushes_all_tighter_operators(self):
        output, pending = [], [SUB, MUL]
        add_operation(output, pending, ADD)
        self.assertEqual(output, [op(MUL), op(SUB)])
        self.assertEqual(pending, [ADD])

    def test_negation_never_flushes(self):
        output, pending = [], [SUB, MUL]
        add_operation(output, pending, NEG)
        self.assertEqual(output, [])
        self.assertEqual(pending, [SUB, MUL, NEG])


class TestToPostfix(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(to_postfix("2+3*4"), [num(2), num(3), num(4), op(MUL), op(ADD)])

    def test_parentheses(self):
        self.assertEqual(to_postfix("(2+3)*4"), [num(2), num(3), op(ADD), num(4), op(MUL)])

    def test_left_associative(self):
        self.assertEqual(to_postfix("10-3-2"), [num(10), num(3), op(SUB), num(2), op(SUB)])

    def test_leading_minus_is_negation(self):
        self.assertEqual(to_postfix("-5+3"), [num(5), op(NEG), num(3), op(ADD)])

    def test_minus_after_operator_is_negation(self):
        self.assertEqual(to_postfix("5--3"), [num(5), num(3), op(NEG), op(SUB)])

    def test_minus_after_subexpression_is_subtraction(self):
        self.assertEqual(to_postfix("(2+3)-1"), [num(2), num(3), op(ADD), num(1), op(SUB)])

    def test_empty_input(self):
        self.assertEqual(to_postfix(""), [])

    def test_shared_output_across_levels(self):
        output = [num(7)]
        parse_expression(iter("1+(2)"), output)
        self.assertEqual(output, [num(7), num(1), num(2), op(ADD)])

    def test_unexpected_character_ends_expression(self):
        with self.assertLogs("core.expression_parser", level="WARNING"):
            self.assertEqual(to_postfix("2+3x4"), [num(2), num(3), op(ADD)])

    def test_unmatched_closing_parenthesis(self):
        with self.assertLogs("core.expression_parser", level="WARNING"):
            self.assertEqual(to_postfix("1+2)+5"), [num(1), num(2), op(ADD)])

    def test_bad_literal_fails_whole_parse(self):
        with self.assertRaises(LiteralParseError):
            to_postfix("1.2.3+1")
        with self.assertRaises(LiteralParseError):
            to_postfix("1+1..2")

    def test_nesting_limit(self):
        with mock.patch.dict(PARSER_CONFIG, {"max_nesting_depth": 3}):
            self.assertEqual(to_postfix("(((1)))"), [num(1)])
            with self.assertRaises(NestingTooDeepError):
                to_postfix("((((1))))")


if __name__ == "__main__":
    unittest.main()
