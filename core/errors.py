"""core/errors.py"""


class ExpressionError(ValueError):
    """Base class for every failure while parsing or evaluating an expression"""


class LiteralParseError(ExpressionError):
    def __init__(self, literal):
        self.literal = literal
        super().__init__(f"failed to parse value {literal!r}")


class NestingTooDeepError(ExpressionError):
    def __init__(self, max_depth):
        self.max_depth = max_depth
        super().__init__(f"parentheses nested deeper than {max_depth} levels")


class StackUnderflowError(ExpressionError):
    def __init__(self, operator, position, available):
        self.operator = operator
        self.position = position
        self.available = available
        super().__init__(
            f"insufficient operands for {operator.name} at position {position} "
            f"(stack holds {available})"
        )


class ResultMissingError(ExpressionError):
    def __init__(self):
        super().__init__("expression produced no result")


class TrailingValuesError(ExpressionError):
    def __init__(self, remaining):
        self.remaining = remaining
        super().__init__(f"stack has {remaining} values after evaluation, expected 1")
