from enum import Enum


class SpecificationOperator(str, Enum):
    """Supported operators for specifications."""

    # Standard comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Set / range
    IN = "in"
    NOT_IN = "not_in"
    BETWEEN = "between"

    # Logical operators
    AND = "and"
    OR = "or"
    NOT = "not"
