"""Formula algebra on expanded terms.

Each handler receives the expander that is walking the term tree and the un-expanded operands of
an operator call. The handler decides which operands to expand and how to combine the results.
"""
from .columns import NamedColumns, to_float
from .config import config
from .terms import CROSS, INTERACT, SUM

# Subsets of operands whose interactions are appended by '*', in order.
CROSS_COMBINATIONS = {
    2: [(0, 1)],
    3: [(0, 1), (0, 2), (1, 2), (0, 1, 2)],
}


class UnsupportedArityError(Exception):
    pass


class InteractionShapeError(Exception):
    pass


def interaction_columns(left, right):
    """Element-wise products of every column in ``left`` with every column in ``right``.

    The columns of ``right`` vary fastest. Names are joined with ``&``.
    """
    names = []
    columns = []
    for left_name, left_values in left:
        left_values = to_float(left_name, left_values)
        for right_name, right_values in right:
            names.append(f"{left_name}&{right_name}")
            columns.append(left_values * to_float(right_name, right_values))
    return NamedColumns(names, columns, left.nrows)


def three_way_interaction_columns(first, second, third):
    """Element-wise products of columns taken from three column sets.

    With the default ``"legacy"`` value of ``config.THREE_WAY_INTERACTION``, the innermost loop
    walks the index range of ``second`` and uses it to pick columns from ``third``. With
    ``"full"``, it walks the columns of ``third``.
    """
    if config.THREE_WAY_INTERACTION == "legacy":
        if len(third) < len(second):
            raise InteractionShapeError(
                f"Can't interact {third.names} with {second.names}: the third operand has fewer "
                "columns than the second. Set config.THREE_WAY_INTERACTION = 'full' to use "
                "every column of the third operand."
            )
        inner = range(len(second))
    else:
        inner = range(len(third))

    names = []
    columns = []
    for first_name, first_values in first:
        first_values = to_float(first_name, first_values)
        for second_name, second_values in second:
            partial = first_values * to_float(second_name, second_values)
            for k in inner:
                third_name, third_values = third[k]
                names.append(f"{first_name}&{second_name}&{third_name}")
                columns.append(partial * to_float(third_name, third_values))
    return NamedColumns(names, columns, first.nrows)


def interact_column_sets(column_sets):
    if len(column_sets) == 2:
        return interaction_columns(*column_sets)
    return three_way_interaction_columns(*column_sets)


def sum_handler(expander, args):
    """``+``: the columns of every operand, from left to right."""
    return NamedColumns.concat(expander.expand(list(args)), expander.nrows)


def interact_handler(expander, args):
    """``&``: the element-wise products of the columns of two or three operands."""
    if len(args) not in (2, 3):
        raise UnsupportedArityError(
            f"'{INTERACT}' supports two or three operands, got {len(args)}."
        )
    return interact_column_sets(expander.expand(list(args)))


def cross_handler(expander, args):
    """``*``: main effects followed by every interaction among the operands.

    ``a * b * c`` is equivalent to ``a + b + c + a & b + a & c + b & c + a & b & c``.
    """
    combinations = CROSS_COMBINATIONS.get(len(args))
    if combinations is None:
        raise UnsupportedArityError(
            f"'{CROSS}' supports two or three operands, got {len(args)}."
        )
    column_sets = expander.expand(list(args))
    result = list(column_sets)
    for combination in combinations:
        result.append(interact_column_sets([column_sets[i] for i in combination]))
    return NamedColumns.concat(result, expander.nrows)


HANDLERS = {SUM: sum_handler, INTERACT: interact_handler, CROSS: cross_handler}
