TILDE = "~"
CHAIN = "--"
SUM = "+"
INTERACT = "&"
CROSS = "*"

# Binding strength of the infix operators, used when printing terms.
PRECEDENCE = {TILDE: 0, CHAIN: 1, SUM: 2, CROSS: 3, INTERACT: 4}


class Symbol:
    """A reference to a variable in the data set.

    Parameters
    ----------
    name: string
        The name of the column the symbol refers to.
    """

    def __init__(self, name):
        self.name = name

    def __hash__(self):
        return hash((type(self).__name__, self.name))

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name

    def __repr__(self):
        return f"Symbol({self.name})"

    def __str__(self):
        return self.name

    def accept(self, visitor):
        return visitor.visitSymbol(self)


class Literal:
    """A literal number or string in a formula."""

    def __init__(self, value):
        self.value = value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return type(self.value) is type(other.value) and self.value == other.value

    def __repr__(self):
        return f"Literal({self.value!r})"

    def __str__(self):
        if isinstance(self.value, str):
            return f'"{self.value}"'
        return str(self.value)

    def accept(self, visitor):
        return visitor.visitLiteral(self)


class Call:
    """An operator or function applied to an ordered list of terms.

    Formula operators (``~``, ``--``, ``+``, ``&``, ``*``) and function calls share this
    representation. The tag in ``op`` tells them apart.

    Parameters
    ----------
    op: string
        Either one of the operator tags defined in this module or the name of a function.
    args: list or tuple
        The operands, instances of ``Symbol``, ``Literal`` or ``Call``.
    """

    def __init__(self, op, args):
        self.op = op
        self.args = tuple(args)

    def __hash__(self):
        return hash((type(self).__name__, self.op, self.args))

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return self.op == other.op and self.args == other.args

    def __repr__(self):
        args = ", ".join(repr(arg) for arg in self.args)
        return f"Call({self.op!r}, [{args}])"

    def __str__(self):
        if not self.is_operator:
            return f"{self.op}({', '.join(str(arg) for arg in self.args)})"
        return f" {self.op} ".join(self._operand_str(arg) for arg in self.args)

    def _operand_str(self, arg):
        if isinstance(arg, Call) and arg.is_operator:
            if PRECEDENCE[arg.op] <= PRECEDENCE[self.op]:
                return f"({arg})"
        return str(arg)

    @property
    def is_operator(self):
        """Whether this is a formula operator rather than a function call"""
        return self.op in PRECEDENCE

    def accept(self, visitor):
        return visitor.visitCall(self)
