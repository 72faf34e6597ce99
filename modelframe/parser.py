from .terms import CHAIN, CROSS, INTERACT, SUM, TILDE, Call, Literal, Symbol


class ParseError(Exception):
    pass


class Parser:
    """Parses a sequence of Tokens and returns a term tree.

    The grammar, from the lowest to the highest precedence, is::

        formula   -> chain ( "~" chain )?
        chain     -> sum ( "--" sum )*
        sum       -> cross ( "+" cross )*
        cross     -> interact ( "*" interact )*
        interact  -> call ( "&" call )*
        call      -> primary ( "(" arguments? ")" )?
        primary   -> NUMBER | STRING | IDENTIFIER | BQNAME | "(" chain ")"

    ``--`` is a left associative binary operator. ``+``, ``*`` and ``&`` are n-ary, which means
    ``a + b + c`` is a single call with three operands.

    Parameters
    ----------
    tokens : list
        A list populated with objects of class Token as returned by scanner.Scanner.
    """

    def __init__(self, tokens):
        self.current = 0
        self.tokens = tokens

    def at_end(self):
        return self.peek().kind == "EOF"

    def advance(self):
        if not self.at_end():
            self.current += 1
        return self.previous()

    def peek(self):
        """Returns the Token we are about to consume"""
        return self.tokens[self.current]

    def previous(self):
        """Returns the last Token we consumed"""
        return self.tokens[self.current - 1]

    def check(self, kind):
        if self.at_end():
            return False
        return self.peek().kind == kind

    def match(self, kind):
        if self.check(kind):
            self.advance()
            return True
        return False

    def consume(self, kind, message):
        if self.check(kind):
            return self.advance()
        raise ParseError(message)

    def parse(self):
        """Parse a sequence of Tokens

        Returns
        -------
        An instance of ``Symbol``, ``Literal`` or ``Call`` describing the parsed formula.
        """
        expr = self.formula()
        if not self.at_end():
            raise ParseError(f"Unexpected token '{self.peek().lexeme}'.")
        return expr

    def formula(self):
        expr = self.chain()
        if self.match("TILDE"):
            expr = Call(TILDE, [expr, self.chain()])
        return expr

    def chain(self):
        expr = self.sum()
        while self.match("DASH_DASH"):
            expr = Call(CHAIN, [expr, self.sum()])
        return expr

    def sum(self):
        return self.nary(SUM, "PLUS", self.cross)

    def cross(self):
        return self.nary(CROSS, "STAR", self.interact)

    def interact(self):
        return self.nary(INTERACT, "AMPERSAND", self.call)

    def nary(self, op, kind, operand):
        operands = [operand()]
        while self.match(kind):
            operands.append(operand())
        if len(operands) == 1:
            return operands[0]
        return Call(op, operands)

    def call(self):
        expr = self.primary()
        if self.match("LEFT_PAREN"):
            if not isinstance(expr, Symbol):
                raise ParseError("Only names can be called.")
            expr = self.finishcall(expr)
        return expr

    def finishcall(self, callee):
        args = []
        if not self.check("RIGHT_PAREN"):
            while True:
                args.append(self.chain())
                if not self.match("COMMA"):
                    break
        self.consume("RIGHT_PAREN", "Expect ')' after arguments.")
        return Call(callee.name, args)

    def primary(self):
        if self.match("NUMBER") or self.match("STRING"):
            return Literal(self.previous().literal)
        elif self.match("IDENTIFIER"):
            return Symbol(self.previous().lexeme)
        elif self.match("BQNAME"):
            name = self.previous().lexeme[1:-1]
            if not name:
                raise ParseError("Back-quoted names can't be empty.")
            return Symbol(name)
        elif self.match("LEFT_PAREN"):
            expr = self.chain()
            self.consume("RIGHT_PAREN", "Expect ')' after expression.")
            return expr
        else:
            raise ParseError("Expect expression.")
