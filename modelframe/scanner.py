class ScanError(Exception):
    pass


class Token:
    """A single lexical unit of a formula.

    Only ``NUMBER`` and ``STRING`` tokens carry a ``literal`` value.
    """

    def __init__(self, kind, lexeme, literal=None):
        self.kind = kind
        self.lexeme = lexeme
        self.literal = literal

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return (
            self.kind == other.kind
            and self.lexeme == other.lexeme
            and self.literal == other.literal
        )

    def __repr__(self):  # pragma: no cover
        return self.__str__()

    def __str__(self):  # pragma: no cover
        if self.literal is None:
            return f"Token({self.kind}, {self.lexeme!r})"
        return f"Token({self.kind}, {self.lexeme!r}, {self.literal!r})"


SINGLE_CHAR_TOKENS = {
    "(": "LEFT_PAREN",
    ")": "RIGHT_PAREN",
    ",": "COMMA",
    "~": "TILDE",
    "+": "PLUS",
    "*": "STAR",
    "&": "AMPERSAND",
}


class Scanner:
    """Scan formula string and returns Tokens"""

    def __init__(self, code):
        """Scans a model formula and returns a list of Tokens

        Parameters
        ----------
        code : string
            The code to be scanned.
        """
        self.code = code
        self.start = 0
        self.current = 0
        self.tokens = []

        if not len(self.code):
            raise ScanError("'code' is a string of length 0.")

    def at_end(self):
        return self.current >= len(self.code)

    def advance(self):
        self.current += 1
        return self.code[self.current - 1]

    def peek(self):
        if self.at_end():
            return ""
        return self.code[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.code):
            return ""
        return self.code[self.current + 1]

    def match(self, expected):
        if self.at_end():
            return False
        if self.code[self.current] != expected:
            return False
        self.current += 1
        return True

    def add_token(self, kind, literal=None):
        source = self.code[self.start : self.current]
        self.tokens.append(Token(kind, source, literal))

    def scan_token(self):
        char = self.advance()
        if char in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[char])
        elif char in ["'", '"']:
            self.string(char)
        elif char == "`":
            self.backquote()
        elif char == "-":
            if self.match("-"):
                self.add_token("DASH_DASH")
            else:
                raise ScanError("Unexpected character: '-'. Did you mean '--'?")
        elif char == ".":
            if self.peek().isdigit():
                self.floatnum()
            else:
                raise ScanError("Unexpected character: '.'")
        elif char in [" ", "\n", "\t", "\r"]:
            pass
        elif char.isdigit():
            self.number()
        elif char.isalpha() or char == "_":
            self.identifier()
        else:
            raise ScanError("Unexpected character: " + str(char))

    def scan(self):
        """Scan formula string.

        Returns
        -------
        tokens : list
            A list of objects of class Token, the last one is always of kind ``"EOF"``.
        """
        while not self.at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token("EOF", ""))

        if sum(token.kind == "TILDE" for token in self.tokens) > 1:
            raise ScanError("There is more than one '~' in model formula")

        return self.tokens

    def floatnum(self):
        while self.peek().isdigit():
            self.advance()
        self.add_token("NUMBER", float(self.code[self.start : self.current]))

    def number(self):
        is_float = False
        while self.peek().isdigit():
            self.advance()
        # Fractional part, if present
        if self.peek() == "." and self.peek_next().isdigit():
            is_float = True
            self.advance()
            while self.peek().isdigit():
                self.advance()
        if is_float:
            value = float(self.code[self.start : self.current])
        else:
            value = int(self.code[self.start : self.current])
        self.add_token("NUMBER", value)

    def identifier(self):
        while self.peek().isalnum() or self.peek() in [".", "_"]:
            self.advance()
        self.add_token("IDENTIFIER")

    def string(self, quote):
        while self.peek() != quote and not self.at_end():
            self.advance()

        if self.at_end():
            raise ScanError("Unterminated string.")

        # The closing quotation mark.
        self.advance()
        self.add_token("STRING", self.code[self.start + 1 : self.current - 1])

    def backquote(self):
        while self.peek() != "`":
            if self.at_end():
                raise ScanError("Unterminated back-quoted name.")
            self.advance()
        self.advance()
        self.add_token("BQNAME")
