import logging
from enum import Enum, auto
from string import ascii_letters, digits
from typing import List, Optional

from calculator.scanner.reader import TokenReader
from calculator.token import Token
from calculator.type import Type

logger = logging.getLogger(__name__)


class State(Enum):
    INITIAL = auto()
    ID = auto()
    # Partial matches of the `int` keyword: "i", "in" and "int"
    INT1 = auto()
    INT2 = auto()
    INT3 = auto()
    INT_LITERAL = auto()
    SEMICOLON = auto()
    LRB = auto()
    RRB = auto()
    ASSIGNMENT = auto()
    GT = auto()
    GEQ = auto()
    LT = auto()
    LEQ = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    DEQUALS = auto()
    PLUS_EQ = auto()
    MINUS_EQ = auto()
    STAR_EQ = auto()
    SLASH_EQ = auto()


# Single character tokens, with the state they enter
SINGLE_CHARACTERS = {
    ">": (State.GT, Type.GT),
    "<": (State.LT, Type.LT),
    "+": (State.PLUS, Type.PLUS),
    "-": (State.MINUS, Type.MINUS),
    "*": (State.STAR, Type.STAR),
    "/": (State.SLASH, Type.SLASH),
    "=": (State.ASSIGNMENT, Type.EQ),
    ";": (State.SEMICOLON, Type.SEMICOLON),
    "(": (State.LRB, Type.LRB),
    ")": (State.RRB, Type.RRB),
}

# Operator states that turn into a compound operator when followed by '='
COMPOUND_OPERATORS = {
    State.GT: (State.GEQ, Type.GEQ),
    State.LT: (State.LEQ, Type.LEQ),
    State.ASSIGNMENT: (State.DEQUALS, Type.DEQUALS),
    State.PLUS: (State.PLUS_EQ, Type.PLUS_EQ),
    State.MINUS: (State.MINUS_EQ, Type.MINUS_EQ),
    State.STAR: (State.STAR_EQ, Type.STAR_EQ),
    State.SLASH: (State.SLASH_EQ, Type.SLASH_EQ),
}


def is_alpha(char: str) -> bool:
    return char in ascii_letters


def is_digit(char: str) -> bool:
    return char in digits


def is_alnum(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program

        # The lexeme and token type that are currently being built
        self.token_text: List[str] = []
        self.token_type: Optional[Type] = None
        self.tokens: List[Token] = []

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        The scanner is a finite state machine: every character is either added to the
        lexeme that is being built, or it finishes that lexeme and is dispatched again
        from the initial state. Characters that cannot start any token are skipped,
        scanning never fails.

        Returns:
            List[Token]: A list of Token instances
        """
        self.token_text = []
        self.token_type = None
        self.tokens = []

        state = State.INITIAL
        for char in self.og_program:
            state = self.step(state, char)

        # Finish off the final lexeme as if the program ended with a space
        if self.token_text:
            self.step(state, " ")

        logger.debug("Scanned %d tokens from %r", len(self.tokens), self.og_program)
        return self.tokens

    def tokenize(self) -> TokenReader:
        return TokenReader(self.scan())

    def step(self, state: State, char: str) -> State:
        match state:
            case State.INITIAL:
                return self.init_token(char)

            case State.ID:
                if is_alnum(char):
                    self.token_text.append(char)
                    return State.ID
                return self.init_token(char)

            case State.INT1 | State.INT2:
                expected = "n" if state == State.INT1 else "t"
                if char == expected:
                    self.token_text.append(char)
                    return State.INT2 if state == State.INT1 else State.INT3
                if is_alnum(char):
                    self.token_text.append(char)
                    return State.ID
                return self.init_token(char)

            case State.INT3:
                # "intA" is an identifier, "int" followed by anything else is the keyword
                if is_alnum(char):
                    self.token_text.append(char)
                    return State.ID
                self.token_type = Type.INT
                return self.init_token(char)

            case State.INT_LITERAL:
                if is_digit(char):
                    self.token_text.append(char)
                    return State.INT_LITERAL
                return self.init_token(char)

            case (
                State.GT
                | State.LT
                | State.ASSIGNMENT
                | State.PLUS
                | State.MINUS
                | State.STAR
                | State.SLASH
            ):
                if char == "=":
                    new_state, self.token_type = COMPOUND_OPERATORS[state]
                    self.token_text.append(char)
                    return new_state
                return self.init_token(char)

            case _:
                # Tokens that are complete, e.g. ';' or '>='
                return self.init_token(char)

    def init_token(self, char: str) -> State:
        """Finish the lexeme that is currently being built, if any, and determine
        the state that `char` moves the scanner into.
        """
        if self.token_text:
            self.tokens.append(Token("".join(self.token_text), self.token_type))
            self.token_text = []
            self.token_type = None

        if is_alpha(char):
            self.token_type = Type.ID
            self.token_text.append(char)
            return State.INT1 if char == "i" else State.ID

        if is_digit(char):
            self.token_type = Type.DIGIT
            self.token_text.append(char)
            return State.INT_LITERAL

        if char in SINGLE_CHARACTERS:
            state, self.token_type = SINGLE_CHARACTERS[char]
            self.token_text.append(char)
            return state

        # Whitespace and unknown characters produce no token
        return State.INITIAL

    @staticmethod
    def dump(reader: TokenReader) -> None:
        """Print all remaining tokens in `reader`, one per line."""
        print("text\ttype")
        while (token := reader.read()) is not None:
            print(f"{token.text}\t{token.type.name}")
