from enum import Enum, auto


class Type(Enum):
    ID = auto()
    DIGIT = auto()
    INT = "int"
    GT = ">"
    GEQ = ">="
    LT = "<"
    LEQ = "<="
    DEQUALS = "=="
    EQ = "="
    PLUS = "+"
    INCREMENT = "++"
    PLUS_EQ = "+="
    MINUS = "-"
    DECREMENT = "--"
    MINUS_EQ = "-="
    STAR = "*"
    STAR_EQ = "*="
    SLASH = "/"
    SLASH_EQ = "/="
    LRB = "("
    RRB = ")"
    SEMICOLON = ";"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.ID:
                return "identifier"
            case Type.DIGIT:
                return "integer literal"
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.INT | Type.ID | Type.DIGIT:
                return f"an {self}"
            case _:
                return f"a {self}"
