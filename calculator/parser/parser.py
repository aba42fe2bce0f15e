import logging
from typing import Optional

from calculator.error.parser_error import ParseError
from calculator.scanner.reader import TokenReader
from calculator.tree.tree import ASTNode, NodeType
from calculator.type import Type

logger = logging.getLogger(__name__)


class Parser:
    """
    Recursive descent parser, with one method per rule of the grammar:

        program        := additive
        additive       := multiplicative ( ('+' | '-') additive )?
        multiplicative := primary ( ('*' | '/') multiplicative )?
        primary        := IntLiteral | Identifier | '(' additive ')'
        intDeclaration := 'int' Identifier ( '=' additive )? ';'

    Note that `additive` and `multiplicative` recurse into themselves for the right
    operand, so chains associate to the right: `10 - 5 - 2` is `10 - (5 - 2)`.

    Every rule returns None if it does not apply at the current token, and raises
    a ParserException as soon as a token it requires is missing.
    """

    def __init__(self, program: str = "") -> None:
        self.og_program = program

    def parse(self, tokens: TokenReader) -> ASTNode:
        """Parse a program, i.e. a single additive expression.

        Tokens that remain after the expression are left in `tokens` and are not
        reported as an error.

        Args:
            tokens (TokenReader): The token stream, produced by `Scanner(program).tokenize()`

        Returns:
            ASTNode: The Program node at the root of the AST.
        """
        logger.debug("Parsing %d tokens", len(tokens))
        node = ASTNode(NodeType.PROGRAM)
        child = self.additive(tokens)
        if child is not None:
            node.add_child(child)

        if tokens.peek() is not None:
            logger.debug("Ignoring %d trailing tokens", len(tokens) - tokens.position())
        return node

    def int_declare(self, tokens: TokenReader) -> Optional[ASTNode]:
        """Parse an integer declaration, e.g. `int a;` or `int b = 2 + 3;`.

        This rule is not part of `program`.
        """
        token = tokens.peek()
        if token is None or token.type != Type.INT:
            return None
        tokens.read()

        token = tokens.peek()
        if token is None or token.type != Type.ID:
            ParseError(self.og_program, "intDeclare", "a variable name", token)
        token = tokens.read()
        node = ASTNode(NodeType.INT_DECLARATION, token.text)

        token = tokens.peek()
        if token is not None and token.type == Type.EQ:
            tokens.read()
            child = self.additive(tokens)
            if child is None:
                ParseError(
                    self.og_program,
                    "intDeclare",
                    "an expression to initialize the variable",
                    tokens.peek(),
                )
            node.add_child(child)

        token = tokens.peek()
        if token is None or token.type != Type.SEMICOLON:
            ParseError(self.og_program, "intDeclare", "a semicolon", token)
        tokens.read()

        return node

    def additive(self, tokens: TokenReader) -> Optional[ASTNode]:
        child1 = self.multiplicative(tokens)
        token = tokens.peek()
        if (
            child1 is None
            or token is None
            or token.type not in (Type.PLUS, Type.MINUS)
        ):
            return child1

        token = tokens.read()
        child2 = self.additive(tokens)
        if child2 is None:
            ParseError(
                self.og_program, "additive", "the right part of the expression", None
            )

        node = ASTNode(NodeType.ADDITIVE, token.text)
        node.add_child(child1)
        node.add_child(child2)
        return node

    def multiplicative(self, tokens: TokenReader) -> Optional[ASTNode]:
        child1 = self.primary(tokens)
        token = tokens.peek()
        if (
            child1 is None
            or token is None
            or token.type not in (Type.STAR, Type.SLASH)
        ):
            return child1

        token = tokens.read()
        child2 = self.multiplicative(tokens)
        if child2 is None:
            ParseError(
                self.og_program,
                "multiplicative",
                "the right part of the expression",
                None,
            )

        node = ASTNode(NodeType.MULTIPLICATIVE, token.text)
        node.add_child(child1)
        node.add_child(child2)
        return node

    def primary(self, tokens: TokenReader) -> Optional[ASTNode]:
        token = tokens.peek()
        if token is None:
            return None

        match token.type:
            case Type.DIGIT:
                tokens.read()
                return ASTNode(NodeType.INT_LITERAL, token.text)

            case Type.ID:
                tokens.read()
                return ASTNode(NodeType.IDENTIFIER, token.text)

            case Type.LRB:
                tokens.read()
                node = self.additive(tokens)
                if node is None:
                    ParseError(
                        self.og_program, "primary", "an expression after '('", None
                    )

                token = tokens.peek()
                if token is None or token.type != Type.RRB:
                    ParseError(self.og_program, "primary", "a ')'", token)
                tokens.read()
                return node

            case _:
                ParseError(
                    self.og_program,
                    "primary",
                    "an integer literal, an identifier or a '('",
                    token,
                )
