# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Sections of the ECMAScript 5.1 grammar, keyed to the chapters of the 5.1 text."""

from __future__ import annotations

from typing import Final

from railspec.grammar.sections import SectionId, SectionIndex


SECTION_ORDER: Final[tuple[SectionId, ...]] = (
    "source",
    "lexical",
    "identifiers",
    "punctuators",
    "literals",
    "strings",
    "regex",
    "expressions",
    "statements",
    "functions",
    "program",
)

SECTION_TITLES: Final[dict[SectionId, str]] = {
    "source": "§6 Source Text",
    "lexical": "§7 Lexical Conventions",
    "identifiers": "§7.6 Identifiers",
    "punctuators": "§7.7 Punctuators",
    "literals": "§7.8 Literals (Numeric)",
    "strings": "§7.8.4 String Literals",
    "regex": "§7.8.5 Regular Expression Literals",
    "expressions": "§11 Expressions",
    "statements": "§12 Statements",
    "functions": "§13 Function Definition",
    "program": "§14 Program",
}

SECTION_RULES: Final[dict[SectionId, tuple[str, ...]]] = {
    "source": (
        "SourceCharacter",
    ),
    "lexical": (
        "InputElementDiv",
        "InputElementRegExp",
        "WhiteSpace",
        "LineTerminator",
        "LineTerminatorSequence",
        "Comment",
        "MultiLineComment",
        "MultiLineCommentChars",
        "PostAsteriskCommentChars",
        "MultiLineNotAsteriskChar",
        "MultiLineNotForwardSlashOrAsteriskChar",
        "SingleLineComment",
        "SingleLineCommentChars",
        "SingleLineCommentChar",
        "Token",
    ),
    "identifiers": (
        "Identifier",
        "IdentifierName",
        "IdentifierStart",
        "IdentifierPart",
        "UnicodeLetter",
        "UnicodeCombiningMark",
        "UnicodeDigit",
        "UnicodeConnectorPunctuation",
        "ReservedWord",
        "Keyword",
        "FutureReservedWord",
    ),
    "punctuators": (
        "Punctuator",
        "DivPunctuator",
    ),
    "literals": (
        "Literal",
        "NullLiteral",
        "BooleanLiteral",
        "NumericLiteral",
        "DecimalLiteral",
        "DecimalIntegerLiteral",
        "DecimalDigits",
        "DecimalDigit",
        "NonZeroDigit",
        "ExponentPart",
        "ExponentIndicator",
        "SignedInteger",
        "HexIntegerLiteral",
        "HexDigit",
    ),
    "strings": (
        "StringLiteral",
        "DoubleStringCharacters",
        "SingleStringCharacters",
        "DoubleStringCharacter",
        "SingleStringCharacter",
        "LineContinuation",
        "EscapeSequence",
        "CharacterEscapeSequence",
        "SingleEscapeCharacter",
        "NonEscapeCharacter",
        "EscapeCharacter",
        "HexEscapeSequence",
        "UnicodeEscapeSequence",
    ),
    "regex": (
        "RegularExpressionLiteral",
        "RegularExpressionBody",
        "RegularExpressionChars",
        "RegularExpressionFirstChar",
        "RegularExpressionChar",
        "RegularExpressionBackslashSequence",
        "RegularExpressionNonTerminator",
        "RegularExpressionClass",
        "RegularExpressionClassChars",
        "RegularExpressionClassChar",
        "RegularExpressionFlags",
    ),
    "expressions": (
        "PrimaryExpression",
        "ArrayLiteral",
        "ElementList",
        "Elision",
        "ObjectLiteral",
        "PropertyNameAndValueList",
        "PropertyAssignment",
        "PropertyName",
        "PropertySetParameterList",
        "MemberExpression",
        "NewExpression",
        "CallExpression",
        "Arguments",
        "ArgumentList",
        "LeftHandSideExpression",
        "PostfixExpression",
        "UnaryExpression",
        "MultiplicativeExpression",
        "AdditiveExpression",
        "ShiftExpression",
        "RelationalExpression",
        "RelationalExpressionNoIn",
        "EqualityExpression",
        "EqualityExpressionNoIn",
        "BitwiseANDExpression",
        "BitwiseANDExpressionNoIn",
        "BitwiseXORExpression",
        "BitwiseXORExpressionNoIn",
        "BitwiseORExpression",
        "BitwiseORExpressionNoIn",
        "LogicalANDExpression",
        "LogicalANDExpressionNoIn",
        "LogicalORExpression",
        "LogicalORExpressionNoIn",
        "ConditionalExpression",
        "ConditionalExpressionNoIn",
        "AssignmentExpression",
        "AssignmentExpressionNoIn",
        "AssignmentOperator",
        "Expression",
        "ExpressionNoIn",
    ),
    "statements": (
        "Statement",
        "Block",
        "StatementList",
        "VariableStatement",
        "VariableDeclarationList",
        "VariableDeclarationListNoIn",
        "VariableDeclaration",
        "VariableDeclarationNoIn",
        "Initialiser",
        "InitialiserNoIn",
        "EmptyStatement",
        "ExpressionStatement",
        "IfStatement",
        "IterationStatement",
        "ContinueStatement",
        "BreakStatement",
        "ReturnStatement",
        "WithStatement",
        "SwitchStatement",
        "CaseBlock",
        "CaseClauses",
        "CaseClause",
        "DefaultClause",
        "LabelledStatement",
        "ThrowStatement",
        "TryStatement",
        "Catch",
        "Finally",
        "DebuggerStatement",
    ),
    "functions": (
        "FunctionDeclaration",
        "FunctionExpression",
        "FormalParameterList",
        "FunctionBody",
    ),
    "program": (
        "Program",
        "SourceElements",
        "SourceElement",
    ),
}

sections = SectionIndex.from_tables(SECTION_ORDER, SECTION_TITLES, SECTION_RULES)

__all__ = ("SECTION_ORDER", "SECTION_RULES", "SECTION_TITLES", "sections")
