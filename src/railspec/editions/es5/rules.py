# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Diagram productions for the ECMAScript 5.1 grammar.

The `...NoIn` variants of §11 are separate productions, as in the 5.1 text.
"""

from __future__ import annotations

from collections.abc import Iterable

from railspec.diagrams.combinators import (
    NT,
    Choice,
    Comment,
    Diagram,
    OneOrMore,
    Optional,
    Sequence,
    T,
    ZeroOrMore,
)
from railspec.grammar.grammar import GrammarEdition
from railspec.grammar.registry import RuleRegistry


rules = RuleRegistry(GrammarEdition.ES5_1)


def _chain(operand: str, operators: Iterable[str]):
    """A left-associative binary expression: operands separated by any of `operators`."""
    return Sequence(
        NT(operand), ZeroOrMore(Sequence(Choice(0, *map(T, operators)), NT(operand)))
    )


# §6 Source Text


@rules.production("SourceCharacter")
def source_character():
    return Diagram(Comment("any Unicode code unit"))


# §7 Lexical Conventions


@rules.production("InputElementDiv")
def input_element_div():
    return Diagram(
        Choice(0,
            NT("WhiteSpace"),
            NT("LineTerminator"),
            NT("Comment"),
            NT("Token"),
            NT("DivPunctuator")
        )
    )


@rules.production("InputElementRegExp")
def input_element_reg_exp():
    return Diagram(
        Choice(0,
            NT("WhiteSpace"),
            NT("LineTerminator"),
            NT("Comment"),
            NT("Token"),
            NT("RegularExpressionLiteral")
        )
    )


# §7.2 White Space


@rules.production("WhiteSpace")
def white_space():
    return Diagram(
        Choice(0,
            T("<TAB>"),
            T("<VT>"),
            T("<FF>"),
            T("<SP>"),
            T("<NBSP>"),
            T("<BOM>"),
            T("<USP>")
        )
    )


# §7.3 Line Terminators


@rules.production("LineTerminator")
def line_terminator():
    return Diagram(
        Choice(0,
            T("<LF>"),
            T("<CR>"),
            T("<LS>"),
            T("<PS>")
        )
    )


@rules.production("LineTerminatorSequence")
def line_terminator_sequence():
    return Diagram(
        Choice(0,
            T("<LF>"),
            Sequence(T("<CR>"), Comment("lookahead ∉ <LF>")),
            T("<LS>"),
            T("<PS>"),
            Sequence(T("<CR>"), T("<LF>"))
        )
    )


# §7.4 Comments


@rules.production("Comment")
def comment():
    return Diagram(
        Choice(0,
            NT("MultiLineComment"),
            NT("SingleLineComment")
        )
    )


@rules.production("MultiLineComment")
def multi_line_comment():
    return Diagram(
        Sequence(
            T("/*"),
            Optional(NT("MultiLineCommentChars")),
            T("*/")
        )
    )


@rules.production("MultiLineCommentChars")
def multi_line_comment_chars():
    return Diagram(
        Choice(0,
            Sequence(NT("MultiLineNotAsteriskChar"), Optional(NT("MultiLineCommentChars"))),
            Sequence(T("*"), Optional(NT("PostAsteriskCommentChars")))
        )
    )


@rules.production("PostAsteriskCommentChars")
def post_asterisk_comment_chars():
    return Diagram(
        Choice(0,
            Sequence(NT("MultiLineNotForwardSlashOrAsteriskChar"), Optional(NT("MultiLineCommentChars"))),
            Sequence(T("*"), Optional(NT("PostAsteriskCommentChars")))
        )
    )


@rules.production("MultiLineNotAsteriskChar")
def multi_line_not_asterisk_char():
    return Diagram(
        Sequence(NT("SourceCharacter"), Comment("but not *"))
    )


@rules.production("MultiLineNotForwardSlashOrAsteriskChar")
def multi_line_not_forward_slash_or_asterisk_char():
    return Diagram(
        Sequence(NT("SourceCharacter"), Comment("but not / or *"))
    )


@rules.production("SingleLineComment")
def single_line_comment():
    return Diagram(
        Sequence(T("//"), Optional(NT("SingleLineCommentChars")))
    )


@rules.production("SingleLineCommentChars")
def single_line_comment_chars():
    return Diagram(
        Sequence(NT("SingleLineCommentChar"), Optional(NT("SingleLineCommentChars")))
    )


@rules.production("SingleLineCommentChar")
def single_line_comment_char():
    return Diagram(
        Sequence(NT("SourceCharacter"), Comment("but not LineTerminator"))
    )


# §7.5 Tokens


@rules.production("Token")
def token():
    return Diagram(
        Choice(0,
            NT("IdentifierName"),
            NT("Punctuator"),
            NT("NumericLiteral"),
            NT("StringLiteral")
        )
    )


# §7.6 Identifier Names and Identifiers


@rules.production("Identifier")
def identifier():
    return Diagram(
        Sequence(NT("IdentifierName"), Comment("but not ReservedWord"))
    )


@rules.production("IdentifierName")
def identifier_name():
    return Diagram(
        Sequence(
            NT("IdentifierStart"),
            ZeroOrMore(NT("IdentifierPart"))
        )
    )


@rules.production("IdentifierStart")
def identifier_start():
    return Diagram(
        Choice(0,
            NT("UnicodeLetter"),
            T("$"),
            T("_"),
            Sequence(T("\\"), NT("UnicodeEscapeSequence"))
        )
    )


@rules.production("IdentifierPart")
def identifier_part():
    return Diagram(
        Choice(0,
            NT("IdentifierStart"),
            NT("UnicodeCombiningMark"),
            NT("UnicodeDigit"),
            NT("UnicodeConnectorPunctuation"),
            T("<ZWNJ>"),
            T("<ZWJ>")
        )
    )


@rules.production("UnicodeLetter")
def unicode_letter():
    return Diagram(
        Comment("Unicode categories Lu, Ll, Lt, Lm, Lo, or Nl")
    )


@rules.production("UnicodeCombiningMark")
def unicode_combining_mark():
    return Diagram(
        Comment("Unicode categories Mn or Mc")
    )


@rules.production("UnicodeDigit")
def unicode_digit():
    return Diagram(
        Comment("Unicode category Nd")
    )


@rules.production("UnicodeConnectorPunctuation")
def unicode_connector_punctuation():
    return Diagram(
        Comment("Unicode category Pc")
    )


# §7.6.1 Reserved Words


@rules.production("ReservedWord")
def reserved_word():
    return Diagram(
        Choice(0,
            NT("Keyword"),
            NT("FutureReservedWord"),
            NT("NullLiteral"),
            NT("BooleanLiteral")
        )
    )


@rules.production("Keyword")
def keyword():
    return Diagram(
        Choice(0,
            T("break"), T("do"), T("instanceof"), T("typeof"),
            T("case"), T("else"), T("new"), T("var"),
            T("catch"), T("finally"), T("return"), T("void"),
            T("continue"), T("for"), T("switch"), T("while"),
            T("debugger"), T("function"), T("this"), T("with"),
            T("default"), T("if"), T("throw"),
            T("delete"), T("in"), T("try")
        )
    )


@rules.production("FutureReservedWord")
def future_reserved_word():
    return Diagram(
        Choice(0,
            Comment("Normal mode:"),
            T("class"), T("enum"), T("extends"), T("super"),
            T("const"), T("export"), T("import"),
            Comment("Strict mode additions:"),
            T("implements"), T("let"), T("private"), T("public"),
            T("interface"), T("package"), T("protected"), T("static"),
            T("yield")
        )
    )


# §7.7 Punctuators


@rules.production("Punctuator")
def punctuator():
    return Diagram(
        Choice(0,
            T("{"), T("}"), T("("), T(")"), T("["), T("]"),
            T("."), T(";"), T(","), T("<"), T(">"), T("<="),
            T(">="), T("=="), T("!="), T("==="), T("!=="),
            T("+"), T("-"), T("*"), T("%"), T("++"), T("--"),
            T("<<"), T(">>"), T(">>>"), T("&"), T("|"), T("^"),
            T("!"), T("~"), T("&&"), T("||"), T("?"), T(":"),
            T("="), T("+="), T("-="), T("*="), T("%="), T("<<="),
            T(">>="), T(">>>="), T("&="), T("|="), T("^=")
        )
    )


@rules.production("DivPunctuator")
def div_punctuator():
    return Diagram(
        Choice(0, T("/"), T("/="))
    )


# §7.8 Literals


@rules.production("Literal")
def literal():
    return Diagram(
        Choice(0,
            NT("NullLiteral"),
            NT("BooleanLiteral"),
            NT("NumericLiteral"),
            NT("StringLiteral"),
            NT("RegularExpressionLiteral")
        )
    )


@rules.production("NullLiteral")
def null_literal():
    return Diagram(T("null"))


@rules.production("BooleanLiteral")
def boolean_literal():
    return Diagram(Choice(0, T("true"), T("false")))


# §7.8.3 Numeric Literals


@rules.production("NumericLiteral")
def numeric_literal():
    return Diagram(
        Choice(0,
            NT("DecimalLiteral"),
            NT("HexIntegerLiteral")
        )
    )


@rules.production("DecimalLiteral")
def decimal_literal():
    return Diagram(
        Choice(0,
            Sequence(NT("DecimalIntegerLiteral"), T("."), Optional(NT("DecimalDigits")), Optional(NT("ExponentPart"))),
            Sequence(T("."), NT("DecimalDigits"), Optional(NT("ExponentPart"))),
            Sequence(NT("DecimalIntegerLiteral"), Optional(NT("ExponentPart")))
        )
    )


@rules.production("DecimalIntegerLiteral")
def decimal_integer_literal():
    return Diagram(
        Choice(0,
            T("0"),
            Sequence(NT("NonZeroDigit"), Optional(NT("DecimalDigits")))
        )
    )


@rules.production("DecimalDigits")
def decimal_digits():
    return Diagram(
        OneOrMore(NT("DecimalDigit"))
    )


@rules.production("DecimalDigit")
def decimal_digit():
    return Diagram(
        Choice(0, T("0"), T("1"), T("2"), T("3"), T("4"), T("5"), T("6"), T("7"), T("8"), T("9"))
    )


@rules.production("NonZeroDigit")
def non_zero_digit():
    return Diagram(
        Choice(0, T("1"), T("2"), T("3"), T("4"), T("5"), T("6"), T("7"), T("8"), T("9"))
    )


@rules.production("ExponentPart")
def exponent_part():
    return Diagram(
        Sequence(NT("ExponentIndicator"), NT("SignedInteger"))
    )


@rules.production("ExponentIndicator")
def exponent_indicator():
    return Diagram(Choice(0, T("e"), T("E")))


@rules.production("SignedInteger")
def signed_integer():
    return Diagram(
        Choice(0,
            NT("DecimalDigits"),
            Sequence(T("+"), NT("DecimalDigits")),
            Sequence(T("-"), NT("DecimalDigits"))
        )
    )


@rules.production("HexIntegerLiteral")
def hex_integer_literal():
    return Diagram(
        Sequence(
            Choice(0, T("0x"), T("0X")),
            OneOrMore(NT("HexDigit"))
        )
    )


@rules.production("HexDigit")
def hex_digit():
    return Diagram(
        Choice(0,
            T("0"), T("1"), T("2"), T("3"), T("4"), T("5"), T("6"), T("7"), T("8"), T("9"),
            T("a"), T("b"), T("c"), T("d"), T("e"), T("f"),
            T("A"), T("B"), T("C"), T("D"), T("E"), T("F")
        )
    )


# §7.8.4 String Literals


@rules.production("StringLiteral")
def string_literal():
    return Diagram(
        Choice(0,
            Sequence(T('"'), Optional(NT("DoubleStringCharacters")), T('"')),
            Sequence(T("'"), Optional(NT("SingleStringCharacters")), T("'"))
        )
    )


@rules.production("DoubleStringCharacters")
def double_string_characters():
    return Diagram(
        OneOrMore(NT("DoubleStringCharacter"))
    )


@rules.production("SingleStringCharacters")
def single_string_characters():
    return Diagram(
        OneOrMore(NT("SingleStringCharacter"))
    )


@rules.production("DoubleStringCharacter")
def double_string_character():
    return Diagram(
        Choice(0,
            Sequence(NT("SourceCharacter"), Comment('but not " or \\ or LineTerminator')),
            Sequence(T("\\"), NT("EscapeSequence")),
            NT("LineContinuation")
        )
    )


@rules.production("SingleStringCharacter")
def single_string_character():
    return Diagram(
        Choice(0,
            Sequence(NT("SourceCharacter"), Comment("but not ' or \\ or LineTerminator")),
            Sequence(T("\\"), NT("EscapeSequence")),
            NT("LineContinuation")
        )
    )


@rules.production("LineContinuation")
def line_continuation():
    return Diagram(
        Sequence(T("\\"), NT("LineTerminatorSequence"))
    )


@rules.production("EscapeSequence")
def escape_sequence():
    return Diagram(
        Choice(0,
            NT("CharacterEscapeSequence"),
            Sequence(T("0"), Comment("lookahead ∉ DecimalDigit")),
            NT("HexEscapeSequence"),
            NT("UnicodeEscapeSequence")
        )
    )


@rules.production("CharacterEscapeSequence")
def character_escape_sequence():
    return Diagram(
        Choice(0,
            NT("SingleEscapeCharacter"),
            NT("NonEscapeCharacter")
        )
    )


@rules.production("SingleEscapeCharacter")
def single_escape_character():
    return Diagram(
        Choice(0,
            T("'"), T('"'), T("\\"), T("b"), T("f"), T("n"), T("r"), T("t"), T("v")
        )
    )


@rules.production("NonEscapeCharacter")
def non_escape_character():
    return Diagram(
        Sequence(NT("SourceCharacter"), Comment("but not EscapeCharacter or LineTerminator"))
    )


@rules.production("EscapeCharacter")
def escape_character():
    return Diagram(
        Choice(0,
            NT("SingleEscapeCharacter"),
            NT("DecimalDigit"),
            T("x"),
            T("u")
        )
    )


@rules.production("HexEscapeSequence")
def hex_escape_sequence():
    return Diagram(
        Sequence(T("x"), NT("HexDigit"), NT("HexDigit"))
    )


@rules.production("UnicodeEscapeSequence")
def unicode_escape_sequence():
    return Diagram(
        Sequence(T("u"), NT("HexDigit"), NT("HexDigit"), NT("HexDigit"), NT("HexDigit"))
    )


# §7.8.5 Regular Expression Literals


@rules.production("RegularExpressionLiteral")
def regular_expression_literal():
    return Diagram(
        Sequence(
            T("/"),
            NT("RegularExpressionBody"),
            T("/"),
            NT("RegularExpressionFlags")
        )
    )


@rules.production("RegularExpressionBody")
def regular_expression_body():
    return Diagram(
        Sequence(NT("RegularExpressionFirstChar"), NT("RegularExpressionChars"))
    )


@rules.production("RegularExpressionChars")
def regular_expression_chars():
    return Diagram(
        ZeroOrMore(NT("RegularExpressionChar"))
    )


@rules.production("RegularExpressionFirstChar")
def regular_expression_first_char():
    return Diagram(
        Choice(0,
            Sequence(NT("RegularExpressionNonTerminator"), Comment("but not * or \\ or / or [")),
            NT("RegularExpressionBackslashSequence"),
            NT("RegularExpressionClass")
        )
    )


@rules.production("RegularExpressionChar")
def regular_expression_char():
    return Diagram(
        Choice(0,
            Sequence(NT("RegularExpressionNonTerminator"), Comment("but not \\ or / or [")),
            NT("RegularExpressionBackslashSequence"),
            NT("RegularExpressionClass")
        )
    )


@rules.production("RegularExpressionBackslashSequence")
def regular_expression_backslash_sequence():
    return Diagram(
        Sequence(T("\\"), NT("RegularExpressionNonTerminator"))
    )


@rules.production("RegularExpressionNonTerminator")
def regular_expression_non_terminator():
    return Diagram(
        Sequence(NT("SourceCharacter"), Comment("but not LineTerminator"))
    )


@rules.production("RegularExpressionClass")
def regular_expression_class():
    return Diagram(
        Sequence(T("["), NT("RegularExpressionClassChars"), T("]"))
    )


@rules.production("RegularExpressionClassChars")
def regular_expression_class_chars():
    return Diagram(
        ZeroOrMore(NT("RegularExpressionClassChar"))
    )


@rules.production("RegularExpressionClassChar")
def regular_expression_class_char():
    return Diagram(
        Choice(0,
            Sequence(NT("RegularExpressionNonTerminator"), Comment("but not ] or \\")),
            NT("RegularExpressionBackslashSequence")
        )
    )


@rules.production("RegularExpressionFlags")
def regular_expression_flags():
    return Diagram(
        ZeroOrMore(NT("IdentifierPart"))
    )


# §11 Expressions


@rules.production("PrimaryExpression")
def primary_expression():
    return Diagram(
        Choice(0,
            T("this"),
            NT("Identifier"),
            NT("Literal"),
            NT("ArrayLiteral"),
            NT("ObjectLiteral"),
            Sequence(T("("), NT("Expression"), T(")"))
        )
    )


@rules.production("ArrayLiteral")
def array_literal():
    return Diagram(
        Choice(0,
            Sequence(T("["), Optional(NT("Elision")), T("]")),
            Sequence(T("["), NT("ElementList"), T("]")),
            Sequence(T("["), NT("ElementList"), T(","), Optional(NT("Elision")), T("]"))
        )
    )


@rules.production("ElementList")
def element_list():
    return Diagram(
        Sequence(
            Optional(NT("Elision")),
            NT("AssignmentExpression"),
            ZeroOrMore(Sequence(T(","), Optional(NT("Elision")), NT("AssignmentExpression")))
        )
    )


@rules.production("Elision")
def elision():
    return Diagram(OneOrMore(T(",")))


@rules.production("ObjectLiteral")
def object_literal():
    return Diagram(
        Choice(0,
            Sequence(T("{"), T("}")),
            Sequence(T("{"), NT("PropertyNameAndValueList"), T("}")),
            Sequence(T("{"), NT("PropertyNameAndValueList"), T(","), T("}"))
        )
    )


@rules.production("PropertyNameAndValueList")
def property_name_and_value_list():
    return Diagram(
        Sequence(
            NT("PropertyAssignment"),
            ZeroOrMore(Sequence(T(","), NT("PropertyAssignment")))
        )
    )


@rules.production("PropertyAssignment")
def property_assignment():
    return Diagram(
        Choice(0,
            Sequence(NT("PropertyName"), T(":"), NT("AssignmentExpression")),
            Sequence(T("get"), NT("PropertyName"), T("("), T(")"), T("{"), NT("FunctionBody"), T("}")),
            Sequence(T("set"), NT("PropertyName"), T("("), NT("PropertySetParameterList"), T(")"), T("{"), NT("FunctionBody"), T("}"))
        )
    )


@rules.production("PropertyName")
def property_name():
    return Diagram(
        Choice(0,
            NT("IdentifierName"),
            NT("StringLiteral"),
            NT("NumericLiteral")
        )
    )


@rules.production("PropertySetParameterList")
def property_set_parameter_list():
    return Diagram(NT("Identifier"))


@rules.production("MemberExpression")
def member_expression():
    return Diagram(
        Sequence(
            Choice(0,
                NT("PrimaryExpression"),
                NT("FunctionExpression"),
                Sequence(T("new"), NT("MemberExpression"), NT("Arguments"))
            ),
            ZeroOrMore(
                Choice(0,
                    Sequence(T("["), NT("Expression"), T("]")),
                    Sequence(T("."), NT("IdentifierName"))
                )
            )
        )
    )


@rules.production("NewExpression")
def new_expression():
    return Diagram(
        Choice(0,
            NT("MemberExpression"),
            Sequence(T("new"), NT("NewExpression"))
        )
    )


@rules.production("CallExpression")
def call_expression():
    return Diagram(
        Sequence(
            Choice(0,
                Sequence(NT("MemberExpression"), NT("Arguments")),
                Sequence(NT("CallExpression"), NT("Arguments")),
                Sequence(NT("CallExpression"), T("["), NT("Expression"), T("]")),
                Sequence(NT("CallExpression"), T("."), NT("IdentifierName"))
            )
        )
    )


@rules.production("Arguments")
def arguments():
    return Diagram(
        Choice(0,
            Sequence(T("("), T(")")),
            Sequence(T("("), NT("ArgumentList"), T(")"))
        )
    )


@rules.production("ArgumentList")
def argument_list():
    return Diagram(
        Sequence(
            NT("AssignmentExpression"),
            ZeroOrMore(Sequence(T(","), NT("AssignmentExpression")))
        )
    )


@rules.production("LeftHandSideExpression")
def left_hand_side_expression():
    return Diagram(
        Choice(0,
            NT("NewExpression"),
            NT("CallExpression")
        )
    )


@rules.production("PostfixExpression")
def postfix_expression():
    return Diagram(
        Sequence(
            NT("LeftHandSideExpression"),
            Optional(Choice(0, T("++"), T("--")))
        )
    )


@rules.production("UnaryExpression")
def unary_expression():
    return Diagram(
        Choice(0,
            NT("PostfixExpression"),
            Sequence(T("delete"), NT("UnaryExpression")),
            Sequence(T("void"), NT("UnaryExpression")),
            Sequence(T("typeof"), NT("UnaryExpression")),
            Sequence(T("++"), NT("UnaryExpression")),
            Sequence(T("--"), NT("UnaryExpression")),
            Sequence(T("+"), NT("UnaryExpression")),
            Sequence(T("-"), NT("UnaryExpression")),
            Sequence(T("~"), NT("UnaryExpression")),
            Sequence(T("!"), NT("UnaryExpression"))
        )
    )


@rules.production("MultiplicativeExpression")
def multiplicative_expression():
    return Diagram(_chain("UnaryExpression", ["*", "/", "%"]))


@rules.production("AdditiveExpression")
def additive_expression():
    return Diagram(_chain("MultiplicativeExpression", ["+", "-"]))


@rules.production("ShiftExpression")
def shift_expression():
    return Diagram(_chain("AdditiveExpression", ["<<", ">>", ">>>"]))


@rules.production("RelationalExpression")
def relational_expression():
    return Diagram(_chain("ShiftExpression", ["<", ">", "<=", ">=", "instanceof", "in"]))


@rules.production("RelationalExpressionNoIn")
def relational_expression_no_in():
    return Diagram(_chain("ShiftExpression", ["<", ">", "<=", ">=", "instanceof"]))


@rules.production("EqualityExpression")
def equality_expression():
    return Diagram(_chain("RelationalExpression", ["==", "!=", "===", "!=="]))


@rules.production("EqualityExpressionNoIn")
def equality_expression_no_in():
    return Diagram(_chain("RelationalExpressionNoIn", ["==", "!=", "===", "!=="]))


@rules.production("BitwiseANDExpression")
def bitwise_and_expression():
    return Diagram(_chain("EqualityExpression", ["&"]))


@rules.production("BitwiseANDExpressionNoIn")
def bitwise_and_expression_no_in():
    return Diagram(_chain("EqualityExpressionNoIn", ["&"]))


@rules.production("BitwiseXORExpression")
def bitwise_xor_expression():
    return Diagram(_chain("BitwiseANDExpression", ["^"]))


@rules.production("BitwiseXORExpressionNoIn")
def bitwise_xor_expression_no_in():
    return Diagram(_chain("BitwiseANDExpressionNoIn", ["^"]))


@rules.production("BitwiseORExpression")
def bitwise_or_expression():
    return Diagram(_chain("BitwiseXORExpression", ["|"]))


@rules.production("BitwiseORExpressionNoIn")
def bitwise_or_expression_no_in():
    return Diagram(_chain("BitwiseXORExpressionNoIn", ["|"]))


@rules.production("LogicalANDExpression")
def logical_and_expression():
    return Diagram(_chain("BitwiseORExpression", ["&&"]))


@rules.production("LogicalANDExpressionNoIn")
def logical_and_expression_no_in():
    return Diagram(_chain("BitwiseORExpressionNoIn", ["&&"]))


@rules.production("LogicalORExpression")
def logical_or_expression():
    return Diagram(_chain("LogicalANDExpression", ["||"]))


@rules.production("LogicalORExpressionNoIn")
def logical_or_expression_no_in():
    return Diagram(_chain("LogicalANDExpressionNoIn", ["||"]))


@rules.production("ConditionalExpression")
def conditional_expression():
    return Diagram(
        Sequence(
            NT("LogicalORExpression"),
            Optional(Sequence(T("?"), NT("AssignmentExpression"), T(":"), NT("AssignmentExpression")))
        )
    )


@rules.production("ConditionalExpressionNoIn")
def conditional_expression_no_in():
    return Diagram(
        Sequence(
            NT("LogicalORExpressionNoIn"),
            Optional(Sequence(T("?"), NT("AssignmentExpressionNoIn"), T(":"), NT("AssignmentExpressionNoIn")))
        )
    )


@rules.production("AssignmentExpression")
def assignment_expression():
    return Diagram(
        Choice(0,
            NT("ConditionalExpression"),
            Sequence(NT("LeftHandSideExpression"), NT("AssignmentOperator"), NT("AssignmentExpression"))
        )
    )


@rules.production("AssignmentExpressionNoIn")
def assignment_expression_no_in():
    return Diagram(
        Choice(0,
            NT("ConditionalExpressionNoIn"),
            Sequence(NT("LeftHandSideExpression"), NT("AssignmentOperator"), NT("AssignmentExpressionNoIn"))
        )
    )


@rules.production("AssignmentOperator")
def assignment_operator():
    return Diagram(
        Choice(0,
            T("="), T("*="), T("/="), T("%="), T("+="), T("-="),
            T("<<="), T(">>="), T(">>>="), T("&="), T("^="), T("|=")
        )
    )


@rules.production("Expression")
def expression():
    return Diagram(
        Sequence(
            NT("AssignmentExpression"),
            ZeroOrMore(Sequence(T(","), NT("AssignmentExpression")))
        )
    )


@rules.production("ExpressionNoIn")
def expression_no_in():
    return Diagram(
        Sequence(
            NT("AssignmentExpressionNoIn"),
            ZeroOrMore(Sequence(T(","), NT("AssignmentExpressionNoIn")))
        )
    )


# §12 Statements


@rules.production("Statement")
def statement():
    return Diagram(
        Choice(0,
            NT("Block"),
            NT("VariableStatement"),
            NT("EmptyStatement"),
            NT("ExpressionStatement"),
            NT("IfStatement"),
            NT("IterationStatement"),
            NT("ContinueStatement"),
            NT("BreakStatement"),
            NT("ReturnStatement"),
            NT("WithStatement"),
            NT("LabelledStatement"),
            NT("SwitchStatement"),
            NT("ThrowStatement"),
            NT("TryStatement"),
            NT("DebuggerStatement")
        )
    )


@rules.production("Block")
def block():
    return Diagram(
        Sequence(T("{"), Optional(NT("StatementList")), T("}"))
    )


@rules.production("StatementList")
def statement_list():
    return Diagram(OneOrMore(NT("Statement")))


@rules.production("VariableStatement")
def variable_statement():
    return Diagram(
        Sequence(T("var"), NT("VariableDeclarationList"), T(";"))
    )


@rules.production("VariableDeclarationList")
def variable_declaration_list():
    return Diagram(
        Sequence(
            NT("VariableDeclaration"),
            ZeroOrMore(Sequence(T(","), NT("VariableDeclaration")))
        )
    )


@rules.production("VariableDeclarationListNoIn")
def variable_declaration_list_no_in():
    return Diagram(
        Sequence(
            NT("VariableDeclarationNoIn"),
            ZeroOrMore(Sequence(T(","), NT("VariableDeclarationNoIn")))
        )
    )


@rules.production("VariableDeclaration")
def variable_declaration():
    return Diagram(
        Sequence(NT("Identifier"), Optional(NT("Initialiser")))
    )


@rules.production("VariableDeclarationNoIn")
def variable_declaration_no_in():
    return Diagram(
        Sequence(NT("Identifier"), Optional(NT("InitialiserNoIn")))
    )


@rules.production("Initialiser")
def initialiser():
    return Diagram(
        Sequence(T("="), NT("AssignmentExpression"))
    )


@rules.production("InitialiserNoIn")
def initialiser_no_in():
    return Diagram(
        Sequence(T("="), NT("AssignmentExpressionNoIn"))
    )


@rules.production("EmptyStatement")
def empty_statement():
    return Diagram(T(";"))


@rules.production("ExpressionStatement")
def expression_statement():
    return Diagram(
        Sequence(
            Sequence(NT("Expression"), Comment("lookahead ∉ { or function")),
            T(";")
        )
    )


@rules.production("IfStatement")
def if_statement():
    return Diagram(
        Choice(0,
            Sequence(T("if"), T("("), NT("Expression"), T(")"), NT("Statement"), T("else"), NT("Statement")),
            Sequence(T("if"), T("("), NT("Expression"), T(")"), NT("Statement"))
        )
    )


@rules.production("IterationStatement")
def iteration_statement():
    return Diagram(
        Choice(0,
            Sequence(T("do"), NT("Statement"), T("while"), T("("), NT("Expression"), T(")"), T(";")),
            Sequence(T("while"), T("("), NT("Expression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), Optional(NT("ExpressionNoIn")), T(";"), Optional(NT("Expression")), T(";"), Optional(NT("Expression")), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), T("var"), NT("VariableDeclarationListNoIn"), T(";"), Optional(NT("Expression")), T(";"), Optional(NT("Expression")), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), NT("LeftHandSideExpression"), T("in"), NT("Expression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), T("var"), NT("VariableDeclarationNoIn"), T("in"), NT("Expression"), T(")"), NT("Statement"))
        )
    )


@rules.production("ContinueStatement")
def continue_statement():
    return Diagram(
        Choice(0,
            Sequence(T("continue"), T(";")),
            Sequence(T("continue"), Comment("no LineTerminator"), NT("Identifier"), T(";"))
        )
    )


@rules.production("BreakStatement")
def break_statement():
    return Diagram(
        Choice(0,
            Sequence(T("break"), T(";")),
            Sequence(T("break"), Comment("no LineTerminator"), NT("Identifier"), T(";"))
        )
    )


@rules.production("ReturnStatement")
def return_statement():
    return Diagram(
        Choice(0,
            Sequence(T("return"), T(";")),
            Sequence(T("return"), Comment("no LineTerminator"), NT("Expression"), T(";"))
        )
    )


@rules.production("WithStatement")
def with_statement():
    return Diagram(
        Sequence(T("with"), T("("), NT("Expression"), T(")"), NT("Statement"))
    )


@rules.production("SwitchStatement")
def switch_statement():
    return Diagram(
        Sequence(T("switch"), T("("), NT("Expression"), T(")"), NT("CaseBlock"))
    )


@rules.production("CaseBlock")
def case_block():
    return Diagram(
        Choice(0,
            Sequence(T("{"), Optional(NT("CaseClauses")), T("}")),
            Sequence(T("{"), Optional(NT("CaseClauses")), NT("DefaultClause"), Optional(NT("CaseClauses")), T("}"))
        )
    )


@rules.production("CaseClauses")
def case_clauses():
    return Diagram(OneOrMore(NT("CaseClause")))


@rules.production("CaseClause")
def case_clause():
    return Diagram(
        Sequence(T("case"), NT("Expression"), T(":"), Optional(NT("StatementList")))
    )


@rules.production("DefaultClause")
def default_clause():
    return Diagram(
        Sequence(T("default"), T(":"), Optional(NT("StatementList")))
    )


@rules.production("LabelledStatement")
def labelled_statement():
    return Diagram(
        Sequence(NT("Identifier"), T(":"), NT("Statement"))
    )


@rules.production("ThrowStatement")
def throw_statement():
    return Diagram(
        Sequence(T("throw"), Comment("no LineTerminator"), NT("Expression"), T(";"))
    )


@rules.production("TryStatement")
def try_statement():
    return Diagram(
        Choice(0,
            Sequence(T("try"), NT("Block"), NT("Catch")),
            Sequence(T("try"), NT("Block"), NT("Finally")),
            Sequence(T("try"), NT("Block"), NT("Catch"), NT("Finally"))
        )
    )


@rules.production("Catch")
def catch():
    return Diagram(
        Sequence(T("catch"), T("("), NT("Identifier"), T(")"), NT("Block"))
    )


@rules.production("Finally")
def finally_():
    return Diagram(
        Sequence(T("finally"), NT("Block"))
    )


@rules.production("DebuggerStatement")
def debugger_statement():
    return Diagram(Sequence(T("debugger"), T(";")))


# §13 Function Definition


@rules.production("FunctionDeclaration")
def function_declaration():
    return Diagram(
        Sequence(
            T("function"),
            NT("Identifier"),
            T("("),
            Optional(NT("FormalParameterList")),
            T(")"),
            T("{"),
            NT("FunctionBody"),
            T("}")
        )
    )


@rules.production("FunctionExpression")
def function_expression():
    return Diagram(
        Sequence(
            T("function"),
            Optional(NT("Identifier")),
            T("("),
            Optional(NT("FormalParameterList")),
            T(")"),
            T("{"),
            NT("FunctionBody"),
            T("}")
        )
    )


@rules.production("FormalParameterList")
def formal_parameter_list():
    return Diagram(
        Sequence(
            NT("Identifier"),
            ZeroOrMore(Sequence(T(","), NT("Identifier")))
        )
    )


@rules.production("FunctionBody")
def function_body():
    return Diagram(Optional(NT("SourceElements")))


# §14 Program


@rules.production("Program")
def program():
    return Diagram(Optional(NT("SourceElements")))


@rules.production("SourceElements")
def source_elements():
    return Diagram(OneOrMore(NT("SourceElement")))


@rules.production("SourceElement")
def source_element():
    return Diagram(
        Choice(0,
            NT("Statement"),
            NT("FunctionDeclaration")
        )
    )


rules.freeze()

__all__ = ("rules",)
