# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Diagram productions for the ECMAScript 2025 grammar (Annex A).

Each production is registered by name and built on demand. Lookahead
restrictions and grammar parameters are shown as comments on the diagram
rather than encoded structurally.
"""

from __future__ import annotations

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


rules = RuleRegistry(GrammarEdition.ES2025)


# A.1 Lexical Grammar


@rules.production("SourceCharacter")
def source_character():
    return Diagram(
        Comment("any Unicode code point")
    )


@rules.production("InputElementDiv")
def input_element_div():
    return Diagram(
        Choice(0,
            NT("WhiteSpace"),
            NT("LineTerminator"),
            NT("Comment"),
            NT("CommonToken"),
            NT("DivPunctuator"),
            NT("RightBracePunctuator")
        )
    )


@rules.production("InputElementRegExp")
def input_element_reg_exp():
    return Diagram(
        Choice(0,
            NT("WhiteSpace"),
            NT("LineTerminator"),
            NT("Comment"),
            NT("CommonToken"),
            NT("RightBracePunctuator"),
            NT("RegularExpressionLiteral")
        )
    )


@rules.production("InputElementRegExpOrTemplateTail")
def input_element_reg_exp_or_template_tail():
    return Diagram(
        Choice(0,
            NT("WhiteSpace"),
            NT("LineTerminator"),
            NT("Comment"),
            NT("CommonToken"),
            NT("RegularExpressionLiteral"),
            NT("TemplateSubstitutionTail")
        )
    )


@rules.production("InputElementTemplateTail")
def input_element_template_tail():
    return Diagram(
        Choice(0,
            NT("WhiteSpace"),
            NT("LineTerminator"),
            NT("Comment"),
            NT("CommonToken"),
            NT("DivPunctuator"),
            NT("TemplateSubstitutionTail")
        )
    )


@rules.production("WhiteSpace")
def white_space():
    return Diagram(
        Choice(0,
            T("<TAB>"),
            T("<VT>"),
            T("<FF>"),
            T("<ZWNBSP>"),
            T("<USP>")
        )
    )


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
            Sequence(T("<CR>"), Comment("[lookahead ≠ <LF>]")),
            T("<LS>"),
            T("<PS>"),
            Sequence(T("<CR>"), T("<LF>"))
        )
    )


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


@rules.production("SingleLineComment")
def single_line_comment():
    return Diagram(
        Sequence(
            T("//"),
            Optional(NT("SingleLineCommentChars"))
        )
    )


@rules.production("HashbangComment")
def hashbang_comment():
    return Diagram(
        Sequence(
            T("#!"),
            Optional(NT("SingleLineCommentChars"))
        )
    )


@rules.production("CommonToken")
def common_token():
    return Diagram(
        Choice(0,
            NT("IdentifierName"),
            NT("PrivateIdentifier"),
            NT("Punctuator"),
            NT("NumericLiteral"),
            NT("StringLiteral"),
            NT("Template")
        )
    )


@rules.production("PrivateIdentifier")
def private_identifier():
    return Diagram(
        Sequence(T("#"), NT("IdentifierName"))
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
            NT("IdentifierStartChar"),
            Sequence(T("\\"), NT("UnicodeEscapeSequence"))
        )
    )


@rules.production("IdentifierPart")
def identifier_part():
    return Diagram(
        Choice(0,
            NT("IdentifierPartChar"),
            Sequence(T("\\"), NT("UnicodeEscapeSequence"))
        )
    )


@rules.production("IdentifierStartChar")
def identifier_start_char():
    return Diagram(
        Choice(0,
            NT("UnicodeIDStart"),
            T("$"),
            T("_")
        )
    )


@rules.production("IdentifierPartChar")
def identifier_part_char():
    return Diagram(
        Choice(0,
            NT("UnicodeIDContinue"),
            T("$")
        )
    )


@rules.production("UnicodeIDStart")
def unicode_id_start():
    return Diagram(
        Comment("any Unicode code point with property \"ID_Start\"")
    )


@rules.production("UnicodeIDContinue")
def unicode_id_continue():
    return Diagram(
        Comment("any Unicode code point with property \"ID_Continue\"")
    )


@rules.production("ReservedWord")
def reserved_word():
    return Diagram(
        Choice(0,
            T("await"), T("break"), T("case"), T("catch"), T("class"),
            T("const"), T("continue"), T("debugger"), T("default"), T("delete"),
            T("do"), T("else"), T("enum"), T("export"), T("extends"),
            T("false"), T("finally"), T("for"), T("function"), T("if"),
            T("import"), T("in"), T("instanceof"), T("new"), T("null"),
            T("return"), T("super"), T("switch"), T("this"), T("throw"),
            T("true"), T("try"), T("typeof"), T("var"), T("void"),
            T("while"), T("with"), T("yield")
        )
    )


@rules.production("Punctuator")
def punctuator():
    return Diagram(
        Choice(0,
            NT("OptionalChainingPunctuator"),
            NT("OtherPunctuator")
        )
    )


@rules.production("OptionalChainingPunctuator")
def optional_chaining_punctuator():
    return Diagram(
        Sequence(T("?."), Comment("[lookahead ∉ DecimalDigit]"))
    )


@rules.production("DivPunctuator")
def div_punctuator():
    return Diagram(
        Choice(0, T("/"), T("/="))
    )


@rules.production("RightBracePunctuator")
def right_brace_punctuator():
    return Diagram(T("}"))


@rules.production("NullLiteral")
def null_literal():
    return Diagram(T("null"))


@rules.production("BooleanLiteral")
def boolean_literal():
    return Diagram(
        Choice(0, T("true"), T("false"))
    )


@rules.production("NumericLiteral")
def numeric_literal():
    return Diagram(
        Choice(0,
            NT("DecimalLiteral"),
            NT("DecimalBigIntegerLiteral"),
            NT("NonDecimalIntegerLiteral"),
            Sequence(NT("NonDecimalIntegerLiteral"), NT("BigIntLiteralSuffix")),
            NT("LegacyOctalIntegerLiteral")
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
            NT("NonZeroDigit"),
            Sequence(NT("NonZeroDigit"), Optional(NT("NumericLiteralSeparator")), NT("DecimalDigits")),
            NT("NonOctalDecimalIntegerLiteral")
        )
    )


@rules.production("DecimalDigits")
def decimal_digits():
    return Diagram(
        OneOrMore(
            NT("DecimalDigit"),
            Optional(NT("NumericLiteralSeparator"))
        )
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


@rules.production("NumericLiteralSeparator")
def numeric_literal_separator():
    return Diagram(T("_"))


@rules.production("ExponentPart")
def exponent_part():
    return Diagram(
        Sequence(NT("ExponentIndicator"), NT("SignedInteger"))
    )


@rules.production("ExponentIndicator")
def exponent_indicator():
    return Diagram(
        Choice(0, T("e"), T("E"))
    )


@rules.production("SignedInteger")
def signed_integer():
    return Diagram(
        Choice(0,
            NT("DecimalDigits"),
            Sequence(T("+"), NT("DecimalDigits")),
            Sequence(T("-"), NT("DecimalDigits"))
        )
    )


@rules.production("BigIntLiteralSuffix")
def big_int_literal_suffix():
    return Diagram(T("n"))


@rules.production("DecimalBigIntegerLiteral")
def decimal_big_integer_literal():
    return Diagram(
        Choice(0,
            Sequence(T("0"), NT("BigIntLiteralSuffix")),
            Sequence(NT("NonZeroDigit"), Optional(NT("DecimalDigits")), NT("BigIntLiteralSuffix")),
            Sequence(NT("NonZeroDigit"), NT("NumericLiteralSeparator"), NT("DecimalDigits"), NT("BigIntLiteralSuffix"))
        )
    )


@rules.production("NonDecimalIntegerLiteral")
def non_decimal_integer_literal():
    return Diagram(
        Choice(0,
            NT("BinaryIntegerLiteral"),
            NT("OctalIntegerLiteral"),
            NT("HexIntegerLiteral")
        )
    )


@rules.production("BinaryIntegerLiteral")
def binary_integer_literal():
    return Diagram(
        Choice(0,
            Sequence(T("0b"), NT("BinaryDigits")),
            Sequence(T("0B"), NT("BinaryDigits"))
        )
    )


@rules.production("BinaryDigits")
def binary_digits():
    return Diagram(
        OneOrMore(NT("BinaryDigit"), Optional(NT("NumericLiteralSeparator")))
    )


@rules.production("BinaryDigit")
def binary_digit():
    return Diagram(
        Choice(0, T("0"), T("1"))
    )


@rules.production("OctalIntegerLiteral")
def octal_integer_literal():
    return Diagram(
        Choice(0,
            Sequence(T("0o"), NT("OctalDigits")),
            Sequence(T("0O"), NT("OctalDigits"))
        )
    )


@rules.production("OctalDigits")
def octal_digits():
    return Diagram(
        OneOrMore(NT("OctalDigit"), Optional(NT("NumericLiteralSeparator")))
    )


@rules.production("OctalDigit")
def octal_digit():
    return Diagram(
        Choice(0, T("0"), T("1"), T("2"), T("3"), T("4"), T("5"), T("6"), T("7"))
    )


@rules.production("HexIntegerLiteral")
def hex_integer_literal():
    return Diagram(
        Choice(0,
            Sequence(T("0x"), NT("HexDigits")),
            Sequence(T("0X"), NT("HexDigits"))
        )
    )


@rules.production("HexDigits")
def hex_digits():
    return Diagram(
        OneOrMore(NT("HexDigit"), Optional(NT("NumericLiteralSeparator")))
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


@rules.production("LegacyOctalIntegerLiteral")
def legacy_octal_integer_literal():
    return Diagram(
        Sequence(T("0"), OneOrMore(NT("OctalDigit")))
    )


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
            Comment('SourceCharacter but not " or \\ or LineTerminator'),
            T("<LS>"),
            T("<PS>"),
            Sequence(T("\\"), NT("EscapeSequence")),
            NT("LineContinuation")
        )
    )


@rules.production("SingleStringCharacter")
def single_string_character():
    return Diagram(
        Choice(0,
            Comment("SourceCharacter but not ' or \\ or LineTerminator"),
            T("<LS>"),
            T("<PS>"),
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
            Sequence(T("0"), Comment("[lookahead ∉ DecimalDigit]")),
            NT("LegacyOctalEscapeSequence"),
            NT("NonOctalDecimalEscapeSequence"),
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


@rules.production("HexEscapeSequence")
def hex_escape_sequence():
    return Diagram(
        Sequence(T("x"), NT("HexDigit"), NT("HexDigit"))
    )


@rules.production("UnicodeEscapeSequence")
def unicode_escape_sequence():
    return Diagram(
        Choice(0,
            Sequence(T("u"), NT("Hex4Digits")),
            Sequence(T("u{"), NT("CodePoint"), T("}"))
        )
    )


@rules.production("Hex4Digits")
def hex4_digits():
    return Diagram(
        Sequence(NT("HexDigit"), NT("HexDigit"), NT("HexDigit"), NT("HexDigit"))
    )


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


@rules.production("RegularExpressionFlags")
def regular_expression_flags():
    return Diagram(
        ZeroOrMore(NT("IdentifierPartChar"))
    )


@rules.production("Template")
def template():
    return Diagram(
        Choice(0,
            NT("NoSubstitutionTemplate"),
            NT("TemplateHead")
        )
    )


@rules.production("NoSubstitutionTemplate")
def no_substitution_template():
    return Diagram(
        Sequence(T("`"), Optional(NT("TemplateCharacters")), T("`"))
    )


@rules.production("TemplateHead")
def template_head():
    return Diagram(
        Sequence(T("`"), Optional(NT("TemplateCharacters")), T("${"))
    )


@rules.production("TemplateSubstitutionTail")
def template_substitution_tail():
    return Diagram(
        Choice(0,
            NT("TemplateMiddle"),
            NT("TemplateTail")
        )
    )


@rules.production("TemplateMiddle")
def template_middle():
    return Diagram(
        Sequence(T("}"), Optional(NT("TemplateCharacters")), T("${"))
    )


@rules.production("TemplateTail")
def template_tail():
    return Diagram(
        Sequence(T("}"), Optional(NT("TemplateCharacters")), T("`"))
    )


@rules.production("TemplateCharacters")
def template_characters():
    return Diagram(
        OneOrMore(NT("TemplateCharacter"))
    )


# A.2 Expressions


@rules.production("IdentifierReference")
def identifier_reference():
    return Diagram(
        Choice(0,
            NT("Identifier"),
            T("yield"),
            T("await")
        )
    )


@rules.production("BindingIdentifier")
def binding_identifier():
    return Diagram(
        Choice(0,
            NT("Identifier"),
            T("yield"),
            T("await")
        )
    )


@rules.production("LabelIdentifier")
def label_identifier():
    return Diagram(
        Choice(0,
            NT("Identifier"),
            T("yield"),
            T("await")
        )
    )


@rules.production("Identifier")
def identifier():
    return Diagram(
        Sequence(NT("IdentifierName"), Comment("but not ReservedWord"))
    )


@rules.production("PrimaryExpression")
def primary_expression():
    return Diagram(
        Choice(0,
            T("this"),
            NT("IdentifierReference"),
            NT("Literal"),
            NT("ArrayLiteral"),
            NT("ObjectLiteral"),
            NT("FunctionExpression"),
            NT("ClassExpression"),
            NT("GeneratorExpression"),
            NT("AsyncFunctionExpression"),
            NT("AsyncGeneratorExpression"),
            NT("RegularExpressionLiteral"),
            NT("TemplateLiteral"),
            NT("CoverParenthesizedExpressionAndArrowParameterList")
        )
    )


@rules.production("CoverParenthesizedExpressionAndArrowParameterList")
def cover_parenthesized_expression_and_arrow_parameter_list():
    return Diagram(
        Choice(0,
            Sequence(T("("), NT("Expression"), T(")")),
            Sequence(T("("), NT("Expression"), T(","), T(")")),
            Sequence(T("("), T(")")),
            Sequence(T("("), T("..."), NT("BindingIdentifier"), T(")")),
            Sequence(T("("), T("..."), NT("BindingPattern"), T(")")),
            Sequence(T("("), NT("Expression"), T(","), T("..."), NT("BindingIdentifier"), T(")")),
            Sequence(T("("), NT("Expression"), T(","), T("..."), NT("BindingPattern"), T(")"))
        )
    )


@rules.production("ParenthesizedExpression")
def parenthesized_expression():
    return Diagram(
        Sequence(T("("), NT("Expression"), T(")"))
    )


@rules.production("Literal")
def literal():
    return Diagram(
        Choice(0,
            NT("NullLiteral"),
            NT("BooleanLiteral"),
            NT("NumericLiteral"),
            NT("StringLiteral")
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
            Choice(0, NT("AssignmentExpression"), NT("SpreadElement")),
            ZeroOrMore(
                Sequence(T(","), Optional(NT("Elision")), Choice(0, NT("AssignmentExpression"), NT("SpreadElement")))
            )
        )
    )


@rules.production("Elision")
def elision():
    return Diagram(
        OneOrMore(T(","))
    )


@rules.production("SpreadElement")
def spread_element():
    return Diagram(
        Sequence(T("..."), NT("AssignmentExpression"))
    )


@rules.production("ObjectLiteral")
def object_literal():
    return Diagram(
        Choice(0,
            Sequence(T("{"), T("}")),
            Sequence(T("{"), NT("PropertyDefinitionList"), T("}")),
            Sequence(T("{"), NT("PropertyDefinitionList"), T(","), T("}"))
        )
    )


@rules.production("PropertyDefinitionList")
def property_definition_list():
    return Diagram(
        Sequence(
            NT("PropertyDefinition"),
            ZeroOrMore(Sequence(T(","), NT("PropertyDefinition")))
        )
    )


@rules.production("PropertyDefinition")
def property_definition():
    return Diagram(
        Choice(0,
            NT("IdentifierReference"),
            NT("CoverInitializedName"),
            Sequence(NT("PropertyName"), T(":"), NT("AssignmentExpression")),
            NT("MethodDefinition"),
            Sequence(T("..."), NT("AssignmentExpression"))
        )
    )


@rules.production("PropertyName")
def property_name():
    return Diagram(
        Choice(0,
            NT("LiteralPropertyName"),
            NT("ComputedPropertyName")
        )
    )


@rules.production("LiteralPropertyName")
def literal_property_name():
    return Diagram(
        Choice(0,
            NT("IdentifierName"),
            NT("StringLiteral"),
            NT("NumericLiteral")
        )
    )


@rules.production("ComputedPropertyName")
def computed_property_name():
    return Diagram(
        Sequence(T("["), NT("AssignmentExpression"), T("]"))
    )


@rules.production("CoverInitializedName")
def cover_initialized_name():
    return Diagram(
        Sequence(NT("IdentifierReference"), NT("Initializer"))
    )


@rules.production("Initializer")
def initializer():
    return Diagram(
        Sequence(T("="), NT("AssignmentExpression"))
    )


@rules.production("TemplateLiteral")
def template_literal():
    return Diagram(
        Choice(0,
            NT("NoSubstitutionTemplate"),
            NT("SubstitutionTemplate")
        )
    )


@rules.production("SubstitutionTemplate")
def substitution_template():
    return Diagram(
        Sequence(NT("TemplateHead"), NT("Expression"), NT("TemplateSpans"))
    )


@rules.production("TemplateSpans")
def template_spans():
    return Diagram(
        Choice(0,
            NT("TemplateTail"),
            Sequence(NT("TemplateMiddleList"), NT("TemplateTail"))
        )
    )


@rules.production("TemplateMiddleList")
def template_middle_list():
    return Diagram(
        OneOrMore(Sequence(NT("TemplateMiddle"), NT("Expression")))
    )


@rules.production("MemberExpression")
def member_expression():
    return Diagram(
        Sequence(
            Choice(0,
                NT("PrimaryExpression"),
                NT("SuperProperty"),
                NT("MetaProperty"),
                Sequence(T("new"), NT("MemberExpression"), NT("Arguments"))
            ),
            ZeroOrMore(
                Choice(0,
                    Sequence(T("["), NT("Expression"), T("]")),
                    Sequence(T("."), NT("IdentifierName")),
                    NT("TemplateLiteral"),
                    Sequence(T("."), NT("PrivateIdentifier"))
                )
            )
        )
    )


@rules.production("SuperProperty")
def super_property():
    return Diagram(
        Choice(0,
            Sequence(T("super"), T("["), NT("Expression"), T("]")),
            Sequence(T("super"), T("."), NT("IdentifierName"))
        )
    )


@rules.production("MetaProperty")
def meta_property():
    return Diagram(
        Choice(0,
            NT("NewTarget"),
            NT("ImportMeta")
        )
    )


@rules.production("NewTarget")
def new_target():
    return Diagram(
        Sequence(T("new"), T("."), T("target"))
    )


@rules.production("ImportMeta")
def import_meta():
    return Diagram(
        Sequence(T("import"), T("."), T("meta"))
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
                NT("CoverCallExpressionAndAsyncArrowHead"),
                NT("SuperCall"),
                NT("ImportCall"),
                Sequence(NT("CallExpression"), NT("Arguments"))
            ),
            ZeroOrMore(
                Choice(0,
                    NT("Arguments"),
                    Sequence(T("["), NT("Expression"), T("]")),
                    Sequence(T("."), NT("IdentifierName")),
                    NT("TemplateLiteral"),
                    Sequence(T("."), NT("PrivateIdentifier"))
                )
            )
        )
    )


@rules.production("SuperCall")
def super_call():
    return Diagram(
        Sequence(T("super"), NT("Arguments"))
    )


@rules.production("ImportCall")
def import_call():
    return Diagram(
        Choice(0,
            Sequence(T("import"), T("("), NT("AssignmentExpression"), Optional(T(",")), T(")")),
            Sequence(T("import"), T("("), NT("AssignmentExpression"), T(","), NT("AssignmentExpression"), Optional(T(",")), T(")"))
        )
    )


@rules.production("Arguments")
def arguments():
    return Diagram(
        Choice(0,
            Sequence(T("("), T(")")),
            Sequence(T("("), NT("ArgumentList"), T(")")),
            Sequence(T("("), NT("ArgumentList"), T(","), T(")"))
        )
    )


@rules.production("ArgumentList")
def argument_list():
    return Diagram(
        Sequence(
            Choice(0, NT("AssignmentExpression"), Sequence(T("..."), NT("AssignmentExpression"))),
            ZeroOrMore(
                Sequence(T(","), Choice(0, NT("AssignmentExpression"), Sequence(T("..."), NT("AssignmentExpression"))))
            )
        )
    )


@rules.production("OptionalExpression")
def optional_expression():
    return Diagram(
        Sequence(
            Choice(0, NT("MemberExpression"), NT("CallExpression"), NT("OptionalExpression")),
            NT("OptionalChain")
        )
    )


@rules.production("OptionalChain")
def optional_chain():
    return Diagram(
        Sequence(
            Choice(0,
                Sequence(T("?."), NT("Arguments")),
                Sequence(T("?."), T("["), NT("Expression"), T("]")),
                Sequence(T("?."), NT("IdentifierName")),
                Sequence(T("?."), NT("TemplateLiteral")),
                Sequence(T("?."), NT("PrivateIdentifier"))
            ),
            ZeroOrMore(
                Choice(0,
                    NT("Arguments"),
                    Sequence(T("["), NT("Expression"), T("]")),
                    Sequence(T("."), NT("IdentifierName")),
                    NT("TemplateLiteral"),
                    Sequence(T("."), NT("PrivateIdentifier"))
                )
            )
        )
    )


@rules.production("LeftHandSideExpression")
def left_hand_side_expression():
    return Diagram(
        Choice(0,
            NT("NewExpression"),
            NT("CallExpression"),
            NT("OptionalExpression")
        )
    )


@rules.production("UpdateExpression")
def update_expression():
    return Diagram(
        Choice(0,
            NT("LeftHandSideExpression"),
            Sequence(NT("LeftHandSideExpression"), Comment("[no LineTerminator]"), T("++")),
            Sequence(NT("LeftHandSideExpression"), Comment("[no LineTerminator]"), T("--")),
            Sequence(T("++"), NT("UnaryExpression")),
            Sequence(T("--"), NT("UnaryExpression"))
        )
    )


@rules.production("UnaryExpression")
def unary_expression():
    return Diagram(
        Choice(0,
            NT("UpdateExpression"),
            Sequence(T("delete"), NT("UnaryExpression")),
            Sequence(T("void"), NT("UnaryExpression")),
            Sequence(T("typeof"), NT("UnaryExpression")),
            Sequence(T("+"), NT("UnaryExpression")),
            Sequence(T("-"), NT("UnaryExpression")),
            Sequence(T("~"), NT("UnaryExpression")),
            Sequence(T("!"), NT("UnaryExpression")),
            NT("AwaitExpression")
        )
    )


@rules.production("ExponentiationExpression")
def exponentiation_expression():
    return Diagram(
        Choice(0,
            NT("UnaryExpression"),
            Sequence(NT("UpdateExpression"), T("**"), NT("ExponentiationExpression"))
        )
    )


@rules.production("MultiplicativeExpression")
def multiplicative_expression():
    return Diagram(
        Sequence(
            NT("ExponentiationExpression"),
            ZeroOrMore(Sequence(NT("MultiplicativeOperator"), NT("ExponentiationExpression")))
        )
    )


@rules.production("MultiplicativeOperator")
def multiplicative_operator():
    return Diagram(
        Choice(0, T("*"), T("/"), T("%"))
    )


@rules.production("AdditiveExpression")
def additive_expression():
    return Diagram(
        Sequence(
            NT("MultiplicativeExpression"),
            ZeroOrMore(
                Choice(0,
                    Sequence(T("+"), NT("MultiplicativeExpression")),
                    Sequence(T("-"), NT("MultiplicativeExpression"))
                )
            )
        )
    )


@rules.production("ShiftExpression")
def shift_expression():
    return Diagram(
        Sequence(
            NT("AdditiveExpression"),
            ZeroOrMore(
                Choice(0,
                    Sequence(T("<<"), NT("AdditiveExpression")),
                    Sequence(T(">>"), NT("AdditiveExpression")),
                    Sequence(T(">>>"), NT("AdditiveExpression"))
                )
            )
        )
    )


@rules.production("RelationalExpression")
def relational_expression():
    return Diagram(
        Sequence(
            NT("ShiftExpression"),
            ZeroOrMore(
                Choice(0,
                    Sequence(T("<"), NT("ShiftExpression")),
                    Sequence(T(">"), NT("ShiftExpression")),
                    Sequence(T("<="), NT("ShiftExpression")),
                    Sequence(T(">="), NT("ShiftExpression")),
                    Sequence(T("instanceof"), NT("ShiftExpression")),
                    Sequence(T("in"), NT("ShiftExpression")),
                    Sequence(NT("PrivateIdentifier"), T("in"), NT("ShiftExpression"))
                )
            )
        )
    )


@rules.production("EqualityExpression")
def equality_expression():
    return Diagram(
        Sequence(
            NT("RelationalExpression"),
            ZeroOrMore(
                Choice(0,
                    Sequence(T("=="), NT("RelationalExpression")),
                    Sequence(T("!="), NT("RelationalExpression")),
                    Sequence(T("==="), NT("RelationalExpression")),
                    Sequence(T("!=="), NT("RelationalExpression"))
                )
            )
        )
    )


@rules.production("BitwiseANDExpression")
def bitwise_and_expression():
    return Diagram(
        Sequence(
            NT("EqualityExpression"),
            ZeroOrMore(Sequence(T("&"), NT("EqualityExpression")))
        )
    )


@rules.production("BitwiseXORExpression")
def bitwise_xor_expression():
    return Diagram(
        Sequence(
            NT("BitwiseANDExpression"),
            ZeroOrMore(Sequence(T("^"), NT("BitwiseANDExpression")))
        )
    )


@rules.production("BitwiseORExpression")
def bitwise_or_expression():
    return Diagram(
        Sequence(
            NT("BitwiseXORExpression"),
            ZeroOrMore(Sequence(T("|"), NT("BitwiseXORExpression")))
        )
    )


@rules.production("LogicalANDExpression")
def logical_and_expression():
    return Diagram(
        Sequence(
            NT("BitwiseORExpression"),
            ZeroOrMore(Sequence(T("&&"), NT("BitwiseORExpression")))
        )
    )


@rules.production("LogicalORExpression")
def logical_or_expression():
    return Diagram(
        Sequence(
            NT("LogicalANDExpression"),
            ZeroOrMore(Sequence(T("||"), NT("LogicalANDExpression")))
        )
    )


@rules.production("CoalesceExpression")
def coalesce_expression():
    return Diagram(
        Sequence(NT("CoalesceExpressionHead"), T("??"), NT("BitwiseORExpression"))
    )


@rules.production("CoalesceExpressionHead")
def coalesce_expression_head():
    return Diagram(
        Choice(0,
            NT("CoalesceExpression"),
            NT("BitwiseORExpression")
        )
    )


@rules.production("ShortCircuitExpression")
def short_circuit_expression():
    return Diagram(
        Choice(0,
            NT("LogicalORExpression"),
            NT("CoalesceExpression")
        )
    )


@rules.production("ConditionalExpression")
def conditional_expression():
    return Diagram(
        Choice(0,
            NT("ShortCircuitExpression"),
            Sequence(NT("ShortCircuitExpression"), T("?"), NT("AssignmentExpression"), T(":"), NT("AssignmentExpression"))
        )
    )


@rules.production("AssignmentExpression")
def assignment_expression():
    return Diagram(
        Choice(0,
            NT("ConditionalExpression"),
            NT("YieldExpression"),
            NT("ArrowFunction"),
            NT("AsyncArrowFunction"),
            Sequence(NT("LeftHandSideExpression"), T("="), NT("AssignmentExpression")),
            Sequence(NT("LeftHandSideExpression"), NT("AssignmentOperator"), NT("AssignmentExpression")),
            Sequence(NT("LeftHandSideExpression"), T("&&="), NT("AssignmentExpression")),
            Sequence(NT("LeftHandSideExpression"), T("||="), NT("AssignmentExpression")),
            Sequence(NT("LeftHandSideExpression"), T("??="), NT("AssignmentExpression"))
        )
    )


@rules.production("AssignmentOperator")
def assignment_operator():
    return Diagram(
        Choice(0,
            T("*="), T("/="), T("%="), T("+="), T("-="),
            T("<<="), T(">>="), T(">>>="), T("&="), T("^="), T("|="), T("**=")
        )
    )


@rules.production("AssignmentPattern")
def assignment_pattern():
    return Diagram(
        Choice(0,
            NT("ObjectAssignmentPattern"),
            NT("ArrayAssignmentPattern")
        )
    )


@rules.production("ObjectAssignmentPattern")
def object_assignment_pattern():
    return Diagram(
        Choice(0,
            Sequence(T("{"), T("}")),
            Sequence(T("{"), NT("AssignmentRestProperty"), T("}")),
            Sequence(T("{"), NT("AssignmentPropertyList"), T("}")),
            Sequence(T("{"), NT("AssignmentPropertyList"), T(","), Optional(NT("AssignmentRestProperty")), T("}"))
        )
    )


@rules.production("ArrayAssignmentPattern")
def array_assignment_pattern():
    return Diagram(
        Choice(0,
            Sequence(T("["), Optional(NT("Elision")), Optional(NT("AssignmentRestElement")), T("]")),
            Sequence(T("["), NT("AssignmentElementList"), T("]")),
            Sequence(T("["), NT("AssignmentElementList"), T(","), Optional(NT("Elision")), Optional(NT("AssignmentRestElement")), T("]"))
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


# A.3 Statements


@rules.production("Statement")
def statement():
    return Diagram(
        Choice(0,
            NT("BlockStatement"),
            NT("VariableStatement"),
            NT("EmptyStatement"),
            NT("ExpressionStatement"),
            NT("IfStatement"),
            NT("BreakableStatement"),
            NT("ContinueStatement"),
            NT("BreakStatement"),
            NT("ReturnStatement"),
            NT("WithStatement"),
            NT("LabelledStatement"),
            NT("ThrowStatement"),
            NT("TryStatement"),
            NT("DebuggerStatement")
        )
    )


@rules.production("Declaration")
def declaration():
    return Diagram(
        Choice(0,
            NT("HoistableDeclaration"),
            NT("ClassDeclaration"),
            NT("LexicalDeclaration")
        )
    )


@rules.production("HoistableDeclaration")
def hoistable_declaration():
    return Diagram(
        Choice(0,
            NT("FunctionDeclaration"),
            NT("GeneratorDeclaration"),
            NT("AsyncFunctionDeclaration"),
            NT("AsyncGeneratorDeclaration")
        )
    )


@rules.production("BreakableStatement")
def breakable_statement():
    return Diagram(
        Choice(0,
            NT("IterationStatement"),
            NT("SwitchStatement")
        )
    )


@rules.production("BlockStatement")
def block_statement():
    return Diagram(NT("Block"))


@rules.production("Block")
def block():
    return Diagram(
        Sequence(T("{"), Optional(NT("StatementList")), T("}"))
    )


@rules.production("StatementList")
def statement_list():
    return Diagram(
        OneOrMore(NT("StatementListItem"))
    )


@rules.production("StatementListItem")
def statement_list_item():
    return Diagram(
        Choice(0,
            NT("Statement"),
            NT("Declaration")
        )
    )


@rules.production("LexicalDeclaration")
def lexical_declaration():
    return Diagram(
        Sequence(NT("LetOrConst"), NT("BindingList"), T(";"))
    )


@rules.production("LetOrConst")
def let_or_const():
    return Diagram(
        Choice(0, T("let"), T("const"))
    )


@rules.production("BindingList")
def binding_list():
    return Diagram(
        Sequence(
            NT("LexicalBinding"),
            ZeroOrMore(Sequence(T(","), NT("LexicalBinding")))
        )
    )


@rules.production("LexicalBinding")
def lexical_binding():
    return Diagram(
        Choice(0,
            Sequence(NT("BindingIdentifier"), Optional(NT("Initializer"))),
            Sequence(NT("BindingPattern"), NT("Initializer"))
        )
    )


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


@rules.production("VariableDeclaration")
def variable_declaration():
    return Diagram(
        Choice(0,
            Sequence(NT("BindingIdentifier"), Optional(NT("Initializer"))),
            Sequence(NT("BindingPattern"), NT("Initializer"))
        )
    )


@rules.production("BindingPattern")
def binding_pattern():
    return Diagram(
        Choice(0,
            NT("ObjectBindingPattern"),
            NT("ArrayBindingPattern")
        )
    )


@rules.production("ObjectBindingPattern")
def object_binding_pattern():
    return Diagram(
        Choice(0,
            Sequence(T("{"), T("}")),
            Sequence(T("{"), NT("BindingRestProperty"), T("}")),
            Sequence(T("{"), NT("BindingPropertyList"), T("}")),
            Sequence(T("{"), NT("BindingPropertyList"), T(","), Optional(NT("BindingRestProperty")), T("}"))
        )
    )


@rules.production("ArrayBindingPattern")
def array_binding_pattern():
    return Diagram(
        Choice(0,
            Sequence(T("["), Optional(NT("Elision")), Optional(NT("BindingRestElement")), T("]")),
            Sequence(T("["), NT("BindingElementList"), T("]")),
            Sequence(T("["), NT("BindingElementList"), T(","), Optional(NT("Elision")), Optional(NT("BindingRestElement")), T("]"))
        )
    )


@rules.production("BindingRestProperty")
def binding_rest_property():
    return Diagram(
        Sequence(T("..."), NT("BindingIdentifier"))
    )


@rules.production("BindingPropertyList")
def binding_property_list():
    return Diagram(
        Sequence(
            NT("BindingProperty"),
            ZeroOrMore(Sequence(T(","), NT("BindingProperty")))
        )
    )


@rules.production("BindingElementList")
def binding_element_list():
    return Diagram(
        Sequence(
            NT("BindingElisionElement"),
            ZeroOrMore(Sequence(T(","), NT("BindingElisionElement")))
        )
    )


@rules.production("BindingElisionElement")
def binding_elision_element():
    return Diagram(
        Sequence(Optional(NT("Elision")), NT("BindingElement"))
    )


@rules.production("BindingProperty")
def binding_property():
    return Diagram(
        Choice(0,
            NT("SingleNameBinding"),
            Sequence(NT("PropertyName"), T(":"), NT("BindingElement"))
        )
    )


@rules.production("BindingElement")
def binding_element():
    return Diagram(
        Choice(0,
            NT("SingleNameBinding"),
            Sequence(NT("BindingPattern"), Optional(NT("Initializer")))
        )
    )


@rules.production("SingleNameBinding")
def single_name_binding():
    return Diagram(
        Sequence(NT("BindingIdentifier"), Optional(NT("Initializer")))
    )


@rules.production("BindingRestElement")
def binding_rest_element():
    return Diagram(
        Choice(0,
            Sequence(T("..."), NT("BindingIdentifier")),
            Sequence(T("..."), NT("BindingPattern"))
        )
    )


@rules.production("EmptyStatement")
def empty_statement():
    return Diagram(T(";"))


@rules.production("ExpressionStatement")
def expression_statement():
    return Diagram(
        Sequence(
            Comment("[lookahead ∉ {, function, async function, class, let [}"),
            NT("Expression"),
            T(";")
        )
    )


@rules.production("IfStatement")
def if_statement():
    return Diagram(
        Choice(0,
            Sequence(T("if"), T("("), NT("Expression"), T(")"), NT("Statement"), T("else"), NT("Statement")),
            Sequence(T("if"), T("("), NT("Expression"), T(")"), NT("Statement"), Comment("[lookahead ≠ else]"))
        )
    )


@rules.production("IterationStatement")
def iteration_statement():
    return Diagram(
        Choice(0,
            NT("DoWhileStatement"),
            NT("WhileStatement"),
            NT("ForStatement"),
            NT("ForInOfStatement")
        )
    )


@rules.production("DoWhileStatement")
def do_while_statement():
    return Diagram(
        Sequence(T("do"), NT("Statement"), T("while"), T("("), NT("Expression"), T(")"), T(";"))
    )


@rules.production("WhileStatement")
def while_statement():
    return Diagram(
        Sequence(T("while"), T("("), NT("Expression"), T(")"), NT("Statement"))
    )


@rules.production("ForStatement")
def for_statement():
    return Diagram(
        Choice(0,
            Sequence(T("for"), T("("), Optional(NT("Expression")), T(";"), Optional(NT("Expression")), T(";"), Optional(NT("Expression")), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), T("var"), NT("VariableDeclarationList"), T(";"), Optional(NT("Expression")), T(";"), Optional(NT("Expression")), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), NT("LexicalDeclaration"), Optional(NT("Expression")), T(";"), Optional(NT("Expression")), T(")"), NT("Statement"))
        )
    )


@rules.production("ForInOfStatement")
def for_in_of_statement():
    return Diagram(
        Choice(0,
            Sequence(T("for"), T("("), NT("LeftHandSideExpression"), T("in"), NT("Expression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), T("var"), NT("ForBinding"), T("in"), NT("Expression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), NT("ForDeclaration"), T("in"), NT("Expression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), NT("LeftHandSideExpression"), T("of"), NT("AssignmentExpression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), T("var"), NT("ForBinding"), T("of"), NT("AssignmentExpression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("("), NT("ForDeclaration"), T("of"), NT("AssignmentExpression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("await"), T("("), NT("LeftHandSideExpression"), T("of"), NT("AssignmentExpression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("await"), T("("), T("var"), NT("ForBinding"), T("of"), NT("AssignmentExpression"), T(")"), NT("Statement")),
            Sequence(T("for"), T("await"), T("("), NT("ForDeclaration"), T("of"), NT("AssignmentExpression"), T(")"), NT("Statement"))
        )
    )


@rules.production("ForDeclaration")
def for_declaration():
    return Diagram(
        Sequence(NT("LetOrConst"), NT("ForBinding"))
    )


@rules.production("ForBinding")
def for_binding():
    return Diagram(
        Choice(0,
            NT("BindingIdentifier"),
            NT("BindingPattern")
        )
    )


@rules.production("ContinueStatement")
def continue_statement():
    return Diagram(
        Choice(0,
            Sequence(T("continue"), T(";")),
            Sequence(T("continue"), Comment("[no LineTerminator]"), NT("LabelIdentifier"), T(";"))
        )
    )


@rules.production("BreakStatement")
def break_statement():
    return Diagram(
        Choice(0,
            Sequence(T("break"), T(";")),
            Sequence(T("break"), Comment("[no LineTerminator]"), NT("LabelIdentifier"), T(";"))
        )
    )


@rules.production("ReturnStatement")
def return_statement():
    return Diagram(
        Choice(0,
            Sequence(T("return"), T(";")),
            Sequence(T("return"), Comment("[no LineTerminator]"), NT("Expression"), T(";"))
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
    return Diagram(
        OneOrMore(NT("CaseClause"))
    )


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
        Sequence(NT("LabelIdentifier"), T(":"), NT("LabelledItem"))
    )


@rules.production("LabelledItem")
def labelled_item():
    return Diagram(
        Choice(0,
            NT("Statement"),
            NT("FunctionDeclaration")
        )
    )


@rules.production("ThrowStatement")
def throw_statement():
    return Diagram(
        Sequence(T("throw"), Comment("[no LineTerminator]"), NT("Expression"), T(";"))
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
        Choice(0,
            Sequence(T("catch"), T("("), NT("CatchParameter"), T(")"), NT("Block")),
            Sequence(T("catch"), NT("Block"))
        )
    )


@rules.production("Finally")
def finally_():
    return Diagram(
        Sequence(T("finally"), NT("Block"))
    )


@rules.production("CatchParameter")
def catch_parameter():
    return Diagram(
        Choice(0,
            NT("BindingIdentifier"),
            NT("BindingPattern")
        )
    )


@rules.production("DebuggerStatement")
def debugger_statement():
    return Diagram(
        Sequence(T("debugger"), T(";"))
    )


# A.4 Functions and Classes


@rules.production("UniqueFormalParameters")
def unique_formal_parameters():
    return Diagram(NT("FormalParameters"))


@rules.production("FormalParameters")
def formal_parameters():
    return Diagram(
        Choice(0,
            Comment("[empty]"),
            NT("FunctionRestParameter"),
            NT("FormalParameterList"),
            Sequence(NT("FormalParameterList"), T(",")),
            Sequence(NT("FormalParameterList"), T(","), NT("FunctionRestParameter"))
        )
    )


@rules.production("FormalParameterList")
def formal_parameter_list():
    return Diagram(
        Sequence(
            NT("FormalParameter"),
            ZeroOrMore(Sequence(T(","), NT("FormalParameter")))
        )
    )


@rules.production("FunctionRestParameter")
def function_rest_parameter():
    return Diagram(NT("BindingRestElement"))


@rules.production("FormalParameter")
def formal_parameter():
    return Diagram(NT("BindingElement"))


@rules.production("FunctionDeclaration")
def function_declaration():
    return Diagram(
        Choice(0,
            Sequence(T("function"), NT("BindingIdentifier"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("FunctionBody"), T("}")),
            Sequence(T("function"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("FunctionBody"), T("}"))
        )
    )


@rules.production("FunctionExpression")
def function_expression():
    return Diagram(
        Sequence(T("function"), Optional(NT("BindingIdentifier")), T("("), NT("FormalParameters"), T(")"), T("{"), NT("FunctionBody"), T("}"))
    )


@rules.production("FunctionBody")
def function_body():
    return Diagram(NT("FunctionStatementList"))


@rules.production("FunctionStatementList")
def function_statement_list():
    return Diagram(Optional(NT("StatementList")))


@rules.production("ArrowFunction")
def arrow_function():
    return Diagram(
        Sequence(NT("ArrowParameters"), Comment("[no LineTerminator]"), T("=>"), NT("ConciseBody"))
    )


@rules.production("ArrowParameters")
def arrow_parameters():
    return Diagram(
        Choice(0,
            NT("BindingIdentifier"),
            NT("CoverParenthesizedExpressionAndArrowParameterList")
        )
    )


@rules.production("ConciseBody")
def concise_body():
    return Diagram(
        Choice(0,
            Sequence(Comment("[lookahead ≠ {]"), NT("ExpressionBody")),
            Sequence(T("{"), NT("FunctionBody"), T("}"))
        )
    )


@rules.production("ExpressionBody")
def expression_body():
    return Diagram(NT("AssignmentExpression"))


@rules.production("ArrowFormalParameters")
def arrow_formal_parameters():
    return Diagram(
        Sequence(T("("), NT("UniqueFormalParameters"), T(")"))
    )


@rules.production("AsyncArrowFunction")
def async_arrow_function():
    return Diagram(
        Choice(0,
            Sequence(T("async"), Comment("[no LineTerminator]"), NT("AsyncArrowBindingIdentifier"), Comment("[no LineTerminator]"), T("=>"), NT("AsyncConciseBody")),
            Sequence(NT("CoverCallExpressionAndAsyncArrowHead"), Comment("[no LineTerminator]"), T("=>"), NT("AsyncConciseBody"))
        )
    )


@rules.production("AsyncConciseBody")
def async_concise_body():
    return Diagram(
        Choice(0,
            Sequence(Comment("[lookahead ≠ {]"), NT("ExpressionBody")),
            Sequence(T("{"), NT("AsyncFunctionBody"), T("}"))
        )
    )


@rules.production("AsyncArrowBindingIdentifier")
def async_arrow_binding_identifier():
    return Diagram(NT("BindingIdentifier"))


@rules.production("CoverCallExpressionAndAsyncArrowHead")
def cover_call_expression_and_async_arrow_head():
    return Diagram(
        Sequence(NT("MemberExpression"), NT("Arguments"))
    )


@rules.production("AsyncArrowHead")
def async_arrow_head():
    return Diagram(
        Sequence(T("async"), Comment("[no LineTerminator]"), NT("ArrowFormalParameters"))
    )


@rules.production("MethodDefinition")
def method_definition():
    return Diagram(
        Choice(0,
            Sequence(NT("ClassElementName"), T("("), NT("UniqueFormalParameters"), T(")"), T("{"), NT("FunctionBody"), T("}")),
            NT("GeneratorMethod"),
            NT("AsyncMethod"),
            NT("AsyncGeneratorMethod"),
            Sequence(T("get"), NT("ClassElementName"), T("("), T(")"), T("{"), NT("FunctionBody"), T("}")),
            Sequence(T("set"), NT("ClassElementName"), T("("), NT("PropertySetParameterList"), T(")"), T("{"), NT("FunctionBody"), T("}"))
        )
    )


@rules.production("PropertySetParameterList")
def property_set_parameter_list():
    return Diagram(NT("FormalParameter"))


@rules.production("GeneratorDeclaration")
def generator_declaration():
    return Diagram(
        Choice(0,
            Sequence(T("function"), T("*"), NT("BindingIdentifier"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("GeneratorBody"), T("}")),
            Sequence(T("function"), T("*"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("GeneratorBody"), T("}"))
        )
    )


@rules.production("GeneratorExpression")
def generator_expression():
    return Diagram(
        Sequence(T("function"), T("*"), Optional(NT("BindingIdentifier")), T("("), NT("FormalParameters"), T(")"), T("{"), NT("GeneratorBody"), T("}"))
    )


@rules.production("GeneratorMethod")
def generator_method():
    return Diagram(
        Sequence(T("*"), NT("ClassElementName"), T("("), NT("UniqueFormalParameters"), T(")"), T("{"), NT("GeneratorBody"), T("}"))
    )


@rules.production("GeneratorBody")
def generator_body():
    return Diagram(NT("FunctionBody"))


@rules.production("YieldExpression")
def yield_expression():
    return Diagram(
        Choice(0,
            T("yield"),
            Sequence(T("yield"), Comment("[no LineTerminator]"), NT("AssignmentExpression")),
            Sequence(T("yield"), Comment("[no LineTerminator]"), T("*"), NT("AssignmentExpression"))
        )
    )


@rules.production("AsyncGeneratorDeclaration")
def async_generator_declaration():
    return Diagram(
        Choice(0,
            Sequence(T("async"), Comment("[no LineTerminator]"), T("function"), T("*"), NT("BindingIdentifier"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("AsyncGeneratorBody"), T("}")),
            Sequence(T("async"), Comment("[no LineTerminator]"), T("function"), T("*"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("AsyncGeneratorBody"), T("}"))
        )
    )


@rules.production("AsyncGeneratorExpression")
def async_generator_expression():
    return Diagram(
        Sequence(T("async"), Comment("[no LineTerminator]"), T("function"), T("*"), Optional(NT("BindingIdentifier")), T("("), NT("FormalParameters"), T(")"), T("{"), NT("AsyncGeneratorBody"), T("}"))
    )


@rules.production("AsyncGeneratorMethod")
def async_generator_method():
    return Diagram(
        Sequence(T("async"), Comment("[no LineTerminator]"), T("*"), NT("ClassElementName"), T("("), NT("UniqueFormalParameters"), T(")"), T("{"), NT("AsyncGeneratorBody"), T("}"))
    )


@rules.production("AsyncGeneratorBody")
def async_generator_body():
    return Diagram(NT("FunctionBody"))


@rules.production("AsyncFunctionDeclaration")
def async_function_declaration():
    return Diagram(
        Choice(0,
            Sequence(T("async"), Comment("[no LineTerminator]"), T("function"), NT("BindingIdentifier"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("AsyncFunctionBody"), T("}")),
            Sequence(T("async"), Comment("[no LineTerminator]"), T("function"), T("("), NT("FormalParameters"), T(")"), T("{"), NT("AsyncFunctionBody"), T("}"))
        )
    )


@rules.production("AsyncFunctionExpression")
def async_function_expression():
    return Diagram(
        Sequence(T("async"), Comment("[no LineTerminator]"), T("function"), Optional(NT("BindingIdentifier")), T("("), NT("FormalParameters"), T(")"), T("{"), NT("AsyncFunctionBody"), T("}"))
    )


@rules.production("AsyncMethod")
def async_method():
    return Diagram(
        Sequence(T("async"), Comment("[no LineTerminator]"), NT("ClassElementName"), T("("), NT("UniqueFormalParameters"), T(")"), T("{"), NT("AsyncFunctionBody"), T("}"))
    )


@rules.production("AsyncFunctionBody")
def async_function_body():
    return Diagram(NT("FunctionBody"))


@rules.production("AwaitExpression")
def await_expression():
    return Diagram(
        Sequence(T("await"), NT("UnaryExpression"))
    )


@rules.production("ClassDeclaration")
def class_declaration():
    return Diagram(
        Choice(0,
            Sequence(T("class"), NT("BindingIdentifier"), NT("ClassTail")),
            Sequence(T("class"), NT("ClassTail"))
        )
    )


@rules.production("ClassExpression")
def class_expression():
    return Diagram(
        Sequence(T("class"), Optional(NT("BindingIdentifier")), NT("ClassTail"))
    )


@rules.production("ClassTail")
def class_tail():
    return Diagram(
        Sequence(Optional(NT("ClassHeritage")), T("{"), Optional(NT("ClassBody")), T("}"))
    )


@rules.production("ClassHeritage")
def class_heritage():
    return Diagram(
        Sequence(T("extends"), NT("LeftHandSideExpression"))
    )


@rules.production("ClassBody")
def class_body():
    return Diagram(NT("ClassElementList"))


@rules.production("ClassElementList")
def class_element_list():
    return Diagram(
        OneOrMore(NT("ClassElement"))
    )


@rules.production("ClassElement")
def class_element():
    return Diagram(
        Choice(0,
            NT("MethodDefinition"),
            Sequence(T("static"), NT("MethodDefinition")),
            Sequence(NT("FieldDefinition"), T(";")),
            Sequence(T("static"), NT("FieldDefinition"), T(";")),
            NT("ClassStaticBlock"),
            T(";")
        )
    )


@rules.production("FieldDefinition")
def field_definition():
    return Diagram(
        Sequence(NT("ClassElementName"), Optional(NT("Initializer")))
    )


@rules.production("ClassElementName")
def class_element_name():
    return Diagram(
        Choice(0,
            NT("PropertyName"),
            NT("PrivateIdentifier")
        )
    )


@rules.production("ClassStaticBlock")
def class_static_block():
    return Diagram(
        Sequence(T("static"), T("{"), NT("ClassStaticBlockBody"), T("}"))
    )


@rules.production("ClassStaticBlockBody")
def class_static_block_body():
    return Diagram(NT("ClassStaticBlockStatementList"))


@rules.production("ClassStaticBlockStatementList")
def class_static_block_statement_list():
    return Diagram(Optional(NT("StatementList")))


# A.5 Scripts and Modules


@rules.production("Script")
def script():
    return Diagram(Optional(NT("ScriptBody")))


@rules.production("ScriptBody")
def script_body():
    return Diagram(NT("StatementList"))


@rules.production("Module")
def module():
    return Diagram(Optional(NT("ModuleBody")))


@rules.production("ModuleBody")
def module_body():
    return Diagram(NT("ModuleItemList"))


@rules.production("ModuleItemList")
def module_item_list():
    return Diagram(
        OneOrMore(NT("ModuleItem"))
    )


@rules.production("ModuleItem")
def module_item():
    return Diagram(
        Choice(0,
            NT("ImportDeclaration"),
            NT("ExportDeclaration"),
            NT("StatementListItem")
        )
    )


@rules.production("ModuleExportName")
def module_export_name():
    return Diagram(
        Choice(0,
            NT("IdentifierName"),
            NT("StringLiteral")
        )
    )


@rules.production("ImportDeclaration")
def import_declaration():
    return Diagram(
        Choice(0,
            Sequence(T("import"), NT("ImportClause"), NT("FromClause"), Optional(NT("WithClause")), T(";")),
            Sequence(T("import"), NT("ModuleSpecifier"), Optional(NT("WithClause")), T(";"))
        )
    )


@rules.production("ImportClause")
def import_clause():
    return Diagram(
        Choice(0,
            NT("ImportedDefaultBinding"),
            NT("NameSpaceImport"),
            NT("NamedImports"),
            Sequence(NT("ImportedDefaultBinding"), T(","), NT("NameSpaceImport")),
            Sequence(NT("ImportedDefaultBinding"), T(","), NT("NamedImports"))
        )
    )


@rules.production("ImportedDefaultBinding")
def imported_default_binding():
    return Diagram(NT("ImportedBinding"))


@rules.production("NameSpaceImport")
def name_space_import():
    return Diagram(
        Sequence(T("*"), T("as"), NT("ImportedBinding"))
    )


@rules.production("NamedImports")
def named_imports():
    return Diagram(
        Choice(0,
            Sequence(T("{"), T("}")),
            Sequence(T("{"), NT("ImportsList"), T("}")),
            Sequence(T("{"), NT("ImportsList"), T(","), T("}"))
        )
    )


@rules.production("FromClause")
def from_clause():
    return Diagram(
        Sequence(T("from"), NT("ModuleSpecifier"))
    )


@rules.production("ImportsList")
def imports_list():
    return Diagram(
        Sequence(
            NT("ImportSpecifier"),
            ZeroOrMore(Sequence(T(","), NT("ImportSpecifier")))
        )
    )


@rules.production("ImportSpecifier")
def import_specifier():
    return Diagram(
        Choice(0,
            NT("ImportedBinding"),
            Sequence(NT("ModuleExportName"), T("as"), NT("ImportedBinding"))
        )
    )


@rules.production("ModuleSpecifier")
def module_specifier():
    return Diagram(NT("StringLiteral"))


@rules.production("ImportedBinding")
def imported_binding():
    return Diagram(NT("BindingIdentifier"))


@rules.production("WithClause")
def with_clause():
    return Diagram(
        Choice(0,
            Sequence(T("with"), T("{"), T("}")),
            Sequence(T("with"), T("{"), NT("WithEntries"), Optional(T(",")), T("}"))
        )
    )


@rules.production("WithEntries")
def with_entries():
    return Diagram(
        Sequence(
            NT("AttributeKey"), T(":"), NT("StringLiteral"),
            ZeroOrMore(Sequence(T(","), NT("AttributeKey"), T(":"), NT("StringLiteral")))
        )
    )


@rules.production("AttributeKey")
def attribute_key():
    return Diagram(
        Choice(0,
            NT("IdentifierName"),
            NT("StringLiteral")
        )
    )


@rules.production("ExportDeclaration")
def export_declaration():
    return Diagram(
        Choice(0,
            Sequence(T("export"), NT("ExportFromClause"), NT("FromClause"), Optional(NT("WithClause")), T(";")),
            Sequence(T("export"), NT("NamedExports"), T(";")),
            Sequence(T("export"), NT("VariableStatement")),
            Sequence(T("export"), NT("Declaration")),
            Sequence(T("export"), T("default"), NT("HoistableDeclaration")),
            Sequence(T("export"), T("default"), NT("ClassDeclaration")),
            Sequence(T("export"), T("default"), Comment("[lookahead ∉ {function, async function, class}]"), NT("AssignmentExpression"), T(";"))
        )
    )


@rules.production("ExportFromClause")
def export_from_clause():
    return Diagram(
        Choice(0,
            T("*"),
            Sequence(T("*"), T("as"), NT("ModuleExportName")),
            NT("NamedExports")
        )
    )


@rules.production("NamedExports")
def named_exports():
    return Diagram(
        Choice(0,
            Sequence(T("{"), T("}")),
            Sequence(T("{"), NT("ExportsList"), T("}")),
            Sequence(T("{"), NT("ExportsList"), T(","), T("}"))
        )
    )


@rules.production("ExportsList")
def exports_list():
    return Diagram(
        Sequence(
            NT("ExportSpecifier"),
            ZeroOrMore(Sequence(T(","), NT("ExportSpecifier")))
        )
    )


@rules.production("ExportSpecifier")
def export_specifier():
    return Diagram(
        Choice(0,
            NT("ModuleExportName"),
            Sequence(NT("ModuleExportName"), T("as"), NT("ModuleExportName"))
        )
    )


rules.freeze()

__all__ = ("rules",)
