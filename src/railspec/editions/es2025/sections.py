# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Sections of the ECMAScript 2025 grammar, following the subsections of Annex A."""

from __future__ import annotations

from typing import Final

from railspec.grammar.sections import SectionId, SectionIndex


SECTION_ORDER: Final[tuple[SectionId, ...]] = (
    "lexical",
    "expressions",
    "statements",
    "functions",
    "modules",
)

SECTION_TITLES: Final[dict[SectionId, str]] = {
    "lexical": "A.1 Lexical Grammar",
    "expressions": "A.2 Expressions",
    "statements": "A.3 Statements",
    "functions": "A.4 Functions and Classes",
    "modules": "A.5 Scripts and Modules",
}

SECTION_RULES: Final[dict[SectionId, tuple[str, ...]]] = {
    "lexical": (
        "SourceCharacter",
        "InputElementDiv",
        "InputElementRegExp",
        "InputElementRegExpOrTemplateTail",
        "InputElementTemplateTail",
        "WhiteSpace",
        "LineTerminator",
        "LineTerminatorSequence",
        "Comment",
        "MultiLineComment",
        "SingleLineComment",
        "HashbangComment",
        "CommonToken",
        "PrivateIdentifier",
        "IdentifierName",
        "IdentifierStart",
        "IdentifierPart",
        "IdentifierStartChar",
        "IdentifierPartChar",
        "UnicodeIDStart",
        "UnicodeIDContinue",
        "ReservedWord",
        "Punctuator",
        "OptionalChainingPunctuator",
        "DivPunctuator",
        "RightBracePunctuator",
        "NullLiteral",
        "BooleanLiteral",
        "NumericLiteral",
        "DecimalLiteral",
        "DecimalIntegerLiteral",
        "DecimalDigits",
        "DecimalDigit",
        "NonZeroDigit",
        "NumericLiteralSeparator",
        "ExponentPart",
        "ExponentIndicator",
        "SignedInteger",
        "BigIntLiteralSuffix",
        "DecimalBigIntegerLiteral",
        "NonDecimalIntegerLiteral",
        "BinaryIntegerLiteral",
        "BinaryDigits",
        "BinaryDigit",
        "OctalIntegerLiteral",
        "OctalDigits",
        "OctalDigit",
        "HexIntegerLiteral",
        "HexDigits",
        "HexDigit",
        "LegacyOctalIntegerLiteral",
        "StringLiteral",
        "DoubleStringCharacters",
        "SingleStringCharacters",
        "DoubleStringCharacter",
        "SingleStringCharacter",
        "LineContinuation",
        "EscapeSequence",
        "CharacterEscapeSequence",
        "SingleEscapeCharacter",
        "HexEscapeSequence",
        "UnicodeEscapeSequence",
        "Hex4Digits",
        "RegularExpressionLiteral",
        "RegularExpressionBody",
        "RegularExpressionChars",
        "RegularExpressionFlags",
        "Template",
        "NoSubstitutionTemplate",
        "TemplateHead",
        "TemplateSubstitutionTail",
        "TemplateMiddle",
        "TemplateTail",
        "TemplateCharacters",
    ),
    "expressions": (
        "IdentifierReference",
        "BindingIdentifier",
        "LabelIdentifier",
        "Identifier",
        "PrimaryExpression",
        "CoverParenthesizedExpressionAndArrowParameterList",
        "ParenthesizedExpression",
        "Literal",
        "ArrayLiteral",
        "ElementList",
        "Elision",
        "SpreadElement",
        "ObjectLiteral",
        "PropertyDefinitionList",
        "PropertyDefinition",
        "PropertyName",
        "LiteralPropertyName",
        "ComputedPropertyName",
        "CoverInitializedName",
        "Initializer",
        "TemplateLiteral",
        "SubstitutionTemplate",
        "TemplateSpans",
        "TemplateMiddleList",
        "MemberExpression",
        "SuperProperty",
        "MetaProperty",
        "NewTarget",
        "ImportMeta",
        "NewExpression",
        "CallExpression",
        "SuperCall",
        "ImportCall",
        "Arguments",
        "ArgumentList",
        "OptionalExpression",
        "OptionalChain",
        "LeftHandSideExpression",
        "UpdateExpression",
        "UnaryExpression",
        "ExponentiationExpression",
        "MultiplicativeExpression",
        "MultiplicativeOperator",
        "AdditiveExpression",
        "ShiftExpression",
        "RelationalExpression",
        "EqualityExpression",
        "BitwiseANDExpression",
        "BitwiseXORExpression",
        "BitwiseORExpression",
        "LogicalANDExpression",
        "LogicalORExpression",
        "CoalesceExpression",
        "CoalesceExpressionHead",
        "ShortCircuitExpression",
        "ConditionalExpression",
        "AssignmentExpression",
        "AssignmentOperator",
        "AssignmentPattern",
        "ObjectAssignmentPattern",
        "ArrayAssignmentPattern",
        "Expression",
    ),
    "statements": (
        "Statement",
        "Declaration",
        "HoistableDeclaration",
        "BreakableStatement",
        "BlockStatement",
        "Block",
        "StatementList",
        "StatementListItem",
        "LexicalDeclaration",
        "LetOrConst",
        "BindingList",
        "LexicalBinding",
        "VariableStatement",
        "VariableDeclarationList",
        "VariableDeclaration",
        "BindingPattern",
        "ObjectBindingPattern",
        "ArrayBindingPattern",
        "BindingRestProperty",
        "BindingPropertyList",
        "BindingElementList",
        "BindingElisionElement",
        "BindingProperty",
        "BindingElement",
        "SingleNameBinding",
        "BindingRestElement",
        "EmptyStatement",
        "ExpressionStatement",
        "IfStatement",
        "IterationStatement",
        "DoWhileStatement",
        "WhileStatement",
        "ForStatement",
        "ForInOfStatement",
        "ForDeclaration",
        "ForBinding",
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
        "LabelledItem",
        "ThrowStatement",
        "TryStatement",
        "Catch",
        "Finally",
        "CatchParameter",
        "DebuggerStatement",
    ),
    "functions": (
        "UniqueFormalParameters",
        "FormalParameters",
        "FormalParameterList",
        "FunctionRestParameter",
        "FormalParameter",
        "FunctionDeclaration",
        "FunctionExpression",
        "FunctionBody",
        "FunctionStatementList",
        "ArrowFunction",
        "ArrowParameters",
        "ConciseBody",
        "ExpressionBody",
        "ArrowFormalParameters",
        "AsyncArrowFunction",
        "AsyncConciseBody",
        "AsyncArrowBindingIdentifier",
        "CoverCallExpressionAndAsyncArrowHead",
        "AsyncArrowHead",
        "MethodDefinition",
        "PropertySetParameterList",
        "GeneratorDeclaration",
        "GeneratorExpression",
        "GeneratorMethod",
        "GeneratorBody",
        "YieldExpression",
        "AsyncGeneratorDeclaration",
        "AsyncGeneratorExpression",
        "AsyncGeneratorMethod",
        "AsyncGeneratorBody",
        "AsyncFunctionDeclaration",
        "AsyncFunctionExpression",
        "AsyncMethod",
        "AsyncFunctionBody",
        "AwaitExpression",
        "ClassDeclaration",
        "ClassExpression",
        "ClassTail",
        "ClassHeritage",
        "ClassBody",
        "ClassElementList",
        "ClassElement",
        "FieldDefinition",
        "ClassElementName",
        "ClassStaticBlock",
        "ClassStaticBlockBody",
        "ClassStaticBlockStatementList",
    ),
    "modules": (
        "Script",
        "ScriptBody",
        "Module",
        "ModuleBody",
        "ModuleItemList",
        "ModuleItem",
        "ModuleExportName",
        "ImportDeclaration",
        "ImportClause",
        "ImportedDefaultBinding",
        "NameSpaceImport",
        "NamedImports",
        "FromClause",
        "ImportsList",
        "ImportSpecifier",
        "ModuleSpecifier",
        "ImportedBinding",
        "WithClause",
        "WithEntries",
        "AttributeKey",
        "ExportDeclaration",
        "ExportFromClause",
        "NamedExports",
        "ExportsList",
        "ExportSpecifier",
    ),
}

sections = SectionIndex.from_tables(SECTION_ORDER, SECTION_TITLES, SECTION_RULES)

__all__ = ("SECTION_ORDER", "SECTION_RULES", "SECTION_TITLES", "sections")
