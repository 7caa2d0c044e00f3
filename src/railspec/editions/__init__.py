# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Grammar editions shipped with railspec.

Each subpackage builds one `Grammar` and exposes it as `GRAMMAR`. Import them
through `railspec.grammar.get_grammar` rather than directly, so only the
editions actually used get built.
"""
