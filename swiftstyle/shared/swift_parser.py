#!/usr/bin/env python3
"""
Structural extraction for Swift source text.

Recovers function and type declarations by brace-depth scanning, derives
parameter lists with paren-depth counting, and collects variable, constant
and parameter bindings. No tokenizer or syntax tree is built: every scan is
a linear forward sweep with a depth counter.
"""

import re
from typing import List, Optional, Tuple

from ..models import AliasDeclaration, Binding, FunctionDeclaration, TypeDeclaration

FUNCTION_KEYWORD = 'func'
TYPE_KEYWORDS = ('enum', 'struct', 'class')

# Words that may follow a container keyword without naming a type,
# e.g. `class func make()` or `class var shared`.
NON_NAME_WORDS = ('func', 'var', 'let', 'subscript', 'init')


class SwiftParser:
    """
    Brace-balance parser for Swift source text.

    Extracts functions, types, type aliases and bindings with enough
    precision for style rules, silently dropping anything that does not
    balance.
    """

    def __init__(self):
        # A run of text up to and including the next brace of either kind
        self.brace_run_pattern = re.compile(r'[^}]*?\{|[^{]*?\}')

        # func name() with an empty parameter list
        self.zero_param_pattern = re.compile(r'^func\s+\w+\s*\(\s*\)')
        # Everything between the function name and its opening brace
        self.signature_pattern = re.compile(r'^func\s+\w+(.*?)\{', re.DOTALL)

        # [static] var|let name  or  [static] var|let (a, b, c)
        self.binding_pattern = re.compile(
            r'(?:\b(static)\s+)?\b(var|let)\s+(?:(\w+)|\((\w+(?:\s*,\s*\w+)*)\))'
        )
        self.identifier_pattern = re.compile(r'\w+')
        self.typealias_pattern = re.compile(r'\btypealias\s+(\w+)')

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def extract_bodies(self, text: str, keyword: str) -> List[Tuple[str, int, str, int]]:
        """
        Extract every balanced body introduced by `keyword name`.

        Returns (name, start_offset, body, max_depth) tuples in discovery
        order. A candidate whose braces never return to depth 0 is dropped.
        """
        declaration_pattern = re.compile(
            r'\b' + keyword + r'\s+(?!(?:' + '|'.join(NON_NAME_WORDS) + r')\b)(\w+)'
        )

        bodies = []
        for match in declaration_pattern.finditer(text):
            depth = 0
            max_depth = 0
            chunks = []

            for run in self.brace_run_pattern.finditer(text, match.start()):
                chunk = run.group(0)
                depth += 1 if chunk.endswith('{') else -1
                chunks.append(chunk)
                max_depth = max(max_depth, depth)

                if depth <= 0:
                    # Either the body is complete or it is malformed
                    break

            if depth == 0 and chunks:
                bodies.append((match.group(1), match.start(), ''.join(chunks), max_depth))

        return bodies

    def extract_functions(self, text: str) -> List[FunctionDeclaration]:
        """Extract all balanced function declarations with their parameters."""
        functions = []
        for name, start_offset, body, max_depth in self.extract_bodies(text, FUNCTION_KEYWORD):
            param_count, params, params_offset = self.extract_parameters(body)
            functions.append(FunctionDeclaration(
                name=name,
                start_offset=start_offset,
                body=body,
                max_depth=max_depth,
                param_count=param_count,
                params=params,
                params_offset=start_offset + params_offset if params is not None else None,
            ))
        return functions

    def extract_types(self, text: str) -> List[TypeDeclaration]:
        """Extract enums, structs and classes, each keyword scanned independently."""
        types = []
        for keyword in TYPE_KEYWORDS:
            for name, start_offset, body, max_depth in self.extract_bodies(text, keyword):
                types.append(TypeDeclaration(
                    kind=keyword,
                    name=name,
                    start_offset=start_offset,
                    body=body,
                    max_depth=max_depth,
                ))
        return types

    def extract_typealiases(self, text: str) -> List[AliasDeclaration]:
        """Extract `typealias Name` declarations."""
        return [
            AliasDeclaration(name=match.group(1), start_offset=match.start(), text=match.group(0))
            for match in self.typealias_pattern.finditer(text)
        ]

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def extract_parameters(self, body: str) -> Tuple[int, Optional[str], Optional[int]]:
        """
        Count the parameters of a function body.

        Returns (param_count, params_text, params_offset) where the offset is
        relative to the start of the body. Commas only separate parameters
        at paren depth 1, so function-typed parameters count once.
        """
        if self.zero_param_pattern.match(body):
            return 0, None, None

        match = self.signature_pattern.match(body)
        if not match:
            return 0, None, None

        signature = match.group(1)
        paren_start = signature.find('(')
        if paren_start == -1:
            return 0, None, None

        depth = 0
        param_count = 1
        paren_end = len(signature)
        for i in range(paren_start, len(signature)):
            char = signature[i]
            if char == '(':
                depth += 1
            elif char == ')':
                depth -= 1
            elif char == ',' and depth == 1:
                param_count += 1

            if depth == 0:
                paren_end = i
                break

        params = signature[paren_start + 1:paren_end]
        if not params.strip():
            # Generic functions such as func make<T>() skip the zero-parameter shape
            return 0, None, None

        return param_count, params, match.start(1) + paren_start + 1

    def split_parameters(self, params: str) -> List[Tuple[str, int]]:
        """Split a parameter list on top-level commas into (segment, offset) pairs."""
        segments = []
        depth = 0
        segment_start = 0
        for i, char in enumerate(params):
            if char in '([':
                depth += 1
            elif char in ')]':
                depth -= 1
            elif char == ',' and depth == 0:
                segments.append((params[segment_start:i], segment_start))
                segment_start = i + 1
        segments.append((params[segment_start:], segment_start))
        return segments

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    def explode_tuple(self, tuple_text: str, base_offset: int, constant_eligible: bool) -> List[Binding]:
        """Turn `a, b, c` (or a single name) into Bindings at their true offsets."""
        bindings = []
        for match in self.identifier_pattern.finditer(tuple_text):
            name = match.group(0)
            offset = base_offset + match.start()

            # Ignore one leading underscore
            if name.startswith('_'):
                name = name[1:]
                offset += 1

            # A bare `_` is a wildcard, not a name
            if not name:
                continue

            bindings.append(Binding(name=name, start_offset=offset, constant_eligible=constant_eligible))
        return bindings

    def extract_bindings(self, text: str) -> List[Binding]:
        """Extract every var/let binding in the text, exploding tuples."""
        bindings = []
        for match in self.binding_pattern.finditer(text):
            # Static immutable bindings may use an all-caps name
            constant_eligible = bool(match.group(1)) and match.group(2) == 'let'

            group = 4 if match.group(4) is not None else 3
            bindings.extend(self.explode_tuple(match.group(group), match.start(group), constant_eligible))
        return bindings

    def extract_parameter_bindings(self, function: FunctionDeclaration) -> List[Binding]:
        """Extract the argument labels and parameter names of a function."""
        if function.params is None or function.params_offset is None:
            return []

        bindings = []
        for segment, segment_offset in self.split_parameters(function.params):
            # Names precede the type annotation; a segment without one is the
            # tail of a generic argument list such as Dictionary<K, V>
            if ':' not in segment:
                continue
            labels = segment.split(':', 1)[0]
            bindings.extend(self.explode_tuple(labels, function.params_offset + segment_offset, False))
        return bindings
