#!/usr/bin/env python3
"""
Naming checks shared by variable and type rules.
"""

import re
from typing import Optional

from ..models import Binding, RawFinding, RuleId, Severity

MIN_NAME_LENGTH_WARNING = 3
MIN_NAME_LENGTH_ERROR = 2
MAX_NAME_LENGTH_WARNING = 40
MAX_NAME_LENGTH_ERROR = 60

# Leading underscore is stripped before these are applied
CONSTANT_NAME_PATTERN = re.compile(r'^(?:[a-z][A-Za-z0-9]*|[A-Z][A-Z0-9]*)$')
VARIABLE_NAME_PATTERN = re.compile(r'^[a-z][A-Za-z0-9]*$')
TYPE_NAME_PATTERN = re.compile(r'^[A-Z][A-Za-z0-9]{2,39}$')

TYPE_NAME_MESSAGE = ('Type names should contain only alphanumeric characters, '
                     'begin with an uppercase letter and span between 3 and 40 '
                     'characters in length.')


def check_binding_name(binding: Binding) -> Optional[RawFinding]:
    """Test a binding name, returning a finding that explains what is wrong."""
    name = binding.name
    severity = Severity.WARNING
    message = None

    if len(name) < MIN_NAME_LENGTH_WARNING:
        if len(name) < MIN_NAME_LENGTH_ERROR:
            severity = Severity.ERROR
        message = 'Variable names should be at least three characters long.'
    elif len(name) > MAX_NAME_LENGTH_WARNING:
        if len(name) > MAX_NAME_LENGTH_ERROR:
            severity = Severity.ERROR
        message = 'Variable names should not be more than 40 characters long.'
    elif binding.constant_eligible:
        if not CONSTANT_NAME_PATTERN.match(name):
            message = ('Variable names should only contain alphanumeric characters. '
                       'Static constant names should either start with a lowercase letter '
                       'or only contain capital letters.')
    elif not VARIABLE_NAME_PATTERN.match(name):
        message = ('Variable names should only contain alphanumeric characters '
                   'and start with a lowercase letter.')

    if message is None:
        return None

    return RawFinding(
        matched_text=name,
        start_offset=binding.start_offset,
        severity=severity,
        message=message,
        rule_id=RuleId.VARIABLE_NAME,
    )


def is_valid_type_name(name: str) -> bool:
    return bool(TYPE_NAME_PATTERN.match(name))
