"""Core schema scalar constructors.

Every constructor takes the raw scalar text and the match object produced
by the builder's implicit resolver. The match is None when the scalar
carried an explicit tag; constructors that need captures then re-match
their own grammar, and fail with InvalidScalarFormatError if it does not
apply.
"""

import base64
import binascii
import datetime
import re

from .error import InvalidScalarFormatError


NULL_REGEXP = re.compile(r'^(?:~|null|Null|NULL|)$')

TRUE_REGEXP = re.compile(r'^(?:yes|Yes|YES|true|True|TRUE|on|On|ON)$')

FALSE_REGEXP = re.compile(r'^(?:no|No|NO|false|False|FALSE|off|Off|OFF)$')

INT_REGEXP = re.compile(r'''^(?:
     [-+]?0b_*[0-1][0-1_]*
    |(?P<octal>[-+]?0[0-7_]+)
    |[-+]?(?:0|[1-9][0-9_]*)
    |[-+]?0x_*[0-9a-fA-F][0-9a-fA-F_]*
    |(?P<sexagesimal>[-+]?[1-9][0-9_]*)(?P<groups>(?::[0-5]?[0-9])+)
    )$''', re.X)

FLOAT_REGEXP = re.compile(r'''^(?:
     [-+]?(?:[0-9][0-9_]*\.[0-9_]*|\.[0-9][0-9_]*)(?:[eE][-+][0-9]+)?
    |(?P<sexagesimal>[-+]?[0-9][0-9_]*)(?P<groups>(?::[0-5]?[0-9])+)(?P<fraction>\.[0-9_]*)
    |(?P<inf>[-+]?\.(?:inf|Inf|INF))
    |(?P<nan>\.(?:nan|NaN|NAN))
    )$''', re.X)

TIMESTAMP_REGEXP = re.compile(r'''^
    (?P<year>[-+]?[0-9][0-9][0-9][0-9])
    -(?P<month>[0-9][0-9]?)
    -(?P<day>[0-9][0-9]?)
    (?:(?:[Tt]|[ \t]+)
    (?P<hour>[0-9][0-9]?)
    :(?P<minute>[0-9][0-9])
    :(?P<second>[0-9][0-9])
    (?:\.(?P<fraction>[0-9]*))?
    (?:[ \t]*(?:Z|(?P<tz_hour>[-+][0-9][0-9]?)(?::(?P<tz_minute>[0-9][0-9]))?))?)?
    $''', re.X)

_BOOL_VALUES = {
    'y': True, 'Y': True,
    'yes': True, 'Yes': True, 'YES': True,
    'true': True, 'True': True, 'TRUE': True,
    'on': True, 'On': True, 'ON': True,
    'n': False, 'N': False,
    'no': False, 'No': False, 'NO': False,
    'false': False, 'False': False, 'FALSE': False,
    'off': False, 'Off': False, 'OFF': False,
}


def _remove_separators(value):
    return value.replace('_', '')


def _match_or_fail(regexp, value, match, kind):
    if match is None:
        match = regexp.match(value)
        if match is None:
            raise InvalidScalarFormatError(
                None, None, "wrong %s format %r" % (kind, value))
    return match


def _sexagesimal(head, groups):
    """Horner evaluation in base 60.

    Only the first group carries the sign: -1:10 is -1 * 60 + 10.
    """
    result = int(_remove_separators(head))
    for group in groups.split(':')[1:]:
        result = result * 60 + int(group)
    return result


def construct_yaml_null(value, match):
    return None


def construct_yaml_bool(value, match):
    try:
        return _BOOL_VALUES[value]
    except KeyError:
        raise InvalidScalarFormatError(
            None, None, "unknown bool value %r" % value) from None


def construct_yaml_true(value, match):
    return True


def construct_yaml_false(value, match):
    return False


def construct_yaml_int(value, match):
    match = _match_or_fail(INT_REGEXP, value, match, 'int')
    try:
        if match.group('octal') is not None:
            return int(_remove_separators(match.group('octal')), 8)
        if match.group('sexagesimal') is not None:
            return _sexagesimal(match.group('sexagesimal'), match.group('groups'))
        return int(_remove_separators(value), 0)
    except ValueError as exc:
        raise InvalidScalarFormatError(
            None, None, "wrong int format %r" % value) from exc


def construct_yaml_float(value, match):
    if match is None:
        match = FLOAT_REGEXP.match(value)
        if match is None:
            try:
                return float(_remove_separators(value))
            except ValueError as exc:
                raise InvalidScalarFormatError(
                    None, None, "wrong float format %r" % value) from exc

    if match.group('sexagesimal') is not None:
        result = float(_sexagesimal(match.group('sexagesimal'), match.group('groups')))
        fraction = _remove_separators(match.group('fraction'))
        if fraction != '.':
            result += float(fraction)
        return result
    if match.group('inf') is not None:
        return float('-inf') if value[0] == '-' else float('inf')
    if match.group('nan') is not None:
        return float('nan')
    return float(_remove_separators(value))


def construct_yaml_timestamp(value, match):
    match = _match_or_fail(TIMESTAMP_REGEXP, value, match, 'timestamp')
    values = match.groupdict()
    try:
        date = datetime.date(int(values['year']), int(values['month']),
                             int(values['day']))
        if values['hour'] is None:
            return date
        fraction = 0
        if values['fraction']:
            fraction = int(values['fraction'][:6].ljust(6, '0'))
        stamp = datetime.datetime(date.year, date.month, date.day,
                                  int(values['hour']), int(values['minute']),
                                  int(values['second']), fraction)
        if values['tz_hour']:
            tz_hour = int(values['tz_hour'])
            tz_minute = int(values['tz_minute'] or 0)
            if values['tz_hour'].startswith('-'):
                tz_minute = -tz_minute
            stamp -= datetime.timedelta(hours=tz_hour, minutes=tz_minute)
        return stamp
    except (ValueError, OverflowError) as exc:
        raise InvalidScalarFormatError(
            None, None, "wrong timestamp value %r: %s" % (value, exc)) from exc


def construct_yaml_str(value, match):
    return value


def construct_yaml_binary(value, match):
    data = ''.join(value.split())
    try:
        return base64.b64decode(data.encode('ascii'), validate=True)
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise InvalidScalarFormatError(
            None, None, "failed to decode base64 data: %s" % exc) from exc
