"""Parsing and formatting of ``HTTP-date`` values.

:rfc:`2616` section 3.3.1 lists three formats a recipient must accept::

    Sun, 06 Nov 1994 08:49:37 GMT  ; RFC 822, updated by RFC 1123
    Sunday, 06-Nov-94 08:49:37 GMT ; RFC 850, obsoleted by RFC 1036
    Sun Nov  6 08:49:37 1994       ; ANSI C's asctime() format

The RFC 822 form is also accepted with a numeric ``+HHMM`` offset in place of
the zone name. Only the first form is ever produced.

Names are matched against fixed English tables rather than through
:func:`time.strptime`, so the result does not depend on the process locale.
"""
import re
import datetime

UTC = datetime.timezone.utc

# two-digit RFC 850 years below the pivot belong to the 2000s, the rest to
# the 1900s; the same window POSIX strptime applies to %y
RFC850_YEAR_PIVOT = 69

def join(seq, field=' '):
    return field.join(seq)

def group(s):
    return '(' + s + ')'

short_days = ['mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun']
long_days = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday',
             'saturday', 'sunday']
months = ['jan', 'feb', 'mar', 'apr', 'may', 'jun',
          'jul', 'aug', 'sep', 'oct', 'nov', 'dec']

monmap = dict((name, i + 1) for i, name in enumerate(months))

short_day_reg = group(join(short_days, '|'))
long_day_reg = group(join(long_days, '|'))
months_reg = group(join(months, '|'))
hms_reg = join(3 * [group('[0-9][0-9]')], ':')
zone_reg = '[a-z]+'

# ASCII keeps case folding from matching e.g. U+017F against 's'
FLAGS = re.IGNORECASE | re.ASCII

# Sun, 06 Nov 1994 08:49:37 GMT
rfc1123_reg = re.compile(join([
        short_day_reg + ',',
        group('[0-9][0-9]?'),
        months_reg,
        group('[0-9]{4}'),
        hms_reg,
        zone_reg,
    ]), FLAGS)

# Sun, 06 Nov 1994 08:49:37 +0000
rfc1123_offset_reg = re.compile(join([
        short_day_reg + ',',
        group('[0-9][0-9]?'),
        months_reg,
        group('[0-9]{4}'),
        hms_reg,
        group('[-+]') + group('[0-9][0-9]') + group('[0-5][0-9]'),
    ]), FLAGS)

# Sunday, 06-Nov-94 08:49:37 GMT
rfc850_reg = re.compile(join([
        long_day_reg + ',',
        join([group('[0-9][0-9]?'), months_reg, group('[0-9][0-9]')], '-'),
        hms_reg,
        zone_reg,
    ]), FLAGS)

# Sun Nov  6 08:49:37 1994
asctime_reg = re.compile(join([
        short_day_reg,
        months_reg,
        group('[0-9 ][0-9]'),
        hms_reg,
        group('[0-9]{4}'),
    ]), FLAGS)


def _build(year, month, day, hour, minute, second, offset=None):
    tzinfo = UTC if offset is None else datetime.timezone(offset)
    dt = datetime.datetime(year, month, day, hour, minute, second,
                           tzinfo=tzinfo)
    return dt.astimezone(UTC)

def unpack_rfc1123(m):
    g = m.group
    i = int
    return _build(i(g(4)), monmap[g(3).lower()], i(g(2)),
                  i(g(5)), i(g(6)), i(g(7)))

def unpack_rfc1123_offset(m):
    g = m.group
    i = int
    offset = datetime.timedelta(hours=i(g(9)), minutes=i(g(10)))
    if g(8) == '-':
        offset = -offset
    return _build(i(g(4)), monmap[g(3).lower()], i(g(2)),
                  i(g(5)), i(g(6)), i(g(7)), offset)

def unpack_rfc850(m):
    g = m.group
    i = int
    year = i(g(4))
    year += 2000 if year < RFC850_YEAR_PIVOT else 1900
    return _build(year, monmap[g(3).lower()], i(g(2)),
                  i(g(5)), i(g(6)), i(g(7)))

def unpack_asctime(m):
    g = m.group
    i = int
    return _build(i(g(7)), monmap[g(2).lower()], i(g(3)),
                  i(g(4)), i(g(5)), i(g(6)))

# The order matters: the first grammar that matches the whole value wins.
GRAMMARS = (
    (rfc1123_reg, unpack_rfc1123),
    (rfc1123_offset_reg, unpack_rfc1123_offset),
    (rfc850_reg, unpack_rfc850),
    (asctime_reg, unpack_asctime),
)

def parse_http_date(d):
    """Parse ``d`` (a :class:`str`) in any of the accepted formats.

    Returns an aware :class:`datetime.datetime` in UTC, or ``None`` when no
    format matches or the matched fields are not a real calendar date.

    Zone names other than ``GMT`` are accepted but not interpreted; the time
    is read as UTC.
    """
    for reg, unpack in GRAMMARS:
        m = reg.fullmatch(d)
        if m is None:
            continue
        try:
            return unpack(m)
        except (ValueError, OverflowError):
            # e.g. 31 Feb, or hour 24
            continue
    return None

def format_http_date(when):
    """Format a :class:`datetime.datetime` as an RFC 1123 date in GMT.

    Naive datetimes are taken to be UTC already. Sub-second precision is
    dropped.
    """
    if when.tzinfo is not None:
        when = when.astimezone(UTC)
    return '%s, %02d %s %04d %02d:%02d:%02d GMT' % (
            short_days[when.weekday()].capitalize(),
            when.day,
            months[when.month - 1].capitalize(),
            when.year,
            when.hour, when.minute, when.second,
        )
