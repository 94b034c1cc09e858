import io
import re
import logging
import datetime
import types
import collections

import httpheaders._httpdate as _httpdate
import httpheaders.exc as exc
from httpheaders.const import PAST

log = logging.getLogger(__name__)

#======================================================================
# Helpers
#======================================================================
unsigned_int_reg = re.compile('[0-9]+')
signed_int_reg = re.compile('-?[0-9]+')

def require_single_field(raw):
    """Return the only field in ``raw``, or ``None`` if there are zero or
    several. Header types in this module never accept multi-valued input."""
    raw = tuple(raw)
    if len(raw) != 1:
        return None
    return raw[0]

def decode_text(value):
    """UTF-8 decode a raw field; ``None`` if it is not valid UTF-8."""
    if isinstance(value, str):
        return value
    try:
        return bytes(value).decode('utf-8')
    except UnicodeDecodeError:
        return None

def fmt_header(field, value):
    """Render ``value`` with the codec of ``field`` and return the bytes."""
    buf = io.BytesIO()
    field.fmt_header(value, buf)
    return buf.getvalue()

#======================================================================
# Values
#======================================================================
class _Variant(object):
    """Mixin for one case of a tagged union. Cases never compare equal to
    another case, or to a plain tuple, even when they hold the same data."""
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__

class ExpiresDate(_Variant, collections.namedtuple('ExpiresDate', 'date')):
    """A valid :mailheader:`Expires` date. The other case is
    :data:`httpheaders.const.PAST`."""
    __slots__ = ()

class DateRA(_Variant, collections.namedtuple('DateRA', 'date')):
    """A :mailheader:`Retry-After` given as an HTTP-date."""
    __slots__ = ()

class DeltaRA(_Variant, collections.namedtuple('DeltaRA', 'seconds')):
    """A :mailheader:`Retry-After` given as delta-seconds."""
    __slots__ = ()

#======================================================================
# Base Class
#======================================================================
class HeaderField(object):
    """A codec for the value of one header, and the identity of that header.

    ``header`` is the canonical lowercase name. Instances hold no state, so
    the module level instances below are shared freely.

    An instance placed on a :class:`httpheaders.Headers` subclass also acts
    as a data descriptor: reading the attribute decodes, assigning encodes,
    and deleting (or assigning ``None``) removes the header.
    """
    __slots__ = ()

    header = None

    def value_decode(self, value):
        """Template method used by :meth:`parse_header` to convert a single
        raw field to a python object, or ``None`` if it is malformed."""
        raise NotImplementedError

    def value_encode(self, value):
        """Template method used by :meth:`fmt_header` to convert a python
        object to its canonical wire bytes."""
        raise NotImplementedError

    def parse_header(self, raw):
        raw = tuple(raw)
        field = require_single_field(raw)
        if field is None:
            log.debug('%s: expected one field, got %i', self.header, len(raw))
            return None
        return self.value_decode(field)

    def fmt_header(self, value, sink):
        data = self.value_encode(value)
        try:
            sink.write(data)
        except OSError as err:
            raise exc.SinkWriteError(
                    'could not write %s header: %s' % (self.header, err)
                ) from err

    def __get__(self, instance, instance_type):
        if instance is None:
            return self
        return instance.get(self)

    def __set__(self, instance, value):
        if value is None:
            self.__delete__(instance)
        else:
            instance.set(self, value)

    def __delete__(self, instance):
        instance.remove(self)

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.header)

#----------------------------------------------------------------------
class IntegerHeaderField(HeaderField):
    """Inherits from :class:`HeaderField`.

    Understands HTTP headers with ``1*DIGIT`` values. Values must fit in a
    signed integer of ``bits + 1`` bits; ``signed`` also allows a leading
    ``-``."""
    __slots__ = ()

    signed = False
    bits = 63

    def value_range(self):
        high = 2 ** self.bits - 1
        low = -(2 ** self.bits) if self.signed else 0
        return low, high

    def value_decode(self, value):
        text = decode_text(value)
        pattern = signed_int_reg if self.signed else unsigned_int_reg
        if text is None or pattern.fullmatch(text) is None:
            log.debug('%s: not an integer: %r', self.header, value)
            return None
        try:
            number = int(text)
        except ValueError:
            # longer than int() is allowed to convert
            return None
        low, high = self.value_range()
        if not low <= number <= high:
            log.debug('%s: out of range: %r', self.header, value)
            return None
        return number

    def value_encode(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise exc.InvalidHeaderValue(
                    'invalid integer specifier %r' % (value,))
        low, high = self.value_range()
        if not low <= value <= high:
            raise exc.InvalidHeaderValue(
                    '%r out of range for %s' % (value, self.header))
        return str(value).encode('ascii')

class SignedIntegerHeaderField(IntegerHeaderField):
    __slots__ = ()
    signed = True

#----------------------------------------------------------------------
class DateHeaderField(HeaderField):
    """Inherits from :class:`HeaderField`.

    Understands HTTP headers with ``HTTP-date`` values. Decodes to an aware
    :class:`datetime.datetime` in UTC; always encodes in the RFC 1123 form,
    whatever form was decoded.
    """
    __slots__ = ()

    def value_decode(self, value):
        text = decode_text(value)
        when = None if text is None else _httpdate.parse_http_date(text)
        if when is None:
            log.debug('%s: not an HTTP-date: %r', self.header, value)
        return when

    def value_encode(self, value):
        if not isinstance(value, datetime.datetime):
            raise exc.InvalidHeaderValue(
                    'invalid http-date specifier %r' % (value,))
        try:
            return _httpdate.format_http_date(value).encode('ascii')
        except (OverflowError, ValueError):
            raise exc.InvalidHeaderValue(
                    'http-date out of range %r' % (value,))

#----------------------------------------------------------------------
class ExpiresHeaderField(DateHeaderField):
    """Inherits from :class:`DateHeaderField`.

    A single field that is not a valid HTTP-date decodes to
    :data:`~httpheaders.const.PAST` instead of ``None``, so decoding a
    single field never fails. ``PAST`` encodes as ``0``; decoding and then
    encoding a malformed value therefore does not give the value back.
    """
    __slots__ = ()

    def value_decode(self, value):
        when = super(ExpiresHeaderField, self).value_decode(value)
        if when is None:
            log.debug('%s: %r taken as already expired', self.header, value)
            return PAST
        return ExpiresDate(when)

    def value_encode(self, value):
        if value is PAST:
            return b'0'
        if isinstance(value, ExpiresDate):
            value = value.date
        return super(ExpiresHeaderField, self).value_encode(value)

#----------------------------------------------------------------------
class RetryAfterHeaderField(HeaderField):
    """Inherits from :class:`HeaderField`.

    Either an HTTP-date (:class:`DateRA`) or non-negative delta-seconds
    (:class:`DeltaRA`). The date form is tried first.
    """
    __slots__ = ()

    def value_decode(self, value):
        when = HTTP_DATE.value_decode(value)
        if when is not None:
            return DateRA(when)
        seconds = DELTA_SECONDS.value_decode(value)
        if seconds is not None:
            return DeltaRA(seconds)
        log.debug('%s: neither date nor delta-seconds: %r',
                  self.header, value)
        return None

    def value_encode(self, value):
        if isinstance(value, DateRA):
            return HTTP_DATE.value_encode(value.date)
        if isinstance(value, DeltaRA):
            return DELTA_SECONDS.value_encode(value.seconds)
        if isinstance(value, datetime.datetime):
            return HTTP_DATE.value_encode(value)
        return DELTA_SECONDS.value_encode(value)

#======================================================================
# General Headers
#======================================================================

#----------------------------------------------------------------------
class Date(DateHeaderField):
    # 14.18 Date
    #
    #    The Date general-header field represents the date and time at which
    #    the message was originated, having the same semantics as orig-date in
    #    RFC 822. The field value is an HTTP-date, as described in section
    #    3.3.1; it MUST be sent in RFC 1123 [8]-date format.
    #
    #        Date  = "Date" ":" HTTP-date
    #
    #    An example is
    #
    #        Date: Tue, 15 Nov 1994 08:12:31 GMT
    r"""
    A **date** header; inherits from
    :class:`httpheaders._headerfield.DateHeaderField`.

    Represents a :mailheader:`Date` field.

    See :rfc:`2616` section 14.18 for formatting details. """
    __slots__ = ()
    header = 'date'

#======================================================================
# Request Headers
#======================================================================

#----------------------------------------------------------------------
class IfModifiedSince(DateHeaderField):
    # 14.25 If-Modified-Since
    #
    #    The If-Modified-Since request-header field is used with a method to
    #    make it conditional: if the requested variant has not been modified
    #    since the time specified in this field, an entity will not be
    #    returned from the server; instead, a 304 (not modified) response will
    #    be returned without any message-body.
    #
    #        If-Modified-Since = "If-Modified-Since" ":" HTTP-date
    r"""
    A **date** header; inherits from
    :class:`httpheaders._headerfield.DateHeaderField`.

    Represents a :mailheader:`If-Modified-Since` field.

    See :rfc:`2616` section 14.25 for formatting details. """
    __slots__ = ()
    header = 'if-modified-since'

#----------------------------------------------------------------------
class IfUnmodifiedSince(DateHeaderField):
    # 14.28 If-Unmodified-Since
    #
    #       If-Unmodified-Since = "If-Unmodified-Since" ":" HTTP-date
    #
    #    If the specified date is invalid, the header is ignored.
    r"""
    A **date** header; inherits from
    :class:`httpheaders._headerfield.DateHeaderField`.

    Represents a :mailheader:`If-Unmodified-Since` field.

    See :rfc:`2616` section 14.28 for formatting details. """
    __slots__ = ()
    header = 'if-unmodified-since'

#----------------------------------------------------------------------
class MaxForwards(IntegerHeaderField):
    # 14.31 Max-Forwards
    #
    #        Max-Forwards   = "Max-Forwards" ":" 1*DIGIT
    #
    #    The Max-Forwards value is a decimal integer indicating the remaining
    #    number of times this request message may be forwarded.
    r"""
    A **integer** header; inherits from
    :class:`httpheaders._headerfield.IntegerHeaderField`.

    Represents a :mailheader:`Max-Forwards` field.

    See :rfc:`2616` section 14.31 for formatting details. """
    __slots__ = ()
    header = 'max-forwards'

#======================================================================
# Response Headers
#======================================================================

#----------------------------------------------------------------------
class Age(IntegerHeaderField):
    # 14.6 Age
    #
    #            Age = "Age" ":" age-value
    #            age-value = delta-seconds
    #
    #       Age values are non-negative decimal integers, representing time in
    #       seconds.
    r"""
    A **integer** header; inherits from
    :class:`httpheaders._headerfield.IntegerHeaderField`.

    Represents a :mailheader:`Age` field.

    See :rfc:`2616` section 14.6 for formatting details. """
    __slots__ = ()
    header = 'age'

#----------------------------------------------------------------------
class RetryAfter(RetryAfterHeaderField):
    # 14.37 Retry-After
    #
    #    The Retry-After response-header field can be used with a 503 (Service
    #    Unavailable) response to indicate how long the service is expected to
    #    be unavailable to the requesting client. This field MAY also be used
    #    with any 3xx (Redirection) response to indicate the minimum time the
    #    user-agent is asked wait before issuing the redirected request. The
    #    value of this field can be either an HTTP-date or an integer number
    #    of seconds (in decimal) after the time of the response.
    #
    #        Retry-After  = "Retry-After" ":" ( HTTP-date | delta-seconds )
    #
    #    Two examples of its use are
    #
    #        Retry-After: Fri, 31 Dec 1999 23:59:59 GMT
    #        Retry-After: 120
    #
    #    In the latter example, the delay is 2 minutes.
    r"""
    A **date or integer** header; inherits from
    :class:`httpheaders._headerfield.RetryAfterHeaderField`.

    Represents a :mailheader:`Retry-After` field.

    See :rfc:`2616` section 14.37 for formatting details. """
    __slots__ = ()
    header = 'retry-after'

#======================================================================
# Entity Headers
#======================================================================

#----------------------------------------------------------------------
class ContentLength(IntegerHeaderField):
    # 14.13 Content-Length
    #
    #        Content-Length    = "Content-Length" ":" 1*DIGIT
    #
    #    Any Content-Length greater than or equal to zero is a valid value.
    r"""
    A **integer** header; inherits from
    :class:`httpheaders._headerfield.IntegerHeaderField`.

    Represents a :mailheader:`Content-Length` field.

    See :rfc:`2616` section 14.13 for formatting details. """
    __slots__ = ()
    header = 'content-length'

#----------------------------------------------------------------------
class Expires(ExpiresHeaderField):
    # 14.21 Expires
    #
    #    The format is an absolute date and time as defined by HTTP-date in
    #    section 3.3.1; it MUST be in RFC 1123 date format:
    #
    #       Expires = "Expires" ":" HTTP-date
    #
    #    An example of its use is
    #
    #       Expires: Thu, 01 Dec 1994 16:00:00 GMT
    #
    #    HTTP/1.1 clients and caches MUST treat other invalid date formats,
    #    especially including the value "0", as in the past (i.e., "already
    #    expired").
    r"""
    A **date** header; inherits from
    :class:`httpheaders._headerfield.ExpiresHeaderField`.

    Represents a :mailheader:`Expires` field.

    See :rfc:`2616` section 14.21 for formatting details. """
    __slots__ = ()
    header = 'expires'

#----------------------------------------------------------------------
class LastModified(DateHeaderField):
    # 14.29 Last-Modified
    #
    #    The Last-Modified entity-header field indicates the date and time at
    #    which the origin server believes the variant was last modified.
    #
    #        Last-Modified  = "Last-Modified" ":" HTTP-date
    #
    #    An example of its use is
    #
    #        Last-Modified: Tue, 15 Nov 1994 12:45:26 GMT
    r"""
    A **date** header; inherits from
    :class:`httpheaders._headerfield.DateHeaderField`.

    Represents a :mailheader:`Last-Modified` field.

    See :rfc:`2616` section 14.29 for formatting details. """
    __slots__ = ()
    header = 'last-modified'

#======================================================================
# Identities
#======================================================================

# anonymous codecs, for values that are not tied to one header
INTEGER = IntegerHeaderField()
SIGNED_INTEGER = SignedIntegerHeaderField()
DELTA_SECONDS = INTEGER
HTTP_DATE = DateHeaderField()

DATE = Date()
IF_MODIFIED_SINCE = IfModifiedSince()
IF_UNMODIFIED_SINCE = IfUnmodifiedSince()
MAX_FORWARDS = MaxForwards()
AGE = Age()
RETRY_AFTER = RetryAfter()
CONTENT_LENGTH = ContentLength()
EXPIRES = Expires()
LAST_MODIFIED = LastModified()

HEADER_FIELDS = types.MappingProxyType(dict((f.header, f) for f in (
        DATE,
        IF_MODIFIED_SINCE,
        IF_UNMODIFIED_SINCE,
        MAX_FORWARDS,
        AGE,
        RETRY_AFTER,
        CONTENT_LENGTH,
        EXPIRES,
        LAST_MODIFIED,
    )))

def lookup(name):
    """Return the identity for header ``name`` (any case). Raises
    :exc:`KeyError` for a header this package has no codec for."""
    return HEADER_FIELDS[name.lower()]
