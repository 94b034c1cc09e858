#!/usr/bin/python

import io
import datetime
import unittest

import httpheaders._headerfield as field
from httpheaders._headerfield import (
        require_single_field, fmt_header, ExpiresDate, DateRA, DeltaRA)
from httpheaders.const import PAST
import httpheaders.exc as exc

UTC = datetime.timezone.utc
DEC_1994 = datetime.datetime(1994, 12, 1, 16, 0, 0, tzinfo=UTC)
DEC_1994_RAW = b'Thu, 01 Dec 1994 16:00:00 GMT'

STRICT_FIELDS = [
    field.INTEGER,
    field.SIGNED_INTEGER,
    field.HTTP_DATE,
    field.DATE,
    field.IF_MODIFIED_SINCE,
    field.IF_UNMODIFIED_SINCE,
    field.LAST_MODIFIED,
    field.RETRY_AFTER,
    field.AGE,
    field.CONTENT_LENGTH,
    field.MAX_FORWARDS,
]

class BrokenSink(object):
    def write(self, data):
        raise OSError('disk full')


class TestRequireSingleField(unittest.TestCase):
    def test_One(self):
        self.assertEqual(require_single_field([b'42']), b'42')
        self.assertEqual(require_single_field((b'',)), b'')

    def test_NoneOrMany(self):
        self.assertIsNone(require_single_field([]))
        self.assertIsNone(require_single_field([b'42', b'24']))
        self.assertIsNone(require_single_field([b'1', b'2', b'3']))

    def test_StrictFieldsRejectCardinality(self):
        for f in STRICT_FIELDS + [field.EXPIRES]:
            self.assertIsNone(f.parse_header([]), f)
            self.assertIsNone(f.parse_header([DEC_1994_RAW, DEC_1994_RAW]), f)
            self.assertIsNone(f.parse_header([b'42', b'24']), f)


class TestIntegerHeaderField(unittest.TestCase):
    def test_Decode(self):
        self.assertEqual(field.INTEGER.parse_header([b'42']), 42)
        self.assertEqual(field.INTEGER.parse_header([b'0']), 0)
        self.assertEqual(field.INTEGER.parse_header([b'007']), 7)

    def test_DecodeRejects(self):
        for raw in [b'foo', b'', b'-42', b'+42', b' 42', b'42 ', b'4 2',
                    b'1_000', b'0x10', b'4.2', b'\xff',
                    '٤٢'.encode('utf-8')]:
            self.assertIsNone(field.INTEGER.parse_header([raw]), raw)

    def test_Width(self):
        self.assertEqual(field.INTEGER.parse_header([b'9223372036854775807']),
                         2 ** 63 - 1)
        self.assertIsNone(field.INTEGER.parse_header([b'9223372036854775808']))
        self.assertIsNone(field.INTEGER.parse_header([b'9' * 5000]))

    def test_Signed(self):
        f = field.SIGNED_INTEGER
        self.assertEqual(f.parse_header([b'-42']), -42)
        self.assertEqual(f.parse_header([b'42']), 42)
        self.assertEqual(f.parse_header([b'-9223372036854775808']), -2 ** 63)
        self.assertIsNone(f.parse_header([b'-9223372036854775809']))
        self.assertIsNone(f.parse_header([b'+42']))
        self.assertIsNone(f.parse_header([b'-']))
        self.assertIsNone(f.parse_header([b'--1']))

    def test_Encode(self):
        self.assertEqual(fmt_header(field.INTEGER, 42), b'42')
        self.assertEqual(fmt_header(field.INTEGER, 0), b'0')
        self.assertEqual(fmt_header(field.SIGNED_INTEGER, -42), b'-42')

    def test_EncodeRejects(self):
        for value in [-1, 2 ** 63, True, '42', 4.2, None]:
            self.assertRaises(exc.InvalidHeaderValue,
                              field.INTEGER.value_encode, value)

    def test_RoundTrip(self):
        for value in [0, 1, 10, 120, 2 ** 31, 2 ** 63 - 1]:
            raw = fmt_header(field.CONTENT_LENGTH, value)
            self.assertEqual(field.CONTENT_LENGTH.parse_header([raw]), value)


class TestDateHeaderField(unittest.TestCase):
    def test_Decode(self):
        self.assertEqual(field.DATE.parse_header([DEC_1994_RAW]), DEC_1994)

    def test_DecodeInvalid(self):
        self.assertIsNone(field.DATE.parse_header([b'bogus']))
        self.assertIsNone(field.DATE.parse_header([b'0']))
        self.assertIsNone(field.DATE.parse_header([b'\xff\xfe']))

    def test_Encode(self):
        self.assertEqual(fmt_header(field.LAST_MODIFIED, DEC_1994),
                         DEC_1994_RAW)

    def test_EncodeCanonicalises(self):
        raw = b'Thursday, 01-Dec-94 16:00:00 GMT'
        when = field.DATE.parse_header([raw])
        self.assertEqual(fmt_header(field.DATE, when), DEC_1994_RAW)

    def test_EncodeRejects(self):
        for value in ['Thu, 01 Dec 1994 16:00:00 GMT', 0,
                      datetime.date(1994, 12, 1), None]:
            self.assertRaises(exc.InvalidHeaderValue,
                              field.DATE.value_encode, value)
        tz = datetime.timezone(datetime.timedelta(hours=1))
        self.assertRaises(exc.InvalidHeaderValue, field.DATE.value_encode,
                          datetime.datetime(1, 1, 1, tzinfo=tz))

    def test_EncodeIsTypeError(self):
        self.assertRaises(TypeError, field.DATE.value_encode, 'now')

    def test_NowRoundTrips(self):
        now = datetime.datetime.now(UTC).replace(microsecond=0)
        raw = fmt_header(field.DATE, now)
        self.assertEqual(field.DATE.parse_header([raw]), now)


class TestExpiresHeaderField(unittest.TestCase):
    def test_Bogus(self):
        self.assertIs(field.EXPIRES.parse_header([b'bogus']), PAST)

    def test_ZeroEmptyAndBadUtf8(self):
        for raw in [b'0', b'', b'\xff', b'-1']:
            self.assertIs(field.EXPIRES.parse_header([raw]), PAST)

    def test_Date(self):
        value = field.EXPIRES.parse_header([DEC_1994_RAW])
        self.assertEqual(value, ExpiresDate(DEC_1994))
        self.assertEqual(fmt_header(field.EXPIRES, value), DEC_1994_RAW)

    def test_EncodePast(self):
        self.assertEqual(fmt_header(field.EXPIRES, PAST), b'0')
        self.assertIs(field.EXPIRES.parse_header([b'0']), PAST)

    def test_EncodeBareDatetime(self):
        self.assertEqual(fmt_header(field.EXPIRES, DEC_1994), DEC_1994_RAW)

    def test_NotBijective(self):
        raw = b'next tuesday'
        self.assertEqual(
                fmt_header(field.EXPIRES, field.EXPIRES.parse_header([raw])),
                b'0')

    def test_EncodeRejects(self):
        self.assertRaises(exc.InvalidHeaderValue,
                          field.EXPIRES.value_encode, 0)
        self.assertRaises(exc.InvalidHeaderValue,
                          field.EXPIRES.value_encode, ExpiresDate('soon'))


class TestRetryAfterHeaderField(unittest.TestCase):
    def test_Delta(self):
        value = field.RETRY_AFTER.parse_header([b'120'])
        self.assertEqual(value, DeltaRA(120))
        self.assertEqual(fmt_header(field.RETRY_AFTER, value), b'120')

    def test_Date(self):
        value = field.RETRY_AFTER.parse_header([DEC_1994_RAW])
        self.assertEqual(value, DateRA(DEC_1994))
        self.assertEqual(fmt_header(field.RETRY_AFTER, value), DEC_1994_RAW)

    def test_NegativeRejected(self):
        self.assertIsNone(field.RETRY_AFTER.parse_header([b'-42']))

    def test_TwoFieldsRejected(self):
        self.assertIsNone(field.RETRY_AFTER.parse_header([b'42', b'24']))

    def test_NeitherForm(self):
        for raw in [b'soon', b'', b'1.5', b'\xff']:
            self.assertIsNone(field.RETRY_AFTER.parse_header([raw]), raw)

    def test_EncodeBareValues(self):
        self.assertEqual(fmt_header(field.RETRY_AFTER, 120), b'120')
        self.assertEqual(fmt_header(field.RETRY_AFTER, DEC_1994), DEC_1994_RAW)
        self.assertRaises(exc.InvalidHeaderValue,
                          field.RETRY_AFTER.value_encode, -1)
        self.assertRaises(exc.InvalidHeaderValue,
                          field.RETRY_AFTER.value_encode, DeltaRA(-1))


class TestVariants(unittest.TestCase):
    def test_CasesAreDistinct(self):
        self.assertNotEqual(ExpiresDate(DEC_1994), DateRA(DEC_1994))
        self.assertNotEqual(DeltaRA(120), (120,))
        self.assertEqual(DeltaRA(120), DeltaRA(120))
        self.assertFalse(DeltaRA(120) != DeltaRA(120))

    def test_Hashable(self):
        self.assertEqual(len(set([DeltaRA(1), DeltaRA(1), DateRA(DEC_1994)])),
                         2)

    def test_Fields(self):
        self.assertEqual(DeltaRA(5).seconds, 5)
        self.assertEqual(DateRA(DEC_1994).date, DEC_1994)
        self.assertEqual(ExpiresDate(DEC_1994).date, DEC_1994)


class TestSink(unittest.TestCase):
    def test_Writes(self):
        buf = io.BytesIO()
        field.AGE.fmt_header(30, buf)
        self.assertEqual(buf.getvalue(), b'30')

    def test_SinkError(self):
        with self.assertRaises(exc.SinkWriteError) as cm:
            field.EXPIRES.fmt_header(PAST, BrokenSink())
        self.assertIsInstance(cm.exception.__cause__, OSError)
        self.assertIsInstance(cm.exception, IOError)


class TestIdentities(unittest.TestCase):
    def test_Names(self):
        self.assertEqual(field.EXPIRES.header, 'expires')
        self.assertEqual(field.RETRY_AFTER.header, 'retry-after')
        self.assertEqual(field.DATE.header, 'date')
        self.assertEqual(field.IF_MODIFIED_SINCE.header, 'if-modified-since')
        self.assertEqual(field.IF_UNMODIFIED_SINCE.header,
                         'if-unmodified-since')
        self.assertEqual(field.LAST_MODIFIED.header, 'last-modified')

    def test_Lookup(self):
        self.assertIs(field.lookup('Retry-After'), field.RETRY_AFTER)
        self.assertIs(field.lookup('EXPIRES'), field.EXPIRES)
        self.assertRaises(KeyError, field.lookup, 'x-unknown')

    def test_TableIsLowercase(self):
        for name, f in field.HEADER_FIELDS.items():
            self.assertEqual(name, name.lower())
            self.assertEqual(f.header, name)

    def test_TableIsReadOnly(self):
        with self.assertRaises(TypeError):
            field.HEADER_FIELDS['x-custom'] = field.DATE
        with self.assertRaises(TypeError):
            del field.HEADER_FIELDS['date']
        self.assertIs(field.HEADER_FIELDS['date'], field.DATE)

    def test_Stateless(self):
        self.assertRaises(AttributeError, setattr, field.DATE, 'foo', 1)


if __name__ == '__main__':
    unittest.main()
