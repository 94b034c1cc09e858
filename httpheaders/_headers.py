import copy
import pprint
import logging

from httpheaders._multidict import MultiDict
import httpheaders._headerfield as field
import httpheaders.exc as exc

log = logging.getLogger(__name__)

def header_case(header_key):
    return "-".join([part.capitalize() for part in header_key.split("-")])


class Headers(MultiDict):
    """Raw header fields, keyed by lowercase header name.

    Each name holds the list of raw :class:`bytes` fields received for it.
    Typed values go through a header identity from
    :mod:`httpheaders._headerfield`::

        >>> h = Headers()
        >>> h.set(field.RETRY_AFTER, field.DeltaRA(120))
        >>> h.get_raw('Retry-After')
        (b'120',)
        >>> h.retry_after
        DeltaRA(seconds=120)

    Names are case-insensitive; ``'content-length'`` and ``'Content-Length'``
    are the same key.
    """

    # general header descriptors
    date = field.DATE

    # request header descriptors
    if_modified_since = field.IF_MODIFIED_SINCE
    if_unmodified_since = field.IF_UNMODIFIED_SINCE
    max_forwards = field.MAX_FORWARDS

    # response header descriptors
    age = field.AGE
    retry_after = field.RETRY_AFTER

    # entity header descriptors
    content_length = field.CONTENT_LENGTH
    expires = field.EXPIRES
    last_modified = field.LAST_MODIFIED

    #---------------------------------------------------------------
    def _key(self, key):
        if isinstance(key, field.HeaderField):
            if key.header is None:
                raise exc.InvalidHeaderValue(
                        '%r is a codec with no header name' % (key,))
            key = key.header
        return key.lower()

    #---------------------------------------------------------------
    def get_raw(self, name):
        """All raw fields for ``name``; an empty tuple if there are none."""
        try:
            return self.getall(name)
        except KeyError:
            return ()

    def set_raw(self, name, fields):
        """Replace all fields for ``name``. An empty ``fields`` removes it."""
        fields = [bytes(f) for f in fields]
        key = self._key(name)
        if fields:
            self._data[key] = fields
        else:
            self._data.pop(key, None)

    #---------------------------------------------------------------
    def get(self, key, default=None):
        """With a header identity, decode its fields and return the typed
        value, or ``default`` if the header is missing or malformed.

        With a plain name, behave as :meth:`dict.get` on the last field.
        """
        if isinstance(key, field.HeaderField):
            value = key.parse_header(self.get_raw(key))
            return default if value is None else value
        return super(Headers, self).get(key, default)

    def set(self, identity, value):
        """Store ``value`` as the single, canonically encoded field of the
        header ``identity`` names."""
        key = self._key(identity)
        data = identity.value_encode(value)
        log.debug('set %s: %r', key, data)
        self._data[key] = [data]

    def remove(self, identity):
        """Drop every field of ``identity`` (an identity or a name)."""
        self._data.pop(self._key(identity), None)

    #---------------------------------------------------------------
    def write_to(self, sink):
        """Write every field to ``sink`` as ``Name: value`` lines, sorted by
        name; fields of one name keep their order."""
        for name in sorted(self._data):
            label = header_case(name).encode('ascii')
            for value in self._data[name]:
                try:
                    sink.write(label + b': ' + value + b'\r\n')
                except OSError as err:
                    raise exc.SinkWriteError(
                            'could not write %s header: %s' % (name, err)
                        ) from err

    #---------------------------------------------------------------
    def iterallitems(self):
        for name in sorted(self._data):
            for value in self._data[name]:
                yield name, value

    #---------------------------------------------------------------
    def __repr__(self):
        data = pprint.pformat(list(self.iterallitems()))
        if '\n' in data:
            data = ''.join([data[0], '\n ', data[1:-1], '\n', data[-1]])
        return '<%s(%s)>' % (
                type(self).__name__, data
            )

    #---------------------------------------------------------------
    def __copy__(self):
        dup = type(self)()
        for k, v in self.iterallitems():
            dup.append_at(k, v)
        return dup

    def copy(self):
        return copy.copy(self)
