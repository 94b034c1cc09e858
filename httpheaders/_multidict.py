from collections.abc import MutableMapping

class MultiDict(MutableMapping):
    """A mapping where each key holds a list of values.

    The plain mapping API sees only the last value stored under a key; the
    ``*_at`` methods and :meth:`getall` reach the others. Subclasses can
    override :meth:`_key` to normalise keys.
    """

    def __init__(self):
        self._data = {}

    def _key(self, key):
        return key

    def __getitem__(self, key):
        return self._data[self._key(key)][-1]

    def __setitem__(self, key, value):
        key = self._key(key)
        if key not in self._data:
            self._data[key] = [None]
        self._data[key][-1] = value

    def __delitem__(self, key):
        key = self._key(key)
        del self._data[key][-1]
        if not self._data[key]:
            del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return self._key(key) in self._data

    def __eq__(self, other):
        if isinstance(other, MultiDict):
            return self._data == other._data
        return super(MultiDict, self).__eq__(other)

    def iterallitems(self):
        for k in self._data:
            for v in self._data[k]:
                yield k, v

    def clear(self):
        self._data = {}

    def getall(self, key):
        return tuple(self._data[self._key(key)])

    def delall(self, key):
        del self._data[self._key(key)]

    def len_at(self, key):
        return len(self._data[self._key(key)])

    def getitem_at(self, key, index):
        return self._data[self._key(key)][index]

    def setitem_at(self, key, index, value):
        self._data[self._key(key)][index] = value

    def delitem_at(self, key, index):
        key = self._key(key)
        del self._data[key][index]
        if not self._data[key]:
            del self._data[key]

    def append_at(self, key, value):
        key = self._key(key)
        if key not in self._data:
            self._data[key] = []
        self._data[key].append(value)
