__all__ = """
PAST
""".split()

#======================================================================
# place for constants, type of constants
#======================================================================
class const(object):
    def __init__(self, ident):
        self._ident = ident

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self._ident)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return self._ident

#======================================================================
# constants
#======================================================================

# An Expires field that is present but is not a valid HTTP-date. RFC 2616
# section 14.21 says it MUST be treated as "already expired".
PAST = const.PAST = const('PAST')
