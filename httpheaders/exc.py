class HttpHeadersException(Exception): pass

class InvalidHeaderValue(HttpHeadersException, TypeError): pass

class SinkWriteError(HttpHeadersException, IOError): pass
