class StaticDocsError(Exception):
    """Base error for the static content resolver."""


class InvalidRequest(StaticDocsError):
    """The route segments can't be turned into a document path."""


class ContentLoadError(StaticDocsError):
    """A document could not be retrieved."""


class NotFound(ContentLoadError):
    pass


class TransportError(ContentLoadError):
    pass
