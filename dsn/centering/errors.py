class CenteringError(Exception):
    pass


class AlreadyActiveError(CenteringError):
    """Centering was activated on a viewport for which it is already active."""

    def __init__(self, viewport_id):
        super(AlreadyActiveError, self).__init__("Centering already active for viewport %r" % (viewport_id,))
        self.viewport_id = viewport_id


class ViewportGoneError(CenteringError):
    """The viewport handle no longer resolves to a live viewport; i.e. the host disposed of it under our feet."""

    def __init__(self, viewport_id):
        super(ViewportGoneError, self).__init__("Viewport %r is gone" % (viewport_id,))
        self.viewport_id = viewport_id


class InvalidConfigError(CenteringError):
    pass
