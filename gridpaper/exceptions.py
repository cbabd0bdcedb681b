"""Base exception shared by all gridpaper contexts."""


class GridPaperError(Exception):
    """
    Base class for every fatal error the command line reports.

    Attributes:
        workspace: Workspace left on disk by the failed run, if any
    """

    workspace = None
