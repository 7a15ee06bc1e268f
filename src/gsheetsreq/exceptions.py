class SheetsUsageError(RuntimeError):
    """
    Raised when the library is used out of order, such as calling an API
    wrapper before a client is bound, or building an update chain without
    a sheet to address it to.
    """
    pass
