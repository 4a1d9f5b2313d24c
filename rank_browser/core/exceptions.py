class RankBrowserError(Exception):
    """Base exception for all rank_browser errors"""
    pass

class ConfigError(RankBrowserError):
    """Invalid or missing global.json"""
    pass

class RecordSourceError(RankBrowserError):
    """
    The record document could not be retrieved or parsed
    (missing file, unreachable URL, invalid JSON, wrong top-level shape)
    """
    pass

class InvalidSortDirectiveError(RankBrowserError, ValueError):
    """Partial sort directive or unknown sort field"""
    pass
