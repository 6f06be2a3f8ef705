class AtlasError(Exception):
    pass


class DecodeError(AtlasError):
    pass


class MalformedAmountError(AtlasError):
    pass


class DataSourceError(AtlasError):
    pass


class RateLimitError(DataSourceError):
    pass


class UnknownCoinError(AtlasError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
