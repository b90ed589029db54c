# locator/core/errors.py


class LookupFailure(Exception):
    """Base for anything that goes wrong while asking the provider about an IP."""

    def __init__(self, ip: str, message: str):
        super().__init__(message)
        self.ip = ip
        self.message = message


class FetchTimeout(LookupFailure):
    pass


class FetchTransportError(LookupFailure):
    pass


class ProviderReportedFailure(LookupFailure):
    """Body parsed fine but the provider's own `status` says "fail"."""


class ResponseParseError(LookupFailure):
    pass
