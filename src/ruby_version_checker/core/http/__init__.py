from ruby_version_checker.core.http.abc import HttpClient, HttpResponse
from ruby_version_checker.core.http.fake import FakeHttpClient
from ruby_version_checker.core.http.real import RealHttpClient

__all__ = [
    "FakeHttpClient",
    "HttpClient",
    "HttpResponse",
    "RealHttpClient",
]
