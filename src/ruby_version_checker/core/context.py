"""Application context with dependency injection."""

from dataclasses import dataclass

from ruby_version_checker.core.config import CheckerConfig
from ruby_version_checker.core.http.abc import HttpClient
from ruby_version_checker.core.http.real import RealHttpClient


@dataclass(frozen=True)
class RubyContext:
    """Immutable context holding all dependencies for a checker run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    http: HttpClient
    config: CheckerConfig

    @staticmethod
    def for_test(
        http: HttpClient | None = None,
        config: CheckerConfig | None = None,
    ) -> "RubyContext":
        """Create a context backed by fakes.

        Args:
            http: HttpClient to use. If None, creates an empty FakeHttpClient
                (every request answers 404).
            config: Run configuration. If None, uses the defaults.

        Returns:
            RubyContext suitable for passing as ``obj=`` to CliRunner.invoke

        Example:
            >>> from ruby_version_checker.core.http.fake import FakeHttpClient
            >>> http = FakeHttpClient(bodies={"https://example.test/index.txt": ""})
            >>> ctx = RubyContext.for_test(http=http)
            >>> ctx.http.get("https://example.test/index.txt").status_code
            200
        """
        from ruby_version_checker.core.http.fake import FakeHttpClient

        return RubyContext(
            http=http if http is not None else FakeHttpClient(),
            config=config if config is not None else CheckerConfig(),
        )


def create_context(config: CheckerConfig) -> RubyContext:
    """Create production context with a real HTTP client.

    The connection pool is sized to the checksum worker pool.
    """
    http = RealHttpClient(
        timeout_seconds=config.timeout_seconds,
        max_connections=config.max_workers,
    )
    return RubyContext(http=http, config=config)
