from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Network timeout in seconds handed to requests / urllib; None waits forever
    timeout: float | None = 10

    # When False, HTTP probes ask intermediaries not to answer from a cache
    use_caches: bool = False

    user_agent: str = "resource-probe"
    # HEAD requests do not follow redirects in requests unless asked to
    follow_redirects: bool = True
    verify_tls: bool = True

    class Config:
        env_prefix = "RESOURCE_PROBE_"
        env_file = ".env"

    def request_headers(self) -> dict[str, str]:
        """Return the headers sent with every HTTP probe."""
        headers = {"User-Agent": self.user_agent}
        if not self.use_caches:
            headers["Cache-Control"] = "no-cache"
            headers["Pragma"] = "no-cache"
        return headers
