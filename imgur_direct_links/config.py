import os

from attrs import define, field

DEFAULT_SITE_URL = "https://imgur.plen.io"
# seconds
DEFAULT_TIMEOUT = 10.0

LEGACY_HOST = "https://imgur.com"
DIRECT_HOST = "https://i.imgur.com"

USER_AGENT = "ImgurDirectLinksBot/1.0 (+{site_url})"

SITE_URL_ENVVAR = "IMGUR_DIRECT_LINKS_SITE_URL"
TIMEOUT_ENVVAR = "IMGUR_DIRECT_LINKS_TIMEOUT"


@define(frozen=True)
class Settings:
    site_url: str = DEFAULT_SITE_URL
    timeout: float = field(default=DEFAULT_TIMEOUT, converter=float)
    legacy_host: str = LEGACY_HOST
    direct_host: str = DIRECT_HOST

    @classmethod
    def from_env(cls, **overrides):
        """Build settings from the environment.

        Keyword arguments set to something other than None take precedence.
        """
        values = {}
        site_url = os.getenv(SITE_URL_ENVVAR)
        if site_url:
            values["site_url"] = site_url
        timeout = os.getenv(TIMEOUT_ENVVAR)
        if timeout:
            values["timeout"] = timeout

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def user_agent(self):
        return USER_AGENT.format(site_url=self.site_url)

    def headers(self):
        # the legacy host refuses requests without its own page as referer
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            "Referer": f"{self.legacy_host}/",
        }
