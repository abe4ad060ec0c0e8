from .config import Settings, load_settings  # noqa: F401
from .errors import ConfigError, RateLimitedError, ThemeParksApiError, TransportError, UpstreamError  # noqa: F401
from .schemas import EntityRequest, ScheduleRequest, ToolResponse  # noqa: F401
