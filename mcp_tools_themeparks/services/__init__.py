from .client import ThemeParksClient  # noqa: F401
from .entities import (  # noqa: F401
    get_entity_children,
    get_entity_details,
    get_entity_live_data,
    get_entity_schedule,
    list_destinations,
)
from .help import get_help_text  # noqa: F401
