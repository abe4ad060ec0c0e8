"""Static usage text, served as the `help` prompt."""

HELP_TEXT = """\
Hello! I am the ThemeParks.wiki MCP Server. I can help you access data about theme parks. Here are the tools I offer:

1.  **list_destinations**:
    *   Description: Retrieves a list of all available top-level theme park destinations.
    *   Parameters: None

2.  **get_entity_details**:
    *   Description: Fetches detailed static information for a specific entity (park, attraction, etc.).
    *   Parameters:
        *   `entity_id` (string, UUID, required): The unique ID of the entity.

3.  **get_entity_children**:
    *   Description: Retrieves all direct child entities for a given parent entity.
    *   Parameters:
        *   `entity_id` (string, UUID, required): The unique ID of the parent entity.

4.  **get_entity_live_data**:
    *   Description: Fetches live data (wait times, hours, show times) for an entity and its children.
    *   Parameters:
        *   `entity_id` (string, UUID, required): The unique ID of the entity.

5.  **get_entity_schedule**:
    *   Description: Retrieves the operating schedule for an entity.
    *   Parameters:
        *   `entity_id` (string, UUID, required): The unique ID of the entity.
        *   `year` (integer, optional): The year for the schedule (e.g., 2025).
        *   `month` (integer, optional): The month (1-12). Both year and month must be provided if one is.

You can use these tools by asking me questions like:
- "List all theme park destinations."
- "Get details for entity with ID 'some-guid-here'."
- "What are the children of entity 'another-guid-here'?"
- "Show live data for park 'guid-for-a-park'."
- "What is the schedule for 'guid-for-an-attraction' for July 2025?"
"""


def get_help_text() -> str:
    return HELP_TEXT
