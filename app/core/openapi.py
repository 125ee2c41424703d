"""
OpenAPI schema customizations for drf-spectacular.

Endpoints are grouped with tags= in @extend_schema on each view.
This hook adds the tag descriptions shown in ReDoc and documents the
shared error body.
"""

TAG_DESCRIPTIONS = [
    {
        "name": "Users",
        "description": "Registration, login, profile management and the user directory.",
    },
    {
        "name": "Chats",
        "description": "Chat rooms and their membership. Only members can see a chat.",
    },
    {
        "name": "Messages",
        "description": "Paginated message history, posting, editing and deleting.",
    },
]

ERROR_SCHEMA = {
    "type": "object",
    "properties": {
        "error": {"type": "string"},
        "errors": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "field": {"type": "string"},
                    "message": {"type": "string"},
                },
            },
        },
    },
}


def add_tag_descriptions(result, generator, request, public):
    """
    Postprocessing hook adding tag descriptions and the Error component.
    """
    result["tags"] = TAG_DESCRIPTIONS
    components = result.setdefault("components", {})
    components.setdefault("schemas", {})["Error"] = ERROR_SCHEMA
    return result
