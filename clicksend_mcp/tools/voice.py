from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="get_voice_receipts_message_id",
        title="Get Specific Voice Receipt",
        description="Get the delivery receipt of one voice message.",
        method="GET",
        path="/voice/receipts/{message_id}",
        parameters=(
            ToolParameter("message_id", "The voice receipt message id.", required=True),
        ),
    ),
    EndpointDefinition(
        name="get_voice_history",
        title="Get Voice History",
        description="Get voice message history between two timestamps.",
        method="GET",
        path="/voice/history?date_from={date_from}&date_to={date_to}",
        parameters=(
            ToolParameter("date_from", "Timestamp (from) used to show records by date.", required=True),
            ToolParameter("date_to", "Timestamp (to) used to show records by date.", required=True),
        ),
    ),
    EndpointDefinition(
        name="put_voice_receipts-read",
        title="Mark Voice Receipts as Read",
        description="Mark all voice delivery receipts before a timestamp as read.",
        method="PUT",
        path="/voice/receipts-read?date_before={date_before}",
        parameters=(
            ToolParameter(
                "date_before",
                "Unix timestamp; mark all as read before this timestamp.",
                required=True,
            ),
        ),
    ),
)
