from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="put_sms_message_id_cancel",
        title="Cancel a Scheduled Message",
        description="Cancel one scheduled SMS that has not been sent yet.",
        method="PUT",
        path="/sms/{message_id}/cancel",
        parameters=(
            ToolParameter("message_id", "The message ID you want to cancel.", required=True),
        ),
    ),
    EndpointDefinition(
        name="get_sms_inbound_outbound_message_id",
        title="Get Specific Inbound - Pull",
        description="Pull the inbound SMS replies to an outbound message.",
        method="GET",
        path="/sms/inbound/{outbound_message_id}",
        parameters=(
            ToolParameter(
                "outbound_message_id",
                "Message ID of the original outbound message, to which the inbound message is a reply. "
                "Must be a valid GUID.",
                required=True,
            ),
        ),
    ),
)
