from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="put_email_address-verify_email_address_id_verify_activation_token",
        title="Verify Allowed Email Address",
        description="Verify an allowed sender email address with its activation token.",
        method="PUT",
        path="/email/address-verify/{email_address_id}/verify/{activation_token}",
        parameters=(
            ToolParameter("email_address_id", "The email address id you want to access.", required=True),
            ToolParameter("activation_token", "Your activation token.", required=True),
        ),
    ),
)
