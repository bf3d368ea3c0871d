from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

_FLAG = "flag value, must be 1 or 0."

ENDPOINTS = (
    EndpointDefinition(
        name="put_subaccounts_subaccount_id",
        title="Update a specific subaccount",
        description="Update the profile and access flags of a subaccount.",
        method="PUT",
        path="/subaccounts/{subaccount_id}",
        parameters=(
            ToolParameter("subaccount_id", "The subaccount ID you want to access.", required=True),
            ToolParameter("first_name", "Your firstname."),
            ToolParameter("last_name", "Your lastname."),
            ToolParameter("email", "Your new email."),
            ToolParameter("phone_number", "Your phone number in E.164 format."),
            ToolParameter("password", "Your new password."),
            ToolParameter("access_users", f"Your access users {_FLAG}"),
            ToolParameter("access_billing", f"Your access billing {_FLAG}"),
            ToolParameter("access_reporting", f"Your access reporting {_FLAG}"),
            ToolParameter("access_contacts", f"Your access contacts {_FLAG}"),
            ToolParameter("access_settings", f"Your access settings {_FLAG}"),
            ToolParameter("share_campaigns", f"Your share campaigns {_FLAG}"),
        ),
    ),
)
