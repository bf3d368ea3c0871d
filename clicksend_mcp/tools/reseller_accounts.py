from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="post_reseller_accounts",
        title="Create Reseller Account",
        description="Create a client account under the reseller.",
        method="POST",
        path="/reseller/accounts",
        parameters=(
            ToolParameter("username", "Your username.", required=True),
            ToolParameter("password", "Your password.", required=True),
            ToolParameter("user_email", "Your email.", required=True),
            ToolParameter("user_phone", "Your phone number in E.164 format.", required=True),
            ToolParameter("user_first_name", "Your first name.", required=True),
            ToolParameter("user_last_name", "Your last name.", required=True),
            ToolParameter("account_name", "Your delivery to value.", required=True),
            ToolParameter("country", "Client country.", required=True),
        ),
    ),
)
