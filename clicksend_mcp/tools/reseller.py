from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="put_reseller",
        title="Update Reseller Setting",
        description="Update the reseller branding, margins and signup settings.",
        method="PUT",
        path="/reseller",
        parameters=(
            ToolParameter("company_name", "Company name.", required=True),
            ToolParameter("subdomain", "Subdomain.", required=True),
            ToolParameter("logo_url_light", "Logo URL (light)", required=True),
            ToolParameter("logo_url_dark", "Logo URL (dark)", required=True),
            ToolParameter("colour_navigation", "Colour navigation.", required=True),
            ToolParameter("default_margin", "Default margin.", required=True),
            ToolParameter("default_margin_numbers", "Default margin numbers.", required=True),
            ToolParameter("allow_public_signups", "Allow public signups.", required=True),
            ToolParameter("trial_balance", "Trial balance.", required=True),
        ),
    ),
)
