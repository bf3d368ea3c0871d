from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="get_pricing_country",
        title="Get Country Pricing",
        description="Get message pricing for a country in the given currency.",
        method="GET",
        path="/pricing/{country}?currency={currency}",
        parameters=(
            ToolParameter("country", "Two-letter representation of the country.", required=True),
            ToolParameter("currency", "Three-letter representation of the currency.", required=True),
        ),
    ),
)
