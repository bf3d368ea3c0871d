from clicksend_mcp.core.models import EndpointDefinition

ENDPOINTS = (
    EndpointDefinition(
        name="get_countries",
        title="Get all Countries",
        description="List the countries ClickSend supports, with their codes.",
        method="GET",
        path="/countries",
    ),
)
