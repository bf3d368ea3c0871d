from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="get_numbers_search_country",
        title="Search Dedicated Numbers by Country",
        description="Search dedicated numbers available for purchase in a country.",
        method="GET",
        # search and search_type fill the query keys, matching the published endpoint shape
        path="/numbers/search/{country}?{search}=1&{search_type}=2",
        parameters=(
            ToolParameter("country", "Your preferred country.", required=True),
            ToolParameter("search", "Your search pattern or query.", required=True),
            ToolParameter(
                "search_type",
                "Your strategy for searching, 0 = starts with, 1 = anywhere, 2 = ends with.",
                required=True,
            ),
        ),
    ),
)
