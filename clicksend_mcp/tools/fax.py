from clicksend_mcp.core.models import EndpointDefinition, ParamKind, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="get_fax_history",
        title="Get Fax History",
        description="Get fax history for a date range, filtered by a custom query and ordered as requested.",
        method="GET",
        path="/fax/history?date_from={date_from}&date_to={date_to}&q={q}&order_by={order_by}",
        parameters=(
            ToolParameter("date_from", "Customize result by setting from date (timestamp)", required=True),
            ToolParameter("date_to", "Customize result by setting to date (timestamp)", required=True),
            ToolParameter("q", "Custom query", required=True),
            ToolParameter("order_by", "Order result by", required=True),
        ),
    ),
    EndpointDefinition(
        name="post_fax_send",
        title="Send Fax",
        description="Send a fax of a hosted PDF document to a number or contact list.",
        method="POST",
        path="/fax/send",
        parameters=(
            ToolParameter("messages", "Your messages.", required=True, kind=ParamKind.ARRAY),
            ToolParameter("source", "Your method of sending e.g. 'wordpress', 'php', 'c#'."),
            ToolParameter("from_email", "An email address where the reply should be emailed to."),
            ToolParameter("to", "Recipient number in E.164 format or local format.", required=True),
            ToolParameter("country", "Recipient country."),
            ToolParameter("file_url", "Your URL to your PDF file.", required=True),
            ToolParameter("list_id", "Your list ID if sending to a whole list. Can be used instead of 'to'."),
            ToolParameter("custom_string", "Your reference. Will be passed back with all replies and delivery reports."),
            ToolParameter("from", "Your sender id. Must be a valid fax number."),
            ToolParameter("schedule", "Leave blank for immediate delivery. Your schedule time as a unix timestamp."),
        ),
    ),
)
