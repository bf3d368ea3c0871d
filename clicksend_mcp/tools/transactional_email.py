from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="post_email_receipts",
        title="Add a Test Delivery Receipt",
        description="Add a test delivery receipt for transactional email.",
        method="POST",
        path="/email/receipts",
        parameters=(
            ToolParameter(
                "url",
                "Your URL if using the push option or 'poll' if using the pull option.",
                required=True,
            ),
        ),
    ),
)
