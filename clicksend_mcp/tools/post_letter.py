from clicksend_mcp.core.models import EndpointDefinition, ParamKind, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="post_post_letters_send",
        title="Send Post Letter",
        description="Send a hosted PDF as a physical letter to one or more recipients.",
        method="POST",
        path="/post/letters/send",
        parameters=(
            ToolParameter("file_url", "Your URL to your PDF file.", required=True),
            ToolParameter("priority_post", "Is it priority? 0 = Not Priority, 1 = Priority."),
            ToolParameter("recipients", "Your recipients.", kind=ParamKind.ARRAY),
            ToolParameter("template_used", "Whether you used our template or not."),
            ToolParameter("colour", "Is it in colour? 0 = Black and White, 1 = Colour."),
            ToolParameter("duplex", "Is it in duplex? 0 = Simplex, 1 = Duplex."),
        ),
    ),
    EndpointDefinition(
        name="put_post_return-addresses_return_address_id",
        title="Update Post Return Address",
        description="Update a return address used on posted letters.",
        method="PUT",
        path="/post/return-addresses/{return_address_id}",
        parameters=(
            ToolParameter("return_address_id", "Your return address id.", required=True),
            ToolParameter("address_name", "Your address name.", required=True),
            ToolParameter("address_line_1", "Your address line 1.", required=True),
            ToolParameter("address_line_2", "Your address line 2."),
            ToolParameter("address_city", "Your address city.", required=True),
            ToolParameter("address_state", "Your address state.", required=True),
            ToolParameter("address_postal_code", "Your address postal code.", required=True),
            ToolParameter("address_country", "Two-letter country code defined in ISO 3166.", required=True),
        ),
    ),
)
