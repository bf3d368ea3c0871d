from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="post_lists_list_id_contacts",
        title="Create a new contact",
        description="Create a contact in a contact list.",
        method="POST",
        path="/lists/{list_id}/contacts",
        parameters=(
            ToolParameter("list_id", "Your contact list id where your contact be associated.", required=True),
            ToolParameter("phone_number", "Contact phone number in E.164 format.", required=True),
            ToolParameter("first_name", "Contact firstname."),
            ToolParameter("last_name", "Contact lastname."),
            ToolParameter("email", "Contact email."),
            ToolParameter("fax_number", "Contact fax number."),
            ToolParameter("organization_name", "Your organization name."),
            ToolParameter("address_line_1", "Contact address line 1."),
            ToolParameter("address_line_2", "Contact address line 2."),
            ToolParameter("address_city", "Contact city."),
            ToolParameter("address_state", "Contact state."),
            ToolParameter("address_postal_code", "Contact postal code."),
            ToolParameter("address_country", "Contact two-letter country code defined in ISO 3166."),
            ToolParameter("custom_1", "Contact custom 1 text."),
            ToolParameter("custom_2", "Contact custom 2 text."),
            ToolParameter("custom_3", "Contact custom 3 text."),
            ToolParameter("custom_4", "Contact custom 4 text."),
        ),
    ),
    EndpointDefinition(
        name="get_lists_list_id_contacts_contact_id",
        title="Get a specific contact",
        description="Get one contact from a contact list.",
        method="GET",
        path="/lists/{list_id}/contacts/{contact_id}",
        parameters=(
            ToolParameter("list_id", "Your contact list id you want to access.", required=True),
            ToolParameter("contact_id", "Your contact id you want to access.", required=True),
        ),
    ),
    EndpointDefinition(
        name="put_lists_from_list_id_contacts_contact_id_to_list_id",
        title="Transfer a Contact",
        description="Move a contact from one contact list to another.",
        method="PUT",
        path="/lists/{from_list_id}/contacts/{contact_id}/{to_list_id}",
        parameters=(
            ToolParameter("from_list_id", "From list id.", required=True),
            ToolParameter("contact_id", "Contact ID.", required=True),
            ToolParameter("to_list_id", "To list id.", required=True),
        ),
    ),
)
