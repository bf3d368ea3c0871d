from clicksend_mcp.core.models import EndpointDefinition, ToolParameter

ENDPOINTS = (
    EndpointDefinition(
        name="delete_automations_sms_receipts_receipt_rule_id",
        title="Delete a rule",
        description="Delete an SMS delivery receipt automation rule.",
        method="DELETE",
        path="/automations/sms/receipts/{receipt_rule_id}",
        parameters=(
            ToolParameter("receipt_rule_id", "Receipt Rule ID.", required=True),
        ),
    ),
    EndpointDefinition(
        name="put_automations_fax_inbound_inbound_rule_id",
        title="Update a rule",
        description="Update an inbound fax automation rule.",
        method="PUT",
        path="/automations/fax/inbound/{inbound_rule_id}",
        parameters=(
            ToolParameter("inbound_rule_id", "Fax inbound rule id", required=True),
            ToolParameter("rule_name", "Rule Name", required=True),
            ToolParameter("action", "Action", required=True),
            ToolParameter("action_address", "Action Address", required=True),
            ToolParameter("dedicated_number", "Dedicated Number", required=True),
            ToolParameter("enabled", "Enable", required=True),
        ),
    ),
    EndpointDefinition(
        name="put_automations_fax_receipts_rule_id",
        title="Update a Rule",
        description="Update a fax delivery receipt automation rule.",
        method="PUT",
        path="/automations/fax/receipts/{rule_id}",
        parameters=(
            ToolParameter("rule_id", "The email receipt rule id you want to access.", required=True),
            ToolParameter("action", "Action."),
            ToolParameter("action_address", "Action Address."),
            ToolParameter("enabled", "Enabled."),
            ToolParameter("match_type", "Match Type. 0=All reports."),
            ToolParameter("rule_name", "Rule Name."),
        ),
    ),
)
