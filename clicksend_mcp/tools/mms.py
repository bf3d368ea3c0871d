from clicksend_mcp.core.models import EndpointDefinition

ENDPOINTS = (
    EndpointDefinition(
        name="put_mms_cancel-all",
        title="Cancel All MMS",
        description="Cancel every scheduled MMS message on the account.",
        method="PUT",
        path="/mms/cancel-all",
    ),
)
