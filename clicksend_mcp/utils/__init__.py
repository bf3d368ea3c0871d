from .get_endpoint import get_endpoint
from .response_utils import format_response_text, parse_json_object

__all__ = ["get_endpoint", "format_response_text", "parse_json_object"]
