from typing import Mapping


def get_endpoint(base_url: str, path: str, values: Mapping[str, str]) -> str:
    """Join the API base URL with a path template filled from `values`.

    Values are substituted verbatim; no percent-encoding is applied to path or query parts.
    """
    if not base_url:
        raise ValueError("API base URL is not configured")
    return f"{base_url.rstrip('/')}{path.format_map(values)}"
