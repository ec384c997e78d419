from collections.abc import Mapping


def request_body(request) -> Mapping:
    """Return the parsed body, or an empty mapping when it is not a JSON object."""
    data = request.data
    return data if isinstance(data, Mapping) else {}
