from flask import request


def original_request_path():
    """Path plus query string, exactly as the client asked for it."""
    query = request.query_string.decode("utf-8", errors="replace")
    if query:
        return f"{request.path}?{query}"
    return request.path
